"""
School Hierarchy Dataset - 学校层级数据集
只读的内存数据集：学校 -> 年级 -> 班级 -> 装备清单
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple, Union

from app.core.errors import DatasetIntegrityError
from app.schemas.school_hierarchy import School, Grade, SchoolClass, Equipment

DEFAULT_EQUIPMENT_KEY = "default"

EquipmentKey = Tuple[str, str, str]


def equipment_key(school_id: str, grade_id: str, class_id: str) -> EquipmentKey:
    """装备清单组合键: (学校, 年级, 班级)"""
    return (school_id, grade_id, class_id)


@dataclass(frozen=True)
class SchoolDataset:
    """Immutable snapshot of the whole hierarchy."""
    schools: Tuple[School, ...]
    grades: Mapping[str, Tuple[Grade, ...]]
    classes: Mapping[Tuple[str, str], Tuple[SchoolClass, ...]]
    equipment_lists: Mapping[Union[EquipmentKey, str], Tuple[Equipment, ...]]

    def stats(self) -> Dict[str, int]:
        """获取数据集统计信息"""
        return {
            "schools_count": len(self.schools),
            "grades_count": sum(len(g) for g in self.grades.values()),
            "classes_count": sum(len(c) for c in self.classes.values()),
            "equipment_lists_count": len(self.equipment_lists),
        }


def build_dataset(
    schools: Iterable[School],
    grades: Iterable[Grade],
    classes: Iterable[SchoolClass],
    equipment_lists: Mapping[Union[EquipmentKey, str], Iterable[Equipment]],
) -> SchoolDataset:
    """
    Group flat records into the lookup indexes and check the hierarchy.

    Grades are grouped by school, classes by (school, grade); input order
    is kept within each group. Raises DatasetIntegrityError on an orphan
    record, a duplicate id within its parent, or a missing/empty default
    equipment list.
    """
    schools = tuple(schools)
    school_ids = set()
    for school in schools:
        if school.id in school_ids:
            raise DatasetIntegrityError(f"duplicate school id {school.id!r}")
        school_ids.add(school.id)

    grades_by_school: Dict[str, List[Grade]] = {}
    for grade in grades:
        if grade.school_id not in school_ids:
            raise DatasetIntegrityError(
                f"grade {grade.id!r} references unknown school {grade.school_id!r}"
            )
        siblings = grades_by_school.setdefault(grade.school_id, [])
        if any(g.id == grade.id for g in siblings):
            raise DatasetIntegrityError(
                f"duplicate grade id {grade.id!r} in school {grade.school_id!r}"
            )
        siblings.append(grade)

    classes_by_grade: Dict[Tuple[str, str], List[SchoolClass]] = {}
    for school_class in classes:
        parent = (school_class.school_id, school_class.grade_id)
        if not any(g.id == school_class.grade_id for g in grades_by_school.get(school_class.school_id, [])):
            raise DatasetIntegrityError(
                f"class {school_class.id!r} references unknown grade {parent!r}"
            )
        siblings = classes_by_grade.setdefault(parent, [])
        if any(c.id == school_class.id for c in siblings):
            raise DatasetIntegrityError(
                f"duplicate class id {school_class.id!r} in grade {parent!r}"
            )
        siblings.append(school_class)

    known_keys = {
        equipment_key(school_id, grade_id, c.id)
        for (school_id, grade_id), members in classes_by_grade.items()
        for c in members
    }
    lists: Dict[Union[EquipmentKey, str], Tuple[Equipment, ...]] = {}
    for key, items in equipment_lists.items():
        if key != DEFAULT_EQUIPMENT_KEY and key not in known_keys:
            raise DatasetIntegrityError(f"equipment list {key!r} references unknown class")
        lists[key] = tuple(items)

    if not lists.get(DEFAULT_EQUIPMENT_KEY):
        raise DatasetIntegrityError(
            f"dataset needs a non-empty {DEFAULT_EQUIPMENT_KEY!r} equipment list"
        )

    return SchoolDataset(
        schools=schools,
        grades=MappingProxyType({k: tuple(v) for k, v in grades_by_school.items()}),
        classes=MappingProxyType({k: tuple(v) for k, v in classes_by_grade.items()}),
        equipment_lists=MappingProxyType(lists),
    )


def load_mock_dataset() -> SchoolDataset:
    """从内置 Mock 数据构建数据集"""
    from app.models import mock_data

    return build_dataset(
        schools=[School(**record) for record in mock_data.MOCK_SCHOOLS],
        grades=[Grade(**record) for record in mock_data.MOCK_GRADES],
        classes=[SchoolClass(**record) for record in mock_data.MOCK_CLASSES],
        equipment_lists={
            key: [Equipment(**item) for item in items]
            for key, items in mock_data.MOCK_EQUIPMENT_LISTS.items()
        },
    )
