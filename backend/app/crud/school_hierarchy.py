"""
School Hierarchy Lookups

Pure read functions over a SchoolDataset. Unknown keys give None, never
an error; only the equipment lookup falls back to the default list.
"""
import logging
from typing import List, Optional

from app.models.school_hierarchy import SchoolDataset, DEFAULT_EQUIPMENT_KEY, equipment_key
from app.schemas.school_hierarchy import School, Grade, SchoolClass, Equipment

logger = logging.getLogger(__name__)


def list_schools(dataset: SchoolDataset) -> List[School]:
    """获取所有学校列表"""
    return list(dataset.schools)


def grades_by_school(dataset: SchoolDataset, school_id: str) -> Optional[List[Grade]]:
    """获取指定学校的所有年级"""
    grades = dataset.grades.get(school_id)
    if grades is None:
        return None
    return list(grades)


def classes_by_grade(dataset: SchoolDataset, school_id: str, grade_id: str) -> Optional[List[SchoolClass]]:
    """获取指定学校-年级的所有班级"""
    classes = dataset.classes.get((school_id, grade_id))
    if classes is None:
        return None
    return list(classes)


def equipment_list(dataset: SchoolDataset, school_id: str, grade_id: str, class_id: str) -> List[Equipment]:
    """获取指定学校-年级-班级的装备清单，未命中时返回默认清单"""
    key = equipment_key(school_id, grade_id, class_id)
    items = dataset.equipment_lists.get(key)
    if items is None:
        logger.debug("No equipment list for %s, using %r", key, DEFAULT_EQUIPMENT_KEY)
        items = dataset.equipment_lists[DEFAULT_EQUIPMENT_KEY]
    return list(items)
