"""
Tests for the dataset builder and the lookup functions.
"""
import pytest

from app.core.errors import DatasetIntegrityError
from app.crud import school_hierarchy as crud
from app.models.school_hierarchy import build_dataset, equipment_key
from app.schemas.school_hierarchy import School, Grade, SchoolClass, Equipment
from app.services.hierarchy_service import HierarchyService


def small_dataset(**overrides):
    records = {
        "schools": [School(id="1", name="North", city="X")],
        "grades": [Grade(id="9", school_id="1", name="Grade 9")],
        "classes": [SchoolClass(id="1", school_id="1", grade_id="9", name="9A")],
        "equipment_lists": {"default": [Equipment(id="e1", name="Pencil")]},
    }
    records.update(overrides)
    return build_dataset(**records)


class TestLookups:

    def test_list_schools(self, dataset):
        schools = crud.list_schools(dataset)
        assert len(schools) > 0
        assert [s.id for s in schools] == [s.id for s in dataset.schools]

    def test_grades_valid_school(self, dataset):
        grades = crud.grades_by_school(dataset, "1")
        assert grades
        assert {g.school_id for g in grades} == {"1"}

    def test_grades_invalid_school(self, dataset):
        assert crud.grades_by_school(dataset, "999") is None

    def test_classes_valid(self, dataset):
        assert crud.classes_by_grade(dataset, "1", "9")

    def test_classes_invalid_school(self, dataset):
        assert crud.classes_by_grade(dataset, "999", "9") is None

    def test_classes_unknown_grade(self, dataset):
        assert crud.classes_by_grade(dataset, "1", "1") is None

    def test_equipment_specific_key(self, dataset):
        items = crud.equipment_list(dataset, "1", "9", "1")
        assert items == list(dataset.equipment_lists[("1", "9", "1")])

    def test_equipment_default_key(self, dataset):
        items = crud.equipment_list(dataset, "123", "456", "789")
        assert items
        assert items == list(dataset.equipment_lists["default"])

    def test_returned_lists_are_copies(self, dataset):
        grades = crud.grades_by_school(dataset, "1")
        grades.clear()
        assert crud.grades_by_school(dataset, "1")

        items = crud.equipment_list(dataset, "9", "9", "9")
        items.append(Equipment(id="x", name="Extra"))
        assert len(crud.equipment_list(dataset, "9", "9", "9")) == len(dataset.equipment_lists["default"])

    def test_equipment_key(self):
        assert equipment_key("1", "9", "1") == ("1", "9", "1")

    def test_dashed_ids_do_not_collide(self):
        dataset = small_dataset(
            grades=[
                Grade(id="9", school_id="1", name="Grade 9"),
                Grade(id="9-1", school_id="1", name="Grade 9 extension"),
            ],
            classes=[
                SchoolClass(id="1-1", school_id="1", grade_id="9", name="9 lab"),
                SchoolClass(id="1", school_id="1", grade_id="9-1", name="9-1 main"),
            ],
            equipment_lists={
                "default": [Equipment(id="e1", name="Pencil")],
                ("1", "9", "1-1"): [Equipment(id="e2", name="Lab goggles")],
            },
        )
        assert [e.id for e in crud.equipment_list(dataset, "1", "9", "1-1")] == ["e2"]
        assert [e.id for e in crud.equipment_list(dataset, "1", "9-1", "1")] == ["e1"]


class TestBuildDataset:

    def test_keeps_order_within_parent(self):
        dataset = small_dataset(
            grades=[
                Grade(id="10", school_id="1", name="Grade 10"),
                Grade(id="9", school_id="1", name="Grade 9"),
            ]
        )
        assert [g.id for g in dataset.grades["1"]] == ["10", "9"]

    def test_grade_ids_scoped_to_school(self):
        dataset = small_dataset(
            schools=[School(id="1", name="A", city="X"), School(id="2", name="B", city="Y")],
            grades=[
                Grade(id="9", school_id="1", name="Grade 9"),
                Grade(id="9", school_id="2", name="Grade 9"),
            ],
        )
        assert dataset.stats()["grades_count"] == 2

    def test_orphan_grade(self):
        with pytest.raises(DatasetIntegrityError):
            small_dataset(grades=[Grade(id="9", school_id="404", name="Grade 9")])

    def test_orphan_class(self):
        with pytest.raises(DatasetIntegrityError):
            small_dataset(classes=[SchoolClass(id="1", school_id="1", grade_id="404", name="?")])

    def test_duplicate_class_in_grade(self):
        with pytest.raises(DatasetIntegrityError):
            small_dataset(classes=[
                SchoolClass(id="1", school_id="1", grade_id="9", name="9A"),
                SchoolClass(id="1", school_id="1", grade_id="9", name="9A again"),
            ])

    def test_orphan_equipment_key(self):
        with pytest.raises(DatasetIntegrityError):
            small_dataset(equipment_lists={
                "default": [Equipment(id="e1", name="Pencil")],
                ("1", "9", "404"): [Equipment(id="e2", name="Pen")],
            })

    def test_missing_default_list(self):
        with pytest.raises(DatasetIntegrityError):
            small_dataset(equipment_lists={("1", "9", "1"): [Equipment(id="e1", name="Pencil")]})

    def test_empty_default_list(self):
        with pytest.raises(DatasetIntegrityError):
            small_dataset(equipment_lists={"default": []})

    def test_dataset_is_read_only(self):
        dataset = small_dataset()
        with pytest.raises(TypeError):
            dataset.grades["2"] = ()
        with pytest.raises(Exception):
            dataset.schools[0].name = "renamed"

    def test_stats(self, dataset):
        stats = dataset.stats()
        assert stats["schools_count"] == len(dataset.schools)
        assert stats["equipment_lists_count"] == len(dataset.equipment_lists)


class TestHierarchyService:

    def test_singleton_initialises_once(self):
        first = HierarchyService().initialize()
        second = HierarchyService().initialize()
        assert first is second
        assert HierarchyService() is HierarchyService()
