"""
Hierarchy Service - 学校层级数据服务
持有进程内唯一的只读数据集
"""
import logging
from typing import Dict, List, Optional

from app.crud import school_hierarchy as crud
from app.models.school_hierarchy import SchoolDataset, load_mock_dataset
from app.schemas.school_hierarchy import School, Grade, SchoolClass, Equipment

logger = logging.getLogger(__name__)


class HierarchyService:
    """学校层级数据服务"""

    _instance = None
    _dataset: Optional[SchoolDataset] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def initialize(self) -> SchoolDataset:
        """构建数据集（只执行一次，之后返回同一实例）"""
        if self._dataset is None:
            self._dataset = load_mock_dataset()
            stats = self._dataset.stats()
            logger.info(
                "[Dataset] loaded: %d schools, %d grades, %d classes, %d equipment lists",
                stats["schools_count"],
                stats["grades_count"],
                stats["classes_count"],
                stats["equipment_lists_count"],
            )
        return self._dataset

    @property
    def dataset(self) -> SchoolDataset:
        return self.initialize()

    def get_schools(self) -> List[School]:
        return crud.list_schools(self.dataset)

    def get_grades(self, school_id: str) -> Optional[List[Grade]]:
        return crud.grades_by_school(self.dataset, school_id)

    def get_classes(self, school_id: str, grade_id: str) -> Optional[List[SchoolClass]]:
        return crud.classes_by_grade(self.dataset, school_id, grade_id)

    def get_equipment(self, school_id: str, grade_id: str, class_id: str) -> List[Equipment]:
        return crud.equipment_list(self.dataset, school_id, grade_id, class_id)

    def get_stats(self) -> Dict[str, int]:
        return self.dataset.stats()


# 全局单例
hierarchy_service = HierarchyService()
