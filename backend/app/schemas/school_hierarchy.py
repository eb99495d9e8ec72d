"""
School Hierarchy Schemas - Pydantic 模型
学校 -> 年级 -> 班级 -> 装备清单
"""
from pydantic import BaseModel, Field
from typing import Optional


class School(BaseModel):
    """学校"""
    id: str
    name: str
    city: str

    class Config:
        frozen = True


class Grade(BaseModel):
    """年级"""
    id: str
    school_id: str
    name: str

    class Config:
        frozen = True


class SchoolClass(BaseModel):
    """班级"""
    id: str
    school_id: str
    grade_id: str
    name: str

    class Config:
        frozen = True


class Equipment(BaseModel):
    """装备清单条目"""
    id: str
    name: str
    quantity: int = Field(1, ge=1)
    notes: Optional[str] = None

    class Config:
        frozen = True


class HierarchyStats(BaseModel):
    """数据集统计"""
    schools_count: int
    grades_count: int
    classes_count: int
    equipment_lists_count: int
