from fastapi import APIRouter, Request
from typing import List, Optional

from app.core.errors import MissingParameterError
from app.schemas.school_hierarchy import School, Grade, SchoolClass, Equipment, HierarchyStats
from app.services.hierarchy_service import hierarchy_service

router = APIRouter(tags=["school-hierarchy"])


def query_param(request: Request, name: str) -> str:
    """重复出现的参数取第一个值，缺失时返回空串"""
    values = request.query_params.getlist(name)
    return values[0] if values else ""


def require_params(request: Request, *names: str) -> List[str]:
    """
    Return the values of the named query parameters in order.
    Raises MissingParameterError naming every absent or empty one.
    """
    values = [query_param(request, name) for name in names]
    missing = [name for name, value in zip(names, values) if not value]
    if missing:
        raise MissingParameterError(missing)
    return values


@router.get("/schools", response_model=List[School])
async def get_schools():
    """
    Get list of all schools.
    """
    return hierarchy_service.get_schools()


@router.get("/grades", response_model=Optional[List[Grade]])
async def get_grades(request: Request):
    """
    Get grades of a school (`school_id`). Unknown school gives `null`, not an error.
    """
    school_id, = require_params(request, "school_id")
    return hierarchy_service.get_grades(school_id)


@router.get("/classes", response_model=Optional[List[SchoolClass]])
async def get_classes(request: Request):
    """
    Get classes of a grade in a school (`school_id`, `grade_id`). Unknown pair gives `null`.
    """
    school_id, grade_id = require_params(request, "school_id", "grade_id")
    return hierarchy_service.get_classes(school_id, grade_id)


@router.get("/equipment", response_model=List[Equipment])
async def get_equipment(request: Request):
    """
    Get the equipment list of a class (`school_id`, `grade_id`, `class_id`).
    Falls back to the default list when the class has no list of its own.
    """
    school_id, grade_id, class_id = require_params(request, "school_id", "grade_id", "class_id")
    return hierarchy_service.get_equipment(school_id, grade_id, class_id)


@router.get("/stats", response_model=HierarchyStats)
async def get_stats():
    """
    获取数据集统计信息
    """
    return hierarchy_service.get_stats()
