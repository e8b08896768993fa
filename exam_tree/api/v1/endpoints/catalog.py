"""
科目目录相关路由
"""

from typing import Dict
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from exam_tree.api.deps import get_catalogs
from exam_tree.core.catalog import CatalogStore
from exam_tree.core.subjects import VALID_SUBJECTS, describe_subjects, get_subject_steps
from exam_tree.schemas import KnowledgePoints, LevelOptions, SubjectInfo
from exam_tree.services import knowledge_points_in, level_options, selection_steps

router = APIRouter(prefix="/catalog", tags=["科目目录"])


def _selected_levels(request: Request, subject: str) -> Dict[str, str]:
    """从查询参数中取出科目层级的取值，其他参数忽略"""
    steps = get_subject_steps(subject)
    return {
        step: request.query_params[step]
        for step in steps
        if request.query_params.get(step)
    }


def _check_subject(subject: str):
    if subject not in VALID_SUBJECTS:
        raise HTTPException(status_code=400, detail="无效科目")


@router.get("/subjects")
async def list_subjects():
    """获取全部科目及其知识树层级"""
    subjects = [SubjectInfo(**item).model_dump() for item in describe_subjects()]
    return JSONResponse(content=subjects)


@router.get("/{subject}/options")
async def get_level_options(
    request: Request,
    subject: str,
    step: int = Query(0, ge=0, description="步骤序号（0 为第一层级，等于层级数时为知识点）"),
    catalogs: CatalogStore = Depends(get_catalogs),
):
    """
    获取级联选择某一步的选项

    已选择的层级通过同名查询参数传入，例如 ?step=1&章=极限
    """
    _check_subject(subject)
    steps = get_subject_steps(subject)
    all_steps = selection_steps(steps)
    if step >= len(all_steps):
        raise HTTPException(status_code=400, detail=f"步骤超出范围，最大为 {len(all_steps) - 1}")

    options = level_options(catalogs.get(subject), steps, _selected_levels(request, subject), step)
    result = LevelOptions(step=step, step_name=all_steps[step], options=options)
    return JSONResponse(content=result.model_dump(by_alias=True))


@router.get("/{subject}/knowledge-points")
async def get_knowledge_points(
    request: Request,
    subject: str,
    catalogs: CatalogStore = Depends(get_catalogs),
):
    """
    按选择路径查询本节知识点

    选择路径通过同名查询参数传入，例如 ?章=极限&节=数列极限
    """
    _check_subject(subject)
    selected = _selected_levels(request, subject)
    if not selected:
        return JSONResponse(content=KnowledgePoints().model_dump(by_alias=True))
    points = knowledge_points_in(catalogs.get(subject), selected)
    result = KnowledgePoints(count=len(points), knowledge_points=points)
    return JSONResponse(content=result.model_dump(by_alias=True))
