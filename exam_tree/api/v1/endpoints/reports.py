"""
测评报告相关路由
"""

import logging
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from exam_tree.api.deps import get_catalogs, get_current_student_id, get_database
from exam_tree.core.catalog import CatalogStore
from exam_tree.core.db import Database
from exam_tree.core.exceptions import ReportNotFoundError
from exam_tree.core.subjects import SUBJECT_NAMES, get_subject_steps, resolve_subject_key
from exam_tree.schemas import ReportCreate, ReportCreated, ReportDetail
from exam_tree.services import list_knowledge_points, resolve_report_section_key

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/student", tags=["测评报告"])


def get_student_report(db: Database, report_id: str, student_id: str) -> dict:
    """
    获取属于该学生的报告

    Raises:
        ReportNotFoundError: 报告不存在或属于其他学生
    """
    report = db.get_report(report_id)
    if report is None or report["student_id"] != student_id:
        raise ReportNotFoundError(report_id)
    return report


@router.post("/save-report")
async def save_report(
    request: ReportCreate,
    student_id: str = Depends(get_current_student_id),
    db: Database = Depends(get_database),
):
    """
    保存测评报告

    科目可以传显示名称或标识，统一以显示名称保存
    """
    subject_key = resolve_subject_key(request.subject)
    if subject_key is None:
        raise HTTPException(status_code=400, detail="无效科目")
    try:
        report_id = db.store_report(
            student_id=student_id,
            subject=SUBJECT_NAMES[subject_key],
            score=request.score,
            selected_path=request.selected_path,
            questions=request.questions,
            answers=request.answers,
        )
        return JSONResponse(content=ReportCreated(report_id=report_id).model_dump(by_alias=True))
    except Exception as e:
        logger.error(f"[报告] 保存失败 - student_id: {student_id}, 错误: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="保存失败")


@router.get("/report/{report_id}")
async def get_report(
    report_id: str,
    student_id: str = Depends(get_current_student_id),
    db: Database = Depends(get_database),
    catalogs: CatalogStore = Depends(get_catalogs),
):
    """
    获取测评报告详情，附带本节知识点数量和名称列表
    """
    try:
        report = get_student_report(db, report_id, student_id)
    except ReportNotFoundError:
        logger.warning(f"[报告] 报告不存在 - report_id: {report_id}, student_id: {student_id}")
        raise HTTPException(status_code=404, detail="报告不存在")

    try:
        subject_key = resolve_subject_key(report["subject"])
        steps = get_subject_steps(subject_key) if subject_key else None
        knowledge_points = list_knowledge_points(report["subject"], report["selected_path"], catalogs)

        detail = ReportDetail(
            id=report["id"],
            subject=report["subject"],
            score=report["score"],
            created_at=report["created_at"],
            selected_path=report["selected_path"],
            questions=report["questions"],
            answers=report["answers"],
            section_key=resolve_report_section_key(report["selected_path"], steps),
            knowledge_point_count=len(knowledge_points),
            knowledge_points=knowledge_points,
        )
        return JSONResponse(content=detail.model_dump(mode="json", by_alias=True))
    except Exception as e:
        logger.error(f"[报告] 获取报告失败 - report_id: {report_id}, 错误: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="获取报告失败")
