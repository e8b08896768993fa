"""
知识树相关路由
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from exam_tree.api.deps import get_catalogs, get_current_student_id, get_database
from exam_tree.core.catalog import CatalogStore
from exam_tree.core.db import Database
from exam_tree.core.subjects import SUBJECT_NAMES, VALID_SUBJECTS, get_subject_steps
from exam_tree.models import ExamReport, SectionStatus
from exam_tree.schemas import KnowledgeTreeResponse, SectionReportsResponse
from exam_tree.services import (
    aggregate_section_status,
    build_subject_tree,
    find_section_path,
    knowledge_points_in,
    parse_section_key,
    reports_for_section,
    tag_reports,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/student/knowledge-tree", tags=["知识树"])


def _load_reports(db: Database, student_id: str, subject: str):
    """读取学生某科目的全部报告（按创建时间倒序）"""
    return [
        ExamReport(**report)
        for report in db.get_student_reports(student_id, SUBJECT_NAMES[subject])
    ]


def _check_subject(subject: str):
    if subject not in VALID_SUBJECTS:
        raise HTTPException(status_code=400, detail="无效科目")


@router.get("/{subject}")
async def get_knowledge_tree(
    subject: str,
    student_id: str = Depends(get_current_student_id),
    db: Database = Depends(get_database),
    catalogs: CatalogStore = Depends(get_catalogs),
):
    """
    获取科目知识树及学生各节的测评状态

    Args:
        subject: 科目标识（chinese/english/math/computer）

    Returns:
        {tree, sectionStatus, reports}
    """
    _check_subject(subject)
    try:
        steps = get_subject_steps(subject)
        tree = build_subject_tree(subject, catalogs)
        reports = _load_reports(db, student_id, subject)

        response = KnowledgeTreeResponse(
            tree=tree,
            section_status=aggregate_section_status(reports, steps),
            reports=tag_reports(reports, steps),
        )
        return JSONResponse(content=response.model_dump(mode="json", by_alias=True))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[知识树] 获取知识树失败 - subject: {subject}, student_id: {student_id}, 错误: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="获取知识树失败")


@router.get("/{subject}/section-reports")
async def get_section_reports(
    subject: str,
    section_key: str = Query(..., alias="sectionKey", description="叶子节点的 sectionKey"),
    student_id: str = Depends(get_current_student_id),
    db: Database = Depends(get_database),
    catalogs: CatalogStore = Depends(get_catalogs),
):
    """
    获取某一节的知识点、掌握状态和测评报告（点击知识树叶子时使用）

    Args:
        subject: 科目标识
        section_key: 叶子节点的 sectionKey
    """
    _check_subject(subject)
    try:
        steps = get_subject_steps(subject)
        reports = _load_reports(db, student_id, subject)
        catalog = catalogs.get(subject)
        # 优先从目录找回叶子路径，目录中已不存在的叶子再按 sectionKey 拆分
        path = find_section_path(catalog, steps, section_key)
        if path is None:
            path = parse_section_key(section_key)
        status = aggregate_section_status(reports, steps).get(section_key, SectionStatus())

        response = SectionReportsResponse(
            section_key=section_key,
            path=path,
            knowledge_points=knowledge_points_in(catalog, path) if path else [],
            status=status,
            reports=reports_for_section(reports, steps, section_key),
        )
        return JSONResponse(content=response.model_dump(mode="json", by_alias=True))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[知识树] 获取节报告失败 - subject: {subject}, section_key: {section_key}, 错误: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="获取节报告失败")
