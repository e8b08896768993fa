"""
节掌握状态统计服务
把学生的历史测评报告按 sectionKey 归并到知识树的叶子上
"""

import json
import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from exam_tree.core.subjects import PASS_SCORE
from exam_tree.models import ExamReport, SectionStatus, TaggedReport
from exam_tree.services.section_key import section_key_from_path

logger = logging.getLogger(__name__)


def normalize_selected_path(selected_path: Any) -> Optional[Dict[str, Any]]:
    """
    校验并规范化报告中的选择路径

    历史数据中选择路径可能以 JSON 字符串保存，也可能缺失或是其他类型

    Returns:
        路径字典；不是 JSON 对象时返回 None
    """
    if isinstance(selected_path, (str, bytes)):
        try:
            selected_path = json.loads(selected_path)
        except ValueError:
            return None
    if not isinstance(selected_path, Mapping):
        return None
    return dict(selected_path)


def resolve_report_section_key(selected_path: Any, steps: Optional[Sequence[str]]) -> Optional[str]:
    """
    推导单个报告对应的 sectionKey

    Args:
        selected_path: 报告中的原始选择路径
        steps: 科目层级列表；为 None 表示未知科目

    Returns:
        sectionKey；路径缺失、格式错误或缺少任一层级时返回 None
    """
    path = normalize_selected_path(selected_path)
    if path is None:
        return None
    if steps is not None:
        for step in steps:
            value = path.get(step)
            if not isinstance(value, str) or not value:
                return None
    return section_key_from_path(path, steps)


def is_passing_score(score: int) -> bool:
    return score >= PASS_SCORE


def aggregate_section_status(reports: Iterable[ExamReport],
                             steps: Optional[Sequence[str]]) -> Dict[str, SectionStatus]:
    """
    按 sectionKey 统计每一节的测评次数和是否及格

    统计与报告顺序无关：次数累加，及格取“或”

    Args:
        reports: 测评报告列表
        steps: 科目层级列表

    Returns:
        sectionKey -> SectionStatus，没有报告的节不会出现在结果中
    """
    section_status: Dict[str, SectionStatus] = {}
    for report in reports:
        key = resolve_report_section_key(report.selected_path, steps)
        if key is None:
            logger.debug(f"[知识树] 报告缺少有效的选择路径，跳过 - report_id: {report.id}")
            continue
        status = section_status.setdefault(key, SectionStatus())
        status.report_count += 1
        if is_passing_score(report.score):
            status.passed = True
    return section_status


def tag_reports(reports: Iterable[ExamReport], steps: Optional[Sequence[str]]) -> List[TaggedReport]:
    """
    为每个报告附上实时推导的 sectionKey（无法推导时为 None），保持输入顺序
    """
    return [
        TaggedReport(
            id=report.id,
            score=report.score,
            created_at=report.created_at,
            selected_path=report.selected_path,
            section_key=resolve_report_section_key(report.selected_path, steps),
        )
        for report in reports
    ]


def _created_at_sort_key(report: TaggedReport) -> str:
    created_at = report.created_at
    if isinstance(created_at, datetime):
        return created_at.isoformat()
    return str(created_at)


def reports_for_section(reports: Iterable[ExamReport], steps: Optional[Sequence[str]],
                        section_key: str) -> List[TaggedReport]:
    """
    筛选属于某一节的报告，按创建时间倒序

    Args:
        reports: 测评报告列表
        steps: 科目层级列表
        section_key: 要查看的节

    Returns:
        该节的报告列表
    """
    matched = [report for report in tag_reports(reports, steps) if report.section_key == section_key]
    return sorted(matched, key=_created_at_sort_key, reverse=True)
