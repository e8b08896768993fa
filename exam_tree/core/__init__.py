"""
核心配置和基础功能模块
统一导出科目配置与异常
"""

# 科目配置
from exam_tree.core.subjects import (
    SUBJECT_NAMES,
    SUBJECT_KEY_MAP,
    SUBJECT_STEPS,
    VALID_SUBJECTS,
    KNOWLEDGE_POINT_FIELD,
    PASS_SCORE,
    get_subject_steps,
    resolve_subject_key,
)

# 异常
from exam_tree.core.exceptions import (
    ExamTreeError,
    CatalogLoadError,
    ReportNotFoundError,
)

__all__ = [
    # 科目配置
    "SUBJECT_NAMES",
    "SUBJECT_KEY_MAP",
    "SUBJECT_STEPS",
    "VALID_SUBJECTS",
    "KNOWLEDGE_POINT_FIELD",
    "PASS_SCORE",
    "get_subject_steps",
    "resolve_subject_key",
    # 异常
    "ExamTreeError",
    "CatalogLoadError",
    "ReportNotFoundError",
]
