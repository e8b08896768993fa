"""
Pydantic 模式定义模块
统一导出所有 schemas，方便导入
"""

# 报告相关 schemas
from exam_tree.schemas.report import (
    ReportCreate,
    ReportCreated,
    ReportDetail,
)

# 知识树相关 schemas
from exam_tree.schemas.knowledge_tree import (
    KnowledgeTreeResponse,
    SectionReportsResponse,
)

# 目录相关 schemas
from exam_tree.schemas.catalog import (
    SubjectInfo,
    LevelOptions,
    KnowledgePoints,
)

__all__ = [
    # 报告相关
    "ReportCreate",
    "ReportCreated",
    "ReportDetail",
    # 知识树相关
    "KnowledgeTreeResponse",
    "SectionReportsResponse",
    # 目录相关
    "SubjectInfo",
    "LevelOptions",
    "KnowledgePoints",
]
