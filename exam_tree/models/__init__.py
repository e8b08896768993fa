"""
数据模型模块
统一导出所有模型，方便导入
"""

# 目录相关模型
from exam_tree.models.catalog import (
    CurriculumNode,
    invalid_row_reason,
)

# 知识树相关模型
from exam_tree.models.knowledge_tree import (
    KnowledgeTreeNode,
    KnowledgeTree,
    SectionStatus,
)

# 报告相关模型
from exam_tree.models.report import (
    ExamReport,
    TaggedReport,
)

__all__ = [
    # 目录相关
    "CurriculumNode",
    "invalid_row_reason",
    # 知识树相关
    "KnowledgeTreeNode",
    "KnowledgeTree",
    "SectionStatus",
    # 报告相关
    "ExamReport",
    "TaggedReport",
]
