"""
业务逻辑服务模块
统一导出所有服务，方便导入
"""

# sectionKey 推导
from exam_tree.services.section_key import (
    section_key_from_path,
    subject_section_key,
    parse_section_key,
)

# 知识树构建
from exam_tree.services.tree_service import (
    collation_key,
    build_knowledge_tree,
    build_subject_tree,
)

# 掌握状态统计
from exam_tree.services.status_service import (
    normalize_selected_path,
    resolve_report_section_key,
    aggregate_section_status,
    tag_reports,
    reports_for_section,
)

# 知识点查询
from exam_tree.services.knowledge_point_service import (
    find_catalog_node,
    find_section_path,
    knowledge_points_in,
    list_knowledge_points,
    count_knowledge_points,
)

# 级联选项
from exam_tree.services.selection_service import (
    level_options,
    selection_steps,
)

__all__ = [
    # sectionKey
    "section_key_from_path",
    "subject_section_key",
    "parse_section_key",
    # 知识树
    "collation_key",
    "build_knowledge_tree",
    "build_subject_tree",
    # 掌握状态
    "normalize_selected_path",
    "resolve_report_section_key",
    "aggregate_section_status",
    "tag_reports",
    "reports_for_section",
    # 知识点
    "find_catalog_node",
    "find_section_path",
    "knowledge_points_in",
    "list_knowledge_points",
    "count_knowledge_points",
    # 级联选项
    "level_options",
    "selection_steps",
]
