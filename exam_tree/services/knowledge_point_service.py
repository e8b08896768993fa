"""
知识点查询服务
直接在扁平目录上按选择路径查找本节知识点，不依赖知识树
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from exam_tree.core.catalog import CatalogStore
from exam_tree.core.subjects import KNOWLEDGE_POINT_FIELD, resolve_subject_key
from exam_tree.models import CurriculumNode
from exam_tree.services.section_key import section_key_from_path
from exam_tree.services.status_service import normalize_selected_path


def find_catalog_node(catalog: Iterable[Mapping[str, Any]],
                      selected_path: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    """
    查找第一个与选择路径中每个键都完全相等的目录行

    目录行中不在选择路径里的字段不参与比较
    """
    for row in catalog:
        if not isinstance(row, Mapping):
            continue
        if all(key in row and row[key] == value for key, value in selected_path.items()):
            return row
    return None


def find_section_path(catalog: Iterable[Mapping[str, Any]], steps: Sequence[str],
                      section_key: str) -> Optional[Dict[str, str]]:
    """
    按 sectionKey 在目录中找回叶子的完整路径

    直接比较目录行推导出的 sectionKey，层级取值中含有 "|" 或 ":" 时也能正确匹配

    Returns:
        层级名称 -> 取值；目录中没有该叶子时返回 None
    """
    for row in catalog:
        node = CurriculumNode.from_row(row, steps)
        if node is not None and section_key_from_path(node.path(), steps) == section_key:
            return node.path()
    return None


def knowledge_points_in(catalog: Iterable[Mapping[str, Any]], selected_path: Any) -> List[str]:
    """
    在目录中查找选择路径对应的知识点列表

    Returns:
        知识点列表（副本）；路径无效、找不到或知识点不是数组时返回空列表
    """
    path = normalize_selected_path(selected_path)
    if path is None:
        return []
    row = find_catalog_node(catalog, path)
    if row is None:
        return []
    points = row.get(KNOWLEDGE_POINT_FIELD)
    if not isinstance(points, (list, tuple)):
        return []
    return list(points)


def list_knowledge_points(subject: str, selected_path: Any, catalog_store: CatalogStore) -> List[str]:
    """
    根据科目与选择路径返回本节知识点名称列表，供测评报告展示

    Args:
        subject: 科目显示名称或标识
        selected_path: 选择路径
        catalog_store: 目录存储

    Returns:
        知识点名称列表；未知科目或找不到时返回空列表
    """
    subject_key = resolve_subject_key(subject)
    if subject_key is None:
        return []
    return knowledge_points_in(catalog_store.get(subject_key), selected_path)


def count_knowledge_points(subject: str, selected_path: Any, catalog_store: CatalogStore) -> int:
    """根据科目与选择路径返回本节知识点数量，找不到时为 0"""
    return len(list_knowledge_points(subject, selected_path, catalog_store))
