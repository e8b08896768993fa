"""
知识树构建服务
把科目的扁平目录按层级逐级分组，生成带 sectionKey 的知识树
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

from pypinyin import Style, lazy_pinyin

from exam_tree.core.catalog import CatalogStore
from exam_tree.core.subjects import SUBJECT_NAMES, get_subject_steps
from exam_tree.models import CurriculumNode, KnowledgeTree, KnowledgeTreeNode
from exam_tree.services.section_key import section_key_from_path

logger = logging.getLogger(__name__)

# CJK 统一表意文字基本区、扩展 A 区和兼容区
HAN_RANGES = ((0x4E00, 0x9FFF), (0x3400, 0x4DBF), (0xF900, 0xFAFF))


def _script_rank(label: str) -> int:
    """
    按首字符的书写系统分档：数字和符号在前，其次是汉字，最后是拉丁等其他文字

    与 zh-CN 区域排序一致，汉字整体排在字母之前
    """
    if not label:
        return 0
    first = label[0]
    if _is_han(first):
        return 1
    if first.isalpha():
        return 2
    return 0


def _is_han(char: str) -> bool:
    return any(start <= ord(char) <= end for start, end in HAN_RANGES)


def collation_key(label: str) -> Tuple[int, List[str], List[str], str]:
    """
    中文排序键（按拼音排序，近似 zh-CN 区域排序）

    先按首字符的书写系统分档，再比较不带声调的拼音、带声调的拼音，最后比较原字符串；
    非汉字部分原样保留，因此数字排在字母之前
    """
    plain = [syllable.lower() for syllable in lazy_pinyin(label)]
    toned = lazy_pinyin(label, style=Style.TONE3, neutral_tone_with_five=True)
    return _script_rank(label), plain, toned, label


def sort_by_label(nodes: List[KnowledgeTreeNode]) -> List[KnowledgeTreeNode]:
    return sorted(nodes, key=lambda node: collation_key(node.label))


def _group_by_step(nodes: Iterable[CurriculumNode], step: str) -> Dict[str, List[CurriculumNode]]:
    """按某一层级的取值分组（精确匹配，保持首次出现顺序）"""
    groups: Dict[str, List[CurriculumNode]] = {}
    for node in nodes:
        groups.setdefault(node.levels[step], []).append(node)
    return groups


def _build_level(nodes: List[CurriculumNode], steps: Sequence[str], level: int) -> List[KnowledgeTreeNode]:
    if level >= len(steps):
        return []

    is_leaf = level == len(steps) - 1
    result: List[KnowledgeTreeNode] = []
    for label, group in _group_by_step(nodes, steps[level]).items():
        if is_leaf:
            # 同一路径的多行只取第一行推导 sectionKey，重复行在目录加载时已告警
            result.append(KnowledgeTreeNode(
                label=label,
                section_key=section_key_from_path(group[0].path(), steps),
            ))
        else:
            result.append(KnowledgeTreeNode(
                label=label,
                children=_build_level(group, steps, level + 1),
            ))
    return sort_by_label(result)


def build_knowledge_tree(catalog: Iterable[Mapping[str, Any]], steps: Sequence[str],
                         root_label: str = "") -> KnowledgeTree:
    """
    从扁平目录构建知识树

    Args:
        catalog: 目录行列表
        steps: 科目层级列表（分组顺序）
        root_label: 根节点名称

    Returns:
        知识树；缺少层级或知识点不是数组的行不会出现在叶子中
    """
    steps = list(steps)
    nodes = [
        node for node in (CurriculumNode.from_row(row, steps) for row in catalog)
        if node is not None
    ]
    tree = KnowledgeTree(root_label=root_label, steps=steps, nodes=_build_level(nodes, steps, 0))
    logger.debug(f"[知识树] 构建完成 - 根: {root_label}, 叶子数: {sum(1 for _ in tree.iter_leaves())}")
    return tree


def build_subject_tree(subject_key: str, catalog_store: CatalogStore) -> KnowledgeTree:
    """
    构建科目知识树（根为科目名称，叶为节）

    Args:
        subject_key: 科目标识
        catalog_store: 目录存储

    Returns:
        知识树；未知科目返回空树（rootLabel 为空字符串）
    """
    steps = get_subject_steps(subject_key)
    name = SUBJECT_NAMES.get(subject_key)
    if not steps or not name:
        return KnowledgeTree()
    return build_knowledge_tree(catalog_store.get(subject_key), steps, root_label=name)
