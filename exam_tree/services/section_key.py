"""
sectionKey 推导

sectionKey 是知识树叶子与测评报告之间的连接键，知识树构建和状态统计必须使用同一个函数
"""

from typing import Any, Mapping, Optional, Sequence

from exam_tree.core.subjects import get_subject_steps, raw_path_key


SECTION_KEY_SEPARATOR = "|"


def section_key_from_path(selected_path: Mapping[str, Any], steps: Optional[Sequence[str]]) -> str:
    """
    根据选择路径生成稳定的 sectionKey

    按科目层级的固定顺序依次取出路径中存在（非 None）的层级，拼成 "层级:取值"，
    再用 "|" 连接。路径中不属于科目层级的键会被忽略，缺失的层级直接跳过

    Args:
        selected_path: 选择路径（层级名称 -> 取值）
        steps: 科目层级列表；为 None 表示未知科目

    Returns:
        sectionKey 字符串；未知科目时退化为路径的 JSON 序列化

    Examples:
        >>> section_key_from_path({"节": "数列极限", "章": "极限"}, ["章", "节"])
        '章:极限|节:数列极限'
    """
    if steps is None:
        return raw_path_key(dict(selected_path))
    parts = [
        f"{step}:{selected_path[step]}"
        for step in steps
        if selected_path.get(step) is not None
    ]
    return SECTION_KEY_SEPARATOR.join(parts)


def subject_section_key(selected_path: Mapping[str, Any], subject_key: str) -> str:
    """按科目标识生成 sectionKey"""
    return section_key_from_path(selected_path, get_subject_steps(subject_key))


def parse_section_key(section_key: str) -> dict:
    """
    将 sectionKey 还原为选择路径

    Args:
        section_key: 形如 "章:极限|节:数列极限" 的 sectionKey

    Returns:
        层级名称 -> 取值；无法解析的片段会被忽略
    """
    path = {}
    for part in section_key.split(SECTION_KEY_SEPARATOR):
        step, sep, value = part.partition(":")
        if sep and step:
            path[step] = value
    return path
