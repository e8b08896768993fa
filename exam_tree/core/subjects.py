"""
科目配置
四个固定科目的标识、显示名称与知识树层级（从主干到节）
"""

import json
from typing import Dict, List, Optional, Tuple


# 科目标识 -> 显示名称
SUBJECT_NAMES: Dict[str, str] = {
    "chinese": "大学语文",
    "english": "大学英语",
    "math": "高等数学",
    "computer": "计算机基础",
}

# 显示名称 -> 科目标识
SUBJECT_KEY_MAP: Dict[str, str] = {name: key for key, name in SUBJECT_NAMES.items()}

# 各科目知识树层级，分组和 sectionKey 都严格按此顺序
SUBJECT_STEPS: Dict[str, Tuple[str, ...]] = {
    "chinese": ("板块", "章", "节"),
    "english": ("板块", "部分", "章", "节"),
    "math": ("章", "节"),
    "computer": ("章", "节"),
}

VALID_SUBJECTS: Tuple[str, ...] = tuple(SUBJECT_NAMES)

# 目录节点中存放知识点列表的字段
KNOWLEDGE_POINT_FIELD = "知识点"

# 测评及格线（领域常量，不区分科目）
PASS_SCORE = 80


def get_subject_steps(subject_key: str) -> Optional[List[str]]:
    """
    获取科目层级列表

    Args:
        subject_key: 科目标识（chinese/english/math/computer）

    Returns:
        层级名称列表，未知科目返回 None
    """
    steps = SUBJECT_STEPS.get(subject_key)
    return list(steps) if steps is not None else None


def resolve_subject_key(subject: str) -> Optional[str]:
    """
    将科目显示名称或标识统一解析为科目标识

    测评报告中保存的是显示名称（如“高等数学”），接口路径中使用的是标识（如 math）

    Args:
        subject: 科目显示名称或标识

    Returns:
        科目标识，无法识别时返回 None
    """
    if subject in SUBJECT_NAMES:
        return subject
    return SUBJECT_KEY_MAP.get(subject)


def describe_subjects() -> List[Dict[str, object]]:
    """返回全部科目的 {id, name, steps} 描述，供前端选择科目"""
    return [
        {"id": key, "name": SUBJECT_NAMES[key], "steps": list(SUBJECT_STEPS[key])}
        for key in VALID_SUBJECTS
    ]


def raw_path_key(path: Dict[str, object]) -> str:
    """未知科目时的退化 key：直接序列化选择路径"""
    return json.dumps(path, ensure_ascii=False)
