"""
目录节点相关的数据模型
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence
from pydantic import BaseModel, ConfigDict, Field

from exam_tree.core.subjects import KNOWLEDGE_POINT_FIELD


class CurriculumNode(BaseModel):
    """
    目录节点模型
    一行扁平目录数据：科目各层级的取值 + 本节知识点列表

    各科目层级不同，因此层级取值用映射保存，而不是固定字段
    """

    model_config = ConfigDict(frozen=True)

    levels: Dict[str, str] = Field(
        ...,
        description="层级名称 -> 取值（只包含科目配置的层级）"
    )

    knowledge_points: List[str] = Field(
        default_factory=list,
        description="本节知识点名称列表（有序）"
    )

    def path(self) -> Dict[str, str]:
        """返回该节点对应的选择路径"""
        return dict(self.levels)

    @classmethod
    def from_row(cls, row: Any, steps: Sequence[str]) -> Optional["CurriculumNode"]:
        """
        从原始目录行构建节点

        Args:
            row: 原始目录行（JSON 对象）
            steps: 科目层级列表

        Returns:
            节点；不满足目录约束的行返回 None
        """
        if invalid_row_reason(row, steps) is not None:
            return None
        return cls(
            levels={step: row[step] for step in steps},
            knowledge_points=list(row[KNOWLEDGE_POINT_FIELD]),
        )


def invalid_row_reason(row: Any, steps: Sequence[str]) -> Optional[str]:
    """
    检查目录行是否可以参与知识树构建

    Returns:
        不合法的原因；合法时返回 None
    """
    if not isinstance(row, Mapping):
        return "不是 JSON 对象"
    for step in steps:
        value = row.get(step)
        if not isinstance(value, str) or not value:
            return f"缺少层级“{step}”"
    if not isinstance(row.get(KNOWLEDGE_POINT_FIELD), (list, tuple)):
        return f"“{KNOWLEDGE_POINT_FIELD}”不是数组"
    return None
