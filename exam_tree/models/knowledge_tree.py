"""
知识树相关的数据模型
知识树与掌握状态都是按请求实时计算的，不做持久化
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_serializer


class KnowledgeTreeNode(BaseModel):
    """
    知识树节点

    叶子节点（科目最后一个层级）只有 sectionKey，非叶子节点只有 children
    """

    model_config = ConfigDict(populate_by_name=True)

    label: str = Field(
        ...,
        description="节点名称（该层级的取值）"
    )

    section_key: Optional[str] = Field(
        default=None,
        alias="sectionKey",
        description="叶子节点的 sectionKey，用于与测评报告匹配"
    )

    children: Optional[List["KnowledgeTreeNode"]] = Field(
        default=None,
        description="子节点列表（按中文排序）"
    )

    @property
    def is_leaf(self) -> bool:
        return self.section_key is not None

    @model_serializer(mode="wrap")
    def drop_absent_fields(self, handler):
        # 叶子不输出 children，非叶子不输出 sectionKey
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None}


class KnowledgeTree(BaseModel):
    """
    知识树
    根为科目名称，叶为节
    """

    model_config = ConfigDict(populate_by_name=True)

    root_label: str = Field(
        default="",
        alias="rootLabel",
        description="根节点名称（科目显示名称），未知科目为空字符串"
    )

    steps: List[str] = Field(
        default_factory=list,
        description="科目层级列表"
    )

    nodes: List[KnowledgeTreeNode] = Field(
        default_factory=list,
        description="第一层节点列表"
    )

    def is_empty(self) -> bool:
        return not self.nodes

    def iter_leaves(self):
        """按树中顺序遍历所有叶子节点"""
        stack = list(reversed(self.nodes))
        while stack:
            node = stack.pop()
            if node.is_leaf:
                yield node
            elif node.children:
                stack.extend(reversed(node.children))


class SectionStatus(BaseModel):
    """
    某一节的掌握状态
    """

    model_config = ConfigDict(populate_by_name=True)

    report_count: int = Field(
        default=0,
        ge=0,
        alias="reportCount",
        description="匹配到该节的测评报告数量"
    )

    passed: bool = Field(
        default=False,
        description="是否有任一报告达到及格线"
    )
