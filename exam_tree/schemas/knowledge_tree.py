"""
知识树相关的 Pydantic 数据模型
"""

from typing import Dict, List
from pydantic import BaseModel, ConfigDict, Field

from exam_tree.models import KnowledgeTree, SectionStatus, TaggedReport


class KnowledgeTreeResponse(BaseModel):
    """知识树查询响应：知识树 + 各节状态 + 带 sectionKey 的报告列表"""

    model_config = ConfigDict(populate_by_name=True)

    tree: KnowledgeTree = Field(..., description="知识树")
    section_status: Dict[str, SectionStatus] = Field(
        default_factory=dict,
        alias="sectionStatus",
        description="sectionKey -> 掌握状态"
    )
    reports: List[TaggedReport] = Field(default_factory=list, description="报告列表（按创建时间倒序）")


class SectionReportsResponse(BaseModel):
    """单节详情：路径、知识点、状态与该节的报告"""

    model_config = ConfigDict(populate_by_name=True)

    section_key: str = Field(..., alias="sectionKey", description="sectionKey")
    path: Dict[str, str] = Field(default_factory=dict, description="sectionKey 对应的选择路径")
    knowledge_points: List[str] = Field(default_factory=list, alias="knowledgePoints", description="本节知识点")
    status: SectionStatus = Field(default_factory=SectionStatus, description="掌握状态")
    reports: List[TaggedReport] = Field(default_factory=list, description="该节的报告（按创建时间倒序）")
