"""
目录相关的 Pydantic 数据模型
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


class SubjectInfo(BaseModel):
    """科目信息"""
    id: str = Field(..., description="科目标识")
    name: str = Field(..., description="科目显示名称")
    steps: List[str] = Field(default_factory=list, description="知识树层级")


class LevelOptions(BaseModel):
    """级联选择某一步的选项"""

    model_config = ConfigDict(populate_by_name=True)

    step: int = Field(..., ge=0, description="步骤序号")
    step_name: str = Field(..., alias="stepName", description="步骤名称（层级名称或“知识点”）")
    options: List[str] = Field(default_factory=list, description="可选项")


class KnowledgePoints(BaseModel):
    """选择路径对应的知识点"""

    model_config = ConfigDict(populate_by_name=True)

    count: int = Field(default=0, ge=0, description="知识点数量")
    knowledge_points: List[str] = Field(default_factory=list, alias="knowledgePoints", description="知识点列表")
