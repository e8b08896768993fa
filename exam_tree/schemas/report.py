"""
测评报告相关的 Pydantic 数据模型
"""

from typing import Any, Dict, List, Optional, Union
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class ReportCreate(BaseModel):
    """保存测评报告请求模型"""

    model_config = ConfigDict(populate_by_name=True)

    subject: str = Field(..., description="科目显示名称或标识")
    selected_path: Optional[Dict[str, Any]] = Field(
        default=None,
        alias="selectedPath",
        description="生成测评时选择的路径"
    )
    questions: List[Any] = Field(default_factory=list, description="题目列表")
    answers: Any = Field(default=None, description="学生作答")
    score: int = Field(..., ge=0, le=100, description="测评得分（0-100）")


class ReportCreated(BaseModel):
    """保存测评报告响应模型"""

    model_config = ConfigDict(populate_by_name=True)

    report_id: str = Field(..., alias="reportId", description="报告 ID")


class ReportDetail(BaseModel):
    """测评报告详情（附带本节知识点）"""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="报告 ID")
    subject: str = Field(..., description="科目显示名称")
    score: int = Field(..., description="测评得分")
    created_at: Union[datetime, str] = Field(..., alias="createdAt", description="创建时间")
    selected_path: Any = Field(default=None, alias="selectedPath", description="选择路径")
    questions: List[Any] = Field(default_factory=list, description="题目列表")
    answers: Any = Field(default=None, description="学生作答")
    section_key: Optional[str] = Field(default=None, alias="sectionKey", description="对应的 sectionKey")
    knowledge_point_count: int = Field(default=0, alias="knowledgePointCount", description="本节知识点数量")
    knowledge_points: List[str] = Field(default_factory=list, alias="knowledgePoints", description="本节知识点列表")
