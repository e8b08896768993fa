"""
测评报告相关的数据模型
"""

from datetime import datetime
from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class ExamReport(BaseModel):
    """
    测评报告
    由存储层持久化，知识树只读取其中的分数和选择路径

    selected_path 来自历史数据，可能缺失或格式不正确，使用前需要校验
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(
        ...,
        description="报告 ID"
    )

    student_id: str = Field(
        ...,
        alias="studentId",
        description="学生 ID"
    )

    subject: str = Field(
        ...,
        description="科目显示名称（如“高等数学”）"
    )

    score: int = Field(
        ...,
        description="测评得分"
    )

    created_at: Union[datetime, str] = Field(
        ...,
        alias="createdAt",
        description="创建时间"
    )

    selected_path: Any = Field(
        default=None,
        alias="selectedPath",
        description="生成测评时选择的路径（层级名称 -> 取值）"
    )


class TaggedReport(BaseModel):
    """
    带 sectionKey 的报告摘要
    sectionKey 为实时推导值，无法推导时为 None
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="报告 ID")

    score: int = Field(..., description="测评得分")

    created_at: Union[datetime, str] = Field(
        ...,
        alias="createdAt",
        description="创建时间"
    )

    selected_path: Any = Field(
        default=None,
        alias="selectedPath",
        description="原始选择路径"
    )

    section_key: Optional[str] = Field(
        default=None,
        alias="sectionKey",
        description="报告对应的 sectionKey"
    )
