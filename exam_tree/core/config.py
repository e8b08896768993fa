"""
应用配置模块
使用 pydantic-settings 管理环境变量和配置

注意：科目、层级和及格分数是领域常量，定义在 subjects 模块中，不允许通过环境变量修改
"""

from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


# 随包发布的目录数据
DEFAULT_CATALOG_DIR = Path(__file__).resolve().parent.parent / "data"

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """应用配置类"""

    # 应用基础配置
    app_name: str = Field(default="考试知识树服务", description="应用名称")
    app_version: str = Field(default="1.0.0", description="应用版本")
    debug: bool = Field(default=False, description="调试模式")
    host: str = Field(default="127.0.0.1", description="监听地址")
    port: int = Field(default=8000, description="监听端口")

    log_level: str = Field(
        default="INFO",
        description="日志级别（DEBUG/INFO/WARNING/ERROR）"
    )

    # 目录数据配置
    catalog_dir: str = Field(
        default=str(DEFAULT_CATALOG_DIR),
        description="科目目录 JSON 文件所在目录（<subject>_exam_nodes.json）"
    )

    # 数据库配置
    database_path: str = Field(
        default="data/exam_reports.db",
        description="测评报告数据库文件路径"
    )

    # CORS 配置
    cors_allow_origins: str = Field(
        default="http://localhost:3000",
        description="允许的 CORS 源列表，多个源用逗号分隔"
    )
    cors_allow_credentials: bool = Field(
        default=True,
        description="是否允许 CORS 凭证"
    )
    cors_allow_methods: List[str] = Field(
        default=["*"],
        description="允许的 HTTP 方法列表"
    )
    cors_allow_headers: List[str] = Field(
        default=["*"],
        description="允许的 HTTP 头列表"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v):
        """校验日志级别，统一为大写"""
        level = str(v).strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"无效的日志级别: {v}")
        return level

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """解析 CORS 源配置"""
        if isinstance(v, list):
            return ",".join(v)
        return v

    def get_cors_origins_list(self) -> List[str]:
        """获取 CORS 源列表"""
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]


# 创建全局配置实例
settings = Settings()


def get_cors_config() -> dict:
    """
    获取 CORS 配置字典

    Returns:
        CORS 配置字典，可直接用于 FastAPI 的 CORSMiddleware
    """
    return {
        "allow_origins": settings.get_cors_origins_list(),
        "allow_credentials": settings.cors_allow_credentials,
        "allow_methods": settings.cors_allow_methods,
        "allow_headers": settings.cors_allow_headers,
    }
