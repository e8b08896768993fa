"""
FastAPI 应用主入口
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from exam_tree.core.config import settings, get_cors_config
from exam_tree.core.catalog import get_catalog_store
from exam_tree.api.v1 import api_router

logger = logging.getLogger(__name__)


def setup_logging():
    """配置根日志"""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_application() -> FastAPI:
    """
    创建并配置 FastAPI 应用

    Returns:
        配置好的 FastAPI 应用实例
    """
    setup_logging()

    # 创建 FastAPI 应用
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="考试知识树与掌握度统计 API",
        debug=settings.debug,
    )

    # 配置 CORS
    app.add_middleware(
        CORSMiddleware,
        **get_cors_config()
    )

    # 注册 API v1 路由
    app.include_router(api_router)

    # 根路径
    @app.get("/")
    async def root():
        """根路径"""
        return {"message": "考试知识树与掌握度统计 API"}

    # 健康检查
    @app.get("/health")
    async def health():
        """健康检查"""
        return {"status": "ok"}

    # 应用启动事件
    @app.on_event("startup")
    async def startup_event():
        """
        应用启动时加载全部科目目录
        """
        node_count = get_catalog_store().load_all()
        logger.info(f"[目录] 全部科目目录加载完成，节点总数: {node_count}")

    return app


# 创建应用实例
app = create_application()


def run():
    """命令行启动入口"""
    import uvicorn
    uvicorn.run("exam_tree.main:app", host=settings.host, port=settings.port)
