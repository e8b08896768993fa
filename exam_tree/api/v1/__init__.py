"""
API v1 版本路由
统一导出所有 v1 版本的路由
"""

from fastapi import APIRouter

from exam_tree.api.v1.endpoints import (
    catalog,
    knowledge_tree,
    reports,
)

# 创建 API v1 路由器
# 不加版本前缀，保持与前端现有路径一致
api_router = APIRouter()

# 注册所有端点路由
api_router.include_router(catalog.router)
api_router.include_router(knowledge_tree.router)
api_router.include_router(reports.router)

__all__ = ["api_router"]
