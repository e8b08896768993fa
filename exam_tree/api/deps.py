"""
路由依赖
数据库、目录存储和当前学生身份通过依赖注入，测试时可以用 dependency_overrides 替换
"""

from typing import Optional
from fastapi import Header, HTTPException

from exam_tree.core.catalog import CatalogStore, get_catalog_store
from exam_tree.core.db import Database, get_db


def get_database() -> Database:
    return get_db()


def get_catalogs() -> CatalogStore:
    return get_catalog_store()


async def get_current_student_id(
    x_student_id: Optional[str] = Header(default=None, description="学生 ID（由认证层注入）")
) -> str:
    """
    获取当前学生 ID

    认证由外部认证层完成，这里只读取其注入的请求头
    """
    if not x_student_id or not x_student_id.strip():
        raise HTTPException(status_code=401, detail="未授权")
    return x_student_id.strip()
