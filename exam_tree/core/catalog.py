"""
科目目录加载模块
读取各科目的扁平目录 JSON（<subject>_exam_nodes.json），进程启动时加载一次，之后只读
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from exam_tree.core.exceptions import CatalogLoadError
from exam_tree.core.subjects import SUBJECT_STEPS, VALID_SUBJECTS
from exam_tree.models.catalog import invalid_row_reason

logger = logging.getLogger(__name__)

CATALOG_FILE_SUFFIX = "_exam_nodes.json"

Catalog = Tuple[Mapping[str, Any], ...]


def _freeze(value: Any) -> Any:
    """递归转换为只读结构（dict -> MappingProxyType，list -> tuple）"""
    if isinstance(value, dict):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


def catalog_file_path(catalog_dir: Path, subject_key: str) -> Path:
    return catalog_dir / f"{subject_key}{CATALOG_FILE_SUFFIX}"


def validate_catalog(subject_key: str, rows: Catalog) -> List[str]:
    """
    检查目录数据质量，返回问题描述列表（只用于日志，不会抛出异常）

    检查内容：
    - 不能参与知识树构建的行（缺少层级或知识点不是数组）
    - 完整路径重复的行（构建知识树时只取第一行）
    """
    steps = SUBJECT_STEPS.get(subject_key)
    if steps is None:
        return []

    problems: List[str] = []
    seen_paths: Dict[Tuple[str, ...], int] = {}
    for index, row in enumerate(rows):
        reason = invalid_row_reason(row, steps)
        if reason is not None:
            problems.append(f"第 {index} 行{reason}，不参与知识树构建")
            continue
        full_path = tuple(row[step] for step in steps)
        if full_path in seen_paths:
            problems.append(
                f"第 {index} 行与第 {seen_paths[full_path]} 行路径重复（{' / '.join(full_path)}），以第一行为准"
            )
        else:
            seen_paths[full_path] = index
    return problems


def load_catalog_file(subject_key: str, file_path: Path) -> Catalog:
    """
    读取单个科目的目录文件

    Args:
        subject_key: 科目标识
        file_path: 目录文件路径

    Returns:
        只读目录行元组；文件不存在时返回空元组

    Raises:
        CatalogLoadError: 文件不是合法 JSON 或顶层不是数组
    """
    if not file_path.exists():
        logger.warning(f"[目录] 目录文件不存在 - subject: {subject_key}, path: {file_path}")
        return ()

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise CatalogLoadError(subject_key, str(file_path), str(e)) from e

    if not isinstance(data, list):
        raise CatalogLoadError(subject_key, str(file_path), "顶层不是 JSON 数组")

    rows = tuple(_freeze(row) for row in data)

    for problem in validate_catalog(subject_key, rows):
        logger.warning(f"[目录] {subject_key}: {problem}")

    logger.info(f"[目录] 加载完成 - subject: {subject_key}, 节点数: {len(rows)}")
    return rows


class CatalogStore:
    """
    科目目录存储

    每个科目的目录只加载一次，返回只读元组，可以在并发请求之间共享
    """

    def __init__(self, catalog_dir: str):
        """
        初始化目录存储

        Args:
            catalog_dir: 目录 JSON 文件所在目录
        """
        self.catalog_dir = Path(catalog_dir)
        self._catalogs: Dict[str, Catalog] = {}

    @classmethod
    def from_rows(cls, catalogs: Dict[str, List[Dict[str, Any]]]) -> "CatalogStore":
        """直接用内存数据构建目录存储（测试或嵌入式数据使用）"""
        store = cls(catalog_dir="")
        for subject_key in VALID_SUBJECTS:
            store._catalogs[subject_key] = ()
        for subject_key, rows in catalogs.items():
            store._catalogs[subject_key] = tuple(_freeze(row) for row in rows)
        return store

    def load_all(self) -> int:
        """
        加载全部科目的目录

        Returns:
            加载的节点总数
        """
        return sum(len(self.get(subject_key)) for subject_key in VALID_SUBJECTS)

    def get(self, subject_key: str) -> Catalog:
        """
        获取科目目录

        Args:
            subject_key: 科目标识

        Returns:
            目录行元组；未知科目返回空元组
        """
        if subject_key in self._catalogs:
            return self._catalogs[subject_key]
        if subject_key not in SUBJECT_STEPS:
            return ()
        rows = load_catalog_file(subject_key, catalog_file_path(self.catalog_dir, subject_key))
        self._catalogs[subject_key] = rows
        return rows


_catalog_store: Optional[CatalogStore] = None


def get_catalog_store() -> CatalogStore:
    """获取全局目录存储（按配置的目录懒加载）"""
    global _catalog_store
    if _catalog_store is None:
        from exam_tree.core.config import settings
        _catalog_store = CatalogStore(settings.catalog_dir)
    return _catalog_store
