import pytest
from fastapi.testclient import TestClient

from exam_tree.api.deps import get_catalogs, get_database
from exam_tree.core.catalog import CatalogStore
from exam_tree.core.db import Database
from exam_tree.main import app


MATH_STEPS = ["章", "节"]
ENGLISH_STEPS = ["板块", "部分", "章", "节"]


@pytest.fixture
def math_catalog():
    return [
        {"章": "极限", "节": "数列极限", "知识点": ["定义", "性质"]},
        {"章": "极限", "节": "函数极限", "知识点": ["左右极限"]},
    ]


@pytest.fixture
def english_catalog():
    return [
        {"板块": "语言知识", "部分": "语法", "章": "从句", "节": "定语从句", "知识点": ["关系代词"]},
        {"板块": "语言知识", "部分": "语法", "章": "从句", "节": "名词性从句", "知识点": ["主语从句", "宾语从句"]},
        {"板块": "语言知识", "部分": "词汇", "章": "构词法", "节": "派生词", "知识点": ["前缀", "后缀"]},
        {"板块": "语言技能", "部分": "阅读", "章": "阅读策略", "节": "主旨大意", "知识点": ["主题句"]},
    ]


@pytest.fixture
def catalog_store(math_catalog, english_catalog):
    return CatalogStore.from_rows({"math": math_catalog, "english": english_catalog})


@pytest.fixture
def db(tmp_path):
    return Database(str(tmp_path / "reports.db"))


@pytest.fixture
def client(db, catalog_store):
    app.dependency_overrides[get_database] = lambda: db
    app.dependency_overrides[get_catalogs] = lambda: catalog_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def student_headers():
    return {"X-Student-Id": "student-1"}
