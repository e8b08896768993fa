"""
数据库模块
使用 SQLite 持久化存储学生测评报告
"""

import json
import logging
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


def _decode_json(value: Optional[str]) -> Any:
    """解析 JSON 字段，空值或格式错误返回 None"""
    if value is None:
        return None
    try:
        return json.loads(value)
    except ValueError:
        return None


class Database:
    """数据库管理器"""

    def __init__(self, db_path: str = "data/exam_reports.db"):
        """
        初始化数据库

        Args:
            db_path: 数据库文件路径（相对于工作目录）
        """
        self.db_path = Path(db_path)
        # 确保数据库目录存在
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_database()

    def _init_database(self):
        """初始化数据库表结构"""
        with self._get_connection() as conn:
            cursor = conn.cursor()

            # 测评报告表
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS exam_reports (
                    report_id TEXT PRIMARY KEY,
                    student_id TEXT NOT NULL,
                    subject TEXT NOT NULL,
                    score INTEGER NOT NULL,
                    selected_path_json TEXT,
                    questions_json TEXT NOT NULL DEFAULT '[]',
                    answers_json TEXT NOT NULL DEFAULT '{}',
                    created_at TEXT NOT NULL
                )
            """)

            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_exam_reports_student_subject
                ON exam_reports (student_id, subject)
            """)

            conn.commit()

    @contextmanager
    def _get_connection(self):
        """获取数据库连接（上下文管理器）"""
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row  # 使用 Row 工厂，可以通过列名访问
        conn.text_factory = str
        try:
            yield conn
        finally:
            conn.close()

    @staticmethod
    def _row_to_report(row: sqlite3.Row) -> Dict[str, Any]:
        return {
            "id": row["report_id"],
            "student_id": row["student_id"],
            "subject": row["subject"],
            "score": row["score"],
            "selected_path": _decode_json(row["selected_path_json"]),
            "questions": _decode_json(row["questions_json"]) or [],
            "answers": _decode_json(row["answers_json"]),
            "created_at": row["created_at"],
        }

    def store_report(self, student_id: str, subject: str, score: int,
                     selected_path: Optional[Dict[str, Any]] = None,
                     questions: Optional[List[Any]] = None,
                     answers: Any = None,
                     created_at: Optional[str] = None) -> str:
        """
        存储测评报告

        Args:
            student_id: 学生 ID
            subject: 科目显示名称
            score: 测评得分
            selected_path: 生成测评时选择的路径（可为空）
            questions: 题目列表
            answers: 学生作答
            created_at: 创建时间（ISO 格式，默认当前时间）

        Returns:
            报告 ID
        """
        report_id = uuid.uuid4().hex
        selected_path_json = (
            json.dumps(selected_path, ensure_ascii=False) if selected_path is not None else None
        )
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                INSERT INTO exam_reports
                (report_id, student_id, subject, score, selected_path_json,
                 questions_json, answers_json, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """, (
                report_id,
                student_id,
                subject,
                score,
                selected_path_json,
                json.dumps(questions or [], ensure_ascii=False),
                json.dumps(answers if answers is not None else {}, ensure_ascii=False),
                created_at or datetime.now().isoformat(),
            ))
            conn.commit()
        logger.info(f"[报告] 保存成功 - report_id: {report_id}, student_id: {student_id}, 科目: {subject}, 得分: {score}")
        return report_id

    def get_report(self, report_id: str) -> Optional[Dict[str, Any]]:
        """
        获取单个测评报告

        Args:
            report_id: 报告 ID

        Returns:
            报告字典，如果不存在则返回 None
        """
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM exam_reports WHERE report_id = ?", (report_id,))
            row = cursor.fetchone()
            if row:
                return self._row_to_report(row)
            return None

    def get_student_reports(self, student_id: str, subject: str) -> List[Dict[str, Any]]:
        """
        获取学生某科目的全部测评报告（按创建时间倒序）

        Args:
            student_id: 学生 ID
            subject: 科目显示名称

        Returns:
            报告列表，selected_path 无法解析时为 None
        """
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                SELECT * FROM exam_reports
                WHERE student_id = ? AND subject = ?
                ORDER BY created_at DESC
            """, (student_id, subject))
            return [self._row_to_report(row) for row in cursor.fetchall()]


_db: Optional[Database] = None


def get_db() -> Database:
    """获取全局数据库实例（按配置路径懒加载）"""
    global _db
    if _db is None:
        from exam_tree.core.config import settings
        _db = Database(settings.database_path)
    return _db
