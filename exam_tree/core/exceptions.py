"""
自定义异常
"""


class ExamTreeError(Exception):
    """知识树服务基础异常"""


class CatalogLoadError(ExamTreeError):
    """目录文件存在但无法解析（非法 JSON 或不是数组）"""

    def __init__(self, subject: str, path: str, reason: str):
        self.subject = subject
        self.path = path
        self.reason = reason
        super().__init__(f"科目 {subject} 的目录文件 {path} 加载失败: {reason}")


class ReportNotFoundError(ExamTreeError):
    """测评报告不存在或不属于当前学生"""

    def __init__(self, report_id: str):
        self.report_id = report_id
        super().__init__(f"测评报告不存在: {report_id}")
