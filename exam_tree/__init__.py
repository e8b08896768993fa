"""
考试知识树构建与掌握度聚合服务
"""

__version__ = "1.0.0"
