"""
API v1 端点
"""
