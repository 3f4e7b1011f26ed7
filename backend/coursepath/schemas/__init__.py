"""
Pydantic 模式定义模块
统一导出所有 schemas，方便导入
"""

# 路径相关 schemas
from coursepath.schemas.path import (
    CompareRequest,
    CompareResponse,
    ReportRequest,
    ReportNode,
    ReportGroup,
    ReportResponse,
    SearchResponse,
)

__all__ = [
    "CompareRequest",
    "CompareResponse",
    "ReportRequest",
    "ReportNode",
    "ReportGroup",
    "ReportResponse",
    "SearchResponse",
]
