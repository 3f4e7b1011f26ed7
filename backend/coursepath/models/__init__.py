"""
数据模型模块
统一导出所有模型，方便导入
"""

# 课程路径相关模型
from coursepath.models.course import (
    QUESTION_TYPE_MORTON,
    QUESTION_TYPE_RD,
    NOT_AVAILABLE,
    QuestionType,
    CheckpointNode,
    Checkpoint,
    CourseNode,
    CourseExtractionResult,
)

__all__ = [
    "QUESTION_TYPE_MORTON",
    "QUESTION_TYPE_RD",
    "NOT_AVAILABLE",
    "QuestionType",
    "CheckpointNode",
    "Checkpoint",
    "CourseNode",
    "CourseExtractionResult",
]
