"""
核心配置和基础功能模块
统一导出核心模块
"""

# 配置
from coursepath.core.config import Settings, settings, get_cors_config

# 异常
from coursepath.core.exceptions import (
    CoursePathError,
    CoursePathTransportError,
    CoursePathBusinessError,
    CoursePathParseError,
)

__all__ = [
    # 配置
    "Settings",
    "settings",
    "get_cors_config",
    # 异常
    "CoursePathError",
    "CoursePathTransportError",
    "CoursePathBusinessError",
    "CoursePathParseError",
]
