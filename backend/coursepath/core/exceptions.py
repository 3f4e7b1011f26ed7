"""
路径提取相关的异常定义

所有异常都继承自 ValueError，消息为可直接展示给用户的中文描述。
"""

from typing import Any, Optional


class CoursePathError(ValueError):
    """路径提取失败的基类"""


class CoursePathTransportError(CoursePathError):
    """接口请求失败（网络错误、超时或非 2xx 状态码）"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CoursePathBusinessError(CoursePathError):
    """接口返回的业务状态码不在允许范围内"""

    def __init__(self, message: str, code: Any = None):
        super().__init__(message)
        self.code = code


class CoursePathParseError(CoursePathError):
    """JSON 文档解析失败"""
