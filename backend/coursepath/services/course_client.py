"""
Merton 路径接口客户端
功能：按路径 ID 拉取课程路径文档，并校验传输状态和业务状态码
"""

import logging
from typing import Any, List, Optional

import httpx

from coursepath.core.config import settings
from coursepath.core.exceptions import (
    CoursePathBusinessError,
    CoursePathParseError,
    CoursePathTransportError,
)
from coursepath.models import CourseExtractionResult
from coursepath.services.extraction_service import extract_course_path

logger = logging.getLogger(__name__)


def get_timeout_config(timeout: Optional[float] = None) -> httpx.Timeout:
    """
    返回路径请求的超时配置

    Args:
        timeout: 读取超时（秒），为 None 时使用配置中的 request_timeout
    """
    read_timeout = timeout if timeout is not None else settings.request_timeout
    return httpx.Timeout(
        connect=min(10.0, read_timeout),  # 连接超时
        read=read_timeout,
        write=read_timeout,
        pool=read_timeout,
    )


class CoursePathClient:
    """Merton 路径详情接口客户端"""

    def __init__(
        self,
        api_base: Optional[str] = None,
        timeout: Optional[float] = None,
        accepted_codes: Optional[List[int]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        初始化客户端

        Args:
            api_base: 接口地址（如果为 None，则使用配置中的 merton_api_base）
            timeout: 请求超时时间（秒）
            accepted_codes: 视为成功的业务状态码（如果为 None，则使用配置）
            transport: 自定义 httpx 传输层（测试时注入 MockTransport）
        """
        self.api_base = (api_base or settings.merton_api_base).rstrip("/")
        self.timeout_config = get_timeout_config(timeout)
        self.accepted_codes = accepted_codes if accepted_codes is not None else settings.get_accepted_codes()
        self.transport = transport

    def build_url(self, path_id: str) -> str:
        return f"{self.api_base}/{path_id}"

    async def fetch_document(self, path_id: str) -> Any:
        """
        拉取单个路径的原始文档

        Args:
            path_id: 路径 ID

        Returns:
            接口返回的完整 JSON 文档

        Raises:
            CoursePathTransportError: 网络错误、超时或 HTTP 状态码非 2xx
            CoursePathParseError: 响应体不是合法 JSON
            CoursePathBusinessError: 业务状态码不在允许范围内
        """
        url = self.build_url(path_id)
        logger.info(f"[路径接口] 开始请求 - path_id: {path_id}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout_config, transport=self.transport) as client:
                response = await client.get(url)
        except httpx.TimeoutException as e:
            raise CoursePathTransportError(f"API 请求超时: {path_id}") from e
        except httpx.RequestError as e:
            raise CoursePathTransportError(f"API 请求错误: {str(e)}") from e

        if not response.is_success:
            raise CoursePathTransportError(
                f"API 错误: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            result = response.json()
        except ValueError as e:
            raise CoursePathParseError("API 返回内容不是合法的 JSON") from e

        code = result.get("code") if isinstance(result, dict) else None
        if isinstance(code, bool) or code not in self.accepted_codes:
            message = result.get("message") if isinstance(result, dict) else None
            raise CoursePathBusinessError(message or "业务逻辑错误", code=code)

        return result

    async def fetch_course_path(self, path_id: str) -> CourseExtractionResult:
        """拉取路径文档并提取记录"""
        document = await self.fetch_document(path_id)
        return extract_course_path(document, path_id)
