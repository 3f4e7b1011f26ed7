import asyncio

import httpx
import pytest

from coursepath.core.exceptions import (
    CoursePathBusinessError,
    CoursePathParseError,
    CoursePathTransportError,
)
from coursepath.services.course_client import CoursePathClient

API_BASE = "https://merton.test/arrangement/detail"


def build_client(handler):
    return CoursePathClient(
        api_base=API_BASE,
        timeout=5,
        accepted_codes=[0, 200],
        transport=httpx.MockTransport(handler),
    )


def test_fetch_course_path_extracts_document(sample_document):
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json=sample_document)

    result = asyncio.run(build_client(handler).fetch_course_path("8333"))
    assert seen == [f"{API_BASE}/8333"]
    assert result.source_id == "8333"
    assert result.title == "示例路径"
    assert len(result.records) == 7


def test_code_200_is_accepted():
    client = build_client(lambda request: httpx.Response(200, json={"code": 200, "data": {}}))
    assert asyncio.run(client.fetch_document("1")) == {"code": 200, "data": {}}


def test_http_error_status():
    client = build_client(lambda request: httpx.Response(503, text="unavailable"))
    with pytest.raises(CoursePathTransportError) as exc_info:
        asyncio.run(client.fetch_document("1"))
    assert str(exc_info.value) == "API 错误: 503"
    assert exc_info.value.status_code == 503


def test_business_error_uses_document_message():
    client = build_client(lambda request: httpx.Response(200, json={"code": 500, "message": "路径不存在"}))
    with pytest.raises(CoursePathBusinessError) as exc_info:
        asyncio.run(client.fetch_document("1"))
    assert str(exc_info.value) == "路径不存在"
    assert exc_info.value.code == 500


def test_business_error_default_message():
    client = build_client(lambda request: httpx.Response(200, json={"data": {}}))
    with pytest.raises(CoursePathBusinessError) as exc_info:
        asyncio.run(client.fetch_document("1"))
    assert str(exc_info.value) == "业务逻辑错误"


def test_invalid_json_body():
    client = build_client(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(CoursePathParseError):
        asyncio.run(client.fetch_document("1"))


def test_network_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(CoursePathTransportError):
        asyncio.run(build_client(handler).fetch_document("1"))


@pytest.mark.parametrize("code", [False, True])
def test_boolean_code_is_business_error(code):
    client = build_client(lambda request: httpx.Response(200, json={"code": code, "data": {}}))
    with pytest.raises(CoursePathBusinessError) as exc_info:
        asyncio.run(client.fetch_document("1"))
    assert exc_info.value.code is code
