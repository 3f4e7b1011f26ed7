"""
课程路径提取相关路由
"""

import logging
from pathlib import Path
from typing import Optional
from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from fastapi.responses import JSONResponse, Response

from coursepath.core.config import settings
from coursepath.core.exceptions import (
    CoursePathBusinessError,
    CoursePathError,
    CoursePathParseError,
    CoursePathTransportError,
)
from coursepath.models import CourseExtractionResult
from coursepath.schemas import (
    CompareRequest,
    CompareResponse,
    ReportGroup,
    ReportNode,
    ReportRequest,
    ReportResponse,
    SearchResponse,
)
from coursepath.services import (
    CoursePathClient,
    build_csv,
    collect_duplicate_keys,
    compute_statistics,
    deep_search,
    export_filename,
    extract_from_text,
    filter_nodes,
    group_nodes,
    is_duplicate,
)
from coursepath.services.export_service import UTF8_BOM
from coursepath.services.projection_service import ElementType, QuestionFilter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/paths", tags=["路径提取"])

ALLOWED_EXTENSIONS = {".json"}


def get_course_client() -> CoursePathClient:
    """路径接口客户端（测试时可通过 dependency_overrides 替换）"""
    return CoursePathClient()


def to_http_exception(error: CoursePathError) -> HTTPException:
    """将提取异常转换为 HTTP 错误"""
    if isinstance(error, CoursePathTransportError):
        status_code = 502
    elif isinstance(error, CoursePathBusinessError):
        status_code = 422
    elif isinstance(error, CoursePathParseError):
        status_code = 400
    else:
        status_code = 500
    return HTTPException(status_code=status_code, detail=str(error))


async def fetch_or_raise(client: CoursePathClient, path_id: str) -> CourseExtractionResult:
    try:
        return await client.fetch_course_path(path_id)
    except CoursePathError as e:
        logger.error(f"[路径接口] 获取路径失败 - path_id: {path_id}, 错误: {e}")
        raise to_http_exception(e)


def dump_result(result: CourseExtractionResult, include_raw: bool = False) -> dict:
    exclude = None if include_raw else {"raw"}
    return result.model_dump(mode="json", by_alias=True, exclude=exclude)


@router.get("/{path_id}")
async def get_course_path(
    path_id: str,
    include_raw: bool = Query(default=False, description="是否返回原始文档"),
    client: CoursePathClient = Depends(get_course_client),
):
    """
    获取并解析课程路径

    Args:
        path_id: 路径 ID
        include_raw: 是否在响应中附带原始文档
    """
    result = await fetch_or_raise(client, path_id)
    return JSONResponse(content=dump_result(result, include_raw))


@router.post("/upload")
async def upload_course_path(
    file: UploadFile = File(...),
    include_raw: bool = Query(default=False, description="是否返回原始文档"),
):
    """
    上传本地 JSON 文件并解析

    解析流程与接口获取的文档完全相同，来源标识为文件名
    """
    filename = file.filename or "upload.json"
    if Path(filename).suffix.lower() not in ALLOWED_EXTENSIONS:
        raise HTTPException(status_code=400, detail="不支持的文件类型。仅支持 JSON 文件（.json）。")

    contents = await file.read()
    if len(contents) > settings.max_upload_size:
        raise HTTPException(
            status_code=400,
            detail=f"文件过大。最大允许大小为 {settings.max_upload_size / 1024 / 1024}MB。"
        )
    if not contents:
        raise HTTPException(status_code=400, detail="文件为空。")

    try:
        result = extract_from_text(contents, filename)
    except CoursePathError as e:
        raise to_http_exception(e)

    return JSONResponse(content=dump_result(result, include_raw))


@router.post("/compare", response_model=CompareResponse)
async def compare_course_paths(
    request: CompareRequest,
    client: CoursePathClient = Depends(get_course_client),
):
    """
    并行获取对比路径，返回其中出现过的全部 KEY

    单个路径失败不会影响其他路径
    """
    keys = await collect_duplicate_keys(request.compare_ids, client.fetch_course_path)
    return CompareResponse(keys=sorted(keys), total=len(keys))


@router.post("/{path_id}/report", response_model=ReportResponse)
async def get_course_path_report(
    path_id: str,
    request: ReportRequest,
    client: CoursePathClient = Depends(get_course_client),
):
    """
    路径报告：筛选、分组、统计，并标记与对比路径重复的记录
    """
    result = await fetch_or_raise(client, path_id)
    duplicate_keys = await collect_duplicate_keys(request.compare_ids, client.fetch_course_path)

    filtered = filter_nodes(result.records, request.element_type, request.question_filter)
    statistics = compute_statistics(result.records, filtered, duplicate_keys)

    groups = []
    for name, records in group_nodes(filtered, request.group_option).items():
        nodes = [
            ReportNode(**record.model_dump(), is_duplicate=is_duplicate(record, duplicate_keys))
            for record in records
        ]
        groups.append(ReportGroup(name=name, nodes=nodes))

    return ReportResponse(
        path_id=result.source_id,
        title=result.title,
        statistics=statistics,
        groups=groups,
    )


@router.get("/{path_id}/export")
async def export_course_path(
    path_id: str,
    compare_ids: Optional[str] = Query(default=None, description="对比路径 ID，换行或逗号分隔"),
    element_type: ElementType = Query(default="CalculusBoard"),
    question_filter: QuestionFilter = Query(default="all"),
    client: CoursePathClient = Depends(get_course_client),
):
    """导出筛选后的记录为 CSV"""
    result = await fetch_or_raise(client, path_id)
    duplicate_keys = await collect_duplicate_keys(compare_ids, client.fetch_course_path)

    filtered = filter_nodes(result.records, element_type, question_filter)
    content = UTF8_BOM + build_csv(filtered, duplicate_keys)
    filename = export_filename(result.source_id)
    return Response(
        content=content.encode("utf-8"),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{path_id}/search", response_model=SearchResponse)
async def search_course_path(
    path_id: str,
    field: str = Query(..., min_length=1, description="字段名"),
    value: str = Query(..., description="字段值包含的内容"),
    client: CoursePathClient = Depends(get_course_client),
):
    """在原始文档中查找第一个匹配的节点路径"""
    result = await fetch_or_raise(client, path_id)
    return SearchResponse(field=field, value=value, path=deep_search(result.raw, field, value))
