"""
课程路径提取服务
功能：建立关卡索引、扫描文档、排序并组装提取结果；
同时负责本地 JSON 文件的解析，保证与接口获取的文档走同一条提取流程
"""

import json
import logging
from typing import Any, Iterable, List, Union

from coursepath.core.exceptions import CoursePathParseError
from coursepath.models import CourseExtractionResult, CourseNode
from coursepath.services.checkpoint_service import build_checkpoint_index
from coursepath.services.json_utils import JSONValue, first_field, stringify, to_number
from coursepath.services.scanner import scan_course_tree

logger = logging.getLogger(__name__)

# 名称为“笔记”的演算板始终排在最后
NOTE_BOARD_NAME = "笔记"


def _sort_key(record: CourseNode):
    return (record.board_name == NOTE_BOARD_NAME, to_number(record.object_id or 0))


def sort_course_nodes(records: Iterable[CourseNode]) -> List[CourseNode]:
    """
    记录排序

    1. 非“笔记”记录在前，“笔记”记录在后
    2. 同一分区内按 objectId 数值升序（非数值或缺失视为 0）
    3. 排序稳定，相同键保持扫描顺序
    """
    return sorted(records, key=_sort_key)


def get_data_node(document: Any) -> Any:
    """读取文档的 data 节点，缺失时视为空对象"""
    if isinstance(document, dict):
        data = document.get("data")
        if data:
            return data
    return {}


def extract_course_path(document: JSONValue, source_id: str) -> CourseExtractionResult:
    """
    从文档中提取课程路径记录

    Args:
        document: 原始 JSON 文档（不会被修改）
        source_id: 来源标识（路径 ID 或文件名）

    Returns:
        CourseExtractionResult
    """
    data = get_data_node(document)

    # 1. 建立关卡索引
    checkpoint_index = build_checkpoint_index(data)

    # 2. 扫描文档
    records = scan_course_tree(data, checkpoint_index)

    # 3. 排序
    records = sort_course_nodes(records)

    title = first_field(data, "name", "title")
    title = stringify(title) if title else f"路径 {source_id}"

    logger.info(
        f"[路径提取] 提取完成 - 来源: {source_id}, 记录数: {len(records)}, 关卡数: {len(checkpoint_index)}"
    )
    return CourseExtractionResult(
        records=records,
        raw=document,
        title=title,
        source_id=source_id,
    )


def load_document(content: Union[str, bytes]) -> Any:
    """
    解析本地 JSON 内容

    Args:
        content: JSON 文本或 UTF-8 字节（允许带 BOM）

    Returns:
        解析后的文档

    Raises:
        CoursePathParseError: 内容不是合法的 JSON
    """
    try:
        if isinstance(content, bytes):
            content = content.decode("utf-8-sig")
        elif content.startswith("\ufeff"):
            content = content[1:]
        return json.loads(content)
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        logger.warning(f"[路径提取] JSON 解析失败: {e}")
        raise CoursePathParseError("JSON 解析失败") from e


def extract_from_text(content: Union[str, bytes], source_id: str) -> CourseExtractionResult:
    """解析本地 JSON 内容并提取"""
    return extract_course_path(load_document(content), source_id)
