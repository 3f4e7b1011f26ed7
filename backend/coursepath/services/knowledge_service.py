"""
知识点格式化
将各种形态的 knowledge 字段统一转换为展示用字符串列表
"""

import json
from typing import Any, List

from coursepath.services.json_utils import first_field, stringify


def _knowledge_item_name(item: Any) -> str:
    if isinstance(item, str):
        return item
    name = first_field(item, "name", "title", "knowledgeName")
    if name:
        return stringify(name)
    return stringify(item)


def normalize_knowledge(value: Any) -> List[str]:
    """
    格式化知识点

    支持的输入形态（按优先级）：
    1. 空值（None、空字符串、空列表、空对象）-> []
    2. 列表 -> 字符串元素原样保留，对象元素取 name / title / knowledgeName
    3. 以 [ 或 { 开头的字符串 -> 按 JSON 解析，解析失败时视为普通字符串
    4. 其他非空字符串 -> [value]
    5. 对象 -> [name 或 title]

    Args:
        value: knowledge 字段的原始值

    Returns:
        知识点名称列表
    """
    if not value:
        return []

    if isinstance(value, list):
        return [_knowledge_item_name(item) for item in value]

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return []
        if text.startswith("[") or text.startswith("{"):
            try:
                parsed = json.loads(text)
            except (ValueError, RecursionError):
                return [value]
            if isinstance(parsed, list):
                return [stringify(item) for item in parsed]
            return [stringify(parsed)]
        return [value]

    if isinstance(value, dict):
        name = first_field(value, "name", "title")
        return [stringify(name) if name else stringify(value)]

    # 数字、布尔值等标量不视为知识点
    return []
