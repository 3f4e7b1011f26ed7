"""
无模式 JSON 文档的通用读取工具

文档是任意嵌套的 dict / list / 标量，所有字段读取都需要先判断类型，
读取失败时回退到默认值而不是抛出异常。
"""

import json
import math
from typing import Any, Dict, List, Optional, Union

# 文档节点类型：dict / list / str / int / float / bool / None
JSONValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]


def is_container(value: Any) -> bool:
    """是否为可继续向下遍历的节点（对象或数组）"""
    return isinstance(value, (dict, list))


def get_field(node: Any, field: str) -> Any:
    """读取对象节点的字段，非对象节点一律返回 None"""
    if isinstance(node, dict):
        return node.get(field)
    return None


def get_nested(node: Any, *path: str) -> Any:
    """按路径逐层读取字段，例如 get_nested(item, "config", "checkpointId")"""
    current = node
    for field in path:
        current = get_field(current, field)
        if current is None:
            return None
    return current


def first_truthy(*values: Any) -> Any:
    """返回第一个非空值，全部为空时返回 None"""
    for value in values:
        if value:
            return value
    return None


def first_field(node: Any, *fields: str) -> Any:
    """按顺序返回对象节点第一个非空字段的值"""
    return first_truthy(*(get_field(node, field) for field in fields))


def stringify(value: Any) -> str:
    """
    将任意文档值转换为展示用字符串

    - 字符串原样返回
    - 整数值的浮点数去掉小数部分（12.0 -> "12"）
    - 布尔值输出 true / false，None 输出 null
    - 对象和数组输出紧凑 JSON（保留中文）
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        try:
            return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
        except (TypeError, ValueError):
            return str(value)
    return str(value)


def to_number(value: Any, default: float = 0) -> float:
    """
    将元素 ID 等字段转换为数值，用于排序

    非数值、缺失、NaN 和无穷大都视为 default
    """
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return default
        try:
            number = float(text)
        except ValueError:
            return default
    else:
        return default
    if isinstance(number, float) and not math.isfinite(number):
        return default
    return number


def to_int(value: Any) -> Optional[int]:
    """将关卡 ID 转换为整数，无法转换时返回 None"""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) and value.is_integer() else None
    if isinstance(value, str):
        number = to_number(value, default=None)
        if number is None:
            return None
        return to_int(number)
    return None
