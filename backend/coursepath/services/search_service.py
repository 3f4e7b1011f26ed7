"""
文档全局搜索
"""

from typing import Any, Optional

from coursepath.services.json_utils import stringify


def deep_search(node: Any, field: str, value: str, path: str = "") -> Optional[str]:
    """
    查找第一个带有 field 字段且字段值包含 value 的对象

    按声明顺序深度优先搜索，对象本身先于其子节点检查。

    Args:
        node: 搜索起点
        field: 字段名
        value: 要匹配的子串
        path: 当前路径（递归内部使用）

    Returns:
        匹配对象的路径，例如 "data.scenes[0].items[2]"；
        根节点匹配时返回 "root"，没有匹配时返回 None
    """
    if isinstance(node, list):
        for idx, child in enumerate(node):
            result = deep_search(child, field, value, f"{path}[{idx}]")
            if result:
                return result
        return None

    if not isinstance(node, dict):
        return None

    if field in node and value in stringify(node[field]):
        return path or "root"

    for key, child in node.items():
        result = deep_search(child, field, value, f"{path}.{key}" if path else key)
        if result:
            return result
    return None
