"""
元素元数据定位
单次遍历元素子树，同时获取知识点和视频链接
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from coursepath.services.json_utils import JSONValue, get_field, is_container, stringify

# 从元素根节点起最多向下搜索的层数（根节点为第 0 层）
MAX_SEARCH_DEPTH = 6

# 视频链接候选字段，按优先级排列
VIDEO_FIELDS = ("videoUrl", "url", "src", "videoSrc", "video", "source")

# 关卡关系子树，不参与元数据搜索
EXCLUDED_KEYS = frozenset({"checkpoints", "nodes"})


@dataclass(frozen=True)
class ElementMetadata:
    """元素子树中找到的元数据"""
    knowledge: Any = None
    knowledge_found: bool = False
    video_url: str = ""


def resolve_video_url(value: Any) -> Optional[str]:
    """
    解析单个候选字段的视频链接

    Args:
        value: 候选字段的值

    Returns:
        - 以 http 开头的字符串：原样返回
        - 含 httpPre 和 relativePath 的对象：拼接为 httpPre/ + relativePath + suffix
        - 其他情况返回 None
    """
    if isinstance(value, str):
        if value.strip().startswith("http"):
            return value
        return None

    http_pre = get_field(value, "httpPre")
    relative_path = get_field(value, "relativePath")
    if http_pre and relative_path:
        pre = stringify(http_pre)
        if not pre.endswith("/"):
            pre += "/"
        suffix = get_field(value, "suffix")
        return pre + stringify(relative_path) + (stringify(suffix) if suffix else "")

    return None


def _find_video_url(node: Any) -> Optional[str]:
    for field in VIDEO_FIELDS:
        url = resolve_video_url(get_field(node, field))
        if url is not None:
            return url
    return None


def _children(node: Any) -> List[Tuple[Any, Any]]:
    if isinstance(node, dict):
        return [(key, value) for key, value in node.items() if key not in EXCLUDED_KEYS]
    if isinstance(node, list):
        return list(enumerate(node))
    return []


def locate_metadata(root: JSONValue, max_depth: int = MAX_SEARCH_DEPTH) -> ElementMetadata:
    """
    在元素子树中查找第一个知识点字段和第一个可用的视频链接

    使用显式栈做深度优先遍历：子节点逆序入栈、出栈时即为声明顺序，
    因此多个候选节点同时满足时，先声明的字段优先。两者都找到后立即停止。

    Args:
        root: 元素节点
        max_depth: 最大搜索深度，超过该深度的节点不会被访问

    Returns:
        ElementMetadata
    """
    knowledge = None
    knowledge_found = False
    video_url = ""

    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if not is_container(node) or depth > max_depth:
            continue

        if not knowledge_found and isinstance(node, dict) and "knowledge" in node:
            knowledge = node["knowledge"]
            knowledge_found = True

        if not video_url:
            video_url = _find_video_url(node) or ""

        if knowledge_found and video_url:
            break

        # 逆序入栈，保证先声明的子节点先被访问
        for _, child in reversed(_children(node)):
            if is_container(child) and child:
                stack.append((child, depth + 1))

    return ElementMetadata(
        knowledge=knowledge,
        knowledge_found=knowledge_found,
        video_url=video_url,
    )
