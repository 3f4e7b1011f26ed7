"""
课程路径树扫描
遍历整个文档，识别场景边界和演算板/视频元素，并将每个元素展开为记录
"""

from typing import Any, Dict, List

from coursepath.models import Checkpoint, CourseNode
from coursepath.services.checkpoint_service import classify_element
from coursepath.services.json_utils import (
    JSONValue,
    first_field,
    first_truthy,
    get_field,
    get_nested,
    stringify,
)
from coursepath.services.knowledge_service import normalize_knowledge
from coursepath.services.metadata_locator import locate_metadata

DEFAULT_SCENE_ID = "0"
DEFAULT_SCENE_NAME = "默认场景"

SCENE_TYPES = frozenset({"sense", "scene"})
BOARD_TYPE = "calculusboard"
VIDEO_TYPE = "video"
CONTENT_TYPES = frozenset({BOARD_TYPE, VIDEO_TYPE})

DEFAULT_VIDEO_NAME = "视频元素"
DEFAULT_BOARD_NAME = "演算板"
MISSING_KEY = "N/A"

# 关卡关系和配置子树，扫描时不进入
SKIPPED_KEYS = frozenset({"checkpoints", "nodes", "config"})


def _type_tag(node: Any) -> str:
    raw_type = get_field(node, "objectType")
    return stringify(raw_type).lower() if raw_type else ""


def _element_checkpoints(item: Dict[str, Any]) -> List[Any]:
    """
    元素的关卡列表：自身 checkpoints、config.checkpoints 中第一个非空列表，
    都没有时把元素本身当作唯一关卡
    """
    for candidate in (item.get("checkpoints"), get_nested(item, "config", "checkpoints")):
        if isinstance(candidate, list) and candidate:
            return candidate
    return [item]


def expand_element(
    item: Dict[str, Any],
    scene_id: str,
    scene_name: str,
    index: Dict[int, Checkpoint],
) -> List[CourseNode]:
    """
    将一个演算板/视频元素展开为记录

    Args:
        item: 元素节点
        scene_id: 继承的场景 ID
        scene_name: 继承的场景名称
        index: 关卡索引

    Returns:
        每个关卡一条记录
    """
    raw_type = item.get("objectType") or ""
    type_tag = stringify(raw_type).lower()

    metadata = locate_metadata(item)
    knowledge_points = normalize_knowledge(metadata.knowledge)

    board_name = first_field(item, "objectName", "name")
    if board_name:
        board_name = stringify(board_name)
    else:
        board_name = DEFAULT_VIDEO_NAME if type_tag == VIDEO_TYPE else DEFAULT_BOARD_NAME

    board_level_key = first_truthy(
        item.get("calculusKey"),
        item.get("checkpointKey"),
        item.get("key"),
        get_nested(item, "config", "calculusKey"),
    )

    checkpoint_id = first_truthy(
        item.get("checkpointId"),
        get_nested(item, "config", "checkpointId"),
    )
    classification = classify_element(checkpoint_id, index)

    object_id = first_field(item, "objectId", "id")

    records = []
    for checkpoint in _element_checkpoints(item):
        final_key = stringify(
            first_truthy(
                get_field(checkpoint, "checkpointKey"),
                get_field(checkpoint, "key"),
                board_level_key,
            ) or MISSING_KEY
        )
        records.append(
            CourseNode(
                key=final_key,
                scene_id=scene_id,
                scene_name=scene_name,
                board_name=board_name,
                knowledge_points=list(knowledge_points),
                video_url=metadata.video_url,
                object_id=object_id,
                object_type=stringify(raw_type),
                calculus_key=final_key,
                error_count=classification.error_count,
                question_type=classification.question_type,
            )
        )
    return records


def _scan(
    node: Any,
    scene_id: str,
    scene_name: str,
    index: Dict[int, Checkpoint],
    records: List[CourseNode],
) -> None:
    if isinstance(node, list):
        for child in node:
            _scan(child, scene_id, scene_name, index, records)
        return
    if not isinstance(node, dict):
        return

    type_tag = _type_tag(node)

    # 1. 场景边界：更新向下传递的场景 ID 和名称
    if type_tag in SCENE_TYPES or node.get("senseId") or node.get("sceneId"):
        scene_id = stringify(first_truthy(
            node.get("senseId"), node.get("sceneId"), node.get("id"), scene_id
        ))
        scene_name = stringify(first_truthy(node.get("name"), node.get("title"), scene_name))

    # 2. 演算板/视频元素：整个子树已被消费，不再向下扫描
    if type_tag in CONTENT_TYPES:
        records.extend(expand_element(node, scene_id, scene_name, index))
        return

    # 3. 其他节点：继续扫描子节点
    for key, child in node.items():
        if key not in SKIPPED_KEYS:
            _scan(child, scene_id, scene_name, index, records)


def scan_course_tree(data: JSONValue, index: Dict[int, Checkpoint]) -> List[CourseNode]:
    """
    扫描文档，按遍历顺序返回所有记录（未排序）

    场景 ID 和名称作为参数沿递归向下传递，根节点默认为 "0" / "默认场景"。

    Args:
        data: 文档的 data 节点
        index: 关卡索引

    Returns:
        记录列表
    """
    records: List[CourseNode] = []
    _scan(data, DEFAULT_SCENE_ID, DEFAULT_SCENE_NAME, index, records)
    return records
