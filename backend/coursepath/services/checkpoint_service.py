"""
关卡索引与题目类型判断
"""

import logging
from typing import Any, Dict, NamedTuple

from coursepath.models import (
    Checkpoint,
    CheckpointNode,
    NOT_AVAILABLE,
    QUESTION_TYPE_MORTON,
    QUESTION_TYPE_RD,
)
from coursepath.services.json_utils import get_field, to_int

logger = logging.getLogger(__name__)


class Classification(NamedTuple):
    """元素分类结果"""
    question_type: str
    error_count: Any


def parse_checkpoint(entry: Any) -> Checkpoint:
    """
    将文档中的关卡条目解析为 Checkpoint

    调用方需保证 entry 为对象且 checkpointId 可转换为整数
    """
    raw_nodes = get_field(entry, "nodes")
    nodes = []
    if isinstance(raw_nodes, list):
        for node in raw_nodes:
            if isinstance(node, dict):
                nodes.append(CheckpointNode(question_id=node.get("questionId")))

    return Checkpoint(
        id=to_int(entry.get("checkpointId")),
        nodes=nodes,
        error_count=entry.get("errorCount"),
    )


def build_checkpoint_index(data: Any) -> Dict[int, Checkpoint]:
    """
    建立关卡 ID -> 关卡的索引

    读取 data.checkpoints 列表；缺少 checkpointId 或 ID 无法转换为整数的条目跳过，
    重复 ID 以列表中靠后的条目为准。

    Args:
        data: 文档的 data 节点

    Returns:
        关卡索引
    """
    index: Dict[int, Checkpoint] = {}
    entries = get_field(data, "checkpoints")
    if not isinstance(entries, list):
        return index

    skipped = 0
    for entry in entries:
        if not isinstance(entry, dict) or to_int(entry.get("checkpointId")) is None:
            skipped += 1
            continue
        checkpoint = parse_checkpoint(entry)
        index[checkpoint.id] = checkpoint

    if skipped:
        logger.debug(f"[关卡索引] 跳过 {skipped} 个缺少有效 checkpointId 的条目")
    return index


def classify_element(checkpoint_id: Any, index: Dict[int, Checkpoint]) -> Classification:
    """
    根据元素关联的关卡判断题目类型和错题跳关次数

    规则：
    1. 元素没有关卡 ID：题目类型和错题次数均为 "-"
    2. 关卡的 nodes 中任一节点带有 questionId：莫顿题，否则为研发题
       （关卡 ID 在索引中找不到时同样视为研发题）
    3. 错题次数取关卡的 errorCount，缺失时为 "-"

    Args:
        checkpoint_id: 元素上的关卡 ID 候选值
        index: 关卡索引

    Returns:
        Classification
    """
    if not checkpoint_id:
        return Classification(NOT_AVAILABLE, NOT_AVAILABLE)

    number = to_int(checkpoint_id)
    checkpoint = index.get(number) if number is not None else None
    if checkpoint is None:
        return Classification(QUESTION_TYPE_RD, NOT_AVAILABLE)

    question_type = QUESTION_TYPE_MORTON if checkpoint.has_question else QUESTION_TYPE_RD
    error_count = checkpoint.error_count if checkpoint.error_count is not None else NOT_AVAILABLE
    return Classification(question_type, error_count)
