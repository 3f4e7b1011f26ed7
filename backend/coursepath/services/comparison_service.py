"""
多路径对比服务
并行拉取多个历史路径，汇总它们的记录 KEY，用于标记当前路径中的重复记录
"""

import asyncio
import logging
import re
from typing import Awaitable, Callable, Iterable, List, Optional, Set, Union

from coursepath.models import CourseExtractionResult, CourseNode

logger = logging.getLogger(__name__)

# 单个路径 ID -> 提取结果
PathFetcher = Callable[[str], Awaitable[CourseExtractionResult]]

# 换行、半角逗号、全角逗号均可作为分隔符
PATH_ID_SEPARATOR = re.compile(r"[\n,，]")


def parse_path_ids(raw_ids: Union[str, Iterable[str], None]) -> List[str]:
    """
    解析用户输入的路径 ID 列表

    Args:
        raw_ids: 以换行或逗号分隔的字符串，或已拆分好的列表

    Returns:
        去除首尾空白后的非空 ID 列表（保持输入顺序）
    """
    if not raw_ids:
        return []
    if isinstance(raw_ids, str):
        parts = PATH_ID_SEPARATOR.split(raw_ids)
    else:
        parts = []
        for item in raw_ids:
            parts.extend(PATH_ID_SEPARATOR.split(item))
    return [part.strip() for part in parts if part.strip()]


async def collect_duplicate_keys(
    raw_ids: Union[str, Iterable[str], None],
    fetcher: PathFetcher,
) -> Set[str]:
    """
    并行拉取所有对比路径并汇总记录 KEY

    单个路径拉取或提取失败时只记录警告，不影响其他路径；
    所有请求结束（成功或失败）后才汇总结果。

    Args:
        raw_ids: 对比路径 ID（原始输入）
        fetcher: 拉取并提取单个路径的协程函数

    Returns:
        所有成功路径的记录 KEY 集合
    """
    path_ids = parse_path_ids(raw_ids)
    if not path_ids:
        return set()

    total = len(path_ids)
    completed = 0
    logger.info(f"[路径对比] 开始并行获取 {total} 个对比路径")

    async def fetch_one(path_id: str) -> Optional[CourseExtractionResult]:
        nonlocal completed
        try:
            result = await fetcher(path_id)
        except Exception as e:
            completed += 1
            logger.warning(f"[路径对比] 路径 {path_id} 对比数据拉取失败 ({completed}/{total}): {e}")
            return None
        completed += 1
        logger.info(f"[路径对比] 已完成 {completed}/{total}: {path_id}, 记录数: {len(result.records)}")
        return result

    results = await asyncio.gather(*(fetch_one(path_id) for path_id in path_ids))

    keys: Set[str] = set()
    succeeded = 0
    for result in results:
        if result is None:
            continue
        succeeded += 1
        keys.update(result.record_keys)

    logger.info(f"[路径对比] 对比完成 - 成功 {succeeded}/{total} 个路径, KEY 数: {len(keys)}")
    return keys


def is_duplicate(record: CourseNode, duplicate_keys: Set[str]) -> bool:
    """记录的 KEY 是否出现在对比路径中"""
    return record.key in duplicate_keys
