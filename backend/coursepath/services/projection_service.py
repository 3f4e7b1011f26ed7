"""
记录筛选、分组与统计
只读取提取结果，不修改记录
"""

from typing import Dict, List, Literal, Optional, Set

from pydantic import BaseModel, Field

from coursepath.models import CourseNode, QUESTION_TYPE_MORTON, QUESTION_TYPE_RD

ElementType = Literal["CalculusBoard", "Video"]
QuestionFilter = Literal["all", "morton", "rd"]
GroupOption = Literal["none", "knowledge", "scene"]

UNGROUPED_NAME = "未分类"
NO_KNOWLEDGE_NAME = "无知识点"


class PathStatistics(BaseModel):
    """提取结果统计"""
    total: int = Field(..., description="总记录数")
    boards: int = Field(..., description="演算板记录数")
    videos: int = Field(..., description="视频记录数")
    morton: int = Field(..., description="莫顿题记录数")
    duplicates: int = Field(default=0, description="筛选结果中与对比路径重复的记录数")


def _type_of(record: CourseNode) -> str:
    return record.object_type.lower()


def filter_nodes(
    records: List[CourseNode],
    element_type: ElementType = "CalculusBoard",
    question_filter: QuestionFilter = "all",
) -> List[CourseNode]:
    """
    按元素类型和题目类型筛选记录

    题目类型筛选只对演算板生效
    """
    nodes = [record for record in records if _type_of(record) == element_type.lower()]
    if element_type == "CalculusBoard":
        if question_filter == "morton":
            nodes = [record for record in nodes if record.question_type == QUESTION_TYPE_MORTON]
        elif question_filter == "rd":
            nodes = [record for record in nodes if record.question_type == QUESTION_TYPE_RD]
    return nodes


def compute_statistics(
    records: List[CourseNode],
    filtered: Optional[List[CourseNode]] = None,
    duplicate_keys: Optional[Set[str]] = None,
) -> PathStatistics:
    """
    统计记录

    Args:
        records: 全部记录
        filtered: 当前筛选结果（重复数只在筛选结果内统计）
        duplicate_keys: 对比路径的 KEY 集合

    Returns:
        PathStatistics
    """
    duplicates = 0
    if duplicate_keys:
        scope = filtered if filtered is not None else records
        duplicates = sum(1 for record in scope if record.key in duplicate_keys)

    return PathStatistics(
        total=len(records),
        boards=sum(1 for record in records if _type_of(record) == "calculusboard"),
        videos=sum(1 for record in records if _type_of(record) == "video"),
        morton=sum(1 for record in records if record.question_type == QUESTION_TYPE_MORTON),
        duplicates=duplicates,
    )


def group_name(record: CourseNode, option: GroupOption) -> str:
    """记录所在分组的名称"""
    if option == "knowledge":
        return " / ".join(record.knowledge_points) or NO_KNOWLEDGE_NAME
    if option == "scene":
        return f"{record.scene_name} (ID: {record.scene_id})"
    return UNGROUPED_NAME


def group_nodes(records: List[CourseNode], option: GroupOption = "none") -> Dict[str, List[CourseNode]]:
    """按知识点或场景分组，分组顺序为首次出现的顺序"""
    groups: Dict[str, List[CourseNode]] = {}
    for record in records:
        groups.setdefault(group_name(record, option), []).append(record)
    return groups
