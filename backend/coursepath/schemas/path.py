"""
路径提取相关的 Pydantic 数据模型
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from coursepath.models import CourseNode
from coursepath.services.projection_service import (
    ElementType,
    GroupOption,
    PathStatistics,
    QuestionFilter,
)


class CamelSchema(BaseModel):
    """请求和响应统一使用驼峰字段名"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CompareRequest(CamelSchema):
    """对比路径请求模型"""
    compare_ids: str = Field(..., description="对比路径 ID，换行或逗号分隔")


class CompareResponse(CamelSchema):
    """对比路径响应模型"""
    keys: List[str] = Field(default_factory=list, description="对比路径中出现的全部 KEY（已排序）")
    total: int = Field(..., description="KEY 数量")


class ReportRequest(CamelSchema):
    """路径报告请求模型"""
    compare_ids: Optional[str] = Field(default=None, description="对比路径 ID（可选）")
    element_type: ElementType = Field(default="CalculusBoard", description="元素类型")
    question_filter: QuestionFilter = Field(default="all", description="题目类型筛选：all、morton、rd")
    group_option: GroupOption = Field(default="none", description="分组方式：none、knowledge、scene")


class ReportNode(CourseNode):
    """报告中的记录，附带是否重复标记"""
    is_duplicate: bool = Field(default=False, description="KEY 是否出现在对比路径中")


class ReportGroup(CamelSchema):
    """报告分组"""
    name: str = Field(..., description="分组名称")
    nodes: List[ReportNode] = Field(default_factory=list, description="分组内的记录")


class ReportResponse(CamelSchema):
    """路径报告响应模型"""
    path_id: str
    title: str
    statistics: PathStatistics
    groups: List[ReportGroup] = Field(default_factory=list)


class SearchResponse(CamelSchema):
    """全局搜索响应模型"""
    field: str
    value: str
    path: Optional[str] = Field(default=None, description="匹配节点路径，未找到时为空")
