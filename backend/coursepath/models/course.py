"""
课程路径相关的数据模型
"""

from typing import Any, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


QUESTION_TYPE_MORTON = "莫顿题"
QUESTION_TYPE_RD = "研发题"
NOT_AVAILABLE = "-"

QuestionType = Literal["莫顿题", "研发题", "-"]


class CamelModel(BaseModel):
    """
    对外输出使用驼峰字段名，Python 侧使用下划线字段名
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class CheckpointNode(CamelModel):
    """关卡中的单个题目节点"""

    question_id: Optional[Any] = Field(
        default=None,
        description="题目 ID（存在且非空即为莫顿题目）"
    )


class Checkpoint(CamelModel):
    """
    关卡模型

    由文档 data.checkpoints 中的条目解析得到，以 id 为唯一标识
    """

    id: int = Field(..., description="关卡 ID（源字段 checkpointId）")

    nodes: List[CheckpointNode] = Field(
        default_factory=list,
        description="关卡包含的题目节点"
    )

    error_count: Optional[Any] = Field(
        default=None,
        description="错 X 次跳关次数（源文档未提供时为空）"
    )

    @property
    def has_question(self) -> bool:
        """是否存在任何一个节点带有 questionId"""
        return any(node.question_id is not None for node in self.nodes)


class CourseNode(CamelModel):
    """
    提取结果中的单条记录

    一个演算板/视频元素会按其关卡列表展开为一条或多条记录
    """

    key: str = Field(..., min_length=1, description="演算板 KEY，缺失时为 N/A")
    scene_id: str = Field(..., description="所属场景 ID")
    scene_name: str = Field(..., description="所属场景名称")
    board_name: str = Field(..., description="元素名称")
    knowledge_points: List[str] = Field(default_factory=list, description="知识点列表")
    video_url: str = Field(default="", description="视频链接，未找到时为空字符串")
    object_id: Optional[Any] = Field(default=None, description="元素 ID")
    object_type: str = Field(default="", description="原始元素类型（保留大小写）")
    calculus_key: str = Field(..., description="专项字段，与 key 相同")
    error_count: Any = Field(default=NOT_AVAILABLE, description="错题跳关次数")
    question_type: QuestionType = Field(default=NOT_AVAILABLE, description="题目类型")


class CourseExtractionResult(CamelModel):
    """
    单个文档的提取结果
    """

    records: List[CourseNode] = Field(default_factory=list, description="排序后的记录列表")
    raw: Any = Field(default=None, description="原始文档")
    title: str = Field(..., description="路径标题")
    source_id: str = Field(..., description="来源标识（路径 ID 或文件名）")

    @property
    def record_keys(self) -> List[str]:
        """所有记录的 KEY（按记录顺序）"""
        return [record.key for record in self.records]
