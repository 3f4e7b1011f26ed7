"""
CSV 导出
"""

from typing import List, Optional, Set

from coursepath.models import CourseNode
from coursepath.services.json_utils import stringify

CSV_HEADERS = ["序号", "KEY", "名称", "场景名称", "题目类型", "错X次跳关", "知识点", "视频链接", "是否重复"]

# Excel 依赖 BOM 识别 UTF-8
UTF8_BOM = "\ufeff"


def _quote(cell) -> str:
    return '"' + stringify(cell).replace('"', '""') + '"'


def build_csv(records: List[CourseNode], duplicate_keys: Optional[Set[str]] = None) -> str:
    """
    将记录渲染为 CSV 文本（不含 BOM）

    每个单元格都用双引号包裹，行之间以换行分隔
    """
    duplicate_keys = duplicate_keys or set()
    rows = [CSV_HEADERS]
    for idx, record in enumerate(records, 1):
        rows.append([
            idx,
            record.key,
            record.board_name,
            record.scene_name,
            record.question_type,
            record.error_count,
            "; ".join(record.knowledge_points),
            record.video_url or "-",
            "是" if record.key in duplicate_keys else "否",
        ])
    return "\n".join(",".join(_quote(cell) for cell in row) for row in rows)


def export_filename(source_id: str) -> str:
    return f"Merton_Export_{source_id}.csv"
