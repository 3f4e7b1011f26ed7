"""
业务逻辑服务模块
统一导出所有服务，方便导入
"""

# 元数据与知识点
from coursepath.services.metadata_locator import (
    ElementMetadata,
    locate_metadata,
    resolve_video_url,
)
from coursepath.services.knowledge_service import normalize_knowledge

# 关卡索引与分类
from coursepath.services.checkpoint_service import (
    Classification,
    build_checkpoint_index,
    classify_element,
)

# 文档扫描与提取
from coursepath.services.scanner import scan_course_tree, expand_element
from coursepath.services.extraction_service import (
    sort_course_nodes,
    extract_course_path,
    load_document,
    extract_from_text,
)

# 接口客户端与对比
from coursepath.services.course_client import CoursePathClient
from coursepath.services.comparison_service import (
    parse_path_ids,
    collect_duplicate_keys,
    is_duplicate,
)

# 筛选、统计、导出、搜索
from coursepath.services.projection_service import (
    PathStatistics,
    filter_nodes,
    compute_statistics,
    group_nodes,
)
from coursepath.services.export_service import build_csv, export_filename
from coursepath.services.search_service import deep_search

__all__ = [
    # 元数据与知识点
    "ElementMetadata",
    "locate_metadata",
    "resolve_video_url",
    "normalize_knowledge",
    # 关卡索引与分类
    "Classification",
    "build_checkpoint_index",
    "classify_element",
    # 文档扫描与提取
    "scan_course_tree",
    "expand_element",
    "sort_course_nodes",
    "extract_course_path",
    "load_document",
    "extract_from_text",
    # 接口客户端与对比
    "CoursePathClient",
    "parse_path_ids",
    "collect_duplicate_keys",
    "is_duplicate",
    # 筛选、统计、导出、搜索
    "PathStatistics",
    "filter_nodes",
    "compute_statistics",
    "group_nodes",
    "build_csv",
    "export_filename",
    "deep_search",
]
