from coursepath.services.export_service import build_csv, export_filename
from coursepath.services.extraction_service import extract_course_path
from coursepath.services.projection_service import compute_statistics, filter_nodes, group_nodes
from coursepath.services.search_service import deep_search


def test_filter_by_element_type(sample_document):
    records = extract_course_path(sample_document, "p").records
    assert [record.key for record in filter_nodes(records, "Video")] == ["V-1", "V-2"]
    assert len(filter_nodes(records, "CalculusBoard")) == 5


def test_question_filter(sample_document):
    records = extract_course_path(sample_document, "p").records
    assert [record.key for record in filter_nodes(records, "CalculusBoard", "morton")] == ["KEY-A"]
    assert filter_nodes(records, "CalculusBoard", "rd") == []
    # 题目类型筛选只作用于演算板
    assert len(filter_nodes(records, "Video", "morton")) == 2


def test_statistics(sample_document):
    records = extract_course_path(sample_document, "p").records
    boards = filter_nodes(records, "CalculusBoard")
    stats = compute_statistics(records, boards, {"KEY-A", "V-1", "NOTE"})
    assert stats.total == 7
    assert stats.boards == 5
    assert stats.videos == 2
    assert stats.morton == 1
    assert stats.duplicates == 2
    assert compute_statistics(records).duplicates == 0


def test_group_by_scene_and_knowledge(sample_document):
    records = extract_course_path(sample_document, "p").records
    by_scene = group_nodes(records, "scene")
    assert list(by_scene) == ["场景一 (ID: 11)", "场景二 (ID: 12)"]
    assert len(by_scene["场景二 (ID: 12)"]) == 4

    by_knowledge = group_nodes(records, "knowledge")
    assert list(by_knowledge) == ["无知识点", "勾股定理", "函数 / 方程"]
    assert list(group_nodes(records)) == ["未分类"]


def test_build_csv(sample_document):
    records = filter_nodes(extract_course_path(sample_document, "p").records, "CalculusBoard")
    lines = build_csv(records[:2], {"KEY-A"}).split("\n")
    assert lines[0] == '"序号","KEY","名称","场景名称","题目类型","错X次跳关","知识点","视频链接","是否重复"'
    assert lines[1] == '"1","KEY-A","演算板A","场景一","莫顿题","2","勾股定理","https://cdn.x/a.mp4","是"'
    assert lines[2] == '"2","B-1","演算板","场景二","-","-","函数; 方程","-","否"'


def test_build_csv_escapes_quotes():
    document = {"data": {"items": [{"objectType": "CalculusBoard", "objectName": 'say "hi"', "key": "K"}]}}
    records = extract_course_path(document, "p").records
    assert build_csv(records).split("\n")[1].startswith('"1","K","say ""hi"""')


def test_export_filename():
    assert export_filename("8333") == "Merton_Export_8333.csv"


def test_deep_search(sample_document):
    assert deep_search(sample_document, "objectName", "笔记") == "data.senses[1].children[0]"
    assert deep_search(sample_document, "code", "0") == "root"
    assert deep_search(sample_document, "senseId", "12") == "data.senses[1]"
    assert deep_search(sample_document, "objectName", "不存在") is None
