from coursepath.services.knowledge_service import normalize_knowledge


def test_list_of_strings():
    assert normalize_knowledge(["a", "b"]) == ["a", "b"]


def test_json_encoded_list():
    assert normalize_knowledge('["a","b"]') == ["a", "b"]
    assert normalize_knowledge("  [1, 2]") == ["1", "2"]


def test_plain_string():
    assert normalize_knowledge("a") == ["a"]


def test_empty_values():
    assert normalize_knowledge(None) == []
    assert normalize_knowledge("") == []
    assert normalize_knowledge("   ") == []
    assert normalize_knowledge([]) == []
    assert normalize_knowledge({}) == []


def test_list_of_objects_uses_name_fields():
    value = [{"name": "函数"}, {"title": "方程"}, {"knowledgeName": "不等式"}, "集合"]
    assert normalize_knowledge(value) == ["函数", "方程", "不等式", "集合"]


def test_list_item_without_name_is_stringified():
    assert normalize_knowledge([{"id": 1}, 3]) == ['{"id":1}', "3"]


def test_json_encoded_object():
    assert normalize_knowledge('{"name": "函数"}') == ['{"name":"函数"}']


def test_malformed_json_string_kept_verbatim():
    assert normalize_knowledge("[函数, 方程") == ["[函数, 方程"]


def test_object_value():
    assert normalize_knowledge({"name": "函数", "title": "其他"}) == ["函数"]
    assert normalize_knowledge({"title": "方程"}) == ["方程"]


def test_numbers_are_ignored():
    assert normalize_knowledge(7) == []
    assert normalize_knowledge(True) == []


def test_deeply_nested_json_string_kept_verbatim():
    value = "[" * 5000
    assert normalize_knowledge(value) == [value]
    balanced = "[" * 100000 + "]" * 100000
    assert normalize_knowledge(balanced) == [balanced]
