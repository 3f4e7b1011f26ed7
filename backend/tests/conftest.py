import copy

import pytest


SAMPLE_DOCUMENT = {
    "code": 0,
    "message": "ok",
    "data": {
        "name": "示例路径",
        "checkpoints": [
            {"checkpointId": 101, "nodes": [{"questionId": 42}], "errorCount": 2},
            {"checkpointId": 102, "nodes": [{"questionId": None}, {}]},
        ],
        "senses": [
            {
                "objectType": "Sense",
                "senseId": 11,
                "name": "场景一",
                "children": [
                    {
                        "objectType": "CalculusBoard",
                        "objectId": 3,
                        "objectName": "演算板A",
                        "calculusKey": "KEY-A",
                        "checkpointId": 101,
                        "content": {
                            "knowledge": ["勾股定理"],
                            "media": {"videoUrl": "https://cdn.x/a.mp4"},
                        },
                    },
                    {
                        "objectType": "video",
                        "objectId": "1",
                        "src": {"httpPre": "https://cdn.x", "relativePath": "v/1", "suffix": ".mp4"},
                        "config": {
                            "checkpointId": 102,
                            "checkpoints": [{"checkpointKey": "V-1"}, {"key": "V-2"}],
                        },
                    },
                ],
            },
            {
                "objectType": "Sense",
                "senseId": 12,
                "name": "场景二",
                "children": [
                    {"objectType": "CalculusBoard", "objectId": 2, "objectName": "笔记", "key": "NOTE"},
                    {
                        "objectType": "CalculusBoard",
                        "objectId": 5,
                        "calculusKey": "B-BOARD",
                        "knowledge": '["函数","方程"]',
                        "checkpoints": [
                            {"checkpointKey": "B-1"},
                            {"checkpointKey": "B-2"},
                            {},
                        ],
                    },
                ],
            },
        ],
    },
}


def build_document(*elements, **data_fields):
    """把若干元素放进一个最小文档"""
    data = {"items": list(elements)}
    data.update(data_fields)
    return {"code": 0, "data": data}


@pytest.fixture
def sample_document():
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def document_builder():
    return build_document
