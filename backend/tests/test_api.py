import json

import httpx
import pytest
from fastapi.testclient import TestClient

from coursepath.api.v1.endpoints.paths import get_course_client
from coursepath.main import app
from coursepath.services.course_client import CoursePathClient

API_BASE = "https://merton.test/arrangement/detail"


def build_documents(sample_document):
    return {
        "8333": sample_document,
        "old-1": {"code": 0, "data": {"items": [{"objectType": "CalculusBoard", "key": "KEY-A"}]}},
        "old-2": {"code": 0, "data": {"items": [{"objectType": "Video", "key": "V-2"}]}},
        "biz": {"code": 403, "message": "无权限访问"},
    }


@pytest.fixture
def client(sample_document):
    documents = build_documents(sample_document)

    def handler(request):
        path_id = request.url.path.rsplit("/", 1)[-1]
        if path_id not in documents:
            return httpx.Response(404)
        return httpx.Response(200, json=documents[path_id])

    app.dependency_overrides[get_course_client] = lambda: CoursePathClient(
        api_base=API_BASE,
        accepted_codes=[0, 200],
        transport=httpx.MockTransport(handler),
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_get_course_path(client):
    response = client.get("/paths/8333")
    assert response.status_code == 200
    payload = response.json()
    assert payload["title"] == "示例路径"
    assert payload["sourceId"] == "8333"
    assert "raw" not in payload
    assert [record["key"] for record in payload["records"]][-1] == "NOTE"


def test_get_course_path_with_raw(client, sample_document):
    payload = client.get("/paths/8333", params={"include_raw": "true"}).json()
    assert payload["raw"] == sample_document


def test_transport_failure_maps_to_502(client):
    response = client.get("/paths/missing")
    assert response.status_code == 502
    assert response.json()["detail"] == "API 错误: 404"


def test_business_failure_maps_to_422(client):
    response = client.get("/paths/biz")
    assert response.status_code == 422
    assert response.json()["detail"] == "无权限访问"


def test_upload_json_file(client, sample_document):
    content = json.dumps(sample_document, ensure_ascii=False).encode("utf-8")
    response = client.post("/paths/upload", files={"file": ("path.json", content, "application/json")})
    assert response.status_code == 200
    payload = response.json()
    assert payload["sourceId"] == "path.json"
    assert len(payload["records"]) == 7


def test_upload_malformed_json(client):
    response = client.post("/paths/upload", files={"file": ("bad.json", b"{oops", "application/json")})
    assert response.status_code == 400
    assert response.json()["detail"] == "JSON 解析失败"


def test_upload_rejects_other_extensions(client):
    response = client.post("/paths/upload", files={"file": ("notes.txt", b"{}", "text/plain")})
    assert response.status_code == 400


def test_compare_ignores_failed_paths(client):
    response = client.post("/paths/compare", json={"compareIds": "old-1\nmissing，old-2"})
    assert response.status_code == 200
    assert response.json() == {"keys": ["KEY-A", "V-2"], "total": 2}


def test_report_flags_duplicates(client):
    response = client.post(
        "/paths/8333/report",
        json={"compareIds": "old-1,old-2", "elementType": "CalculusBoard", "groupOption": "scene"},
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["statistics"] == {"total": 7, "boards": 5, "videos": 2, "morton": 1, "duplicates": 1}
    assert [group["name"] for group in payload["groups"]] == ["场景一 (ID: 11)", "场景二 (ID: 12)"]
    first = payload["groups"][0]["nodes"][0]
    assert first["key"] == "KEY-A"
    assert first["isDuplicate"] is True
    assert payload["groups"][1]["nodes"][0]["isDuplicate"] is False


def test_export_csv(client):
    response = client.get("/paths/8333/export", params={"compare_ids": "old-1", "question_filter": "morton"})
    assert response.status_code == 200
    assert response.headers["content-disposition"] == 'attachment; filename="Merton_Export_8333.csv"'
    text = response.content.decode("utf-8")
    assert text.startswith("\ufeff")
    lines = text.lstrip("\ufeff").split("\n")
    assert len(lines) == 2
    assert lines[1].endswith('"是"')


def test_search(client):
    response = client.get("/paths/8333/search", params={"field": "objectName", "value": "笔记"})
    assert response.json() == {"field": "objectName", "value": "笔记", "path": "data.senses[1].children[0]"}
