import pytest
from fastapi.testclient import TestClient

from wallframe.api.main import create_app
from wallframe.models import Opening
from wallframe.settings import Settings


@pytest.fixture
def client():
    return TestClient(create_app(Settings()))


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_generate(client, make_wall):
    wall = make_wall(144.0)
    window = Opening.window(wall.id, 0.5, 36.0, 48.0, 36.0)
    response = client.post("/api/framing/generate", json={
        "wall": wall.model_dump(mode="json"),
        "openings": [window.model_dump(mode="json")],
    })

    assert response.status_code == 200
    body = response.json()
    assert body["layout"]["wall_id"] == wall.id
    assert body["layout"]["stud_count"] == 14
    assert len(body["layout"]["members"]) == 19
    assert body["summary"]["member_count"] == 19
    assert body["takeoff"][0]["lumber_size"] == "2x6"


def test_generate_rejects_out_of_bounds_opening(client, make_wall):
    wall = make_wall(48.0)
    door = Opening.door(wall.id, 0.1, 36.0, 80.0)
    response = client.post("/api/framing/generate", json={
        "wall": wall.model_dump(mode="json"),
        "openings": [door.model_dump(mode="json")],
    })

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["code"] == "opening_out_of_bounds"
    assert detail["opening_id"] == door.id


def test_rough_opening(client, make_wall):
    wall = make_wall(120.0)
    door = Opening.door(wall.id, 0.5, 36.0, 80.0)
    response = client.post("/api/framing/rough-opening", json={
        "wall": wall.model_dump(mode="json"),
        "opening": door.model_dump(mode="json"),
    })

    assert response.status_code == 200
    body = response.json()
    assert body["width"] == 38.0
    assert body["height"] == 80.5
    assert body["requires_sill"] is False
    assert body["header_type"] == "triple_lumber"


@pytest.mark.parametrize("span,load_bearing,header_type,nominal,material", [
    (36.0, True, "double_lumber", "2x6", "spf"),
    (72.0, True, "lvl", "2x8", "lvl"),
    (60.0, False, "triple_lumber", "2x8", "spf"),
])
def test_header_size(client, span, load_bearing, header_type, nominal, material):
    response = client.get(
        "/api/framing/header",
        params={"span": span, "load_bearing": str(load_bearing).lower()},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["header_type"] == header_type
    assert body["lumber_size"]["nominal"] == nominal
    assert body["material"] == material


def test_header_size_requires_positive_span(client):
    assert client.get("/api/framing/header", params={"span": 0}).status_code == 422


def test_list_rules(client):
    response = client.get("/api/rules")
    assert response.status_code == 200
    assert [r["id"] for r in response.json()][0] == "wall.plates"


def test_generate_rejects_negative_opening_width(client, make_wall):
    wall = make_wall(120.0)
    door = Opening.door(wall.id, 0.5, 36.0, 80.0).model_dump(mode="json")
    door["width"] = -10.0
    response = client.post("/api/framing/generate", json={
        "wall": wall.model_dump(mode="json"),
        "openings": [door],
    })

    assert response.status_code == 422
    errors = response.json()["detail"]
    assert any(err["loc"][-1] == "width" for err in errors)
