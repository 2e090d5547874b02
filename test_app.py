"""
Tests for the HTTP endpoints.
"""

import inspect

import pytest
from fastapi.testclient import TestClient

from app import app

TWO_FACTIONS = "4 4\nA ++ B\nC ++ D\nA -- C\nA -- D\nB -- C\nB -- D\n"
ONE_HOSTILE = "3 3\nA ++ B\nB ++ C\nA -- C\n"


@pytest.fixture
def client():
    return TestClient(app)


def test_get_model(client):
    response = client.get("/api/model")
    assert response.status_code == 200
    assert response.json()["line_limit"] in ("advisory", "declared")


@pytest.mark.parametrize("method", [None, "brute_force", "partition"])
def test_check_balanced(client, method):
    response = client.post("/api/check", json={"edge_list": TWO_FACTIONS, "method": method})
    assert response.status_code == 200
    data = response.json()
    assert data["balanced"] is True
    assert data["result"] == "Balanced"
    if method is not None:
        assert data["method"] == method


def test_check_not_balanced(client):
    response = client.post("/api/check", json={"edge_list": ONE_HOSTILE, "method": "brute_force"})
    assert response.status_code == 200
    assert response.json() == {"balanced": False, "result": "Not Balanced", "method": "brute_force"}


def test_check_unknown_method(client):
    response = client.post("/api/check", json={"edge_list": ONE_HOSTILE, "method": "guess"})
    assert response.status_code == 400


def test_check_parse_error(client):
    response = client.post("/api/check", json={"edge_list": "3 3\nA ++ B\nB and C\n"})
    assert response.status_code == 400
    assert response.json()["detail"].startswith("ParseError")


def test_check_missing_edge(client):
    response = client.post("/api/check", json={"edge_list": "3 2\nA ++ B\nB ++ C\n"})
    assert response.status_code == 422
    assert response.json()["detail"].startswith("MissingEdgeError")


def test_check_file(client, tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(TWO_FACTIONS)
    response = client.post("/api/check/file", json={"path": str(path)})
    assert response.status_code == 200
    assert response.json()["balanced"] is True


def test_check_file_not_found(client, tmp_path):
    response = client.post("/api/check/file", json={"path": str(tmp_path / "missing.txt")})
    assert response.status_code == 404
    assert response.json()["detail"].startswith("ResourceNotFoundError")


def test_graph(client):
    response = client.post("/api/graph", json={"edge_list": ONE_HOSTILE})
    assert response.status_code == 200
    data = response.json()
    assert len(data["nodes"]) == 3
    assert len(data["links"]) == 3
    assert data["stats"]["unbalanced_triangles"] == 1


def test_factions(client):
    response = client.post("/api/factions", json={"edge_list": TWO_FACTIONS})
    assert response.json() == {
        "balanced": True,
        "factions": {"faction_a": ["A", "B"], "faction_b": ["C", "D"]},
    }

    response = client.post("/api/factions", json={"edge_list": ONE_HOSTILE})
    assert response.json() == {"balanced": False, "factions": None}


def test_check_file_parse_error_hides_file_content(client, tmp_path):
    path = tmp_path / "settings.env"
    path.write_text("DB_PASSWORD=hunter2\n")
    response = client.post("/api/check/file", json={"path": str(path)})
    assert response.status_code == 400
    assert response.json()["detail"].startswith("ParseError: line 1:")
    assert "hunter2" not in response.text


def test_check_data_line_error_hides_line_text(client):
    response = client.post("/api/check", json={"edge_list": "2 1\nsecret-token-42\n"})
    assert response.status_code == 400
    assert response.json()["detail"].startswith("ParseError: line 2:")
    assert "secret-token-42" not in response.text


def test_check_file_not_utf8(client, tmp_path):
    path = tmp_path / "input.bin"
    path.write_bytes(b"2 1\nA ++ \xff\xfe\n")
    response = client.post("/api/check/file", json={"path": str(path)})
    assert response.status_code == 400
    assert response.json()["detail"].startswith("ParseError")


def test_check_keeps_unicode_separators_inside_names(client):
    edge_list = "3 3\nJon Snow ++ Arya\nArya ++ Sansa\u0085Stark\nJon Snow ++ Sansa\u0085Stark\n"
    response = client.post("/api/check", json={"edge_list": edge_list})
    assert response.status_code == 200
    assert response.json()["balanced"] is True


def test_handlers_run_in_threadpool():
    from app import check_balance, check_balance_file, get_factions, get_graph, get_model

    for handler in (check_balance, check_balance_file, get_graph, get_factions, get_model):
        assert not inspect.iscoroutinefunction(handler)
