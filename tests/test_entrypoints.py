# tests/test_entrypoints.py
import pytest
from fastapi.testclient import TestClient

from api_proto.local_api import app
from sudoku_solver import solve_puzzle
from sudoku_solver.__main__ import main

from conftest import EASY_PUZZLE, EASY_SOLUTION


@pytest.fixture
def client():
    return TestClient(app)


def test_solve_puzzle_returns_result_dict():
    out = solve_puzzle(EASY_PUZZLE)
    assert out["status"] == "solved"
    assert out["solution"] == EASY_SOLUTION


def test_api_solves(client):
    resp = client.post("/api/solve", json={"puzzle": EASY_PUZZLE})
    assert resp.status_code == 200
    assert resp.json()["solution"] == EASY_SOLUTION


def test_api_reports_no_solution_as_normal_response(client):
    resp = client.post("/api/solve", json={"puzzle": "55" + "." * 79})
    assert resp.status_code == 200
    assert resp.json()["status"] == "no-solution"


def test_api_rejects_malformed_puzzle(client):
    resp = client.post("/api/solve", json={"puzzle": "12345"})
    assert resp.status_code == 400


def test_api_node_budget(client):
    resp = client.post("/api/solve", json={"puzzle": "." * 81, "max_nodes": 1})
    assert resp.status_code == 422


def test_cli_exit_codes(tmp_path):
    assert main([EASY_PUZZLE]) == 0
    assert main(["55" + "." * 79]) == 1
    assert main(["123"]) == 2

    report = tmp_path / "report.csv"
    assert main([EASY_PUZZLE, "--report", str(report)]) == 0
    assert report.exists()
