"""Tests for the Flask editor bridge."""

from __future__ import annotations

import sys

import pytest

from leetlocal.config import Config
from leetlocal.web.app import app

SOURCE = """\
# @lc app=leetcode id=1 lang=python3
class Solution:
    def add(self, a, b):
        return a + b
"""


@pytest.fixture
def client():
    app.config["TESTING"] = True
    app.config["LEETLOCAL_CONFIG"] = Config(
        python_commands=[sys.executable], shortcuts=["submit", "runlocal"]
    )
    with app.test_client() as client:
        yield client
    app.config.pop("LEETLOCAL_CONFIG", None)


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_shortcuts(client):
    assert client.get("/shortcuts").get_json() == {"shortcuts": ["submit", "runlocal"]}


def test_run_completed(client, tmp_path):
    path = tmp_path / "1.add.py"
    path.write_text(SOURCE, encoding="utf-8")
    resp = client.post("/run", json={"file_path": str(path), "input": "[1, 2]"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["status"] == "completed"
    assert "Output: 3" in data["result"]
    assert data["error"] == ""
    assert data["log"][0] == "Running local test for 1..."
    assert data["notifications"][0]["level"] == "info"


def test_run_failed(client, tmp_path):
    path = tmp_path / "x.rs"
    path.write_text("// @lc app=leetcode id=5 lang=rust\n")
    resp = client.post("/run", json={"file_path": str(path), "input": "1"})
    assert resp.status_code == 422
    data = resp.get_json()
    assert data["status"] == "failed"
    assert "rust" in data["error"]
    assert data["log"][-1].startswith("Error: ")


@pytest.mark.parametrize(
    "payload",
    [{}, {"input": "1"}, {"file_path": "/tmp/x.py"}, {"file_path": "/tmp/x.py", "input": ""}],
)
def test_run_requires_fields(client, payload):
    resp = client.post("/run", json=payload)
    assert resp.status_code == 400
    assert "required" in resp.get_json()["error"]


@pytest.mark.parametrize("body", [["/tmp/x.py", "1"], "just a string", 42])
def test_run_rejects_non_object_body(client, body):
    resp = client.post("/run", json=body)
    assert resp.status_code == 400
    assert "JSON object" in resp.get_json()["error"]


@pytest.mark.parametrize("file_path", [123, ["/tmp/x.py"], {"path": "/tmp/x.py"}])
def test_run_rejects_non_string_file_path(client, file_path):
    resp = client.post("/run", json={"file_path": file_path, "input": "1"})
    assert resp.status_code == 400
    assert "file_path is required" in resp.get_json()["error"]
