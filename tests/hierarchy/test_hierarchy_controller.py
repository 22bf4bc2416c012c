from __future__ import annotations

from dataclasses import dataclass, field

import mysql.connector
import pytest
from flask import Flask

from org_hierarchy.container import Container
from org_hierarchy.employees.model import EmployeeRecord
from org_hierarchy.hierarchy.controller import register
from org_hierarchy.hierarchy.json_hierarchy_repository import JsonFileHierarchyRepository
from org_hierarchy.hierarchy.model import HierarchySnapshot
from org_hierarchy.hierarchy.service import HierarchyService


@dataclass
class SwitchableSource:
    employees: list[EmployeeRecord]
    fail: bool = False
    fetches: int = field(default=0)

    def fetch(self) -> HierarchySnapshot:
        self.fetches += 1
        if self.fail:
            raise mysql.connector.Error("connection refused")
        return HierarchySnapshot(employees=self.employees, organization="Acme")


@pytest.fixture
def source(field_sales_team):
    return SwitchableSource(list(field_sales_team))


@pytest.fixture
def client(source):
    app = Flask(__name__)
    app.secret_key = "test-secret"
    register(app, Container(conn=None, hierarchy_repo=source, hierarchy_service=HierarchyService(source)))
    return app.test_client()


def test_first_load_seeds_two_levels(client):
    res = client.get("/api/org-hierarchy")

    assert res.status_code == 200
    body = res.get_json()
    assert body["success"] is True
    data = body["data"]
    assert data["organization"] == "Acme"
    assert data["totalEmployees"] == 4
    assert [n["_id"] for n in data["hierarchy"]] == ["alice"]
    assert data["expanded"] == ["alice", "bob", "carol"]
    assert data["stats"] == {"nodes": 4, "roots": 1, "maxDepth": 2}


def test_toggle_is_kept_across_requests(client):
    res = client.post("/api/org-hierarchy/toggle/bob")
    assert res.get_json()["data"] == {"id": "bob", "expanded": False, "expandedIds": ["alice", "carol"]}

    data = client.get("/api/org-hierarchy").get_json()["data"]
    assert data["expanded"] == ["alice", "carol"]

    res = client.post("/api/org-hierarchy/toggle/bob")
    assert res.get_json()["data"]["expanded"] is True


def test_expand_all_and_collapse_all(client):
    res = client.post("/api/org-hierarchy/expand-all")
    assert res.get_json()["data"]["expandedIds"] == ["alice", "bob", "carol", "dan"]

    res = client.post("/api/org-hierarchy/collapse-all")
    assert res.get_json()["data"]["expandedIds"] == []

    # same snapshot, so the collapsed state is not re-seeded
    assert client.get("/api/org-hierarchy").get_json()["data"]["expanded"] == []


def test_new_snapshot_reseeds_expansion(client, source, make_employee):
    client.post("/api/org-hierarchy/collapse-all")

    source.employees = source.employees + [make_employee("erin", "alice")]
    data = client.get("/api/org-hierarchy").get_json()["data"]

    assert data["expanded"] == ["alice", "bob", "carol", "erin"]


def test_whitespace_node_id_is_rejected(client):
    res = client.post("/api/org-hierarchy/toggle/%20%20")

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_upstream_failure_returns_502(client, source):
    source.fail = True

    res = client.get("/api/org-hierarchy")

    assert res.status_code == 502
    assert res.get_json() == {"success": False, "message": "Failed to fetch organization hierarchy."}
    assert client.post("/api/org-hierarchy/expand-all").status_code == 502


@pytest.mark.parametrize(
    "content",
    [
        b'{"employees": [], "totalEmployees": "n/a"}',
        b'{"employees": [{"_id": "\xff"}]}',
    ],
)
def test_unreadable_json_document_returns_502(tmp_path, content):
    path = tmp_path / "org.json"
    path.write_bytes(content)
    repo = JsonFileHierarchyRepository(path)
    app = Flask(__name__)
    app.secret_key = "test-secret"
    register(app, Container(conn=None, hierarchy_repo=repo, hierarchy_service=HierarchyService(repo)))

    res = app.test_client().get("/api/org-hierarchy")

    assert res.status_code == 502
    assert res.get_json()["success"] is False


def test_supervisor_listing(client):
    res = client.get("/api/org-hierarchy/supervisors")

    rows = {r["_id"]: r for r in res.get_json()["data"]}
    assert rows["alice"]["reportsTo"] == "Not Applicable"
    assert rows["carol"]["reportsTo"] == "Alice, Bob"
    assert rows["dan"]["supervisorRoles"] == "User"


def test_create_app_with_testing_settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.delenv("HIERARCHY_SOURCE", raising=False)
    monkeypatch.delenv("HIERARCHY_JSON_PATH", raising=False)
    from org_hierarchy.main import create_app

    app = create_app()
    data = app.test_client().get("/api/org-hierarchy").get_json()["data"]

    assert data["organization"] == "Northwind Field Sales"
    assert [n["_id"] for n in data["hierarchy"]] == ["e1", "e7"]
    assert data["expanded"] == ["e1", "e2", "e3", "e7"]
