import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from teamforge.api.main import app
from teamforge.roster.seed import seed_demo_roster
from teamforge.roster.store import roster_store


@pytest_asyncio.fixture
async def client():
    seed_demo_roster(roster_store)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        yield http
    roster_store.clear()


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_build_proposes_a_scrum_team(client):
    response = await client.post("/api/allocation/build", json={"team_size": 5, "team_count": 1})

    assert response.status_code == 200
    (team,) = response.json()
    assert team["scrum_master"]["id"] == 7
    assert team["product_owner"]["id"] == 8
    assert [dev["id"] for dev in team["developers"]] == [9, 10, 11]

    # Building is a proposal only.
    unallocated = await client.get("/api/teams/unallocated")
    assert [person["id"] for person in unallocated.json()] == [2, 4, 7, 8, 9, 10, 11]


@pytest.mark.asyncio
async def test_build_ignores_repeated_employee_ids(client):
    response = await client.post(
        "/api/allocation/build",
        json={"team_size": 5, "team_count": 1, "employee_ids": [9, 9, 9, 10]},
    )

    assert response.status_code == 200
    (team,) = response.json()
    assert [member["id"] for member in team["members"]] == [9, 10]


@pytest.mark.asyncio
async def test_employee_availability_tracks_membership(client):
    response = await client.put("/api/employees/1", json={"availability": "Available"})

    assert response.json()["availability"] == "Allocated"
    team = (await client.get("/api/teams/1")).json()
    assert 1 in [member["id"] for member in team["members"]]


@pytest.mark.asyncio
async def test_build_rejects_team_size_below_minimum(client):
    response = await client.post("/api/allocation/build", json={"team_size": 2, "team_count": 1})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_optimize_then_apply(client):
    response = await client.post("/api/allocation/optimize", json={"team_ids": [3]})

    assert response.status_code == 200
    (result,) = response.json()
    assert result["required_skills"] == ["Node.js", "Python", "Java", "API"]
    assert [person["id"] for person in result["suggestions"]] == [4, 2, 7, 8]
    assert result["reasoning"][0] == "Lucas Oliveira fills an important gap in the team (backend)"

    applied = await client.post("/api/allocation/teams/3/apply", json={"employee_ids": [4, 1, 999]})

    assert applied.status_code == 200
    body = applied.json()
    assert body["added"] == [4]
    assert body["skipped"] == [
        {"employee_id": 1, "reason": "allocated_elsewhere"},
        {"employee_id": 999, "reason": "not_found"},
    ]
    assert [member["id"] for member in body["team"]["members"]] == [4]


@pytest.mark.asyncio
async def test_membership_errors_map_to_status_codes(client):
    on_leave = await client.post("/api/teams/3/members", json={"employee_id": 12})
    assert on_leave.status_code == 422
    assert on_leave.json()["code"] == "validation_error"

    missing = await client.get("/api/teams/999")
    assert missing.status_code == 404
    assert missing.json()["code"] == "not_found"

    for employee_id in (2, 4, 7, 8):
        response = await client.post("/api/teams/2/members", json={"employee_id": employee_id})
        assert response.status_code == 200

    full = await client.post("/api/teams/2/members", json={"employee_id": 9})
    assert full.status_code == 409
    assert full.json()["code"] == "team_full"


@pytest.mark.asyncio
async def test_employee_crud(client):
    created = await client.post(
        "/api/employees",
        json={"name": "Nina Duarte", "role": "Data Engineer", "skills": ["Spark", {"name": "SQL", "level": "Avançado"}]},
    )
    assert created.status_code == 201
    employee = created.json()
    assert employee["id"] == 13
    assert employee["skills"][1]["level"] == "Advanced"

    updated = await client.put(f"/api/employees/{employee['id']}", json={"department": "Data"})
    assert updated.json()["department"] == "Data"

    deleted = await client.delete(f"/api/employees/{employee['id']}")
    assert deleted.status_code == 204
    assert (await client.get(f"/api/employees/{employee['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_dashboard_and_catalog(client):
    stats = (await client.get("/api/dashboard/stats")).json()
    assert stats["total_employees"] == 12
    assert stats["allocated_percent"] == 33.3

    catalog = (await client.get("/api/skills/scrum-catalog", params={"role": "Scrum Master", "kind": "Hard"})).json()
    assert catalog == {"Scrum Master": ["Advanced Scrum framework knowledge", "Agile tooling", "Agile metrics"]}


@pytest.mark.asyncio
async def test_metrics_exposes_allocation_counters(client):
    await client.post("/api/allocation/build", json={"team_size": 3, "team_count": 1})

    response = await client.get("/api/metrics")

    assert response.status_code == 200
    assert "teamforge_allocation_runs_total" in response.text
