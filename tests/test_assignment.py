from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from backend.app.db.base import Base
from backend.app.db.session import engine
from backend.app.main import app
from backend.app.services.assignment import eligible_agents

ZONE_5 = "Zone 5: North & North-East Dhaka"


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def register_and_login(client: TestClient, email: str, password: str) -> str:
    client.post("/auth/register", json={"email": email, "password": password})
    resp = client.post("/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200
    return resp.json()["access_token"]


def agent(name, zone=None, thana=None, is_active=True):
    return SimpleNamespace(name=name, assigned_zone=zone, assigned_thana=thana, is_active=is_active)


@pytest.fixture
def pool():
    return [
        agent("gulshan", ZONE_5, "Gulshan"),
        agent("banani", ZONE_5, "Banani"),
        agent("zone only", ZONE_5),
        agent("old dhaka", "Zone 2: South Dhaka Core (Old Dhaka)", "Lalbagh Thana"),
        agent("retired", ZONE_5, "Gulshan", is_active=False),
        agent("floater"),
    ]


def names(agents):
    return [a.name for a in agents]


def test_zone_and_thana_narrow_to_exact_match(pool):
    assert names(eligible_agents(pool, ZONE_5, "Gulshan")) == ["gulshan"]


def test_zone_only_returns_everyone_in_zone(pool):
    assert names(eligible_agents(pool, ZONE_5)) == ["gulshan", "banani", "zone only"]


def test_no_filter_returns_all_active_agents(pool):
    assert names(eligible_agents(pool)) == ["gulshan", "banani", "zone only", "old dhaka", "floater"]
    assert names(eligible_agents(pool, "", "")) == names(eligible_agents(pool))


def test_matching_is_plain_string_equality(pool):
    assert eligible_agents(pool, "zone 5: north & north-east dhaka") == []
    assert eligible_agents(pool, ZONE_5, "Gulshan ") == []


def test_inactive_agents_are_never_eligible(pool):
    assert "retired" not in names(eligible_agents(pool, ZONE_5, "Gulshan"))


def test_empty_pool_is_not_an_error():
    assert eligible_agents([], ZONE_5, "Gulshan") == []


def test_eligible_agents_endpoint():
    client = TestClient(app)
    token = register_and_login(client, "super@example.com", "secret")
    headers = {"Authorization": f"Bearer {token}"}
    for email, zone, thana in [
        ("gulshan@example.com", ZONE_5, "Gulshan"),
        ("banani@example.com", ZONE_5, "Banani"),
        ("lalbagh@example.com", "Zone 2: South Dhaka Core (Old Dhaka)", "Lalbagh Thana"),
    ]:
        resp = client.post(
            "/admin/users",
            json={"email": email, "password": "secret", "assigned_zone": zone, "assigned_thana": thana},
            headers=headers,
        )
        assert resp.status_code == 201

    resp = client.get("/agents/eligible", params={"zone": ZONE_5, "thana": "Gulshan"}, headers=headers)
    assert resp.status_code == 200
    assert [a["email"] for a in resp.json()] == ["gulshan@example.com"]

    resp = client.get("/agents/eligible", params={"zone": ZONE_5}, headers=headers)
    assert {a["email"] for a in resp.json()} == {"gulshan@example.com", "banani@example.com"}

    # Super admins can hold customers too, so an unfiltered pool includes them
    resp = client.get("/agents/eligible", headers=headers)
    assert "super@example.com" in [a["email"] for a in resp.json()]
    assert len(resp.json()) == 4
