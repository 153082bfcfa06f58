import pytest
from fastapi.testclient import TestClient

from backend.app.db.base import Base
from backend.app.db.session import engine
from backend.app.main import app


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def register_and_login(client: TestClient, email: str, password: str = "secret") -> str:
    client.post("/auth/register", json={"email": email, "password": password})
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return response.json()["access_token"]


def login(client: TestClient, email: str, password: str = "secret") -> str:
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return response.json()["access_token"]


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def create_staff(client: TestClient, admin_token: str, email: str, role: str = "agent", **extra) -> int:
    payload = {"email": email, "password": "secret", "role": role, **extra}
    response = client.post("/admin/users", json=payload, headers=auth(admin_token))
    assert response.status_code == 201
    return response.json()["id"]


def create_customer(client: TestClient, token: str, name: str, **extra) -> int:
    response = client.post("/customers", json={"name": name, "phone": "01700000000", **extra}, headers=auth(token))
    assert response.status_code == 201
    return response.json()["id"]


def names(response) -> set[str]:
    assert response.status_code == 200
    return {customer["name"] for customer in response.json()["customers"]}


@pytest.fixture
def office():
    """A super admin, an admin, two agents and customers spread between them."""
    client = TestClient(app)
    super_token = register_and_login(client, "super@example.com")
    create_staff(client, super_token, "admin@example.com", role="admin")
    agent_a = create_staff(client, super_token, "a@example.com")
    create_staff(client, super_token, "b@example.com")
    token_a = login(client, "a@example.com")
    token_b = login(client, "b@example.com")

    create_customer(client, super_token, "assigned to a", assignedAgentId=agent_a)
    create_customer(client, token_a, "added by a")
    create_customer(client, token_b, "added by b")
    create_customer(client, super_token, "unassigned")
    return {
        "client": client,
        "super": super_token,
        "admin": login(client, "admin@example.com"),
        "a": token_a,
        "b": token_b,
        "agent_a": agent_a,
    }


def test_agent_lists_only_assigned_or_self_added(office):
    client = office["client"]
    for path in ("/customers", "/customers/my/customers"):
        assert names(client.get(path, headers=auth(office["a"]))) == {"assigned to a", "added by a"}
        assert names(client.get(path, headers=auth(office["b"]))) == {"added by b"}


def test_agent_never_receives_foreign_records(office):
    client = office["client"]
    response = client.get("/customers/my/customers", params={"limit": 100}, headers=auth(office["a"]))
    for customer in response.json()["customers"]:
        assigned = customer["assigned_agent"]["id"] if customer["assigned_agent"] else None
        assert office["agent_a"] in (assigned, customer["added_by"]["id"])


def test_agent_source_filter(office):
    client = office["client"]
    headers = auth(office["a"])
    assigned = client.get("/customers/my/customers", params={"sourceFilter": "assigned"}, headers=headers)
    assert names(assigned) == {"assigned to a"}
    self_added = client.get("/customers/my/customers", params={"sourceFilter": "self-added"}, headers=headers)
    assert names(self_added) == {"added by a"}


def test_agent_rejects_admin_source_filter(office):
    client = office["client"]
    response = client.get("/customers", params={"sourceFilter": "agent-added"}, headers=auth(office["a"]))
    assert response.status_code == 422


def test_admin_sees_everything_and_agent_added_filter(office):
    client = office["client"]
    everything = {"assigned to a", "added by a", "added by b", "unassigned"}
    assert names(client.get("/customers", headers=auth(office["admin"]))) == everything
    assert names(client.get("/customers", params={"sourceFilter": "all"}, headers=auth(office["admin"]))) == everything
    agent_added = client.get("/customers", params={"sourceFilter": "agent-added"}, headers=auth(office["admin"]))
    assert names(agent_added) == {"added by a", "added by b"}


def test_foreign_view_is_super_admin_only(office):
    client = office["client"]
    assert client.get("/customers/foreign/customers", headers=auth(office["a"])).status_code == 403
    assert client.get("/customers/foreign/customers", headers=auth(office["admin"])).status_code == 403

    foreign = client.get("/customers/foreign/customers", headers=auth(office["super"]))
    # Everything the super admin neither added nor is assigned to
    assert names(foreign) == {"added by a", "added by b"}


def test_foreign_view_excludes_callers_own_zone():
    client = TestClient(app)
    super_token = register_and_login(client, "super@example.com")
    client.patch(
        "/admin/users/1",
        json={"assigned_zone": "Zone 5: North & North-East Dhaka"},
        headers=auth(super_token),
    )
    create_staff(client, super_token, "agent@example.com")
    agent_token = login(client, "agent@example.com")
    create_customer(client, agent_token, "in my zone", zone="Zone 5: North & North-East Dhaka")
    create_customer(client, agent_token, "elsewhere", zone="Zone 1: South-East Dhaka")
    create_customer(client, agent_token, "no zone")

    foreign = client.get("/customers/foreign/customers", headers=auth(super_token))
    assert names(foreign) == {"elsewhere", "no zone"}


def test_closed_customers_leave_active_listings(office):
    client = office["client"]
    mine = client.get("/customers/my/customers", headers=auth(office["a"])).json()["customers"]
    target = next(c for c in mine if c["name"] == "added by a")
    close = client.put(f"/customers/{target['id']}/agent-close", json={"reason": "Bought elsewhere"}, headers=auth(office["a"]))
    assert close.status_code == 200

    assert names(client.get("/customers/my/customers", headers=auth(office["a"]))) == {"assigned to a"}
    closed = client.get("/customers/my/customers", params={"closed": True}, headers=auth(office["a"]))
    assert names(closed) == {"added by a"}


def test_agent_can_read_unassigned_customer_but_not_other_agents(office):
    client = office["client"]
    listing = client.get("/customers", headers=auth(office["super"])).json()["customers"]
    by_name = {c["name"]: c["id"] for c in listing}

    assert client.get(f"/customers/{by_name['unassigned']}", headers=auth(office["b"])).status_code == 200
    assert client.get(f"/customers/{by_name['assigned to a']}", headers=auth(office["b"])).status_code == 403
