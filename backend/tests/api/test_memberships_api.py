from datetime import datetime, timedelta, timezone

from conftest import GYM_PAYLOAD


def _iso(dt: datetime) -> str:
    return dt.isoformat()


def _create(client, member_id, plan_id, start, end, **extra):
    return client.post(
        f"/api/members/{member_id}/memberships",
        json={"planId": plan_id, "startDate": _iso(start), "endDate": _iso(end), **extra},
    )


def test_membership_crud(owner_client, plan, member):
    start = datetime(2026, 1, 1, tzinfo=timezone.utc)
    resp = _create(owner_client, member["id"], plan["id"], start, start + timedelta(days=31))
    assert resp.status_code == 201
    ms = resp.json()
    assert ms["status"] == "active"
    assert ms["memberId"] == member["id"]
    assert ms["startDate"].startswith("2026-01-01T00:00:00")

    updated = owner_client.put(f"/api/memberships/{ms['id']}", json={"status": "cancelled"})
    assert updated.status_code == 200
    assert updated.json()["status"] == "cancelled"

    assert owner_client.put(f"/api/memberships/{ms['id']}", json={"status": "paused"}).status_code == 400

    assert owner_client.delete(f"/api/memberships/{ms['id']}").status_code == 204
    assert owner_client.get(f"/api/memberships/{ms['id']}").status_code == 404


def test_end_must_be_after_start(owner_client, plan, member):
    start = datetime(2026, 1, 1, tzinfo=timezone.utc)
    resp = _create(owner_client, member["id"], plan["id"], start, start)
    assert resp.status_code == 400
    assert "endDate must be after startDate" in resp.json()["message"]

    ms = _create(owner_client, member["id"], plan["id"], start, start + timedelta(days=30)).json()
    resp = owner_client.put(f"/api/memberships/{ms['id']}", json={"endDate": "2025-12-01T00:00:00Z"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "endDate must be after startDate"}


def test_plan_must_belong_to_members_gym(owner_client, member, plan):
    other_gym = owner_client.post("/api/gyms", json={**GYM_PAYLOAD, "name": "Second Gym"}).json()
    foreign_plan = owner_client.post(
        f"/api/gyms/{other_gym['id']}/plans",
        json={"name": "Annual", "duration": 12, "price": 12000, "type": "annual"},
    ).json()

    start = datetime(2026, 1, 1, tzinfo=timezone.utc)
    resp = _create(owner_client, member["id"], foreign_plan["id"], start, start + timedelta(days=365))
    assert resp.status_code == 400
    assert resp.json() == {"message": "Plan not found in this gym"}

    ms = _create(owner_client, member["id"], plan["id"], start, start + timedelta(days=30)).json()
    resp = owner_client.put(f"/api/memberships/{ms['id']}", json={"planId": foreign_plan["id"]})
    assert resp.status_code == 400


def test_member_memberships_newest_first(owner_client, plan, member):
    first = datetime(2025, 1, 1, tzinfo=timezone.utc)
    second = datetime(2025, 6, 1, tzinfo=timezone.utc)
    a = _create(owner_client, member["id"], plan["id"], first, first + timedelta(days=30)).json()
    b = _create(owner_client, member["id"], plan["id"], second, second + timedelta(days=30)).json()

    listed = owner_client.get(f"/api/members/{member['id']}/memberships").json()
    assert [m["id"] for m in listed] == [b["id"], a["id"]]


def test_expiring_window(owner_client, gym, plan, member):
    now = datetime.now(timezone.utc)
    soon = _create(owner_client, member["id"], plan["id"], now - timedelta(days=27), now + timedelta(days=3)).json()
    _create(owner_client, member["id"], plan["id"], now - timedelta(days=20), now + timedelta(days=10))
    _create(owner_client, member["id"], plan["id"], now - timedelta(days=28), now + timedelta(days=2), status="expired")
    _create(owner_client, member["id"], plan["id"], now - timedelta(days=40), now - timedelta(days=1))

    resp = owner_client.get(f"/api/gyms/{gym['id']}/memberships/expiring", params={"days": 7})
    assert resp.status_code == 200
    assert [m["id"] for m in resp.json()] == [soon["id"]]

    wider = owner_client.get(f"/api/gyms/{gym['id']}/memberships/expiring", params={"days": 14}).json()
    assert len(wider) == 2

    assert len(owner_client.get(f"/api/gyms/{gym['id']}/memberships").json()) == 4


def test_delete_membership_keeps_payments(owner_client, plan, member):
    start = datetime(2026, 1, 1, tzinfo=timezone.utc)
    ms = _create(owner_client, member["id"], plan["id"], start, start + timedelta(days=30)).json()
    pay = owner_client.post(
        f"/api/members/{member['id']}/payments",
        json={"amount": 1500, "paymentMethod": "card", "membershipId": ms["id"]},
    ).json()
    assert pay["membershipId"] == ms["id"]

    assert owner_client.delete(f"/api/memberships/{ms['id']}").status_code == 204

    kept = owner_client.get(f"/api/payments/{pay['id']}")
    assert kept.status_code == 200
    assert kept.json()["membershipId"] is None


def test_other_owner_cannot_create_membership(other_client, plan, member):
    start = datetime(2026, 1, 1, tzinfo=timezone.utc)
    resp = _create(other_client, member["id"], plan["id"], start, start + timedelta(days=30))
    assert resp.status_code == 403
