def test_plan_crud(owner_client, gym):
    resp = owner_client.post(
        f"/api/gyms/{gym['id']}/plans",
        json={"name": "Half-Year Pro", "description": "Six months", "duration": 6, "price": 7500, "type": "half-yearly"},
    )
    assert resp.status_code == 201
    plan = resp.json()
    assert plan["type"] == "half-yearly"
    assert plan["price"] == 7500.0
    assert plan["gymId"] == gym["id"]

    assert [p["id"] for p in owner_client.get(f"/api/gyms/{gym['id']}/plans").json()] == [plan["id"]]

    updated = owner_client.put(f"/api/plans/{plan['id']}", json={"price": 7000})
    assert updated.status_code == 200
    assert updated.json()["price"] == 7000.0
    assert updated.json()["duration"] == 6

    assert owner_client.delete(f"/api/plans/{plan['id']}").status_code == 204
    resp = owner_client.get(f"/api/plans/{plan['id']}")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Membership plan not found"}


def test_plan_validation(owner_client, gym):
    url = f"/api/gyms/{gym['id']}/plans"
    base = {"name": "Monthly", "duration": 1, "price": 1000, "type": "monthly"}

    assert owner_client.post(url, json={**base, "type": "weekly"}).status_code == 400
    assert owner_client.post(url, json={**base, "duration": 0}).status_code == 400
    assert owner_client.post(url, json={**base, "price": -1}).status_code == 400
    assert owner_client.post(url, json={**base, "price": 0}).status_code == 201


def test_plan_in_use_cannot_be_deleted(owner_client, plan, member):
    owner_client.post(
        f"/api/members/{member['id']}/memberships",
        json={"planId": plan["id"], "startDate": "2026-01-01T00:00:00Z", "endDate": "2026-02-01T00:00:00Z"},
    )
    resp = owner_client.delete(f"/api/plans/{plan['id']}")
    assert resp.status_code == 409
    assert resp.json() == {"message": "Plan is used by 1 membership(s)"}
    assert owner_client.get(f"/api/plans/{plan['id']}").status_code == 200


def test_other_owner_cannot_edit_plan(other_client, plan):
    resp = other_client.put(f"/api/plans/{plan['id']}", json={"price": 1})
    assert resp.status_code == 403
