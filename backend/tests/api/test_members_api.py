def test_member_round_trip(owner_client, gym):
    resp = owner_client.post(
        f"/api/gyms/{gym['id']}/members",
        json={
            "name": "Asha Rao",
            "phone": "9000000001",
            "email": "asha@example.com",
            "dateOfBirth": "1995-06-01T00:00:00Z",
            "emergencyContact": "Raj Rao 9000000009",
        },
    )
    assert resp.status_code == 201
    member = resp.json()
    assert member["name"] == "Asha Rao"
    assert member["active"] is True
    assert member["gymId"] == gym["id"]
    assert member["dateOfBirth"].startswith("1995-06-01T00:00:00")

    got = owner_client.get(f"/api/members/{member['id']}").json()
    assert got == member


def test_member_requires_phone(owner_client, gym):
    resp = owner_client.post(f"/api/gyms/{gym['id']}/members", json={"name": "Asha Rao"})
    assert resp.status_code == 400
    assert "phone" in resp.json()["message"]


def test_member_active_filter_and_update(owner_client, gym, member):
    other = owner_client.post(
        f"/api/gyms/{gym['id']}/members",
        json={"name": "Ravi Kumar", "phone": "9876500000", "active": False},
    ).json()

    everyone = owner_client.get(f"/api/gyms/{gym['id']}/members").json()
    assert [m["id"] for m in everyone] == [member["id"], other["id"]]

    active = owner_client.get(f"/api/gyms/{gym['id']}/members", params={"active": "true"}).json()
    assert [m["id"] for m in active] == [member["id"]]

    updated = owner_client.put(f"/api/members/{member['id']}", json={"active": False, "gender": "female"})
    assert updated.status_code == 200
    assert updated.json()["active"] is False
    assert updated.json()["gender"] == "female"
    assert updated.json()["phone"] == "9000000001"

    inactive = owner_client.get(f"/api/gyms/{gym['id']}/members", params={"active": "false"}).json()
    assert {m["id"] for m in inactive} == {member["id"], other["id"]}


def test_delete_member_drops_history(owner_client, plan, member):
    ms = owner_client.post(
        f"/api/members/{member['id']}/memberships",
        json={"planId": plan["id"], "startDate": "2026-01-01T00:00:00Z", "endDate": "2026-02-01T00:00:00Z"},
    ).json()
    pay = owner_client.post(
        f"/api/members/{member['id']}/payments",
        json={"amount": 1500, "paymentMethod": "upi"},
    ).json()

    assert owner_client.delete(f"/api/members/{member['id']}").status_code == 204
    assert owner_client.get(f"/api/members/{member['id']}").status_code == 404
    assert owner_client.get(f"/api/memberships/{ms['id']}").status_code == 404
    assert owner_client.get(f"/api/payments/{pay['id']}").status_code == 404
    # the plan is not owned by the member and survives
    assert owner_client.get(f"/api/plans/{plan['id']}").status_code == 200


def test_other_owner_cannot_see_member(other_client, member):
    resp = other_client.get(f"/api/members/{member['id']}")
    assert resp.status_code == 403
    assert other_client.delete(f"/api/members/{member['id']}").status_code == 403


def test_unknown_member_is_404(owner_client):
    resp = owner_client.get("/api/members/4242")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Member not found"}
