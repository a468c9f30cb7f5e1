def test_staff_crud(owner_client, gym):
    resp = owner_client.post(
        f"/api/gyms/{gym['id']}/staff",
        json={"name": "Neha Joshi", "email": "neha@example.com", "position": "Front Desk", "salary": 18000},
    )
    assert resp.status_code == 201
    staff = resp.json()
    assert staff["position"] == "Front Desk"
    assert staff["salary"] == 18000.0
    assert staff["phone"] is None

    listed = owner_client.get(f"/api/gyms/{gym['id']}/staff").json()
    assert [s["id"] for s in listed] == [staff["id"]]

    updated = owner_client.put(f"/api/staff/{staff['id']}", json={"position": "Manager", "salary": None})
    assert updated.status_code == 200
    assert updated.json()["position"] == "Manager"
    assert updated.json()["salary"] is None

    assert owner_client.put(f"/api/staff/{staff['id']}", json={"position": None}).status_code == 400

    assert owner_client.delete(f"/api/staff/{staff['id']}").status_code == 204
    resp = owner_client.get(f"/api/staff/{staff['id']}")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Staff member not found"}


def test_staff_requires_position(owner_client, gym):
    resp = owner_client.post(f"/api/gyms/{gym['id']}/staff", json={"name": "A", "email": "a@example.com"})
    assert resp.status_code == 400
    assert "position" in resp.json()["message"]


def test_other_owner_cannot_see_staff(owner_client, other_client, gym):
    staff = owner_client.post(
        f"/api/gyms/{gym['id']}/staff",
        json={"name": "Vikram Shah", "email": "vikram@example.com", "position": "Trainer"},
    ).json()
    assert other_client.get(f"/api/staff/{staff['id']}").status_code == 403
    assert other_client.get(f"/api/gyms/{gym['id']}/staff").status_code == 403
