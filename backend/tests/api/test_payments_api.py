def _pay(client, member_id, **payload):
    return client.post(f"/api/members/{member_id}/payments", json=payload)


def test_record_payment_defaults(owner_client, member):
    resp = _pay(owner_client, member["id"], amount=1500, paymentMethod="upi", reference="UPI-123")
    assert resp.status_code == 201
    pay = resp.json()
    assert pay["status"] == "paid"
    assert pay["membershipId"] is None
    assert pay["paymentDate"]
    assert pay["reference"] == "UPI-123"


def test_zero_amount_is_allowed_negative_is_not(owner_client, member):
    assert _pay(owner_client, member["id"], amount=0, paymentMethod="cash").status_code == 201

    resp = _pay(owner_client, member["id"], amount=-5, paymentMethod="cash")
    assert resp.status_code == 400
    assert "amount" in resp.json()["message"]


def test_payment_enums_are_checked(owner_client, member):
    assert _pay(owner_client, member["id"], amount=10, paymentMethod="bitcoin").status_code == 400
    assert _pay(owner_client, member["id"], amount=10, paymentMethod="cash", status="refunded").status_code == 400
    assert _pay(owner_client, member["id"], amount=10, paymentMethod="cheque", status="pending").status_code == 201


def test_payments_newest_first(owner_client, gym, member):
    old = _pay(owner_client, member["id"], amount=100, paymentMethod="cash", paymentDate="2026-01-05T10:00:00Z").json()
    new = _pay(owner_client, member["id"], amount=200, paymentMethod="cash", paymentDate="2026-02-05T10:00:00Z").json()

    by_member = owner_client.get(f"/api/members/{member['id']}/payments").json()
    assert [p["id"] for p in by_member] == [new["id"], old["id"]]

    by_gym = owner_client.get(f"/api/gyms/{gym['id']}/payments").json()
    assert [p["id"] for p in by_gym] == [new["id"], old["id"]]


def test_payment_membership_must_be_members_own(owner_client, gym, plan, member):
    other = owner_client.post(
        f"/api/gyms/{gym['id']}/members", json={"name": "Ravi Kumar", "phone": "9876500000"}
    ).json()
    ms = owner_client.post(
        f"/api/members/{other['id']}/memberships",
        json={"planId": plan["id"], "startDate": "2026-01-01T00:00:00Z", "endDate": "2026-02-01T00:00:00Z"},
    ).json()

    resp = _pay(owner_client, member["id"], amount=1500, paymentMethod="cash", membershipId=ms["id"])
    assert resp.status_code == 400
    assert resp.json() == {"message": "Membership not found for this member"}


def test_update_and_delete_payment(owner_client, member):
    pay = _pay(owner_client, member["id"], amount=1500, paymentMethod="cash", status="pending").json()

    updated = owner_client.put(f"/api/payments/{pay['id']}", json={"status": "paid", "amount": 1400})
    assert updated.status_code == 200
    assert updated.json()["status"] == "paid"
    assert updated.json()["amount"] == 1400.0

    assert owner_client.put(f"/api/payments/{pay['id']}", json={"amount": None}).status_code == 400

    assert owner_client.delete(f"/api/payments/{pay['id']}").status_code == 204
    resp = owner_client.get(f"/api/payments/{pay['id']}")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Payment not found"}


def test_other_owner_cannot_read_payment(owner_client, other_client, member):
    pay = _pay(owner_client, member["id"], amount=1500, paymentMethod="cash").json()
    assert other_client.get(f"/api/payments/{pay['id']}").status_code == 403
    assert other_client.get(f"/api/members/{member['id']}/payments").status_code == 403
