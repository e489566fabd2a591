from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

APPLICATION = {
    "applicationId": "APP001",
    "name": "Asha",
    "phone": "9876543210",
    "address": "12 Lake Road",
    "city": "Pune",
    "state": "MH",
    "pincode": "411001",
    "dob": "2001-04-02",
}


def test_application_submit_and_fetch(client, realtime):
    resp = client.post("/api/applications", json=APPLICATION)

    assert resp.status_code == 201
    assert resp.get_json()["data"] == {"applicationId": "APP001"}
    assert "createdAt" in realtime.data["applications"]["APP001"]

    detail = client.get("/api/applications/APP001").get_json()
    assert detail["data"]["name"] == "Asha"
    assert "APP001" in client.get("/api/applications").get_json()["data"]


def test_application_missing_fields(client):
    resp = client.post("/api/applications", json={"applicationId": "APP001", "name": "Asha"})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Missing required fields: phone, address, city, state, pincode, dob"


def test_application_phone_and_pincode_format(client):
    assert client.post("/api/applications", json={**APPLICATION, "phone": "12345"}).get_json()["message"] == "Invalid phone number format"
    assert client.post("/api/applications", json={**APPLICATION, "pincode": "41100"}).get_json()["message"] == "Invalid pincode format"


def test_application_status_update(client, realtime):
    client.post("/api/applications", json=APPLICATION)

    assert client.put("/api/applications/APP001/status", json={"status": "SELECTED"}).status_code == 200
    assert realtime.data["applications"]["APP001"]["status"] == "SELECTED"

    assert client.put("/api/applications/APP001/status", json={"status": "MAYBE"}).status_code == 400
    assert client.put("/api/applications/NOPE/status", json={"status": "REJECTED"}).status_code == 404


def test_list_applications_when_empty(client):
    assert client.get("/api/applications").get_json() == {"success": True, "data": {}}


def test_payments(client, realtime):
    saved = client.post(
        "/api/payments",
        json={"applicationId": "APP001", "courseName": "Python", "name": "Asha", "feeAmount": "1500.50"},
    )
    assert saved.status_code == 200
    assert realtime.data["payments"]["Python"]["APP001"]["feeAmount"] == 1500.5

    patched = client.patch("/api/payments/Python/APP001", json={"feeAmount": 2000})
    assert patched.status_code == 200

    fetched = client.get("/api/payments/Python/APP001").get_json()
    assert fetched["data"]["feeAmount"] == 2000.0
    assert fetched["data"]["name"] == "Asha"


def test_payment_invalid_amount_and_missing(client):
    bad = client.post("/api/payments", json={"applicationId": "APP001", "courseName": "Python", "feeAmount": "abc"})
    assert bad.status_code == 400

    assert client.get("/api/payments/Python/NOPE").status_code == 404


@pytest.mark.parametrize("amount", ["nan", "inf", "-Infinity"])
def test_payment_rejects_non_finite_amount(client, realtime, amount):
    resp = client.post("/api/payments", json={"applicationId": "APP001", "courseName": "Python", "feeAmount": amount})

    assert resp.status_code == 400
    assert "payments" not in realtime.data


def test_admin_login_plain_password(client, realtime):
    realtime.data["AdminLogin"] = {"userid": "admin", "password": "secret"}

    assert client.post("/api/admin/login", json={"userId": "admin", "password": "secret"}).status_code == 200
    denied = client.post("/api/admin/login", json={"userId": "admin", "password": "wrong"})
    assert denied.status_code == 401
    assert denied.get_json()["message"] == "Invalid credentials"


def test_admin_login_hashed_password(client, realtime):
    realtime.data["AdminLogin"] = {"userid": "admin", "password": generate_password_hash("secret")}

    assert client.post("/api/admin/login", json={"userId": "admin", "password": "secret"}).status_code == 200


def test_admin_login_without_configured_admin(client):
    assert client.post("/api/admin/login", json={"userId": "admin", "password": "secret"}).status_code == 401


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/does-not-exist")

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_set_credentials_stores_hash_usable_for_login(client, container, realtime):
    container.admin_auth_service.set_credentials("admin", "s3cret")

    assert realtime.data["AdminLogin"]["password"] != "s3cret"
    assert client.post("/api/admin/login", json={"userId": "admin", "password": "s3cret"}).status_code == 200
