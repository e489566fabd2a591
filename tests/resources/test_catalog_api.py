from __future__ import annotations

import base64


def test_index_route(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert b"running" in resp.data


def test_category_lifecycle(client, realtime):
    created = client.post("/api/categories", json={"name": "Programming"})
    assert created.status_code == 201
    category_id = created.get_json()["id"]

    listed = client.get("/api/categories").get_json()
    assert [c["name"] for c in listed] == ["Programming"]

    renamed = client.put(f"/api/categories/{category_id}", json={"name": "Coding"})
    assert renamed.get_json() == {"id": category_id, "name": "Coding"}
    assert realtime.data["categories"][category_id]["name"] == "Coding"
    assert "updatedAt" in realtime.data["categories"][category_id]

    assert client.delete(f"/api/categories/{category_id}").status_code == 200
    assert client.get("/api/categories").get_json() == []


def test_category_requires_name(client):
    resp = client.post("/api/categories", json={})

    assert resp.status_code == 400


def test_course_create_and_detail_converts_image(client):
    raw = base64.b64encode(b"fake-image").decode()
    created = client.post("/api/courses", json={"title": "Python 101", "fees": "4999", "courseImage": raw})

    assert created.status_code == 201
    course_id = created.get_json()["id"]
    assert created.get_json()["fees"] == 4999.0

    detail = client.get(f"/api/courses/{course_id}").get_json()
    assert detail["imageUrl"] == f"data:image/jpeg;base64,{raw}"
    assert "imageBase64" not in detail


def test_course_image_too_large_is_rejected(client):
    big = "data:image/png;base64," + "A" * (3 * 1024 * 1024)

    resp = client.post("/api/courses", json={"title": "Python 101", "courseImage": big})

    assert resp.status_code == 400
    assert "less than 2MB" in resp.get_json()["message"]


def test_course_update_keeps_image_when_not_supplied(client, documents):
    course_id = client.post("/api/courses", json={"title": "Python 101", "courseImage": "abcd"}).get_json()["id"]

    resp = client.put(f"/api/courses/{course_id}", json={"title": "Python 102", "fees": 10})

    assert resp.status_code == 200
    stored = documents.collections["courses"][course_id]
    assert stored["title"] == "Python 102"
    assert stored["imageBase64"] == "abcd"


def test_missing_course_is_404(client):
    assert client.get("/api/courses/nope").status_code == 404
    assert client.put("/api/courses/nope", json={"title": "x"}).status_code == 404


def test_meet_links(client):
    empty = client.get("/api/meetlinks/all").get_json()
    assert empty == {"status": False, "message": "No meet links available", "data": []}

    bad = client.post("/api/courses/meet", json={"courseId": "c1"})
    assert bad.status_code == 400

    ok = client.post("/api/courses/meet", json={"courseId": "c1", "courseTitle": "Python", "meetLink": "https://meet/x"})
    assert ok.status_code == 200

    links = client.get("/api/meetlinks/all").get_json()
    assert links["status"] is True
    assert links["data"][0]["meetLink"] == "https://meet/x"


def test_notifications(client):
    assert client.get("/api/notifications").get_json() == []

    created = client.post("/api/notifications", json={"message": "Classes resume Monday"})
    assert created.status_code == 201
    notification_id = created.get_json()["id"]

    client.put(f"/api/notifications/{notification_id}", json={"message": "Classes resume Tuesday"})
    listed = client.get("/api/notifications").get_json()
    assert listed[0]["message"] == "Classes resume Tuesday"

    client.delete(f"/api/notifications/{notification_id}")
    assert client.get("/api/notifications").get_json() == []


def test_help_requests_newest_first(client, container, fixed_now):
    container.help_request_service.create({"name": "A", "concern": "older"}, now=fixed_now.replace(hour=8))
    container.help_request_service.create({"name": "B", "concern": "newer"}, now=fixed_now)

    listed = client.get("/api/help-requests").get_json()

    assert [r["concern"] for r in listed] == ["newer", "older"]
    assert listed[0]["status"] == "pending"


def test_help_request_delete_missing_is_404(client):
    assert client.delete("/api/help-requests/nope").status_code == 404
