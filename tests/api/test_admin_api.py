# tests/api/test_admin_api.py

import pytest

from party_invite.models import FoodChoice, Invite

from ..conftest import ADMIN_EMAIL, ADMIN_PASSWORD


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/api/admin/event"),
        ("put", "/api/admin/event"),
        ("get", "/api/admin/food-choices"),
        ("post", "/api/admin/food-choices"),
        ("put", "/api/admin/food-choices/1"),
        ("delete", "/api/admin/food-choices/1"),
        ("get", "/api/admin/invites"),
        ("post", "/api/admin/invites/import"),
        ("get", "/api/admin/rsvps"),
        ("get", "/api/admin/metrics"),
    ],
)
def test_admin_routes_require_a_token(client, method, path):
    response = getattr(client, method)(path)

    assert response.status_code == 401
    assert response.json()["detail"] == "Missing authorization"


def test_invalid_token_is_rejected(client):
    response = client.get(
        "/api/admin/metrics", headers={"Authorization": "Bearer not-a-token"}
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid token"


def test_login_returns_a_working_token(client, admin):
    response = client.post(
        "/api/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["expires_in"] == 7 * 24 * 60 * 60

    metrics = client.get(
        "/api/admin/metrics", headers={"Authorization": f"Bearer {body['token']}"}
    )
    assert metrics.status_code == 200


def test_login_failures(client, admin):
    wrong = client.post(
        "/api/admin/login", json={"email": ADMIN_EMAIL, "password": "nope"}
    )
    missing = client.post("/api/admin/login", json={"email": ADMIN_EMAIL})

    assert wrong.status_code == 401
    assert wrong.json()["detail"] == "Invalid credentials"
    assert missing.status_code == 400


def test_update_event_settings(client, admin_headers):
    event = {
        "title": "Sam's 6th Birthday",
        "event_date": "Saturday 12 July",
        "party_time": "2pm - 4pm",
        "intro_text": "Come and bounce!",
        "location": "Village Hall",
    }

    response = client.put("/api/admin/event", json=event, headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["title"] == event["title"]
    assert client.get("/api/event").json()["location"] == "Village Hall"

    incomplete = client.put(
        "/api/admin/event", json={**event, "location": ""}, headers=admin_headers
    )
    assert incomplete.status_code == 400
    assert incomplete.json()["detail"] == "Missing event details"


def test_food_choice_management(client, admin_headers):
    created = client.post(
        "/api/admin/food-choices", json={"label": "Nuggets"}, headers=admin_headers
    )
    assert created.status_code == 200
    choice = created.json()
    assert choice["active"] is True

    updated = client.put(
        f"/api/admin/food-choices/{choice['id']}",
        json={"label": "Veggie nuggets", "active": False},
        headers=admin_headers,
    )
    assert updated.json() == {"id": choice["id"], "label": "Veggie nuggets", "active": False}

    listed = client.get("/api/admin/food-choices", headers=admin_headers).json()
    assert [c["label"] for c in listed] == ["Veggie nuggets"]
    assert client.get("/api/food-choices").json() == []

    deleted = client.delete(f"/api/admin/food-choices/{choice['id']}", headers=admin_headers)
    assert deleted.json() == {"ok": True}
    assert client.get("/api/admin/food-choices", headers=admin_headers).json() == []


def test_food_choice_errors(client, admin_headers):
    assert (
        client.post("/api/admin/food-choices", json={}, headers=admin_headers).status_code
        == 400
    )
    assert (
        client.put(
            "/api/admin/food-choices/99", json={"active": True}, headers=admin_headers
        ).status_code
        == 404
    )
    assert client.delete("/api/admin/food-choices/99", headers=admin_headers).status_code == 404


def test_deleting_a_chosen_food_is_a_conflict(client, db_session, food_choices, admin_headers):
    client.post(
        "/api/rsvp",
        json={
            "invite_name_entered": "Alex",
            "children": [{"child_name": "Sam", "food_choice_id": food_choices["Pizza"]}],
        },
    )

    response = client.delete(
        f"/api/admin/food-choices/{food_choices['Pizza']}", headers=admin_headers
    )

    assert response.status_code == 409
    assert db_session.get(FoodChoice, food_choices["Pizza"]) is not None


def test_import_invites_upload(client, db_session, admin_headers):
    files = {"file": ("invites.csv", b"invite_name,phone\nJordan,0711\n,0722", "text/csv")}

    response = client.post("/api/admin/invites/import", files=files, headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert (body["inserted"], body["skipped"]) == (1, 1)

    again = client.post("/api/admin/invites/import", files=files, headers=admin_headers)
    assert (again.json()["inserted"], again.json()["skipped"]) == (0, 2)

    invites = client.get("/api/admin/invites", headers=admin_headers).json()
    assert [(i["invite_name"], i["phone"]) for i in invites] == [("Jordan", "0711")]
    assert db_session.query(Invite).count() == 1


def test_import_without_file_is_rejected(client, admin_headers):
    response = client.post("/api/admin/invites/import", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "Missing file"


def test_rsvp_listing_includes_children(client, food_choices, admin_headers):
    client.post(
        "/api/rsvp",
        json={
            "invite_name_entered": "Alex",
            "phone": "0700000000",
            "children": [
                {"child_name": "Alex", "food_choice_id": 1},
                {
                    "child_name": "Sam",
                    "food_choice_id": 2,
                    "has_dietary_requirements": True,
                    "dietary_requirements": "No dairy",
                },
            ],
        },
    )

    rsvps = client.get("/api/admin/rsvps", headers=admin_headers).json()

    assert len(rsvps) == 1
    assert rsvps[0]["invite_name_entered"] == "Alex"
    assert [
        (c["child_name"], c["food_choice_label"], c["dietary_requirements"])
        for c in rsvps[0]["children"]
    ] == [("Alex", "Pizza", None), ("Sam", "Pasta", "No dairy")]


def test_metrics_with_no_responses(client, food_choices, admin_headers):
    response = client.get("/api/admin/metrics", headers=admin_headers)

    assert response.json() == {
        "invited": 0,
        "rsvps": 0,
        "foodTotals": [
            {"id": 1, "label": "Pizza", "count": 0},
            {"id": 2, "label": "Pasta", "count": 0},
        ],
    }


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["database"] is True


def test_import_reports_malformed_rows_and_keeps_going(client, admin_headers):
    data = f"invite_name,phone\nJordan,0711\n{'J' * 201},0722\nAlex,0733\n".encode()
    files = {"file": ("invites.csv", data, "text/csv")}

    response = client.post("/api/admin/invites/import", files=files, headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert (body["inserted"], body["skipped"], body["malformed"]) == (2, 1, 1)
