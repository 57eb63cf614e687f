# Standard library imports
import uuid

# Local application imports
from app.settings import settings

API = settings.API_V1_STR


async def report(client, issue_payload, **overrides):
    response = await client.post(f"{API}/issues/", json=issue_payload(**overrides))
    assert response.status_code == 200, response.text
    return response.json()


async def add_note(client, issue_id, content="Residents raised this at the ward meeting.", created_by="neighbour-1"):
    response = await client.post(
        f"{API}/community-notes/",
        json={"content": content, "issue_id": issue_id, "created_by": created_by},
    )
    assert response.status_code == 200, response.text
    return response.json()


async def test_health_check(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_report_issue(client, issue_payload):
    body = await report(client, issue_payload)

    assert body["status"] == "REPORTED"
    assert body["upvotes"] == 0
    assert body["category"] == "POTHOLE"
    assert body["city"] == "Kochi"
    assert uuid.UUID(body["id"])


async def test_report_issue_validation_error_names_field(client, issue_payload):
    response = await client.post(f"{API}/issues/", json=issue_payload(description="short"))

    assert response.status_code == 400
    body = response.json()
    assert body["ok"] is False
    assert body["error"]["code"] == "bad_request"
    assert [detail["field"] for detail in body["error"]["details"]] == ["description"]

    listing = await client.get(f"{API}/issues/")
    assert listing.json() == []


async def test_get_issue_with_notes(client, issue_payload):
    issue = await report(client, issue_payload)
    note = await add_note(client, issue["id"])

    response = await client.get(f"{API}/issues/{issue['id']}")

    assert response.status_code == 200
    assert [n["id"] for n in response.json()["community_notes"]] == [note["id"]]


async def test_get_missing_issue_returns_not_found_envelope(client):
    response = await client.get(f"{API}/issues/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"ok": False, "error": {"code": "not_found", "message": "Issue not found"}}


async def test_invalid_issue_id_is_bad_request(client):
    response = await client.get(f"{API}/issues/not-a-uuid")

    assert response.status_code == 400
    assert response.json()["error"]["details"][0]["field"] == "issue_id"


async def test_list_issues_in_bounds(client, issue_payload):
    inside = await report(client, issue_payload, latitude=20, longitude=75)
    await report(client, issue_payload, latitude=35, longitude=75)

    response = await client.get(
        f"{API}/issues/bounds",
        params={"ne_lat": 30, "ne_lng": 80, "sw_lat": 10, "sw_lng": 70},
    )

    assert response.status_code == 200
    assert [issue["id"] for issue in response.json()] == [inside["id"]]


async def test_list_issues_by_location(client, issue_payload):
    kochi = await report(client, issue_payload, state="Kerala", city="Kochi")
    await report(client, issue_payload, state="Karnataka", city="Mysuru")

    response = await client.get(f"{API}/issues/", params={"state": "Kerala", "city": "Kochi"})

    assert [issue["id"] for issue in response.json()] == [kochi["id"]]


async def test_list_issues_rejects_take_over_limit(client):
    response = await client.get(f"{API}/issues/", params={"take": settings.ISSUES_MAX_TAKE + 1})

    assert response.status_code == 400


async def test_upvote_toggles(client, issue_payload):
    issue = await report(client, issue_payload)
    url = f"{API}/issues/{issue['id']}/upvote"

    first = await client.post(url, json={"user_id": "user-a"})
    second = await client.post(url, json={"user_id": "user-b"})
    undo = await client.post(url, json={"user_id": "user-a"})

    assert [r.json()["upvotes"] for r in (first, second, undo)] == [1, 2, 1]


async def test_upvote_missing_issue(client):
    response = await client.post(f"{API}/issues/{uuid.uuid4()}/upvote", json={"user_id": "user-a"})

    assert response.status_code == 404


async def test_update_status(client, issue_payload):
    issue = await report(client, issue_payload)

    response = await client.patch(f"{API}/issues/{issue['id']}/status", json={"status": "IN_PROGRESS"})

    assert response.status_code == 200
    assert response.json()["status"] == "IN_PROGRESS"


async def test_update_status_rejects_unknown_status(client, issue_payload):
    issue = await report(client, issue_payload)

    response = await client.patch(f"{API}/issues/{issue['id']}/status", json={"status": "CLOSED"})

    assert response.status_code == 400


async def test_community_note_for_missing_issue_is_conflict(client):
    response = await client.post(
        f"{API}/community-notes/",
        json={"content": "Is anyone looking at this?", "issue_id": str(uuid.uuid4()), "created_by": "n-1"},
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "conflict"


async def test_rate_and_list_community_notes(client, issue_payload):
    issue = await report(client, issue_payload)
    plain = await add_note(client, issue["id"], "A note nobody has rated yet.")
    rated = await add_note(client, issue["id"], "A note that people found useful.")

    rate_response = await client.patch(
        f"{API}/community-notes/{rated['id']}/rating",
        json={"rating": "HELPFUL", "is_helpful": True},
    )
    listing = await client.get(f"{API}/community-notes/issue/{issue['id']}")

    assert rate_response.json()["rating"] == "HELPFUL"
    assert rate_response.json()["helpful"] == 1
    assert [note["id"] for note in listing.json()] == [rated["id"], plain["id"]]


async def test_delete_community_note_checks_creator(client, issue_payload):
    issue = await report(client, issue_payload)
    note = await add_note(client, issue["id"], created_by="neighbour-1")
    url = f"{API}/community-notes/{note['id']}"

    forbidden = await client.delete(url, params={"created_by": "neighbour-2"})
    deleted = await client.delete(url, params={"created_by": "neighbour-1"})
    listing = await client.get(f"{API}/community-notes/issue/{issue['id']}")

    assert forbidden.status_code == 403
    assert forbidden.json()["error"]["code"] == "forbidden"
    assert deleted.status_code == 200
    assert listing.json() == []


async def test_issue_analytics(client, issue_payload):
    resolved = await report(client, issue_payload, category="POTHOLE")
    await report(client, issue_payload, category="POTHOLE")
    in_progress = await report(client, issue_payload, category="WATER")
    await client.patch(f"{API}/issues/{resolved['id']}/status", json={"status": "RESOLVED"})
    await client.patch(f"{API}/issues/{in_progress['id']}/status", json={"status": "IN_PROGRESS"})

    response = await client.get(f"{API}/analytics/issues")

    assert response.status_code == 200
    body = response.json()
    assert body["total_issues"] == 3
    assert body["resolved_issues"] == 1
    assert body["categories"] == [
        {"category": "POTHOLE", "total": 2, "resolved": 1, "in_progress": 0, "reported": 1},
        {"category": "WATER", "total": 1, "resolved": 0, "in_progress": 1, "reported": 0},
    ]


async def test_delete_missing_community_note_is_forbidden(client):
    response = await client.delete(f"{API}/community-notes/{uuid.uuid4()}", params={"created_by": "neighbour-1"})

    assert response.status_code == 403
    assert response.json() == {
        "ok": False,
        "error": {"code": "forbidden", "message": "Only the creator of a community note can delete it"},
    }
