"""
End-to-end tests over HTTP against the assembled application.
"""

import io

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from PIL import Image

from agroscan.api.middleware.error_handling import ErrorHandlingMiddleware

API = "/api/v1"

TOMATO = {
    "plant_name": "Tomato",
    "inspection_date": "2024-05-01T10:00:00Z",
    "country": "Brazil",
    "state": "SP",
    "city": "Campinas",
    "status": "Pending",
    "category": "Vegetable",
}


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


async def register(client, email, first_name="Ana", last_name="Lee", password="Secret123"):
    response = await client.post(
        f"{API}/auth/register",
        json={"first_name": first_name, "last_name": last_name, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    return response.json()


async def create_inspection(client, token, **overrides):
    response = await client.post(f"{API}/inspections", json={**TOMATO, **overrides}, headers=bearer(token))
    assert response.status_code == 201, response.text
    return response.json()


async def test_health(client):
    response = await client.get(f"{API}/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["components"]["database"]["status"] == "healthy"
    assert "X-Request-ID" in response.headers


async def test_request_id_is_echoed(client):
    response = await client.get(f"{API}/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


async def test_register_login_and_ownership_scenario(client):
    ana = await register(client, "ana@x.com")
    assert ana["user"]["role"] == "Farmer"
    assert ana["user"]["created_at"] == ana["user"]["updated_at"]
    assert "password_hash" not in ana["user"]

    wrong = await client.post(f"{API}/auth/login", json={"email": "ana@x.com", "password": "wrong"})
    assert wrong.status_code == 401
    assert wrong.json()["error"]["message"] == "Invalid email or password"

    inspection = await create_inspection(client, ana["token"])
    assert inspection["user_id"] == ana["user"]["id"]
    assert inspection["status"] == "Pending"
    assert inspection["category"] == "Vegetable"

    ben = await register(client, "ben@x.com", first_name="Ben", last_name="Ortiz")
    denied = await client.delete(f"{API}/inspections/{inspection['id']}", headers=bearer(ben["token"]))
    assert denied.status_code == 403

    deleted = await client.delete(f"{API}/inspections/{inspection['id']}", headers=bearer(ana["token"]))
    assert deleted.status_code == 204

    missing = await client.get(f"{API}/inspections/{inspection['id']}", headers=bearer(ana["token"]))
    assert missing.status_code == 404


async def test_login_returns_working_token(client):
    await register(client, "ana@x.com")

    response = await client.post(f"{API}/auth/login", json={"email": "ana@x.com", "password": "Secret123"})
    assert response.status_code == 200
    token = response.json()["token"]

    listed = await client.get(f"{API}/inspections", headers=bearer(token))
    assert listed.status_code == 200
    assert listed.json() == []


async def test_unknown_email_gets_same_message(client):
    response = await client.post(f"{API}/auth/login", json={"email": "nobody@x.com", "password": "Secret123"})

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid email or password"


async def test_duplicate_registration_conflicts(client):
    await register(client, "ana@x.com")

    response = await client.post(
        f"{API}/auth/register",
        json={"first_name": "Ana", "last_name": "Lee", "email": "ana@x.com", "password": "Secret123"},
    )
    assert response.status_code == 409


async def test_requests_without_valid_token_are_rejected(client):
    assert (await client.get(f"{API}/inspections")).status_code == 401
    assert (await client.get(f"{API}/inspections", headers=bearer("not-a-token"))).status_code == 401


async def test_farmer_cannot_read_or_update_others_inspection(client):
    ana = await register(client, "ana@x.com")
    ben = await register(client, "ben@x.com", first_name="Ben")
    inspection = await create_inspection(client, ana["token"])

    read = await client.get(f"{API}/inspections/{inspection['id']}", headers=bearer(ben["token"]))
    assert read.status_code == 403

    update = await client.put(
        f"{API}/inspections/{inspection['id']}",
        json={**TOMATO, "plant_name": "Changed"},
        headers=bearer(ben["token"]),
    )
    assert update.status_code == 403

    listed = await client.get(f"{API}/inspections", headers=bearer(ben["token"]))
    assert listed.json() == []


async def test_admin_sees_and_edits_everything(client, admin, token_for):
    ana = await register(client, "ana@x.com")
    inspection = await create_inspection(client, ana["token"])
    admin_token = token_for(admin)

    listed = await client.get(f"{API}/inspections", headers=bearer(admin_token))
    assert [i["id"] for i in listed.json()] == [inspection["id"]]

    updated = await client.put(
        f"{API}/inspections/{inspection['id']}",
        json={**TOMATO, "status": "Completed"},
        headers=bearer(admin_token),
    )
    assert updated.status_code == 200
    assert updated.json()["status"] == "Completed"
    assert updated.json()["user_id"] == ana["user"]["id"]


async def test_user_management_requires_admin(client, admin, token_for):
    ana = await register(client, "ana@x.com")
    ben = await register(client, "ben@x.com", first_name="Ben")

    assert (await client.get(f"{API}/users", headers=bearer(ana["token"]))).status_code == 403

    users = await client.get(f"{API}/users", headers=bearer(token_for(admin)))
    assert users.status_code == 200
    assert len(users.json()) == 3

    own = await client.get(f"{API}/users/{ana['user']['id']}", headers=bearer(ana["token"]))
    assert own.status_code == 200

    other = await client.get(f"{API}/users/{ben['user']['id']}", headers=bearer(ana["token"]))
    assert other.status_code == 403

    promote = await client.put(
        f"{API}/users/{ana['user']['id']}",
        json={"first_name": "Ana", "last_name": "Lee", "email": "ana@x.com", "role": "Admin"},
        headers=bearer(ana["token"]),
    )
    assert promote.status_code == 403

    created = await client.post(
        f"{API}/users",
        json={
            "first_name": "Carla",
            "last_name": "Diaz",
            "email": "carla@x.com",
            "password": "Secret123",
            "role": "Admin",
        },
        headers=bearer(token_for(admin)),
    )
    assert created.status_code == 201
    assert created.json()["role"] == "Admin"


async def test_delete_user_removes_their_inspections(client, admin, token_for):
    ana = await register(client, "ana@x.com")
    inspection = await create_inspection(client, ana["token"])
    admin_token = token_for(admin)

    deleted = await client.delete(f"{API}/users/{ana['user']['id']}", headers=bearer(admin_token))
    assert deleted.status_code == 204

    gone = await client.get(f"{API}/inspections/{inspection['id']}", headers=bearer(admin_token))
    assert gone.status_code == 404


async def test_image_and_analysis_lifecycle(client):
    ana = await register(client, "ana@x.com")
    headers = bearer(ana["token"])
    inspection = await create_inspection(client, ana["token"])

    image = await client.post(
        f"{API}/inspection-images",
        json={"inspection_id": inspection["id"], "image": "https://cdn.example.com/leaf.jpg"},
        headers=headers,
    )
    assert image.status_code == 201

    images = await client.get(f"{API}/inspection-images/inspection/{inspection['id']}", headers=headers)
    assert [i["image"] for i in images.json()] == ["https://cdn.example.com/leaf.jpg"]

    analysis = await client.post(
        f"{API}/inspection-analyses",
        json={
            "inspection_id": inspection["id"],
            "status": "Completed",
            "confidence_score": 0.92,
            "description": "Early blight",
            "treatment_recommendation": "Remove affected leaves",
        },
        headers=headers,
    )
    assert analysis.status_code == 201

    latest = await client.get(f"{API}/inspection-analyses/inspection/{inspection['id']}/latest", headers=headers)
    assert latest.status_code == 200
    assert latest.json()["id"] == analysis.json()["id"]

    fetched = await client.get(f"{API}/inspections/{inspection['id']}", headers=headers)
    assert fetched.json()["images"] == ["https://cdn.example.com/leaf.jpg"]

    assert (await client.delete(f"{API}/inspections/{inspection['id']}", headers=headers)).status_code == 204
    assert (await client.get(f"{API}/inspection-images/{image.json()['id']}", headers=headers)).status_code == 404
    assert (await client.get(f"{API}/inspection-analyses/{analysis.json()['id']}", headers=headers)).status_code == 404


async def test_child_for_missing_inspection_conflicts(client):
    ana = await register(client, "ana@x.com")
    headers = bearer(ana["token"])

    image = await client.post(
        f"{API}/inspection-images",
        json={"inspection_id": 9999, "image": "leaf.jpg"},
        headers=headers,
    )
    assert image.status_code == 409

    analysis = await client.post(
        f"{API}/inspection-analyses",
        json={"inspection_id": 9999, "confidence_score": 0.5},
        headers=headers,
    )
    assert analysis.status_code == 409


async def test_confidence_score_out_of_range_is_rejected(client):
    ana = await register(client, "ana@x.com")
    inspection = await create_inspection(client, ana["token"])

    response = await client.post(
        f"{API}/inspection-analyses",
        json={"inspection_id": inspection["id"], "confidence_score": 1.5},
        headers=bearer(ana["token"]),
    )
    assert response.status_code == 422


async def test_upload_image(client):
    ana = await register(client, "ana@x.com")
    headers = bearer(ana["token"])
    inspection = await create_inspection(client, ana["token"])

    buffer = io.BytesIO()
    Image.new("RGB", (16, 16), color=(200, 30, 30)).save(buffer, format="PNG")

    response = await client.post(
        f"{API}/inspection-images/upload",
        data={"inspection_id": str(inspection["id"])},
        files={"file": ("leaf.png", buffer.getvalue(), "image/png")},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    path = response.json()["image"]
    assert path.startswith("/uploads/inspections/") and path.endswith(".png")

    served = await client.get(path)
    assert served.status_code == 200
    assert served.content == buffer.getvalue()

    rejected = await client.post(
        f"{API}/inspection-images/upload",
        data={"inspection_id": str(inspection["id"])},
        files={"file": ("notes.txt", b"hello", "text/plain")},
        headers=headers,
    )
    assert rejected.status_code == 422


async def test_unexpected_errors_return_generic_body():
    failing_app = FastAPI()
    failing_app.add_middleware(ErrorHandlingMiddleware)

    @failing_app.get("/boom")
    async def boom():
        raise RuntimeError("connection string postgres://admin:hunter2@db")

    transport = ASGITransport(app=failing_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/boom")

    assert response.status_code == 500
    body = response.json()
    assert body["error"]["code"] == "INTERNAL_SERVER_ERROR"
    assert body["error"]["message"] == "An internal server error occurred"
    assert "hunter2" not in response.text
    assert "RuntimeError" not in response.text
