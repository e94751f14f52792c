import uuid

import pytest
from sqlalchemy.exc import SQLAlchemyError

from swipefeed.api.main import app
from swipefeed.config.settings import Settings, settings
from swipefeed.shared.core.exceptions import AuthenticationError
from swipefeed.shared.models import ModerationStatus
from swipefeed.shared.repositories.listing_genre_repository import ListingGenreRepository
from swipefeed.shared.services.auth_service import AuthService
from swipefeed.shared.utils.security import SecurityUtils


SUBMISSION = {
    "creator_name": "@creator",
    "title": "Morning routine",
    "video_url": "https://www.youtube.com/watch?v=abcdef12345",
}


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH
# ═══════════════════════════════════════════════════════════════════════════════


async def test_health_endpoints(client):
    health = await client.get("/health")
    ready = await client.get("/ready")
    live = await client.get("/live")

    assert health.status_code == 200
    assert health.json()["status"] == "healthy"
    assert health.json()["service"] == "swipefeed"
    assert ready.json() == {"status": "ready"}
    assert live.json() == {"status": "alive"}


# ═══════════════════════════════════════════════════════════════════════════════
# TAXONOMY
# ═══════════════════════════════════════════════════════════════════════════════


async def test_taxonomy_endpoints(client, taxonomy):
    grouped = await client.get("/taxonomy")
    categories = await client.get("/taxonomy/categories")
    genres = await client.get("/taxonomy/genres", params={"category_id": 2})

    assert [c["name"] for c in grouped.json()["categories"]] == ["Scene", "Style", "Archive"]
    assert grouped.json()["categories"][2]["genres"] == []
    assert [c["id"] for c in categories.json()] == [1, 2, 3]
    assert [g["name"] for g in genres.json()] == ["Comedy", "Drama"]


# ═══════════════════════════════════════════════════════════════════════════════
# SUBMISSIONS
# ═══════════════════════════════════════════════════════════════════════════════


async def test_submit_listing(client, taxonomy, moderator_headers):
    response = await client.post(
        "/listings",
        json={**SUBMISSION, "status": "approved", "genre_ids": [1, 3]},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["genre_ids"] == [1, 3]

    detail = await client.get(
        f"/moderation/listings/{body['listing_id']}",
        headers=moderator_headers,
    )
    assert detail.json()["status"] == "pending"
    assert detail.json()["video_url"] == (
        "https://www.youtube.com/embed/abcdef12345?autoplay=0&mute=0"
    )
    assert sorted(detail.json()["genre_ids"]) == [1, 3]


@pytest.mark.parametrize("stray_status", [1, {"v": "approved"}, ["approved"], True])
async def test_submit_ignores_status_of_any_shape(client, moderator_headers, stray_status):
    response = await client.post("/listings", json={**SUBMISSION, "status": stray_status})

    assert response.status_code == 201
    detail = await client.get(
        f"/moderation/listings/{response.json()['listing_id']}",
        headers=moderator_headers,
    )
    assert detail.json()["status"] == "pending"


async def test_submit_missing_title(client):
    response = await client.post("/listings", json={**SUBMISSION, "title": ""})

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"] == {"field": "title"}


async def test_submit_malformed_body(client):
    response = await client.post("/listings", json={**SUBMISSION, "genre_ids": ["many"]})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_submit_with_tagging_failure_reports_partial_write(client, taxonomy, monkeypatch):
    async def fail(*args, **kwargs):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(ListingGenreRepository, "replace_for_listing", fail)

    response = await client.post("/listings", json={**SUBMISSION, "genre_ids": [1]})

    assert response.status_code == 207
    error = response.json()["error"]
    assert error["code"] == "PARTIAL_WRITE"
    uuid.UUID(error["details"]["listing_id"])


def test_error_responses_are_documented():
    paths = app.openapi()["paths"]

    submit = paths["/listings"]["post"]["responses"]
    for code in ("207", "400", "503"):
        schema_ref = submit[code]["content"]["application/json"]["schema"]["$ref"]
        assert schema_ref.endswith("/ErrorResponse")

    reject = paths["/moderation/listings/{listing_id}/reject"]["post"]["responses"]
    assert {"400", "401", "403", "404"} <= set(reject)


# ═══════════════════════════════════════════════════════════════════════════════
# MODERATOR SESSION
# ═══════════════════════════════════════════════════════════════════════════════


async def test_open_session(client):
    wrong = await client.post("/admin/session", json={"password": "guess"})
    right = await client.post(
        "/admin/session",
        json={"password": settings.ADMIN_PASSWORD, "name": "alice"},
    )

    assert wrong.status_code == 401
    assert right.status_code == 200
    assert right.json()["token_type"] == "bearer"
    assert right.json()["expires_in"] == settings.MODERATOR_SESSION_EXPIRE_MINUTES * 60

    context = AuthService().verify_moderator_token(right.json()["access_token"])
    assert context.subject == "alice"


def test_login_disabled_without_password():
    service = AuthService(Settings(ADMIN_PASSWORD=""))

    with pytest.raises(AuthenticationError) as exc_info:
        service.open_moderator_session("anything")

    assert exc_info.value.message == "Moderator password is not configured"


async def test_moderation_requires_session(client):
    missing = await client.get("/moderation/pending")
    garbage = await client.get(
        "/moderation/pending",
        headers={"Authorization": "Bearer not-a-token"},
    )

    assert missing.status_code == 401
    assert garbage.status_code == 401
    assert missing.json()["error"]["code"] == "AUTHENTICATION_ERROR"


async def test_moderation_requires_moderator_role(client):
    token = SecurityUtils.create_access_token(
        data={"sub": "viewer", "role": "viewer"},
        secret_key=settings.SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )

    response = await client.get(
        "/moderation/pending",
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "AUTHORIZATION_ERROR"


# ═══════════════════════════════════════════════════════════════════════════════
# MODERATION AND FEED
# ═══════════════════════════════════════════════════════════════════════════════


async def test_approve_then_feed(client, make_listing, moderator_headers):
    listing = await make_listing()
    other = await make_listing()

    response = await client.post(
        f"/moderation/listings/{listing.id}/approve",
        headers=moderator_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["listing"]["status"] == "approved"
    assert [item["id"] for item in body["pending"]] == [str(other.id)]

    feed = await client.get("/feed")
    assert feed.json()["total"] == 1
    assert feed.json()["items"][0]["id"] == str(listing.id)
    assert feed.json()["items"][0]["position"] == 1


async def test_reject_with_reason(client, make_listing, moderator_headers):
    listing = await make_listing(status=ModerationStatus.APPROVED)

    response = await client.post(
        f"/moderation/listings/{listing.id}/reject",
        json={"reason": "bad link"},
        headers=moderator_headers,
    )

    assert response.status_code == 200
    assert response.json()["listing"]["rejection_reason"] == "bad link"
    assert response.json()["pending_reloaded"] is True

    feed = await client.get("/feed")
    assert feed.json() == {"items": [], "total": 0}

    detail = await client.get(f"/moderation/listings/{listing.id}", headers=moderator_headers)
    assert detail.json()["status"] == "rejected"
    assert detail.json()["rejection_reason"] == "bad link"


async def test_reject_requires_a_reason_field(client, make_listing, moderator_headers):
    listing = await make_listing()

    response = await client.post(
        f"/moderation/listings/{listing.id}/reject",
        json={},
        headers=moderator_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
    detail = await client.get(f"/moderation/listings/{listing.id}", headers=moderator_headers)
    assert detail.json()["status"] == "pending"


async def test_pending_queue(client, make_listing, moderator_headers):
    older = await make_listing()
    newer = await make_listing()
    await make_listing(status=ModerationStatus.APPROVED)

    response = await client.get("/moderation/pending", headers=moderator_headers)

    assert response.json()["total"] == 2
    assert [item["id"] for item in response.json()["items"]] == [str(newer.id), str(older.id)]


async def test_unknown_listing_is_404(client, moderator_headers):
    response = await client.post(
        f"/moderation/listings/{uuid.uuid4()}/approve",
        headers=moderator_headers,
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"
