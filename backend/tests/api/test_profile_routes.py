"""Profile Routes — REST rendering of interactor terminal states.

Tests cover:
    - Read / save / partial update / clear picture / delete round trips
    - Validation failures → 400 with the validator message verbatim
    - Missing profile → 404, incomplete profile → 409, storage fault → 503
    - Name drafts are committed once after the quiet period
    - Health and readiness checks
"""

import asyncio
from datetime import date, timedelta

from birthday.core.user_messages import (
    DATABASE_ERROR_MESSAGE, INCOMPLETE_PROFILE_MESSAGE, NO_PROFILE_MESSAGE,
    NOT_FOUND_MESSAGE, NOTHING_TO_SAVE_MESSAGE,
)
from birthday.core.validator import (
    BIRTHDAY_IN_FUTURE, NAME_INVALID_CHARACTERS, PICTURE_URI_INVALID,
)

BASE = "/api/v1/profile"


async def _save(client, **fields):
    res = await client.put(f"{BASE}/", json=fields)
    assert res.status_code == 200, res.text
    return res.json()


def _error(res) -> dict:
    return res.json()["error"]


# ==============================================================================
# Reads and writes
# ==============================================================================

async def test_get_without_profile_returns_null(client):
    res = await client.get(f"{BASE}/")
    assert res.status_code == 200
    assert res.json() is None


async def test_save_creates_profile(client):
    body = await _save(client, name=" Mia ", birthday="2025-01-15")
    assert body == {
        "id": 1, "name": "Mia", "birthday": "2025-01-15", "picture_uri": None,
    }


async def test_save_nothing_rejected(client):
    res = await client.put(f"{BASE}/", json={"name": "   "})
    assert res.status_code == 400
    assert _error(res)["message"] == NOTHING_TO_SAVE_MESSAGE
    assert _error(res)["code"] == "VALIDATION_ERROR"


async def test_patch_name_creates_then_updates(client):
    res = await client.patch(f"{BASE}/name", json={"name": "Mia"})
    assert res.json()["name"] == "Mia"
    await client.patch(f"{BASE}/birthday", json={"birthday": "2025-01-15"})
    res = await client.patch(f"{BASE}/name", json={"name": "Mila"})
    assert res.json() == {
        "id": 1, "name": "Mila", "birthday": "2025-01-15", "picture_uri": None,
    }


async def test_patch_name_invalid(client):
    res = await client.patch(f"{BASE}/name", json={"name": "Mia2"})
    assert res.status_code == 400
    assert _error(res)["message"] == NAME_INVALID_CHARACTERS


async def test_patch_birthday_in_future(client):
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    res = await client.patch(f"{BASE}/birthday", json={"birthday": tomorrow})
    assert res.status_code == 400
    assert _error(res)["message"] == BIRTHDAY_IN_FUTURE


async def test_malformed_birthday_rejected_by_schema(client):
    res = await client.patch(f"{BASE}/birthday", json={"birthday": "15/01/2025"})
    assert res.status_code == 400
    assert _error(res)["code"] == "VALIDATION_ERROR"
    assert _error(res)["details"][0]["field"] == "birthday"
    assert _error(res)["category"] == "validation"


async def test_patch_picture_invalid(client):
    res = await client.patch(f"{BASE}/picture", json={"picture_uri": "ftp://host/x.jpg"})
    assert res.status_code == 400
    assert _error(res)["message"] == PICTURE_URI_INVALID


async def test_clear_picture(client):
    await _save(client, name="Mia", picture_uri="content://media/1")
    res = await client.delete(f"{BASE}/picture")
    assert res.status_code == 200
    assert res.json()["picture_uri"] is None
    assert res.json()["name"] == "Mia"


async def test_clear_picture_without_profile(client):
    res = await client.delete(f"{BASE}/picture")
    assert res.status_code == 200
    assert res.json() is None


async def test_exists(client):
    assert (await client.get(f"{BASE}/exists")).json() == {"exists": False}
    await _save(client, name="Mia")
    assert (await client.get(f"{BASE}/exists")).json() == {"exists": True}


async def test_delete_then_missing(client):
    await _save(client, name="Mia")
    res = await client.delete(f"{BASE}/")
    assert res.status_code == 204
    assert (await client.get(f"{BASE}/")).json() is None

    res = await client.delete(f"{BASE}/")
    assert res.status_code == 404
    assert _error(res)["message"] == NOT_FOUND_MESSAGE
    assert _error(res)["code"] == "PROFILE_NOT_FOUND"


# ==============================================================================
# Display data
# ==============================================================================

async def test_display_without_profile(client):
    res = await client.get(f"{BASE}/display")
    assert res.status_code == 404
    assert _error(res)["message"] == NO_PROFILE_MESSAGE


async def test_display_incomplete_profile(client):
    await _save(client, name="Mia")
    res = await client.get(f"{BASE}/display")
    assert res.status_code == 409
    assert _error(res)["message"] == INCOMPLETE_PROFILE_MESSAGE


async def test_display_complete_profile(client):
    await _save(client, name="Mia", birthday=date.today().isoformat())
    res = await client.get(f"{BASE}/display")
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Mia"
    assert (body["age_number"], body["age_unit"]) == (0, "months")
    assert body["theme"] in {"green", "yellow", "blue"}


# ==============================================================================
# Name drafts
# ==============================================================================

async def test_name_drafts_commit_final_value(client, use_cases):
    for value in ["M", "Mi", "Mia"]:
        res = await client.post(f"{BASE}/name/draft", json={"value": value})
        assert res.status_code == 202
    await asyncio.sleep(0.2)
    await use_cases.name_autosave.wait_idle()
    assert (await client.get(f"{BASE}/")).json()["name"] == "Mia"


async def _draft(client, use_cases, value):
    res = await client.post(f"{BASE}/name/draft", json={"value": value})
    assert res.status_code == 202
    await asyncio.sleep(0.2)
    await use_cases.name_autosave.wait_idle()


async def test_draft_after_direct_rename_is_saved(client, use_cases):
    await _draft(client, use_cases, "Mia")
    await client.patch(f"{BASE}/name", json={"name": "Bob"})
    await _draft(client, use_cases, "Mia")
    assert (await client.get(f"{BASE}/")).json()["name"] == "Mia"


async def test_draft_after_delete_recreates_profile(client, use_cases):
    await _draft(client, use_cases, "Mia")
    assert (await client.delete(f"{BASE}/")).status_code == 204
    await _draft(client, use_cases, "Mia")
    assert (await client.get(f"{BASE}/")).json() == {
        "id": 1, "name": "Mia", "birthday": None, "picture_uri": None,
    }


async def test_draft_matching_stored_name_writes_nothing(client, use_cases):
    await _save(client, name="Mia", birthday="2025-01-15")
    await _draft(client, use_cases, "Mia")
    assert use_cases.name_autosave.last_result is None


# ==============================================================================
# Storage faults and health checks
# ==============================================================================

async def test_storage_fault_is_503_with_friendly_message(failing_client):
    res = await failing_client.get(f"{BASE}/")
    assert res.status_code == 503
    assert _error(res)["message"] == DATABASE_ERROR_MESSAGE
    assert _error(res)["code"] == "DATABASE_ERROR"
    assert "disk" not in res.text


async def test_health(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_ready_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200


async def test_not_ready_without_database(failing_client):
    res = await failing_client.get("/api/v1/health/ready")
    assert res.status_code == 503
