"""Error Handlers — envelopes for failures raised outside the interactors."""

import json
import logging

from fastapi import Request

from birthday.api.error_handlers import _field_path, _unhandled_error_handler
from birthday.core.user_messages import UNKNOWN_ERROR_MESSAGE


def _request(path: str = "/api/v1/profile/") -> Request:
    return Request({
        "type": "http", "method": "GET", "path": path, "query_string": b"",
        "headers": [], "scheme": "http", "server": ("test", 80),
    })


def test_field_path_drops_body_prefix():
    assert _field_path(("body", "birthday")) == "birthday"


def test_field_path_keeps_other_locations():
    assert _field_path(("query", "limit")) == "query.limit"


async def test_unhandled_error_hides_internals(caplog):
    with caplog.at_level(logging.ERROR, logger="birthday.api.error_handlers"):
        res = await _unhandled_error_handler(_request(), RuntimeError("disk on fire"))

    body = json.loads(res.body)["error"]
    assert res.status_code == 500
    assert body["code"] == "INTERNAL_ERROR"
    assert body["category"] == "internal"
    assert body["message"] == UNKNOWN_ERROR_MESSAGE
    assert "disk on fire" not in res.body.decode()
    assert "disk on fire" in caplog.text
