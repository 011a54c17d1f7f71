import pytest
from fastapi import HTTPException
from starlette.requests import Request

import jobtracker.dependencies as deps


def _request(headers: dict) -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "scheme": "http",
            "server": ("testserver", 80),
            "root_path": "",
            "path": "/jobs",
            "query_string": b"",
            "headers": [(k.lower().encode(), v.encode()) for k, v in headers.items()],
        }
    )


def test_get_current_user_id_missing_header():
    with pytest.raises(HTTPException) as ex:
        deps.get_current_user_id(_request({}))
    assert ex.value.status_code == 401
    assert "x-user-id" in ex.value.detail


def test_get_current_user_id_blank_header():
    with pytest.raises(HTTPException) as ex:
        deps.get_current_user_id(_request({"x-user-id": "   "}))
    assert ex.value.status_code == 401


def test_get_current_user_id_success_trims():
    assert deps.get_current_user_id(_request({"X-User-Id": " dev-user-1 "})) == "dev-user-1"


def test_get_current_user_id_respects_configured_header(monkeypatch):
    monkeypatch.setattr(deps.settings, "user_id_header", "x-owner")
    assert deps.get_current_user_id(_request({"x-owner": "u9"})) == "u9"
