"""Unit tests for RequestSession token and cookie handling."""

from unittest.mock import MagicMock

import pytest
from fastapi import Request

from portal.config import AuthSettings
from portal.interface.api.security import RequestSession


def make_session(
    headers: dict[str, str] | None = None,
    scheme: str = "http",
    cookie_secure: str = "auto",
) -> RequestSession:
    raw_headers = [
        (name.lower().encode(), value.encode()) for name, value in (headers or {}).items()
    ]
    request = Request(
        {
            "type": "http",
            "method": "GET",
            "scheme": scheme,
            "server": ("testserver", 443 if scheme == "https" else 80),
            "path": "/",
            "query_string": b"",
            "root_path": "",
            "headers": raw_headers,
        }
    )
    return RequestSession(
        request=request,
        auth_settings=AuthSettings(cookie_secure=cookie_secure),
        access_service=MagicMock(),
    )


class TestToken:
    def test_bearer_header_wins(self):
        session = make_session(
            {"Authorization": "Bearer header-token", "Cookie": "token=cookie-token"}
        )

        assert session.token == "header-token"

    def test_cookie_fallback(self):
        session = make_session({"Cookie": "token=cookie-token"})

        assert session.token == "cookie-token"

    def test_non_bearer_header_is_ignored(self):
        session = make_session({"Authorization": "Basic abc"})

        assert session.token is None


class TestCookieAttributes:
    @pytest.mark.parametrize(
        "headers,scheme,expected",
        [
            ({}, "http", False),
            ({}, "https", True),
            ({"X-Forwarded-Proto": "https"}, "http", True),
        ],
    )
    def test_auto_mode_follows_transport(self, headers, scheme, expected):
        session = make_session(headers, scheme)

        assert session.secure is expected
        assert session.samesite == ("strict" if expected else "lax")

    def test_forced_modes(self):
        assert make_session(cookie_secure="always").secure is True
        assert make_session(scheme="https", cookie_secure="never").secure is False
