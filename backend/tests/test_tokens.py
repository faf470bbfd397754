"""
Daily Pause Backend — Token Extraction Unit Tests
==================================================

What we test:
    ✅ Bearer header parsing (case-insensitive scheme, empty credentials)
    ✅ Cookie header parsing (multiple cookies, quoted values, missing)
    ✅ extract_token priority: bearer before cookie, cookie-only mode
"""

from starlette.datastructures import Headers
from starlette.requests import Request

from daily_pause.security.tokens import bearer_token, cookie_value, extract_token


class TestBearerToken:
    def test_reads_token(self):
        assert bearer_token(Headers({"Authorization": "Bearer abc123"})) == "abc123"

    def test_scheme_is_case_insensitive(self):
        assert bearer_token(Headers({"Authorization": "bearer abc123"})) == "abc123"

    def test_other_scheme_ignored(self):
        assert bearer_token(Headers({"Authorization": "Basic dXNlcjpwYXNz"})) is None

    def test_missing_or_empty(self):
        assert bearer_token(Headers({})) is None
        assert bearer_token(Headers({"Authorization": "Bearer "})) is None


class TestCookieValue:
    def test_single_cookie(self):
        assert cookie_value("session=tok", "session") == "tok"

    def test_among_other_cookies(self):
        assert cookie_value("theme=dark; session=tok; lang=en", "session") == "tok"

    def test_quoted_value(self):
        assert cookie_value('session="tok"', "session") == "tok"

    def test_absent(self):
        assert cookie_value(None, "session") is None
        assert cookie_value("theme=dark", "session") is None
        assert cookie_value("session=", "session") is None

    def test_malformed_pair_does_not_hide_later_cookie(self):
        assert cookie_value("garbage; session=tok", "session") == "tok"


class TestExtractToken:
    def test_bearer_wins_over_cookie(self):
        headers = Headers({"Authorization": "Bearer from-header", "Cookie": "session=from-cookie"})
        assert extract_token(headers) == "from-header"

    def test_falls_back_to_cookie(self):
        assert extract_token(Headers({"Cookie": "session=from-cookie"})) == "from-cookie"

    def test_cookie_only_mode_ignores_bearer(self):
        headers = Headers({"Authorization": "Bearer from-header"})
        assert extract_token(headers, allow_bearer=False) is None

    def test_custom_cookie_name(self):
        headers = Headers({"Cookie": "dp_session=tok"})
        assert extract_token(headers, cookie_name="dp_session") == "tok"

    def test_nothing_presented(self):
        assert extract_token(Headers({})) is None


class TestParsingMatchesStarlette:
    def test_bearer_extra_whitespace(self):
        assert bearer_token(Headers({"Authorization": "Bearer   abc123 "})) == "abc123"

    def test_cookie_value_agrees_with_request_cookies(self):
        header = 'theme=dark; session="a\\054b"; lang=en'
        request = Request({"type": "http", "headers": [(b"cookie", header.encode())]})
        assert cookie_value(header, "session") == request.cookies["session"]
