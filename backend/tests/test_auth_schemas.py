"""
Daily Pause Backend — Auth Schema Tests
========================================

What we test:
    ✅ Emails are trimmed and lowercased before validation
    ✅ Addresses that are not deliverable syntax are rejected
    ✅ Register enforces the minimum password length
"""

import pydantic
import pytest

from daily_pause.schemas.auth import LoginRequest, RegisterRequest


class TestEmailValidation:
    def test_normalized(self):
        request = LoginRequest(email="  Ann@Example.COM ", password="secret1")
        assert request.email == "ann@example.com"

    @pytest.mark.parametrize(
        "email",
        ["a@b..c", "<x>@y.z", "a@-b.c", "no-at-sign.com", "two@@x.com", ""],
    )
    def test_invalid_addresses_rejected(self, email):
        with pytest.raises(pydantic.ValidationError):
            RegisterRequest(email=email, password="secret1")


class TestRegisterPassword:
    def test_too_short(self):
        with pytest.raises(pydantic.ValidationError):
            RegisterRequest(email="a@x.com", password="12345")

    def test_minimum_length_accepted(self):
        assert RegisterRequest(email="a@x.com", password="123456").password == "123456"
