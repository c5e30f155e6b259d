"""Unit tests for domain value objects."""

import pytest
from pydantic import ValidationError

from gate.domain.value import EmailAddress, InviteCode


class TestEmailAddress:
    """Tests for EmailAddress."""

    @pytest.mark.parametrize(
        "email",
        ["a@b.co", "first.last@sub.example.com", "x+tag@example.org"],
    )
    def test_accepts_valid_shapes(self, email):
        assert EmailAddress(email).root == email
        assert EmailAddress.is_valid(email)

    def test_strips_surrounding_whitespace(self):
        assert EmailAddress("  a@b.co \n").root == "a@b.co"

    @pytest.mark.parametrize(
        "email",
        ["no-at-sign", "@missing-local.com", "missing-domain@", "a@b", "a b@c.d", "a@@b.c"],
    )
    def test_rejects_malformed(self, email):
        assert not EmailAddress.is_valid(email)
        with pytest.raises(ValidationError):
            EmailAddress(email)


class TestInviteCode:
    """Tests for InviteCode."""

    def test_str_is_root(self):
        assert str(InviteCode("C2CABCD12345")) == "C2CABCD12345"

    def test_masked(self):
        assert InviteCode("C2CABCD12345").masked() == "C2CA..."

    def test_equality_by_value(self):
        assert InviteCode("C2CABCD12345") == InviteCode("C2CABCD12345")
        assert InviteCode("C2CABCD12345") != InviteCode("c2cabcd12345")

    @pytest.mark.parametrize("value", ["", "X" * 65])
    def test_rejects_bad_length(self, value):
        with pytest.raises(ValidationError):
            InviteCode(value)
