"""
Unit tests for user value objects and the Result type.
"""
import pytest
from auth_service.domain.result import Result, Left, Right
from auth_service.domain.models.value_objects import (
    UserEmail,
    UserName,
    UserNationalId,
    UserPassword,
    UserPhoneNumber,
)


class TestResult:
    """Tests for Result and Either"""

    def test_ok_exposes_value(self):
        result = Result.ok(5)
        assert result.is_success
        assert not result.is_failure
        assert result.get_value() == 5

    def test_fail_get_value_raises(self):
        result = Result.fail("boom")
        assert result.is_failure
        with pytest.raises(ValueError, match="boom"):
            result.get_value()

    def test_fail_requires_message(self):
        with pytest.raises(ValueError):
            Result(is_success=False)

    def test_combine_returns_first_failure(self):
        first = Result.fail("first")
        second = Result.fail("second")
        assert Result.combine(Result.ok(1), first, second) is first

    def test_combine_all_ok(self):
        assert Result.combine(Result.ok(1), Result.ok(2)).is_success

    def test_left_and_right(self):
        assert Left("err").is_left() and not Left("err").is_right()
        assert Right("val").is_right() and not Right("val").is_left()


class TestUserEmail:

    def test_normalizes_case_and_whitespace(self):
        result = UserEmail.create("  Jane.Doe@Example.COM ")
        assert result.is_success
        assert result.get_value().value == "jane.doe@example.com"

    @pytest.mark.parametrize("raw", ["", "   ", "no-at-sign", "a@b", "a@@b.com"])
    def test_rejects_invalid(self, raw):
        result = UserEmail.create(raw)
        assert result.is_failure
        assert "mail" in result.error

    def test_equal_by_value(self):
        assert UserEmail("a@b.com") == UserEmail("A@B.com")


class TestUserPassword:

    def test_accepts_strong_plain_password(self):
        result = UserPassword.create("Secret123!", hashed=False)
        assert result.is_success
        assert result.get_value().hashed is False

    @pytest.mark.parametrize(
        "raw,fragment",
        [
            ("", "required"),
            ("Ab1", "at least 8"),
            ("12345678", "letter"),
            ("abcdefgh", "digit"),
            ("a1" * 65, "at most"),
        ],
    )
    def test_rejects_weak_plain_password(self, raw, fragment):
        result = UserPassword.create(raw)
        assert result.is_failure
        assert fragment in result.error

    def test_hashed_password_skips_strength_rules(self):
        result = UserPassword.create("$2b$04$short", hashed=True)
        assert result.is_success

    def test_repr_hides_value(self):
        assert "Secret123" not in repr(UserPassword("Secret123!"))


class TestProfileValueObjects:

    def test_name_is_trimmed(self):
        assert UserName.create("  Ada ").get_value().value == "Ada"

    def test_name_too_long(self):
        assert UserName.create("x" * 51).is_failure

    def test_phone_strips_formatting(self):
        assert UserPhoneNumber.create("+1 (000) 000-0000").get_value().value == "+10000000000"

    @pytest.mark.parametrize("raw", ["", "12345", "phone", "+1234567890123456"])
    def test_phone_rejects_invalid(self, raw):
        assert UserPhoneNumber.create(raw).is_failure

    def test_national_id(self):
        assert UserNationalId.create("ID1").is_success
        assert UserNationalId.create("ID 1").is_failure
        assert UserNationalId.create("").is_failure

    def test_non_string_input_fails_without_raising(self):
        assert UserName.create(None).is_failure
