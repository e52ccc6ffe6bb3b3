"""
Unit tests for the ProductUser and UserProfile aggregates.
"""
import pytest
from auth_service.domain.models.product_user import ProductUser
from auth_service.domain.models.user_profile import UserProfile
from auth_service.domain.models.value_objects import (
    UserEmail,
    UserName,
    UserNationalId,
    UserPassword,
    UserPhoneNumber,
)


def _make_profile(email: str = "a@b.com", last_name: str = "B"):
    return UserProfile.create(
        email=UserEmail.create(email),
        first_name=UserName.create("A", label="First name"),
        last_name=UserName.create(last_name, label="Last name"),
        phone=UserPhoneNumber.create("+10000000000"),
        national_id=UserNationalId.create("ID1"),
        location="X",
    )


class TestProductUser:
    """Tests for ProductUser"""

    def test_create_generates_id(self):
        result = ProductUser.create(
            email=UserEmail.create("a@b.com"),
            password=UserPassword.create("Secret123!"),
        )
        assert result.is_success
        user = result.get_value()
        assert user.id
        assert user.email.value == "a@b.com"
        assert user.has_profile is False

    def test_create_keeps_given_id(self):
        result = ProductUser.create(
            email=UserEmail.create("a@b.com"),
            password=UserPassword.create("Secret123!"),
            user_id="usr-1",
        )
        assert result.get_value().id == "usr-1"

    def test_create_reports_email_failure_first(self):
        result = ProductUser.create(
            email=UserEmail.create("bad"),
            password=UserPassword.create("short"),
        )
        assert result.is_failure
        assert "email" in result.error

    def test_user_created_links_profile(self):
        user = ProductUser.create(
            email=UserEmail.create("a@b.com"),
            password=UserPassword.create("Secret123!"),
        ).get_value()
        profile = _make_profile().get_value()

        user.user_created(profile)

        assert user.has_profile
        assert user.profile is profile
        assert user.password.hashed is False

    def test_user_created_rejects_other_email(self):
        user = ProductUser.create(
            email=UserEmail.create("a@b.com"),
            password=UserPassword.create("Secret123!"),
        ).get_value()
        with pytest.raises(ValueError, match="does not match"):
            user.user_created(_make_profile(email="c@d.com").get_value())


class TestUserProfile:
    """Tests for UserProfile"""

    def test_create_defaults_avatar(self):
        profile = _make_profile().get_value()
        assert profile.avatar == ""
        assert profile.location == "X"
        assert profile.full_name == "A B"

    def test_create_fails_on_invalid_field(self):
        result = _make_profile(last_name="")
        assert result.is_failure
        assert result.error == "Last name is required"
