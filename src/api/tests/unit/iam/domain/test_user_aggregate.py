"""Unit tests for User aggregate."""

import pytest

from iam.domain.aggregates import User


def make_user(**overrides) -> User:
    values = {
        "subject": 123456789,
        "full_name": "Mario Rossi",
        "email": "mario.rossi@example.com",
        "picture": "https://example.com/profile.jpg",
    }
    values.update(overrides)
    return User(**values)


class TestUserCreation:
    """Tests for User aggregate creation."""

    def test_creates_with_required_fields(self):
        user = User(subject=1, full_name="Anna", email="anna@example.com")

        assert user.subject == 1
        assert user.picture is None
        assert user.version is None

    def test_id_is_subject(self):
        assert make_user().id == 123456789

    def test_accepts_google_sized_subject(self):
        subject = 112233445566778899001
        assert make_user(subject=subject).id == subject

    def test_requires_email(self):
        with pytest.raises(TypeError):
            User(subject=1, full_name="Anna")

    @pytest.mark.parametrize("email", ["", "not-an-email", "anna@", "@example.com"])
    def test_rejects_invalid_email(self, email):
        with pytest.raises(ValueError):
            make_user(email=email)

    def test_str(self):
        assert str(make_user()) == "User(123456789)"


class TestUpdateProfile:
    """Tests for syncing profile data from the identity provider."""

    def test_returns_false_when_nothing_changed(self):
        user = make_user()

        changed = user.update_profile(
            "Mario Rossi", "mario.rossi@example.com", "https://example.com/profile.jpg"
        )

        assert changed is False

    def test_applies_changed_fields(self):
        user = make_user()

        changed = user.update_profile("Mario Bianchi", "mb@example.com", None)

        assert changed is True
        assert user.full_name == "Mario Bianchi"
        assert user.email == "mb@example.com"
        assert user.picture is None

    def test_keeps_version(self):
        user = make_user(version=4)

        user.update_profile("Mario Bianchi", "mb@example.com", None)

        assert user.version == 4

    def test_rejects_invalid_email_without_changes(self):
        user = make_user()

        with pytest.raises(ValueError):
            user.update_profile("Mario Bianchi", "broken", None)

        assert user.full_name == "Mario Rossi"
        assert user.email == "mario.rossi@example.com"
