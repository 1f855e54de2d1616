"""Unit tests for users, sessions and blogs."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from bloglist.domain.errors import ValidationError
from bloglist.domain.model import (
    MAX_AUTHOR_LENGTH,
    MAX_NAME_LENGTH,
    MAX_TITLE_LENGTH,
    MAX_USERNAME_LENGTH,
    Blog,
    BlogDraft,
    Session,
    User,
    validate_registration,
)

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


class TestValidateRegistration:
    """Tests for registration input rules."""

    @staticmethod
    def test_returns_stripped_name_and_username() -> None:
        """Surrounding whitespace is dropped from name and username."""
        assert validate_registration("  Ada  ", " ada ", "secret") == ("Ada", "ada")

    @staticmethod
    @pytest.mark.parametrize(
        "name, username, secret, field",
        [
            ("", "ada", "secret", "name"),
            ("   ", "ada", "secret", "name"),
            ("Ada", "", "secret", "username"),
            ("Ada", "ab", "secret", "username"),
            ("Ada", "  ab  ", "secret", "username"),
            ("Ada", "ada", "", "password"),
            ("Ada", "ada", "12", "password"),
        ],
    )
    def test_rejects_invalid_input(name, username, secret, field) -> None:
        """Blank names, short usernames and short secrets are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            validate_registration(name, username, secret)
        assert exc_info.value.field == field

    @staticmethod
    def test_three_characters_is_enough() -> None:
        """The minimum lengths are inclusive."""
        assert validate_registration("A", "abc", "123") == ("A", "abc")

    @staticmethod
    @pytest.mark.parametrize(
        "name, username, field",
        [
            ("n" * (MAX_NAME_LENGTH + 1), "ada", "name"),
            ("Ada", "u" * (MAX_USERNAME_LENGTH + 1), "username"),
        ],
    )
    def test_rejects_overlong_input(name, username, field) -> None:
        """Names and usernames longer than their columns are rejected."""
        with pytest.raises(ValidationError, match="at most") as exc_info:
            validate_registration(name, username, "secret")
        assert exc_info.value.field == field

    @staticmethod
    def test_maximum_lengths_are_inclusive() -> None:
        """Values exactly at the limit are accepted."""
        name, username = "n" * MAX_NAME_LENGTH, "u" * MAX_USERNAME_LENGTH
        assert validate_registration(name, username, "secret") == (name, username)


class TestUser:
    """Tests for the User read model."""

    @staticmethod
    def test_repr_hides_secret_hash() -> None:
        """The password hash never appears in repr()."""
        user = User("u1", "Ada", "ada", "scrypt:SECRET-HASH")
        assert "SECRET-HASH" not in repr(user)
        assert "ada" in repr(user)

    @staticmethod
    def test_is_immutable() -> None:
        """Users cannot be changed after registration."""
        user = User("u1", "Ada", "ada", "hash")
        with pytest.raises(FrozenInstanceError):
            user.username = "eve"  # type: ignore[misc]


class TestSession:
    """Tests for the Session read model."""

    @staticmethod
    def test_not_expired_before_expiry() -> None:
        """A session is valid strictly before its expiry instant."""
        session = Session("tok", "u1", NOW + timedelta(seconds=10))
        assert not session.is_expired(NOW)
        assert not session.is_expired(NOW + timedelta(seconds=9))

    @staticmethod
    def test_expired_at_and_after_expiry() -> None:
        """A session is expired from its expiry instant on."""
        session = Session("tok", "u1", NOW)
        assert session.is_expired(NOW)
        assert session.is_expired(NOW + timedelta(days=1))

    @staticmethod
    def test_requires_utc() -> None:
        """Naive or non-UTC expiry instants are rejected."""
        with pytest.raises(ValidationError):
            Session("tok", "u1", datetime(2026, 1, 1))
        with pytest.raises(ValidationError):
            Session("tok", "u1", datetime(2026, 1, 1, tzinfo=timezone(timedelta(hours=2))))

    @staticmethod
    def test_repr_hides_token() -> None:
        """The bearer token never appears in repr()."""
        session = Session("very-secret-token", "u1", NOW)
        assert "very-secret-token" not in repr(session)


class TestBlog:
    """Tests for the Blog read model and BlogDraft write model."""

    @staticmethod
    def test_defaults() -> None:
        """A blog starts with zero likes."""
        blog = Blog("b1", "u1", "Title", "Author", "http://x")
        assert blog.likes == 0

    @staticmethod
    def test_negative_likes_rejected() -> None:
        """Like counts are never negative."""
        with pytest.raises(ValidationError):
            Blog("b1", "u1", "Title", "Author", "http://x", likes=-1)

    @staticmethod
    def test_draft_strips_fields() -> None:
        """Drafts store stripped values."""
        draft = BlogDraft("b1", "u1", "  Title ", " Author ", " http://x ")
        assert (draft.title, draft.author, draft.url) == ("Title", "Author", "http://x")

    @staticmethod
    @pytest.mark.parametrize("title, url, field", [("", "http://x", "title"), ("T", "  ", "url")])
    def test_draft_requires_title_and_url(title, url, field) -> None:
        """Title and URL are required."""
        with pytest.raises(ValidationError) as exc_info:
            BlogDraft("b1", "u1", title, "Author", url)
        assert exc_info.value.field == field

    @staticmethod
    @pytest.mark.parametrize(
        "title, author, field",
        [
            ("t" * (MAX_TITLE_LENGTH + 1), "A", "title"),
            ("T", "a" * (MAX_AUTHOR_LENGTH + 1), "author"),
        ],
    )
    def test_draft_rejects_overlong_fields(title, author, field) -> None:
        """Titles and author labels longer than their columns are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            BlogDraft("b1", "u1", title, author, "http://x")
        assert exc_info.value.field == field

    @staticmethod
    def test_draft_limits_apply_after_stripping() -> None:
        """Surrounding whitespace does not count toward the limit."""
        title = "t" * MAX_TITLE_LENGTH
        assert BlogDraft("b1", "u1", f"  {title}  ", "A", "http://x").title == title

    @staticmethod
    def test_draft_allows_empty_author() -> None:
        """The author label is optional."""
        assert BlogDraft("b1", "u1", "T", "", "http://x").author == ""

    @staticmethod
    def test_to_blog() -> None:
        """Publishing a draft keeps the owner and assigns the creation ordinal."""
        blog = BlogDraft("b1", "u1", "T", "A", "http://x").to_blog(created_seq=7)
        assert blog == Blog("b1", "u1", "T", "A", "http://x", likes=0, created_seq=7)
