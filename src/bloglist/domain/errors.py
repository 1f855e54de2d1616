"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class ValidationError(DomainError):
    """Raised when user-supplied values violate a domain rule."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid {field}: {reason}")
        self.field = field
        self.reason = reason


# ============================================================================
#                       Identity and session errors
# ============================================================================

WRONG_CREDENTIALS_MESSAGE = "Wrong username or password"


class InvalidCredentialsError(DomainError):
    """Raised when a username/secret pair does not authenticate.

    Unknown usernames and wrong secrets produce the same message so callers
    cannot tell which accounts exist.
    """

    def __init__(self) -> None:
        super().__init__(WRONG_CREDENTIALS_MESSAGE)


class InvalidSessionError(DomainError):
    """Raised when a session token is unknown, revoked or expired."""

    def __init__(self) -> None:
        super().__init__("Session is invalid or has expired")


# ============================================================================
#                           Authorization errors
# ============================================================================


class ForbiddenError(DomainError):
    """Raised when a caller attempts to delete a blog they do not own."""

    def __init__(self, blog_id: str) -> None:
        super().__init__(f"Only the owner may delete blog {blog_id}")
        self.blog_id = blog_id
