"""Errors raised by store implementations."""


class StoreError(Exception):
    """Base class for all store-related errors."""


class DuplicateUsernameError(StoreError):
    """Raised when registering a username that is already taken."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Username ({username}) is already taken")
        self.username = username


class DuplicateTokenError(StoreError):
    """Raised when a session token collides with an existing one."""

    def __init__(self) -> None:
        super().__init__("Session token is already in use")


class BlogNotFoundError(StoreError):
    """Raised when a blog cannot be found in the store."""

    def __init__(self, blog_id: str) -> None:
        super().__init__(f"Blog ({blog_id}) not found")
        self.blog_id = blog_id
