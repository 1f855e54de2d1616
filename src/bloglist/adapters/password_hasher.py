"""Password hashing backed by Werkzeug."""

from werkzeug.security import check_password_hash, generate_password_hash

from bloglist.interfaces.password_hasher import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted hashes via `werkzeug.security` (scrypt by default)."""

    def __init__(self, method: str = "scrypt") -> None:
        self._method = method

    def hash(self, secret: str) -> str:
        return generate_password_hash(secret, method=self._method)

    def verify(self, secret_hash: str, secret: str) -> bool:
        return check_password_hash(secret_hash, secret)
