"""
Password hashing with bcrypt.
"""

import bcrypt

from marketplace.application.interfaces.security import PasswordHasherInterface


class BcryptPasswordHasher(PasswordHasherInterface):
    """Salted bcrypt hashes."""

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode(), password_hash.encode())
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
