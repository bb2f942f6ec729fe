"""
Identity provider implementations.
"""

from .passwords import BcryptPasswordHasher
from .tokens import TokenService

__all__ = ["BcryptPasswordHasher", "TokenService"]
