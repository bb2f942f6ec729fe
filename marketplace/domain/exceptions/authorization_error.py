"""
Authorization-related domain exceptions.
"""


class AuthorizationError(Exception):
    """Raised when the actor does not hold the required relationship role."""

    pass


class AuthenticationError(Exception):
    """Raised when credentials are missing, wrong, expired or malformed."""

    pass
