class ZeldaBreadError(Exception):
    """Base exception for the ZeldaBread project."""


class SessionError(ZeldaBreadError):
    """Raised when a game session cannot be set up (e.g., unusable start cell)."""
