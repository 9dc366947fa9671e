"""
Counsel Connect - Error Hierarchy

Every failure a handler can report is a ``CounselConnectError`` subclass.
The subclass fixes the HTTP status; ``code`` names the specific cause so
clients can tell, for example, a duplicate email from a duplicate bar number.
Exception handlers in ``src.main`` render them as ``{"message", "code"}``.
"""


class CounselConnectError(Exception):
    """Base exception for all Counsel Connect errors."""

    http_status: int = 500

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.message = message
        self.code = code

    def to_response(self) -> dict:
        """Convert to the JSON error body."""
        return {"message": self.message, "code": self.code}


# =============================================================================
# CLIENT ERRORS (4xx)
# =============================================================================

class ValidationError(CounselConnectError):
    """Missing or malformed input."""
    http_status = 400


class AuthError(CounselConnectError):
    """Bad credentials. Unknown user and wrong password look the same."""
    http_status = 401


class NotFoundError(CounselConnectError):
    """Lookup miss."""
    http_status = 404


class ConflictError(CounselConnectError):
    """Uniqueness violation (email or bar number)."""
    http_status = 409


# =============================================================================
# SERVER ERRORS (5xx)
# =============================================================================

class InternalError(CounselConnectError):
    """Database failure or unexpected exception."""
    http_status = 500
