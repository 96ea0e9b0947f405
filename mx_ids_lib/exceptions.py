"""
Custom exception hierarchy for the mx-ids library.

All public exceptions inherit from :class:`MxIdsError`, allowing callers to
catch a single base class for any library failure while still being able to
differentiate specific error conditions when needed.

The validators themselves never raise; only the ``ensure_valid_*`` helpers and
the HTTP client do.
"""


class MxIdsError(Exception):
    """Base exception for all mx-ids specific errors."""

    pass


class InvalidIdentifierError(MxIdsError):
    """Raised by ``ensure_valid_curp`` / ``ensure_valid_rfc`` on rejection."""

    def __init__(self, result):
        self.result = result
        super().__init__(
            f"Invalid {result.kind.value} '{result.identifier}': "
            f"{result.reason.value}"
        )


class AuthenticationError(MxIdsError):
    """Raised when the server returns HTTP 401/403 – invalid or missing token."""

    pass


class RateLimitError(MxIdsError):
    """Raised when the server returns HTTP 429 – request rate limit exceeded."""

    pass


class ValidationError(MxIdsError):
    """Raised when the server returns HTTP 400 – malformed request payload."""

    pass


class NoArgsAndNoPayloadError(MxIdsError):
    """Raised when a client method receives neither a payload nor required arguments."""

    pass
