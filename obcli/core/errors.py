"""Error hierarchy for the Open Banking CLI.

Every failure a command can report derives from ObcliError. The message is
always safe to print to the user as-is.
"""

from __future__ import annotations

from typing import Any, Optional

from obcli import __prog_name__


class ObcliError(Exception):
    """Base exception for all handled CLI errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotConfiguredError(ObcliError):
    """Raised when no access token is stored locally."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or f"Access token not configured. Run: {__prog_name__} config set --token <token>"
        )


class InvalidRequestError(ObcliError):
    """Raised when a request is malformed and never leaves the process."""


class TransportError(ObcliError):
    """Raised when no response was received from the API."""


class APIError(ObcliError):
    """Raised when the API answered with a failure status."""

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(APIError):
    def __init__(self) -> None:
        super().__init__("Authentication failed. Check your access token.", 401)


class AuthorizationError(APIError):
    def __init__(self) -> None:
        super().__init__("Access forbidden. Check your API permissions.", 403)


class NotFoundError(APIError):
    def __init__(self) -> None:
        super().__init__("Resource not found.", 404)


class RateLimitError(APIError):
    def __init__(self) -> None:
        super().__init__("Rate limit exceeded. Please wait before retrying.", 429)


class RemoteAPIError(APIError):
    """Any other non-2xx answer; carries the remote message through."""

    def __init__(self, status_code: int, message: str, payload: Any = None):
        super().__init__(f"API Error ({status_code}): {message}", status_code)
        self.remote_message = message
        self.payload = payload
