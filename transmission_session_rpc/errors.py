"""
Exceptions raised by the Transmission RPC client.

- TransmissionError: Base exception for all client errors
- Unauthorized: Raised when the daemon rejects the credentials (HTTP 401)
- DecodeError: Raised when a response body is not a valid RPC response
- SessionRetriesExhausted: Raised when the daemon keeps issuing session challenges

Network failures and unexpected HTTP statuses are raised by httpx itself and
reach the caller unmodified; TransportError is an alias for their common base.
"""

import httpx


TransportError = httpx.HTTPError


class TransmissionError(Exception):
    """Base exception for Transmission RPC errors."""
    pass


class Unauthorized(TransmissionError):
    """Raised when the RPC server rejects the supplied credentials."""

    def __init__(self, message: str = "Unauthorized to access RPC server", response=None):
        super().__init__(message)
        self.response = response


class DecodeError(TransmissionError, ValueError):
    """Raised when a response body cannot be decoded as an RPC response."""
    pass


class SessionRetriesExhausted(TransmissionError):
    """Raised when a call is challenged for a session id more times than allowed."""

    def __init__(self, method: str, attempts: int):
        super().__init__(f"Gave up on {method} after {attempts} session challenges")
        self.method = method
        self.attempts = attempts
