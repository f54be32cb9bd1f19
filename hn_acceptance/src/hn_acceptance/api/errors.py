"""
Exception hierarchy for fetch and retry failures.

Every fetch failure is an ``APIError`` subclass so callers can tell the
failure class apart, while the retry executor treats them all alike.
"""

from typing import Optional


class APIError(Exception):
    """Base exception for API errors."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        self.message = message
        self.status_code = status_code
        self.url = url
        super().__init__(self.message)


class TransportError(APIError):
    """Connection refused, DNS failure, timeout and similar network errors."""


class UnexpectedStatusError(APIError):
    """The server answered with a status other than 200 OK."""


class BodyReadError(APIError):
    """The response stream failed while the body was being drained."""


class DecodeError(APIError):
    """The body is not valid JSON or does not fit the requested shape."""


class RetryExhaustedError(APIError):
    """Every attempt allowed by the retry budget failed."""

    def __init__(self, attempts: int, description: Optional[str] = None,
                 last_error: Optional[BaseException] = None):
        self.attempts = attempts
        self.description = description
        self.last_error = last_error

        target = f" for {description}" if description else ""
        message = f"All {attempts} retry attempts failed{target}"
        if last_error is not None:
            message += f": {last_error}"
        super().__init__(
            message,
            status_code=getattr(last_error, "status_code", None),
            url=getattr(last_error, "url", None),
        )
