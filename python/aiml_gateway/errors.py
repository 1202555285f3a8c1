"""
Exception taxonomy for the gateway.

ApiError subclasses are rendered by the exception handlers in main.py;
ProviderError never reaches a caller because the chat service degrades to
the fallback responder.
"""


class StartupConfigError(RuntimeError):
    """A required setting is missing; the process must not start."""


class ProviderError(Exception):
    """The external completion provider failed (network, auth, quota, bad payload)."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    status_code = 400


class NotFoundError(ApiError):
    status_code = 404
