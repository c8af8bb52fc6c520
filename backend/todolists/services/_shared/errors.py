"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or HTTP. They serve as stable contracts between repositories and
application services.

The translation to HTTP responses (RFC 7807) is handled by
``todolists/core/errors.py`` via ``BaseService.translate_exceptions()``.

Missing resources are not errors here: services return ``None``, ``False``
or empty collections for them.
"""

from __future__ import annotations


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - The API layer or BaseService will later translate them to APIError.
    """

    pass


class AuthenticationError(ServiceError):
    """
    Raised when an operation needs an identity and the caller has none, or
    when sign-in credentials do not match.
    """

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class ValidationError(ServiceError):
    """
    Raised when input cannot be stored as given (duplicate email, malformed
    identifier handed to the document store).
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
