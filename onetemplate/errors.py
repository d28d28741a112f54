"""Error types raised while building, parsing and sending templates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .lexer import Token


class TemplateError(Exception):
    pass


class NotFoundError(TemplateError, LookupError):
    def __init__(self, key: str, message: Optional[str] = None):
        self.key = key
        super().__init__(message or f"key {key} not found")


class MultipleMatchesError(TemplateError, LookupError):
    def __init__(self, key: str, count: int, message: Optional[str] = None):
        self.key = key
        self.count = count
        super().__init__(message or f"multiple entries with key {key} ({count} found)")


class TypeMismatchError(TemplateError, TypeError):
    def __init__(self, message: str, key: Optional[str] = None, value: Any = None):
        self.key = key
        self.value = value
        super().__init__(message)


class AlreadySetError(TemplateError):
    def __init__(self, key: str, group: str = "template"):
        self.key = key
        super().__init__(f"{group}: the key {key} is already present in template")


class ParseError(TemplateError, ValueError):
    def __init__(self, message: str, token: Optional["Token"] = None):
        self.message = message
        self.token = token
        if token:
            message = f"{message} at line {token.line}" + f", {token=}"
        super().__init__(message)


class TransportFault(TemplateError):
    """Failure reported by (or while reaching) the remote endpoint."""

    def __init__(self, method: str, message: str, code: Optional[int] = None):
        self.method = method
        self.code = code
        self.message = message
        detail = f"{method}: {message}"
        if code is not None:
            detail += f" (code {code})"
        super().__init__(detail)


__all__ = [
    "TemplateError",
    "NotFoundError",
    "MultipleMatchesError",
    "TypeMismatchError",
    "AlreadySetError",
    "ParseError",
    "TransportFault",
]
