"""Errors raised by the controller layer.

Every error carries a ``kind`` discriminator, the ``operation`` it belongs to,
the caller-facing ``detail`` and, for store failures, the original ``cause``.
``str(error)`` renders the compatibility message ``"<prefix>: <detail>"`` that
HTTP clients match on, e.g. ``"Failed to create booking: Missing required
booking fields"``.
"""
from __future__ import annotations

from typing import Optional


class ControllerError(Exception):
    kind = "error"

    def __init__(
        self,
        operation: str,
        detail: str,
        *,
        cause: Optional[BaseException] = None,
        prefix: Optional[str] = None,
    ) -> None:
        self.operation = operation
        self.detail = detail
        self.cause = cause
        self.prefix = prefix or f"Failed to {operation}"
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"{self.prefix}: {self.detail}"

    def relabel(self, operation: str, prefix: Optional[str] = None) -> "ControllerError":
        """Return the same failure reported under another operation."""

        return type(self)(operation, self.detail, cause=self.cause, prefix=prefix)

    def __str__(self) -> str:
        return self.message


class ValidationFailed(ControllerError):
    """Caller-supplied data was rejected before any store call."""

    kind = "validation"


class OperationFailed(ControllerError):
    """A store call failed; ``cause`` holds the original exception."""

    kind = "operation"

    @classmethod
    def wrap(cls, operation: str, cause: BaseException, prefix: Optional[str] = None) -> "OperationFailed":
        return cls(operation, str(cause), cause=cause, prefix=prefix)
