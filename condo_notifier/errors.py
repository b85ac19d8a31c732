"""Opaque pipeline errors.

Callers only ever see the fixed message of these errors. The underlying
cause is chained (`raise ... from exc`) and logged where it is caught.
"""

from __future__ import annotations


class NotifierError(Exception):
    default_message = "notification pipeline failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class StoreError(NotifierError):
    """Listing the content store failed."""

    default_message = "failed to search images"


class DeliveryError(NotifierError):
    """A send to the messaging backend failed."""

    default_message = "failed to send message"
