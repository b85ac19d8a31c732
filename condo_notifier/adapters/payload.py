"""Payload adapter functions.

Mental model refresher:
- This is an adapter/edge module.
- It translates transport-shaped data (an inbound JSON body) into the
  internal request dictionary used by application/domain code.
- It validates shape and required fields before the pipeline runs; it does
  not look anything up or send anything.
"""

from __future__ import annotations

from typing import Any

from ..types import PackageRequest, Payload


def parse_package_request(payload: Payload, *, require_recipient: bool = False) -> PackageRequest:
    """Normalize an inbound payload into a plain request dictionary.

    Accepts both the route field names (`condoName`, `sqft`, `phoneNumber`,
    `name`) and the descriptive ones (`propertyId`, `sizeFilter`,
    `recipientAddress`, `displayName`, `messageText`).
    """
    recipient = _as_optional_str(_first(payload, "recipientAddress", "phoneNumber"))
    if require_recipient and not recipient:
        raise ValueError("Missing required field: recipientAddress")

    return {
        "property_id": _as_required_str(_first(payload, "propertyId", "condoName"), "propertyId"),
        "size_filter": _as_required_str(_first(payload, "sizeFilter", "sqft"), "sizeFilter"),
        "recipient": recipient,
        "display_name": _as_optional_str(_first(payload, "displayName", "name")),
        "message": _as_optional_str(_first(payload, "messageText", "message")),
    }


def _first(payload: Payload, *names: str) -> Any:
    for name in names:
        value = payload.get(name)
        if value is not None:
            return value
    return None


def _as_required_str(value: Any, field_name: str) -> str:
    text = str(value).strip() if value is not None else ""
    if not text:
        raise ValueError(f"Missing required field: {field_name}")
    return text


def _as_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
