"""Real provider adapters for WhatsApp delivery.

Mental model refresher:
- This module is an outbound adapter.
- Each function performs exactly one provider API call.
- Failures raise `RuntimeError` carrying provider details; the dispatchers
  log those details and collapse them into an opaque `DeliveryError`.
"""

from __future__ import annotations

import base64
import json
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Mapping

from ..config import CloudApiConfig, TwilioConfig


def post_cloud_api_message(config: CloudApiConfig, payload: Mapping[str, Any]) -> None:
    """POST one message payload to the WhatsApp Cloud API."""
    data = json.dumps(dict(payload), separators=(",", ":")).encode("utf-8")

    request = urllib.request.Request(config.messages_endpoint, data=data, method="POST")
    request.add_header("Authorization", f"Bearer {config.access_token}")
    request.add_header("Content-Type", "application/json")

    _send(request, timeout_seconds=config.timeout_seconds, provider="WhatsApp Cloud API")


def create_twilio_message(
    config: TwilioConfig,
    *,
    to: str,
    from_: str,
    body: str,
    media_url: str | None = None,
) -> None:
    """Create one message through the Twilio Messages REST resource."""
    fields = {"To": to, "From": from_, "Body": body}
    if media_url:
        fields["MediaUrl"] = media_url
    data = urllib.parse.urlencode(fields).encode("utf-8")

    request = urllib.request.Request(config.messages_endpoint, data=data, method="POST")
    request.add_header("Authorization", _basic_auth_header(config.account_sid, config.auth_token))
    request.add_header("Content-Type", "application/x-www-form-urlencoded")

    _send(request, timeout_seconds=config.timeout_seconds, provider="Twilio")


def _send(request: urllib.request.Request, *, timeout_seconds: float, provider: str) -> None:
    try:
        with urllib.request.urlopen(request, timeout=timeout_seconds) as response:
            status = int(response.getcode())
            if status < 200 or status >= 300:
                raise RuntimeError(f"{provider} send failed with status {status}")
            response.read()
    except urllib.error.HTTPError as exc:
        details = exc.read().decode("utf-8", errors="replace")
        raise RuntimeError(f"{provider} send failed HTTP {exc.code}: {details[:300]}") from exc
    except urllib.error.URLError as exc:
        raise RuntimeError(f"{provider} send failed: {exc.reason}") from exc


def _basic_auth_header(username: str, password: str) -> str:
    token = f"{username}:{password}".encode("utf-8")
    encoded = base64.b64encode(token).decode("ascii")
    return f"Basic {encoded}"
