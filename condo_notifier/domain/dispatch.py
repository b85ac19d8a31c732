"""WhatsApp delivery rules for the two messaging backends.

Mental model refresher:
- Every backend exposes `dispatch(recipient, message, asset_urls)`.
- Backends decide how a notification is split into provider calls:
  - Cloud API: one text message, media messages only when enabled.
  - Twilio: one text message, then one media-only message per asset.
- Sends run in order and the first failure stops the rest. Messages that
  already went out are not retracted.
- Provider errors are logged here and surfaced as an opaque `DeliveryError`.
"""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from ..config import BACKEND_CLOUD_API, BACKEND_TWILIO, CloudApiConfig, TwilioConfig
from ..errors import DeliveryError
from ..types import CreateMessageFn, PostMessageFn

logger = logging.getLogger(__name__)

WHATSAPP_PREFIX = "whatsapp:"


class Dispatcher(Protocol):
    def dispatch(self, recipient: str, message: str, asset_urls: Sequence[str]) -> None: ...


def normalize_whatsapp_address(address: str) -> str:
    """Add the `whatsapp:` channel prefix if it is not already there."""
    if address.startswith(WHATSAPP_PREFIX):
        return address
    return f"{WHATSAPP_PREFIX}{address}"


def strip_whatsapp_address(address: str) -> str:
    """Drop the `whatsapp:` channel prefix; the Cloud API takes bare numbers."""
    if address.startswith(WHATSAPP_PREFIX):
        return address[len(WHATSAPP_PREFIX) :]
    return address


def mask_address(address: str) -> str:
    """Hide all but the last 4 digits of an address for logging."""
    visible_from = len(address) - 4
    return "".join(
        "*" if char.isdigit() and index < visible_from else char
        for index, char in enumerate(address)
    )


class CloudApiDispatcher:
    """Send through the WhatsApp Cloud API (Graph API `/messages`)."""

    def __init__(
        self,
        config: CloudApiConfig,
        post_message: PostMessageFn,
    ) -> None:
        self._config = config
        self._post_message = post_message

    @property
    def include_media_messages(self) -> bool:
        return self._config.include_media_messages

    def dispatch(self, recipient: str, message: str, asset_urls: Sequence[str]) -> None:
        to = strip_whatsapp_address(recipient)
        payloads = [text_payload(to, message)]
        if self.include_media_messages:
            payloads.extend(image_payload(to, url) for url in asset_urls)

        for index, payload in enumerate(payloads):
            try:
                self._post_message(payload)
            except Exception as exc:
                logger.exception(
                    "[DELIVERY ERROR] backend=%s to=%s step=%d/%d type=%s error=%s",
                    BACKEND_CLOUD_API,
                    mask_address(to),
                    index + 1,
                    len(payloads),
                    payload["type"],
                    exc,
                )
                raise DeliveryError() from exc

        logger.info(
            "[SENT] backend=%s to=%s messages=%d",
            BACKEND_CLOUD_API,
            mask_address(to),
            len(payloads),
        )


def text_payload(recipient: str, message: str) -> dict[str, object]:
    return {
        "messaging_product": "whatsapp",
        "to": recipient,
        "type": "text",
        "text": {"body": message},
    }


def image_payload(recipient: str, url: str) -> dict[str, object]:
    return {
        "messaging_product": "whatsapp",
        "to": recipient,
        "type": "image",
        "image": {"link": url},
    }


class TwilioDispatcher:
    """Send through Twilio's WhatsApp channel."""

    def __init__(
        self,
        config: TwilioConfig,
        create_message: CreateMessageFn,
    ) -> None:
        self._config = config
        self._create_message = create_message

    def dispatch(self, recipient: str, message: str, asset_urls: Sequence[str]) -> None:
        to = normalize_whatsapp_address(recipient)
        from_ = normalize_whatsapp_address(self._config.from_address)

        sends: list[dict[str, str | None]] = [{"body": message, "media_url": None}]
        sends.extend({"body": "", "media_url": url} for url in asset_urls)

        for index, send in enumerate(sends):
            try:
                self._create_message(
                    to=to, from_=from_, body=send["body"], media_url=send["media_url"]
                )
            except Exception as exc:
                logger.exception(
                    "[DELIVERY ERROR] backend=%s to=%s step=%d/%d media_url=%s error=%s",
                    BACKEND_TWILIO,
                    mask_address(to),
                    index + 1,
                    len(sends),
                    send["media_url"],
                    exc,
                )
                raise DeliveryError() from exc

        logger.info(
            "[SENT] backend=%s to=%s messages=%d", BACKEND_TWILIO, mask_address(to), len(sends)
        )
