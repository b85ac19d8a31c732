"""Fake adapters for local smoke tests.

Mental model refresher:
- In production the object store and messaging provider sit behind these
  same shapes; domain code does not know which implementation is underneath.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..domain.dispatch import mask_address
from ..types import ListKeysFn

logger = logging.getLogger(__name__)


class ConsoleDispatcher:
    """Log the would-be messages instead of sending them."""

    def dispatch(self, recipient: str, message: str, asset_urls: Sequence[str]) -> None:
        logger.info("[WHATSAPP] to=%s", mask_address(recipient))
        logger.info("message=%s", message)
        for url in asset_urls:
            logger.info("media=%s", url)


def make_in_memory_list_keys(keys: Iterable[str]) -> ListKeysFn:
    """Return a `list_keys(bucket, prefix)` callable over a fixed key list."""
    stored = list(keys)

    def list_keys(bucket: str, prefix: str) -> list[str]:
        _ = bucket
        return [key for key in stored if key.startswith(prefix)]

    return list_keys
