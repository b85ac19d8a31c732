"""Asset lookup rules.

Mental model refresher:
- Domain modules hold the business rules:
  - which store keys belong to a property and unit size?
  - what public URL does a key resolve to?
- They do not build store clients or read configuration from the environment.
"""

from __future__ import annotations

import logging
import re
import urllib.parse

from ..config import StoreConfig
from ..errors import StoreError
from ..types import ListKeysFn

logger = logging.getLogger(__name__)

SIZE_SUFFIX = "sqft"

# `%` not starting a valid escape sequence.
_LONE_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")


def size_tag(size_filter: str) -> str:
    return f"{size_filter}{SIZE_SUFFIX}"


def matches_size(key: str, size_filter: str) -> bool:
    """Substring match on `<size_filter>sqft`, not a numeric comparison.

    A filter of "35" therefore also matches "135sqft" keys, but not
    "350sqft" ones.
    """
    return size_tag(size_filter) in key


def encode_object_key(key: str) -> str:
    """Percent-encode a store key for use as a URL path.

    Path separators are kept and existing `%XX` escapes are left alone, so
    encoding an already-encoded key is a no-op.
    """
    encoded = urllib.parse.quote(key, safe="/%")
    return _LONE_PERCENT.sub("%25", encoded)


def build_asset_url(public_host: str, key: str) -> str:
    host = public_host.rstrip("/")
    if not host.startswith(("http://", "https://")):
        host = f"https://{host}"
    return f"{host}/{encode_object_key(key)}"


class AssetLocator:
    """Resolve public asset URLs for one property and unit size."""

    def __init__(self, config: StoreConfig, list_keys: ListKeysFn) -> None:
        self._config = config
        self._list_keys = list_keys

    def locate(self, property_id: str, size_filter: str) -> list[str]:
        if not property_id:
            raise ValueError("property_id must not be empty")

        prefix = f"{property_id}/"
        try:
            keys = self._list_keys(self._config.bucket, prefix)
        except Exception as exc:
            logger.exception(
                "[STORE ERROR] bucket=%s prefix=%s error=%s", self._config.bucket, prefix, exc
            )
            raise StoreError() from exc

        urls = [
            build_asset_url(self._config.public_host, key)
            for key in keys
            if key.startswith(prefix) and matches_size(key, size_filter)
        ]
        logger.info(
            "[LOCATE] prefix=%s size=%s listed=%d matched=%d",
            prefix,
            size_tag(size_filter),
            len(keys),
            len(urls),
        )
        return urls
