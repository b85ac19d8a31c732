"""Domain layer: asset lookup and delivery rules."""

from .assets import AssetLocator, build_asset_url, encode_object_key, matches_size
from .dispatch import (
    CloudApiDispatcher,
    Dispatcher,
    TwilioDispatcher,
    mask_address,
    normalize_whatsapp_address,
    strip_whatsapp_address,
)
from .message import compose_package_message

__all__ = [
    "AssetLocator",
    "CloudApiDispatcher",
    "Dispatcher",
    "TwilioDispatcher",
    "build_asset_url",
    "compose_package_message",
    "encode_object_key",
    "mask_address",
    "matches_size",
    "normalize_whatsapp_address",
    "strip_whatsapp_address",
]
