"""Condo package lookup and WhatsApp delivery.

Module layout by abstraction layer:
- adapters: payload mapping, object store and provider senders
- domain: asset lookup and per-backend delivery rules
- application: use-case orchestration and process wiring
"""

from .adapters import ConsoleDispatcher, parse_package_request
from .application import (
    build_dispatcher,
    build_dispatcher_from_env,
    build_locator,
    build_locator_from_env,
    find_package_assets,
    send_package,
)
from .config import CloudApiConfig, StoreConfig, TwilioConfig
from .domain import (
    AssetLocator,
    CloudApiDispatcher,
    TwilioDispatcher,
    compose_package_message,
    normalize_whatsapp_address,
)
from .errors import DeliveryError, NotifierError, StoreError

__all__ = [
    "AssetLocator",
    "CloudApiConfig",
    "CloudApiDispatcher",
    "ConsoleDispatcher",
    "DeliveryError",
    "NotifierError",
    "StoreConfig",
    "StoreError",
    "TwilioConfig",
    "TwilioDispatcher",
    "build_dispatcher",
    "build_dispatcher_from_env",
    "build_locator",
    "build_locator_from_env",
    "compose_package_message",
    "find_package_assets",
    "normalize_whatsapp_address",
    "parse_package_request",
    "send_package",
]
