"""Process-wide construction of the store client and messaging backend.

Everything here runs once at startup; the returned objects are stateless
beyond their configuration and can be shared across requests.
"""

from __future__ import annotations

from functools import partial

from ..adapters.object_store import build_store_client, make_list_keys
from ..adapters.real_senders import create_twilio_message, post_cloud_api_message
from ..config import (
    BACKEND_CLOUD_API,
    BACKEND_TWILIO,
    CloudApiConfig,
    StoreConfig,
    TwilioConfig,
    backend_from_env,
)
from ..domain.assets import AssetLocator
from ..domain.dispatch import CloudApiDispatcher, Dispatcher, TwilioDispatcher


def build_locator(config: StoreConfig) -> AssetLocator:
    return AssetLocator(config, make_list_keys(build_store_client(config)))


def build_dispatcher(
    backend: str,
    *,
    cloud_api: CloudApiConfig | None = None,
    twilio: TwilioConfig | None = None,
) -> Dispatcher:
    if backend == BACKEND_CLOUD_API:
        if cloud_api is None:
            raise RuntimeError("cloud_api backend selected without a CloudApiConfig")
        return CloudApiDispatcher(cloud_api, partial(post_cloud_api_message, cloud_api))
    if backend == BACKEND_TWILIO:
        if twilio is None:
            raise RuntimeError("twilio backend selected without a TwilioConfig")
        return TwilioDispatcher(twilio, partial(create_twilio_message, twilio))
    raise RuntimeError(f"Unknown messaging backend: {backend!r}")


def build_locator_from_env() -> AssetLocator:
    return build_locator(StoreConfig.from_env())


def build_dispatcher_from_env() -> Dispatcher:
    backend = backend_from_env()
    if backend == BACKEND_TWILIO:
        return build_dispatcher(backend, twilio=TwilioConfig.from_env())
    return build_dispatcher(backend, cloud_api=CloudApiConfig.from_env())
