"""Adapter layer: payload mapping, object store and provider senders."""

from .fake_senders import ConsoleDispatcher, make_in_memory_list_keys
from .object_store import build_store_client, list_object_keys, make_list_keys
from .payload import parse_package_request
from .real_senders import create_twilio_message, post_cloud_api_message

__all__ = [
    "ConsoleDispatcher",
    "build_store_client",
    "create_twilio_message",
    "list_object_keys",
    "make_in_memory_list_keys",
    "make_list_keys",
    "parse_package_request",
    "post_cloud_api_message",
]
