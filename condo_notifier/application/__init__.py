"""Application layer: use-case orchestration and process wiring."""

from .process import find_package_assets, send_package
from .wiring import (
    build_dispatcher,
    build_dispatcher_from_env,
    build_locator,
    build_locator_from_env,
)

__all__ = [
    "build_dispatcher",
    "build_dispatcher_from_env",
    "build_locator",
    "build_locator_from_env",
    "find_package_assets",
    "send_package",
]
