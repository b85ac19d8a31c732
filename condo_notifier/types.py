"""Shared type aliases for the condo notifier package."""

from __future__ import annotations

from typing import Any, Callable, Mapping

Payload = Mapping[str, Any]
PackageRequest = dict[str, Any]
PipelineResult = dict[str, Any]

ListKeysFn = Callable[[str, str], list[str]]
PostMessageFn = Callable[..., None]
CreateMessageFn = Callable[..., None]
