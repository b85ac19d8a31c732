"""Environment-variable configuration for the store and messaging backends.

Mental model refresher:
- Config objects are built once per process and passed into constructors.
- Nothing here opens a connection; adapters build clients from these values.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

BACKEND_CLOUD_API = "cloud_api"
BACKEND_TWILIO = "twilio"
BACKENDS = (BACKEND_CLOUD_API, BACKEND_TWILIO)


@dataclass(frozen=True)
class StoreConfig:
    bucket: str
    public_host: str
    endpoint_url: str | None = None
    access_key_id: str | None = None
    secret_access_key: str | None = None
    region: str = "auto"

    @classmethod
    def from_env(cls) -> StoreConfig:
        return cls(
            bucket=os.getenv("R2_BUCKET", "bl-whatsapp").strip(),
            public_host=os.getenv("ASSET_PUBLIC_HOST", "zynarvis.com").strip(),
            endpoint_url=_required_env("R2_ENDPOINT"),
            access_key_id=_required_env("R2_ACCESS_KEY_ID"),
            secret_access_key=_required_env("R2_SECRET_ACCESS_KEY"),
            region=os.getenv("R2_REGION", "auto").strip() or "auto",
        )


@dataclass(frozen=True)
class CloudApiConfig:
    phone_number_id: str
    access_token: str
    api_version: str = "v18.0"
    base_url: str = "https://graph.facebook.com"
    timeout_seconds: float = 10.0
    include_media_messages: bool = False

    @classmethod
    def from_env(cls) -> CloudApiConfig:
        return cls(
            phone_number_id=_required_env("WHATSAPP_PHONE_NUMBER_ID"),
            access_token=_required_env("WHATSAPP_ACCESS_TOKEN"),
            api_version=os.getenv("WHATSAPP_API_VERSION", "v18.0").strip(),
            base_url=os.getenv("WHATSAPP_API_BASE_URL", "https://graph.facebook.com").rstrip("/"),
            timeout_seconds=float(os.getenv("WHATSAPP_TIMEOUT_SECONDS", "10")),
            include_media_messages=_env_bool("WHATSAPP_INCLUDE_MEDIA_MESSAGES", default=False),
        )

    @property
    def messages_endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.api_version}/{self.phone_number_id}/messages"


@dataclass(frozen=True)
class TwilioConfig:
    account_sid: str
    auth_token: str
    from_address: str
    base_url: str = "https://api.twilio.com"
    timeout_seconds: float = 10.0

    @classmethod
    def from_env(cls) -> TwilioConfig:
        return cls(
            account_sid=_required_env("TWILIO_ACCOUNT_SID"),
            auth_token=_required_env("TWILIO_AUTH_TOKEN"),
            from_address=_required_env("TWILIO_WHATSAPP_FROM"),
            base_url=os.getenv("TWILIO_API_BASE_URL", "https://api.twilio.com").rstrip("/"),
            timeout_seconds=float(os.getenv("TWILIO_TIMEOUT_SECONDS", "10")),
        )

    @property
    def messages_endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/2010-04-01/Accounts/{self.account_sid}/Messages.json"


def backend_from_env() -> str:
    """Return the messaging backend selected for this deployment."""
    raw = os.getenv("NOTIFIER_BACKEND", BACKEND_CLOUD_API)
    backend = raw.strip().lower()
    if backend not in BACKENDS:
        raise RuntimeError(
            f"Invalid NOTIFIER_BACKEND {raw!r}; expected one of: {', '.join(BACKENDS)}"
        )
    return backend


def _required_env(name: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise RuntimeError(f"Invalid boolean value for {name}: {raw!r}")
