from __future__ import annotations

import os

from .settings import DEFAULT_REFRESH_SECONDS, FingerprintSettings
from ..application.use_cases.current_token import TokenManager
from ..integrations.common.client_factory import new_manager


def refresh_seconds_from_env(default: int = DEFAULT_REFRESH_SECONDS) -> int:
    key = "ERF_REFRESH_SECONDS"
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise RuntimeError(f"{key} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise RuntimeError(f"{key} must be positive, got {value}")
    return value


def settings_from_env() -> FingerprintSettings:
    token_file = os.getenv("ERF_TOKEN_FILE")
    if not token_file or not token_file.strip():
        raise RuntimeError("Missing fingerprint settings: ERF_TOKEN_FILE")

    return FingerprintSettings(
        token_file=token_file,
        refresh_seconds=refresh_seconds_from_env(),
    )


def manager_from_env() -> TokenManager:
    """Convenience wrapper using env-configured settings."""
    settings = settings_from_env()
    return new_manager(settings.token_path, settings.refresh_seconds)
