"""
erf_client.runtime

Glue for running the fingerprint client outside of library code:

- FingerprintSettings: token file location + refresh interval.
- settings_from_env / manager_from_env: env-driven construction.
- main: the `erf-token` command-line entry point.
"""

from __future__ import annotations

from .settings import FingerprintSettings
from .env import refresh_seconds_from_env, settings_from_env, manager_from_env

__all__ = [
    "FingerprintSettings",
    "refresh_seconds_from_env",
    "settings_from_env",
    "manager_from_env",
]
