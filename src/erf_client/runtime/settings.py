from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_REFRESH_SECONDS = 24 * 60 * 60


@dataclass(slots=True)
class FingerprintSettings:
    """
    Where the token lives and how often it rotates.

    Host code decides how to construct this (env, config file, etc.).
    """
    token_file: str
    refresh_seconds: int = DEFAULT_REFRESH_SECONDS

    @property
    def token_path(self) -> Path:
        return Path(self.token_file.strip()).expanduser()
