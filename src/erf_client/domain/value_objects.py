# src/erf_client/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RefreshInterval:
    """
    Lifetime of one epoch, in whole seconds.

    Must be strictly positive so that every minted record satisfies
    `expires_at > issued_at`.
    """
    seconds: int

    def __post_init__(self) -> None:
        if isinstance(self.seconds, bool) or not isinstance(self.seconds, int):
            raise ValueError(f"Refresh interval must be an integer: {self.seconds!r}")
        if self.seconds <= 0:
            raise ValueError(f"Refresh interval must be positive: {self.seconds!r}")

    def __int__(self) -> int:
        return self.seconds


@dataclass(frozen=True, slots=True)
class Fingerprint:
    """
    The value sent to a remote service to recognize a returning client.

    Kept as a separate type so it is not mistaken for a stable user ID:
    it changes on every rotation.
    """
    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Fingerprint must not be empty")

    def __str__(self) -> str:
        return self.value
