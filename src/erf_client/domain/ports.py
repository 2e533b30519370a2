from __future__ import annotations

from datetime import datetime
from typing import Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from .entities import ClaimsChain


class Clock(Protocol):
    """Time source. Injected so tests can freeze and advance time."""

    def now(self) -> datetime:
        ...


class IdentifierSource(Protocol):
    """Supplier of random, globally unique strings."""

    def new_id(self) -> str:
        ...


class ClaimsTransport(Protocol):
    """
    Port for turning a ClaimsChain into bytes and back.

    Implementations live in the adapters layer (e.g. unsigned JWT).
    """

    def encode(self, claims: ClaimsChain) -> bytes:
        ...

    def decode(self, data: bytes) -> ClaimsChain:
        """
        Decode and structurally validate the given bytes.

        Raises:
          - ClaimsDecodeError
        """
        ...


class TokenStore(Protocol):
    """
    Port for the single persisted token.

    `read` returns None when nothing has been stored yet; every other
    failure raises TokenStorageError.
    """

    def read(self) -> bytes | None:
        ...

    def write(self, data: bytes) -> None:
        ...
