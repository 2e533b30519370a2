from __future__ import annotations

import logging
import os

from ...domain.entities import ClaimsChain, unix_seconds
from ...domain.exceptions import (
    ClaimsDecodeError,
    CorruptStateError,
    MintError,
)
from ...domain.ports import ClaimsTransport, Clock, IdentifierSource, TokenStore
from ...domain.value_objects import RefreshInterval

logger = logging.getLogger(__name__)


class TokenManager:
    """
    Issues and rotates the ephemeral client fingerprint.

    The manager caches the current epoch in memory and mirrors it to a
    single token store. Expiry is checked lazily on each `current_token`
    call; when the cached epoch is missing or expired a successor is
    minted, chained to the previous one, persisted, and only then cached.

    Collaborators are injected; `new_manager` wires the default ones.

    Not thread-safe: callers sharing one instance across threads must
    serialize calls themselves. Two managers on the same file will race.
    """

    def __init__(
            self,
            token_file: str | os.PathLike[str],
            refresh_seconds: int | RefreshInterval,
            clock: Clock,
            *,
            transport: ClaimsTransport,
            ids: IdentifierSource,
            store: TokenStore,
    ) -> None:
        self._refresh = (
            refresh_seconds
            if isinstance(refresh_seconds, RefreshInterval)
            else RefreshInterval(refresh_seconds)
        )
        self._token_file = token_file
        self._clock = clock
        self._transport = transport
        self._ids = ids
        self._store = store

        self._claims: ClaimsChain | None = None
        self._token: bytes | None = None

        # Fail fast: make sure the file exists and is readable now.
        self.current_token()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    @property
    def token_file(self) -> str | os.PathLike[str]:
        return self._token_file

    @property
    def refresh_interval(self) -> RefreshInterval:
        return self._refresh

    @property
    def claims(self) -> ClaimsChain | None:
        """The cached epoch, or None before the first successful access."""
        return self._claims

    def current_token(self) -> bytes:
        """
        Return the serialized current epoch, rotating it first if needed.

        Raises:
            TokenStorageError: the token file could not be read or written
            CorruptStateError: the token file holds an invalid record
            MintError: a new record could not be produced
        """
        if self._claims is None:
            self._load()

        if (
            self._claims is None
            or self._token is None
            or self._claims.is_expired(unix_seconds(self._clock))
        ):
            return self._rotate()

        return self._token

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _load(self) -> None:
        data = self._store.read()
        if data is None:
            return

        try:
            claims = self._transport.decode(data)
        except ClaimsDecodeError as exc:
            raise CorruptStateError(f"Failed to parse token file {self._token_file}: {exc}") from exc

        logger.debug(
            "Loaded fingerprint epoch %d (expires at %d)",
            claims.sequence_no,
            claims.expires_at,
        )
        self._claims = claims
        self._token = data

    def _rotate(self) -> bytes:
        now = unix_seconds(self._clock)
        previous = self._claims

        try:
            if previous is None:
                claims = ClaimsChain.mint_first(now, self._refresh, self._ids)
            else:
                claims = ClaimsChain.mint_next(previous, now, self._refresh, self._ids)
            token = self._transport.encode(claims)
        except Exception as exc:
            raise MintError(f"Failed to create new token: {exc}") from exc

        # Cache is only updated once the write has succeeded, so a retry
        # after a failed write mints from the same predecessor.
        self._store.write(token)

        self._claims = claims
        self._token = token
        logger.info(
            "Rotated fingerprint to epoch %d (expires at %d)",
            claims.sequence_no,
            claims.expires_at,
        )
        return token
