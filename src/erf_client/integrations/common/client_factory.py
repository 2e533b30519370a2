from __future__ import annotations

import os

from ...adapters.filesystem.token_file import TokenFile
from ...adapters.jwt.transport import UnsignedJWTTransport
from ...adapters.system.clock import SystemClock
from ...adapters.system.identifiers import UUIDIdentifierSource
from ...application.use_cases.current_token import TokenManager
from ...domain.ports import ClaimsTransport, Clock, IdentifierSource, TokenStore
from ...domain.value_objects import RefreshInterval


def new_manager(
        token_file: str | os.PathLike[str],
        refresh_seconds: int | RefreshInterval,
        clock: Clock | None = None,
        *,
        transport: ClaimsTransport | None = None,
        ids: IdentifierSource | None = None,
        store: TokenStore | None = None,
) -> TokenManager:
    """
    High-level factory: token file + refresh interval -> TokenManager.

    - wires the system clock, UUID identifiers, the unsigned JWT
      transport and a TokenFile at `token_file` unless overridden
    - performs the first access, so the token file exists on return

    Raises whatever the first `current_token()` call raises, plus
    ValueError for a non-positive refresh interval.
    """
    return TokenManager(
        token_file,
        refresh_seconds,
        clock or SystemClock(),
        transport=transport or UnsignedJWTTransport(),
        ids=ids or UUIDIdentifierSource(),
        store=store or TokenFile(token_file),
    )
