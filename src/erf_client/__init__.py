"""
erf_client

Ephemeral random fingerprints: a client-side token that lets a remote
service recognize a returning anonymous client across sessions, while
rotating regularly so no stable identifier is ever sent.
"""

__version__ = "0.1.0"

from .domain.entities import ClaimsChain
from .domain.constants import ClaimName
from .domain.exceptions import (
    FingerprintError,
    TokenStorageError,
    ClaimsDecodeError,
    CorruptStateError,
    MintError,
)
from .domain.value_objects import Fingerprint, RefreshInterval
from .domain.ports import ClaimsTransport, Clock, IdentifierSource, TokenStore

from .application.use_cases.current_token import TokenManager

from .adapters.jwt.transport import UnsignedJWTTransport
from .adapters.system.clock import SystemClock, ManualClock
from .adapters.system.identifiers import UUIDIdentifierSource
from .adapters.filesystem.token_file import TokenFile

from .integrations.common.client_factory import new_manager

__all__ = [
    "__version__",
    # domain core
    "ClaimsChain",
    "ClaimName",
    "Fingerprint",
    "RefreshInterval",
    "ClaimsTransport",
    "Clock",
    "IdentifierSource",
    "TokenStore",
    # exceptions
    "FingerprintError",
    "TokenStorageError",
    "ClaimsDecodeError",
    "CorruptStateError",
    "MintError",
    # use cases
    "TokenManager",
    "new_manager",
    # adapters
    "UnsignedJWTTransport",
    "SystemClock",
    "ManualClock",
    "UUIDIdentifierSource",
    "TokenFile",
]
