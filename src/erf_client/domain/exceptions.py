class FingerprintError(Exception):
    """Base class for every error raised by erf_client."""
    pass


class TokenStorageError(FingerprintError, OSError):
    """Raised when the token file cannot be read or written."""
    pass


class ClaimsDecodeError(FingerprintError):
    """Raised by a claims transport when bytes do not hold a valid record."""
    pass


class CorruptStateError(FingerprintError):
    """Raised when the stored token exists but cannot be trusted."""
    pass


class MintError(FingerprintError):
    """Raised when a new epoch cannot be produced or encoded."""
    pass
