from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .constants import ClaimName, REQUIRED_CLAIMS
from .exceptions import ClaimsDecodeError
from .ports import Clock, IdentifierSource
from .value_objects import Fingerprint, RefreshInterval


@dataclass(frozen=True, slots=True)
class ClaimsChain:
    """
    One epoch of the client fingerprint.

    Successive epochs are linked: `sequence_no` grows by one on every
    rotation and `previous` holds the subject of the epoch before. The
    first epoch has `sequence_no == 0` and `previous == ""`.

    Instances are immutable; rotation always builds a new one.
    """
    issued_at: int
    expires_at: int
    sequence_no: int
    subject: str
    previous: str = ""

    # ---- minting ---------------------------------------------------------

    @classmethod
    def mint_first(
            cls,
            now: int,
            refresh: RefreshInterval,
            ids: IdentifierSource,
    ) -> ClaimsChain:
        return cls(
            issued_at=now,
            expires_at=now + refresh.seconds,
            sequence_no=0,
            subject=ids.new_id(),
            previous="",
        )

    @classmethod
    def mint_next(
            cls,
            previous: ClaimsChain,
            now: int,
            refresh: RefreshInterval,
            ids: IdentifierSource,
    ) -> ClaimsChain:
        return cls(
            issued_at=now,
            expires_at=now + refresh.seconds,
            sequence_no=previous.sequence_no + 1,
            subject=ids.new_id(),
            previous=previous.subject,
        )

    # ---- queries ---------------------------------------------------------

    def is_expired(self, now: int) -> bool:
        # Inclusive: an epoch is stale at exactly `expires_at`.
        return now >= self.expires_at

    def follows(self, other: ClaimsChain) -> bool:
        """True if this epoch is the direct successor of `other`."""
        return (
            self.sequence_no == other.sequence_no + 1
            and self.previous == other.subject
        )

    @property
    def fingerprint(self) -> Fingerprint:
        return Fingerprint(self.subject)

    # ---- claims mapping --------------------------------------------------

    def to_claims(self) -> dict[str, Any]:
        return {
            ClaimName.ISSUED_AT.value: self.issued_at,
            ClaimName.EXPIRES_AT.value: self.expires_at,
            ClaimName.SUBJECT.value: self.subject,
            ClaimName.SEQUENCE_NO.value: self.sequence_no,
            ClaimName.PREVIOUS.value: self.previous,
        }

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> ClaimsChain:
        """
        Build a record from decoded claims, rejecting anything that could
        not have been produced by `mint_first` / `mint_next`.

        Raises:
            ClaimsDecodeError
        """
        missing = [name for name in REQUIRED_CLAIMS if name not in claims]
        if missing:
            raise ClaimsDecodeError(f"Missing claims: {', '.join(missing)}")

        issued_at = _int_claim(claims, ClaimName.ISSUED_AT)
        expires_at = _int_claim(claims, ClaimName.EXPIRES_AT)
        sequence_no = _int_claim(claims, ClaimName.SEQUENCE_NO)
        subject = _str_claim(claims, ClaimName.SUBJECT)
        previous = _str_claim(claims, ClaimName.PREVIOUS)

        if not subject:
            raise ClaimsDecodeError("Empty subject")
        if sequence_no < 0:
            raise ClaimsDecodeError(f"Negative sequence number: {sequence_no}")
        if expires_at <= issued_at:
            raise ClaimsDecodeError(
                f"Expiry {expires_at} is not after issue time {issued_at}"
            )
        if (sequence_no == 0) != (previous == ""):
            raise ClaimsDecodeError(
                f"Sequence number {sequence_no} does not match previous {previous!r}"
            )

        return cls(
            issued_at=issued_at,
            expires_at=expires_at,
            sequence_no=sequence_no,
            subject=subject,
            previous=previous,
        )


def _int_claim(claims: Mapping[str, Any], name: ClaimName) -> int:
    value = claims[name.value]
    # bool is an int subclass; JSON true/false is never a valid timestamp
    if isinstance(value, bool) or not isinstance(value, int):
        raise ClaimsDecodeError(f"Claim {name.value!r} must be an integer, got {value!r}")
    return value


def _str_claim(claims: Mapping[str, Any], name: ClaimName) -> str:
    value = claims[name.value]
    if not isinstance(value, str):
        raise ClaimsDecodeError(f"Claim {name.value!r} must be a string, got {value!r}")
    return value


def unix_seconds(clock: Clock) -> int:
    """Whole seconds since the epoch, truncated like a JWT NumericDate."""
    return int(clock.now().timestamp())
