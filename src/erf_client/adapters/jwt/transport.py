from typing import Any, Mapping

import jwt
from jwt.exceptions import PyJWTError

from ...domain.constants import REQUIRED_CLAIMS
from ...domain.entities import ClaimsChain
from ...domain.exceptions import ClaimsDecodeError
from ...domain.ports import ClaimsTransport


class UnsignedJWTTransport(ClaimsTransport):
    """
    Adapter implementing ClaimsTransport port using PyJWT with the "none"
    algorithm.

    This is an encoding, not a signature: anyone holding the bytes can
    read and forge them. Swap in a signing transport if authenticity
    matters; TokenManager does not care which one it gets.
    """

    algorithm = "none"

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    def encode(self, claims: ClaimsChain) -> bytes:
        token = jwt.encode(claims.to_claims(), None, algorithm=self.algorithm)
        return token.encode("ascii")

    def decode(self, data: bytes) -> ClaimsChain:
        """
        Decode and structurally validate token bytes.

        `exp` is deliberately not checked here: an expired record is still
        a valid link for the next epoch.

        Raises:
            ClaimsDecodeError
        """
        try:
            token = data.decode("ascii").strip()
        except UnicodeDecodeError as exc:
            raise ClaimsDecodeError(f"Token is not ASCII: {exc}") from exc

        try:
            headers = jwt.get_unverified_header(token)
            if headers.get("alg") != self.algorithm:
                raise ClaimsDecodeError(
                    f"Unexpected algorithm: expected {self.algorithm}, got {headers.get('alg')}"
                )

            payload: Mapping[str, Any] = jwt.decode(
                token,
                options={
                    "verify_signature": False,
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": list(REQUIRED_CLAIMS),
                },
            )
        except PyJWTError as exc:
            raise ClaimsDecodeError(f"Invalid token: {exc}") from exc

        return ClaimsChain.from_claims(payload)
