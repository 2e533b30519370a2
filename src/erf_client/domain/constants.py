from enum import Enum


class ClaimName(str, Enum):
    ISSUED_AT = "iat"
    EXPIRES_AT = "exp"
    SUBJECT = "sub"
    SEQUENCE_NO = "seq"
    PREVIOUS = "prev"


REQUIRED_CLAIMS = tuple(name.value for name in ClaimName)
