# tests/test_domain.py
import dataclasses

import pytest

from erf_client.domain.constants import ClaimName, REQUIRED_CLAIMS
from erf_client.domain.entities import ClaimsChain
from erf_client.domain.exceptions import ClaimsDecodeError
from erf_client.domain.value_objects import Fingerprint, RefreshInterval

from conftest import CountingIds


def test_refresh_interval_value_object():
    assert RefreshInterval(100).seconds == 100
    assert int(RefreshInterval(5)) == 5

    for bad in (0, -1, 1.5, True, "100"):
        with pytest.raises(ValueError):
            RefreshInterval(bad)


def test_fingerprint_value_object():
    assert str(Fingerprint("abc")) == "abc"

    with pytest.raises(ValueError):
        Fingerprint("")


def test_required_claims():
    assert REQUIRED_CLAIMS == ("iat", "exp", "sub", "seq", "prev")
    assert ClaimName.SEQUENCE_NO == "seq"


@pytest.mark.parametrize("refresh", [1, 100, 86400])
def test_mint_first(refresh):
    claims = ClaimsChain.mint_first(1000, RefreshInterval(refresh), CountingIds())

    assert claims.issued_at == 1000
    assert claims.expires_at - claims.issued_at == refresh
    assert claims.sequence_no == 0
    assert claims.previous == ""
    assert claims.subject == "id-0"
    assert claims.fingerprint == Fingerprint("id-0")


def test_mint_next_chains_off_previous():
    ids = CountingIds()
    refresh = RefreshInterval(10)

    chain = [ClaimsChain.mint_first(0, refresh, ids)]
    for k in range(1, 6):
        chain.append(ClaimsChain.mint_next(chain[-1], k * 10, refresh, ids))

    for k, claims in enumerate(chain):
        assert claims.sequence_no == k
        assert claims.issued_at == k * 10
        assert claims.expires_at == k * 10 + 10

    for prev, nxt in zip(chain, chain[1:]):
        assert nxt.previous == prev.subject
        assert nxt.follows(prev)
        assert not prev.follows(nxt)

    assert len({c.subject for c in chain}) == len(chain)


def test_claims_are_immutable():
    claims = ClaimsChain.mint_first(0, RefreshInterval(10), CountingIds())

    with pytest.raises(dataclasses.FrozenInstanceError):
        claims.sequence_no = 5


def test_is_expired_boundary():
    claims = ClaimsChain.mint_first(1000, RefreshInterval(100), CountingIds())

    assert not claims.is_expired(1000)
    assert not claims.is_expired(1099)
    assert claims.is_expired(1100)
    assert claims.is_expired(5000)


def test_claims_mapping():
    ids = CountingIds()
    first = ClaimsChain.mint_first(0, RefreshInterval(10), ids)
    second = ClaimsChain.mint_next(first, 10, RefreshInterval(10), ids)

    assert second.to_claims() == {
        "iat": 10,
        "exp": 20,
        "sub": "id-1",
        "seq": 1,
        "prev": "id-0",
    }
    assert ClaimsChain.from_claims(second.to_claims()) == second


def _valid_claims(**overrides):
    claims = {"iat": 10, "exp": 20, "sub": "s", "seq": 1, "prev": "p"}
    claims.update(overrides)
    return claims


@pytest.mark.parametrize(
    "claims",
    [
        {"iat": 10, "exp": 20, "sub": "s", "seq": 1},
        {"exp": 20, "sub": "s", "seq": 1, "prev": "p"},
        _valid_claims(iat="10"),
        _valid_claims(exp=20.5),
        _valid_claims(seq=True),
        _valid_claims(sub=None),
        _valid_claims(prev=7),
        _valid_claims(sub=""),
        _valid_claims(seq=-1),
        _valid_claims(exp=10),
        _valid_claims(seq=0),
        _valid_claims(prev=""),
    ],
)
def test_from_claims_rejects_inconsistent_records(claims):
    with pytest.raises(ClaimsDecodeError):
        ClaimsChain.from_claims(claims)
