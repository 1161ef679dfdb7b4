import pytest
from joinauth.infrastructure.security.passwords import BCryptHasher
from joinauth.infrastructure.security import AsyncHasher

#Minimal cost keeps the suite fast
ROUNDS = 4


def test_bcrypt_hash_and_verify():
    hasher = BCryptHasher(ROUNDS)
    pw = 'sup3rS3cret!'
    h = hasher.hash(pw)
    assert isinstance(h, str)
    assert h != pw
    assert hasher.verify(pw, h) is True
    assert hasher.verify('wrongpw', h) is False


def test_bcrypt_salt_uniqueness():
    hasher = BCryptHasher(ROUNDS)
    pw = 'repeat'
    h1 = hasher.hash(pw)
    h2 = hasher.hash(pw)
    assert h1 != h2
    assert hasher.verify(pw, h1) is True
    assert hasher.verify(pw, h2) is True


def test_bcrypt_hash_format_and_cost():
    h = BCryptHasher(ROUNDS).hash('formatpw')
    assert h.startswith('$2')
    assert h.split('$')[2] == '04'
    assert BCryptHasher().rounds == 10


def test_bcrypt_verify_malformed_hash_is_mismatch():
    hasher = BCryptHasher(ROUNDS)
    assert hasher.verify('pw', 'not-a-bcrypt-hash') is False
    assert hasher.verify('pw', None) is False


def test_bcrypt_hash_type_error():
    with pytest.raises(AttributeError):
        BCryptHasher(ROUNDS).hash(None)


async def test_async_hasher_adapter():
    hasher = AsyncHasher(BCryptHasher(ROUNDS))
    h = await hasher.hash('pw')
    assert await hasher.verify('pw', h) is True
    assert await hasher.verify('other', h) is False
