"""Unit tests for ScryptPasswordHasher"""

from goldbill.adapter.services.password_hasher import ScryptPasswordHasher

# Low cost keeps the suite fast
hasher = ScryptPasswordHasher(n=1024)


def test_hash_verifies():
    encoded = hasher.hash("s3cret")

    assert hasher.verify("s3cret", encoded)
    assert not hasher.verify("S3cret", encoded)


def test_hash_format_and_salting():
    first = hasher.hash("s3cret")
    second = hasher.hash("s3cret")

    digest, salt = first.split(".")
    assert len(digest) == 128
    assert len(salt) == 32
    assert first != second


def test_malformed_hash_is_rejected():
    assert not hasher.verify("s3cret", "no-separator")
    assert not hasher.verify("s3cret", "zz-not-hex.abcdef")
    assert not hasher.verify("s3cret", ".salt")
