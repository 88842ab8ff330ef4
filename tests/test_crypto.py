import hashlib

import pytest

from scratchmerkle import crypto
from scratchmerkle.crypto import Hasher


def test_digest_matches_hashlib():
    h = Hasher("sha256", "hex")
    assert h.digest(b"a") == hashlib.sha256(b"a").digest()
    assert h.digest(b"a").hex() == "ca978112ca1bbdcafac231b39a23dc4da786eff8147c4e72b9807785afee48bb"
    assert h.size == 32


def test_combine_hex_and_raw():
    left = hashlib.sha256(b"a").digest()
    right = hashlib.sha256(b"b").digest()
    hexed = Hasher("sha256", "hex").combine(left, right)
    raw = Hasher("sha256", "raw").combine(left, right)
    assert hexed.hex() == "62af5c3cb8da3e4f25061e829ebeea5c7513c54949115b1acc225930a90154da"
    assert raw == hashlib.sha256(left + right).digest()
    assert hexed != raw
    assert Hasher().combine(left, right) != Hasher().combine(right, left)


@pytest.mark.parametrize("algo,size", [
    ("sha256", 32),
    ("sha512", 64),
    ("sha3_256", 32),
    ("blake2s", 32),
    ("blake2b", 64),
])
def test_algorithms(algo, size):
    h = Hasher(algo)
    assert len(h.digest(b"payload")) == size
    assert h.size == size
    assert h.digest(b"payload") == getattr(hashlib, algo)(b"payload").digest()


def test_rejects_unknown_settings():
    with pytest.raises(ValueError):
        Hasher("md5")
    with pytest.raises(ValueError):
        Hasher("sha256", "base64")
    with pytest.raises(ValueError):
        crypto.hash_bytes(b"x", "sha1")


def test_default_hasher_follows_env(monkeypatch, load_config_module):
    load_config_module(monkeypatch, hash="sha512", concat="raw")
    h = crypto.default_hasher()
    assert h == Hasher("sha512", "raw")


def test_bad_env_falls_back(monkeypatch, load_config_module):
    config = load_config_module(monkeypatch, hash="md5", concat="weird", leaf_length="-3")
    assert config.HASH_ALGO == "sha256"
    assert config.CONCAT_MODE == "hex"
    assert config.LEAF_LENGTH == 16
    assert crypto.default_hasher() == Hasher()
