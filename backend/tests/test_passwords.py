"""
Daily Pause Backend — Password Hasher Unit Tests
=================================================

What we test:
    ✅ sha256 scheme produces the 64-char lowercase hex digest
    ✅ bcrypt hashes are library-format and salted
    ✅ verify() accepts both encodings regardless of configured scheme
    ✅ needs_rehash() flags legacy and outdated credentials
    ✅ malformed stored values never verify
"""

import hashlib

import bcrypt
import pytest

from daily_pause.security.passwords import PasswordHasher, is_bcrypt


class TestSha256Scheme:
    def setup_method(self):
        self.hasher = PasswordHasher(scheme="sha256")

    def test_hash_is_hex_sha256(self):
        digest = self.hasher.hash("secret1")
        assert digest == hashlib.sha256(b"secret1").hexdigest()
        assert len(digest) == 64
        assert digest == digest.lower()

    def test_verify_roundtrip(self):
        digest = self.hasher.hash("secret1")
        assert self.hasher.verify("secret1", digest) is True
        assert self.hasher.verify("secret2", digest) is False

    def test_uppercase_stored_digest_still_verifies(self):
        digest = self.hasher.hash("secret1").upper()
        assert self.hasher.verify("secret1", digest) is True


class TestBcryptScheme:
    def setup_method(self):
        self.hasher = PasswordHasher(scheme="bcrypt", rounds=4)

    def test_hash_is_bcrypt_format(self):
        stored = self.hasher.hash("secret1")
        assert stored.startswith("$2b$04$")
        assert is_bcrypt(stored)
        # Readable by the library itself, not just by our verify()
        assert bcrypt.checkpw(b"secret1", stored.encode("ascii"))

    def test_hashes_are_salted(self):
        assert self.hasher.hash("secret1") != self.hasher.hash("secret1")

    def test_verify(self):
        stored = self.hasher.hash("secret1")
        assert self.hasher.verify("secret1", stored) is True
        assert self.hasher.verify("Secret1", stored) is False

    def test_verifies_legacy_sha256(self):
        legacy = hashlib.sha256(b"secret1").hexdigest()
        assert self.hasher.verify("secret1", legacy) is True

    def test_verifies_hash_from_other_bcrypt_implementations(self):
        stored = bcrypt.hashpw(b"secret1", bcrypt.gensalt(rounds=4, prefix=b"2a")).decode()
        assert self.hasher.verify("secret1", stored) is True

    def test_long_password(self):
        long_password = "x" * 100
        stored = self.hasher.hash(long_password)
        assert self.hasher.verify(long_password, stored) is True

    def test_malformed_bcrypt_value_fails(self):
        assert self.hasher.verify("secret1", "$2b$04$not-a-real-hash") is False


class TestNeedsRehash:
    def test_legacy_digest_needs_rehash_under_bcrypt(self):
        hasher = PasswordHasher(scheme="bcrypt", rounds=4)
        assert hasher.needs_rehash(hashlib.sha256(b"x").hexdigest()) is True

    def test_cost_change_needs_rehash(self):
        old = PasswordHasher(scheme="bcrypt", rounds=4).hash("x")
        assert PasswordHasher(scheme="bcrypt", rounds=5).needs_rehash(old) is True
        assert PasswordHasher(scheme="bcrypt", rounds=4).needs_rehash(old) is False

    def test_sha256_scheme_keeps_sha256(self):
        hasher = PasswordHasher(scheme="sha256")
        assert hasher.needs_rehash(hasher.hash("x")) is False


def test_unknown_scheme_rejected():
    with pytest.raises(ValueError):
        PasswordHasher(scheme="md5")
