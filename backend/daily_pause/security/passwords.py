"""
Daily Pause Backend — Password Hasher
======================================

What:  One-way transform of a plaintext password into a stored credential,
       plus the matching verify predicate.
Why:   Credentials must never be stored or compared in plaintext.
How:   Two encodings, selected by PASSWORD_SCHEME for new hashes:

    bcrypt   $2b$<rounds>$<salt+hash>, produced by the bcrypt library.
             Salted and adaptive; the default.
    sha256   64 lowercase hex chars, unsalted. The format the first
             deployment wrote; kept so those rows can still log in.

    verify() understands both encodings regardless of the configured scheme,
    and needs_rehash() tells login when to upgrade a stored credential.
"""

import hashlib
import hmac
import logging

import bcrypt

from daily_pause.config import settings

logger = logging.getLogger(__name__)

BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")
# bcrypt only looks at the first 72 bytes of the password
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """
    Hash/verify pair with a configurable scheme.

    Example:
        hasher = PasswordHasher(scheme="bcrypt", rounds=12)
        stored = hasher.hash("secret1")
        hasher.verify("secret1", stored)   # True
    """

    def __init__(self, scheme: str = "bcrypt", rounds: int = 12):
        if scheme not in ("bcrypt", "sha256"):
            raise ValueError(f"Unsupported password scheme '{scheme}'")
        self.scheme = scheme
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        if self.scheme == "sha256":
            return hashlib.sha256(plaintext.encode("utf-8")).hexdigest()
        hashed = bcrypt.hashpw(_bcrypt_input(plaintext), bcrypt.gensalt(rounds=self.rounds))
        return hashed.decode("ascii")

    def verify(self, plaintext: str, stored: str) -> bool:
        if is_bcrypt(stored):
            try:
                return bcrypt.checkpw(_bcrypt_input(plaintext), stored.encode("ascii"))
            except ValueError:
                logger.warning("Malformed bcrypt credential encountered")
                return False
        legacy = hashlib.sha256(plaintext.encode("utf-8")).hexdigest()
        return hmac.compare_digest(legacy, stored.lower())

    def needs_rehash(self, stored: str) -> bool:
        """True when `stored` was produced by a different scheme or cost."""
        if self.scheme == "sha256":
            return is_bcrypt(stored)
        if not is_bcrypt(stored):
            return True
        return stored.split("$")[2] != f"{self.rounds:02d}"


def is_bcrypt(stored: str) -> bool:
    return stored.startswith(BCRYPT_PREFIXES)


def _bcrypt_input(plaintext: str) -> bytes:
    # Newer bcrypt releases raise instead of truncating
    return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]


password_hasher = PasswordHasher(
    scheme=settings.password_scheme,
    rounds=settings.password_bcrypt_rounds,
)
