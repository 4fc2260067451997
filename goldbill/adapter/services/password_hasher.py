"""Scrypt Password Hasher Implementation

Stores hashes as "<hex digest>.<hex salt>" using hashlib.scrypt.
"""

import hashlib
import hmac
import logging
import secrets
from goldbill.app.services.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


class ScryptPasswordHasher(PasswordHasher):
    """
    scrypt key derivation with a random 16-byte salt per password

    Args:
        n: CPU/memory cost parameter (power of two)
        r: block size
        p: parallelization
        key_length: derived key length in bytes
    """

    def __init__(self, n: int = 16384, r: int = 8, p: int = 1, key_length: int = 64):
        self.n = n
        self.r = r
        self.p = p
        self.key_length = key_length

    def _derive(self, password: str, salt: str) -> bytes:
        return hashlib.scrypt(
            password.encode("utf-8"),
            salt=salt.encode("utf-8"),
            n=self.n,
            r=self.r,
            p=self.p,
            dklen=self.key_length,
        )

    def hash(self, password: str) -> str:
        salt = secrets.token_hex(16)
        return f"{self._derive(password, salt).hex()}.{salt}"

    def verify(self, password: str, encoded: str) -> bool:
        digest, sep, salt = encoded.partition(".")
        if not sep or not digest or not salt:
            logger.warning("Stored password hash has an unexpected format")
            return False
        try:
            expected = bytes.fromhex(digest)
        except ValueError:
            logger.warning("Stored password hash is not hex encoded")
            return False
        return hmac.compare_digest(self._derive(password, salt), expected)
