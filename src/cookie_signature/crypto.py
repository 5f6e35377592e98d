"""HMAC keying capability built on hmac + hashlib."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from cookie_signature.codec import encoded
from cookie_signature.hashes import SUPPORTED_HASHES, digest_name

KEY_USAGES = ("sign", "verify")


@dataclass(frozen=True)
class HmacKey:
    """Raw HMAC key bound to one hash algorithm and a fixed set of usages."""

    key: bytes
    hash: str  # canonical, e.g. "SHA-256"
    usages: tuple[str, ...] = KEY_USAGES

    def __repr__(self) -> str:
        return f"HmacKey(hash={self.hash!r}, usages={self.usages!r})"

    def _require(self, usage: str) -> None:
        if usage not in self.usages:
            raise PermissionError(f"Key does not allow the '{usage}' operation")

    def sign(self, message: bytes) -> bytes:
        self._require("sign")
        return hmac.new(self.key, message, digest_name(self.hash)).digest()

    def verify(self, signature: bytes, message: bytes) -> bool:
        """Constant-time comparison of signature against the HMAC of message."""
        self._require("verify")
        expected = hmac.new(self.key, message, digest_name(self.hash)).digest()
        return hmac.compare_digest(signature, expected)


class HmacCrypto:
    """Capability object: import raw secrets as HMAC keys, sign, verify."""

    def import_key(self, secret: Any, hash_name: str) -> HmacKey:
        if hash_name not in SUPPORTED_HASHES:
            raise ValueError(f"Unsupported hash algorithm: {hash_name!r}")
        if isinstance(secret, str):
            raw = encoded(secret)
        elif isinstance(secret, (bytes, bytearray, memoryview)):
            raw = bytes(secret)
        else:
            raise TypeError(
                "Secret must be str, bytes, bytearray or memoryview, "
                f"not {type(secret).__name__}"
            )
        return HmacKey(key=raw, hash=hash_name)

    def sign(self, key: HmacKey, message: bytes) -> bytes:
        return key.sign(message)

    def verify(self, key: HmacKey, signature: bytes, message: bytes) -> bool:
        return key.verify(signature, message)


@lru_cache(maxsize=None)
def get_crypto() -> HmacCrypto:
    """Return the process-wide crypto capability.

    Fails closed if hashlib lacks any supported digest.
    """
    missing = sorted(
        name for name in SUPPORTED_HASHES
        if digest_name(name) not in hashlib.algorithms_available
    )
    if missing:
        raise RuntimeError(
            "Your runtime does not provide the required hash algorithms: "
            + ", ".join(missing)
        )
    return HmacCrypto()


def secret_to_hmac_key(secret: Any, hash_name: str, crypto: HmacCrypto | None = None) -> HmacKey:
    """Convert a text or bytes secret into an HmacKey for sign/verify.

    Raises TypeError for secrets that are neither text nor bytes-like.
    """
    if crypto is None:
        crypto = get_crypto()
    return crypto.import_key(secret, hash_name)
