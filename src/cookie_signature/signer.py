"""HMAC cookie signing: sign(payload, secret) / unsign(signed, secret).

Wire format: payload + separator + base64(HMAC(payload)) with '=' stripped.
Verification failures are returned as Failed(reason), never raised.
"""

from __future__ import annotations

import binascii
import logging
from collections.abc import Mapping
from typing import Any

from cookie_signature.codec import b64decode_loose, b64encode_unpadded, encoded
from cookie_signature.config import (
    SignerConfig,
    get_secret_from_env,
    load_config_from_env,
    parse_options,
)
from cookie_signature.crypto import HmacCrypto, get_crypto, secret_to_hmac_key
from cookie_signature.errors import (
    COOKIE_VALUE_NOT_STRING,
    SECRET_MISSING,
    SIGNED_VALUE_NOT_STRING,
    InvalidArgument,
)
from cookie_signature.hashes import digest_size
from cookie_signature.models import (
    BAD_ENCODING,
    BAD_SIGNATURE,
    MISSING_SEPARATOR,
    Failed,
    UnsignResult,
    Verified,
)

logger = logging.getLogger(__name__)


class CookieSignature:
    """Signer/verifier bound to one immutable SignerConfig."""

    def __init__(
        self,
        separator: Any = None,
        hash: Any = None,
        *,
        config: SignerConfig | None = None,
        crypto: HmacCrypto | None = None,
    ) -> None:
        if config is None:
            config = SignerConfig.build(separator, hash)
        elif separator is not None or hash is not None:
            raise ValueError("Pass either config or separator/hash, not both")
        self._config = config
        self._crypto = crypto

    @classmethod
    def get(cls, opts: Mapping[str, Any] | None = None) -> CookieSignature:
        """Build from an options mapping: {"separator": "_", "hash": "sha384"}."""
        return cls(config=parse_options(opts))

    @classmethod
    def from_env(cls) -> CookieSignature:
        return cls(config=load_config_from_env())

    @property
    def config(self) -> SignerConfig:
        return self._config

    @property
    def separator(self) -> str:
        return self._config.separator

    @property
    def hash(self) -> str:
        return self._config.hash

    def __repr__(self) -> str:
        return f"CookieSignature(separator={self.separator!r}, hash={self.hash!r})"

    def _get_crypto(self) -> HmacCrypto:
        return self._crypto if self._crypto is not None else get_crypto()

    def sign(self, payload: str, secret: str | bytes | None = None) -> str:
        """Return payload + separator + unpadded base64 HMAC signature."""
        crypto = self._get_crypto()

        if not isinstance(payload, str):
            raise InvalidArgument(COOKIE_VALUE_NOT_STRING)
        if secret is None:
            raise InvalidArgument(SECRET_MISSING)

        key = secret_to_hmac_key(secret, self.hash, crypto)
        signature = crypto.sign(key, encoded(payload))
        return payload + self.separator + b64encode_unpadded(signature)

    def unsign(self, signed_value: str, secret: str | bytes | None = None) -> UnsignResult:
        """Verify a signed value.

        Returns Verified(payload) on success and Failed(reason) for any
        malformed, truncated or tampered input. Raises InvalidArgument only
        for a non-string signed value or a missing secret.
        """
        crypto = self._get_crypto()

        if not isinstance(signed_value, str):
            raise InvalidArgument(SIGNED_VALUE_NOT_STRING)
        if secret is None:
            raise InvalidArgument(SECRET_MISSING)

        # Last occurrence: the payload itself may contain the separator.
        payload, sep, given = signed_value.rpartition(self.separator)
        if not sep:
            return self._fail(MISSING_SEPARATOR)

        try:
            signature = b64decode_loose(given)
        except (binascii.Error, ValueError):
            return self._fail(BAD_ENCODING)
        if len(signature) != digest_size(self.hash):
            return self._fail(BAD_SIGNATURE)

        key = secret_to_hmac_key(secret, self.hash, crypto)
        if not crypto.verify(key, signature, encoded(payload)):
            return self._fail(BAD_SIGNATURE)
        return Verified(payload)

    def unsign_value(self, signed_value: str, secret: str | bytes | None = None) -> str | None:
        """Like unsign(), but returns the payload or None."""
        result = self.unsign(signed_value, secret)
        return result.payload if isinstance(result, Verified) else None

    async def async_sign(self, payload: str, secret: str | bytes | None = None) -> str:
        return self.sign(payload, secret)

    async def async_unsign(self, signed_value: str, secret: str | bytes | None = None) -> UnsignResult:
        return self.unsign(signed_value, secret)

    def _fail(self, reason: str) -> Failed:
        logger.debug("Signed value rejected (%s, hash=%s)", reason, self.hash)
        return Failed(reason)


# Process-wide instance using the default settings.
default_signer = CookieSignature()


def sign(payload: str, secret: str | bytes | None = None) -> str:
    return default_signer.sign(payload, secret)


def unsign(signed_value: str, secret: str | bytes | None = None) -> UnsignResult:
    return default_signer.unsign(signed_value, secret)


def load_from_env() -> tuple[CookieSignature, bytes]:
    """Signer and secret from the COOKIE_SIGNATURE_* env vars.

    Fails closed (RuntimeError) if no secret is configured.
    """
    return CookieSignature.from_env(), get_secret_from_env()
