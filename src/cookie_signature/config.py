"""Configuration: separator + hash algorithm, with safe defaults."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from cookie_signature.hashes import normalize_hash_algo

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "."
DEFAULT_HASH = "SHA-256"

ENV_SEPARATOR = "COOKIE_SIGNATURE_SEPARATOR"
ENV_HASH = "COOKIE_SIGNATURE_HASH"
ENV_SECRET = "COOKIE_SIGNATURE_SECRET"


@dataclass(frozen=True)
class SignerConfig:
    """Always-valid signer configuration.

    Invalid values passed to the constructor are replaced by the defaults,
    so an instance is never partially configured.
    """

    separator: str = DEFAULT_SEPARATOR
    hash: str = DEFAULT_HASH  # canonical, e.g. "SHA-256"

    def __post_init__(self) -> None:
        if not isinstance(self.separator, str) or not self.separator:
            object.__setattr__(self, "separator", DEFAULT_SEPARATOR)
        object.__setattr__(self, "hash", normalize_hash_algo(self.hash) or DEFAULT_HASH)

    @classmethod
    def build(cls, separator: Any = None, hash: Any = None) -> SignerConfig:
        return cls(separator=separator, hash=hash)


def parse_options(opts: Any = None) -> SignerConfig:
    """Build a SignerConfig from an options mapping ({"separator": ..., "hash": ...}).

    Unknown keys are ignored; unusable values fall back to the defaults.
    """
    if not isinstance(opts, Mapping):
        opts = {}
    return SignerConfig.build(separator=opts.get("separator"), hash=opts.get("hash"))


def load_config_from_env() -> SignerConfig:
    """Read separator and hash from the environment. Unset -> defaults."""
    separator = os.environ.get(ENV_SEPARATOR) or None
    hash_name = os.environ.get(ENV_HASH) or None
    if hash_name is not None and normalize_hash_algo(hash_name) is None:
        logger.warning(
            "Unrecognized %s=%r, falling back to %s", ENV_HASH, hash_name, DEFAULT_HASH
        )
    return SignerConfig.build(separator=separator, hash=hash_name)


def get_secret_from_env() -> bytes:
    """Return the signing secret from env. Fail closed if missing."""
    secret = os.environ.get(ENV_SECRET, "")
    if not secret:
        raise RuntimeError(
            f"{ENV_SECRET} environment variable is required. "
            "Generate a random value: python -c \"import secrets; print(secrets.token_hex(32))\""
        )
    return secret.encode("utf-8")
