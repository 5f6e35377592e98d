"""Hash-algorithm normalization: loose spellings -> canonical names."""

from __future__ import annotations

from typing import Any

# Accepted spellings (dashed, concatenated, lowercase) -> canonical name
HASH_DIGEST_NAMES: dict[str, str] = {
    "SHA-1": "SHA-1",
    "SHA1": "SHA-1",
    "sha1": "SHA-1",
    "SHA-256": "SHA-256",
    "SHA256": "SHA-256",
    "sha256": "SHA-256",
    "SHA-384": "SHA-384",
    "SHA384": "SHA-384",
    "sha384": "SHA-384",
    "SHA-512": "SHA-512",
    "SHA512": "SHA-512",
    "sha512": "SHA-512",
}

SUPPORTED_HASHES: frozenset[str] = frozenset(HASH_DIGEST_NAMES.values())

_DIGEST_SIZES: dict[str, int] = {
    "SHA-1": 20,
    "SHA-256": 32,
    "SHA-384": 48,
    "SHA-512": 64,
}


def normalize_hash_algo(name: Any) -> str | None:
    """Return the canonical hash name for a recognized spelling, else None.

    "sha384"  -> "SHA-384"
    "SHA512"  -> "SHA-512"
    "md5"     -> None
    None      -> None
    """
    if not isinstance(name, str):
        return None
    return HASH_DIGEST_NAMES.get(name)


def digest_name(canonical: str) -> str:
    """Map a canonical name to its hashlib constructor name ("SHA-256" -> "sha256")."""
    if canonical not in SUPPORTED_HASHES:
        raise ValueError(f"Unsupported hash algorithm: {canonical!r}")
    return canonical.replace("-", "").lower()


def digest_size(canonical: str) -> int:
    """Digest length in bytes for a canonical hash name."""
    if canonical not in _DIGEST_SIZES:
        raise ValueError(f"Unsupported hash algorithm: {canonical!r}")
    return _DIGEST_SIZES[canonical]
