"""Byte/text codec helpers used by the signer."""

from __future__ import annotations

import base64
import binascii
import re

_B64_ALPHABET = re.compile(r"[A-Za-z0-9+/]*")
_ASCII_WHITESPACE = re.compile(r"[\t\n\f\r ]")


def encoded(text: str) -> bytes:
    """UTF-8 encode a text value.

    Lone surrogates become U+FFFD, as a browser TextEncoder does.
    """
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        return text.encode("utf-16", "surrogatepass").decode("utf-16", "replace").encode("utf-8")


def b64encode_unpadded(raw: bytes) -> str:
    """Standard base64 (not URL-safe) with trailing '=' stripped."""
    return base64.b64encode(raw).decode("ascii").rstrip("=")


def b64decode_loose(text: str) -> bytes:
    """Decode standard base64 with or without padding.

    Mirrors a browser atob(): ASCII whitespace is ignored, at most two
    trailing '=' are allowed, and anything else outside the standard
    alphabet is rejected.

    Raises binascii.Error (a ValueError) if the input cannot be decoded.
    """
    data = _ASCII_WHITESPACE.sub("", text)
    if len(data) % 4 == 0 and data.endswith("="):
        data = data[:-2] if data.endswith("==") else data[:-1]
    if not _B64_ALPHABET.fullmatch(data):
        raise binascii.Error("Signature contains characters outside the base64 alphabet")
    if len(data) % 4 == 1:
        raise binascii.Error("Signature has an impossible base64 length")
    padded = data + "=" * (-len(data) % 4)
    return base64.b64decode(padded, validate=True)
