"""Result shapes for unsign: Verified(payload) | Failed(reason)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

MISSING_SEPARATOR = "missing_separator"
BAD_ENCODING = "bad_encoding"
BAD_SIGNATURE = "bad_signature"


@dataclass(frozen=True)
class Verified:
    payload: str

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Failed:
    reason: str  # MISSING_SEPARATOR | BAD_ENCODING | BAD_SIGNATURE

    def __bool__(self) -> bool:
        return False


UnsignResult = Union[Verified, Failed]
