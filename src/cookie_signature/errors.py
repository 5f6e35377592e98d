"""Error taxonomy: argument-contract violations raise, verification failures don't."""

from __future__ import annotations

COOKIE_VALUE_NOT_STRING = "Cookie value must be provided as a string."
SIGNED_VALUE_NOT_STRING = "Signed cookie string must be provided."
SECRET_MISSING = "Secret key must be provided."


class CookieSignatureError(Exception):
    """Base class for errors raised by cookie_signature."""


class InvalidArgument(CookieSignatureError, TypeError):
    """A sign/unsign argument has the wrong shape.

    Subclasses TypeError so callers matching on TypeError keep working.
    """
