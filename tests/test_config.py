"""Tests for SignerConfig defaults and environment configuration."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from cookie_signature.config import (
    ENV_HASH,
    ENV_SECRET,
    ENV_SEPARATOR,
    SignerConfig,
    get_secret_from_env,
    load_config_from_env,
    parse_options,
)
from cookie_signature.signer import CookieSignature, load_from_env


def test_defaults():
    config = SignerConfig()
    assert config.separator == "."
    assert config.hash == "SHA-256"


def test_hash_is_normalized():
    assert SignerConfig(hash="sha512").hash == "SHA-512"


@pytest.mark.parametrize("separator", [None, 42, b".", ""])
def test_unusable_separator_falls_back(separator):
    assert SignerConfig(separator=separator).separator == "."


@pytest.mark.parametrize("hash_name", [None, "x", "md5", 256])
def test_unrecognized_hash_falls_back(hash_name):
    assert SignerConfig(hash=hash_name).hash == "SHA-256"


def test_config_is_immutable():
    config = SignerConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.separator = "_"


def test_parse_options_ignores_unknown_keys():
    config = parse_options({"separator": "|", "hash": "SHA1", "logErrors": True})
    assert config == SignerConfig(separator="|", hash="SHA-1")


@pytest.mark.parametrize("opts", [None, "sha256", 7])
def test_parse_options_non_mapping(opts):
    assert parse_options(opts) == SignerConfig()


def test_env_defaults(clean_env):
    assert load_config_from_env() == SignerConfig()


def test_env_overrides(clean_env):
    clean_env.setenv(ENV_SEPARATOR, "~")
    clean_env.setenv(ENV_HASH, "sha384")
    signer = CookieSignature.from_env()
    assert (signer.separator, signer.hash) == ("~", "SHA-384")


def test_env_bad_hash_warns(clean_env, caplog):
    clean_env.setenv(ENV_HASH, "whirlpool")
    with caplog.at_level(logging.WARNING, logger="cookie_signature.config"):
        config = load_config_from_env()
    assert config.hash == "SHA-256"
    assert "whirlpool" in caplog.text


def test_env_secret_required(clean_env):
    with pytest.raises(RuntimeError, match=ENV_SECRET):
        get_secret_from_env()


def test_env_secret(clean_env):
    clean_env.setenv(ENV_SECRET, "tobiiscool")
    assert get_secret_from_env() == b"tobiiscool"


def test_load_from_env(clean_env):
    clean_env.setenv(ENV_SEPARATOR, "|")
    clean_env.setenv(ENV_SECRET, "tobiiscool")
    signer, secret = load_from_env()
    signed = signer.sign("hello", secret)
    assert signed.startswith("hello|")
    assert signer.unsign_value(signed, "tobiiscool") == "hello"


def test_load_from_env_requires_secret(clean_env):
    with pytest.raises(RuntimeError, match=ENV_SECRET):
        load_from_env()
