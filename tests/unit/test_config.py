"""
환경 변수 설정 / 편의 함수 검증
"""

import pytest

from saltids import (
    DEFAULT_ALPHABET,
    build_context,
    context_from_salt,
    context_with_min_length,
    decode_hex_using_salt,
    decode_using_salt,
    encode_hex_using_salt,
    encode_list_using_salt,
    encode_using_salt,
    load_context,
)
from saltids.encoder import encode


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("SALTIDS_SALT", "SALTIDS_MIN_LENGTH", "SALTIDS_ALPHABET"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_load_context_defaults(clean_env):
    assert load_context() == build_context("", 0, DEFAULT_ALPHABET)


def test_load_context_from_env(clean_env):
    clean_env.setenv("SALTIDS_SALT", "this is my salt")
    assert encode(load_context(), 5) == "rD"

    clean_env.setenv("SALTIDS_MIN_LENGTH", "12")
    ctx = load_context()
    assert ctx.min_hash_length == 12
    assert len(encode(ctx, 5)) == 12


def test_load_context_custom_alphabet(clean_env):
    clean_env.setenv("SALTIDS_ALPHABET", "abdegjklmnopqrvwxyz")
    assert load_context() == build_context("", 0, "abdegjklmnopqrvwxyz")


@pytest.mark.parametrize("raw", ["abc", "-3", "1.5"])
def test_invalid_min_length_falls_back_to_zero(clean_env, raw):
    clean_env.setenv("SALTIDS_MIN_LENGTH", raw)
    assert load_context().min_hash_length == 0


def test_salt_only_contexts():
    assert context_from_salt("s") == build_context("s", 0, DEFAULT_ALPHABET)
    assert context_with_min_length("s", 9) == build_context("s", 9, DEFAULT_ALPHABET)


def test_using_salt_shortcuts():
    salt = "this is my salt"
    assert encode_using_salt(salt, 5) == "rD"
    assert encode_list_using_salt(salt, [2, 3, 5, 7, 11]) == "EOurh6cbTD"
    assert decode_using_salt(salt, "EOurh6cbTD") == [2, 3, 5, 7, 11]
    assert decode_hex_using_salt(salt, encode_hex_using_salt(salt, "ff83")) == "ff83"
