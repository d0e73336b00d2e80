"""
salt 기반 정수 <-> 짧은 문자열 인코더
암호화가 아니라 난독화 용도 (salt를 알면 누구나 디코딩 가능)
"""

from saltids.config import load_context
from saltids.context import DEFAULT_ALPHABET, Context, build_context
from saltids.decoder import decode
from saltids.encoder import encode, encode_list
from saltids.hexcodec import decode_hex, encode_hex
from saltids.shortcuts import (
    context_from_salt,
    context_with_min_length,
    decode_hex_using_salt,
    decode_using_salt,
    encode_hex_using_salt,
    encode_list_using_salt,
    encode_using_salt,
)

__all__ = [
    "DEFAULT_ALPHABET",
    "Context",
    "build_context",
    "context_from_salt",
    "context_with_min_length",
    "decode",
    "decode_hex",
    "decode_hex_using_salt",
    "decode_using_salt",
    "encode",
    "encode_hex",
    "encode_hex_using_salt",
    "encode_list",
    "encode_list_using_salt",
    "encode_using_salt",
    "load_context",
]
