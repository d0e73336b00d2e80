"""salt만으로 기본 알파벳 컨텍스트를 만들어 바로 쓰는 함수들"""

from typing import Iterable

from saltids.context import DEFAULT_ALPHABET, Context, build_context
from saltids.decoder import decode
from saltids.encoder import encode, encode_list
from saltids.hexcodec import decode_hex, encode_hex


def context_from_salt(salt: str) -> Context:
    """기본 알파벳, 최소 길이 0"""
    return build_context(salt, 0, DEFAULT_ALPHABET)


def context_with_min_length(salt: str, min_hash_length: int) -> Context:
    """기본 알파벳 + 최소 길이"""
    return build_context(salt, min_hash_length, DEFAULT_ALPHABET)


def encode_using_salt(salt: str, number: int) -> str:
    """salt만으로 정수 인코딩"""
    return encode(context_from_salt(salt), number)


def encode_list_using_salt(salt: str, numbers: Iterable[int]) -> str:
    """salt만으로 정수 리스트 인코딩"""
    return encode_list(context_from_salt(salt), numbers)


def decode_using_salt(salt: str, hashid: str) -> list[int]:
    """salt만으로 디코딩"""
    return decode(context_from_salt(salt), hashid)


def encode_hex_using_salt(salt: str, hex_digits: str) -> str:
    """salt만으로 16진수 인코딩"""
    return encode_hex(context_from_salt(salt), hex_digits)


def decode_hex_using_salt(salt: str, hashid: str) -> str:
    """salt만으로 16진수 디코딩"""
    return decode_hex(context_from_salt(salt), hashid)
