"""
정수 (리스트) -> 해시 문자열 인코더
숫자마다 알파벳을 다시 섞고, 숫자 사이에는 구분자를, 최소 길이에 못 미치면 가드/패딩을 붙인다.
"""

from typing import Iterable

from saltids.context import Context
from saltids.shuffle import reorder


def _check_number(number) -> int:
    if isinstance(number, bool) or not isinstance(number, int):
        raise ValueError(f"only non-negative integers can be encoded, got {number!r}")
    if number < 0:
        raise ValueError(f"negative numbers cannot be encoded, got {number}")
    return number


def _to_digits(number: int, alphabet: str) -> str:
    """정수 -> alphabet 진법 문자열 (최상위 자리 먼저)"""
    base = len(alphabet)
    digits = []
    while True:
        number, rem = divmod(number, base)
        digits.append(alphabet[rem])
        if not number:
            break
    return "".join(reversed(digits))


def values_hash(numbers: list[int]) -> int:
    """숫자 리스트 체크섬 (lottery 문자 선택용)"""
    return sum(number % (i + 100) for i, number in enumerate(numbers))


def step_alphabet(alphabet: str, lottery: str, salt: str) -> str:
    """숫자 하나를 처리할 때 쓰는 알파벳 (인코더/디코더 공용)"""
    return reorder(alphabet, (lottery + salt + alphabet)[:len(alphabet)])


def _encode_groups(ctx: Context, lottery: str, numbers: list[int]) -> tuple[list[str], str]:
    """(자릿수 문자열 + 구분자 조각들, 마지막 알파벳)"""
    pieces = []
    alphabet = ctx.alphabet
    for i, number in enumerate(numbers):
        alphabet = step_alphabet(alphabet, lottery, ctx.salt)
        digits = _to_digits(number, alphabet)
        value = number % (ord(digits[0]) + i)
        pieces.append(digits + ctx.separators[value % len(ctx.separators)])
    return pieces, alphabet


def _ensure_length(encoded: str, ctx: Context, alphabet: str, checksum: int) -> str:
    guards = ctx.guards
    min_length = ctx.min_hash_length

    encoded = guards[(checksum + ord(encoded[0])) % len(guards)] + encoded
    if len(encoded) < min_length:
        encoded += guards[(checksum + ord(encoded[2])) % len(guards)]

    half = len(alphabet) // 2
    while len(encoded) < min_length:
        alphabet = reorder(alphabet, alphabet)
        encoded = alphabet[half:] + encoded + alphabet[:half]
        excess = len(encoded) - min_length
        if excess > 0:
            start = excess // 2
            encoded = encoded[start:start + min_length]
    return encoded


def encode_list(ctx: Context, numbers: Iterable[int]) -> str:
    """정수 리스트 -> 해시 문자열. 빈 리스트는 빈 문자열"""
    numbers = [_check_number(number) for number in numbers]
    if not numbers:
        return ""

    checksum = values_hash(numbers)
    lottery = ctx.alphabet[checksum % len(ctx.alphabet)]
    pieces, alphabet = _encode_groups(ctx, lottery, numbers)

    # 마지막 구분자 제거
    encoded = (lottery + "".join(pieces))[:-1]
    if len(encoded) >= ctx.min_hash_length:
        return encoded
    return _ensure_length(encoded, ctx, alphabet, checksum)


def encode(ctx: Context, number: int) -> str:
    """정수 하나 -> 해시 문자열"""
    return encode_list(ctx, [number])
