"""
해시 문자열 -> 정수 리스트 디코더
디코딩 결과를 다시 인코딩해서 입력과 같을 때만 받아들인다. 실패 시 빈 리스트.
"""

import logging

from saltids.context import Context
from saltids.encoder import encode_list, step_alphabet

logger = logging.getLogger(__name__)


def _split(text: str, splitters: str) -> list[str]:
    """splitters 중 아무 문자로나 자른 조각들 (빈 조각 포함)"""
    parts = []
    current = []
    for char in text:
        if char in splitters:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return parts


def _from_digits(digits: str, alphabet: str) -> int:
    """alphabet 진법 문자열 -> 정수. 알파벳에 없는 문자면 ValueError"""
    number = 0
    base = len(alphabet)
    for char in digits:
        number = number * base + alphabet.index(char)
    return number


def decode(ctx: Context, hashid: str) -> list[int]:
    """해시 문자열 -> 정수 리스트. 잘못된 해시면 빈 리스트"""
    if not hashid or not isinstance(hashid, str):
        return []

    # 가드로 감싼 패딩 제거
    parts = _split(hashid, ctx.guards)
    working = parts[1] if len(parts) in (2, 3) else parts[0]
    if not working:
        logger.debug("Rejected %r: nothing left after stripping guards", hashid)
        return []

    lottery, body = working[0], working[1:]
    numbers = []
    alphabet = ctx.alphabet
    try:
        for group in _split(body, ctx.separators):
            alphabet = step_alphabet(alphabet, lottery, ctx.salt)
            numbers.append(_from_digits(group, alphabet))
    except ValueError:
        logger.debug("Rejected %r: character outside the alphabet", hashid)
        return []

    if encode_list(ctx, numbers) != hashid:
        logger.debug("Rejected %r: re-encoded value does not match", hashid)
        return []
    return numbers
