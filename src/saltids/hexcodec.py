"""
16진수 문자열 어댑터
12자리씩 끊어서 앞에 '1'을 붙인 뒤 정수로 인코딩한다 (앞자리 0 보존용).
"""

from saltids.context import Context
from saltids.decoder import decode
from saltids.encoder import encode_list

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_CHUNK_SIZE = 12


def _chunks_from_right(text: str, size: int) -> list[str]:
    chunks = []
    end = len(text)
    while end > 0:
        chunks.append(text[max(0, end - size):end])
        end -= size
    chunks.reverse()
    return chunks


def encode_hex(ctx: Context, hex_digits: str) -> str:
    """
    16진수 문자열 -> 해시. 16진수가 아닌 문자가 있으면 빈 문자열
    대소문자 모두 받지만 decode_hex는 소문자로 돌려준다 ("FF83" -> "ff83")
    """
    if not all(char in HEX_DIGITS for char in hex_digits):
        return ""
    numbers = [int("1" + chunk, 16) for chunk in _chunks_from_right(hex_digits, _CHUNK_SIZE)]
    return encode_list(ctx, numbers)


def decode_hex(ctx: Context, hashid: str) -> str:
    """해시 -> 16진수 문자열 (소문자). 각 조각의 맨 앞 '1'은 버린다"""
    return "".join(format(number, "x")[1:] for number in decode(ctx, hashid))
