"""
인코딩 컨텍스트 생성
입력 알파벳을 값 문자(alphabet) / 구분자(separators) / 가드(guards)로 나눈다.
단계 순서가 바뀌면 모든 해시 값이 달라지므로 순서를 그대로 지킬 것.
"""

import logging
import math
from dataclasses import dataclass

from saltids.alphabet import exclude, intersect, unique
from saltids.shuffle import reorder

logger = logging.getLogger(__name__)

DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890"
SEPARATOR_CANDIDATES = "cfhistuCFHISTU"
MIN_ALPHABET_LENGTH = 16

_SEPARATOR_RATIO = 3.5
_GUARD_RATIO = 12


@dataclass(frozen=True)
class Context:
    """빌드 후 변경되지 않는 인코딩 설정"""
    salt: str
    alphabet: str
    separators: str
    guards: str
    min_hash_length: int


def _clean(alphabet: str) -> tuple[str, str]:
    """(구분자 후보, 나머지 알파벳). 사용할 수 없는 알파벳이면 기본 알파벳으로 대체"""
    separators = intersect(SEPARATOR_CANDIDATES, alphabet)
    remaining = exclude(separators, unique(alphabet))

    if " " in alphabet or len(remaining) + len(separators) < MIN_ALPHABET_LENGTH:
        logger.warning(
            "Unusable alphabet %r (needs %d unique chars, no spaces); using default",
            alphabet, MIN_ALPHABET_LENGTH,
        )
        return _clean(DEFAULT_ALPHABET)
    return separators, remaining


def build_context(salt: str = "", min_hash_length: int = 0,
                  alphabet: str = DEFAULT_ALPHABET) -> Context:
    """salt / 최소 길이 / 알파벳으로 컨텍스트 생성"""
    if not isinstance(salt, str):
        raise ValueError(f"salt must be a string, got {type(salt).__name__}")
    if not isinstance(alphabet, str):
        raise ValueError(f"alphabet must be a string, got {type(alphabet).__name__}")
    if isinstance(min_hash_length, bool) or not isinstance(min_hash_length, int):
        raise ValueError(f"min_hash_length must be an integer, got {min_hash_length!r}")

    # 1. 정리
    separators, alphabet = _clean(alphabet)

    # 2. 구분자 개수 보정 (alphabet / separators 비율 3.5 이하)
    separators = reorder(separators, salt)
    min_separators = math.ceil(len(alphabet) / _SEPARATOR_RATIO)
    if min_separators == 1:
        min_separators = 2
    missing = min_separators - len(separators)
    if missing > 0:
        separators += alphabet[:missing]
        alphabet = alphabet[missing:]

    # 3. 가드 추출
    alphabet = reorder(alphabet, salt)
    num_guards = math.ceil(len(alphabet) / _GUARD_RATIO)
    if len(alphabet) < 3:
        guards = separators[:num_guards]
        separators = separators[num_guards:]
    else:
        guards = alphabet[:num_guards]
        alphabet = alphabet[num_guards:]

    logger.debug(
        "Built context: alphabet=%d separators=%d guards=%d min_hash_length=%d",
        len(alphabet), len(separators), len(guards), min_hash_length,
    )
    return Context(
        salt=salt,
        alphabet=alphabet,
        separators=separators,
        guards=guards,
        min_hash_length=max(0, min_hash_length),
    )
