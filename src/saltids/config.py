"""
환경 변수 기반 컨텍스트 설정
SALTIDS_SALT / SALTIDS_MIN_LENGTH / SALTIDS_ALPHABET
"""

import logging
import os

from saltids.context import DEFAULT_ALPHABET, Context, build_context

logger = logging.getLogger(__name__)


def _min_length_from_env() -> int:
    raw = os.environ.get("SALTIDS_MIN_LENGTH", "").strip()
    if not raw:
        return 0
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning("Invalid SALTIDS_MIN_LENGTH %r, using 0", raw)
        return 0
    if value < 0:
        logger.warning("Negative SALTIDS_MIN_LENGTH %d, using 0", value)
        return 0
    return value


def load_context() -> Context:
    """호출 시점의 환경 변수로 컨텍스트 생성"""
    salt = os.environ.get("SALTIDS_SALT", "")
    alphabet = os.environ.get("SALTIDS_ALPHABET") or DEFAULT_ALPHABET
    return build_context(salt, _min_length_from_env(), alphabet)
