"""
알파벳(문자 시퀀스) 연산
순서가 의미를 가지므로 set 대신 문자열로 다룬다.
"""


def unique(chars: str) -> str:
    """중복 문자 제거 (오른쪽부터 훑어서 마지막으로 등장한 위치 기준으로 순서 유지)"""
    seen = set()
    kept = []
    for char in reversed(chars):
        if char not in seen:
            seen.add(char)
            kept.append(char)
    return "".join(reversed(kept))


def intersect(chars: str, other: str) -> str:
    """chars 중 other에도 있는 문자만 (chars 순서)"""
    return "".join(char for char in chars if char in other)


def exclude(remove: str, chars: str) -> str:
    """chars 중 remove에 없는 문자만 (chars 순서)"""
    return "".join(char for char in chars if char not in remove)
