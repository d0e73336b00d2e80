"""
salt 기반 결정적 셔플 (Fisher-Yates 변형)
인코딩/디코딩 양쪽이 같은 중간 알파벳을 재현해야 하므로 외부 상태를 쓰지 않는다.
"""


def reorder(chars: str, salt: str) -> str:
    """salt로 chars를 섞은 결과 반환. salt가 비어 있으면 그대로 반환"""
    if not salt:
        return chars

    buf = list(chars)
    salt_len = len(salt)
    index = 0
    integer_sum = 0
    for i in range(len(buf) - 1, 0, -1):
        index %= salt_len
        code = ord(salt[index])
        integer_sum += code
        j = (code + index + integer_sum) % i
        buf[i], buf[j] = buf[j], buf[i]
        index += 1
    return "".join(buf)
