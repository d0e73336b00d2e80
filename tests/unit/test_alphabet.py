"""
알파벳 연산 / 셔플 검증
"""

from saltids.alphabet import exclude, intersect, unique
from saltids.shuffle import reorder


def test_unique_keeps_last_occurrence():
    """중복은 마지막 등장 위치 기준으로 남는다"""
    assert unique("abca") == "bca"
    assert unique("aabbcc") == "abc"
    assert unique("") == ""


def test_intersect_keeps_first_argument_order():
    assert intersect("abcd", "db") == "bd"
    assert intersect("abc", "") == ""
    assert intersect("", "abc") == ""


def test_exclude_keeps_second_argument_order():
    assert exclude("b", "abcb") == "ac"
    assert exclude("", "abc") == "abc"
    assert exclude("abc", "") == ""


def test_reorder_without_salt_is_identity():
    assert reorder("abcdef", "") == "abcdef"


def test_reorder_known_value():
    """손으로 계산한 값과 비교"""
    assert reorder("abcd", "a") == "dabc"


def test_reorder_is_deterministic_permutation():
    chars = "abcdefghijklmnopqrstuvwxyz"
    first = reorder(chars, "this is my salt")
    second = reorder(chars, "this is my salt")
    assert first == second
    assert sorted(first) == sorted(chars)
    assert first != chars


def test_reorder_depends_on_salt():
    chars = "abcdefghijklmnopqrstuvwxyz"
    assert reorder(chars, "salt one") != reorder(chars, "salt two")


def test_reorder_short_inputs():
    assert reorder("", "salt") == ""
    assert reorder("a", "salt") == "a"
