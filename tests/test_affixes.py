"""Tests for prefix / suffix stripping."""
import pytest

from phonics.affixes import strip_prefix, strip_suffix


@pytest.mark.parametrize("word,expected", [
    ("running", ("runn", "ing")),
    ("teacher", ("teach", "er")),
    ("happiness", ("happi", "ness")),
    ("helpful", ("help", "ful")),
    ("city", ("ci", "ty")),
    ("dishonest", ("dishon", "est")),
    # 守卫条件
    ("flower", ("flower", None)),      # ow + er
    ("player", ("player", None)),
    ("seed", ("seed", None)),          # 不能劈开 ee
    ("play", ("play", None)),
    ("king", ("king", None)),          # 词干太短
    ("table", ("table", None)),
    ("ing", ("ing", None)),
    ("er", ("er", None)),
])
def test_strip_suffix(word, expected):
    assert strip_suffix(word) == expected


@pytest.mark.parametrize("word,expected", [
    ("unhappy", ("un", "happy")),
    ("unclear", ("un", "clear")),
    ("interview", ("inter", "view")),
    ("under", ("un", "der")),          # 整词就是前缀时退到更短的前缀
    ("red", (None, "red")),
    ("reach", (None, "reach")),        # re|ach 劈开了 ea
    ("dishonest", (None, "dishonest")),  # dis|honest 劈开了 sh
    ("computer", (None, "computer")),  # co|mputer 剩余部分开头不可读
    ("over", (None, "over")),
])
def test_strip_prefix(word, expected):
    assert strip_prefix(word) == expected


def test_at_most_one_affix_each():
    stem, suffix = strip_suffix("unhelpfulness")
    assert suffix == "ness"
    prefix, rest = strip_prefix(stem)
    assert prefix == "un" and rest == "helpful"
