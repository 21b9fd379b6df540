# -*- coding: utf-8 -*-
"""
拼读块查表：在 text[index] 处按优先级尝试匹配一个拼读块。
贪心、无回溯，同样的 (text, index, prev) 永远得到同样的结果。
prev 是 text 前面紧挨着的那个字母（前缀或上一个音节的末字母），没有则为空串。
"""
from .rules_v4 import RULES, PRIORITY, ONSET_ONLY, DIGRAPHS, VOWELS

# 音节开头时让位给 thr / shr 的二合字母
_DIGRAPH_LED = tuple(c for c in RULES["cluster3"] if c[:2] in DIGRAPHS)


def is_consonant(ch: str) -> bool:
    return ch.isalpha() and ch not in VOWELS


def at_onset(text: str, index: int, prev: str = "") -> bool:
    """音节开头：单词开头，或紧跟在元音字母之后（跨越前缀 / 音节边界也算）。"""
    before = text[index - 1] if index > 0 else prev
    return not before or before in VOWELS


def _splits_digraph(text: str, end: int) -> bool:
    # 拼读块的最后一个字母不能是后面二合字母的首字母（s|ph 而不是 sp|h）
    return 0 < end < len(text) and text[end - 1:end + 1] in DIGRAPHS


def _match_magic_e(text: str, index: int) -> str | None:
    """
    辅音 + 元音 + 辅音 + e，且 e 后面不再跟元音。
    输出的是 “元音+辅音+e” 这一段（phone → ph + one）。
    """
    if index == 0 or index + 2 >= len(text):
        return None
    if text[index] not in VOWELS or not is_consonant(text[index - 1]):
        return None
    mid = text[index + 1]
    if not is_consonant(mid) or mid in "wxy":
        return None
    if text[index + 2] != "e":
        return None
    if index + 3 < len(text) and text[index + 3] in VOWELS:
        return None
    return text[index:index + 3]


def _match_table(text: str, index: int, category: str, prev: str) -> str | None:
    onset = at_onset(text, index, prev)
    if category in ONSET_ONLY and not onset:
        return None
    if category == "digraph" and onset and text.startswith(_DIGRAPH_LED, index):
        return None
    for pattern in RULES[category]:
        if text.startswith(pattern, index) and not _splits_digraph(text, index + len(pattern)):
            return pattern
    return None


def match_at(text: str, index: int, prev: str = "") -> str | None:
    """
    返回从 index 开始的拼读块；兜底为单个字符。
    只有 index 越界时返回 None。
    """
    if not 0 <= index < len(text):
        return None
    for category in PRIORITY:
        if category == "magic_e":
            chunk = _match_magic_e(text, index)
        else:
            chunk = _match_table(text, index, category, prev)
        if chunk:
            return chunk
    return text[index]


def scan(span: str, prev: str = "") -> list[str]:
    """把一个音节从左到右切成拼读块。"""
    out = []
    i = 0
    while i < len(span):
        chunk = match_at(span, i, prev)
        if not chunk:
            raise RuntimeError(f"no progress at {i} in {span!r}")
        out.append(chunk)
        i += len(chunk)
    return out
