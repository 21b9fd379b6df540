# -*- coding: utf-8 -*-
"""
音节初步拆分：闭音节短词 → 辅音+le → 元音组计数 → VCCV / VCV。
拆不开就整体返回，永不失败。
"""
import re
from typing import List, Tuple

from .patterns import is_consonant
from .rules_v4 import DIGRAPHS, MULTI_LETTER, VOWELS

_VOWEL_GROUPS = re.compile(r"[aeiouy]+")

# 元音后面可以并入同一个元音核的 w / y
_W_Y_TEAMS = frozenset({"aw", "ew", "ow", "ay", "ey", "oy"})


def is_closed_short(span: str) -> bool:
    """
    ≤3 个字母、恰好一个元音字母、且不含需要细拆的多字母模式（cat / dog / ap）。
    """
    if not span or len(span) > 3:
        return False
    if sum(1 for ch in span if ch in VOWELS) != 1:
        return False
    for size in (2, 3):
        for i in range(len(span) - size + 1):
            if span[i:i + size] in MULTI_LETTER:
                return False
    return True


def count_vowel_groups(stem: str) -> int:
    # 只有这一步把 y 当元音
    return len(_VOWEL_GROUPS.findall(stem))


def vowel_nuclei(stem: str) -> List[Tuple[int, int]]:
    """
    元音核 [start, end)：连续元音字母，外加组成元音组合的 w/y、i 后面的 gh。
    词尾 “元音+辅音+e” 里的 e 不发音，不算元音核。
    """
    nuclei = []
    i, n = 0, len(stem)
    while i < n:
        if stem[i] not in VOWELS:
            i += 1
            continue
        j = i
        while j < n and stem[j] in VOWELS:
            j += 1
        if j < n and stem[j - 1:j + 1] in _W_Y_TEAMS:
            j += 1
        elif stem[j - 1] == "i" and stem.startswith("gh", j):
            j += 2
        nuclei.append((i, j))
        i = j
    if len(nuclei) > 1:
        start, end = nuclei[-1]
        if end - start == 1 and end == n and stem[start] == "e" and is_consonant(stem[start - 1]):
            nuclei.pop()
    return nuclei


def _consonant_le(stem: str) -> int | None:
    if len(stem) <= 3 or not stem.endswith("le"):
        return None
    if not is_consonant(stem[-3]) or stem[-3] == "y":
        return None
    # pickle → pick + le：二合字母留在左边
    if stem[-4:-2] in DIGRAPHS:
        return len(stem) - 2
    return len(stem) - 3


def _boundary(stem: str) -> int | None:
    nuclei = vowel_nuclei(stem)
    for (_, end), (start, _) in zip(nuclei, nuclei[1:]):
        gap = stem[end:start]
        if not gap:
            return end                      # flow|er
        if len(gap) == 1:
            return end                      # V|CV
        if len(gap) == 2:
            if gap == "ck":
                return start                # chick|en
            if gap in DIGRAPHS:
                return end                  # mo|ther
            return end + 1                  # VC|CV
    return None


def divide_syllables(stem: str) -> List[str]:
    if not stem:
        return []
    if len(stem) <= 3 and is_closed_short(stem):
        return [stem]

    cut = _consonant_le(stem)
    if cut is not None:
        return divide_syllables(stem[:cut]) + [stem[cut:]]

    if count_vowel_groups(stem) <= 1:
        return [stem]

    cut = _boundary(stem)
    if cut is None:
        return [stem]
    return divide_syllables(stem[:cut]) + divide_syllables(stem[cut:])
