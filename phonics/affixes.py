# -*- coding: utf-8 -*-
"""
前缀 / 后缀剥离。每次最多剥一个前缀、一个后缀，不递归。
"""
from typing import Tuple

from .rules_v4 import RULES, VOWELS, VOWEL_TEAMS, DIGRAPHS, ONSETS

MIN_SUFFIX_STEM = 2
MIN_PREFIX_REST = 3


def _has_vowel(s: str) -> bool:
    return any(ch in VOWELS for ch in s)


def _clean_boundary(left: str, right: str) -> bool:
    # 词缀边界不能劈开元音组合或二合字母（se|ed、pla|y、dis|honest）
    pair = left[-1:] + right[:1]
    return pair not in VOWEL_TEAMS and pair not in DIGRAPHS


def _readable_onset(rest: str) -> bool:
    if rest[0] in VOWELS or rest[1] in VOWELS or rest[1] == "y":
        return True
    return rest[:2] in ONSETS


def strip_prefix(word: str) -> Tuple[str | None, str]:
    for prefix in RULES["prefix"]:
        if not word.startswith(prefix):
            continue
        rest = word[len(prefix):]
        if len(rest) < MIN_PREFIX_REST or not _has_vowel(rest):
            continue
        if not _clean_boundary(prefix, rest) or not _readable_onset(rest):
            continue
        return prefix, rest
    return None, word


def _er_after_vowel_team(stem: str) -> bool:
    # flower：ow + er 是元音组合接 r 控元音，不是后缀 -er
    return len(stem) >= 2 and stem[-2:] in VOWEL_TEAMS


def strip_suffix(word: str) -> Tuple[str, str | None]:
    for suffix in RULES["suffix"]:
        if not word.endswith(suffix):
            continue
        stem = word[:-len(suffix)]
        if len(stem) < MIN_SUFFIX_STEM or not _has_vowel(stem):
            continue
        if suffix == "er" and _er_after_vowel_team(stem):
            continue
        if not _clean_boundary(stem, suffix):
            continue
        return stem, suffix
    return word, None
