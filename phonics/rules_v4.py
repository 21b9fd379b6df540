# -*- coding: utf-8 -*-
"""
自然拼读拆分规则表 v4（集中管理，便于调参）
- 每一类内部按“长者优先”排序，同长保持下面写的顺序
- 运行期只读：对外暴露的是 MappingProxyType + tuple
"""
from types import MappingProxyType

VERSION = "4.0"

VOWELS = "aeiou"


def _longest_first(*patterns: str) -> tuple:
    # sorted 是稳定排序，同长度保留书写顺序
    return tuple(sorted(patterns, key=len, reverse=True))


_TABLES = {
    # 1) 软 c / 软 g 及 dge
    "soft_cg": _longest_first("dge", "ge", "gi", "gy", "ce", "ci", "cy"),
    # 2) 含不发音字母的组合
    "silent": _longest_first("kn", "wr", "mb", "gn", "tw"),
    # 3) 辅音二合/三合字母
    "digraph": _longest_first("tch", "ch", "sh", "th", "wh", "ph", "gh", "ck"),
    # 4) 三字母辅音连缀（仅音节开头或紧跟元音）
    "cluster3": _longest_first("squ", "scr", "spl", "spr", "str", "thr", "shr", "sch"),
    # 5) 双字母辅音连缀（同上的位置限制）
    "s_blend": _longest_first("sc", "sk", "st", "sp", "sm", "sn", "sl", "sw"),
    "r_blend": _longest_first("br", "cr", "dr", "fr", "gr", "pr", "tr"),
    "l_blend": _longest_first("bl", "cl", "fl", "gl", "pl", "sl"),
    # 6) r 控元音
    "r_controlled": _longest_first("air", "are", "ear", "eer", "ere", "ire", "ore", "oar",
                                   "ar", "or", "ir", "ur", "er"),
    # 8) 元音组合（ar/ore 已归入 r 控元音）
    "vowel_team": _longest_first("igh", "ai", "ay", "au", "aw", "ee", "ea", "ey", "ei", "ie",
                                 "oa", "ow", "oe", "oi", "oy", "oo", "ou", "ue", "ui", "ew", "al"),
    # 9) 词族韵脚
    "rime": _longest_first("an", "en", "in", "on", "un"),

    # 词缀
    "prefix": _longest_first("un", "re", "dis", "mis", "pre", "ex", "in", "im", "ir", "il",
                             "sub", "inter", "over", "under", "trans", "en", "em", "fore",
                             "de", "non", "anti", "auto", "bi", "tri", "co", "con"),
    "suffix": _longest_first("ing", "ed", "en", "ify", "ize",
                             "er", "est", "ful", "less", "ous", "ive", "al", "ic", "able", "ible", "y",
                             "ment", "ness", "tion", "sion", "ity", "ty", "ship", "hood", "dom",
                             "ance", "ence", "age", "ist", "or",
                             "ly", "ward", "wise"),

    # 整体保留、不再细拆的音节
    "atomic": ("ble", "cle", "dle", "fle", "gle", "kle", "ple", "tle", "zle", "le",
               "tion", "sion", "ture"),
}

# 扫描顺序（magic-e 与单字母兜底不是查表规则，由 patterns.py 插入）
PRIORITY = (
    "soft_cg", "silent", "digraph", "cluster3",
    "s_blend", "r_blend", "l_blend",
    "r_controlled", "magic_e", "vowel_team", "rime",
)

# 只能出现在音节开头（或紧跟元音）的类别
ONSET_ONLY = frozenset({"cluster3", "s_blend", "r_blend", "l_blend"})

RULES = MappingProxyType(_TABLES)

# 短闭音节判定时视为“需要继续细拆”的多字母模式
MULTI_LETTER = frozenset(
    p for cat in ("digraph", "silent", "cluster3", "s_blend", "r_blend", "l_blend",
                  "r_controlled", "vowel_team")
    for p in _TABLES[cat]
)

DIGRAPHS = frozenset(p for p in _TABLES["digraph"] if len(p) == 2)
VOWEL_TEAMS = frozenset(p for p in _TABLES["vowel_team"] if len(p) == 2)

# 单词开头合法的双辅音起始（前缀剥离后用来判断剩余部分是否可读）
ONSETS = frozenset(
    p[:2] for cat in ("silent", "cluster3", "s_blend", "r_blend", "l_blend")
    for p in _TABLES[cat]
) | (DIGRAPHS - {"ck"}) | {"qu"}
