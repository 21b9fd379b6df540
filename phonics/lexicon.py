# -*- coding: utf-8 -*-
"""
例外词表：拼写与发音对不上的高频词，直接给出拆分结果，优先级最高。
"""
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple

_EXCEPTIONS: Dict[str, Tuple[str, ...]] = {
    # 发音与拼写严重不一致的词
    "said": ("s", "ai", "d"),          # ai 发 /ɛ/
    "have": ("h", "a", "ve"),          # e 不发音
    "one": ("one",),                   # 整体 /wʌn/
    "once": ("once",),
    "two": ("two",),                   # 整体 /tuː/
    "done": ("done",),
    "gone": ("g", "o", "ne"),          # o 发 /ɒ/
    "some": ("s", "o", "me"),          # o 发 /ʌ/
    "come": ("c", "o", "me"),
    "love": ("l", "o", "ve"),
    "give": ("g", "i", "ve"),          # i 发 /ɪ/
    "live": ("l", "i", "ve"),
    "move": ("m", "o", "ve"),          # o 发 /uː/
    "lose": ("l", "o", "se"),
    "above": ("a", "b", "o", "ve"),
    "what": ("wh", "a", "t"),          # a 发 /ɒ/
    "who": ("wh", "o"),
    "whose": ("wh", "o", "se"),
    "where": ("wh", "ere"),
    "when": ("wh", "e", "n"),
    "why": ("wh", "y"),                # y 发 /aɪ/
    "which": ("wh", "i", "ch"),
    "how": ("h", "ow"),
    "are": ("are",),
    "were": ("w", "ere"),              # ere 发 /ɜː/
    "was": ("w", "a", "s"),
    "does": ("d", "oe", "s"),          # oe 发 /ʌ/
    "friend": ("fr", "ie", "n", "d"),  # ie 发 /ɛ/
    "again": ("a", "g", "ai", "n"),
    "any": ("a", "n", "y"),            # a 发 /ɛ/
    "many": ("m", "a", "n", "y"),
    "been": ("b", "ee", "n"),          # ee 发 /ɪ/
    "eye": ("eye",),
    "sugar": ("s", "u", "g", "ar"),    # s 发 /ʃ/
    "the": ("th", "e"),
    "they": ("th", "ey"),
    "there": ("th", "ere"),
    "their": ("th", "eir"),
    "of": ("of",),
    "to": ("to",),
    "do": ("do",),
    "you": ("y", "ou"),
    "could": ("c", "ou", "l", "d"),    # l 不发音
    "would": ("w", "ou", "l", "d"),
    "should": ("sh", "ou", "l", "d"),
    "people": ("p", "eo", "ple"),
    "girl": ("g", "ir", "l"),          # 硬 g，不走 gi 规则
}


def _check_table(table: Dict[str, Tuple[str, ...]]) -> None:
    for word, chunks in table.items():
        if not chunks or any(not c for c in chunks) or "".join(chunks) != word:
            raise ValueError(f"bad exception entry: {word!r} -> {chunks!r}")


_check_table(_EXCEPTIONS)

EXCEPTIONS = MappingProxyType(_EXCEPTIONS)


def lookup_exception(word: str) -> Optional[List[str]]:
    """命中则返回拆分结果（新列表，调用方可随意修改）；否则返回 None。"""
    chunks = EXCEPTIONS.get(word)
    if chunks is None:
        return None
    return list(chunks)
