# -*- coding: utf-8 -*-
"""
自然拼读拆分入口：
  例外词 → 后缀/前缀剥离 → 音节拆分 → 逐音节查表 → 拼回
任何内部异常都降级为“整个单词一个块”，不会抛给调用方。
"""
import re
from typing import Callable, List, Optional

from .affixes import strip_prefix, strip_suffix
from .lexicon import lookup_exception
from .patterns import scan
from .rules_v4 import RULES
from .syllables import divide_syllables, is_closed_short

Trace = Optional[Callable[[str], None]]

_LETTER_RUNS = re.compile(r"[a-z]+|[^a-z]")

_ATOMIC = frozenset(RULES["atomic"])


def _split_run(run: str, trace: Trace) -> List[str]:
    # 例外词按字母段查，one-two 这样的连字符词两段都能命中
    hit = lookup_exception(run)
    if hit is not None:
        if trace:
            trace(f"exception {run}: {hit}")
        return hit

    stem, suffix = strip_suffix(run)
    prefix, stem = strip_prefix(stem)
    syllables = divide_syllables(stem)
    if trace:
        trace(f"affix {prefix or '-'} + {stem} + {suffix or '-'}; syllables {syllables}")

    chunks = [prefix] if prefix else []
    prev = prefix[-1] if prefix else ""
    for syl in syllables:
        if syl in _ATOMIC or is_closed_short(syl):
            chunks.append(syl)
        else:
            chunks.extend(scan(syl, prev))
        prev = syl[-1]
    if suffix:
        chunks.append(suffix)
    return chunks


def segment(word, trace: Trace = None) -> List[str]:
    """
    把英文单词拆成自然拼读块（小写）。
    非字符串 / 空串 → []；内部出错 → [整个单词]。
    """
    if not isinstance(word, str):
        return []
    clean = word.strip().lower()
    if not clean:
        return []

    try:
        chunks: List[str] = []
        for run in _LETTER_RUNS.findall(clean):
            if run.isalpha() and run.isascii():
                chunks.extend(_split_run(run, trace))
            else:
                chunks.append(run)

        if "".join(chunks) != clean or not all(chunks):
            raise ValueError(f"chunks {chunks} do not rebuild {clean!r}")
        return chunks
    except Exception as ex:
        if trace:
            trace(f"fallback {clean}: {ex}")
        return [clean]


def segment_joined(word, sep: str = "-", trace: Trace = None) -> str:
    """连字符形式：flower → fl-ow-er"""
    return sep.join(segment(word, trace=trace))
