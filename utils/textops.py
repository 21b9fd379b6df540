# -*- coding: utf-8 -*-
import re
WORD_RE = re.compile(r"[A-Za-z][A-Za-z\-' ]*")


def looks_like_word(s: str) -> bool:
    return bool(WORD_RE.fullmatch((s or "").strip()))


def normalize_spaces(s: str) -> str:
    return re.sub(r"\s{2,}", " ", (s or "").replace("\r", "\n").replace("\n", " ")).strip()
