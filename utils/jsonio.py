# -*- coding: utf-8 -*-
from pathlib import Path
from typing import Any, Dict, List
import orjson

from utils.textops import normalize_spaces


def load_json(path: Path) -> Any:
    raw = path.read_bytes()
    # 兼容带 BOM 的 utf-8
    return orjson.loads(raw.lstrip(b"\xef\xbb\xbf")) if raw.strip() else None


def dump_json_atomic(path: Path, obj: Any):
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_bytes(orjson.dumps(obj, option=orjson.OPT_INDENT_2 | orjson.OPT_NON_STR_KEYS))
    tmp.replace(path)


def load_vocab_store(path: Path) -> Dict[str, Any]:
    """
    词表的两种形态统一成 dict：
    - 数组 / {entries:[...]}  → {"entries": [...]}
    - 词典 {word: entry}      → 原样返回（没有 entries 键）
    """
    data = load_json(path)
    if data is None:
        return {"entries": []}
    if isinstance(data, list):
        return {"entries": data}
    if isinstance(data, dict):
        if "entries" in data and not isinstance(data["entries"], list):
            raise ValueError("'entries' must be an array")
        return data
    raise ValueError("JSON must be an array, {entries:[...]} or {word: entry}")


def load_word_list(path: Path) -> List[str]:
    """每行一个词（# 开头为注释）；.json 则兼容字符串数组或带 word 字段的对象数组。"""
    if path.suffix.lower() == ".json":
        store = load_vocab_store(path)
        if "entries" in store:
            items = [(None, e) for e in store["entries"]]
        else:
            items = list(store.items())
        out = []
        for key, e in items:
            if isinstance(e, str):
                w = e
            elif isinstance(e, dict):
                ent = e.get("entry") if isinstance(e.get("entry"), dict) else e
                w = ent.get("word") or key or ""
            else:
                continue
            w = normalize_spaces(w)
            if w:
                out.append(w)
        return out

    out = []
    for line in path.read_text(encoding="utf-8-sig", errors="ignore").splitlines():
        w = normalize_spaces(line)
        if w and not w.startswith("#"):
            out.append(w)
    return out
