#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
只为缺失 phonics 字段的词补充自然拼读拆分，纯本地计算，不调用任何接口。
支持两种词表：
  - 数组 / {entries:[...]}（条目可以是 {"word":...} 或 {"entry": {"word":...}}）
  - 词典 {word: entry}（base.json / custom.json 的格式）

用法：
  python -m enrich.add_phonics data/base.json --out data/base_phonics.json
  # 就地覆盖（谨慎）：
  python -m enrich.add_phonics data/custom.json --overwrite
  # 已有 phonics 的词也重新拆分，并写成 fl-ow-er 字符串：
  python -m enrich.add_phonics data/custom.json --overwrite --force --joined
"""
from __future__ import annotations
import argparse
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from tqdm import tqdm

from config import DEFAULT_CHECKPOINT_EVERY, JOINER, PHONICS_FIELD
from phonics import VERSION, segment
from utils.jsonio import dump_json_atomic, load_vocab_store
from utils.textops import looks_like_word


def _has_phonics(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, list):
        return any(isinstance(x, str) and x for x in value)
    return False


def _iter_targets(data: Dict[str, Any]) -> Iterator[Tuple[dict, str]]:
    """逐条给出 (要写入的 dict, 单词)。"""
    if "entries" in data:
        entries = data["entries"]
        for i, e in enumerate(entries):
            if isinstance(e, str):
                # 纯字符串条目升级成对象，才有地方写 phonics
                e = entries[i] = {"word": e}
            if not isinstance(e, dict):
                continue
            ent = e["entry"] if isinstance(e.get("entry"), dict) else e
            yield ent, ent.get("word") or e.get("word") or ""
    else:
        for key, ent in data.items():
            if isinstance(ent, dict):
                yield ent, ent.get("word") or key


def add_phonics(
    in_path: Path,
    out_path: Path,
    force: bool = False,
    joined: bool = False,
    checkpoint_every: int = DEFAULT_CHECKPOINT_EVERY,
    trace: Optional[Callable[[str], None]] = None,
    progress_cb: Optional[Callable[[int, int], None]] = None,
    show_tqdm: bool = False,
) -> Dict[str, int]:
    data = load_vocab_store(in_path)
    targets = list(_iter_targets(data))
    total = len(targets)
    patched = kept = skipped = 0

    out_path.parent.mkdir(parents=True, exist_ok=True)
    pbar = tqdm(total=total, desc="Phonics", disable=not show_tqdm)

    for done, (ent, word) in enumerate(targets, start=1):
        if not force and _has_phonics(ent.get(PHONICS_FIELD)):
            kept += 1
        elif not looks_like_word(word):
            skipped += 1
        else:
            chunks = segment(word, trace=trace)
            if chunks:
                ent[PHONICS_FIELD] = JOINER.join(chunks) if joined else chunks
                patched += 1
                if checkpoint_every and patched % checkpoint_every == 0:
                    dump_json_atomic(out_path, data)
            else:
                skipped += 1
        pbar.update(1)
        if progress_cb:
            progress_cb(done, total)

    pbar.close()

    stats = {"total": total, "patched": patched, "kept": kept, "skipped": skipped}
    if "entries" in data:
        data["meta"] = data.get("meta") if isinstance(data.get("meta"), dict) else {}
        data["meta"]["phonics_added"] = dict(stats, rules=VERSION)
    dump_json_atomic(out_path, data)
    return stats


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("json", type=Path)
    g = ap.add_mutually_exclusive_group(required=False)
    g.add_argument("--out", type=Path, help="输出到新文件")
    g.add_argument("--overwrite", action="store_true", help="就地覆盖（谨慎）")
    ap.add_argument("--force", action="store_true", help="已有 phonics 的词也重新拆分")
    ap.add_argument("--joined", action="store_true", help="写成 fl-ow-er 字符串而不是数组")
    args = ap.parse_args()

    out = args.json if args.overwrite else (
        args.out or args.json.with_name(args.json.stem + "_phonics.json"))
    stats = add_phonics(args.json, out, force=args.force, joined=args.joined, show_tqdm=True)
    print(
        f"✓ patched: {stats['patched']}, kept: {stats['kept']}, skipped: {stats['skipped']}, saved → {out.resolve()}")


if __name__ == "__main__":
    main()
