# -*- coding: utf-8 -*-
import argparse
from pathlib import Path
from typing import List, Optional

import orjson
from tqdm import tqdm

from config import JOINER, TRACE
from enrich.add_phonics import add_phonics
from phonics import segment
from utils.jsonio import load_word_list


def _trace_printer(msg: str):
    print(f"[trace] {msg}")


def cli(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Phonics splitter (CLI)")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_s = sub.add_parser("split", help="单词 -> 拼读块")
    p_s.add_argument("words", nargs="*")
    p_s.add_argument("--file", type=Path, help="词表文件（每行一个词，或 .json）")
    p_s.add_argument("--joined", action="store_true", help="输出 fl-ow-er 而不是 JSON 数组")
    p_s.add_argument("--trace", action="store_true")

    p_f = sub.add_parser("fill", help="vocab.json -> 补全 phonics 字段")
    p_f.add_argument("json", type=Path)
    g = p_f.add_mutually_exclusive_group()
    g.add_argument("--out", type=Path)
    g.add_argument("--overwrite", action="store_true")
    p_f.add_argument("--force", action="store_true", help="已有 phonics 的词也重新拆分")
    p_f.add_argument("--joined", action="store_true")
    p_f.add_argument("--trace", action="store_true")

    args = ap.parse_args(argv)
    trace = _trace_printer if (args.trace or TRACE) else None

    if args.cmd == "split":
        words = list(args.words)
        if args.file:
            words += load_word_list(args.file)
        if not words:
            ap.error("split: give words or --file")
        for w in words:
            chunks = segment(w, trace=trace)
            shown = JOINER.join(chunks) if args.joined else orjson.dumps(chunks).decode()
            print(f"{w} → {shown}")
    elif args.cmd == "fill":
        out = args.json if args.overwrite else (
            args.out or args.json.with_name(args.json.stem + "_phonics.json"))
        pbar = tqdm(total=0, desc="Phonics", disable=trace is not None)

        def progress(d, t):
            pbar.n = d
            pbar.total = t
            pbar.refresh()
        stats = add_phonics(args.json, out, force=args.force, joined=args.joined,
                            trace=trace, progress_cb=progress)
        pbar.close()
        print(f"✓ patched: {stats['patched']}, kept: {stats['kept']}, "
              f"skipped: {stats['skipped']} -> {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(cli())
