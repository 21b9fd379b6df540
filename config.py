# -*- coding: utf-8 -*-
import os

# === 建议：优先用环境变量设置 ===
#  PowerShell:
#   $env:PHONICS_TRACE="1"
#  Linux/macOS:
#   export PHONICS_TRACE=1
TRACE = os.getenv("PHONICS_TRACE", "").strip().lower() not in ("", "0", "false", "no")

# 拼读块写成字符串时的连接符（flower → fl-ow-er）
JOINER = os.getenv("PHONICS_JOINER") or "-"

# 词表里存放拼读块的字段名
PHONICS_FIELD = "phonics"

# 批量补全时每处理多少条落盘一次（0 = 只在结束时写）
DEFAULT_CHECKPOINT_EVERY = int(os.getenv("PHONICS_CHECKPOINT_EVERY") or 500)
