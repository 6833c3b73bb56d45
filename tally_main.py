"""
エントリーポイント（薄いラッパー） - tally

狙い：
- 実装本体(tally.py)とCLI実行の入口を分離する
- import しただけで計算が走らない（テスト/再利用がしやすい）
"""

from __future__ import annotations

import sys


if __name__ == "__main__":
    from tally import main

    raise SystemExit(main(sys.argv[1:]))
