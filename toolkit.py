"""
小ツール共通の「I/Oまわり」部品集（toolkit）

狙い：
- 小ツールで毎回出てくる「だいたい同じ処理」をまとめる
  例：logger構成、エラー表示、数値の表示形式
- ツール本体（tally）は「そのツール固有の処理」に集中できるようにする

注意：
- ここに入れるのは「どのツールでも同じ意味で使えるもの」だけ
- ツール固有のメッセージ文言・引数名は各ツール側で持つ
"""

from __future__ import annotations

import logging
import math
import sys

# これ以上の桁は int にすると桁数が暴れるので float のまま表示する
_INT_RENDER_LIMIT = 1e21


def setup_logger(name: str, verbose: bool) -> logging.Logger:
    """
    ログをstderrに出すためのloggerを構成する。

    設計意図：
    - stdoutは「結果の出力」で使いたい（合計値だけを出す）
    - なので進捗/警告/失敗はstderrへ寄せる
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.propagate = False

    logger.handlers.clear()

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(handler)
    return logger


def print_error(message: str, hint: str | None = None) -> None:
    """
    `Error: ...` 形式でstderrに1行出す。hint があれば次の行に続ける。
    """
    print(f"Error: {message}", file=sys.stderr)
    if hint:
        print(hint, file=sys.stderr)


def format_number(value: float) -> str:
    """
    数値を「人間が読む用」の文字列にする。

    - 整数値なら小数部を付けない（7.0 -> "7"）
    - それ以外は Python の repr に任せる（0.1 + 0.2 -> "0.30000000000000004"）
    - inf / nan もそのまま（"inf", "-inf", "nan"）
    """
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer() and abs(value) < _INT_RENDER_LIMIT:
            return str(int(value))
        return repr(value)
    return str(value)
