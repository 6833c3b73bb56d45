"""
合計ツール（tally）

このツールがやること（ざっくり）：
- CLI引数で渡された数値（2つ以上）を足し合わせて、合計を stdout に出す
- 数値として読めないトークンがあれば、そのトークンをそのまま示して終了コード1
- `--help` / `-h` なら使い方を stdout に出して終了コード0

ライブラリとしても使える：
    >>> from tally import tally
    >>> tally(3, 4)
    7

分け方：
- tally()           : 計算の本体（純粋関数。I/Oしない）
- parse_number(s)   : トークン -> float（I/O境界：入力の解釈）
- parse_args / main : CLI（I/O境界：stdout / stderr / 終了コード）
"""

from __future__ import annotations

import argparse
import math
import sys
from typing import Iterable, NoReturn

import toolkit

LOGGER_NAME = "tally"
PROG = "tally"

MIN_OPERANDS = 2

ARITY_MESSAGE = "At least two numbers are required"
HELP_HINT = f'Use "{PROG} --help" for usage information.'


# -------------------------
# 例外（エラーの分類）
# -------------------------


class TallyError(ValueError):
    """tally が投げるエラーの基底クラス。main はこれだけ捕まえればよい。"""


class InvalidArgumentCount(TallyError):
    """オペランドが2つ未満。"""

    def __init__(self, message: str = ARITY_MESSAGE) -> None:
        super().__init__(message)


class InvalidNumberLiteral(TallyError):
    """
    数値として読めなかったトークン。

    token には「入力されたそのまま」の文字列を保持する（表示で使う）。
    """

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f'"{token}" is not a valid number.')


class UsageError(TallyError):
    """argparse が解釈できなかったオプション（例: --verbose=1）。"""


# -------------------------
# 計算（コアロジック）
# -------------------------


def tally(*numbers: float) -> float:
    """
    2つ以上の数値を左から順に足す。

    - 0 から始めて1つずつ足す（丸め・誤差補正はしない）
    - inf / nan は float の足し算のルールどおりに伝播する
    - 2つ未満なら InvalidArgumentCount（途中結果は返さない）
    """
    if len(numbers) < MIN_OPERANDS:
        raise InvalidArgumentCount()

    total: float = 0
    for num in numbers:
        total += num
    return total


# -------------------------
# トークン -> 数値（I/O境界：入力の解釈）
# -------------------------


def parse_number(token: str) -> float:
    """
    1トークンを float にする。

    - 受け付ける形は float() が受け付けるもの（-5, 2.5, 1e3, inf など）
    - nan は「数値ではない」として弾く
    """
    try:
        value = float(token)
    except ValueError:
        raise InvalidNumberLiteral(token) from None
    if math.isnan(value):
        raise InvalidNumberLiteral(token)
    return value


def parse_numbers(tokens: Iterable[str]) -> list[float]:
    """
    トークン列を順に数値化する。最初に失敗したトークンでそのまま例外を投げる。
    """
    return [parse_number(token) for token in tokens]


# -------------------------
# CLIパース（I/O境界：入力）
# -------------------------


_DESCRIPTION = """\
Add two or more numbers together.

arguments:
  <number1> <number2> ...  Numbers to add together (at least 2 required)"""

_EPILOG = f"""\
examples:
  {PROG} 3 4                Returns: 7
  {PROG} -5 17              Returns: 12
  {PROG} 1 2 3 4 5          Returns: 15"""


class _ArgumentParser(argparse.ArgumentParser):
    # 終了コード2で exit させず、main 側で「Error: ...」+ 終了コード1に揃える
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """
    CLI引数の定義。

    数値は位置引数として argparse に渡さない。
    `-5` や `-1e5` をオプション扱いされないように、
    オプション以外のトークンは全部 parse_args 側で拾う。
    """
    parser = _ArgumentParser(
        prog=PROG,
        usage=f"{PROG} <number1> <number2> [number3] ...",
        description=_DESCRIPTION,
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show this help message and exit")
    parser.add_argument("--verbose", action="store_true", help="Log parsing details to stderr")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    CLI引数を解析して args を返す。

    - args.help / args.verbose : オプション
    - args.tokens              : オプション以外のトークン（入力順のまま）
    """
    parser = build_parser()
    args, rest = parser.parse_known_args(argv)

    # 区切りの `--` は最初の1つだけ捨てる。2つ目以降は数値トークン扱い（= エラーになる）
    if "--" in rest:
        rest.remove("--")
    args.tokens = rest
    return args


def validate_args(args: argparse.Namespace) -> int:
    """
    入力検証（個数だけ）。失敗したら終了コード（1）を返す。
    """
    if len(args.tokens) < MIN_OPERANDS:
        toolkit.print_error(f"{ARITY_MESSAGE}.", HELP_HINT)
        return 1
    return 0


def format_result(value: float) -> str:
    return toolkit.format_number(value)


# -------------------------
# 実行フロー
# -------------------------


def main(argv: list[str] | None = None) -> int:
    """
    実行入口（テストからも呼べる形）。

    流れ：
    help -> 個数チェック -> 数値化 -> 計算 -> 表示
    どこで止まっても「stderrに1行 + 終了コード1」で終わる。
    """
    try:
        args = parse_args(argv)
    except UsageError as exc:
        toolkit.print_error(str(exc), HELP_HINT)
        return 1

    if args.help:
        build_parser().print_help(file=sys.stdout)
        return 0

    logger = toolkit.setup_logger(LOGGER_NAME, args.verbose)

    rc = validate_args(args)
    if rc != 0:
        return rc

    try:
        numbers = parse_numbers(args.tokens)
    except InvalidNumberLiteral as exc:
        toolkit.print_error(str(exc))
        return 1
    logger.info("parsed %d numbers: %s", len(numbers), numbers)

    try:
        result = tally(*numbers)
    except TallyError as exc:
        toolkit.print_error(str(exc))
        return 1
    logger.info("result: %r", result)

    print(format_result(result))
    return 0


def run() -> None:
    """console_scripts 用の入口。"""
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
