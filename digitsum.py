"""
Day31: 桁和計算ツール（digitsum）

やること：
- 標準入力から整数を1つ読む
- 1〜9999 の範囲なら、各桁の和をループなしの式で計算して表示する
- 範囲外・数字じゃない入力は "Input error" を表示する

ポイント：
- 計算部分（digit_sum_linear）は純粋関数。ループも分岐もない
- 入力（read_token / parse_number / validate_number）と表示（run_shell）を分ける
- オプションも設定ファイルもなし。プロンプト → 1行の結果 → 終了コード0、だけ
- ログは stderr（stdout はプロンプトと結果専用）

使い方：
    python digitsum_main.py
"""

from __future__ import annotations

import io
import logging
import re
import sys
from dataclasses import dataclass
from typing import TextIO

LOGGER_NAME = "digitsum"

PROMPT = "Enter a number from [0-9999]: "
RESULT_TEMPLATE = "The sum of all digits in your number amounts to: {}"
INPUT_ERROR_MESSAGE = "Input error"

# 受け付ける範囲（0 と 10000 は含まない）
MIN_EXCLUSIVE = 0
MAX_EXCLUSIVE = 10000

# 符号つき10進数だけ（"1_000" や全角数字は int() だと通ってしまう）
_INT_RE = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """入力が使えないとき（範囲外 / 数字じゃない / 入力なし）。表示は全部 "Input error"。"""


def setup_logger(verbose: bool) -> logging.Logger:
    """
    ログをstderrに出すためのloggerを構成する。

    stdoutはプロンプトと結果で使うので、ログは必ずstderrへ。
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.propagate = False

    logger.handlers.clear()

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(handler)
    return logger


# -------------------------
# 計算（コアロジック）
# -------------------------


def digit_sum_linear(x: int) -> int:
    """
    x（0〜9999）の各桁の和を返す。

    x // 10 + x // 100 + x // 1000 は「下の桁を落とした値」の合計で、
    その9倍がちょうど x と桁和の差になる。
    例: 1234 -> 1234 - 9 * (123 + 12 + 1) = 10

    4桁を超える値では正しくないので、範囲チェックは呼ぶ側でやる。
    """
    return x - 9 * (x // 10 + x // 100 + x // 1000)


# -------------------------
# 入力（I/O境界：stdin）
# -------------------------


def read_token(stream: TextIO) -> str | None:
    """
    最初の「空白区切りのトークン」を返す。空行は読み飛ばす。

    ストリームの終わりまで何もなければ None。
    """
    for line in stream:
        parts = line.split()
        if parts:
            return parts[0]
    return None


def parse_number(raw: str | None) -> int:
    """
    トークンを整数にする。

    - 符号つき10進数だけ OK（"+12", "-5"）
    - "abc" / "12abc" / "1.5" / None（入力なし）は InputError
    """
    if raw is None:
        raise InputError("no input")
    if not _INT_RE.fullmatch(raw):
        raise InputError(f"not an integer: {raw!r}")
    try:
        return int(raw)
    except ValueError:
        # 桁数が多すぎると int() 自体が断る（int_max_str_digits）
        raise InputError(f"too many digits: {len(raw)}") from None


def validate_number(x: int) -> int:
    """0 < x < 10000 なら x をそのまま返す。0 もはじく。"""
    if MIN_EXCLUSIVE < x and x < MAX_EXCLUSIVE:
        return x
    raise InputError(f"out of range: {x}")


# -------------------------
# データモデル（DTO）
# -------------------------


@dataclass
class Outcome:
    """
    1回の実行結果。

    - raw: 読んだトークン（入力なしなら None）
    - value: 整数にできた値（できなければ None）
    - digit_sum: 計算結果（Input error なら None）
    """

    raw: str | None
    value: int | None
    digit_sum: int | None

    @property
    def ok(self) -> bool:
        return self.digit_sum is not None

    def message(self) -> str:
        if self.digit_sum is None:
            return INPUT_ERROR_MESSAGE
        return RESULT_TEMPLATE.format(self.digit_sum)


# -------------------------
# 対話シェル（プロンプト → 検証 → 表示）
# -------------------------


def evaluate(raw: str | None, logger: logging.Logger | None = None) -> Outcome:
    """
    トークンを検証して計算する（表示はしない）。

    InputError はここで Outcome に変える。理由は INFO ログにだけ残す。
    """
    value: int | None = None
    try:
        value = parse_number(raw)
        x = validate_number(value)
    except InputError as exc:
        if logger is not None:
            logger.info("input rejected: %s", exc)
        return Outcome(raw=raw, value=value, digit_sum=None)

    result = digit_sum_linear(x)
    if logger is not None:
        logger.info("digit sum computed: %d -> %d", x, result)
    return Outcome(raw=raw, value=x, digit_sum=result)


def run_shell(stdin: TextIO, stdout: TextIO, logger: logging.Logger | None = None) -> Outcome:
    """プロンプトを出して1つ読み、結果を1行表示する。リトライはしない。"""
    stdout.write(PROMPT)
    stdout.flush()

    raw = read_token(stdin)
    outcome = evaluate(raw, logger)

    stdout.write(outcome.message() + "\n")
    stdout.flush()
    return outcome


def _open_stdin() -> TextIO:
    """
    stdin を返す。デコードできないバイトは U+FFFD に置き換える。

    置き換えた文字は数字じゃないので、そのまま Input error になる。
    """
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(errors="replace")
    return sys.stdin


# -------------------------
# 実行フロー組み立て
# -------------------------


def main(verbose: bool = False) -> int:
    """
    実行入口（テストからも呼べる形）。

    Input error でも終了コードは 0（結果を表示したときと同じ）。
    verbose はテストやデバッグ用で、CLI からは変えられない。
    """
    logger = setup_logger(verbose)
    run_shell(_open_stdin(), sys.stdout, logger=logger)
    return 0
