#!/usr/bin/env python3
"""
Two-operand demo for `src.core.bigint`.

Reads two decimal integers and prints the results of every operator:

  a + b, a - b, a * b, a / b and a % b (skipped when b is zero), a & b, a | b

Operands come from the command line, or from stdin as the first two
whitespace-separated tokens when no operands are given.

Example:
  echo "100 7" | python3 tools/bigint_demo.py
  python3 tools/bigint_demo.py -- -7 2
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Sequence, TextIO

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.core.bigint import BigInt, BigIntParseError, try_divmod

logger = logging.getLogger("bigint.demo")


class DemoInputError(Exception):
    pass


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def run_demo(a: BigInt, b: BigInt) -> list[str]:
    lines = [
        f"a + b = {a + b}",
        f"a - b = {a - b}",
        f"a * b = {a * b}",
    ]
    # Division is skipped rather than allowed to fail.
    result = try_divmod(a, b)
    if result.ok:
        lines.append(f"a / b = {result.quotient}")
        lines.append(f"a % b = {result.remainder}")
    else:
        logger.info("skipping a / b and a %% b: %s", result.error)
    lines.append(f"a & b = {a & b}")
    lines.append(f"a | b = {a | b}")
    return lines


def read_operands(operands: Sequence[str], stream: TextIO) -> tuple[BigInt, BigInt]:
    tokens = list(operands)
    if not tokens:
        tokens = stream.read().split()[:2]
    if len(tokens) != 2:
        raise DemoInputError(f"expected two integers, got {len(tokens)}")
    return BigInt.parse(tokens[0]), BigInt.parse(tokens[1])


def main(argv: list[str] | None = None, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    p = argparse.ArgumentParser(description="Print +, -, *, /, %, &, | for two arbitrary-precision integers.")
    p.add_argument("operands", nargs="*", help="Two decimal integers (default: read from stdin)")
    p.add_argument(
        "--log-level",
        default=_env_str("BIGINT_LOG_LEVEL", "WARNING"),
        help="Logging level (default: $BIGINT_LOG_LEVEL or WARNING)",
    )
    args = p.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    out = stdout if stdout is not None else sys.stdout
    try:
        a, b = read_operands(args.operands, stdin if stdin is not None else sys.stdin)
    except (BigIntParseError, DemoInputError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logger.debug("operands a=%d words, b=%d words", len(a.words), len(b.words))
    for line in run_demo(a, b):
        out.write(line + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
