from __future__ import annotations

import io

from src.core.bigint import BigInt


def test_run_demo_prints_all_seven_lines() -> None:
    from tools.bigint_demo import run_demo

    lines = run_demo(BigInt.parse("100"), BigInt.parse("7"))

    assert lines == [
        "a + b = 107",
        "a - b = 93",
        "a * b = 700",
        "a / b = 14",
        "a % b = 2",
        "a & b = 4",
        "a | b = 103",
    ]


def test_run_demo_skips_division_for_zero_divisor() -> None:
    from tools.bigint_demo import run_demo

    lines = run_demo(BigInt.parse("5"), BigInt.parse("0"))

    assert lines == [
        "a + b = 5",
        "a - b = 5",
        "a * b = 0",
        "a & b = 0",
        "a | b = 5",
    ]


def test_main_reads_stdin() -> None:
    from tools.bigint_demo import main

    out = io.StringIO()
    rc = main([], stdin=io.StringIO("-7 2\n"), stdout=out)

    assert rc == 0
    assert out.getvalue().splitlines()[3:5] == ["a / b = -3", "a % b = -1"]


def test_main_accepts_negative_operands_on_command_line() -> None:
    from tools.bigint_demo import main

    out = io.StringIO()
    rc = main(["-7", "2"], stdout=out)

    assert rc == 0
    assert out.getvalue().splitlines()[0] == "a + b = -5"


def test_main_rejects_bad_input(capsys) -> None:
    from tools.bigint_demo import main

    rc = main(["12x", "3"], stdout=io.StringIO())

    assert rc == 2
    assert "invalid decimal integer literal" in capsys.readouterr().err


def test_main_rejects_missing_operand() -> None:
    from tools.bigint_demo import main

    rc = main([], stdin=io.StringIO("42"), stdout=io.StringIO())

    assert rc == 2


def test_run_demo_negative_operand_with_zero_divisor() -> None:
    from tools.bigint_demo import run_demo

    lines = run_demo(BigInt.parse("-5"), BigInt.parse("0"))

    assert lines == [
        "a + b = -5",
        "a - b = -5",
        "a * b = 0",
        "a & b = 0",
        "a | b = 5",
    ]
