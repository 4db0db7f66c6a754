"""Interactive command that values a stock from prompted inputs."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from dcfvalue.condition import Condition, InvalidConditionError
from dcfvalue.valuation import intrinsic_value

MSG_CURRENT_EARNINGS = "Current earnings: "
MSG_GROWTH_RATE = "Growth rate of earnings in growth years (must be normalized): "
MSG_GROWTH_YEARS = "Growth years: "
MSG_TERMINAL_GROWTH_RATE = (
    "Terminal growth rate of earnings more than 10 years later (must be normalized): "
)
MSG_DISCOUNT_RATE = "Discount rate (must be normalized): "
MSG_YEARS = "Year (must be greater than growth years): "


class InputError(ValueError):
    """Raised when a prompted value cannot be read or parsed."""


def prompt_float(prompt_text: str, stdin: TextIO, stdout: TextIO) -> float:
    """Write a prompt and read one line holding a number."""
    stdout.write(prompt_text)
    stdout.flush()
    line = stdin.readline()
    if not line.endswith("\n"):
        raise InputError(f"failed to read input for '{prompt_text.strip()}': EOF")
    text = line.strip()
    try:
        return float(text)
    except ValueError as exc:
        raise InputError(
            f"failed to parse '{text}' as float for '{prompt_text.rstrip(': ')}'"
        ) from exc


def _prompt_int(prompt_text: str, stdin: TextIO, stdout: TextIO) -> int:
    value = prompt_float(prompt_text, stdin, stdout)
    try:
        return int(value)
    except (ValueError, OverflowError) as exc:
        raise InputError(
            f"'{value}' is not a usable count for '{prompt_text.rstrip(': ')}'"
        ) from exc


def read_condition(stdin: TextIO, stdout: TextIO) -> Condition:
    """Prompt for every valuation parameter and return a validated Condition."""
    current_earnings = prompt_float(MSG_CURRENT_EARNINGS, stdin, stdout)
    growth_rate = prompt_float(MSG_GROWTH_RATE, stdin, stdout)
    growth_years = _prompt_int(MSG_GROWTH_YEARS, stdin, stdout)
    terminal_growth_rate = prompt_float(MSG_TERMINAL_GROWTH_RATE, stdin, stdout)
    discount_rate = prompt_float(MSG_DISCOUNT_RATE, stdin, stdout)
    years = _prompt_int(MSG_YEARS, stdin, stdout)
    return Condition(
        current_earnings=current_earnings,
        growth_rate=growth_rate,
        growth_years=growth_years,
        terminal_growth_rate=terminal_growth_rate,
        discount_rate=discount_rate,
        years=years,
    )


def _format_number(value: float) -> str:
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive valuation and print the intrinsic value."""
    parser = argparse.ArgumentParser(
        prog="dcfvalue",
        description="Estimate intrinsic value with a discounted cash flow model.",
    )
    parser.parse_args(argv)
    try:
        condition = read_condition(sys.stdin, sys.stdout)
    except (InputError, InvalidConditionError) as exc:
        sys.stdout.write("\n")
        sys.stderr.write(f"error: {exc}\n")
        return 2
    sys.stdout.write(f"intrinsic value: {_format_number(intrinsic_value(condition))}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())