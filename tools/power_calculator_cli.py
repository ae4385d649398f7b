#!/usr/bin/env python3
"""
Console front-end for the x^y power calculator.

Interactive mode (default) prompts for a base and an exponent until `exit`
(or end of input). Tokens are whitespace-separated, so `2 3` on one line
answers both prompts.

One-shot mode evaluates a single pair and exits:
  python3 tools/power_calculator_cli.py --base 2 --exponent 0.5

Exit codes (one-shot): 0 ok, 1 calculation error, 2 invalid input.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Iterator, Optional, Sequence, TextIO

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from powcalc.core.power_kernel import DomainError, InputError, power
from powcalc.integration.config import MAX_DIGITS, DisplayConfig, load_display_config
from powcalc.integration.formatting import format_error, format_result
from powcalc.integration.inputs import FIELD_BASE, FIELD_EXPONENT, parse_operand

EXIT_WORD = "exit"


class _Quit(Exception):
    pass


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _prompt_operand(tokens: Iterator[str], out: TextIO, *, field: str) -> float:
    symbol = "x" if field == FIELD_BASE else "y"
    label = "base" if field == FIELD_BASE else "exponent"
    while True:
        print(f"Enter the {label} ({symbol}): ", end="", file=out, flush=True)
        token = next(tokens, None)
        if token is None or token.lower() == EXIT_WORD:
            raise _Quit()
        try:
            return parse_operand(token, field=field)
        except InputError:
            print(f"Invalid input. Please enter a numeric value for {symbol}.", file=out)


def _render(value: float, config: DisplayConfig, *, scientific: bool) -> list[str]:
    shown = format_result(value, config, auto_scientific=scientific)
    return [shown.text] + ([shown.error] if shown.error else [])


def run_interactive(stdin: TextIO, stdout: TextIO, config: DisplayConfig, *, scientific: bool = False) -> int:
    tokens = _tokens(stdin)
    print("Welcome to the x^y Power Calculator!", file=stdout)
    print(f"Enter '{EXIT_WORD}' at any prompt to quit.", file=stdout)
    while True:
        try:
            x = _prompt_operand(tokens, stdout, field=FIELD_BASE)
            y = _prompt_operand(tokens, stdout, field=FIELD_EXPONENT)
        except _Quit:
            break
        try:
            lines = _render(power(x, y), config, scientific=scientific)
        except DomainError as exc:
            lines = [format_error(exc).error]
        for line in lines:
            print(line, file=stdout)
        print(file=stdout)
    print("Exiting Power Calculator. Goodbye!", file=stdout)
    return 0


def run_once(base_text: str, exponent_text: str, stdout: TextIO, config: DisplayConfig, *, scientific: bool = False) -> int:
    try:
        x = parse_operand(base_text, field=FIELD_BASE)
        y = parse_operand(exponent_text, field=FIELD_EXPONENT)
    except InputError as exc:
        print(f"power_calculator error: {exc}", file=sys.stderr)
        return 2
    try:
        value = power(x, y)
    except DomainError as exc:
        print(format_error(exc).error, file=stdout)
        return 1
    for line in _render(value, config, scientific=scientific):
        print(line, file=stdout)
    return 0


def main(argv: Optional[Sequence[str]] = None, *, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    p = argparse.ArgumentParser(description="Compute x^y from first principles (no platform pow/exp/log).")
    p.add_argument("--base", help="Base x (one-shot mode; requires --exponent)")
    p.add_argument("--exponent", help="Exponent y (one-shot mode; requires --base)")
    p.add_argument("--digits", type=int, default=None, help=f"Digits after the point in fixed notation (0..{MAX_DIGITS})")
    p.add_argument("--scientific", action="store_true", help="Switch to scientific notation for very small/large results")
    args = p.parse_args(argv)

    if (args.base is None) != (args.exponent is None):
        p.error("--base and --exponent must be given together")

    config = load_display_config()
    if args.digits is not None:
        if not (0 <= args.digits <= MAX_DIGITS):
            p.error(f"--digits must be in [0, {MAX_DIGITS}]")
        config = replace(config, fixed_digits=int(args.digits))

    out = stdout if stdout is not None else sys.stdout
    if args.base is not None:
        return run_once(args.base, args.exponent, out, config, scientific=bool(args.scientific))
    return run_interactive(stdin if stdin is not None else sys.stdin, out, config, scientific=bool(args.scientific))


if __name__ == "__main__":
    raise SystemExit(main())
