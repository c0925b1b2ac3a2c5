"""Command line entry point: run any drill or print any pattern.

Numbers may be given as arguments; when none are given, each one is asked
for on standard input with the matching prompt.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from drillbook import arithmetic, left_triangles, right_triangles, shapes, squares

_NUMBER = "Enter the number: "
_POWER = "Enter the power: "
_SQUARE = "Enter the dimension of the square: "
_ROWS = "Enter the number of the rows: "


@dataclass(frozen=True)
class _Command:
    prompts: tuple[str, ...]
    run: Callable[..., list[str]]
    help: str


def _factorial(n: int) -> list[str]:
    return [f"Factorial of {n} : {arithmetic.factorial(n)}"]


def _fibonacci(n: int) -> list[str]:
    return [f"Result is: {arithmetic.fibonacci(n)}"]


def _power(base: int, exponent: int) -> list[str]:
    return [f"Result: {arithmetic.power(base, exponent)}"]


def _prime(number: int) -> list[str]:
    verdict = "prime" if arithmetic.is_prime(number) else "not prime"
    return [f"Number is {verdict}"]


def _alphabet() -> list[str]:
    return ["".join(f"{letter} " for letter in arithmetic.alphabet())]


def _countdown(n: int) -> list[str]:
    return ["".join(f"{value} " for value in arithmetic.countdown(n))]


def _sum(n: int) -> list[str]:
    return [f"Result: {arithmetic.sum_naturals(n)}"]


def _build_commands() -> dict[str, _Command]:
    commands = {
        "factorial": _Command((_NUMBER,), _factorial, "factorial of a number"),
        "fibonacci": _Command((_NUMBER,), _fibonacci, "n-th Fibonacci number"),
        "power": _Command((_NUMBER, _POWER), _power, "a number raised to a power"),
        "prime": _Command((_NUMBER,), _prime, "whether a number is prime"),
        "alphabet": _Command((), _alphabet, "the letters a to z"),
        "countdown": _Command((_NUMBER,), _countdown, "natural numbers from n down to 1"),
        "sum": _Command((_NUMBER,), _sum, "sum of the first n natural numbers"),
    }
    pattern_groups = (
        (_SQUARE, squares, (
            "letter_square", "column_number_square", "descending_number_square",
            "increasing_number_square", "row_letter_square", "row_number_square",
            "squared_column_square", "star_square",
        )),
        (_ROWS, left_triangles, (
            "countdown_triangle", "descending_from_top_triangle", "number_triangle",
            "repeated_row_number_triangle", "letter_row_triangle", "star_triangle",
            "reversed_number_triangle", "reversed_star_triangle",
        )),
        (_ROWS, right_triangles, (
            "right_letter_triangle", "right_number_triangle",
            "right_descending_letter_triangle", "right_descending_number_triangle",
            "right_row_number_triangle", "right_star_triangle",
        )),
        (_ROWS, shapes, (
            "diamond", "hollow_double_diamond", "hourglass",
            "inverted_pyramid", "palindrome_pyramid", "pyramid",
        )),
    )
    for prompt, module, names in pattern_groups:
        for name in names:
            func = getattr(module, name)
            summary = (func.__doc__ or name).strip().splitlines()[0]
            commands[name.replace("_", "-")] = _Command((prompt,), func, summary)
    return commands


_COMMANDS = _build_commands()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drillbook", description="Run a practice drill or print a pattern."
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    for name, command in _COMMANDS.items():
        child = sub.add_parser(name, help=command.help, description=command.help)
        child.add_argument("values", nargs="*", type=int, metavar="N")
    return parser


def _ask(prompts: Sequence[str], parser: argparse.ArgumentParser) -> list[int]:
    values = []
    for prompt in prompts:
        raw = input(prompt).strip()
        try:
            values.append(int(raw))
        except ValueError:
            parser.error(f"expected an integer, got {raw!r}")
    return values


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv``, run the chosen command and print its lines."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    command = _COMMANDS[args.command]
    values = args.values
    if not values and command.prompts:
        values = _ask(command.prompts, parser)
    elif len(values) != len(command.prompts):
        parser.error(
            f"{args.command} takes {len(command.prompts)} number(s), got {len(values)}"
        )
    try:
        lines = command.run(*values)
    except ValueError as exc:
        parser.error(str(exc))
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())