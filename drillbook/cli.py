"""Command line runner that solves one problem on an input file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Iterable

from drillbook.arrays import (
    min_subarray_len,
    sorted_squares,
    subarray_sum,
    three_sum,
    trap,
    two_sum,
)
from drillbook.linkedlist import LinkedList, remove_elements
from drillbook.strings import find_anagrams, group_anagrams, letter_combinations


def _tokens(line: str, sep: str) -> list[str]:
    parts = line.split(sep)
    if parts[-1] == "":
        parts.pop()
    return parts


def _ints(line: str, sep: str) -> list[int]:
    return [int(token) for token in _tokens(line, sep)]


def _line(lines: list[str], index: int) -> str:
    if index >= len(lines):
        raise ValueError(f"input needs at least {index + 1} line(s)")
    return lines[index]


def _spaced(values: Iterable[object]) -> str:
    return "".join(f"{value} " for value in values)


def _run_two_sum(lines: list[str], args: argparse.Namespace) -> str:
    nums = _ints(_line(lines, 0), " ")
    target = int(_line(lines, 1))
    return "Result: " + _spaced(two_sum(nums, target))


def _run_three_sum(lines: list[str], args: argparse.Namespace) -> str:
    nums = _ints(_line(lines, 0), ",")
    return "".join(_spaced(triple) + "\n" for triple in three_sum(nums))


def _run_remove_elements(lines: list[str], args: argparse.Namespace) -> str:
    values = LinkedList(_ints(_line(lines, 0), " "))
    target = int(_line(lines, 1))
    values.head = remove_elements(values.head, target)
    return _spaced(values)


def _run_min_subarray(lines: list[str], args: argparse.Namespace) -> str:
    target = int(_line(lines, 0))
    nums = _ints(_line(lines, 1), " ")
    return str(min_subarray_len(target, nums))


def _run_trap(lines: list[str], args: argparse.Namespace) -> str:
    return f"{trap(_ints(_line(lines, 0), ','))} "


def _run_find_anagrams(lines: list[str], args: argparse.Namespace) -> str:
    return _spaced(find_anagrams(_line(lines, 0), _line(lines, 1)))


def _run_group_anagrams(lines: list[str], args: argparse.Namespace) -> str:
    words = _tokens(_line(lines, 0), " ")
    return "".join(_spaced(group) + "\n" for group in group_anagrams(words))


def _run_subarray_sum(lines: list[str], args: argparse.Namespace) -> str:
    nums = _ints(_line(lines, 0), ",")
    k = int(_line(lines, 1))
    return f"{subarray_sum(nums, k)} "


def _run_sorted_squares(lines: list[str], args: argparse.Namespace) -> str:
    nums = _ints(_line(lines, 0), " ")
    return "Result: " + _spaced(sorted_squares(nums))


def _run_letter_combinations(lines: list[str], args: argparse.Namespace) -> str:
    digits = lines[0] if lines else ""
    words = letter_combinations(digits)
    Path(args.output).write_text("".join(word + "\n" for word in words))
    return ""


_Runner = Callable[[list[str], argparse.Namespace], str]

_COMMANDS: dict[str, tuple[_Runner, str]] = {
    "two-sum": (_run_two_sum, "indices of two numbers adding up to a target"),
    "three-sum": (_run_three_sum, "distinct triples summing to zero"),
    "remove-elements": (_run_remove_elements, "drop a value from a linked list"),
    "min-subarray": (_run_min_subarray, "shortest run reaching a target sum"),
    "trap": (_run_trap, "rain water trapped by an elevation map"),
    "find-anagrams": (_run_find_anagrams, "start indices of anagrams of a pattern"),
    "group-anagrams": (_run_group_anagrams, "group words that are anagrams"),
    "subarray-sum": (_run_subarray_sum, "count subarrays summing to k"),
    "sorted-squares": (_run_sorted_squares, "sorted squares of a sorted array"),
    "letter-combinations": (
        _run_letter_combinations,
        "keypad letter strings for a digit string",
    ),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drillbook", description="Solve a practice problem on an input file."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, summary) in _COMMANDS.items():
        sub = commands.add_parser(name, help=summary)
        sub.add_argument(
            "-i", "--input", default="input.txt", help="input file (default: input.txt)"
        )
        if name == "letter-combinations":
            sub.add_argument(
                "-o",
                "--output",
                default="output.txt",
                help="output file (default: output.txt)",
            )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the chosen problem on its input file; return the exit status."""
    args = _parser().parse_args(argv)
    runner, _ = _COMMANDS[args.command]
    try:
        lines = Path(args.input).read_text().splitlines()
    except OSError as exc:
        print(f"drillbook: cannot read {args.input}: {exc.strerror}", file=sys.stderr)
        return 1
    try:
        text = runner(lines, args)
    except ValueError as exc:
        print(f"drillbook: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())