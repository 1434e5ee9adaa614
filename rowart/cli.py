"""Command line entry point: print a named pattern at a given size.

With sizes on the command line the pattern is printed once. Without them the
command asks for the sizes, prints the pattern and offers to go again until
the answer is not ``y``.
"""

import argparse
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from rowart import letters, numbers, shapes

__all__ = ["main"]

_ROWS_PROMPT = "enter the no. of rows: "
_LENGTH_PROMPT = "enter the length: "
_BREADTH_PROMPT = "enter the breadth: "
_CONTINUE_PROMPT = "do you want to continue(y/n): "
_EXIT_MESSAGE = "exit........."


@dataclass(frozen=True)
class _Pattern:
    render: Callable[..., list[str]]
    prompts: tuple[str, ...] = (_ROWS_PROMPT,)


def _name(func: Callable[..., list[str]]) -> str:
    return func.__name__.replace("_", "-")


def _build_registry() -> dict[str, _Pattern]:
    two_sided = {shapes.hollow_rectangle, shapes.rhombus}
    registry: dict[str, _Pattern] = {}
    for module in (numbers, letters, shapes):
        for attr in module.__all__:
            func = getattr(module, attr)
            if func in two_sided:
                pattern = _Pattern(func, (_LENGTH_PROMPT, _BREADTH_PROMPT))
            else:
                pattern = _Pattern(func)
            registry[_name(func)] = pattern
    return registry


PATTERNS: dict[str, _Pattern] = _build_registry()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rowart",
        description="Print number, letter and star patterns.",
    )
    parser.add_argument(
        "pattern",
        nargs="?",
        choices=sorted(PATTERNS),
        metavar="PATTERN",
        help="name of the pattern to print (see --list)",
    )
    parser.add_argument(
        "sizes",
        nargs="*",
        type=int,
        metavar="SIZE",
        help="size of the pattern; length and breadth for two-sided shapes",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="list the available patterns and exit",
    )
    return parser


def _print_rows(rows: Sequence[str]) -> None:
    for row in rows:
        print(row)


def _wants_more(answer: str) -> bool:
    return answer.strip()[:1] in ("y", "Y")


def _interactive(pattern: _Pattern) -> int:
    while True:
        try:
            sizes = [int(input(prompt)) for prompt in pattern.prompts]
        except EOFError:
            break
        except ValueError as error:
            print(f"rowart: invalid size: {error}", file=sys.stderr)
            return 2
        _print_rows(pattern.render(*sizes))
        try:
            answer = input(_CONTINUE_PROMPT)
        except EOFError:
            break
        if not _wants_more(answer):
            break
    print()
    print(_EXIT_MESSAGE)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command with ``argv`` (defaults to the process arguments)."""
    parser = _parser()
    args = parser.parse_args(argv)

    if args.list:
        for name in sorted(PATTERNS):
            print(name)
        return 0

    if args.pattern is None:
        parser.error("a pattern name is required")

    pattern = PATTERNS[args.pattern]
    if not args.sizes:
        return _interactive(pattern)

    if len(args.sizes) != len(pattern.prompts):
        parser.error(
            f"{args.pattern} takes {len(pattern.prompts)} size(s), "
            f"got {len(args.sizes)}"
        )
    _print_rows(pattern.render(*args.sizes))
    return 0


if __name__ == "__main__":
    sys.exit(main())