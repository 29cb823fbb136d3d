"""Interactive prompt that checks quoting and prints each word of a line."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .quotes import UnclosedQuoteError, check_quotes
from .splitter import split_words

PROMPT = "minishell$ "


def process_line(line: str) -> list[str]:
    """Return the words of ``line``; raise UnclosedQuoteError on open quotes."""
    check_quotes(line)
    return split_words(line)


def run(lines: Iterable[str], out: TextIO) -> int:
    """Process every line, writing words one per line, then ``exit``."""
    for line in lines:
        try:
            words = process_line(line)
        except UnclosedQuoteError as exc:
            out.write(f"{exc}\n")
            continue
        for word in words:
            out.write(f"{word}\n")
    out.write("exit\n")
    return 0


def _prompt_lines() -> Iterator[str]:
    try:
        import readline  # noqa: F401  (enables line editing and history)
    except ImportError:
        pass
    while True:
        try:
            yield input(PROMPT)
        except EOFError:
            return


def main(argv: list[str] | None = None) -> int:
    """Run the interactive prompt until end of input."""
    try:
        return run(_prompt_lines(), sys.stdout)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
        return 130


if __name__ == "__main__":
    sys.exit(main())