"""Splitting of a command line into space-separated words, honouring quotes."""

from __future__ import annotations

from collections.abc import Iterator

_QUOTES = ("'", '"')


def _word_spans(line: str) -> Iterator[tuple[int, int]]:
    """Yield (start, end) of each word; quoted runs never end a word."""
    length = len(line)
    start = 0
    while start < length:
        while start < length and line[start] == " ":
            start += 1
        end = start
        while end < length and line[end] != " ":
            ch = line[end]
            if ch in _QUOTES:
                close = line.find(ch, end + 1)
                end = length if close == -1 else close + 1
            else:
                end += 1
        if start == end:
            break
        yield start, end
        start = end


def count_words(line: str) -> int:
    """Return how many words ``line`` splits into."""
    return sum(1 for _ in _word_spans(line))


def split_words(line: str) -> list[str]:
    """Split ``line`` on spaces, keeping quoted text (quotes included) intact."""
    return [line[start:end] for start, end in _word_spans(line)]