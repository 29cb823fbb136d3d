"""Detection of unterminated single and double quotes in a command line."""

from __future__ import annotations

ERROR_MESSAGE = "error invalid input"


class UnclosedQuoteError(ValueError):
    """Raised when a command line leaves a quote open."""

    def __init__(self, line: str, quote: str) -> None:
        super().__init__(ERROR_MESSAGE)
        self.line = line
        self.quote = quote


def _open_quote(line: str) -> str | None:
    """Return the quote character still open at the end of ``line``, if any."""
    current: str | None = None
    for ch in line:
        if current is None:
            if ch in ("'", '"'):
                current = ch
        elif ch == current:
            current = None
    return current


def quotes_balanced(line: str) -> bool:
    """Return True when every quote opened in ``line`` is closed again."""
    return _open_quote(line) is None


def check_quotes(line: str) -> None:
    """Raise UnclosedQuoteError if ``line`` leaves a quote open."""
    quote = _open_quote(line)
    if quote is not None:
        raise UnclosedQuoteError(line, quote)