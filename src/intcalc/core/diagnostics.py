"""
Diagnostics sink shared by the lexer and parser for one parse pass.

All user-visible diagnostic wording is produced here.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class DiagnosticBag:
    """Ordered, append-only collection of diagnostic messages."""

    __slots__ = ("_messages",)

    def __init__(self) -> None:
        self._messages: list[str] = []

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)

    def __repr__(self) -> str:
        return f"DiagnosticBag({self._messages!r})"

    def extend(self, messages: Iterable[str]) -> None:
        self._messages.extend(messages)

    def to_tuple(self) -> tuple[str, ...]:
        """Snapshot of the messages collected so far."""
        return tuple(self._messages)

    def report_invalid_number(self, line: str) -> None:
        """The message quotes the whole input line, not just the digit run."""
        self._messages.append(f"{line} isn't valid Int32.")

    def report_nesting_too_deep(self, position: int, limit: int) -> None:
        self._messages.append(
            f"ERR: Parentheses nested deeper than {limit} levels at position {position}"
        )

    def report_bad_character(self, character: str) -> None:
        self._messages.append(f"ERR: bad character input: '{character}'")

    def report_unexpected_token(self, actual: str, expected: str) -> None:
        self._messages.append(f"ERR: Unexpected token <{actual}>, expected <{expected}>")
