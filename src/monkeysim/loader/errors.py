"""Errors raised while reading monkey notes."""

from __future__ import annotations


class ParseError(ValueError):
    """Notes text does not match the expected grammar."""

    def __init__(self, message: str, line: int | None = None):
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"
