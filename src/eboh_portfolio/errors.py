"""Error types raised by the portfolio helpers."""

from __future__ import annotations

from typing import Optional


class InvalidArgument(ValueError):
    """An argument was outside what the called function accepts."""

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        super().__init__(message)
        self.argument = argument
