"""Console prompts with bounded validation and indefinite re-prompting.

The parsing predicates are pure functions so they can be tested on their own;
:class:`Console` only adds the read/print loop around them.
"""

from __future__ import annotations

import math
from typing import Callable

INT_ERROR = "  [Error] Enter an integer from {lo} to {hi}."
FLOAT_ERROR = "  [Error] Enter a number from {lo} to {hi}."
YES_NO_ERROR = "  [Error] Please type y or n."


def _plain_number(text: str) -> bool:
    # int()/float() also take digit separators and non-ASCII digits.
    return text.isascii() and "_" not in text


def parse_int(text: str, lo: int, hi: int) -> int | None:
    """Return ``text`` as an int within ``[lo, hi]``, or ``None`` if it is not one."""

    if not _plain_number(text):
        return None
    try:
        value = int(text.strip())
    except ValueError:
        return None
    if lo <= value <= hi:
        return value
    return None


def parse_float(text: str, lo: float, hi: float) -> float | None:
    """Return ``text`` as a finite float within ``[lo, hi]``, or ``None``."""

    if not _plain_number(text):
        return None
    try:
        value = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    if lo <= value <= hi:
        return value
    return None


def parse_yes_no(text: str) -> bool | None:
    """Accept exactly ``y``/``Y`` or ``n``/``N``; surrounding whitespace is not stripped."""

    if text in ("y", "Y"):
        return True
    if text in ("n", "N"):
        return False
    return None


def format_bound(value: float) -> str:
    """Render a bound compactly, e.g. ``0``, ``-200``, ``1e+09`` or ``1e-06``."""

    return f"{value:g}"


class Console:
    """Line-oriented prompt loop over injectable input and output callables.

    ``input_func`` is called with the prompt text and returns the line typed;
    it may raise ``EOFError`` when input is exhausted, which propagates to the
    caller. ``output_func`` receives complete lines.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        pause_enabled: bool = True,
    ) -> None:
        self._input = input_func
        self._output = output_func
        self.pause_enabled = pause_enabled

    def echo(self, text: str = "") -> None:
        self._output(text)

    def read_line(self, prompt: str) -> str:
        return self._input(prompt)

    def read_int(self, prompt: str, lo: int, hi: int) -> int:
        while True:
            value = parse_int(self._input(prompt), lo, hi)
            if value is not None:
                return value
            self.echo(INT_ERROR.format(lo=lo, hi=hi))

    def read_float(self, prompt: str, lo: float, hi: float) -> float:
        while True:
            value = parse_float(self._input(prompt), lo, hi)
            if value is not None:
                return value
            self.echo(FLOAT_ERROR.format(lo=format_bound(lo), hi=format_bound(hi)))

    def yes_no(self, prompt: str) -> bool:
        while True:
            answer = parse_yes_no(self._input(f"{prompt} (y/n): "))
            if answer is not None:
                return answer
            self.echo(YES_NO_ERROR)

    def pause(self) -> None:
        if self.pause_enabled:
            self._input("\nPress Enter to continue...")
