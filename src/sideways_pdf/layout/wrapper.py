"""
Module: layout.wrapper

Purpose:
    Greedy word wrap against a measured maximum width.

Key Functions:
    - wrap(): Pack whitespace-separated tokens into lines

Algorithm:
    Classic first-fit greedy wrap (not minimum raggedness):
    1. Append the next token to the current line if the result
       measures <= max_width
    2. Otherwise emit the current line and start a new one with the token
    3. A token wider than max_width on its own is emitted alone

Used By:
    - layout.assembler: Wraps each source page body
"""

from __future__ import annotations

from typing import Callable, List

from .models import Line


def wrap(
    text: str,
    max_width: float,
    measure: Callable[[str], float],
) -> List[Line]:
    """
    Wrap text into lines no wider than max_width.

    Inter-word spacing collapses to a single space. No token is ever
    dropped: an oversized token becomes a line of its own.

    Args:
        text: Text to wrap
        max_width: Maximum measured width of a line
        measure: Returns the rendered width of a candidate line

    Returns:
        Lines in reading order; empty list for blank text.

    Example:
        >>> wrap("alpha beta gamma", 9, len)
        ['alpha', 'beta', 'gamma']
    """
    lines: List[Line] = []
    line = ""

    for word in text.split():
        candidate = f"{line} {word}" if line else word
        if measure(candidate) <= max_width:
            line = candidate
        else:
            if line:
                lines.append(line)
            line = word

    if line:
        lines.append(line)
    return lines
