"""Cursor movement: arrow keys, TAB, BACKTAB and HOME."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from .commands import Command, LeadParam
from .constants import MAX_STR_LEN, MAX_STR_LEN_P

_ARROW_COMMANDS = frozenset({
    Command.RETURN,
    Command.HOME,
    Command.TAB,
    Command.BACKTAB,
    Command.LEFT,
    Command.RIGHT,
    Command.DOWN,
    Command.UP,
})

_FORWARD_COUNTS = (LeadParam.NONE, LeadParam.PLUS, LeadParam.PINT)


@dataclass
class Mark:
    """A position in the text: a line and a 1-based column."""

    line: Any = None
    col: int = 1


@dataclass
class Frame:
    """The parts of an editing frame that cursor movement works on."""

    dot: Mark = field(default_factory=Mark)
    margin_left: int = 1
    margin_right: int = MAX_STR_LEN
    tab_stops: set[int] = field(default_factory=set)
    scr_offset: int = 0


def is_arrow_command(command: Command) -> bool:
    """Whether ``command`` is one of the cursor movement commands."""
    return command in _ARROW_COMMANDS


def _snapshot(frame: Frame) -> Mark:
    return dataclasses.replace(frame.dot)


def cursor_left(frame: Frame, rept: LeadParam, count: int) -> Mark | None:
    """Move the dot left.

    Returns where the dot was (the new Equals position) if it moved, or
    ``None`` if the move is impossible, leaving the dot untouched.
    """
    old = _snapshot(frame)
    if rept in _FORWARD_COUNTS:
        if frame.dot.col - count >= 1:
            frame.dot.col -= count
            return old
    elif rept is LeadParam.PINDEF:
        if frame.dot.col >= frame.margin_left:
            frame.dot.col = frame.margin_left
            return old
    return None


def cursor_right(frame: Frame, rept: LeadParam, count: int) -> Mark | None:
    """Move the dot right; see :func:`cursor_left` for the result."""
    old = _snapshot(frame)
    if rept in _FORWARD_COUNTS:
        if frame.dot.col + count <= MAX_STR_LEN_P:
            frame.dot.col += count
            return old
    elif rept is LeadParam.PINDEF:
        if frame.dot.col <= frame.margin_right:
            frame.dot.col = frame.margin_right
            return old
    return None


def tab_backtab(frame: Frame, step: int, count: int) -> Mark | None:
    """Move the dot ``count`` tab stops forward (step 1) or back (step -1).

    Margins count as tab stops.  Returns the old dot position, or ``None``
    if the line's edge is reached first.
    """
    old = _snapshot(frame)
    new_col = frame.dot.col
    for _ in range(count):
        while True:
            new_col += step
            if (new_col <= 0 or new_col >= MAX_STR_LEN_P
                    or new_col in frame.tab_stops
                    or new_col == frame.margin_left
                    or new_col == frame.margin_right):
                break
        if new_col <= 0 or new_col >= MAX_STR_LEN_P:
            return None
    frame.dot.col = new_col
    return old


def home(frame: Frame, screen_frame: Frame | None, top_line: Any) -> Mark:
    """Move the dot to the top-left of the screen if ``frame`` is on screen.

    Returns the old dot position.
    """
    old = _snapshot(frame)
    if frame is screen_frame:
        frame.dot = Mark(top_line, frame.scr_offset + 1)
    return old