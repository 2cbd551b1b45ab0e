import pytest

from ludwig.arrow import (
    Frame,
    Mark,
    cursor_left,
    cursor_right,
    home,
    is_arrow_command,
    tab_backtab,
)
from ludwig.commands import Command, LeadParam
from ludwig.constants import MAX_STR_LEN_P


@pytest.mark.parametrize(
    "command, expected",
    [
        (Command.RETURN, True),
        (Command.HOME, True),
        (Command.TAB, True),
        (Command.BACKTAB, True),
        (Command.LEFT, True),
        (Command.RIGHT, True),
        (Command.DOWN, True),
        (Command.UP, True),
        (Command.DELETE_LINE, False),
        (Command.INSERT_LINE, False),
        (Command.QUIT, False),
    ],
)
def test_is_arrow_command(command, expected):
    assert is_arrow_command(command) is expected


# Left


def test_move_left_by_one():
    frame = Frame(dot=Mark(col=10), margin_left=1)
    eql = cursor_left(frame, LeadParam.NONE, 1)
    assert eql is not None and eql.col == 10
    assert frame.dot.col == 9


def test_move_left_by_count():
    frame = Frame(dot=Mark(col=10), margin_left=1)
    assert cursor_left(frame, LeadParam.PINT, 5) is not None
    assert frame.dot.col == 5


def test_move_left_beyond_boundary():
    frame = Frame(dot=Mark(col=3), margin_left=1)
    assert cursor_left(frame, LeadParam.NONE, 5) is None
    assert frame.dot.col == 3


def test_move_left_to_margin():
    frame = Frame(dot=Mark(col=20), margin_left=5)
    assert cursor_left(frame, LeadParam.PINDEF, 0) is not None
    assert frame.dot.col == 5


def test_move_left_already_beyond_margin():
    frame = Frame(dot=Mark(col=5), margin_left=10)
    assert cursor_left(frame, LeadParam.PINDEF, 0) is None
    assert frame.dot.col == 5


# Right


def test_move_right_by_one():
    frame = Frame(dot=Mark(col=10), margin_right=MAX_STR_LEN_P)
    eql = cursor_right(frame, LeadParam.NONE, 1)
    assert eql is not None and eql.col == 10
    assert frame.dot.col == 11


def test_move_right_by_count():
    frame = Frame(dot=Mark(col=10), margin_right=MAX_STR_LEN_P)
    assert cursor_right(frame, LeadParam.PINT, 5) is not None
    assert frame.dot.col == 15


def test_move_right_beyond_boundary():
    frame = Frame(dot=Mark(col=MAX_STR_LEN_P - 2), margin_right=MAX_STR_LEN_P)
    assert cursor_right(frame, LeadParam.NONE, 5) is None
    assert frame.dot.col == MAX_STR_LEN_P - 2


def test_move_right_to_margin():
    frame = Frame(dot=Mark(col=10), margin_right=80)
    assert cursor_right(frame, LeadParam.PINDEF, 0) is not None
    assert frame.dot.col == 80


def test_move_right_already_beyond_margin():
    frame = Frame(dot=Mark(col=90), margin_right=80)
    assert cursor_right(frame, LeadParam.PINDEF, 0) is None
    assert frame.dot.col == 90


# Tab / backtab


def _tab_frame(col, margin_left=1, margin_right=MAX_STR_LEN_P, stops=(10, 20, 30)):
    return Frame(
        dot=Mark(col=col),
        tab_stops=set(stops),
        margin_left=margin_left,
        margin_right=margin_right,
    )


def test_tab_to_next_stop():
    frame = _tab_frame(5)
    eql = tab_backtab(frame, 1, 1)
    assert eql is not None and eql.col == 5
    assert frame.dot.col == 10


def test_tab_multiple_stops():
    frame = _tab_frame(5)
    assert tab_backtab(frame, 1, 2) is not None
    assert frame.dot.col == 20


def test_backtab_to_previous_stop():
    frame = _tab_frame(25)
    assert tab_backtab(frame, -1, 1) is not None
    assert frame.dot.col == 20


def test_tab_to_margin_left():
    frame = _tab_frame(5, margin_left=15, stops=())
    assert tab_backtab(frame, 1, 1) is not None
    assert frame.dot.col == 15


def test_tab_to_margin_right():
    frame = _tab_frame(70, margin_right=80, stops=())
    assert tab_backtab(frame, 1, 1) is not None
    assert frame.dot.col == 80


def test_tab_beyond_boundary():
    frame = _tab_frame(MAX_STR_LEN_P - 2, margin_right=MAX_STR_LEN_P + 10, stops=())
    assert tab_backtab(frame, 1, 1) is None
    assert frame.dot.col == MAX_STR_LEN_P - 2


def test_backtab_beyond_boundary():
    frame = _tab_frame(2, margin_left=-5, stops=())
    assert tab_backtab(frame, -1, 1) is None
    assert frame.dot.col == 2


# Home


def test_home_in_screen_frame():
    top_line = object()
    frame = Frame(dot=Mark(line=object(), col=50), scr_offset=10)
    eql = home(frame, frame, top_line)
    assert eql.col == 50
    assert frame.dot.col == 11
    assert frame.dot.line is top_line


def test_home_in_non_screen_frame():
    line = object()
    frame = Frame(dot=Mark(line=line, col=50))
    eql = home(frame, Frame(), object())
    assert eql.col == 50
    assert frame.dot.col == 50
    assert frame.dot.line is line