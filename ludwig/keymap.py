"""Key-to-command tables and the expansion of multi-letter commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Union

from .chars import key_to_upper
from .commands import Command, is_prefix
from .constants import ORD_MAX_CHAR

C = Command

Key = Union[int, str]
Entry = tuple[int, Command]


def _key_code(key: Key) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"a key is a single character, not {key!r}")
        return ord(key)
    return key


def _sec(letters: str, *commands: Command) -> tuple[Entry, ...]:
    return tuple(zip((ord(ch) for ch in letters), commands, strict=True))


_CONTROL_KEYS: dict[int, Command] = {
    2: C.WINDOW_BACKWARD,
    4: C.DELETE_CHAR,
    5: C.WINDOW_END,
    6: C.WINDOW_FORWARD,
    7: C.DO_LAST_COMMAND,
    9: C.TAB,
    10: C.DOWN,
    11: C.DELETE_LINE,
    12: C.INSERT_LINE,
    13: C.RETURN,
    14: C.WINDOW_NEW,
    16: C.USER_COMMAND_INTRODUCER,
    18: C.RIGHT,
    20: C.WINDOW_TOP,
    21: C.UP,
    23: C.WORD_ADVANCE,
    26: C.USER_PARENT,
    30: C.INSERT_CHAR,
    127: C.RUBOUT,
}

_COMMON_PRINTING_KEYS: dict[str, Command] = {
    '"': C.DITTO_UP,
    "'": C.DITTO_DOWN,
    "\\": C.COMMAND,
    "{": C.SET_MARGIN_LEFT,
    "}": C.SET_MARGIN_RIGHT,
    "~": C.PREFIX_TILDE,
}

_OLD_KEYS: dict[str, Command] = {
    "*": C.PREFIX_AST,
    "?": C.INSERT_INVISIBLE,
    "A": C.ADVANCE,
    "B": C.PREFIX_B,
    "C": C.INSERT_CHAR,
    "D": C.DELETE_CHAR,
    "E": C.PREFIX_E,
    "F": C.PREFIX_F,
    "G": C.GET,
    "H": C.HELP,
    "I": C.INSERT_TEXT,
    "J": C.JUMP,
    "K": C.DELETE_LINE,
    "L": C.INSERT_LINE,
    "M": C.MARK,
    "N": C.NEXT,
    "O": C.OVERTYPE_TEXT,
    "Q": C.QUIT,
    "R": C.REPLACE,
    "S": C.PREFIX_S,
    "U": C.PREFIX_U,
    "V": C.VERIFY,
    "W": C.PREFIX_W,
    "X": C.PREFIX_X,
    "Y": C.PREFIX_Y,
    "Z": C.PREFIX_Z,
    "^": C.EXECUTE_STRING,
}

_NEW_KEYS: dict[str, Command] = {
    "A": C.PREFIX_A,
    "B": C.PREFIX_B,
    "C": C.PREFIX_C,
    "D": C.PREFIX_D,
    "E": C.PREFIX_E,
    "F": C.PREFIX_F,
    "G": C.GET,
    "H": C.HELP,
    "K": C.PREFIX_K,
    "L": C.PREFIX_L,
    "M": C.MARK,
    "O": C.PREFIX_O,
    "P": C.PREFIX_P,
    "Q": C.QUIT,
    "R": C.REPLACE,
    "S": C.PREFIX_S,
    "T": C.PREFIX_T,
    "U": C.PREFIX_U,
    "V": C.VERIFY,
    "W": C.PREFIX_W,
    "X": C.PREFIX_X,
}

_OLD_SECTIONS: dict[Command, tuple[Entry, ...]] = {
    C.PREFIX_AST: _sec("ULE", C.CASE_UP, C.CASE_LOW, C.CASE_EDIT),
    C.PREFIX_B: _sec("R", C.BRIDGE),
    C.PREFIX_E: _sec(
        "XDRNQOKP",
        C.SPAN_EXECUTE, C.FRAME_EDIT, C.FRAME_RETURN, C.SPAN_EXECUTE_NO_RECOMPILE,
        C.PREFIX_EQ, C.PREFIX_EO, C.FRAME_KILL, C.FRAME_PARAMETERS,
    ),
    C.PREFIX_EO: _sec("LFP", C.EQUAL_EOL, C.EQUAL_EOF, C.EQUAL_EOP),
    C.PREFIX_EQ: _sec("SCM", C.EQUAL_STRING, C.EQUAL_COLUMN, C.EQUAL_MARK),
    C.PREFIX_F: _sec(
        "SBIEOGKXTP",
        C.FILE_SAVE, C.FILE_REWIND, C.FILE_INPUT, C.FILE_EDIT, C.FILE_OUTPUT,
        C.PREFIX_FG, C.FILE_KILL, C.FILE_EXECUTE, C.FILE_TABLE, C.PAGE,
    ),
    C.PREFIX_FG: _sec(
        "IOBKRW",
        C.FILE_GLOBAL_INPUT, C.FILE_GLOBAL_OUTPUT, C.FILE_GLOBAL_REWIND,
        C.FILE_GLOBAL_KILL, C.FILE_READ, C.FILE_WRITE,
    ),
    C.PREFIX_S: _sec(
        "ACDTWLJIR",
        C.SPAN_ASSIGN, C.SPAN_COPY, C.SPAN_DEFINE, C.SPAN_TRANSFER, C.SWAP_LINE,
        C.SPLIT_LINE, C.SPAN_JUMP, C.SPAN_INDEX, C.SPAN_COMPILE,
    ),
    C.PREFIX_U: _sec(
        "CKPS",
        C.USER_COMMAND_INTRODUCER, C.USER_KEY, C.USER_PARENT, C.USER_SUBPROCESS,
    ),
    C.PREFIX_W: _sec(
        "FBMTENRLHSU",
        C.WINDOW_FORWARD, C.WINDOW_BACKWARD, C.WINDOW_MIDDLE, C.WINDOW_TOP,
        C.WINDOW_END, C.WINDOW_NEW, C.WINDOW_RIGHT, C.WINDOW_LEFT,
        C.WINDOW_SET_HEIGHT, C.WINDOW_SCROLL, C.WINDOW_UPDATE,
    ),
    C.PREFIX_X: _sec("SFA", C.EXIT_SUCCESS, C.EXIT_FAIL, C.EXIT_ABORT),
    C.PREFIX_Y: _sec(
        "FJSCLRAD",
        C.LINE_FILL, C.LINE_JUSTIFY, C.LINE_SQUASH, C.LINE_CENTRE, C.LINE_LEFT,
        C.LINE_RIGHT, C.WORD_ADVANCE, C.WORD_DELETE,
    ),
    C.PREFIX_Z: _sec(
        "UDRLHCTBZ",
        C.UP, C.DOWN, C.RIGHT, C.LEFT, C.HOME, C.RETURN, C.TAB, C.BACKTAB, C.RUBOUT,
    ),
    C.PREFIX_TILDE: _sec("VD", C.VALIDATE, C.DUMP),
}

_NEW_SECTIONS: dict[Command, tuple[Entry, ...]] = {
    C.PREFIX_A: _sec(
        "CLOPSTW",
        C.JUMP, C.ADVANCE, C.BRIDGE, C.ADVANCE_PARAGRAPH, C.NOOP, C.NEXT,
        C.WORD_ADVANCE,
    ),
    C.PREFIX_B: _sec("BCDIKMO", *([C.NOOP] * 7)),
    C.PREFIX_C: _sec("CL", C.INSERT_CHAR, C.INSERT_LINE),
    C.PREFIX_D: _sec(
        "CLPSW",
        C.DELETE_CHAR, C.DELETE_LINE, C.DELETE_PARAGRAPH, C.NOOP, C.WORD_DELETE,
    ),
    C.PREFIX_E: _sec(
        "DKOPQR",
        C.FRAME_EDIT, C.FRAME_KILL, C.PREFIX_EO, C.FRAME_PARAMETERS, C.PREFIX_EQ,
        C.FRAME_RETURN,
    ),
    C.PREFIX_EO: _sec("LFP", C.EQUAL_EOL, C.EQUAL_EOF, C.EQUAL_EOP),
    C.PREFIX_EQ: _sec("CLMS", C.EQUAL_COLUMN, C.NOOP, C.EQUAL_MARK, C.EQUAL_STRING),
    C.PREFIX_F: _sec(
        "SBEGIKOPSTX",
        C.FILE_SAVE, C.FILE_REWIND, C.FILE_EDIT, C.PREFIX_FG, C.FILE_INPUT,
        C.FILE_KILL, C.FILE_OUTPUT, C.PAGE, C.NOOP, C.FILE_TABLE, C.FILE_EXECUTE,
    ),
    C.PREFIX_FG: _sec(
        "BIKORW",
        C.FILE_GLOBAL_REWIND, C.FILE_GLOBAL_INPUT, C.FILE_GLOBAL_KILL,
        C.FILE_GLOBAL_OUTPUT, C.FILE_READ, C.FILE_WRITE,
    ),
    C.PREFIX_K: _sec(
        "BCDHILMORTUX",
        C.BACKTAB, C.RETURN, C.DOWN, C.HOME, C.INSERT_MODE, C.LEFT, C.USER_KEY,
        C.OVERTYPE_MODE, C.RIGHT, C.TAB, C.UP, C.RUBOUT,
    ),
    C.PREFIX_L: _sec("RS", C.NOOP, C.NOOP),
    C.PREFIX_O: _sec("PSX", C.USER_PARENT, C.USER_SUBPROCESS, C.OP_SYS_COMMAND),
    C.PREFIX_P: _sec("CL", C.POSITION_COLUMN, C.POSITION_LINE),
    C.PREFIX_S: _sec(
        "ACDEJMRTX",
        C.SPAN_ASSIGN, C.SPAN_COPY, C.SPAN_DEFINE, C.SPAN_EXECUTE_NO_RECOMPILE,
        C.SPAN_JUMP, C.SPAN_TRANSFER, C.SPAN_COMPILE, C.SPAN_INDEX, C.SPAN_EXECUTE,
    ),
    C.PREFIX_T: _sec(
        "BCFINORSX",
        C.SPLIT_LINE, C.PREFIX_TC, C.PREFIX_TF, C.INSERT_TEXT, C.INSERT_INVISIBLE,
        C.OVERTYPE_TEXT, C.NOOP, C.SWAP_LINE, C.EXECUTE_STRING,
    ),
    C.PREFIX_TC: _sec("ELU", C.CASE_EDIT, C.CASE_LOW, C.CASE_UP),
    C.PREFIX_TF: _sec(
        "CFJLRS",
        C.LINE_CENTRE, C.LINE_FILL, C.LINE_JUSTIFY, C.LINE_LEFT, C.LINE_RIGHT,
        C.LINE_SQUASH,
    ),
    C.PREFIX_U: _sec("C", C.USER_COMMAND_INTRODUCER),
    C.PREFIX_W: _sec(
        "BCEFHLMNORSTU",
        C.WINDOW_BACKWARD, C.WINDOW_MIDDLE, C.WINDOW_END, C.WINDOW_FORWARD,
        C.WINDOW_SET_HEIGHT, C.WINDOW_LEFT, C.WINDOW_SCROLL, C.WINDOW_NEW, C.NOOP,
        C.WINDOW_RIGHT, C.NOOP, C.WINDOW_TOP, C.WINDOW_UPDATE,
    ),
    C.PREFIX_X: _sec("AFS", C.EXIT_ABORT, C.EXIT_FAIL, C.EXIT_SUCCESS),
    C.PREFIX_TILDE: _sec("DV", C.DUMP, C.VALIDATE),
}


@dataclass(frozen=True)
class CommandTable:
    """The command bound to each key and the expansions of each prefix."""

    keys: tuple[Command, ...]
    sections: Mapping[Command, tuple[Entry, ...]] = field(default_factory=dict)

    def lookup(self, key: Key) -> Command:
        """The command a key starts; keys without a binding give NOOP."""
        code = _key_code(key)
        if 0 <= code < len(self.keys):
            return self.keys[code]
        return Command.NOOP

    def prefix_entries(self, prefix: Command) -> tuple[Entry, ...]:
        """The (character code, command) pairs that follow ``prefix``, in order."""
        if not is_prefix(prefix):
            raise ValueError(f"{prefix.name} is not a prefix command")
        return self.sections.get(prefix, ())

    def expand(self, prefix: Command, ch: Key) -> Command:
        """The command that ``ch`` selects after ``prefix``, ignoring case.

        Raises KeyError when no command starts that way.
        """
        code = key_to_upper(_key_code(ch))
        for extension, command in self.prefix_entries(prefix):
            if extension == code:
                return command
        raise KeyError("Command not valid")


def build_command_table(old_version: bool) -> CommandTable:
    """Build the original (``old_version``) or the current command set."""
    keys = [Command.NOOP] * (ORD_MAX_CHAR + 1)
    for code, command in _CONTROL_KEYS.items():
        keys[code] = command
    keys[8] = Command.RUBOUT if old_version else Command.LEFT
    printing = _OLD_KEYS if old_version else _NEW_KEYS
    for ch, command in {**_COMMON_PRINTING_KEYS, **printing}.items():
        keys[ord(ch)] = command
    sections = _OLD_SECTIONS if old_version else _NEW_SECTIONS
    all_sections = {
        command: sections.get(command, ()) for command in Command if is_prefix(command)
    }
    return CommandTable(tuple(keys), all_sections)