"""Editor commands and leading-parameter kinds."""

from __future__ import annotations

from enum import Enum, auto


class LeadParam(Enum):
    """Kind of leading parameter that precedes a command."""

    NONE = auto()
    PLUS = auto()
    MINUS = auto()
    PINT = auto()
    NINT = auto()
    PINDEF = auto()
    NINDEF = auto()
    MARKER = auto()


class Command(Enum):
    """Every command the editor knows.

    The prefix commands are declared contiguously, in the order their
    expansion sections appear in the command tables, and are followed
    directly by ``NO_SUCH``, which marks the end of the last section.
    """

    NOOP = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    HOME = auto()
    RETURN = auto()
    TAB = auto()
    BACKTAB = auto()
    RUBOUT = auto()
    JUMP = auto()
    ADVANCE = auto()
    POSITION_COLUMN = auto()
    POSITION_LINE = auto()
    OP_SYS_COMMAND = auto()
    WINDOW_FORWARD = auto()
    WINDOW_BACKWARD = auto()
    WINDOW_LEFT = auto()
    WINDOW_RIGHT = auto()
    WINDOW_SCROLL = auto()
    WINDOW_TOP = auto()
    WINDOW_END = auto()
    WINDOW_NEW = auto()
    WINDOW_MIDDLE = auto()
    WINDOW_SET_HEIGHT = auto()
    WINDOW_UPDATE = auto()
    GET = auto()
    NEXT = auto()
    BRIDGE = auto()
    REPLACE = auto()
    EQUAL_STRING = auto()
    EQUAL_COLUMN = auto()
    EQUAL_MARK = auto()
    EQUAL_EOL = auto()
    EQUAL_EOP = auto()
    EQUAL_EOF = auto()
    OVERTYPE_MODE = auto()
    INSERT_MODE = auto()
    OVERTYPE_TEXT = auto()
    INSERT_TEXT = auto()
    INSERT_INVISIBLE = auto()
    INSERT_LINE = auto()
    INSERT_CHAR = auto()
    DELETE_LINE = auto()
    DELETE_CHAR = auto()
    SWAP_LINE = auto()
    SPLIT_LINE = auto()
    DITTO_UP = auto()
    DITTO_DOWN = auto()
    CASE_UP = auto()
    CASE_LOW = auto()
    CASE_EDIT = auto()
    SET_MARGIN_LEFT = auto()
    SET_MARGIN_RIGHT = auto()
    LINE_FILL = auto()
    LINE_JUSTIFY = auto()
    LINE_SQUASH = auto()
    LINE_CENTRE = auto()
    LINE_LEFT = auto()
    LINE_RIGHT = auto()
    WORD_ADVANCE = auto()
    WORD_DELETE = auto()
    ADVANCE_PARAGRAPH = auto()
    DELETE_PARAGRAPH = auto()
    SPAN_DEFINE = auto()
    SPAN_TRANSFER = auto()
    SPAN_COPY = auto()
    SPAN_COMPILE = auto()
    SPAN_JUMP = auto()
    SPAN_INDEX = auto()
    SPAN_ASSIGN = auto()
    SPAN_EXECUTE = auto()
    SPAN_EXECUTE_NO_RECOMPILE = auto()
    FRAME_KILL = auto()
    FRAME_EDIT = auto()
    FRAME_RETURN = auto()
    FRAME_PARAMETERS = auto()
    FILE_INPUT = auto()
    FILE_OUTPUT = auto()
    FILE_EDIT = auto()
    FILE_READ = auto()
    FILE_WRITE = auto()
    FILE_REWIND = auto()
    FILE_KILL = auto()
    FILE_EXECUTE = auto()
    FILE_SAVE = auto()
    FILE_TABLE = auto()
    FILE_GLOBAL_INPUT = auto()
    FILE_GLOBAL_OUTPUT = auto()
    FILE_GLOBAL_REWIND = auto()
    FILE_GLOBAL_KILL = auto()
    USER_COMMAND_INTRODUCER = auto()
    USER_KEY = auto()
    USER_PARENT = auto()
    USER_SUBPROCESS = auto()
    HELP = auto()
    VERIFY = auto()
    COMMAND = auto()
    MARK = auto()
    PAGE = auto()
    QUIT = auto()
    DUMP = auto()
    VALIDATE = auto()
    EXECUTE_STRING = auto()
    DO_LAST_COMMAND = auto()
    EXTENDED = auto()
    EXIT_ABORT = auto()
    EXIT_FAIL = auto()
    EXIT_SUCCESS = auto()
    PREFIX_AST = auto()
    PREFIX_A = auto()
    PREFIX_B = auto()
    PREFIX_C = auto()
    PREFIX_D = auto()
    PREFIX_E = auto()
    PREFIX_EO = auto()
    PREFIX_EQ = auto()
    PREFIX_F = auto()
    PREFIX_FG = auto()
    PREFIX_I = auto()
    PREFIX_K = auto()
    PREFIX_L = auto()
    PREFIX_O = auto()
    PREFIX_P = auto()
    PREFIX_S = auto()
    PREFIX_T = auto()
    PREFIX_TC = auto()
    PREFIX_TF = auto()
    PREFIX_U = auto()
    PREFIX_W = auto()
    PREFIX_X = auto()
    PREFIX_Y = auto()
    PREFIX_Z = auto()
    PREFIX_TILDE = auto()
    NO_SUCH = auto()
    PC_JUMP = auto()
    EXIT_TO = auto()
    FAIL_TO = auto()
    ITERATE = auto()


def is_prefix(command: Command) -> bool:
    """Whether ``command`` introduces a multi-letter command."""
    return Command.PREFIX_AST.value <= command.value <= Command.PREFIX_TILDE.value