"""Limits, symbols and messages shared by the editor."""

MAX_INT = 2**31 - 1

ORD_MAX_CHAR = 255

MAX_FILES = 100

MAX_GROUP_LINES = 64
MAX_GROUP_LINE_OFFSET = MAX_GROUP_LINES - 1

MAX_LINES = MAX_INT

MAX_MARK_NUMBER = 10
MIN_USER_MARK_NUMBER = 1
MAX_USER_MARK_NUMBER = 9

MARK_EQUALS = 0
MARK_MODIFIED = 10

MAX_SPACE = 1_000_000
MAX_REC_SIZE = 512

MAX_STR_LEN = 400
MAX_STR_LEN_P = MAX_STR_LEN + 1

MAX_SCR_ROWS = 100
MAX_SCR_COLS = 255

MAX_CODE = 4000
MAX_VERIFY = 256

MAX_TPAR_RECURSION = 100
MAX_TP_COUNT = 2
MAX_EXEC_RECURSION = 100

MAX_WORD_SETS = 2
MAX_WORD_SETS_M1 = MAX_WORD_SETS - 1

# Trailing parameter delimiters with special meanings.
TPD_LIT = ord("'")
TPD_SMART = ord("`")
TPD_EXACT = ord('"')
TPD_SPAN = ord("$")
TPD_PROMPT = ord("&")
TPD_ENVIRONMENT = ord("?")
EXPAND_LIM = 130

NAME_LEN = 31
FILE_NAME_LEN = 1024
KEY_LEN = 4

MAX_SPECIAL_KEYS = 1000
MAX_NR_KEY_NAMES = 1000
MAX_PARSE_TABLE = 300

# Pattern recogniser state machine.
MAX_NFA_STATE_RANGE = 200
MAX_DFA_STATE_RANGE = 255
MAX_SET_RANGE = ORD_MAX_CHAR
PATTERN_NULL = 0
PATTERN_NFA_START = 1
PATTERN_DFA_KILL = 0
PATTERN_DFA_FAIL = 0
PATTERN_DFA_START = 2
PATTERN_MAX_DEPTH = 20

PATTERN_KSTAR = ord("*")
PATTERN_COMMA = ord(",")
PATTERN_RPAREN = ord(")")
PATTERN_LPAREN = ord("(")
PATTERN_DEFINE_SET_U = ord("D")
PATTERN_DEFINE_SET_L = ord("d")
PATTERN_MARK = ord("@")
PATTERN_EQUALS = ord("=")
PATTERN_MODIFIED = ord("%")
PATTERN_PLUS = ord("+")
PATTERN_NEGATE = ord("-")
PATTERN_BAR = ord("|")
PATTERN_LRANGE_DELIM = ord("[")
PATTERN_RRANGE_DELIM = ord("]")
PATTERN_SPACE = ord(" ")

PATTERN_BEG_LINE = 0
PATTERN_END_LINE = 1
PATTERN_LEFT_MARGIN = 3
PATTERN_RIGHT_MARGIN = 4
PATTERN_DOT_COLUMN = 5

PATTERN_MARKS_START = 19
PATTERN_MARKS_MODIFIED = 29
PATTERN_MARKS_EQUALS = 19

PATTERN_ALPHA_START = 32

BLANK_FRAME_NAME = ""
DEFAULT_FRAME_NAME = "LUDWIG"

# Messages.
MSG_BLANK = ""
MSG_ABORT = "Aborted. Output Files may be CORRUPTED"
MSG_BAD_FORMAT_IN_TAB_TABLE = "Bad Format for list of Tab stops."
MSG_CANT_KILL_FRAME = "Can't Kill Frame."
MSG_CANT_SPLIT_NULL_LINE = "Can't split the Null line."
MSG_COMMAND_NOT_VALID = "No Command starts with this character."
MSG_COMMAND_RECURSION_LIMIT = "Command recursion limit exceeded."
MSG_COMMENTS_ILLEGAL = "Immediate mode comments are not allowed."
MSG_COMPILER_CODE_OVERFLOW = "Compiler code overflow, too many compiled spans."
MSG_COPYRIGHT_AND_LOADING_FILE = "Starting up, loading file."
MSG_COUNT_TOO_LARGE = "Count too large."
MSG_DECOMMITTED = "Warning - Decommitted feature."
MSG_EMPTY_SPAN = "Span is empty."
MSG_EQUALS_NOT_SET = "The Equals mark is not defined."
MSG_ERROR_OPENING_KEYS_FILE = "Error opening keys definitions file."
MSG_EXECUTING_INIT_FILE = "Executing initialization file."
MSG_FILE_ALREADY_IN_USE = "File already in use."
MSG_FILE_ALREADY_OPEN = "File already open."
MSG_FRAME_HAS_FILES_ATTACHED = "Frame Has Files Attached."
MSG_FRAME_OF_THAT_NAME_EXISTS = "Frame of that Name Already Exists."
MSG_ILLEGAL_LEADING_PARAM = "Illegal leading parameter."
MSG_ILLEGAL_MARK_NUMBER = "Illegal mark number."
MSG_ILLEGAL_PARAM_DELIMITER = "Illegal parameter delimiter."
MSG_INCOMPAT = "Incompatible switches specified."
MSG_INTERACTIVE_MODE_ONLY = "Allowed in interactive mode only."
MSG_INVALID_CMD_INTRODUCER = "Invalid command introducer."
MSG_INVALID_INTEGER = "Trailing parameter integer is invalid."
MSG_INVALID_KEYS_FILE = "Invalid keys definition file."
MSG_INVALID_SCREEN_HEIGHT = "Invalid height for screen."
MSG_INVALID_SLOT_NUMBER = "Invalid file slot number."
MSG_INVALID_T_OPTION = "Invalid Tab Option."
MSG_INVALID_RULER = "Invalid Ruler."
MSG_INVALID_PARAMETER_CODE = "Invalid Parameter Code."
MSG_LEFT_MARGIN_GE_RIGHT = "Specified Left Margin is not less than Right Margin."
MSG_LONG_INPUT_LINE = "Long input line has been split."
MSG_MARGIN_OUT_OF_RANGE = "Margin out of Range."
MSG_MARGIN_SYNTAX_ERROR = "Margin Syntax Error."
MSG_MARK_NOT_DEFINED = "Mark Not Defined."
MSG_MISSING_TRAILING_DELIM = "Missing trailing delimiter."
MSG_NO_DEFAULT_STR = "No default for trailing parameter string."
MSG_NO_FILE_OPEN = "No file open."
MSG_NO_MORE_FILES_ALLOWED = "No more files are allowed."
MSG_NO_ROOM_ON_LINE = "Operation would cause a line to become too long."
MSG_NO_SUCH_FRAME = "No such frame."
MSG_NO_SUCH_SPAN = "No such span."
MSG_NONPRINTABLE_INTRODUCER = "Command Introducer is not printable"
MSG_NOT_ENOUGH_INPUT_LEFT = "Not enough input left to satisfy request."
MSG_NOT_IMPLEMENTED = "Not implemented."
MSG_NOT_INPUT_FILE = "File is not an input file."
MSG_NOT_OUTPUT_FILE = "File is not an output file."
MSG_NOT_WHILE_EDITING_CMD = "Operation not allowed while editing frame COMMAND."
MSG_NOT_ALLOWED_IN_INSERT_MODE = "Command not allowed in insert mode."
MSG_OPTIONS_SYNTAX_ERROR = "Syntax error in options."
MSG_OUT_OF_RANGE_TAB_VALUE = "Invalid value for tab stop."
MSG_PARAMETER_TOO_LONG = "Parameter is too long."
MSG_PROMPTS_ARE_ONE_LINE = "A prompt string must be on one line."
MSG_SCREEN_MODE_ONLY = "Command allowed in screen mode only."
MSG_SCREEN_WIDTH_INVALID = "Invalid screen width specified."
MSG_SPAN_MUST_BE_ONE_LINE = (
    "A span used as a trailing parameter for this command must be one line."
)
MSG_SPAN_NAMES_ARE_ONE_LINE = "A span name must be on one line."
MSG_SPAN_OF_THAT_NAME_EXISTS = "Span of that name already exists."
MSG_ENQUIRY_MUST_BE_ONE_LINE = "An enquiry item must be on one line."
MSG_UNKNOWN_ITEM = "Unknown enquiry item."
MSG_SYNTAX_ERROR = "Syntax error."
MSG_SYNTAX_ERROR_IN_OPTIONS = "Syntax error in options."
MSG_SYNTAX_ERROR_IN_PARAM_CMD = "Syntax error in parameter command."
MSG_TOP_MARGIN_LSS_BOTTOM = "Top margin must be less than or equal to bottom margin."
MSG_TPAR_TOO_DEEP = "Trailing parameter translation has gone too deep."
MSG_UNKNOWN_OPTION = "Not a valid option."
MSG_PAT_NO_MATCHING_DELIM = "Pattern - No matching delimiter in pattern."
MSG_PAT_ILLEGAL_PARAMETER = "Pattern - Illegal parameter in pattern."
MSG_PAT_ILLEGAL_MARK_NUMBER = "Pattern - Illegal mark number in pattern."
MSG_PAT_PREMATURE_PATTERN_END = "Pattern - Premature pattern end."
MSG_PAT_SET_NOT_DEFINED = "Pattern - Set not defined."
MSG_PAT_ILLEGAL_SYMBOL = "Pattern - Illegal symbol in pattern."
MSG_PAT_SYNTAX_ERROR = "Pattern - Syntax error in pattern."
MSG_PAT_NULL_PATTERN = "Pattern - Null pattern."
MSG_PAT_PATTERN_TOO_COMPLEX = "Pattern - Pattern too complex."
MSG_PAT_ERROR_IN_SPAN = "Pattern - Error in dereferenced span."
MSG_PAT_ERROR_IN_RANGE = "Pattern - Error in range specification."
MSG_RESERVED_TPD = "Delimiter reserved for future use."
MSG_INTEGER_NOT_IN_RANGE = "Integer not in range"
MSG_MODE_ERROR = "Illegal Mode specification -- must be O,C or I"
MSG_WRITING_FILE = "Writing File."
MSG_LOADING_FILE = "Loading File."
MSG_SAVING_FILE = "Saving File."
MSG_PAGING = "Paging."
MSG_SEARCHING = "Searching."
MSG_QUITTING = "Quitting."
MSG_NO_OUTPUT = "This Frame has no Output File attached."
MSG_NOT_MODIFIED = "This Frame has not been modified."
MSG_NOT_RENAMED = "Output Files have '-lw*' appended to filename"
MSG_CANT_INVOKE = "Character cannot be invoked by a key"
MSG_EXCEEDED_DYNAMIC_MEMORY = "Exceeded dynamic memory limit."
MSG_INCONSISTENT_QUALIFIER = "Use of this qualifier is inconsistent with file operation"
MSG_UNRECOGNIZED_KEY_NAME = "Unrecognized key name"
MSG_KEY_NAME_TRUNCATED = "Key name too long, name truncated"

DBG_INTERNAL_LOGIC_ERROR = "Internal logic error."
DBG_BAD_FILE = "FILE and FILESYS definition of file_object disagree."
DBG_CANT_MARK_SCR_BOT_LINE = "Can't mark scr bot line."
DBG_CODE_PTR_IS_NIL = "Code ptr is nil."
DBG_FAILED_TO_UNLOAD_ALL_SCR = "Failed to unload all scr."
DBG_FATAL_ERROR_SET = "Fatal error set."
DBG_FIRST_FOLLOWS_LAST = "First follows last."
DBG_FIRST_NOT_AT_TOP = "First Not at Top."
DBG_FLINK_OR_BLINK_NOT_NIL = "Flink or blink not nil."
DBG_FRAME_CREATION_FAILED = "Frame creation failed."
DBG_FRAME_PTR_IS_NIL = "Frame ptr is nil."
DBG_GROUP_HAS_LINES = "Group has lines."
DBG_GROUP_PTR_IS_NIL = "Group ptr is nil."
DBG_ILLEGAL_INSTRUCTION = "Illegal Instruction."
DBG_INVALID_BLINK = "Incorrect blink."
DBG_INVALID_COLUMN_NUMBER = "Invalid column number."
DBG_INVALID_FLAGS = "Invalid flags."
DBG_INVALID_FRAME_PTR = "Invalid frame ptr."
DBG_INVALID_GROUP_PTR = "Invalid group ptr."
DBG_INVALID_LINE_LENGTH = "Invalid line length."
DBG_INVALID_LINE_NR = "Invalid line nr."
DBG_INVALID_LINE_PTR = "Invalid line ptr."
DBG_INVALID_LINE_USED_LENGTH = "Invalid line used length."
DBG_INVALID_NR_LINES = "Invalid nr lines."
DBG_INVALID_OFFSET_NR = "Invalid offset nr."
DBG_INVALID_SCR_PARAM = "Invalid SCR Parameter."
DBG_INVALID_SCR_ROW_NR = "Invalid scr row nr."
DBG_INVALID_SPAN_PTR = "Invalid span ptr."
DBG_LAST_NOT_AT_END = "Last not at end."
DBG_LIBRARY_ROUTINE_FAILURE = "Library routine call failed."
DBG_LINE_FROM_NUMBER_FAILED = "Line from number failed."
DBG_LINE_HAS_MARKS = "Line has marks."
DBG_LINE_IS_EOP = "Line is eop."
DBG_LINE_NOT_IN_SCR_FRAME = "Line not in scr frame."
DBG_LINE_ON_SCREEN = "Line on screen."
DBG_LINE_PTR_IS_NIL = "Line ptr is nil."
DBG_LINE_TO_NUMBER_FAILED = "Line to number failed."
DBG_LINES_FROM_DIFF_FRAMES = "Lines from diff frames."
DBG_MARK_IN_WRONG_FRAME = "Mark in wrong frame."
DBG_MARK_MOVE_FAILED = "Mark move failed."
DBG_MARK_PTR_IS_NIL = "Mark ptr is nil."
DBG_MARKS_FROM_DIFF_FRAMES = "Marks from diff frames."
DBG_NEEDED_FRAME_NOT_FOUND = "Frame C or OOPS is not in the span list"
DBG_NOT_IMMED_CMD = "Not immed cmd."
DBG_NXT_NOT_NIL = "Nxt should be nil here."
DBG_PC_OUT_OF_RANGE = "PC is out of Range."
DBG_REF_COUNT_IS_ZERO = "Reference count is zero."
DBG_REPEAT_NEGATIVE = "Repeat Negative."
DBG_SPAN_NOT_DESTROYED = "Span not destroyed."
DBG_TOP_LINE_NOT_DRAWN = "Top line not drawn."
DBG_TPAR_NIL = "Tpar should not be nil."
DBG_WRONG_ROW_NR = "Wrong row nr."