import pytest

from ludwig.commands import Command, LeadParam, is_prefix

PREFIX_NAMES = [
    "PREFIX_AST", "PREFIX_A", "PREFIX_B", "PREFIX_C", "PREFIX_D", "PREFIX_E",
    "PREFIX_EO", "PREFIX_EQ", "PREFIX_F", "PREFIX_FG", "PREFIX_I", "PREFIX_K",
    "PREFIX_L", "PREFIX_O", "PREFIX_P", "PREFIX_S", "PREFIX_T", "PREFIX_TC",
    "PREFIX_TF", "PREFIX_U", "PREFIX_W", "PREFIX_X", "PREFIX_Y", "PREFIX_Z",
    "PREFIX_TILDE",
]


@pytest.mark.parametrize("name", PREFIX_NAMES)
def test_prefix_commands_are_prefixes(name):
    assert is_prefix(Command[name]) is True


@pytest.mark.parametrize(
    "command",
    [Command.NOOP, Command.NO_SUCH, Command.UP, Command.QUIT, Command.EXIT_SUCCESS,
     Command.PC_JUMP, Command.ITERATE],
)
def test_other_commands_are_not_prefixes(command):
    assert is_prefix(command) is False


def test_prefixes_are_contiguous_and_in_table_order():
    positions = [i for i, c in enumerate(Command) if is_prefix(c)]
    assert positions == list(range(positions[0], positions[0] + len(PREFIX_NAMES)))
    names = [c.name for c in Command if is_prefix(c)]
    assert names == PREFIX_NAMES


def test_no_such_follows_last_prefix():
    members = list(Command)
    last = max(i for i, c in enumerate(members) if is_prefix(c))
    assert members[last + 1] is Command.NO_SUCH
    assert is_prefix(members[last + 1]) is False


def test_prefix_count_matches_membership():
    assert sum(1 for c in Command if is_prefix(c)) == len(PREFIX_NAMES)


def test_lead_params_round_trip_by_value():
    values = [p.value for p in LeadParam]
    assert len(set(values)) == len(values)
    for param in LeadParam:
        assert LeadParam(param.value) is param