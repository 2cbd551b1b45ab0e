import pytest

from ludwig.commands import Command, is_prefix
from ludwig.keymap import CommandTable, build_command_table


@pytest.fixture(params=[True, False], ids=["old", "new"])
def table(request):
    return build_command_table(request.param)


@pytest.fixture
def old():
    return build_command_table(True)


@pytest.fixture
def new():
    return build_command_table(False)


def test_old_key_bindings(old):
    assert old.lookup("A") is Command.ADVANCE
    assert old.lookup("*") is Command.PREFIX_AST
    assert old.lookup("?") is Command.INSERT_INVISIBLE
    assert old.lookup("^") is Command.EXECUTE_STRING
    assert old.lookup(8) is Command.RUBOUT


def test_new_key_bindings(new):
    assert new.lookup("A") is Command.PREFIX_A
    assert new.lookup("T") is Command.PREFIX_T
    assert new.lookup("*") is Command.NOOP
    assert new.lookup("I") is Command.NOOP
    assert new.lookup(8) is Command.LEFT


def test_shared_bindings(table):
    assert table.lookup(13) is Command.RETURN
    assert table.lookup(127) is Command.RUBOUT
    assert table.lookup('"') is Command.DITTO_UP
    assert table.lookup("'") is Command.DITTO_DOWN
    assert table.lookup("\\") is Command.COMMAND
    assert table.lookup("~") is Command.PREFIX_TILDE


def test_lowercase_and_high_keys_are_noop(table):
    assert all(table.lookup(chr(c)) is Command.NOOP for c in range(ord("a"), ord("z") + 1))
    assert all(table.lookup(c) is Command.NOOP for c in range(128, 256))


def test_unbound_special_key_is_noop(table):
    assert table.lookup(-5) is Command.NOOP
    assert table.lookup(5000) is Command.NOOP


def test_lookup_rejects_multichar_string(table):
    with pytest.raises(ValueError):
        table.lookup("AB")


def test_old_expansions(old):
    assert old.expand(Command.PREFIX_AST, "U") is Command.CASE_UP
    assert old.expand(Command.PREFIX_Z, "Z") is Command.RUBOUT
    assert old.expand(Command.PREFIX_E, "Q") is Command.PREFIX_EQ
    assert old.expand(Command.PREFIX_FG, "W") is Command.FILE_WRITE


def test_new_expansions(new):
    assert new.expand(Command.PREFIX_K, "B") is Command.BACKTAB
    assert new.expand(Command.PREFIX_T, "C") is Command.PREFIX_TC
    assert new.expand(Command.PREFIX_TC, "U") is Command.CASE_UP
    assert new.expand(Command.PREFIX_O, "X") is Command.OP_SYS_COMMAND


def test_expand_ignores_case(new):
    assert new.expand(Command.PREFIX_K, "b") is new.expand(Command.PREFIX_K, "B")
    assert new.expand(Command.PREFIX_X, ord("s")) is Command.EXIT_SUCCESS


def test_first_matching_entry_wins(new):
    assert new.expand(Command.PREFIX_F, "S") is Command.FILE_SAVE


def test_expand_unknown_raises(table):
    with pytest.raises(KeyError):
        table.expand(Command.PREFIX_X, "Q")


def test_expand_in_empty_section_raises(old, new):
    with pytest.raises(KeyError):
        old.expand(Command.PREFIX_K, "B")
    with pytest.raises(KeyError):
        new.expand(Command.PREFIX_AST, "U")


def test_non_prefix_rejected(table):
    with pytest.raises(ValueError):
        table.prefix_entries(Command.QUIT)
    with pytest.raises(ValueError):
        table.expand(Command.QUIT, "A")


def test_empty_sections(old, new):
    assert new.prefix_entries(Command.PREFIX_AST) == ()
    assert old.prefix_entries(Command.PREFIX_T) == ()


@pytest.mark.parametrize("old_version, expected_total", [(True, 80), (False, 116)])
def test_sections_hold_every_expansion_entry(old_version, expected_total):
    built = build_command_table(old_version)
    total = sum(len(built.prefix_entries(c)) for c in Command if is_prefix(c))
    assert total == expected_total


def test_section_letters_are_upper_case(table):
    for command in Command:
        if is_prefix(command):
            for code, _ in table.prefix_entries(command):
                assert chr(code).isupper()


def test_bound_prefixes_have_entries(table):
    for code in range(256):
        command = table.lookup(code)
        if is_prefix(command):
            assert table.prefix_entries(command)


def test_every_entry_expands_consistently(table):
    for command in Command:
        if not is_prefix(command):
            continue
        seen = set()
        for code, target in table.prefix_entries(command):
            if code not in seen:
                assert table.expand(command, code) is target
                seen.add(code)


def test_custom_table():
    custom = CommandTable((Command.QUIT,), {Command.PREFIX_A: ((ord("Q"), Command.QUIT),)})
    assert custom.lookup(0) is Command.QUIT
    assert custom.lookup(1) is Command.NOOP
    assert custom.expand(Command.PREFIX_A, "q") is Command.QUIT
    assert custom.prefix_entries(Command.PREFIX_B) == ()