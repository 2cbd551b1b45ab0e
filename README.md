# ludwig

Building blocks of the LUDWIG text editor, usable from Python on their own.

## Modules

- `ludwig.constants` – the editor's limits (`MAX_STR_LEN`, `MAX_STR_LEN_P`,
  mark numbers, `MAX_CODE`, the pattern state ranges), trailing-parameter
  delimiters and the message texts the editor reports.
- `ludwig.chars` – character and byte-buffer helpers. Characters are ints
  0..255 and buffers are `bytes`/`bytearray` addressed with 1-based columns;
  a region that falls outside its buffer raises `IndexError`.
  - `compare_str(target, st1, len1, text, st2, len2, exactcase)` returns a
    `Comparison(order, identical)`: the ordering (-1, 0, 1) of the target
    region against the text region and the number of leading characters that
    matched. Unless `exactcase`, the text is upper-cased before comparing.
  - `search_str(target, st1, len1, text, st2, len2, exactcase, backwards)`
    returns how many characters precede the match (counted from the end of
    the region when `backwards`, in which case the target is given reversed),
    or `None` when there is no match.
  - `reverse_str`, `fill_copy`, `apply_n`, `to_upper`, `to_lower`,
    `key_to_upper`, `sgn`, and the tests `is_printable`, `is_space`,
    `is_letter`, `is_lower`, `is_upper`, `is_numeric`, `is_punctuation`,
    `is_word_element`.
- `ludwig.commands` – the `Command` and `LeadParam` enumerations, and
  `is_prefix(command)` to tell whether a command introduces a multi-letter
  command.
- `ludwig.arrow` – cursor movement on a `Frame` (dot `Mark`, margins, tab
  stops, screen offset): `cursor_left`, `cursor_right`, `tab_backtab` and
  `home`, plus `is_arrow_command`. The movement functions return the dot's
  old position when the dot moved, or `None` (leaving the dot alone) when the
  move is impossible; `home` always returns the old position.
- `ludwig.keymap` – key-to-command tables. `build_command_table(old_version)`
  returns a `CommandTable` for the classic or the current key layout.
  `lookup(key)` gives the command a key starts (`Command.NOOP` for unbound
  keys), `expand(prefix, ch)` resolves the next letter of a prefixed command
  ignoring case and raises `KeyError` if none matches, and
  `prefix_entries(prefix)` lists the `(character code, command)` pairs of a
  prefix, raising `ValueError` for a command that is not a prefix.
- `ludwig.dfa` – conversion of a pattern NFA, given as a sequence of
  `NFAState`, into a `DFATable` of `DFAState`s with their `Transition`s:
  `epsilon_closure(nfa_table, states)` and
  `convert(nfa_table, nfa_start, nfa_end, middle_context_start, right_context_start)`.
  The result marks final states, pattern starts and the ends of the left and
  middle contexts. A pattern too complex for the state table raises
  `PatternError`. `DFATable.reset(definition)` empties a table.
- `ludwig.helpbuild` – turns a sequential help file into the indexed form
  read by the editor's help command.

## Installing

```
pip install .
```

## Building a help index

```
ludwighlpbld [INPUT] [OUTPUT]
```

`INPUT` defaults to `ludwighlp.t` and `OUTPUT` to `ludwighlp.idx`. The output
starts with a line giving the number of index entries and the number of
contents lines, followed by the index, the contents and the body text.
Over-long lines are truncated and illegal flag characters are reported on
standard error; the command exits with status 1 if a file cannot be opened.
The same conversion is available in code as
`ludwig.helpbuild.process_files(in_stream, out_stream)`, which takes binary
streams.

## Command tables in code

```python
from ludwig.commands import Command
from ludwig.keymap import build_command_table

table = build_command_table(old_version=False)
assert table.lookup("Q") is Command.QUIT
assert table.expand(Command.PREFIX_X, "s") is Command.EXIT_SUCCESS
```

## What this package does not do

It is not a working editor. There is no screen or terminal handling, no
interactive session, no text storage of frames, lines and files, no span
compiler or command interpreter, and no parser that turns a pattern into an
NFA: `ludwig.dfa` expects the NFA to be supplied. The only command it
installs is `ludwighlpbld`.

## Running the tests

```
pip install .[test]
pytest
```