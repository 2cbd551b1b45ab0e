"""Convert a sequential help file into an indexed help file."""

from __future__ import annotations

import sys
from typing import BinaryIO

ENTRY_SIZE = 77
KEY_SIZE = 4

DEFAULT_INPUT_FILE = "ludwighlp.t"
DEFAULT_OUTPUT_FILE = "ludwighlp.idx"

_NO_SECTION = b"0"


def _warn(*lines: str) -> None:
    for line in lines:
        sys.stderr.write(line + "\n")


def _lines(in_stream: BinaryIO):
    """Yield (flag, text) pairs for each record of the help source."""
    for raw in in_stream:
        flag = raw[0]
        if flag == ord("\n"):
            yield ord(" "), b""
            continue
        rest = raw[1:]
        if rest.endswith(b"\n"):
            line = rest[:-1]
        elif rest:
            line = rest
        else:
            return
        if len(line) > ENTRY_SIZE:
            if flag not in b"!{":
                _warn("Line too long--truncated",
                      line.decode("latin-1") + ">>")
            line = line[:ENTRY_SIZE]
        yield flag, line


def process_files(in_stream: BinaryIO, out_stream: BinaryIO) -> None:
    """Read a help source from ``in_stream`` and write its indexed form.

    The output is a header line with the number of index and contents
    lines, followed by the index, the contents and the body text.
    """
    section = _NO_SECTION
    index = bytearray()
    contents = bytearray()
    body = bytearray()
    index_lines = 0
    contents_lines = 0

    for flag, line in _lines(in_stream):
        if flag == ord("\\"):
            if line:
                lead = line[:1]
                if lead == b"%":
                    body += b"\\%\n"
                elif lead == b"#":
                    if section != _NO_SECTION:
                        index += b"%8d\n" % len(body)
                    break
                else:
                    if section != _NO_SECTION:
                        index += b"%8d\n" % len(body)
                    section = line[:KEY_SIZE]
                    if section != _NO_SECTION:
                        index_lines += 1
                        index += b"%4s %8d" % (section, len(body))
        elif flag == ord("+"):
            contents_lines += 1
            contents += line + b"\n"
            body += line + b"\n"
        elif flag == ord(" "):
            if section == _NO_SECTION:
                contents_lines += 1
                contents += line + b"\n"
            else:
                body += line + b"\n"
        elif flag in b"{!":
            pass
        else:
            _warn("Illegal flag character.",
                  chr(flag) + line.decode("latin-1") + ">>")

    out_stream.write(b"%d %d\n" % (index_lines, contents_lines))
    out_stream.write(bytes(index))
    out_stream.write(bytes(contents))
    out_stream.write(bytes(body))


def main(argv: list[str] | None = None) -> int:
    """Build the index: ``[input [output]]``.  Returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    infile = args[0] if args else DEFAULT_INPUT_FILE
    outfile = args[1] if len(args) > 1 else DEFAULT_OUTPUT_FILE

    try:
        in_stream = open(infile, "rb")
    except OSError as exc:
        _warn(f"{infile}: {exc}")
        return 1
    with in_stream:
        try:
            out_stream = open(outfile, "wb")
        except OSError as exc:
            _warn(f"{outfile}: {exc}")
            return 1
        with out_stream:
            try:
                process_files(in_stream, out_stream)
            except OSError as exc:
                _warn(f"Error processing files: {exc}")
                return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())