"""Character classification and byte-string helpers.

Characters are byte values (ints 0..255).  Buffers are ``bytes`` or
``bytearray`` objects addressed with 1-based column offsets.
"""

from __future__ import annotations

import unicodedata
from typing import Callable, NamedTuple

from .constants import MAX_SET_RANGE

_SPACE_CHARS = frozenset({0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0x85, 0xA0})


class Comparison(NamedTuple):
    """Result of :func:`compare_str`."""

    order: int
    identical: int


def sgn(val: int) -> int:
    """Return -1, 0 or 1 according to the sign of ``val``."""
    return (val > 0) - (val < 0)


def _region(buf, start: int, length: int) -> slice:
    if start < 1 or length < 0 or start - 1 + length > len(buf):
        raise IndexError(
            f"region {start}..{start + length - 1} outside buffer of {len(buf)}"
        )
    return slice(start - 1, start - 1 + length)


def fill_copy(src, srcofs: int, srclen: int, dst: bytearray,
              dstofs: int, dstlen: int, fill: int) -> None:
    """Copy up to ``dstlen`` bytes of ``src`` into ``dst``, padding with ``fill``."""
    if dstlen <= 0:
        return
    count = min(max(srclen, 0), dstlen)
    target = _region(dst, dstofs, dstlen)
    dst[target] = bytes(src[_region(src, srcofs, count)]) + bytes([fill]) * (dstlen - count)


def compare_str(target, st1: int, len1: int, text, st2: int, len2: int,
                exactcase: bool) -> Comparison:
    """Compare two regions; ``text`` is upper-cased unless ``exactcase``.

    Returns the ordering of ``target`` against ``text`` (-1, 0 or 1) and the
    number of leading characters that matched.
    """
    first = bytes(target[_region(target, st1, len1)])
    second = bytes(text[_region(text, st2, len2)])
    if not exactcase:
        second = bytes(to_upper(ch) for ch in second)
    identical = 0
    for a, b in zip(first, second):
        if a != b:
            return Comparison(sgn(a - b), identical)
        identical += 1
    return Comparison(sgn(len1 - len2), identical)


def reverse_str(src, dst: bytearray, length: int) -> None:
    """Store the first ``length`` bytes of ``src`` reversed in ``dst``."""
    if length <= 0:
        return
    region = _region(src, 1, length)
    dst[_region(dst, 1, length)] = bytes(src[region])[::-1]


def is_printable(ch: int) -> bool:
    if not 0 <= ch <= MAX_SET_RANGE:
        return False
    return ch == 0x20 or unicodedata.category(chr(ch))[0] in "LMNPS"


def is_space(ch: int) -> bool:
    return ch in _SPACE_CHARS


def is_letter(ch: int) -> bool:
    if not 0 <= ch <= MAX_SET_RANGE:
        return False
    return unicodedata.category(chr(ch)).startswith("L")


def is_lower(ch: int) -> bool:
    if not 0 <= ch <= MAX_SET_RANGE:
        return False
    return unicodedata.category(chr(ch)) == "Ll"


def is_upper(ch: int) -> bool:
    if not 0 <= ch <= MAX_SET_RANGE:
        return False
    return unicodedata.category(chr(ch)) == "Lu"


def is_numeric(ch: int) -> bool:
    if not 0 <= ch <= MAX_SET_RANGE:
        return False
    return unicodedata.category(chr(ch)).startswith("N")


def is_punctuation(ch: int) -> bool:
    """Printable characters that are neither letters, digits nor spaces."""
    if not 0 <= ch <= MAX_SET_RANGE:
        return False
    return is_printable(ch) and not is_letter(ch) and not is_numeric(ch) and not is_space(ch)


def is_word_element(element_set: int, ch: int) -> bool:
    """Whether ``ch`` belongs to word-element set 0 (spaces) or 1 (visible)."""
    if element_set == 0:
        return is_space(ch)
    if element_set == 1:
        return is_printable(ch) and not is_space(ch)
    return False


def key_to_upper(key: int) -> int:
    """Upper-case a key code if it is a character; other keys pass through."""
    if 0 <= key <= MAX_SET_RANGE:
        return to_upper(key)
    return key


def _convert(ch: int, converted: str) -> int:
    if len(converted) != 1:
        return ch
    return ord(converted) & 0xFF


def to_upper(ch: int) -> int:
    return _convert(ch, chr(ch).upper())


def to_lower(ch: int) -> int:
    return _convert(ch, chr(ch).lower())


def apply_n(buf: bytearray, fn: Callable[[int], int], n: int) -> None:
    """Replace each of the first ``n`` bytes of ``buf`` with ``fn(byte)``."""
    if n <= 0:
        return
    region = _region(buf, 1, n)
    buf[region] = bytes(fn(ch) & 0xFF for ch in buf[region])


def search_str(target, st1: int, len1: int, text, st2: int, len2: int,
               exactcase: bool, backwards: bool) -> int | None:
    """Find ``target`` within a region of ``text``.

    Returns the number of characters skipped before the match (counted from
    the end of the region when ``backwards``; the target is then expected
    reversed), or ``None`` when there is no match.  Unless ``exactcase`` the
    text is upper-cased before matching.
    """
    needle = bytes(target[_region(target, st1, len1)])
    haystack = bytes(text[_region(text, st2, len2)])
    if backwards:
        haystack = haystack[::-1]
    if not exactcase:
        haystack = bytes(to_upper(ch) for ch in haystack)
    index = haystack.find(needle)
    if index < 0:
        return None
    if backwards:
        return len2 - index - len1
    return index