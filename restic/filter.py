"""Path filters similar to glob matching, where a pattern may span directories."""

from __future__ import annotations

import os
import re
from functools import lru_cache
from typing import Iterable


class BadStringError(ValueError):
    """Raised when the string to match is empty."""

    def __init__(self, message: str = "filter.Match: string is empty") -> None:
        super().__init__(message)


class BadPatternError(ValueError):
    """Raised when a pattern is malformed."""

    def __init__(self, message: str = "syntax error in pattern") -> None:
        super().__init__(message)


def _class_char(segment: str, i: int) -> tuple[str, int]:
    n = len(segment)
    if i >= n or segment[i] in "-]":
        raise BadPatternError()
    if segment[i] == "\\":
        i += 1
        if i >= n:
            raise BadPatternError()
    char = segment[i]
    i += 1
    if i >= n:
        raise BadPatternError()
    return char, i


def _parse_class(segment: str, i: int) -> tuple[str, int]:
    negated = i < len(segment) and segment[i] == "^"
    if negated:
        i += 1

    ranges: list[tuple[str, str]] = []
    while True:
        if i < len(segment) and segment[i] == "]" and ranges:
            i += 1
            break
        lo, i = _class_char(segment, i)
        hi = lo
        if i < len(segment) and segment[i] == "-":
            hi, i = _class_char(segment, i + 1)
        ranges.append((lo, hi))

    parts = [f"{re.escape(lo)}-{re.escape(hi)}" for lo, hi in ranges if lo <= hi]
    if not parts:
        return ("(?s:.)" if negated else "(?!)"), i
    return "[" + ("^" if negated else "") + "".join(parts) + "]", i


@lru_cache(maxsize=1024)
def _compile(segment: str) -> re.Pattern[str]:
    out: list[str] = []
    i = 0
    while i < len(segment):
        char = segment[i]
        if char == "*":
            out.append("[^/]*")
            i += 1
        elif char == "?":
            out.append("[^/]")
            i += 1
        elif char == "\\":
            if i + 1 >= len(segment):
                raise BadPatternError()
            out.append(re.escape(segment[i + 1]))
            i += 2
        elif char == "[":
            fragment, i = _parse_class(segment, i + 1)
            out.append(fragment)
        else:
            out.append(re.escape(char))
            i += 1
    return re.compile("".join(out), re.DOTALL)


def _match_segment(pattern: str, name: str) -> bool:
    return _compile(pattern).fullmatch(name) is not None


def _match(patterns: list[str], strs: list[str]) -> bool:
    if "**" in patterns:
        pos = patterns.index("**")
        for count in range(len(strs) - len(patterns) + 2):
            expanded = patterns[:pos] + ["*"] * count + patterns[pos + 1 :]
            if _match(expanded, strs):
                return True
        return False

    if not patterns and not strs:
        return True

    if len(patterns) <= len(strs):
        for offset in range(len(strs) - len(patterns), -1, -1):
            if all(
                _match_segment(patterns[i], strs[offset + i])
                for i in reversed(range(len(patterns)))
            ):
                return True
    return False


def match(pattern: str, string: str) -> bool:
    """Return True if string matches pattern.

    The empty pattern matches everything; an empty string raises BadStringError.
    A malformed pattern raises BadPatternError.
    """
    if pattern == "":
        return True
    if string == "":
        raise BadStringError()

    if os.sep != "/":
        pattern = pattern.replace(os.sep, "/")
        string = string.replace(os.sep, "/")

    return _match(pattern.split("/"), string.split("/"))


def match_list(patterns: Iterable[str], string: str) -> bool:
    """Return True if string matches one of the patterns."""
    return any(match(pattern, string) for pattern in patterns)