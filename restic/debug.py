"""Tag-based debug logging, switched on through the environment."""

from __future__ import annotations

import os
import sys
import threading
import time
from functools import lru_cache
from pathlib import Path
from typing import Mapping, TextIO

from .filter import BadPatternError, match

_DEFAULT_TAG_WIDTH = 10


def parse_tags(spec: str) -> dict[str, bool]:
    """Parse a comma separated tag list such as ``"foo,-bar,+main.*"``.

    A leading ``-`` disables a tag, a leading ``+`` (or none) enables it.
    Raises BadPatternError for a malformed glob pattern.
    """
    tags: dict[str, bool] = {}
    for item in spec.split(","):
        tag = item.strip()
        if not tag:
            continue
        value = True
        if tag[0] in "+-":
            value = tag[0] == "+"
            tag = tag[1:]
        if tag:
            try:
                match(tag, "x")
            except BadPatternError as exc:
                raise BadPatternError(f"invalid pattern {tag!r}: {exc}") from exc
        tags[tag] = value
    return tags


def _position(depth: int) -> str:
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return ""
    name = Path(frame.f_code.co_filename).name
    return f"{threading.get_native_id():3d} {name}:{frame.f_lineno:3d}"


class DebugLog:
    """Writes tagged debug messages to stderr and, optionally, a log file."""

    def __init__(
        self,
        tags: Mapping[str, bool] | None = None,
        logfile: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.tags: dict[str, bool] = {"break": True, **(tags or {})}
        self.logfile = logfile
        self.stderr = stderr
        self.tag_width = _DEFAULT_TAG_WIDTH
        self._lock = threading.Lock()

    @classmethod
    def from_environment(cls, environ: Mapping[str, str]) -> DebugLog:
        """Build a log from DEBUG_TAGS and DEBUG_LOG in environ."""
        tags = parse_tags(environ.get("DEBUG_TAGS", ""))
        logfile = None
        path = environ.get("DEBUG_LOG", "")
        if path:
            try:
                logfile = open(path, "a", encoding="utf-8")
            except OSError as exc:
                raise OSError(f"unable to open debug log file: {exc}") from exc
        return cls(tags=tags, logfile=logfile)

    def close(self) -> None:
        if self.logfile is not None:
            self.logfile.close()
            self.logfile = None

    def __enter__(self) -> DebugLog:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def enabled(self, tag: str) -> bool:
        """Return True if messages for tag are printed to stderr."""
        if tag in self.tags:
            return self.tags[tag]
        if tag:
            for pattern, value in self.tags.items():
                if pattern and match(pattern, tag):
                    return value
        return self.tags.get("all", False)

    def log(self, tag: str, message: str, *args: object) -> None:
        """Log message, formatted with args, under tag."""
        self._emit(tag, message, args, depth=2)

    def _emit(self, tag: str, message: str, args: tuple, depth: int) -> None:
        with self._lock:
            text = message % args if args else message
            if not text.endswith("\n"):
                text += "\n"
            self.tag_width = max(self.tag_width, len(tag))
            line = f"[{tag:>{self.tag_width}}] {_position(depth)} {text}"

            if self.logfile is not None:
                self.logfile.write(time.strftime("%Y/%m/%d %H:%M:%S ") + line)
                self.logfile.flush()

            if self.enabled(tag):
                (self.stderr or sys.stderr).write(line)


@lru_cache(maxsize=None)
def _default_log() -> DebugLog | None:
    if "DEBUG_TAGS" not in os.environ and "DEBUG_LOG" not in os.environ:
        return None
    sys.stderr.write("debug enabled\n")
    return DebugLog.from_environment(os.environ)


def log(tag: str, message: str, *args: object) -> None:
    """Log through the process-wide debug log; a no-op unless enabled by environment."""
    debug_log = _default_log()
    if debug_log is not None:
        debug_log._emit(tag, message, args, depth=2)