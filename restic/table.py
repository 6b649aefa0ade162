"""A simple text table with a header, a rule and formatted rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class Table:
    """Rows are formatted with row_format using %-style formatting."""

    header: str = ""
    rows: list[tuple] = field(default_factory=list)
    row_format: str = ""

    def write(self, stream: TextIO) -> None:
        """Write header, a 70 character rule and all rows to stream."""
        stream.write(self.header + "\n")
        stream.write("-" * 70 + "\n")
        for row in self.rows:
            stream.write(self.row_format % tuple(row) + "\n")