from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A concrete source position.

    Offsets are 0-based byte indices; line/column are 1-based for
    user-facing messages.
    """

    file: str
    offset: int
    line: int
    column: int

    def format(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"
