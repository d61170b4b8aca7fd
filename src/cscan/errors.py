from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from .spans import Position


logger = logging.getLogger(__name__)

# Receives every diagnostic, in increasing position order.
ErrorSink = Callable[[Position, str], None]


@dataclass(slots=True)
class ScanError(Exception):
    position: Position
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        base = f"{self.position.format()}: {self.message}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base


@dataclass(slots=True)
class ErrorList:
    """Error sink that records every reported diagnostic."""

    errors: list[ScanError] = field(default_factory=list)

    def __call__(self, position: Position, message: str) -> None:
        self.errors.append(ScanError(position=position, message=message))

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[ScanError]:
        return iter(self.errors)

    def raise_if_errors(self) -> None:
        if not self.errors:
            return
        first = self.errors[0]
        rest = len(self.errors) - 1
        if rest:
            raise ScanError(
                position=first.position,
                message=first.message,
                hint=f"{rest} more error{'s' if rest > 1 else ''} reported after this one",
            )
        raise first


def log_error(position: Position, message: str) -> None:
    """Default sink: report through the ``cscan.errors`` logger."""
    logger.warning("%s: %s", position.format(), message)
