"""Scanner configuration.

A ``ScannerConfig`` is built once and handed to each ``Scanner`` explicitly.
It is frozen, so one instance can be shared by scanners running on
different threads.

Usage:
    from cscan import Scanner, ScannerConfig

    cfg = ScannerConfig(block_comments=False)
    scanner = Scanner("main.c", source, errors, config=cfg)

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from .c99 import KEYWORDS
from .tokens import TokenKind


@dataclass(frozen=True, slots=True)
class ScannerConfig:
    """Immutable scanner configuration.

    Attributes:
        line_comments: Skip ``// ...`` up to the end of the line
        block_comments: Skip ``/* ... */``; unterminated ones are reported
        dollar_in_identifiers: Accept ``$`` as an identifier character
        keywords: Keyword table override (None selects the C99 table)

    """

    line_comments: bool = True
    block_comments: bool = True
    dollar_in_identifiers: bool = True
    # Mappings are unhashable; equality still compares them.
    keywords: Mapping[str, TokenKind] | None = field(default=None, hash=False)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> ScannerConfig:
        """Create a ScannerConfig from a plain mapping.

        Unknown keys are ignored so callers can pass a larger settings dict.
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in known})

    def keyword_table(self) -> Mapping[str, TokenKind]:
        return KEYWORDS if self.keywords is None else self.keywords
