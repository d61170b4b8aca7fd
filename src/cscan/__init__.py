from __future__ import annotations

from .api import ScanResult, scan_source, tokenize
from .config import ScannerConfig
from .errors import ErrorList, ErrorSink, ScanError
from .scanner import Scanner, TokenStream
from .spans import Position
from .tokens import Token, TokenKind

__all__ = [
    "ErrorList",
    "ErrorSink",
    "Position",
    "ScanError",
    "ScanResult",
    "Scanner",
    "ScannerConfig",
    "Token",
    "TokenKind",
    "TokenStream",
    "scan_source",
    "tokenize",
]
