from __future__ import annotations

from dataclasses import dataclass

from .config import ScannerConfig
from .errors import ErrorList, ScanError
from .scanner import Scanner
from .tokens import Token


@dataclass(frozen=True, slots=True)
class ScanResult:
    tokens: tuple[Token, ...]  # ends with the EOF token
    errors: tuple[ScanError, ...]

    @property
    def ok(self) -> bool:
        return not self.errors


def _scan_all(src: str, file: str, config: ScannerConfig | None) -> tuple[list[Token], ErrorList]:
    errors = ErrorList()
    scanner = Scanner(file, src, errors, config=config)
    toks = list(scanner)
    toks.append(scanner.scan())
    return toks, errors


def scan_source(
    src: str, *, file: str = "<memory>", config: ScannerConfig | None = None
) -> ScanResult:
    """Scan a whole buffer, collecting diagnostics instead of raising."""
    toks, errors = _scan_all(src, file, config)
    return ScanResult(tokens=tuple(toks), errors=tuple(errors))


def tokenize(
    src: str, *, file: str = "<memory>", config: ScannerConfig | None = None
) -> list[Token]:
    """Scan a whole buffer; raise ScanError if anything was reported."""
    toks, errors = _scan_all(src, file, config)
    errors.raise_if_errors()
    return toks
