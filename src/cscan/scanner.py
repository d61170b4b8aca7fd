from __future__ import annotations

import logging
from collections.abc import Callable

from .c99 import (
    NUL,
    OPERATOR_LENGTHS,
    OPERATORS,
    WHITESPACE,
    is_binary_digit,
    is_digit,
    is_hex_digit,
    is_letter,
    is_octal_digit,
)
from .config import ScannerConfig
from .errors import ErrorSink, log_error
from .spans import Position
from .tokens import Token, TokenKind


logger = logging.getLogger(__name__)


class Scanner:
    """Hand-written scanner for C source held in memory.

    Every ``scan()`` call skips whitespace and comments and then returns
    exactly one token. Malformed input is reported to the error sink and
    scanning continues with a best-effort token. Once the buffer is exhausted
    each call returns an EOF token.

    The source is treated as single-byte ASCII: offsets and columns count
    characters of ``src`` one to one.
    """

    def __init__(
        self,
        file: str,
        src: str,
        err: ErrorSink | None = None,
        *,
        config: ScannerConfig | None = None,
    ) -> None:
        self.file = file
        self.src = src
        self.config = config if config is not None else ScannerConfig()
        self._err = err if err is not None else log_error
        self._keywords = self.config.keyword_table()
        self._dollar = self.config.dollar_in_identifiers

        # Cursor state. ``ch`` is NUL both at end of buffer and on an
        # embedded NUL byte; use ``at_eof()`` to tell them apart.
        self.ch = " "
        self.offset = 0
        self.rd_offset = 0
        self.line_offset = 0
        self.line_no = 1

        self.error_count = 0
        self.token_count = 0
        self._finished = False

        self._next()
        logger.debug("scanning %s (%d bytes)", file, len(src))

    def __iter__(self) -> TokenStream:
        return TokenStream(self)

    # -- cursor -------------------------------------------------------------

    def _next(self) -> None:
        if self.ch == "\n":
            self.line_offset = self.rd_offset
            self.line_no += 1
        elif self.ch == NUL and self.offset < len(self.src):
            self.error(self.position(), "illegal character NUL")

        if self.rd_offset < len(self.src):
            self.offset = self.rd_offset
            self.ch = self.src[self.rd_offset]
            self.rd_offset += 1
        else:
            self.offset = len(self.src)
            self.ch = NUL

    def _skip_while(self, pred: Callable[[str], bool]) -> None:
        while pred(self.ch):
            self._next()

    def peek(self) -> str:
        if self.rd_offset < len(self.src):
            return self.src[self.rd_offset]
        return NUL

    def at_eof(self) -> bool:
        return self.offset >= len(self.src)

    def position(self) -> Position:
        return Position(
            file=self.file,
            offset=self.offset,
            line=self.line_no,
            column=self.offset - self.line_offset + 1,
        )

    def error(self, pos: Position, msg: str) -> None:
        self.error_count += 1
        self._err(pos, msg)

    # -- trivia -------------------------------------------------------------

    def _skip_trivia(self) -> None:
        while True:
            while self.ch in WHITESPACE:
                self._next()
            if self.ch != "/":
                return
            nxt = self.peek()
            if nxt == "/" and self.config.line_comments:
                while self.ch != "\n" and not self.at_eof():
                    self._next()
            elif nxt == "*" and self.config.block_comments:
                self._skip_block_comment()
            else:
                return

    def _skip_block_comment(self) -> None:
        self._next()
        self._next()
        while not self.at_eof():
            if self.ch == "*" and self.peek() == "/":
                self._next()
                self._next()
                return
            self._next()
        self.error(self.position(), "comment not terminated")

    # -- tokens -------------------------------------------------------------

    def scan(self) -> Token:
        """Return the next token; returns EOF forever once input is exhausted."""
        self._skip_trivia()
        pos = self.position()

        if self.at_eof():
            if not self._finished:
                self._finished = True
                logger.debug(
                    "%s: %d tokens, %d errors", self.file, self.token_count, self.error_count
                )
            return Token(TokenKind.EOF, pos, "")

        start = self.offset
        ch = self.ch
        if is_letter(ch, dollar=self._dollar):
            kind = self._scan_identifier(start)
        elif is_digit(ch) or (ch == "." and is_digit(self.peek())):
            kind = self._scan_number(pos)
        elif ch == '"' or ch == "'":
            kind = self._scan_quoted(ch)
        else:
            kind = self._scan_operator()

        self.token_count += 1
        return Token(kind, pos, self.src[start : self.offset])

    def _scan_identifier(self, start: int) -> TokenKind:
        while is_letter(self.ch, dollar=self._dollar) or is_digit(self.ch):
            self._next()
        return self._keywords.get(self.src[start : self.offset], TokenKind.IDENT)

    def _scan_number(self, pos: Position) -> TokenKind:
        if self.ch == "0":
            self._next()
            if self.ch in "xX":
                self._next()
                self._scan_digits(is_hex_digit, pos, "hexadecimal literal has no digits")
                return TokenKind.INTEGER
            if self.ch in "bB":
                self._next()
                self._scan_digits(is_binary_digit, pos, "binary literal has no digits")
                return TokenKind.INTEGER
            if is_octal_digit(self.ch):
                self._skip_while(is_octal_digit)
                # 0128, 017.5 and 017e3 continue as decimal
                if not (is_digit(self.ch) or self.ch in ".eE"):
                    return TokenKind.INTEGER
        return self._scan_decimal()

    def _scan_decimal(self) -> TokenKind:
        kind = TokenKind.INTEGER
        self._skip_while(is_digit)
        if self.ch == ".":
            kind = TokenKind.FLOATING
            self._next()
            self._skip_while(is_digit)
        if self.ch in "eE":
            kind = TokenKind.FLOATING
            exp = self.position()
            self._next()
            if self.ch in "+-":
                self._next()
            self._scan_digits(is_digit, exp, "exponent has no digits")
        return kind

    def _scan_digits(self, pred: Callable[[str], bool], pos: Position, msg: str) -> None:
        # Reported at the prefix or exponent marker, ahead of whatever
        # token the offending character turns into.
        if not pred(self.ch):
            self.error(pos, msg)
        self._skip_while(pred)

    def _scan_quoted(self, quote: str) -> TokenKind:
        if quote == '"':
            kind, what = TokenKind.STRING, "string"
        else:
            kind, what = TokenKind.CHARACTER, "character"

        self._next()
        while self.ch != quote:
            if self.ch == "\n" or self.at_eof():
                self.error(self.position(), f"{what} literal not terminated")
                return kind
            if self.ch == "\\":
                # The escaped character is taken verbatim, newline included.
                self._next()
            self._next()
        self._next()
        return kind

    def _scan_operator(self) -> TokenKind:
        for n in OPERATOR_LENGTHS:
            cand = self.src[self.offset : self.offset + n]
            kind = OPERATORS.get(cand)
            if kind is not None:
                for _ in cand:
                    self._next()
                return kind

        # An embedded NUL is reported by _next() as it is consumed.
        if self.ch != NUL:
            self.error(self.position(), f"illegal character {self.ch!r}")
        self._next()
        return TokenKind.ILLEGAL


class TokenStream:
    """Forward-only iterator over a scanner's tokens, ending before EOF.

    Not restartable: the underlying scanner is consumed as the stream
    advances.
    """

    __slots__ = ("_scanner", "_done")

    def __init__(self, scanner: Scanner) -> None:
        self._scanner = scanner
        self._done = False

    def __iter__(self) -> TokenStream:
        return self

    def __next__(self) -> Token:
        if self._done:
            raise StopIteration
        tok = self._scanner.scan()
        if tok.kind is TokenKind.EOF:
            self._done = True
            raise StopIteration
        return tok
