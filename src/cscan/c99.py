from __future__ import annotations

"""
C99 token policy in one place:

- **Keywords**: exact, case-sensitive spellings mapped to their kinds
- **Operators**: every operator/punctuation spelling, matched longest first
- **Character classes**: the ASCII predicates the scanner dispatches on

This module is meant to be *human scannable*.
"""

from .tokens import TokenKind


# ---------------------------------------------------------------------------
# Keywords
# ---------------------------------------------------------------------------

KEYWORDS: dict[str, TokenKind] = {
    "auto": TokenKind.AUTO,
    "break": TokenKind.BREAK,
    "case": TokenKind.CASE,
    "char": TokenKind.CHAR,
    "const": TokenKind.CONST,
    "continue": TokenKind.CONTINUE,
    "default": TokenKind.DEFAULT,
    "do": TokenKind.DO,
    "double": TokenKind.DOUBLE,
    "else": TokenKind.ELSE,
    "enum": TokenKind.ENUM,
    "extern": TokenKind.EXTERN,
    "float": TokenKind.FLOAT,
    "for": TokenKind.FOR,
    "goto": TokenKind.GOTO,
    "if": TokenKind.IF,
    "inline": TokenKind.INLINE,
    "int": TokenKind.INT,
    "long": TokenKind.LONG,
    "register": TokenKind.REGISTER,
    "restrict": TokenKind.RESTRICT,
    "return": TokenKind.RETURN,
    "short": TokenKind.SHORT,
    "signed": TokenKind.SIGNED,
    "sizeof": TokenKind.SIZEOF,
    "static": TokenKind.STATIC,
    "struct": TokenKind.STRUCT,
    "switch": TokenKind.SWITCH,
    "typedef": TokenKind.TYPEDEF,
    "union": TokenKind.UNION,
    "unsigned": TokenKind.UNSIGNED,
    "void": TokenKind.VOID,
    "volatile": TokenKind.VOLATILE,
    "while": TokenKind.WHILE,
}

# ---------------------------------------------------------------------------
# Operators / punctuation
# ---------------------------------------------------------------------------

# Every punctuation member of TokenKind carries its spelling as value.
OPERATORS: dict[str, TokenKind] = {
    k.value: k
    for k in TokenKind
    if not k.value.isalpha()
}

# Candidate lengths, longest first (maximal munch).
OPERATOR_LENGTHS: tuple[int, ...] = tuple(sorted({len(s) for s in OPERATORS}, reverse=True))

# ---------------------------------------------------------------------------
# Character classes (ASCII only)
# ---------------------------------------------------------------------------

NUL = "\x00"
WHITESPACE = frozenset(" \t\n\r\f")


def is_letter(ch: str, *, dollar: bool = True) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_" or (dollar and ch == "$")


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_hex_digit(ch: str) -> bool:
    return "0" <= ch <= "9" or "a" <= ch <= "f" or "A" <= ch <= "F"


def is_octal_digit(ch: str) -> bool:
    return "0" <= ch <= "7"


def is_binary_digit(ch: str) -> bool:
    return ch == "0" or ch == "1"
