from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from .spans import Position


class TokenKind(str, Enum):
    # Sentinels
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers and literals
    IDENT = "IDENT"
    INTEGER = "INTEGER"
    FLOATING = "FLOATING"
    STRING = "STRING"
    CHARACTER = "CHARACTER"

    # Assignment
    ASSIGN = "="
    ADD_ASSIGN = "+="
    SUB_ASSIGN = "-="
    MUL_ASSIGN = "*="
    DIV_ASSIGN = "/="
    REM_ASSIGN = "%="
    AND_ASSIGN = "&="
    OR_ASSIGN = "|="
    XOR_ASSIGN = "^="
    SHL_ASSIGN = "<<="
    SHR_ASSIGN = ">>="

    # Increment / decrement
    INC = "++"
    DEC = "--"

    # Arithmetic / bitwise
    PLUS = "+"
    MINUS = "-"
    ASTERISK = "*"
    SLASH = "/"
    REM = "%"
    TILDE = "~"
    AND = "&"
    OR = "|"
    XOR = "^"
    SHL = "<<"
    SHR = ">>"

    # Logical
    NOT = "!"
    LAND = "&&"
    LOR = "||"

    # Comparison / equality
    EQL = "=="
    NEQ = "!="
    LSS = "<"
    GTR = ">"
    LEQ = "<="
    GEQ = ">="

    # Punctuation
    TERNARY = "?"
    DOT = "."
    ARROW = "->"
    ELLIPSIS = "..."
    COMMA = ","
    SEMICOLON = ";"
    COLON = ":"
    LPAREN = "("
    LBRACE = "{"
    LBRACK = "["
    RPAREN = ")"
    RBRACE = "}"
    RBRACK = "]"

    # Keywords (C99)
    AUTO = "auto"
    BREAK = "break"
    CASE = "case"
    CHAR = "char"
    CONST = "const"
    CONTINUE = "continue"
    DEFAULT = "default"
    DO = "do"
    DOUBLE = "double"
    ELSE = "else"
    ENUM = "enum"
    EXTERN = "extern"
    FLOAT = "float"
    FOR = "for"
    GOTO = "goto"
    IF = "if"
    INLINE = "inline"
    INT = "int"
    LONG = "long"
    REGISTER = "register"
    RESTRICT = "restrict"
    RETURN = "return"
    SHORT = "short"
    SIGNED = "signed"
    SIZEOF = "sizeof"
    STATIC = "static"
    STRUCT = "struct"
    SWITCH = "switch"
    TYPEDEF = "typedef"
    UNION = "union"
    UNSIGNED = "unsigned"
    VOID = "void"
    VOLATILE = "volatile"
    WHILE = "while"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    position: Position
    text: str

    def __iter__(self) -> Iterator[object]:
        # Unpacks as the (kind, position, text) triple.
        return iter((self.kind, self.position, self.text))

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.position.format()})"
