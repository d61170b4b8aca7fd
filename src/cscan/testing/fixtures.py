from __future__ import annotations

from ..tokens import TokenKind as K


# A lexeme for every token kind but EOF. Joined by spaces they scan back one to one;
# only "@" is malformed.
FIXTURES: list[tuple[K, str]] = [
    (K.ILLEGAL, "@"),
    (K.IDENT, "intIs_32bit"),
    (K.IDENT, "_Give_me_100$"),
    (K.IDENT, "$"),
    (K.INTEGER, "1234567890"),
    (K.INTEGER, "01234567"),
    (K.INTEGER, "0x123456790abcdefABCDEF"),
    (K.INTEGER, "0b1010"),
    (K.FLOATING, "0."),
    (K.FLOATING, ".1"),
    (K.FLOATING, "3.1"),
    (K.FLOATING, "9.e10"),
    (K.FLOATING, "9.e-10"),
    (K.FLOATING, "9.e+10"),
    (K.FLOATING, "9.1e10"),
    (K.FLOATING, "9.1e-10"),
    (K.FLOATING, "9.1e+10"),
    (K.FLOATING, ".1e10"),
    (K.FLOATING, ".1e-10"),
    (K.FLOATING, ".1e+10"),
    (K.STRING, '"crepl"'),
    (K.STRING, '"He said, \\"I can eat 4 mango\\"."'),
    (K.CHARACTER, "'a'"),
    (K.CHARACTER, "'\\''"),
    (K.ASSIGN, "="),
    (K.ADD_ASSIGN, "+="),
    (K.SUB_ASSIGN, "-="),
    (K.MUL_ASSIGN, "*="),
    (K.DIV_ASSIGN, "/="),
    (K.REM_ASSIGN, "%="),
    (K.AND_ASSIGN, "&="),
    (K.OR_ASSIGN, "|="),
    (K.XOR_ASSIGN, "^="),
    (K.SHL_ASSIGN, "<<="),
    (K.SHR_ASSIGN, ">>="),
    (K.INC, "++"),
    (K.DEC, "--"),
    (K.PLUS, "+"),
    (K.MINUS, "-"),
    (K.ASTERISK, "*"),
    (K.SLASH, "/"),
    (K.REM, "%"),
    (K.TILDE, "~"),
    (K.AND, "&"),
    (K.OR, "|"),
    (K.XOR, "^"),
    (K.SHL, "<<"),
    (K.SHR, ">>"),
    (K.NOT, "!"),
    (K.LAND, "&&"),
    (K.LOR, "||"),
    (K.EQL, "=="),
    (K.NEQ, "!="),
    (K.LSS, "<"),
    (K.GTR, ">"),
    (K.LEQ, "<="),
    (K.GEQ, ">="),
    (K.TERNARY, "?"),
    (K.DOT, "."),
    (K.ARROW, "->"),
    (K.ELLIPSIS, "..."),
    (K.COMMA, ","),
    (K.SEMICOLON, ";"),
    (K.COLON, ":"),
    (K.LPAREN, "("),
    (K.LBRACE, "{"),
    (K.LBRACK, "["),
    (K.RPAREN, ")"),
    (K.RBRACE, "}"),
    (K.RBRACK, "]"),
    (K.AUTO, "auto"),
    (K.BREAK, "break"),
    (K.CASE, "case"),
    (K.CHAR, "char"),
    (K.CONST, "const"),
    (K.CONTINUE, "continue"),
    (K.DEFAULT, "default"),
    (K.DO, "do"),
    (K.DOUBLE, "double"),
    (K.ELSE, "else"),
    (K.ENUM, "enum"),
    (K.EXTERN, "extern"),
    (K.FLOAT, "float"),
    (K.FOR, "for"),
    (K.GOTO, "goto"),
    (K.IF, "if"),
    (K.INLINE, "inline"),
    (K.INT, "int"),
    (K.LONG, "long"),
    (K.REGISTER, "register"),
    (K.RESTRICT, "restrict"),
    (K.RETURN, "return"),
    (K.SHORT, "short"),
    (K.SIGNED, "signed"),
    (K.SIZEOF, "sizeof"),
    (K.STATIC, "static"),
    (K.STRUCT, "struct"),
    (K.SWITCH, "switch"),
    (K.TYPEDEF, "typedef"),
    (K.UNION, "union"),
    (K.UNSIGNED, "unsigned"),
    (K.VOID, "void"),
    (K.VOLATILE, "volatile"),
    (K.WHILE, "while"),
]
