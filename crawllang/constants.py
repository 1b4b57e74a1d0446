"""Opcodes, token kinds and the fixed spellings the lexer recognises."""

from enum import IntEnum


class Opcode(IntEnum):
    """Bytecode instruction codes understood by the virtual machine."""

    NAVIGATE = 0
    CLICK = 1
    STORE_VAR = 2
    LOAD_VAR = 3
    PUSH_CONST = 4
    HALT = 5


class TokenType(IntEnum):
    """Kinds of token produced by the lexer."""

    EOF = 0
    ILLEGAL = 1

    # Functions
    NAVIGATE = 2
    CLICK = 3

    NUMBER = 4
    STRING = 5

    # Delimiters
    LPAREN = 6
    RPAREN = 7
    LBRACE = 8
    RBRACE = 9
    SEMICOLON = 10

    # Operators
    ASSIGN = 11
    PLUS = 12

    # Keywords
    VAR = 13
    FUNCTION = 14


NAVIGATE_FUNC = "NAVIGATE"
CLICK_FUNC = "CLICK"

LPAREN = "("
RPAREN = ")"
LBRACE = "{"
RBRACE = "}"
SEMICOLON = ";"
ASSIGNMENT = "="
STRING_QUOTE = '"'

KEYWORDS: dict[str, TokenType] = {
    NAVIGATE_FUNC: TokenType.NAVIGATE,
    CLICK_FUNC: TokenType.CLICK,
}

# Characters that form a token on their own. Braces are deliberately absent:
# the lexer reports them as illegal.
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    LPAREN: TokenType.LPAREN,
    RPAREN: TokenType.RPAREN,
    SEMICOLON: TokenType.SEMICOLON,
    ASSIGNMENT: TokenType.ASSIGN,
}