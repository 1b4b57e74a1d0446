"""Token cursor used by the compiler."""

from crawllang.lexer import Lexer, Token


class Parser:
    """Holds the current token of a lexer and advances on request."""

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.cur_tok: Token = lexer.next_token()

    def next_token(self) -> None:
        """Advance to the next token."""
        self.cur_tok = self.lexer.next_token()