"""Compiles crawllang source into a flat list of bytecode instructions."""

from dataclasses import dataclass

from crawllang.constants import Opcode, TokenType
from crawllang.lexer import Lexer, Token
from crawllang.parser import Parser


@dataclass(frozen=True)
class Instruction:
    """One bytecode instruction."""

    opcode: Opcode
    operand: str = ""


class Compiler:
    """Single-pass compiler.

    Instructions accumulate across calls to compile(); each call appends
    its own HALT and returns everything emitted so far.
    """

    def __init__(self) -> None:
        self._bytecode: list[Instruction] = []

    def compile(self, source: str) -> list[Instruction]:
        """Compile source and return the bytecode, ending with HALT."""
        parser = Parser(Lexer(source))
        while parser.cur_tok.type is not TokenType.EOF:
            kind = parser.cur_tok.type
            if kind is TokenType.VAR:
                self._compile_var_declaration(parser)
            elif kind is TokenType.NAVIGATE:
                self._compile_call(parser, Opcode.NAVIGATE)
            elif kind is TokenType.CLICK:
                self._compile_call(parser, Opcode.CLICK)
            else:
                parser.next_token()

        self._bytecode.append(Instruction(Opcode.HALT))
        return list(self._bytecode)

    def _emit_value(self, token: Token) -> None:
        if token.type in (TokenType.STRING, TokenType.NUMBER):
            self._bytecode.append(Instruction(Opcode.PUSH_CONST, token.literal))
        elif token.type is TokenType.VAR:
            self._bytecode.append(Instruction(Opcode.LOAD_VAR, token.literal))

    def _compile_var_declaration(self, parser: Parser) -> None:
        parser.next_token()  # keyword
        name = parser.cur_tok.literal
        parser.next_token()  # name
        parser.next_token()  # '='
        self._emit_value(parser.cur_tok)
        self._bytecode.append(Instruction(Opcode.STORE_VAR, name))
        parser.next_token()  # value
        parser.next_token()  # ';'

    def _compile_call(self, parser: Parser, opcode: Opcode) -> None:
        parser.next_token()  # function name
        parser.next_token()  # '('
        self._emit_value(parser.cur_tok)
        self._bytecode.append(Instruction(opcode))
        parser.next_token()  # argument
        parser.next_token()  # ')'
        parser.next_token()  # ';'