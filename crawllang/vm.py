"""Stack-based virtual machine that executes compiled bytecode."""

import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from crawllang.compiler import Instruction
from crawllang.constants import Opcode

_ACTION_LABELS: dict[int, str] = {
    Opcode.NAVIGATE: "Navigating to",
    Opcode.CLICK: "Clicking element",
}


class VMError(RuntimeError):
    """Raised when bytecode cannot be executed."""


class VM:
    """Executes a list of instructions.

    Output goes to ``out`` if given, otherwise to standard output.
    """

    def __init__(self, bytecode: Iterable[Instruction], out: TextIO | None = None) -> None:
        self.bytecode: list[Instruction] = list(bytecode)
        self.stack: list[str] = []
        self.variables: dict[str, str] = {}
        self.pc = 0
        self._out = out
        self._handlers: dict[int, Callable[[str], None]] = {
            Opcode.PUSH_CONST: self._push_const,
            Opcode.STORE_VAR: self._store_var,
            Opcode.LOAD_VAR: self._load_var,
        }

    def run(self) -> None:
        """Execute from the current position until HALT or the end."""
        while self.pc < len(self.bytecode):
            instr = self.bytecode[self.pc]
            self.pc += 1
            opcode = instr.opcode
            if opcode == Opcode.HALT:
                return
            label = _ACTION_LABELS.get(opcode)
            if label is not None:
                self._perform(label)
                continue
            handler = self._handlers.get(opcode)
            if handler is None:
                raise VMError(f"unknown opcode: {int(opcode)}")
            handler(instr.operand)

    def _pop(self) -> str:
        if not self.stack:
            raise VMError("stack underflow")
        return self.stack.pop()

    def _perform(self, label: str) -> None:
        target = self._pop()
        stream = self._out if self._out is not None else sys.stdout
        stream.write(f"{label}: {target}\n")

    def _push_const(self, operand: str) -> None:
        self.stack.append(operand)

    def _store_var(self, operand: str) -> None:
        self.variables[operand] = self._pop()

    def _load_var(self, operand: str) -> None:
        try:
            value = self.variables[operand]
        except KeyError:
            raise VMError(f"undefined variable: {operand}") from None
        self.stack.append(value)