"""Saving and loading compiled bytecode files."""

import json
import os
from collections.abc import Iterable

from crawllang.compiler import Instruction
from crawllang.constants import Opcode

_FORMAT_KEY = "crawllang_bytecode"
_FORMAT_VERSION = 1


class BytecodeError(ValueError):
    """A bytecode file is not in the expected format."""


def save_bytecode(path: str | os.PathLike, bytecode: Iterable[Instruction]) -> None:
    """Write bytecode to path, replacing any existing file."""
    document = {
        _FORMAT_KEY: _FORMAT_VERSION,
        "instructions": [[int(instr.opcode), instr.operand] for instr in bytecode],
    }
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(document, handle)


def _decode_opcode(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise BytecodeError(f"invalid opcode: {value!r}")
    try:
        return Opcode(value)
    except ValueError:
        # Unknown opcodes are kept; the VM reports them when reached.
        return value


def _decode_instruction(entry: object) -> Instruction:
    if not isinstance(entry, list) or len(entry) != 2:
        raise BytecodeError(f"invalid instruction: {entry!r}")
    opcode, operand = entry
    if not isinstance(operand, str):
        raise BytecodeError(f"invalid operand: {operand!r}")
    return Instruction(_decode_opcode(opcode), operand)


def load_bytecode(path: str | os.PathLike) -> list[Instruction]:
    """Read bytecode from path.

    Raises OSError if the file cannot be read and BytecodeError if its
    contents are not a bytecode document.
    """
    with open(path, encoding="utf-8") as handle:
        try:
            document = json.load(handle)
        except ValueError as exc:
            raise BytecodeError(f"malformed bytecode file: {exc}") from exc

    if not isinstance(document, dict) or document.get(_FORMAT_KEY) != _FORMAT_VERSION:
        raise BytecodeError("not a bytecode file")
    instructions = document.get("instructions")
    if not isinstance(instructions, list):
        raise BytecodeError("missing instruction list")
    return [_decode_instruction(entry) for entry in instructions]