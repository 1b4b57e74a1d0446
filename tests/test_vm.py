import io

import pytest

from crawllang.compiler import Compiler, Instruction
from crawllang.constants import Opcode
from crawllang.vm import VM, VMError


def run_source(source):
    out = io.StringIO()
    vm = VM(Compiler().compile(source), out=out)
    vm.run()
    return vm, out.getvalue()


def test_compiled_program_output():
    vm, output = run_source('var url = "http://example.com"; NAVIGATE(url); CLICK("#submit");')
    assert output == "Navigating to: http://example.com\nClicking element: #submit\n"
    assert vm.variables == {"url": "http://example.com"}
    assert vm.stack == []


def test_variable_copied_from_variable():
    vm, output = run_source('var a = "page"; var b = a; NAVIGATE(b);')
    assert vm.variables["b"] == vm.variables["a"] == "page"
    assert output == "Navigating to: page\n"


def test_prints_to_stdout_by_default(capsys):
    VM([Instruction(Opcode.PUSH_CONST, "7"), Instruction(Opcode.CLICK), Instruction(Opcode.HALT)]).run()
    assert capsys.readouterr().out == "Clicking element: 7\n"


def test_halt_stops_execution():
    out = io.StringIO()
    vm = VM(
        [
            Instruction(Opcode.HALT),
            Instruction(Opcode.PUSH_CONST, "x"),
            Instruction(Opcode.NAVIGATE),
        ],
        out=out,
    )
    vm.run()
    assert out.getvalue() == ""
    assert vm.pc == 1


def test_runs_to_end_without_halt():
    vm = VM([Instruction(Opcode.PUSH_CONST, "a"), Instruction(Opcode.PUSH_CONST, "b")])
    vm.run()
    assert vm.stack == ["a", "b"]
    assert vm.pc == 2


@pytest.mark.parametrize("opcode", [Opcode.STORE_VAR, Opcode.NAVIGATE, Opcode.CLICK])
def test_empty_stack_underflows(opcode):
    with pytest.raises(VMError, match="stack underflow"):
        VM([Instruction(opcode, "x")]).run()


def test_undefined_variable():
    with pytest.raises(VMError, match="undefined variable: ghost"):
        VM([Instruction(Opcode.LOAD_VAR, "ghost")]).run()


def test_undefined_variable_from_source():
    with pytest.raises(VMError, match="undefined variable: target"):
        run_source("NAVIGATE(target);")


def test_unknown_opcode():
    with pytest.raises(VMError, match="unknown opcode: 42"):
        VM([Instruction(42, "")]).run()


def test_empty_program_does_nothing():
    vm = VM([])
    vm.run()
    assert (vm.stack, vm.variables, vm.pc) == ([], {}, 0)