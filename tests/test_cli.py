import pytest

from crawllang.bytecode import load_bytecode, save_bytecode
from crawllang.compiler import Compiler, Instruction
from crawllang.constants import Opcode
from crawllang.cli import main


def test_compile_then_run(tmp_path, capsys):
    src = tmp_path / "script.crawl"
    src.write_text('var url = "http://example.com";\nNAVIGATE(url);\nCLICK("#go");\n', encoding="utf-8")
    out = tmp_path / "script.bc"

    assert main(["compile", str(src), "-o", str(out)]) == 0
    assert capsys.readouterr().out == f"Successfully compiled to: {out}\n"
    assert load_bytecode(out) == Compiler().compile(src.read_text(encoding="utf-8"))

    assert main(["run", str(out)]) == 0
    assert capsys.readouterr().out == "Navigating to: http://example.com\nClicking element: #go\n"


def test_compile_long_output_option(tmp_path, capsys):
    src = tmp_path / "s.crawl"
    src.write_text("CLICK(5);", encoding="utf-8")
    out = tmp_path / "s.bc"
    assert main(["compile", str(src), "--output", str(out)]) == 0
    assert load_bytecode(out)[-1] == Instruction(Opcode.HALT)


def test_compile_missing_source(tmp_path, capsys):
    code = main(["compile", str(tmp_path / "absent.crawl"), "-o", str(tmp_path / "x.bc")])
    assert code == 1
    assert capsys.readouterr().err.startswith("Error: failed to read file:")


def test_compile_unwritable_output(tmp_path, capsys):
    src = tmp_path / "s.crawl"
    src.write_text("CLICK(1);", encoding="utf-8")
    code = main(["compile", str(src), "-o", str(tmp_path / "missing" / "x.bc")])
    assert code == 1
    assert capsys.readouterr().err.startswith("Error: failed to save bytecode:")


def test_compile_requires_output(tmp_path):
    src = tmp_path / "s.crawl"
    src.write_text("CLICK(1);", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["compile", str(src)])
    assert excinfo.value.code == 2


def test_run_missing_file(tmp_path, capsys):
    assert main(["run", str(tmp_path / "absent.bc")]) == 1
    assert capsys.readouterr().err.startswith("Error: failed to load bytecode:")


def test_run_corrupt_file(tmp_path, capsys):
    path = tmp_path / "junk.bc"
    path.write_text("garbage", encoding="utf-8")
    assert main(["run", str(path)]) == 1
    assert capsys.readouterr().err.startswith("Error: failed to load bytecode:")


def test_run_reports_vm_error(tmp_path, capsys):
    path = tmp_path / "bad.bc"
    save_bytecode(path, [Instruction(Opcode.LOAD_VAR, "ghost"), Instruction(Opcode.HALT)])
    assert main(["run", str(path)]) == 1
    assert capsys.readouterr().err == "Error: undefined variable: ghost\n"


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "crawllang" in capsys.readouterr().out