"""Command-line entry point: compile source files and run bytecode."""

import argparse
import sys
from collections.abc import Sequence

from crawllang.bytecode import BytecodeError, load_bytecode, save_bytecode
from crawllang.compiler import Compiler
from crawllang.vm import VM, VMError


class _CommandError(Exception):
    pass


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crawllang",
        description="crawllang - Lightweight interpreted language for web scraping",
    )
    commands = parser.add_subparsers(dest="command", metavar="<command>")

    compile_cmd = commands.add_parser("compile", help="Compile source code to bytecode")
    compile_cmd.add_argument("file")
    compile_cmd.add_argument(
        "-o", "--output", required=True, help="Output file path (required)"
    )

    run_cmd = commands.add_parser("run", help="Execute compiled bytecode")
    run_cmd.add_argument("bytecode_file", metavar="bytecode-file")
    return parser


def _compile(source_path: str, output: str) -> None:
    try:
        with open(source_path, encoding="utf-8") as handle:
            source = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise _CommandError(f"failed to read file: {exc}") from exc

    bytecode = Compiler().compile(source)
    try:
        save_bytecode(output, bytecode)
    except OSError as exc:
        raise _CommandError(f"failed to save bytecode: {exc}") from exc
    print(f"Successfully compiled to: {output}")


def _run(path: str) -> None:
    try:
        bytecode = load_bytecode(path)
    except (OSError, BytecodeError) as exc:
        raise _CommandError(f"failed to load bytecode: {exc}") from exc
    try:
        VM(bytecode).run()
    except VMError as exc:
        raise _CommandError(str(exc)) from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "compile":
            _compile(args.file, args.output)
        elif args.command == "run":
            _run(args.bytecode_file)
        else:
            parser.print_help()
    except _CommandError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())