# crawllang

crawllang is a small scripting language for describing web navigation
steps. A script is compiled to bytecode, and the bytecode is run on a
simple stack-based virtual machine. The machine prints each action that
it would perform.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The language

A script is made of statements, and each statement ends with a semicolon:

```
var home = "https://www.example.com";
NAVIGATE(home);
CLICK("#login");
var retries = 3;
```

- `var NAME = VALUE;` declares a variable. VALUE is a string in double
  quotes, a number (a run of digits), or the name of another variable.
- `NAVIGATE(ARG);` navigates to a URL.
- `CLICK(ARG);` clicks an element.

An ARG is a string, a number or a variable name. Identifiers may contain
only ASCII letters. Strings have no escape sequences; a string runs to the
next double quote. The compiler skips tokens it does not recognise.

## Command line

Compile a script to a bytecode file (`-o`/`--output` is required):

```
crawllang compile script.crawl -o script.bin
```

Run a compiled bytecode file:

```
crawllang run script.bin
```

For the script above, this prints:

```
Navigating to: https://www.example.com
Clicking element: #login
```

On failure the command prints `Error: ...` to standard error and exits
with status 1. With no command it prints its help.

## Library use

```python
from crawllang.compiler import Compiler
from crawllang.vm import VM
from crawllang.bytecode import save_bytecode, load_bytecode

bytecode = Compiler().compile('NAVIGATE("https://www.example.com");')
save_bytecode("out.bin", bytecode)
VM(load_bytecode("out.bin")).run()
```

The modules:

- `crawllang.lexer`: `Lexer`, `Token`, `tokenize(source)`, `is_letter`,
  `is_digit`.
- `crawllang.parser`: `Parser`, a cursor over a lexer's tokens.
- `crawllang.compiler`: `Compiler.compile(source)` returns a list of
  `Instruction(opcode, operand)` ending with `HALT`.
- `crawllang.constants`: the `Opcode` and `TokenType` enums.
- `crawllang.bytecode`: `save_bytecode(path, bytecode)` and
  `load_bytecode(path)`. Bytecode files are JSON documents.
- `crawllang.vm`: `VM(bytecode, out=None).run()`. Output goes to `out`
  if given, otherwise to standard output.
- `crawllang.interpreter`: `Interpreter`, which runs the `NAVIGATE` and
  `CLICK` commands directly by name and keeps a table of variables.

`VM.run` raises `VMError` if a program uses a variable that was never
defined, pops from an empty stack, or reaches an unknown opcode.
`load_bytecode` raises `OSError` if the file cannot be read and
`BytecodeError` if its contents are not a bytecode document.

## What it does not do

crawllang does not fetch pages or drive a browser. `NAVIGATE` and `CLICK`
only print a line describing the action.