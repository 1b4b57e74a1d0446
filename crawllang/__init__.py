"""A small scripting language for web navigation steps, compiled to bytecode and run on a stack VM."""

__version__ = "0.1.0"