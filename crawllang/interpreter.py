"""Direct command interpreter with its own variable table."""

from collections.abc import Callable
from typing import TextIO

from crawllang.constants import CLICK_FUNC, NAVIGATE_FUNC


class Interpreter:
    """Runs named commands and keeps string variables.

    Output goes to ``out`` if given, otherwise to standard output.
    """

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self.variables: dict[str, str] = {}
        self.commands: dict[str, Callable[[str], None]] = {
            NAVIGATE_FUNC: self._navigate,
            CLICK_FUNC: self._click,
        }

    def _navigate(self, param: str) -> None:
        print(f"Navigating to: {param}", file=self._out)

    def _click(self, param: str) -> None:
        print(f"Clicking element: {param}", file=self._out)

    def declare_variable(self, name: str, value: str) -> None:
        """Bind name to value, replacing any earlier binding."""
        self.variables[name] = value

    def use_variable(self, name: str) -> str:
        """Return the value bound to name, or an empty string if unbound."""
        return self.variables.get(name, "")

    def execute_command(self, command: str, param: str) -> None:
        """Run command with param; unknown commands are ignored."""
        action = self.commands.get(command)
        if action is not None:
            action(param)