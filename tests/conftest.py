import sys
from pathlib import Path

import pytest

# Ensure the project root is on the path for module resolution during testing.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from heat_load_calculator.prompts import Console  # noqa: E402


class ScriptedInput:
    """Feeds canned lines to a Console and records the prompts it was given."""

    def __init__(self, lines):
        self._lines = iter(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None


@pytest.fixture
def make_console():
    """Build a Console from scripted lines; returns (console, captured output lines)."""

    def factory(lines, pause_enabled=False):
        output: list[str] = []
        console = Console(input_func=ScriptedInput(lines), output_func=output.append, pause_enabled=pause_enabled)
        return console, output

    return factory
