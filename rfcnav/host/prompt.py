"""Interactive prompts on the terminal."""
# ruff: noqa: T201

from __future__ import annotations

from rfcnav.core.interfaces import PromptInterface


class ConsolePrompt(PromptInterface):
    """Read a single value from standard input."""

    def __init__(self, input_func=input):
        self._input = input_func

    def prompt(self, message: str, footnote: str = "", default: str = "") -> str | None:
        label = f"{message} [{default}]: " if default else f"{message}: "
        if footnote:
            print(footnote)
        try:
            value = self._input(label)
        except EOFError:
            return None
        value = value.strip()
        return value or default or None
