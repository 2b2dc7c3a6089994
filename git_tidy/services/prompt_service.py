"""Interactive prompts"""

from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

console = Console()


class PromptService:
    """Asks yes/no and free-text questions on the terminal."""

    def __init__(self, input_func: Optional[Callable[[str], str]] = None):
        """
        Args:
            input_func: Reads one answer given a prompt. Defaults to Console.input.
        """
        self._input = input_func or (lambda prompt: console.input(prompt))

    def ask(self, question: str) -> str:
        """Ask a free-text question and return the stripped answer.

        A closed input stream counts as an empty answer.
        """
        try:
            answer = self._input(f"{escape(question)} ")
        except EOFError:
            console.print()
            return ""
        return answer.strip()

    def confirm(self, question: str) -> bool:
        """Ask a yes/no question. Only 'y' (any case) is a yes; empty input is no."""
        answer = self.ask(f"{question} (y/N)")
        return answer.lower() == "y"
