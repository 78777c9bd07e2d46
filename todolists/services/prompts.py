"""Decision providers: where interactive answers come from."""

from typing import Protocol


class DecisionProvider(Protocol):
    """Returns the user's answer to a prompt, or None when no answer is available."""

    def ask(self, prompt: str) -> str | None: ...


class ConsolePrompt:
    """Ask on the terminal: print the prompt, read one line from stdin."""

    def ask(self, prompt: str) -> str | None:
        print(prompt)
        try:
            return input()
        except EOFError:
            return None


def confirm(provider: DecisionProvider, prompt: str) -> bool:
    """Yes/no question where only "y" (any case) means yes."""
    answer = provider.ask(prompt)
    return answer is not None and answer.strip().lower() == "y"
