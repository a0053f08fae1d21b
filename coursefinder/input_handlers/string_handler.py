"""String input handler with validation"""
from rich.console import Console
from rich.prompt import Prompt


def handle_name_input(console: Console, prompt_text: str = "What's your name?") -> str:
    """Ask for the user's name until a non-blank value is given

    Raises:
        KeyboardInterrupt: If input is cancelled
    """
    while True:
        try:
            value = Prompt.ask(prompt_text, console=console)
        except (KeyboardInterrupt, EOFError):
            raise KeyboardInterrupt("User cancelled input")

        value = (value or "").strip()
        if not value:
            console.print("[red]This field is required[/red]")
            continue

        return value
