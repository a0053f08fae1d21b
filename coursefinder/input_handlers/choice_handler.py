"""Choice input handler with arrow key selection"""
from typing import List, Optional, Tuple

import questionary
from rich.console import Console

from ..view import QuestionView

BACK = "__back__"
RESTART = "__restart__"
QUIT = "__quit__"


def handle_choice_input(
    prompt_text: str,
    choices: List[Tuple[str, str]],
    console: Console,
    default: Optional[str] = None
) -> str:
    """Handle choice input with arrow key selection

    Args:
        prompt_text: Prompt shown above the choices
        choices: (label, value) pairs
        console: Rich console for error output
        default: Value to pre-select

    Raises:
        KeyboardInterrupt: If selection is cancelled
    """
    if not choices:
        console.print("[red]Error: No choices available[/red]")
        raise KeyboardInterrupt("No choices available")

    questionary_choices = []
    default_choice = None

    for label, value in choices:
        choice = questionary.Choice(title=label, value=value)
        questionary_choices.append(choice)
        if default and value == default:
            default_choice = choice

    answer = questionary.select(
        prompt_text,
        choices=questionary_choices,
        default=default_choice
    ).ask()

    if not answer:
        raise KeyboardInterrupt("Selection cancelled")

    return answer


def handle_option_input(view: QuestionView, console: Console) -> str:
    """Ask for an option of the current question, or a navigation action

    Returns:
        Option ID, BACK or RESTART
    """
    choices = []
    selected = None
    for option in view.options:
        label = f"{option.glyph} {option.text}" if option.glyph else option.text
        choices.append((label, option.id))
        if option.selected:
            selected = option.id

    if view.can_go_back:
        choices.append(("← Back", BACK))
    choices.append(("↺ Start over", RESTART))

    return handle_choice_input("Your answer:", choices, console, default=selected)
