"""Interactive input handlers"""
from .choice_handler import BACK, QUIT, RESTART, handle_choice_input, handle_option_input
from .string_handler import handle_name_input

__all__ = [
    "BACK",
    "QUIT",
    "RESTART",
    "handle_choice_input",
    "handle_option_input",
    "handle_name_input",
]
