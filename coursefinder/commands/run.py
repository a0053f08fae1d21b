"""Run command implementation"""

import asyncio
import logging
from pathlib import Path
from typing import Iterator, List, Optional

import questionary
from rich.console import Console
from rich.markup import escape

from coursefinder.core.navigator import NavigationEngine, SelectionOutcome
from coursefinder.display import ViewRenderer
from coursefinder.exceptions import GraphError, NavigationError
from coursefinder.input_handlers import (
    BACK,
    QUIT,
    RESTART,
    handle_choice_input,
    handle_name_input,
    handle_option_input,
)
from coursefinder.parsers import load_documents_async
from coursefinder.view import QuestionView, build_view

logger = logging.getLogger(__name__)

SCRIPTED_ACTIONS = {"back": BACK, "restart": RESTART, "quit": QUIT}


class QuizCommand:
    """Guide a user through the questionnaire to a recommendation"""

    def __init__(
        self,
        console: Console,
        questions_path: Path,
        programs_path: Optional[Path] = None,
        config_path: Optional[Path] = None,
        name: Optional[str] = None,
        year: Optional[str] = None,
        answers: Optional[List[str]] = None
    ):
        """Initialize run command

        Args:
            console: Rich console for output
            questions_path: Questions document
            programs_path: Optional programs document
            config_path: Optional config document
            name: User name; asked interactively when omitted
            year: User year; asked interactively when omitted
            answers: Scripted option IDs or actions (back, restart, quit);
                runs without prompts when given
        """
        self.console = console
        self.questions_path = questions_path
        self.programs_path = programs_path
        self.config_path = config_path
        self.name = name
        self.year = year
        self.scripted = answers is not None
        self._answers: Iterator[str] = iter(answers or [])
        self.renderer = ViewRenderer(console)
        self.engine: Optional[NavigationEngine] = None

    def execute(self) -> NavigationEngine:
        """Load documents and run the quiz loop

        Raises:
            DataLoadError: If a document fails to load
            GraphError: If the entry question cannot be presented
        """
        documents = asyncio.run(load_documents_async(
            self.questions_path,
            self.programs_path,
            self.config_path
        ))
        self.engine = NavigationEngine.from_documents(documents)

        name, year = self._welcome()
        self.engine.begin_session(name, year)
        self._run_loop()
        return self.engine

    def _welcome(self):
        """Collect name and year before the quiz starts"""
        name = self.name
        if not name:
            if self.scripted:
                name = ""
            else:
                name = handle_name_input(self.console)

        audience = self.engine.config.audience
        year = self.year
        if year is None and audience.years and not self.scripted:
            self.console.print(f"\nThanks, {escape(name)}! 📚")
            year = handle_choice_input(
                "Which year are you in?",
                [(choice.label, choice.id) for choice in audience.years],
                self.console
            )

        if year is not None and year == audience.parent_year and audience.parent_message:
            self.renderer.render_message(audience.parent_message)
            if not self.scripted:
                questionary.press_any_key_to_continue().ask()

        return name, year

    def _next_action(self, view: QuestionView) -> str:
        if not self.scripted:
            return handle_option_input(view, self.console)
        answer = next(self._answers, "quit")
        return SCRIPTED_ACTIONS.get(answer.lower(), answer)

    def _end_of_session_action(self) -> str:
        if not self.scripted:
            return handle_choice_input(
                "What next?",
                [("↺ Start over", RESTART), ("Quit", QUIT)],
                self.console
            )
        answer = next(self._answers, "quit")
        return SCRIPTED_ACTIONS.get(answer.lower(), QUIT)

    def _run_loop(self) -> None:
        engine = self.engine

        while True:
            view = build_view(engine.snapshot(), engine.graph)
            self.renderer.render(view)

            if not isinstance(view, QuestionView):
                # Result or error screen
                if self._end_of_session_action() == RESTART:
                    engine.restart()
                    continue
                return

            action = self._next_action(view)
            if action == QUIT:
                return
            if action == BACK:
                engine.go_back()
                continue
            if action == RESTART:
                engine.restart()
                continue

            try:
                self._answer(action)
            except (GraphError, NavigationError) as e:
                # Engine is now in its error state; the next view shows it
                logger.debug("Session stopped by content error: %s", e.message)

    def _answer(self, option_id: str) -> None:
        engine = self.engine

        outcome = engine.select_option(option_id)
        if outcome is SelectionOutcome.IGNORED:
            self.console.print(f"[yellow]'{escape(option_id)}' is not an option here[/yellow]")
            return
        if outcome is SelectionOutcome.RESULT:
            return

        if engine.is_feedback_applicable():
            self.renderer.render_feedback(engine.resolve_feedback())
            if not self.scripted:
                questionary.press_any_key_to_continue().ask()
        engine.advance()
