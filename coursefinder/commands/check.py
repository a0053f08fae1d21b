"""Check command implementation"""

import asyncio
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from coursefinder.core.navigator import NavigationEngine
from coursefinder.parsers import load_documents_async


class CheckCommand:
    """Load the documents and summarize the questionnaire"""

    def __init__(
        self,
        console: Console,
        questions_path: Path,
        programs_path: Optional[Path] = None,
        config_path: Optional[Path] = None
    ):
        self.console = console
        self.questions_path = questions_path
        self.programs_path = programs_path
        self.config_path = config_path

    def execute(self) -> NavigationEngine:
        """Load documents and present the entry question without a user

        Raises:
            DataLoadError: If a document fails to load
            GraphError: If the entry question cannot be presented
        """
        documents = asyncio.run(load_documents_async(
            self.questions_path,
            self.programs_path,
            self.config_path
        ))
        engine = NavigationEngine.from_documents(documents)
        engine.start()

        feedback = documents.config.feedback
        table = Table(title="Questionnaire")
        table.add_column("Item", style="cyan")
        table.add_column("Value", style="green")
        table.add_row("Entry question", escape(engine.graph.entry_id))
        table.add_row("Questions", str(len(documents.questions.questions)))
        table.add_row("Outcomes", str(len(documents.questions.outcomes)))
        table.add_row("Programs", str(len(documents.programs)))
        table.add_row("Progress strategy", engine.progress_estimator.strategy.name)
        table.add_row(
            "Feedback",
            ("on" if feedback.enabled else "off")
            + (", default on" if feedback.default_enabled else ", default off")
        )
        self.console.print(table)
        return engine
