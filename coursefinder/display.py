"""UI/Display layer for the course finder CLI"""
from typing import Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table

from .models.session import FeedbackMessage
from .view import ErrorView, QuestionView, ResultView, View


class ViewRenderer:
    """Render views using rich"""

    def __init__(self, console: Optional[Console] = None):
        """Initialize renderer

        Args:
            console: Rich console instance
        """
        self.console = console or Console()

    def render(self, view: Optional[View]) -> None:
        """Render any view"""
        if isinstance(view, QuestionView):
            self.render_question(view)
        elif isinstance(view, ResultView):
            self.render_result(view)
        elif isinstance(view, ErrorView):
            self.render_error(view)

    def render_progress(self, progress: float) -> None:
        """Render progress bar with percentage"""
        table = Table.grid(padding=(0, 1))
        table.add_row(
            ProgressBar(total=100, completed=progress, width=40),
            f"[dim]{progress:.0f}%[/dim]"
        )
        self.console.print(table)

    def render_question(self, view: QuestionView) -> None:
        """Render question in panel

        Args:
            view: Question view
        """
        self.render_progress(view.progress)

        content_parts = [f"[bold]{escape(view.text)}[/bold]"]
        if view.subtitle:
            content_parts.append(f"[dim]{escape(view.subtitle)}[/dim]")
        content_parts.append("")

        for index, option in enumerate(view.options, start=1):
            marker = "[green]●[/green]" if option.selected else "○"
            glyph = f"{escape(option.glyph)} " if option.glyph else ""
            content_parts.append(f"{marker} {index}. {glyph}{escape(option.text)}")
            if option.description:
                content_parts.append(f"     [dim]{escape(option.description)}[/dim]")

        self.console.print(Panel(
            "\n".join(content_parts),
            title="Question",
            border_style="cyan"
        ))

    def render_feedback(self, feedback: FeedbackMessage) -> None:
        """Render feedback shown between questions"""
        self.console.print(Panel(
            f"{escape(feedback.icon)}  [bold]{escape(feedback.title)}[/bold]\n\n{escape(feedback.message)}",
            border_style="magenta",
            expand=False
        ))

    def render_result(self, view: ResultView) -> None:
        """Render recommended outcome"""
        self.render_progress(view.progress)

        content_parts = [
            f"[bold]{escape(view.outcome_title)}[/bold]",
            escape(view.blurb),
            "",
            f"[bold cyan]{escape(view.course_title)}[/bold cyan]",
            f"Campus: {escape(view.campus)}",
        ]
        if view.notes:
            content_parts.append(f"[dim]{escape(view.notes)}[/dim]")
        content_parts.append(f"Explore: [link={escape(view.url)}]{escape(view.url)}[/link]")

        self.console.print(Panel(
            "\n".join(content_parts),
            title=f"[bold green]{escape(view.title)}[/bold green]",
            border_style="green"
        ))

        if view.description:
            self.console.print(Markdown(view.description))

    def render_error(self, view: ErrorView) -> None:
        """Render error state"""
        self.console.print(Panel(
            escape(view.message),
            title=f"[bold red]{escape(view.title)}[/bold red]",
            border_style="red",
            expand=False
        ))

    def render_message(self, message: str) -> None:
        """Render plain informational message"""
        self.console.print(escape(message))
