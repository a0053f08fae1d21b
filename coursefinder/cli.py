"""CLI entry point for the course finder"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from coursefinder.exceptions import CourseFinderError

DATA_DIR = Path(__file__).parent / "data"

app = typer.Typer(
    name="coursefinder",
    help="Course Finder - answer a few questions, get a course recommendation",
    add_completion=False
)
console = Console()


def handle_course_finder_error(error: CourseFinderError, exit_code: int = 1):
    """Handle course finder errors with Rich formatting

    Args:
        error: Course finder exception to handle
        exit_code: Exit code to use
    """
    if error.help_text:
        panel_content = f"{escape(error.message)}\n\n[bold cyan]Help:[/bold cyan]\n{escape(error.help_text)}"
    else:
        panel_content = escape(error.message)

    panel = Panel(
        panel_content,
        title="[bold red]Error[/bold red]",
        border_style="red",
        expand=False
    )

    console.print(panel)
    raise typer.Exit(exit_code)


def handle_unexpected_error(error: Exception, exit_code: int = 1):
    """Handle unexpected errors with Rich formatting

    Args:
        error: Exception to handle
        exit_code: Exit code to use
    """
    error_text = Text()
    error_text.append("✗ Unexpected Error: ", style="bold red")
    error_text.append(str(error))

    console.print(error_text)
    console.print("\n[yellow]This is an unexpected error. Please report this issue.[/yellow]")
    console.print(f"[dim]Error type: {type(error).__name__}[/dim]")

    raise typer.Exit(exit_code)


def _optional_document(path: Optional[Path], default_name: str, use_default: bool) -> Optional[Path]:
    """Use given path, else the bundled document when running the sample quiz"""
    if path is not None:
        return path
    if use_default:
        return DATA_DIR / default_name
    return None


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs")
):
    """Configure logging for all commands"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True
    )


@app.command()
def run(
    questions: Optional[Path] = typer.Option(None, "--questions", "-q", help="Questions document"),
    programs: Optional[Path] = typer.Option(None, "--programs", "-p", help="Programs document"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config document"),
    name: Optional[str] = typer.Option(None, "--name", help="Your name"),
    year: Optional[str] = typer.Option(None, "--year", help="Your school year"),
    answers: Optional[str] = typer.Option(
        None,
        "--answers",
        help="Comma-separated option IDs (or back/restart/quit) to run without prompts"
    )
):
    """Take the questionnaire and get a course recommendation"""
    from coursefinder.commands.run import QuizCommand

    use_default = questions is None
    scripted = [a.strip() for a in answers.split(",") if a.strip()] if answers is not None else None

    try:
        quiz_cmd = QuizCommand(
            console,
            questions_path=questions or DATA_DIR / "questions.yaml",
            programs_path=_optional_document(programs, "programs.yaml", use_default),
            config_path=_optional_document(config, "config.yaml", use_default),
            name=name,
            year=year,
            answers=scripted
        )
        quiz_cmd.execute()

    except CourseFinderError as e:
        handle_course_finder_error(e)
    except KeyboardInterrupt:
        console.print("\n[yellow]Quiz cancelled[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        handle_unexpected_error(e)


@app.command()
def check(
    questions: Path = typer.Argument(..., help="Questions document"),
    programs: Optional[Path] = typer.Option(None, "--programs", "-p", help="Programs document"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config document")
):
    """Load the documents and summarize the questionnaire"""
    from coursefinder.commands.check import CheckCommand

    console.print("[bold blue]Checking questionnaire...[/bold blue]")

    try:
        check_cmd = CheckCommand(console, questions, programs, config)
        check_cmd.execute()

        console.print("[green]✓[/green] Documents loaded and entry question is ready")

    except CourseFinderError as e:
        handle_course_finder_error(e)
    except Exception as e:
        handle_unexpected_error(e)


@app.command()
def version():
    """Display CLI version"""
    import importlib.metadata

    try:
        cli_version = importlib.metadata.version("coursefinder")
    except importlib.metadata.PackageNotFoundError:
        cli_version = "0.1.0-dev"

    console.print(f"Course Finder Version: [green]{cli_version}[/green]")


if __name__ == "__main__":
    app()
