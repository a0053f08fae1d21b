"""Stateless view construction from session snapshots"""
import re
import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from .core.graph import QuestionGraph
from .core.navigator import EngineState, SessionSnapshot
from .exceptions import (
    CourseFinderError,
    DataLoadError,
    GraphError,
    NavigationError,
    OutcomeLookupError,
)

# Leading run of non-word characters followed by the text
_GLYPH_LABEL = re.compile(r"^([^\w\s]+)\s*(.+)$")

# Symbol categories a decorative glyph starts with, e.g. emoji
_GLYPH_CATEGORIES = ("So", "Sk")


class ErrorKind(str, Enum):
    """User-visible error states"""
    CONTENT = "content"
    NOT_FOUND = "not_found"
    LOAD = "load"


@dataclass(frozen=True)
class OptionView:
    id: str
    glyph: Optional[str]
    text: str
    description: Optional[str]
    selected: bool


@dataclass(frozen=True)
class QuestionView:
    question_id: str
    text: str
    subtitle: Optional[str]
    ui: str
    options: Tuple[OptionView, ...]
    can_go_back: bool
    progress: float


@dataclass(frozen=True)
class ResultView:
    title: str
    blurb: str
    outcome_title: str
    course_title: str
    campus: str
    url: str
    notes: Optional[str]
    description: Optional[str]
    progress: float


@dataclass(frozen=True)
class ErrorView:
    kind: ErrorKind
    title: str
    message: str


View = Union[QuestionView, ResultView, ErrorView]


def split_label(label: str) -> Tuple[Optional[str], str]:
    """Split an option label into its decorative glyph and text"""
    match = _GLYPH_LABEL.match(label)
    if match and unicodedata.category(match.group(1)[0]) in _GLYPH_CATEGORIES:
        return match.group(1).strip(), match.group(2).strip()
    return None, label


def error_view(error: CourseFinderError) -> ErrorView:
    """Map an error to the state the user sees"""
    if isinstance(error, OutcomeLookupError):
        return ErrorView(ErrorKind.NOT_FOUND, "Oops!", "Result not found")
    if isinstance(error, DataLoadError):
        return ErrorView(ErrorKind.LOAD, "Oops!", "Failed to load quiz data. Please retry.")
    if isinstance(error, (GraphError, NavigationError)):
        return ErrorView(ErrorKind.CONTENT, "Content error", error.message)
    return ErrorView(ErrorKind.CONTENT, "Oops!", error.message)


def build_view(snapshot: SessionSnapshot, graph: QuestionGraph) -> Optional[View]:
    """Build the view for a snapshot; None before the quiz starts"""
    if snapshot.state is EngineState.NOT_STARTED:
        return None

    if snapshot.state is EngineState.ERROR:
        return error_view(snapshot.error)

    if snapshot.state is EngineState.IN_RESULT:
        try:
            resolved = graph.resolve_outcome(snapshot.outcome_id)
        except OutcomeLookupError as e:
            return error_view(e)

        course = resolved.course
        notes = course.notes if course.notes and course.notes.strip() else None
        return ResultView(
            title=f"Perfect match, {snapshot.user.name}!",
            blurb=resolved.outcome.blurb,
            outcome_title=resolved.outcome.title,
            course_title=course.title,
            campus=course.campus,
            url=course.url,
            notes=notes,
            description=resolved.outcome.description,
            progress=snapshot.progress
        )

    question = graph.question(snapshot.current_node_id)
    options = []
    for option in question.options:
        glyph, text = split_label(option.label)
        options.append(OptionView(
            id=option.id,
            glyph=glyph,
            text=text,
            description=option.description,
            selected=option.id == snapshot.selected_option_id
        ))

    return QuestionView(
        question_id=question.id,
        text=question.text,
        subtitle=question.subtitle,
        ui=question.ui,
        options=tuple(options),
        can_go_back=snapshot.can_go_back,
        progress=snapshot.progress
    )
