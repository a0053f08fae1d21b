"""Session records and node references for questionnaire traversal"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from .documents import Course, Outcome


class NodeKind(str, Enum):
    """Kinds of node a transition can lead to"""
    QUESTION = "question"
    OUTCOME = "outcome"


@dataclass(frozen=True)
class NodeRef:
    """Classified target of a transition"""
    kind: NodeKind
    id: str

    @property
    def is_outcome(self) -> bool:
        return self.kind is NodeKind.OUTCOME

    @classmethod
    def question(cls, node_id: str) -> 'NodeRef':
        return cls(NodeKind.QUESTION, node_id)

    @classmethod
    def outcome(cls, node_id: str) -> 'NodeRef':
        return cls(NodeKind.OUTCOME, node_id)


@dataclass(frozen=True)
class HistoryEntry:
    """Immutable record of a completed question"""
    question_id: str
    selected_option_id: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize history entry to dictionary"""
        return {
            "question_id": self.question_id,
            "selected_option_id": self.selected_option_id
        }


@dataclass(frozen=True)
class EmbeddedCourse:
    """Outcome carries its course directly"""
    course: Course


@dataclass(frozen=True)
class ReferencedProgram:
    """Outcome points into the programs document"""
    program_id: str


OutcomeCourse = Union[EmbeddedCourse, ReferencedProgram]


@dataclass(frozen=True)
class ResolvedOutcome:
    """Outcome joined with its recommended course"""
    outcome: Outcome
    course: Course

    @property
    def id(self) -> str:
        return self.outcome.id


@dataclass(frozen=True)
class FeedbackMessage:
    """Personalized feedback ready for display"""
    icon: str
    title: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize feedback message to dictionary"""
        return {"icon": self.icon, "title": self.title, "message": self.message}


@dataclass(frozen=True)
class UserIdentity:
    """Identity collected once at session start"""
    name: str = ""
    year: Optional[str] = None
