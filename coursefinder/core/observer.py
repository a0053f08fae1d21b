"""Observer pattern for navigation events"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Union

from ..exceptions import CourseFinderError
from ..models.documents import Question
from ..models.session import FeedbackMessage, HistoryEntry


@dataclass
class SessionStarted:
    """Emitted when traversal starts at the entry question"""
    entry_question_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "SessionStarted", "entry_question_id": self.entry_question_id}


@dataclass
class QuestionReady:
    """Emitted when a question awaits a selection"""
    question: Question

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "QuestionReady", "question_id": self.question.id}


@dataclass
class OptionSelected:
    """Emitted when an option is recorded for the current question"""
    question_id: str
    option_id: str
    leads_to_outcome: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "OptionSelected",
            "question_id": self.question_id,
            "option_id": self.option_id,
            "leads_to_outcome": self.leads_to_outcome
        }


@dataclass
class FeedbackShown:
    """Emitted when feedback is resolved for display"""
    feedback: FeedbackMessage

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "FeedbackShown", "feedback": self.feedback.to_dict()}


@dataclass
class ResultReached:
    """Emitted when traversal arrives at an outcome"""
    outcome_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "ResultReached", "outcome_id": self.outcome_id}


@dataclass
class SteppedBack:
    """Emitted when the last history entry is undone"""
    restored: HistoryEntry

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "SteppedBack", "restored": self.restored.to_dict()}


@dataclass
class NavigationFailed:
    """Emitted when malformed content stops the session"""
    error: CourseFinderError

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "NavigationFailed",
            "error_type": type(self.error).__name__,
            "message": self.error.message
        }


# Union type for all notification types
NavigationNotification = Union[
    SessionStarted,
    QuestionReady,
    OptionSelected,
    FeedbackShown,
    ResultReached,
    SteppedBack,
    NavigationFailed,
]


class NavigationObserver(ABC):
    """Abstract base class for navigation event observers"""

    @abstractmethod
    def receive_notification(self, notification: NavigationNotification) -> None:
        """Handle notification from the engine

        Args:
            notification: Event notification from the engine
        """
        pass
