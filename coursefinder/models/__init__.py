"""Data models for the course finder"""
from .documents import (
    AppConfig,
    AudienceSettings,
    Course,
    FeedbackPayload,
    FeedbackSettings,
    Meta,
    Option,
    Outcome,
    Program,
    Question,
    QuestionFeedback,
    QuestionsDocument,
    YearChoice,
)
from .session import (
    EmbeddedCourse,
    FeedbackMessage,
    HistoryEntry,
    NodeKind,
    NodeRef,
    OutcomeCourse,
    ReferencedProgram,
    ResolvedOutcome,
    UserIdentity,
)

__all__ = [
    "AppConfig",
    "AudienceSettings",
    "Course",
    "FeedbackPayload",
    "FeedbackSettings",
    "Meta",
    "Option",
    "Outcome",
    "Program",
    "Question",
    "QuestionFeedback",
    "QuestionsDocument",
    "YearChoice",
    "EmbeddedCourse",
    "FeedbackMessage",
    "HistoryEntry",
    "NodeKind",
    "NodeRef",
    "OutcomeCourse",
    "ReferencedProgram",
    "ResolvedOutcome",
    "UserIdentity",
]
