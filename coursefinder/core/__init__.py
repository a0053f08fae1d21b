"""Core navigation components"""
from .graph import QuestionGraph
from .feedback import FeedbackResolver
from .progress import (
    ProgressEstimator,
    ProgressStrategy,
    StepRatioStrategy,
    WeightedSumStrategy,
    FlatStrategy
)
from .navigator import (
    NavigationEngine,
    EngineState,
    SelectionOutcome,
    SessionSnapshot
)
from .observer import (
    NavigationObserver,
    SessionStarted,
    QuestionReady,
    OptionSelected,
    FeedbackShown,
    ResultReached,
    SteppedBack,
    NavigationFailed
)

__all__ = [
    "QuestionGraph",
    "FeedbackResolver",
    "ProgressEstimator",
    "ProgressStrategy",
    "StepRatioStrategy",
    "WeightedSumStrategy",
    "FlatStrategy",
    "NavigationEngine",
    "EngineState",
    "SelectionOutcome",
    "SessionSnapshot",
    "NavigationObserver",
    "SessionStarted",
    "QuestionReady",
    "OptionSelected",
    "FeedbackShown",
    "ResultReached",
    "SteppedBack",
    "NavigationFailed"
]
