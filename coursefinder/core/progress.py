"""Progress estimation strategies"""
from abc import ABC, abstractmethod
from typing import Dict, Sequence

from ..models.session import HistoryEntry

COMPLETE = 100.0


class ProgressStrategy(ABC):
    """Map a traversal history to a completion percentage"""

    name: str = "abstract"

    @abstractmethod
    def estimate(self, history: Sequence[HistoryEntry]) -> float:
        """Return percentage in [0, 100]"""
        pass


class StepRatioStrategy(ProgressStrategy):
    """Completed steps over the declared maximum step count"""

    name = "step-ratio"

    def __init__(self, max_steps: int):
        self.max_steps = max_steps

    def estimate(self, history: Sequence[HistoryEntry]) -> float:
        return min(len(history) / self.max_steps * 100, COMPLETE)


class WeightedSumStrategy(ProgressStrategy):
    """Sum of per-question weights; unweighted questions contribute 0"""

    name = "weighted-sum"

    def __init__(self, weights: Dict[str, float]):
        self.weights = weights

    def estimate(self, history: Sequence[HistoryEntry]) -> float:
        total = sum(self.weights.get(entry.question_id, 0) for entry in history)
        return min(total * 100, COMPLETE)


class FlatStrategy(ProgressStrategy):
    """Completed steps over the number of questions in the graph"""

    name = "flat"

    def __init__(self, question_count: int):
        self.question_count = question_count

    def estimate(self, history: Sequence[HistoryEntry]) -> float:
        if self.question_count <= 0:
            return 0.0
        return min(len(history) / self.question_count * 100, COMPLETE)


class ProgressEstimator:
    """Select and apply the progress strategy a graph supports"""

    def __init__(self, strategy: ProgressStrategy):
        self.strategy = strategy

    @classmethod
    def for_graph(cls, graph) -> 'ProgressEstimator':
        """Pick first applicable strategy: step-ratio, weighted-sum, flat

        Args:
            graph: QuestionGraph providing metadata and question count
        """
        meta = graph.meta
        if meta.max_steps:
            return cls(StepRatioStrategy(meta.max_steps))
        if meta.progress_weights:
            return cls(WeightedSumStrategy(meta.progress_weights))
        return cls(FlatStrategy(graph.question_count))

    def estimate(self, history: Sequence[HistoryEntry]) -> float:
        if not history:
            return 0.0
        return self.strategy.estimate(history)
