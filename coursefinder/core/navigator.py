"""NavigationEngine for stateful questionnaire traversal"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..exceptions import CourseFinderError, GraphError, NavigationError
from ..models.documents import AppConfig, Question
from ..models.session import FeedbackMessage, HistoryEntry, ResolvedOutcome, UserIdentity
from ..parsers.document_parser import LoadedDocuments
from .feedback import FeedbackResolver
from .graph import QuestionGraph
from .observer import (
    FeedbackShown,
    NavigationFailed,
    NavigationNotification,
    NavigationObserver,
    OptionSelected,
    QuestionReady,
    ResultReached,
    SessionStarted,
    SteppedBack,
)
from .progress import COMPLETE, ProgressEstimator

logger = logging.getLogger(__name__)


class EngineState(str, Enum):
    """Navigation states"""
    NOT_STARTED = "not_started"
    IN_QUESTION = "in_question"
    IN_FEEDBACK = "in_feedback"
    IN_RESULT = "in_result"
    ERROR = "error"


class SelectionOutcome(str, Enum):
    """What the caller should do after select_option"""
    IGNORED = "ignored"  # Option not offered, nothing changed
    FEEDBACK_CANDIDATE = "feedback_candidate"  # Show feedback or advance
    RESULT = "result"  # Outcome reached, feedback bypassed


ACTIVE_STATES = (EngineState.IN_QUESTION, EngineState.IN_FEEDBACK)


@dataclass(frozen=True)
class SessionSnapshot:
    """Immutable view of session state for rendering"""
    state: EngineState
    current_node_id: Optional[str]
    selected_option_id: Optional[str]
    history: Tuple[HistoryEntry, ...]
    progress: float
    outcome_id: Optional[str] = None
    error: Optional[CourseFinderError] = None
    user: UserIdentity = field(default_factory=UserIdentity)

    @property
    def can_go_back(self) -> bool:
        return bool(self.history) and self.state is not EngineState.ERROR


class NavigationEngine:
    """Single-session state machine over a question graph

    The engine is the sole mutator of session state. It is driven by
    discrete user actions (select option, advance, go back, restart) and
    holds no reference to any presentation layer.
    """

    def __init__(
        self,
        graph: QuestionGraph,
        config: Optional[AppConfig] = None,
        progress_estimator: Optional[ProgressEstimator] = None
    ):
        """Initialize engine

        Args:
            graph: Question graph to traverse
            config: Optional config document with global feedback settings
            progress_estimator: Estimator override; picked from graph metadata otherwise
        """
        self.graph = graph
        self.config = config or AppConfig()
        self.feedback_resolver = FeedbackResolver(self.config.feedback)
        self.progress_estimator = progress_estimator or ProgressEstimator.for_graph(graph)

        self.state = EngineState.NOT_STARTED
        self.current_node_id: Optional[str] = None
        self.selected_option_id: Optional[str] = None
        self.outcome_id: Optional[str] = None
        self.last_error: Optional[CourseFinderError] = None
        self.user = UserIdentity()
        self._history: List[HistoryEntry] = []

        self._observers: List[NavigationObserver] = []

    @classmethod
    def from_documents(cls, documents: LoadedDocuments) -> 'NavigationEngine':
        """Build graph and engine from loaded documents

        Raises:
            GraphError: If no entry question is configured
        """
        graph = QuestionGraph(documents.questions, documents.programs)
        return cls(graph, config=documents.config)

    def register_observer(self, observer: NavigationObserver) -> None:
        """Register observer for navigation events"""
        if observer not in self._observers:
            self._observers.append(observer)

    def deregister_observer(self, observer: NavigationObserver) -> None:
        """Deregister observer from navigation events"""
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify_observers(self, notification: NavigationNotification) -> None:
        for observer in self._observers:
            observer.receive_notification(notification)

    def _fail(self, error: CourseFinderError) -> None:
        """Enter the error state and raise"""
        self.state = EngineState.ERROR
        self.last_error = error
        logger.error("Navigation stopped: %s", error.message)
        self._notify_observers(NavigationFailed(error=error))
        raise error

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._history)

    def begin_session(self, user_name: str, user_year: Optional[str] = None) -> None:
        """Start a new session for a user

        Identity is only replaced here; restart() keeps it.
        """
        self.user = UserIdentity(name=user_name.strip(), year=user_year)
        self.feedback_resolver.user_name = self.user.name
        self.start()

    def start(self) -> None:
        """Reset traversal to the entry question

        Raises:
            GraphError: If the entry question cannot be presented
        """
        self._history = []
        self.selected_option_id = None
        self.outcome_id = None
        self.last_error = None
        self.current_node_id = self.graph.entry_id

        try:
            question = self.graph.entry_question()
        except GraphError as error:
            self._fail(error)

        self.state = EngineState.IN_QUESTION
        logger.debug("Session started at '%s'", question.id)
        self._notify_observers(SessionStarted(entry_question_id=question.id))
        self._notify_observers(QuestionReady(question=question))

    def restart(self) -> None:
        """Start over, keeping the collected identity"""
        self.start()

    def select_option(self, option_id: str) -> SelectionOutcome:
        """Record the option chosen on the current question

        Options outside the current question are ignored. A selection that
        leads to an outcome advances straight to the result.

        Raises:
            NavigationError: If the option has no transition
        """
        if self.state not in ACTIVE_STATES:
            return SelectionOutcome.IGNORED

        question = self.graph.question(self.current_node_id)
        if question.find_option(option_id) is None:
            logger.debug("Ignoring unknown option '%s' on '%s'", option_id, question.id)
            return SelectionOutcome.IGNORED

        self.selected_option_id = option_id
        self.state = EngineState.IN_QUESTION

        target = self.graph.transition(question.id, option_id)
        if target is None:
            self._fail(NavigationError("missing transition", question.id, option_id))

        self._notify_observers(OptionSelected(
            question_id=question.id,
            option_id=option_id,
            leads_to_outcome=target.is_outcome
        ))

        if target.is_outcome:
            self.advance()
            return SelectionOutcome.RESULT
        return SelectionOutcome.FEEDBACK_CANDIDATE

    def advance(self) -> None:
        """Confirm the selection and move forward one step

        No-op without a pending selection, so repeated calls mutate once.

        Raises:
            NavigationError: If the selection has no transition
            GraphError: If the next question cannot be presented
        """
        if self.state not in ACTIVE_STATES or self.selected_option_id is None:
            return

        question_id = self.current_node_id
        option_id = self.selected_option_id

        target = self.graph.transition(question_id, option_id)
        if target is None:
            self._fail(NavigationError("missing transition", question_id, option_id))

        next_question: Optional[Question] = None
        if not target.is_outcome:
            try:
                next_question = self.graph.question(target.id)
            except GraphError as error:
                self._fail(error)

        self._history.append(HistoryEntry(question_id=question_id, selected_option_id=option_id))
        self.selected_option_id = None

        if next_question is None:
            self.current_node_id = None
            self.outcome_id = target.id
            self.state = EngineState.IN_RESULT
            logger.debug("Reached outcome '%s' after %d steps", target.id, len(self._history))
            self._notify_observers(ResultReached(outcome_id=target.id))
        else:
            self.current_node_id = next_question.id
            self.state = EngineState.IN_QUESTION
            self._notify_observers(QuestionReady(question=next_question))

    def go_back(self) -> bool:
        """Undo the last advance, re-selecting the option chosen then

        Returns:
            True if a step was undone, False if there was nothing to undo
        """
        if self.state not in (*ACTIVE_STATES, EngineState.IN_RESULT) or not self._history:
            return False

        previous = self._history.pop()
        self.current_node_id = previous.question_id
        self.selected_option_id = previous.selected_option_id
        self.outcome_id = None
        self.state = EngineState.IN_QUESTION

        self._notify_observers(SteppedBack(restored=previous))
        self._notify_observers(QuestionReady(question=self.graph.question(previous.question_id)))
        return True

    def current_question(self) -> Optional[Question]:
        """Get question awaiting a selection, or None outside a question"""
        if self.state not in ACTIVE_STATES:
            return None
        return self.graph.question(self.current_node_id)

    def current_progress(self) -> float:
        """Get completion percentage for the current history"""
        if self.state is EngineState.IN_RESULT:
            return COMPLETE
        return self.progress_estimator.estimate(self._history)

    def _pending_target_is_question(self) -> bool:
        target = self.graph.transition(self.current_node_id, self.selected_option_id)
        return target is not None and not target.is_outcome

    def is_feedback_applicable(self) -> bool:
        """Check whether the pending selection should show feedback"""
        if self.state not in ACTIVE_STATES or self.selected_option_id is None:
            return False
        if not self._pending_target_is_question():
            return False
        return self.feedback_resolver.is_applicable(
            self.graph.question(self.current_node_id),
            self.selected_option_id
        )

    def resolve_feedback(self) -> Optional[FeedbackMessage]:
        """Resolve feedback for the pending selection and enter the feedback state

        Returns:
            Feedback message, or None without a pending selection
        """
        if self.state not in ACTIVE_STATES or self.selected_option_id is None:
            return None

        feedback = self.feedback_resolver.resolve(
            self.graph.question(self.current_node_id),
            self.selected_option_id
        )
        self.state = EngineState.IN_FEEDBACK
        self._notify_observers(FeedbackShown(feedback=feedback))
        return feedback

    def is_at_result(self) -> bool:
        return self.state is EngineState.IN_RESULT

    def current_outcome(self) -> Optional[ResolvedOutcome]:
        """Get resolved outcome when at a result

        Raises:
            OutcomeLookupError: If the outcome or its program is missing
        """
        if self.state is not EngineState.IN_RESULT:
            return None
        return self.graph.resolve_outcome(self.outcome_id)

    def snapshot(self) -> SessionSnapshot:
        """Capture current state for a stateless renderer"""
        return SessionSnapshot(
            state=self.state,
            current_node_id=self.current_node_id,
            selected_option_id=self.selected_option_id,
            history=self.history,
            progress=self.current_progress(),
            outcome_id=self.outcome_id,
            error=self.last_error,
            user=self.user
        )
