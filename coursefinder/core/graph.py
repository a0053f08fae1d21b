"""QuestionGraph for read-only lookup of questions and outcomes"""
import logging
from typing import Dict, List, Optional

from ..exceptions import GraphError, OutcomeLookupError
from ..models.documents import Outcome, Program, Question, QuestionsDocument
from ..models.session import (
    EmbeddedCourse,
    NodeRef,
    OutcomeCourse,
    ReferencedProgram,
    ResolvedOutcome,
)

logger = logging.getLogger(__name__)


class QuestionGraph:
    """Immutable questionnaire graph with classified transitions

    Construction checks that an entry question exists. Everything else is
    checked lazily, when traversal reaches the broken part of the graph.
    """

    def __init__(
        self,
        document: QuestionsDocument,
        programs: Optional[List[Program]] = None
    ):
        """Initialize graph from validated documents

        Args:
            document: Questions document
            programs: Optional programs document joined via programId

        Raises:
            GraphError: If no entry question is configured
        """
        self.meta = document.meta
        self._questions: Dict[str, Question] = {q.id: q for q in document.questions}
        self._outcomes: Dict[str, Outcome] = {o.id: o for o in document.outcomes}
        self._programs: Dict[str, Program] = {p.id: p for p in programs or []}

        if self.meta.entry:
            self.entry_id = self.meta.entry
        elif document.questions:
            self.entry_id = document.questions[0].id
        else:
            raise GraphError("no entry question configured")

        if self.entry_id not in self._questions:
            raise GraphError("entry question does not exist", question_id=self.entry_id)

        # Transitions are classified once, at load
        self._transitions: Dict[str, Dict[str, NodeRef]] = {
            question.id: {
                option_id: self._classify(node_id)
                for option_id, node_id in question.next.items()
            }
            for question in document.questions
            if question.next is not None
        }
        self._courses: Dict[str, Optional[OutcomeCourse]] = {
            outcome.id: self._course_ref(outcome) for outcome in document.outcomes
        }

        logger.debug(
            "Loaded question graph: %d questions, %d outcomes, %d programs",
            len(self._questions), len(self._outcomes), len(self._programs)
        )

    def _classify(self, node_id: str) -> NodeRef:
        if node_id in self._outcomes:
            return NodeRef.outcome(node_id)
        if node_id in self._questions:
            return NodeRef.question(node_id)
        # Dangling reference, reported when traversal reaches it
        if node_id.startswith(self.meta.outcome_prefix):
            return NodeRef.outcome(node_id)
        return NodeRef.question(node_id)

    @staticmethod
    def _course_ref(outcome: Outcome) -> Optional[OutcomeCourse]:
        if outcome.course is not None:
            return EmbeddedCourse(outcome.course)
        if outcome.program_id:
            return ReferencedProgram(outcome.program_id)
        return None

    @property
    def question_count(self) -> int:
        return len(self._questions)

    def question(self, question_id: str) -> Question:
        """Get question ready for display

        Raises:
            GraphError: If the question is missing, has no options or has
                no transition map
        """
        question = self._questions.get(question_id)
        if question is None:
            raise GraphError("question not found", question_id=question_id)
        if not question.options:
            raise GraphError("question has no options", question_id=question_id)
        if question.next is None:
            raise GraphError("question has no 'next' map", question_id=question_id)
        return question

    def entry_question(self) -> Question:
        return self.question(self.entry_id)

    def transition(self, question_id: str, option_id: str) -> Optional[NodeRef]:
        """Get classified target of an option, or None if it has no transition"""
        return self._transitions.get(question_id, {}).get(option_id)

    def outcome(self, outcome_id: str) -> Outcome:
        """Get outcome by ID

        Raises:
            OutcomeLookupError: If outcome does not exist
        """
        outcome = self._outcomes.get(outcome_id)
        if outcome is None:
            raise OutcomeLookupError(outcome_id)
        return outcome

    def resolve_outcome(self, outcome_id: str) -> ResolvedOutcome:
        """Resolve outcome together with its recommended course

        Embedded courses are returned as-is; referenced programs are looked
        up in the programs document.

        Raises:
            OutcomeLookupError: If the outcome or its program is missing
        """
        outcome = self.outcome(outcome_id)
        course_ref = self._courses.get(outcome_id)

        if isinstance(course_ref, EmbeddedCourse):
            return ResolvedOutcome(outcome=outcome, course=course_ref.course)

        if isinstance(course_ref, ReferencedProgram):
            program = self._programs.get(course_ref.program_id)
            if program is None:
                raise OutcomeLookupError(outcome_id, program_id=course_ref.program_id)
            return ResolvedOutcome(outcome=outcome, course=program)

        raise OutcomeLookupError(outcome_id, program_id="(none)")
