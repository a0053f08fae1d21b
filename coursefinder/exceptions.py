"""Course Finder Exception Classes

Base exception hierarchy for the course finder questionnaire.
All custom exceptions include help_text for actionable user guidance.
"""

from typing import Optional


class CourseFinderError(Exception):
    """Base exception for all course finder errors

    All course finder exceptions should inherit from this class to enable
    consistent error handling and user-friendly error messages.

    Attributes:
        message: Human-readable error description
        help_text: Optional actionable guidance for resolving the error
    """

    def __init__(self, message: str, help_text: str = None):
        """Initialize course finder error with message and optional help text

        Args:
            message: Error description
            help_text: Optional remediation guidance
        """
        self.message = message
        self.help_text = help_text
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message with help text if available"""
        if self.help_text:
            return f"{self.message}\n\nHelp: {self.help_text}"
        return self.message


class DataLoadError(CourseFinderError):
    """Raised when a questionnaire document cannot be read or validated

    The session cannot start without its documents. The error is not
    retried automatically; the user is asked to retry the load.
    """

    def __init__(
        self,
        reason: str,
        document_path: Optional[str] = None,
        line_number: Optional[int] = None
    ):
        """Initialize data load error

        Args:
            reason: Description of the load failure
            document_path: Path of the document that failed to load
            line_number: Line in the document where validation failed
        """
        message = "Failed to load quiz data"
        if document_path:
            message += f" from {document_path}"
        if line_number:
            message += f" (line {line_number})"
        message += f": {reason}"

        super().__init__(message, "Check the document and retry the load")
        self.reason = reason
        self.document_path = document_path
        self.line_number = line_number


class GraphError(CourseFinderError):
    """Raised when the question graph is malformed

    Covers a missing entry question, a question without options, and a
    question without a transition map. Indicates an authoring bug in the
    questions document rather than a user mistake.
    """

    def __init__(self, reason: str, question_id: Optional[str] = None):
        """Initialize graph error

        Args:
            reason: Description of the malformed content
            question_id: Question where the problem was found
        """
        message = f"Content error: {reason}"
        if question_id:
            message += f" (question '{question_id}')"

        super().__init__(
            message,
            "Fix the questions document and start over"
        )
        self.reason = reason
        self.question_id = question_id


class NavigationError(CourseFinderError):
    """Raised when a chosen option has no transition

    Handled like GraphError, but carries the offending question and
    option for diagnostics.
    """

    def __init__(self, reason: str, question_id: str, option_id: str):
        """Initialize navigation error

        Args:
            reason: Description of the failure, e.g. "missing transition"
            question_id: Question being answered
            option_id: Option that has no transition
        """
        message = (
            f"Navigation failed: {reason} for option '{option_id}' "
            f"of question '{question_id}'"
        )

        super().__init__(
            message,
            f"Add '{option_id}' to the 'next' map of question '{question_id}'"
        )
        self.reason = reason
        self.question_id = question_id
        self.option_id = option_id


class OutcomeLookupError(CourseFinderError, LookupError):
    """Raised when an outcome or its program cannot be found

    Shown to the user as "result not found". The engine keeps running and
    the session can be restarted.
    """

    def __init__(
        self,
        outcome_id: str,
        program_id: Optional[str] = None
    ):
        """Initialize outcome lookup error

        Args:
            outcome_id: Outcome being resolved
            program_id: Program reference that could not be resolved
        """
        if program_id:
            message = f"Result not found: program '{program_id}' for outcome '{outcome_id}'"
            help_text = f"Add program '{program_id}' to the programs document"
        else:
            message = f"Result not found: outcome '{outcome_id}'"
            help_text = f"Add outcome '{outcome_id}' to the questions document"

        super().__init__(message, help_text)
        self.outcome_id = outcome_id
        self.program_id = program_id
