"""FeedbackResolver for messages shown after an option is chosen"""
from typing import Optional

from ..models.documents import FeedbackPayload, FeedbackSettings, Question
from ..models.session import FeedbackMessage

NAME_TOKEN = "{name}"


class FeedbackResolver:
    """Resolve feedback applicability and content through a fallback chain

    Layers, most specific first:
        1. a per-option payload, embedded in the option or keyed by option
           ID in the question's feedback messages
        2. the question's feedback toggle
        3. the global default toggle

    The global master switch disables feedback for every layer.
    """

    def __init__(self, settings: Optional[FeedbackSettings] = None, user_name: str = ""):
        """Initialize resolver

        Args:
            settings: Global feedback settings; feedback is off without them
            user_name: Name substituted into titles and messages
        """
        self.settings = settings or FeedbackSettings()
        self.user_name = user_name

    @staticmethod
    def payload_for(question: Question, option_id: str) -> Optional[FeedbackPayload]:
        """Find per-option payload in either schema layout"""
        option = question.find_option(option_id)
        if option is not None and option.feedback is not None:
            return option.feedback
        if question.feedback is not None:
            return question.feedback.messages.get(option_id)
        return None

    def is_applicable(self, question: Question, option_id: str) -> bool:
        """Check whether feedback should be shown for a selection"""
        if not self.settings.enabled:
            return False

        if self.payload_for(question, option_id) is not None:
            return True

        if question.feedback is not None and question.feedback.enabled is not None:
            return question.feedback.enabled

        return self.settings.default_enabled

    def resolve(self, question: Question, option_id: str) -> FeedbackMessage:
        """Build personalized feedback for a selection

        Missing payload fields fall back to templated defaults; with no
        payload at all the fixed default triple is returned.
        """
        payload = self.payload_for(question, option_id)
        if payload is None:
            return FeedbackMessage(
                icon=self.settings.default_icon,
                title=self._personalize(self.settings.default_title),
                message=self._personalize(self.settings.default_message)
            )

        return FeedbackMessage(
            icon=payload.icon or self.settings.default_icon,
            title=self._personalize(payload.title or self.settings.default_title),
            message=self._personalize(payload.message or self.settings.fallback_message)
        )

    def _personalize(self, template: str) -> str:
        return template.replace(NAME_TOKEN, self.user_name)
