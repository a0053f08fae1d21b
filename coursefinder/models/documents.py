"""Questionnaire document Pydantic models"""
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Dict, List, Optional

from pydantic.alias_generators import to_camel


DEFAULT_OUTCOME_PREFIX = "out_"


class DocumentModel(BaseModel):
    """Base for document models: camelCase keys, snake_case attributes"""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True
    )


class FeedbackPayload(DocumentModel):
    """Message shown after an option is chosen"""
    icon: Optional[str] = Field(None, description="Decorative icon")
    title: Optional[str] = Field(None, description="Title template, may contain {name}")
    message: Optional[str] = Field(None, description="Message template, may contain {name}")


class QuestionFeedback(DocumentModel):
    """Per-question feedback settings"""
    enabled: Optional[bool] = Field(None, description="Feedback toggle for all options")
    messages: Dict[str, FeedbackPayload] = Field(
        default_factory=dict,
        description="Feedback payloads keyed by option ID"
    )


class Option(DocumentModel):
    """Answer option of a question"""
    id: str = Field(..., description="Option identifier, unique within its question")
    label: str = Field(..., description="Label text, may start with a glyph")
    description: Optional[str] = Field(None, description="Longer option description")
    feedback: Optional[FeedbackPayload] = Field(None, description="Option feedback payload")


class Question(DocumentModel):
    """Questionnaire question definition"""
    id: str = Field(..., description="Unique question identifier")
    text: str = Field(..., description="Question prompt text")
    subtitle: Optional[str] = Field(None, description="Optional subtitle")
    ui: str = Field("list", description="Presentation hint")
    options: List[Option] = Field(default_factory=list, description="Ordered options")
    next: Optional[Dict[str, str]] = Field(None, description="Option ID to next node ID")
    feedback: Optional[QuestionFeedback] = Field(None, description="Feedback settings")

    @field_validator("options")
    @classmethod
    def validate_unique_option_ids(cls, v):
        """Validate option IDs are unique within the question"""
        option_ids = [option.id for option in v]
        if len(option_ids) != len(set(option_ids)):
            raise ValueError("Duplicate option IDs found in question")
        return v

    def find_option(self, option_id: str) -> Optional[Option]:
        """Return option with given ID, or None"""
        for option in self.options:
            if option.id == option_id:
                return option
        return None


class Course(DocumentModel):
    """Recommended program or course"""
    title: str = Field(..., description="Course title")
    campus: str = Field(..., description="Campus offering the course")
    url: str = Field(..., description="Course page URL")
    notes: Optional[str] = Field(None, description="Additional notes")


class Program(Course):
    """Entry of the separate programs document"""
    id: str = Field(..., description="Unique program identifier")


class Outcome(DocumentModel):
    """Terminal node with a recommendation"""
    id: str = Field(..., description="Unique outcome identifier")
    title: str = Field(..., description="Outcome title")
    blurb: str = Field(..., description="Short description")
    description: Optional[str] = Field(None, description="Long-form markdown description")
    course: Optional[Course] = Field(None, description="Embedded course")
    program_id: Optional[str] = Field(None, description="Reference into the programs document")


class Meta(DocumentModel):
    """Questionnaire metadata"""
    entry: Optional[str] = Field(None, description="Entry question ID")
    outcome_prefix: str = Field(DEFAULT_OUTCOME_PREFIX, description="Reserved outcome ID prefix")
    max_steps: Optional[int] = Field(None, description="Maximum expected step count")
    progress_weights: Dict[str, float] = Field(
        default_factory=dict,
        description="Per-question progress contribution"
    )

    @field_validator("max_steps")
    @classmethod
    def validate_max_steps(cls, v):
        """Validate declared step count is positive"""
        if v is not None and v <= 0:
            raise ValueError("maxSteps must be positive")
        return v

    @field_validator("progress_weights")
    @classmethod
    def validate_weights(cls, v):
        """Validate progress weights are non-negative"""
        negative = [question_id for question_id, weight in v.items() if weight < 0]
        if negative:
            raise ValueError(f"Negative progress weights: {', '.join(negative)}")
        return v


class QuestionsDocument(DocumentModel):
    """Complete questionnaire definition"""
    meta: Meta = Field(default_factory=Meta, description="Questionnaire metadata")
    questions: List[Question] = Field(..., description="Questions")
    outcomes: List[Outcome] = Field(default_factory=list, description="Outcomes")

    @model_validator(mode="after")
    def validate_unique_ids(self):
        """Validate question and outcome IDs are unique"""
        for kind, items in (("question", self.questions), ("outcome", self.outcomes)):
            ids = [item.id for item in items]
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            if duplicates:
                raise ValueError(f"Duplicate {kind} IDs found: {', '.join(duplicates)}")
        return self


class FeedbackSettings(DocumentModel):
    """Global feedback settings"""
    enabled: bool = Field(False, description="Master switch for feedback")
    default_enabled: bool = Field(False, description="Default for questions without a toggle")
    default_icon: str = Field("✨", description="Icon when none is configured")
    default_title: str = Field("Great choice, {name}!", description="Title when none is configured")
    default_message: str = Field(
        "You're on the right track to finding your perfect pathway!",
        description="Message when no payload exists"
    )
    fallback_message: str = Field(
        "You're on the right track!",
        description="Message when a payload omits one"
    )


class YearChoice(DocumentModel):
    """Selectable school year on the welcome flow"""
    id: str
    label: str


class AudienceSettings(DocumentModel):
    """Welcome flow settings"""
    years: List[YearChoice] = Field(default_factory=list, description="Year choices")
    parent_year: Optional[str] = Field("parent", description="Year ID that marks a parent")
    parent_message: Optional[str] = Field(None, description="Message shown to parents")


class AppConfig(DocumentModel):
    """Optional config document"""
    feedback: FeedbackSettings = Field(default_factory=FeedbackSettings)
    audience: AudienceSettings = Field(default_factory=AudienceSettings)
