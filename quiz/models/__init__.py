"""Quiz Models - Enums, dominio e schemas."""

from .domain import (
    AnswerResult,
    ChoiceAnswer,
    MultipleChoiceQuestion,
    OptionDraft,
    OptionRecord,
    QuestionDraft,
    QuestionWithOptions,
    QuizRecord,
    ScoringResult,
    SingleChoiceQuestion,
    SubmittedAnswer,
    TextAnswer,
    TextQuestion,
    build_question,
)
from .enums import QuestionType
from .schemas import (
    AdminOptionView,
    AdminQuestionView,
    AnswerResultView,
    CreateQuizRequest,
    LearnerOptionView,
    LearnerQuestionView,
    OptionRequest,
    QuestionDetailView,
    QuestionRequest,
    QuizRef,
    QuizView,
    ScoringResultView,
    SubmitAnswersRequest,
    SubmittedAnswerRequest,
)

__all__ = [
    # Enums
    "QuestionType",
    # Domain
    "OptionRecord",
    "QuizRecord",
    "SingleChoiceQuestion",
    "MultipleChoiceQuestion",
    "TextQuestion",
    "QuestionWithOptions",
    "build_question",
    "OptionDraft",
    "QuestionDraft",
    "ChoiceAnswer",
    "TextAnswer",
    "SubmittedAnswer",
    "AnswerResult",
    "ScoringResult",
    # Requests
    "CreateQuizRequest",
    "OptionRequest",
    "QuestionRequest",
    "SubmittedAnswerRequest",
    "SubmitAnswersRequest",
    # Views
    "QuizView",
    "QuizRef",
    "LearnerOptionView",
    "LearnerQuestionView",
    "AdminOptionView",
    "AdminQuestionView",
    "QuestionDetailView",
    "AnswerResultView",
    "ScoringResultView",
]
