"""Quiz Schemas - Modelos Pydantic para request/response.

Requests formam o portao de validacao: so saem daqui estruturas de dominio
ja tipadas (``to_draft`` / ``to_domain``). Views sao as projecoes serializadas
pela API, sempre em camelCase.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictBool, model_validator
from pydantic.alias_generators import to_camel

from .domain import (
    AnswerResult,
    ChoiceAnswer,
    OptionDraft,
    QuestionDraft,
    QuizRecord,
    ScoringResult,
    SubmittedAnswer,
    TextAnswer,
)
from .enums import QuestionType

TEXT_ANSWER_MAX_LENGTH = 300


class CamelModel(BaseModel):
    """Base com aliases camelCase (aceita snake_case na entrada)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# REQUESTS
# =============================================================================


class CreateQuizRequest(CamelModel):
    """Request para criar/atualizar quiz."""

    title: str = Field(..., min_length=1, max_length=200, description="Titulo do quiz")


class OptionRequest(CamelModel):
    """Alternativa enviada na criacao/atualizacao de pergunta."""

    text: str = Field(..., min_length=1, max_length=500, description="Texto da alternativa")
    is_correct: StrictBool = Field(..., description="Se a alternativa e correta")


class QuestionRequest(CamelModel):
    """Request para criar ou substituir uma pergunta.

    Invariantes por tipo:
        - SINGLE_CHOICE: exatamente 1 alternativa correta
        - MULTIPLE_CHOICE: ao menos 1 alternativa correta
        - TEXT: exatamente 1 opcao (a resposta aceita), com ate 300 caracteres
    """

    text: str = Field(..., min_length=1, max_length=1000, description="Enunciado")
    type: QuestionType = Field(..., description="SINGLE_CHOICE, MULTIPLE_CHOICE ou TEXT")
    options: list[OptionRequest] = Field(..., min_length=1, description="Alternativas")

    @model_validator(mode="after")
    def check_type_invariants(self) -> "QuestionRequest":
        correct = sum(1 for opt in self.options if opt.is_correct)

        if self.type == QuestionType.TEXT:
            valid = len(self.options) == 1 and len(self.options[0].text) <= TEXT_ANSWER_MAX_LENGTH
        elif self.type == QuestionType.SINGLE_CHOICE:
            valid = correct == 1
        else:
            valid = correct >= 1

        if not valid:
            raise ValueError(
                "Invalid question configuration: SINGLE_CHOICE must have exactly 1 correct "
                "answer, MULTIPLE_CHOICE must have at least 1 correct answer, TEXT questions "
                "must have exactly one answer option of at most 300 characters"
            )
        return self

    def to_draft(self) -> QuestionDraft:
        """Converte para o rascunho de dominio.

        Em perguntas TEXT a unica opcao e sempre a resposta aceita.
        """
        force_correct = self.type == QuestionType.TEXT
        return QuestionDraft(
            text=self.text,
            type=self.type,
            options=tuple(
                OptionDraft(text=opt.text, is_correct=force_correct or opt.is_correct)
                for opt in self.options
            ),
        )


class SubmittedAnswerRequest(CamelModel):
    """Resposta individual: ``selectedOptionIds`` OU ``textAnswer``, nunca ambos."""

    question_id: UUID = Field(..., description="ID da pergunta")
    selected_option_ids: list[UUID] | None = Field(
        default=None, description="Alternativas selecionadas (perguntas de escolha)"
    )
    text_answer: str | None = Field(
        default=None, max_length=TEXT_ANSWER_MAX_LENGTH, description="Resposta livre (TEXT)"
    )

    @model_validator(mode="after")
    def check_exactly_one_kind(self) -> "SubmittedAnswerRequest":
        has_selection = bool(self.selected_option_ids)
        has_text = bool(self.text_answer and self.text_answer.strip())

        if not ((has_selection and not self.text_answer) or (has_text and not has_selection)):
            raise ValueError(
                "Each answer must have either selectedOptionIds or textAnswer, but not both"
            )
        return self

    def to_domain(self) -> SubmittedAnswer:
        question_id = str(self.question_id)
        if self.selected_option_ids:
            return ChoiceAnswer(
                question_id=question_id,
                selected_option_ids=tuple(str(opt_id) for opt_id in self.selected_option_ids),
            )
        return TextAnswer(question_id=question_id, text=self.text_answer or "")


class SubmitAnswersRequest(CamelModel):
    """Request de submissao de respostas de um quiz."""

    answers: list[SubmittedAnswerRequest] = Field(..., min_length=1, description="Respostas")

    @model_validator(mode="after")
    def check_unique_questions(self) -> "SubmitAnswersRequest":
        seen: set[UUID] = set()
        for answer in self.answers:
            if answer.question_id in seen:
                raise ValueError(
                    f"Each question can be answered only once (duplicate questionId {answer.question_id})"
                )
            seen.add(answer.question_id)
        return self

    def to_domain(self) -> list[SubmittedAnswer]:
        return [answer.to_domain() for answer in self.answers]


# =============================================================================
# VIEWS
# =============================================================================


class QuizView(CamelModel):
    """Quiz com contagem de perguntas."""

    id: str
    title: str
    created_at: str
    updated_at: str
    question_count: int = 0

    @classmethod
    def from_record(cls, record: QuizRecord) -> "QuizView":
        return cls(
            id=record.id,
            title=record.title,
            created_at=record.created_at,
            updated_at=record.updated_at,
            question_count=record.question_count,
        )


class QuizRef(CamelModel):
    """Referencia resumida ao quiz dono da pergunta."""

    id: str
    title: str


class LearnerOptionView(CamelModel):
    """Alternativa vista pelo aluno. Nao existe campo de correcao."""

    id: str
    text: str


class LearnerQuestionView(CamelModel):
    """Pergunta vista pelo aluno (sem respostas)."""

    id: str
    text: str
    type: QuestionType
    options: list[LearnerOptionView]


class AdminOptionView(CamelModel):
    """Alternativa completa, com ``isCorrect``."""

    id: str
    text: str
    is_correct: bool


class AdminQuestionView(CamelModel):
    """Pergunta completa para gestao."""

    id: str
    quiz_id: str
    text: str
    type: QuestionType
    options: list[AdminOptionView]
    created_at: str
    updated_at: str


class QuestionDetailView(AdminQuestionView):
    """Pergunta completa + quiz dono (GET /api/questions/{id})."""

    quiz: QuizRef


class AnswerResultView(CamelModel):
    question_id: str
    is_correct: bool
    correct_answer: str | list[str]

    @classmethod
    def from_domain(cls, result: AnswerResult) -> "AnswerResultView":
        return cls(
            question_id=result.question_id,
            is_correct=result.is_correct,
            correct_answer=result.correct_answer,
        )


class ScoringResultView(CamelModel):
    """Resultado da submissao: ``{score, total, percentage, results}``."""

    score: int
    total: int
    percentage: int
    results: list[AnswerResultView]

    @classmethod
    def from_domain(cls, result: ScoringResult) -> "ScoringResultView":
        return cls(
            score=result.score,
            total=result.total,
            percentage=result.percentage,
            results=[AnswerResultView.from_domain(r) for r in result.results],
        )
