"""Quiz Domain - Tipos de dominio consumidos pelo motor de pontuacao.

As perguntas formam uma uniao discriminada por ``type``; o motor despacha
por esse campo. Todos os tipos sao imutaveis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from .enums import QuestionType


@dataclass(frozen=True)
class OptionRecord:
    """Alternativa persistida (ou resposta aceita, em perguntas TEXT)."""

    id: str
    text: str
    is_correct: bool


@dataclass(frozen=True)
class QuizRecord:
    """Quiz persistido, com contagem de perguntas."""

    id: str
    title: str
    created_at: str
    updated_at: str
    question_count: int = 0


@dataclass(frozen=True)
class _QuestionBase:
    id: str
    quiz_id: str
    text: str
    options: tuple[OptionRecord, ...]
    created_at: str = ""
    updated_at: str = ""

    type: ClassVar[QuestionType]

    @property
    def correct_options(self) -> list[OptionRecord]:
        """Alternativas corretas, na ordem da pergunta."""
        return [opt for opt in self.options if opt.is_correct]


@dataclass(frozen=True)
class SingleChoiceQuestion(_QuestionBase):
    type: ClassVar[QuestionType] = QuestionType.SINGLE_CHOICE


@dataclass(frozen=True)
class MultipleChoiceQuestion(_QuestionBase):
    type: ClassVar[QuestionType] = QuestionType.MULTIPLE_CHOICE


@dataclass(frozen=True)
class TextQuestion(_QuestionBase):
    type: ClassVar[QuestionType] = QuestionType.TEXT

    @property
    def accepted_answer(self) -> OptionRecord | None:
        """Opcao com a resposta aceita (None se o dado estiver corrompido)."""
        for opt in self.options:
            if opt.is_correct:
                return opt
        return None


QuestionWithOptions = Union[SingleChoiceQuestion, MultipleChoiceQuestion, TextQuestion]

QUESTION_CLASSES: dict[QuestionType, type] = {
    QuestionType.SINGLE_CHOICE: SingleChoiceQuestion,
    QuestionType.MULTIPLE_CHOICE: MultipleChoiceQuestion,
    QuestionType.TEXT: TextQuestion,
}


def build_question(
    question_type: QuestionType | str,
    *,
    id: str,
    quiz_id: str,
    text: str,
    options: list[OptionRecord] | tuple[OptionRecord, ...],
    created_at: str = "",
    updated_at: str = "",
) -> QuestionWithOptions:
    """Constroi a variante correta da uniao a partir do tipo."""
    cls = QUESTION_CLASSES[QuestionType(question_type)]
    return cls(
        id=id,
        quiz_id=quiz_id,
        text=text,
        options=tuple(options),
        created_at=created_at,
        updated_at=updated_at,
    )


@dataclass(frozen=True)
class OptionDraft:
    """Alternativa ainda nao persistida."""

    text: str
    is_correct: bool


@dataclass(frozen=True)
class QuestionDraft:
    """Pergunta validada, pronta para criacao ou substituicao."""

    text: str
    type: QuestionType
    options: tuple[OptionDraft, ...]


@dataclass(frozen=True)
class ChoiceAnswer:
    """Resposta de pergunta de escolha (ids selecionados)."""

    question_id: str
    selected_option_ids: tuple[str, ...]


@dataclass(frozen=True)
class TextAnswer:
    """Resposta livre de pergunta TEXT."""

    question_id: str
    text: str


SubmittedAnswer = Union[ChoiceAnswer, TextAnswer]


@dataclass(frozen=True)
class AnswerResult:
    """Veredito de uma resposta submetida."""

    question_id: str
    is_correct: bool
    correct_answer: str | list[str]


@dataclass(frozen=True)
class ScoringResult:
    """Resultado agregado da submissao.

    Attributes:
        score: Respostas corretas
        total: Total de perguntas do quiz (respondidas ou nao)
        percentage: round(100 * score / total), meio arredonda para cima
        results: Vereditos na ordem das respostas submetidas
    """

    score: int
    total: int
    percentage: int
    results: list[AnswerResult] = field(default_factory=list)
