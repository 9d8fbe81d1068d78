"""Projecoes de visibilidade das perguntas.

Duas visoes sobre o mesmo registro:
    - aluno: sem qualquer indicacao de alternativa correta
    - admin: registro completo, com ``isCorrect``
"""

from __future__ import annotations

from collections.abc import Iterable

from ..models.domain import QuestionWithOptions, QuizRecord
from ..models.schemas import (
    AdminOptionView,
    AdminQuestionView,
    LearnerOptionView,
    LearnerQuestionView,
    QuestionDetailView,
    QuizRef,
)


def to_learner_view(question: QuestionWithOptions) -> LearnerQuestionView:
    """Projeta a pergunta para o aluno.

    ``LearnerOptionView`` nao declara campo de correcao, entao ele nunca e
    serializado, mesmo que o registro de origem o carregue.
    """
    return LearnerQuestionView(
        id=question.id,
        text=question.text,
        type=question.type,
        options=[LearnerOptionView(id=opt.id, text=opt.text) for opt in question.options],
    )


def to_admin_view(question: QuestionWithOptions) -> AdminQuestionView:
    """Projeta a pergunta completa (gestao)."""
    return AdminQuestionView(
        id=question.id,
        quiz_id=question.quiz_id,
        text=question.text,
        type=question.type,
        options=[
            AdminOptionView(id=opt.id, text=opt.text, is_correct=opt.is_correct)
            for opt in question.options
        ],
        created_at=question.created_at,
        updated_at=question.updated_at,
    )


def to_question_detail(question: QuestionWithOptions, quiz: QuizRecord) -> QuestionDetailView:
    """Visao admin + referencia ao quiz dono."""
    admin = to_admin_view(question)
    return QuestionDetailView(
        **admin.model_dump(),
        quiz=QuizRef(id=quiz.id, title=quiz.title),
    )


def learner_views(questions: Iterable[QuestionWithOptions]) -> list[LearnerQuestionView]:
    return [to_learner_view(q) for q in questions]


def admin_views(questions: Iterable[QuestionWithOptions]) -> list[AdminQuestionView]:
    return [to_admin_view(q) for q in questions]
