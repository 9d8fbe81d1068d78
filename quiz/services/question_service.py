"""Question Service - Perguntas, projecoes e submissao de respostas."""

from __future__ import annotations

from collections.abc import Sequence

from core.exceptions import NoQuestionsError, NotFoundError
from core.logger import get_logger

from ..engine.scoring_engine import QuizScoringEngine
from ..engine.visibility import admin_views, learner_views, to_question_detail
from ..models.domain import (
    QuestionDraft,
    QuestionWithOptions,
    QuizRecord,
    ScoringResult,
    SubmittedAnswer,
)
from ..models.schemas import AdminQuestionView, LearnerQuestionView, QuestionDetailView
from ..storage.quiz_store import QuizStore

logger = get_logger("question")


class QuestionService:
    """Orquestra store e motor de pontuacao.

    Toda operacao verifica a existencia do quiz/pergunta antes de delegar.

    Args:
        store: QuizStore configurado
        scoring: Motor de pontuacao (default: QuizScoringEngine())
    """

    def __init__(self, store: QuizStore, scoring: QuizScoringEngine | None = None):
        self.store = store
        self.scoring = scoring or QuizScoringEngine()

    async def _require_quiz(self, quiz_id: str) -> QuizRecord:
        quiz = await self.store.get_quiz(quiz_id)
        if quiz is None:
            logger.warning(f"Quiz nao encontrado: {quiz_id}")
            raise NotFoundError("Quiz not found", details={"quiz_id": quiz_id})
        return quiz

    async def _require_question(self, question_id: str) -> QuestionWithOptions:
        question = await self.store.get_question(question_id)
        if question is None:
            logger.warning(f"Pergunta nao encontrada: {question_id}")
            raise NotFoundError("Question not found", details={"question_id": question_id})
        return question

    # =========================================================================
    # Perguntas por quiz
    # =========================================================================

    async def create_question(self, quiz_id: str, draft: QuestionDraft) -> QuestionWithOptions:
        logger.info(f"Criando pergunta {draft.type.value} no quiz {quiz_id}")
        await self._require_quiz(quiz_id)
        question = await self.store.create_question(quiz_id, draft)
        logger.info(f"Pergunta criada: {question.id}")
        return question

    async def fetch_quiz_questions_with_answers(self, quiz_id: str) -> list[QuestionWithOptions]:
        """Todas as perguntas do quiz com ``is_correct`` (uso interno/admin).

        Raises:
            NotFoundError: Se o quiz nao existir
        """
        await self._require_quiz(quiz_id)
        return await self.store.list_questions(quiz_id)

    async def get_learner_questions(self, quiz_id: str) -> list[LearnerQuestionView]:
        """Perguntas para responder o quiz, sem revelar respostas."""
        questions = await self.fetch_quiz_questions_with_answers(quiz_id)
        logger.info(f"Perguntas (aluno) do quiz {quiz_id}: {len(questions)}")
        return learner_views(questions)

    async def get_admin_questions(self, quiz_id: str) -> list[AdminQuestionView]:
        """Perguntas completas, com alternativas corretas."""
        questions = await self.fetch_quiz_questions_with_answers(quiz_id)
        logger.info(f"Perguntas (admin) do quiz {quiz_id}: {len(questions)}")
        return admin_views(questions)

    async def submit_answers(
        self, quiz_id: str, answers: Sequence[SubmittedAnswer]
    ) -> ScoringResult:
        """Pontua uma submissao.

        O estado das alternativas lido aqui e o que vale para esta submissao.

        Raises:
            NotFoundError: Quiz inexistente
            NoQuestionsError: Quiz sem perguntas
            UnknownAnswerReferenceError: Resposta para pergunta de outro quiz
        """
        logger.info(f"Submissao no quiz {quiz_id}: {len(answers)} respostas")

        questions = await self.fetch_quiz_questions_with_answers(quiz_id)
        if not questions:
            raise NoQuestionsError(quiz_id)

        result = self.scoring.score(questions, answers)

        logger.info(
            f"Quiz {quiz_id} pontuado: {result.score}/{result.total} ({result.percentage}%)"
        )
        return result

    # =========================================================================
    # Pergunta individual
    # =========================================================================

    async def get_question(self, question_id: str) -> QuestionDetailView:
        question = await self._require_question(question_id)
        quiz = await self._require_quiz(question.quiz_id)
        return to_question_detail(question, quiz)

    async def update_question(
        self, question_id: str, draft: QuestionDraft
    ) -> QuestionWithOptions:
        """Atualiza enunciado/tipo e substitui o conjunto de alternativas."""
        logger.info(f"Atualizando pergunta: {question_id}")
        question = await self.store.replace_question(question_id, draft)
        if question is None:
            raise NotFoundError("Question not found", details={"question_id": question_id})
        logger.info(f"Pergunta atualizada: {question_id}")
        return question

    async def delete_question(self, question_id: str) -> dict[str, str]:
        logger.info(f"Removendo pergunta: {question_id}")
        if not await self.store.delete_question(question_id):
            raise NotFoundError("Question not found", details={"question_id": question_id})
        logger.info(f"Pergunta removida: {question_id}")
        return {"message": "Question deleted successfully"}
