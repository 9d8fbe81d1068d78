"""Quiz Service - CRUD de quizzes."""

from __future__ import annotations

from core.exceptions import NotFoundError
from core.logger import get_logger

from ..models.domain import QuizRecord
from ..storage.quiz_store import QuizStore

logger = get_logger("quiz")


class QuizService:
    """Operacoes de quiz com verificacao de existencia.

    Args:
        store: QuizStore configurado
    """

    def __init__(self, store: QuizStore):
        self.store = store

    async def create_quiz(self, title: str) -> QuizRecord:
        logger.info(f"Criando quiz: {title!r}")
        quiz = await self.store.create_quiz(title)
        logger.info(f"Quiz criado: {quiz.id}")
        return quiz

    async def list_quizzes(self) -> list[QuizRecord]:
        quizzes = await self.store.list_quizzes()
        logger.info(f"Quizzes listados: {len(quizzes)}")
        return quizzes

    async def get_quiz(self, quiz_id: str) -> QuizRecord:
        """Busca quiz ou levanta NotFoundError."""
        quiz = await self.store.get_quiz(quiz_id)
        if quiz is None:
            logger.warning(f"Quiz nao encontrado: {quiz_id}")
            raise NotFoundError("Quiz not found", details={"quiz_id": quiz_id})
        return quiz

    async def update_quiz(self, quiz_id: str, title: str) -> QuizRecord:
        logger.info(f"Atualizando quiz {quiz_id}: {title!r}")
        quiz = await self.store.update_quiz(quiz_id, title)
        if quiz is None:
            raise NotFoundError("Quiz not found", details={"quiz_id": quiz_id})
        logger.info(f"Quiz atualizado: {quiz_id}")
        return quiz

    async def delete_quiz(self, quiz_id: str) -> dict[str, str]:
        """Remove quiz (perguntas e alternativas em cascata)."""
        logger.info(f"Removendo quiz: {quiz_id}")
        if not await self.store.delete_quiz(quiz_id):
            raise NotFoundError("Quiz not found", details={"quiz_id": quiz_id})
        logger.info(f"Quiz removido: {quiz_id}")
        return {"message": "Quiz deleted successfully"}
