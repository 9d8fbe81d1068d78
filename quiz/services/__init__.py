"""Quiz Services - Orquestracao entre store e motores."""

from .question_service import QuestionService
from .quiz_service import QuizService

__all__ = ["QuizService", "QuestionService"]
