"""Quiz Module - Autoria de quizzes e pontuacao de respostas.

Arquitetura:
- models/: Enums, tipos de dominio, Schemas Pydantic
- engine/: QuizScoringEngine, projecoes de visibilidade
- storage/: QuizStore (SQLite)
- services/: QuizService, QuestionService
- router.py: FastAPI endpoints
"""

from .engine import QuizScoringEngine
from .models import QuestionType, ScoringResult
from .services import QuestionService, QuizService
from .storage import QuizStore

__all__ = [
    # Models
    "QuestionType",
    "ScoringResult",
    # Engines
    "QuizScoringEngine",
    # Services
    "QuizService",
    "QuestionService",
    # Storage
    "QuizStore",
]
