"""Quiz Storage - Persistencia em SQLite."""

from .quiz_store import QuizStore

__all__ = ["QuizStore"]
