"""Quiz Engines - Logica de negocios pura (sem I/O)."""

from .scoring_engine import QuizScoringEngine, calculate_percentage
from .visibility import (
    admin_views,
    learner_views,
    to_admin_view,
    to_learner_view,
    to_question_detail,
)

__all__ = [
    "QuizScoringEngine",
    "calculate_percentage",
    "to_learner_view",
    "to_admin_view",
    "to_question_detail",
    "learner_views",
    "admin_views",
]
