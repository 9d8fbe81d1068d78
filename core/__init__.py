"""Core module - configuracao, logging, excecoes e envelope de resposta."""

from .config import QuizAPIConfig, get_config, reload_config
from .exceptions import (
    AppError,
    InvalidInputError,
    NoQuestionsError,
    NotFoundError,
    StoreError,
    UnknownAnswerReferenceError,
)
from .logger import get_logger, setup_logging

__all__ = [
    # Config
    "QuizAPIConfig",
    "get_config",
    "reload_config",
    # Exceptions
    "AppError",
    "InvalidInputError",
    "NoQuestionsError",
    "NotFoundError",
    "StoreError",
    "UnknownAnswerReferenceError",
    # Logging
    "get_logger",
    "setup_logging",
]
