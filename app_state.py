"""Core module - shared state and helper functions."""

from __future__ import annotations

from typing import Optional

from core.config import get_config
from core.logger import get_logger
from quiz.storage.quiz_store import QuizStore

logger = get_logger("app_state")

# =============================================================================
# GLOBAL STATE
# =============================================================================

store: Optional[QuizStore] = None


async def init_store(db_path: Optional[str] = None) -> QuizStore:
    """Create the QuizStore and make sure the schema exists.

    Args:
        db_path: Overrides ``QUIZ_DB_PATH`` (used by tests).
    """
    global store

    path = db_path or str(get_config().db_path)
    store = QuizStore(path)
    await store.init_schema()
    logger.info(f"QuizStore ready at {path}")
    return store


async def get_store() -> QuizStore:
    """Get QuizStore instance (created lazily on first use)."""
    global store
    if store is None:
        await init_store()
    return store


async def cleanup():
    """Release shared state on shutdown."""
    global store
    if store is not None:
        logger.info("QuizStore released")
        store = None
