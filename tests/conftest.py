# =============================================================================
# CONFTEST - Fixtures compartilhadas para todos os testes
# =============================================================================
# Perguntas de exemplo, store em banco temporario e cliente HTTP
# =============================================================================

import os
from unittest.mock import patch

import pytest
import pytest_asyncio


# =============================================================================
# FIXTURES DE DOMINIO
# =============================================================================


def _option(option_id: str, text: str, is_correct: bool):
    from quiz.models.domain import OptionRecord

    return OptionRecord(id=option_id, text=text, is_correct=is_correct)


@pytest.fixture
def single_choice_question():
    """SINGLE_CHOICE '2 + 2' com alternativa correta 'opt-4'."""
    from quiz.models.domain import SingleChoiceQuestion

    return SingleChoiceQuestion(
        id="q-single",
        quiz_id="quiz-1",
        text="What is 2 + 2?",
        options=(
            _option("opt-3", "3", False),
            _option("opt-4", "4", True),
            _option("opt-5", "5", False),
        ),
    )


@pytest.fixture
def multiple_choice_question():
    """MULTIPLE_CHOICE com corretas React, Vue e Angular."""
    from quiz.models.domain import MultipleChoiceQuestion

    return MultipleChoiceQuestion(
        id="q-multi",
        quiz_id="quiz-1",
        text="Which are frontend frameworks?",
        options=(
            _option("opt-react", "React", True),
            _option("opt-django", "Django", False),
            _option("opt-vue", "Vue", True),
            _option("opt-angular", "Angular", True),
        ),
    )


@pytest.fixture
def text_question():
    """TEXT com resposta aceita 'Document Object Model'."""
    from quiz.models.domain import TextQuestion

    return TextQuestion(
        id="q-text",
        quiz_id="quiz-1",
        text="What does DOM stand for?",
        options=(_option("opt-dom", "Document Object Model", True),),
    )


@pytest.fixture
def sample_quiz_questions(single_choice_question, multiple_choice_question, text_question):
    """Quiz completo com um exemplo de cada tipo."""
    return [single_choice_question, multiple_choice_question, text_question]


@pytest.fixture
def scoring_engine():
    from quiz.engine.scoring_engine import QuizScoringEngine

    return QuizScoringEngine()


# =============================================================================
# FIXTURES DE REQUEST
# =============================================================================


@pytest.fixture
def single_choice_payload():
    return {
        "text": "What is 2 + 2?",
        "type": "SINGLE_CHOICE",
        "options": [
            {"text": "3", "isCorrect": False},
            {"text": "4", "isCorrect": True},
            {"text": "5", "isCorrect": False},
        ],
    }


@pytest.fixture
def multiple_choice_payload():
    return {
        "text": "Which are frontend frameworks?",
        "type": "MULTIPLE_CHOICE",
        "options": [
            {"text": "React", "isCorrect": True},
            {"text": "Django", "isCorrect": False},
            {"text": "Vue", "isCorrect": True},
            {"text": "Angular", "isCorrect": True},
        ],
    }


@pytest.fixture
def text_payload():
    return {
        "text": "What does DOM stand for?",
        "type": "TEXT",
        "options": [{"text": "Document Object Model", "isCorrect": True}],
    }


# =============================================================================
# FIXTURES DE STORE
# =============================================================================


@pytest_asyncio.fixture
async def quiz_store(temp_db_path):
    """QuizStore com schema criado em banco temporario."""
    from quiz.storage.quiz_store import QuizStore

    store = QuizStore(temp_db_path)
    await store.init_schema()
    return store


# =============================================================================
# FIXTURES DO FASTAPI
# =============================================================================


@pytest.fixture
def client(temp_db_path):
    """Cliente de teste FastAPI apontando para banco temporario."""
    from fastapi.testclient import TestClient

    import app_state
    from core.config import reload_config

    with patch.dict(os.environ, {"QUIZ_DB_PATH": str(temp_db_path)}):
        reload_config()
        app_state.store = None

        from server import app

        with TestClient(app) as test_client:
            yield test_client

    app_state.store = None
    reload_config()
