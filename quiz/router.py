"""Quiz Router - Endpoints FastAPI de quizzes, perguntas e submissao."""

from __future__ import annotations

from fastapi import APIRouter, Depends

import app_state
from core.responses import send_success
from utils.validators import validate_uuid

from .engine.visibility import to_admin_view
from .models.schemas import (
    CreateQuizRequest,
    QuestionRequest,
    QuizView,
    ScoringResultView,
    SubmitAnswersRequest,
)
from .services.question_service import QuestionService
from .services.quiz_service import QuizService


router = APIRouter(prefix="/api", tags=["Quiz"])


# =============================================================================
# DEPENDENCY INJECTION
# =============================================================================


async def get_quiz_service() -> QuizService:
    """Dependency para obter QuizService."""
    return QuizService(await app_state.get_store())


async def get_question_service() -> QuestionService:
    """Dependency para obter QuestionService."""
    return QuestionService(await app_state.get_store())


# =============================================================================
# QUIZZES
# =============================================================================


@router.post("/quizzes")
async def create_quiz(
    request: CreateQuizRequest,
    service: QuizService = Depends(get_quiz_service),
):
    """Cria um quiz vazio."""
    quiz = await service.create_quiz(request.title)
    return send_success(QuizView.from_record(quiz), "Quiz created successfully")


@router.get("/quizzes")
async def list_quizzes(service: QuizService = Depends(get_quiz_service)):
    """Lista quizzes (mais recentes primeiro) com contagem de perguntas."""
    quizzes = await service.list_quizzes()
    return send_success(
        [QuizView.from_record(q) for q in quizzes], "Quizzes fetched successfully"
    )


@router.get("/quizzes/{quiz_id}")
async def get_quiz(quiz_id: str, service: QuizService = Depends(get_quiz_service)):
    quiz = await service.get_quiz(validate_uuid(quiz_id, "id", "quiz"))
    return send_success(QuizView.from_record(quiz), "Quiz fetched successfully")


@router.put("/quizzes/{quiz_id}")
async def update_quiz(
    quiz_id: str,
    request: CreateQuizRequest,
    service: QuizService = Depends(get_quiz_service),
):
    quiz = await service.update_quiz(validate_uuid(quiz_id, "id", "quiz"), request.title)
    return send_success(QuizView.from_record(quiz), "Quiz updated successfully")


@router.delete("/quizzes/{quiz_id}")
async def delete_quiz(quiz_id: str, service: QuizService = Depends(get_quiz_service)):
    """Remove quiz com todas as perguntas e alternativas."""
    result = await service.delete_quiz(validate_uuid(quiz_id, "id", "quiz"))
    return send_success(result, "Quiz deleted successfully")


# =============================================================================
# PERGUNTAS DO QUIZ
# =============================================================================


@router.post("/quizzes/{quiz_id}/questions")
async def create_question(
    quiz_id: str,
    request: QuestionRequest,
    service: QuestionService = Depends(get_question_service),
):
    """Adiciona pergunta (com alternativas) ao quiz."""
    question = await service.create_question(
        validate_uuid(quiz_id, "quizId", "quiz"), request.to_draft()
    )
    return send_success(to_admin_view(question), "Question created successfully")


@router.get("/quizzes/{quiz_id}/questions")
async def get_quiz_questions(
    quiz_id: str,
    service: QuestionService = Depends(get_question_service),
):
    """Perguntas para responder o quiz (sem ``isCorrect``)."""
    questions = await service.get_learner_questions(validate_uuid(quiz_id, "quizId", "quiz"))
    return send_success(questions, "Quiz questions fetched successfully")


@router.get("/quizzes/{quiz_id}/questions/admin")
async def get_quiz_questions_with_answers(
    quiz_id: str,
    service: QuestionService = Depends(get_question_service),
):
    """Perguntas completas, com alternativas corretas (gestao)."""
    questions = await service.get_admin_questions(validate_uuid(quiz_id, "quizId", "quiz"))
    return send_success(questions, "Quiz questions with answers fetched successfully")


@router.post("/quizzes/{quiz_id}/submit")
async def submit_quiz_answers(
    quiz_id: str,
    request: SubmitAnswersRequest,
    service: QuestionService = Depends(get_question_service),
):
    """Submete respostas e retorna a pontuacao.

    - ``total`` e sempre o numero de perguntas do quiz
    - Resposta para pergunta de outro quiz aborta a submissao inteira (400)
    """
    result = await service.submit_answers(
        validate_uuid(quiz_id, "quizId", "quiz"), request.to_domain()
    )
    return send_success(ScoringResultView.from_domain(result), "Quiz answers submitted successfully")


# =============================================================================
# PERGUNTA INDIVIDUAL
# =============================================================================


@router.get("/questions/{question_id}")
async def get_question(
    question_id: str,
    service: QuestionService = Depends(get_question_service),
):
    detail = await service.get_question(validate_uuid(question_id, "questionId", "question"))
    return send_success(detail, "Question fetched successfully")


@router.put("/questions/{question_id}")
async def update_question(
    question_id: str,
    request: QuestionRequest,
    service: QuestionService = Depends(get_question_service),
):
    """Substitui enunciado, tipo e todas as alternativas da pergunta."""
    question = await service.update_question(
        validate_uuid(question_id, "questionId", "question"), request.to_draft()
    )
    return send_success(to_admin_view(question), "Question updated successfully")


@router.delete("/questions/{question_id}")
async def delete_question(
    question_id: str,
    service: QuestionService = Depends(get_question_service),
):
    result = await service.delete_question(validate_uuid(question_id, "questionId", "question"))
    return send_success(result, "Question deleted successfully")
