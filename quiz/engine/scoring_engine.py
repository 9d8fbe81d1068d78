"""Quiz Scoring Engine - Motor de pontuacao de submissoes."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from core.exceptions import UnknownAnswerReferenceError
from core.logger import get_logger

from ..models.domain import (
    AnswerResult,
    ChoiceAnswer,
    QuestionWithOptions,
    ScoringResult,
    SubmittedAnswer,
    TextAnswer,
)
from ..models.enums import QuestionType

logger = get_logger("scoring")


def calculate_percentage(score: int, total: int) -> int:
    """Percentual inteiro com meio arredondando para cima (0.5 -> 1).

    Calculado em aritmetica inteira: floor(100 * score / total + 0.5).

    Args:
        score: Respostas corretas
        total: Total de perguntas (>= 1)
    """
    return (200 * score + total) // (2 * total)


class QuizScoringEngine:
    """Motor de pontuacao para quizzes.

    Funcao pura: recebe as perguntas do quiz (com ``is_correct`` em cada
    alternativa) e as respostas ja validadas, devolve vereditos e agregado.
    Sem I/O e sem estado compartilhado, pode ser usado em paralelo.

    Regras por tipo:
        - TEXT: comparacao sem diferenciar maiusculas e ignorando espacos nas
          pontas (espacos internos contam)
        - SINGLE_CHOICE: exatamente 1 id selecionado, igual ao unico correto
        - MULTIPLE_CHOICE: conjunto selecionado == conjunto correto

    Nao ha credito parcial. Perguntas nao respondidas contam no total.

    Example:
        >>> engine = QuizScoringEngine()
        >>> result = engine.score(questions, answers)
        >>> print(result.percentage)  # 67
    """

    def __init__(self):
        self._evaluators: dict[
            QuestionType, Callable[[QuestionWithOptions, SubmittedAnswer], AnswerResult]
        ] = {
            QuestionType.TEXT: self._evaluate_text,
            QuestionType.SINGLE_CHOICE: self._evaluate_single_choice,
            QuestionType.MULTIPLE_CHOICE: self._evaluate_multiple_choice,
        }

    def score(
        self,
        questions: Sequence[QuestionWithOptions],
        answers: Sequence[SubmittedAnswer],
    ) -> ScoringResult:
        """Pontua uma submissao completa.

        Args:
            questions: Todas as perguntas do quiz (define o total)
            answers: Respostas submetidas, em qualquer quantidade

        Returns:
            ScoringResult com vereditos na ordem das respostas

        Raises:
            UnknownAnswerReferenceError: Se alguma resposta referencia
                pergunta fora do quiz. Nenhum resultado parcial e retornado.
        """
        by_id = {question.id: question for question in questions}

        results: list[AnswerResult] = []
        correct_count = 0

        for answer in answers:
            question = by_id.get(answer.question_id)
            if question is None:
                raise UnknownAnswerReferenceError(answer.question_id)

            result = self.evaluate_answer(question, answer)
            if result.is_correct:
                correct_count += 1
            results.append(result)

        total = len(questions)
        percentage = calculate_percentage(correct_count, total) if total > 0 else 0

        logger.debug(
            f"Submissao pontuada: {correct_count}/{total} ({percentage}%), "
            f"{len(answers)} respostas"
        )

        return ScoringResult(
            score=correct_count,
            total=total,
            percentage=percentage,
            results=results,
        )

    def evaluate_answer(
        self, question: QuestionWithOptions, answer: SubmittedAnswer
    ) -> AnswerResult:
        """Avalia uma resposta individual contra sua pergunta."""
        evaluator = self._evaluators[question.type]
        return evaluator(question, answer)

    # -------------------------------------------------------------------------
    # Comparadores por tipo
    # -------------------------------------------------------------------------

    @staticmethod
    def _selected_ids(answer: SubmittedAnswer) -> list[str]:
        if isinstance(answer, ChoiceAnswer):
            return list(answer.selected_option_ids)
        return []

    def _evaluate_text(
        self, question: QuestionWithOptions, answer: SubmittedAnswer
    ) -> AnswerResult:
        accepted = question.accepted_answer
        submitted = answer.text if isinstance(answer, TextAnswer) else ""

        is_correct = False
        if accepted is not None and submitted:
            is_correct = submitted.strip().lower() == accepted.text.strip().lower()

        return AnswerResult(
            question_id=question.id,
            is_correct=is_correct,
            correct_answer=accepted.text if accepted is not None else "",
        )

    def _evaluate_single_choice(
        self, question: QuestionWithOptions, answer: SubmittedAnswer
    ) -> AnswerResult:
        selected = self._selected_ids(answer)
        correct_options = question.correct_options

        # Pergunta malformada (!= 1 correta) nunca pontua, mas tambem nao falha
        is_correct = (
            len(selected) == 1
            and len(correct_options) == 1
            and selected[0] == correct_options[0].id
        )

        return AnswerResult(
            question_id=question.id,
            is_correct=is_correct,
            correct_answer=correct_options[0].text if correct_options else "",
        )

    def _evaluate_multiple_choice(
        self, question: QuestionWithOptions, answer: SubmittedAnswer
    ) -> AnswerResult:
        selected = set(self._selected_ids(answer))
        correct_options = question.correct_options

        is_correct = selected == {opt.id for opt in correct_options}

        return AnswerResult(
            question_id=question.id,
            is_correct=is_correct,
            correct_answer=[opt.text for opt in correct_options],
        )
