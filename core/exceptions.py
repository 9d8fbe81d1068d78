"""Excecoes da aplicacao.

Cada excecao carrega o status HTTP correspondente; os handlers em
``server.py`` convertem para o envelope ``{status, message}``.
"""

from __future__ import annotations

from typing import Any


class AppError(Exception):
    """Erro base da aplicacao.

    Args:
        message: Mensagem exposta ao cliente
        status_code: Status HTTP da resposta
        details: Contexto extra (apenas para logs)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, status_code={self.status_code})"


class NotFoundError(AppError):
    """Quiz ou pergunta inexistente."""

    status_code = 404


class InvalidInputError(AppError):
    """Entrada rejeitada pela validacao."""

    status_code = 400


class UnknownAnswerReferenceError(AppError):
    """Resposta referencia uma pergunta fora do quiz.

    Aborta a submissao inteira, nenhum resultado parcial e retornado.
    """

    status_code = 400

    def __init__(self, question_id: str):
        super().__init__(
            f"Question with ID {question_id} not found in this quiz",
            details={"question_id": question_id},
        )
        self.question_id = question_id


class NoQuestionsError(AppError):
    """Quiz sem perguntas nao pode ser pontuado."""

    status_code = 400

    def __init__(self, quiz_id: str):
        super().__init__(
            "No questions found for this quiz",
            details={"quiz_id": quiz_id},
        )


class StoreError(AppError):
    """Falha de persistencia (constraint, conexao, I/O)."""

    status_code = 500
