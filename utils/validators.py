"""Validadores de entrada para parametros de rota."""

import uuid

from core.exceptions import InvalidInputError


def validate_uuid(value: str, field: str, label: str) -> str:
    """Valida identificador UUID vindo da URL.

    Args:
        value: Valor recebido
        field: Nome do parametro (ex: ``quizId``)
        label: Entidade para a mensagem (ex: ``quiz``)

    Returns:
        UUID normalizado (minusculo, com hifens)

    Raises:
        InvalidInputError: Se o valor nao for um UUID
    """
    try:
        return str(uuid.UUID(value))
    except (ValueError, TypeError, AttributeError):
        raise InvalidInputError(
            message=f"Parameter validation failed: {field}: Invalid {label} ID format",
            details={field: str(value)[:50]},
        ) from None
