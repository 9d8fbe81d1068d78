"""Quiz Enums - Tipos de pergunta."""

from enum import Enum


class QuestionType(str, Enum):
    """Tipos de pergunta suportados."""

    SINGLE_CHOICE = "SINGLE_CHOICE"  # Exatamente 1 alternativa correta
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"  # 1 ou mais alternativas corretas
    TEXT = "TEXT"  # 1 opcao = resposta aceita
