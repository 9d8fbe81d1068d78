# =============================================================================
# CONFTEST - Pytest Fixtures Globais
# =============================================================================
# Ambiente de teste e banco temporario, sem dependencias externas
# =============================================================================

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Adicionar root ao path
sys.path.insert(0, str(Path(__file__).parent))


# =============================================================================
# FIXTURES DE AMBIENTE
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_env():
    """Configura variáveis de ambiente para testes."""
    env_vars = {
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "ERROR",  # Reduzir logs em testes
        "LOG_FORMAT": "pretty",
    }
    with patch.dict(os.environ, env_vars):
        yield


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Retorna path temporário para banco de dados."""
    return tmp_path / "test_quiz.db"
