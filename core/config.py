"""Configuracao centralizada da Quiz API.

Valores lidos de variaveis de ambiente (e de um ``.env`` opcional via
python-dotenv). Valores invalidos caem no default em vez de derrubar o boot.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

DEFAULT_DB_PATH = Path("data") / "quiz.db"
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


class LogFormat(str, Enum):
    """Formato de saida dos logs."""

    PRETTY = "pretty"
    JSON = "json"


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class QuizAPIConfig:
    """Configuracao da aplicacao.

    Attributes:
        environment: development, test ou production
        host: Interface de bind do uvicorn
        port: Porta HTTP
        db_path: Caminho do arquivo SQLite
        log_level: Nivel de log (DEBUG fora de producao)
        log_format: pretty (legivel) ou json (uma linha por registro)
        cors_origins: Origens liberadas no CORS
    """

    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 4000
    db_path: Path = DEFAULT_DB_PATH
    log_level: str = "DEBUG"
    log_format: LogFormat = LogFormat.PRETTY
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_env(cls) -> "QuizAPIConfig":
        """Cria configuracao a partir das variaveis de ambiente."""
        environment = os.getenv("ENVIRONMENT", "development").lower()
        default_level = "INFO" if environment == "production" else "DEBUG"
        default_format = LogFormat.JSON if environment == "production" else LogFormat.PRETTY

        try:
            log_format = LogFormat(os.getenv("LOG_FORMAT", default_format.value).lower())
        except ValueError:
            log_format = default_format

        return cls(
            environment=environment,
            host=os.getenv("HOST", "0.0.0.0"),
            port=_env_int("PORT", 4000),
            db_path=Path(os.getenv("QUIZ_DB_PATH", str(DEFAULT_DB_PATH))),
            log_level=os.getenv("LOG_LEVEL", default_level).upper(),
            log_format=log_format,
            cors_origins=_env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "environment": self.environment,
            "server": {"host": self.host, "port": self.port},
            "database": {"path": str(self.db_path)},
            "logging": {"level": self.log_level, "format": self.log_format.value},
            "cors": {"origins": self.cors_origins},
        }


_config: QuizAPIConfig | None = None


def get_config() -> QuizAPIConfig:
    """Retorna a configuracao singleton (carrega ``.env`` na primeira chamada)."""
    global _config
    if _config is None:
        load_dotenv()
        _config = QuizAPIConfig.from_env()
    return _config


def reload_config() -> QuizAPIConfig:
    """Descarta o singleton e relê o ambiente."""
    global _config
    _config = None
    return get_config()
