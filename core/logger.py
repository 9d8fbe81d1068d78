"""Logging da Quiz API.

Usa o ``logging`` da biblioteca padrao. Em producao cada registro sai como
uma linha JSON; em desenvolvimento, texto legivel.
"""

from __future__ import annotations

import json
import logging
import sys
import time

ROOT_LOGGER = "quiz_api"

_configured = False


class JSONFormatter(logging.Formatter):
    """Serializa registros como JSON compacto (uma linha por registro)."""

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "level": record.levelname,
            "ts": round(time.time(), 3),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "pretty") -> logging.Logger:
    """Configura o logger raiz da aplicacao.

    Idempotente: chamadas seguintes apenas ajustam o nivel.

    Args:
        level: Nivel de log (DEBUG, INFO, ...)
        fmt: "pretty" ou "json"

    Returns:
        Logger raiz ``quiz_api``
    """
    global _configured

    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level)

    if not _configured:
        handler = logging.StreamHandler(sys.stdout)
        if fmt == "json":
            handler.setFormatter(JSONFormatter())
        else:
            handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
                    datefmt="%H:%M:%S",
                )
            )
        root.addHandler(handler)
        _configured = True

    return root


def get_logger(name: str) -> logging.Logger:
    """Retorna logger filho de ``quiz_api`` (ex: ``get_logger("quiz")``)."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
