"""Envelope padrao de resposta: ``{status, message, data?}``."""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def send_success(data: Any, message: str = "Success") -> dict[str, Any]:
    """Monta envelope de sucesso (modelos Pydantic serializados por alias)."""
    return {
        "status": "success",
        "message": message,
        "data": jsonable_encoder(data, by_alias=True),
    }


def send_error(message: str = "Error", status_code: int = 500) -> JSONResponse:
    """Monta resposta de erro com o status HTTP informado."""
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )
