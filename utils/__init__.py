"""Utilitarios compartilhados."""

from .validators import validate_uuid

__all__ = ["validate_uuid"]
