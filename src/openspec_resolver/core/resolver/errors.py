"""Erros canônicos da resolução de schemas por nome."""

from __future__ import annotations

from typing import Optional, Sequence

from ..exceptions import OpenSpecError


class SchemaNotFoundError(OpenSpecError):
    """Nenhum tier contém um schema com o nome pedido."""

    def __init__(
        self,
        message: str,
        *,
        name: str,
        available: Sequence[str],
        hint: Optional[str] = None,
    ) -> None:
        self.name = name
        self.available = list(available)
        super().__init__(
            message,
            details={"name": name, "available": self.available},
            hint=hint,
        )
