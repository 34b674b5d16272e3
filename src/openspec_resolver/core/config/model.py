"""Representação da configuração de projeto validada."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ProjectConfig:
    """
    Configuração de projeto após validação campo a campo.

    Campos:
    - schema: nome do schema de workflow padrão do projeto
    - context: contexto injetado em todas as instruções (<= 50 KiB UTF-8)
    - rules: regras por id de artefato

    Um campo None significa "ausente ou descartado na validação".
    """

    schema: Optional[str] = None
    context: Optional[str] = None
    rules: Optional[Dict[str, List[str]]] = None

    def rules_for(self, artifact_id: str) -> List[str]:
        if not self.rules:
            return []
        return list(self.rules.get(artifact_id) or [])

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.schema is not None:
            data["schema"] = self.schema
        if self.context is not None:
            data["context"] = self.context
        if self.rules is not None:
            data["rules"] = {k: list(v) for k, v in self.rules.items()}
        return data
