"""Erros canônicos do domínio de Schema (OpenSpec Resolver).

Um schema de workflow é uma entrada estrutural crítica: sem ele nenhuma
instrução pode ser montada. Falhas de parsing/validação são fatais para a
operação que precisa do schema e devem produzir erros explícitos e estáveis.
"""

from __future__ import annotations

from typing import Sequence

from ..exceptions import OpenSpecError


class SchemaError(OpenSpecError):
    """Erro base do domínio de schema."""


class SchemaParseError(SchemaError):
    """Falha ao parsear o YAML do schema."""


class SchemaValidationError(SchemaError):
    """Schema não é estruturalmente válido."""


class SchemaCycleError(SchemaValidationError):
    """O grafo de `requires` contém um ciclo."""

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = list(cycle)
        super().__init__(
            f"Cyclic dependency detected: {' -> '.join(self.cycle)}",
            details={"cycle": self.cycle},
        )


class SchemaLoadError(SchemaError):
    """Arquivo `schema.yaml` não pôde ser lido ou não é um schema válido."""
