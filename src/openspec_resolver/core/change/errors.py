"""Erros canônicos do domínio de Change (binding change → schema).

O binding é gravado uma única vez na criação do change e relido depois.
Um sidecar que existe mas não pode ser lido ou não é válido é erro
explícito: a categoria distingue falha de I/O de conteúdo inválido, e
ambas carregam o caminho do arquivo.
"""

from __future__ import annotations

from typing import Sequence

from ..exceptions import OpenSpecError


class ChangeError(OpenSpecError):
    """Erro base do domínio de change."""


class ChangeMetadataError(ChangeError):
    """Erro base para o sidecar `.openspec.yaml`."""


class ChangeMetadataIOError(ChangeMetadataError):
    """Sidecar não pôde ser lido ou escrito."""


class ChangeMetadataValidationError(ChangeMetadataError):
    """Sidecar com YAML inválido, forma inválida ou schema que não resolve mais."""


class UnknownSchemaError(ChangeError):
    """Nome de schema fora do conjunto de schemas visíveis."""

    def __init__(self, name: str, available: Sequence[str]) -> None:
        self.name = name
        self.available = list(available)
        super().__init__(
            f"Unknown schema '{name}'. Available: {', '.join(self.available)}",
            details={"name": name, "available": self.available},
        )


class InvalidChangeNameError(ChangeError):
    """Nome de change fora da convenção kebab-case."""


class ChangeExistsError(ChangeError):
    """Diretório do change já existe."""
