"""Erros canônicos da montagem de instruções."""

from ..exceptions import OpenSpecError


class InstructionError(OpenSpecError):
    """Erro base da montagem de instruções."""


class TemplateLoadError(InstructionError):
    """Template de artefato ausente ou ilegível."""


class ArtifactNotFoundError(InstructionError):
    """Id de artefato não existe no schema resolvido."""
