"""Leitura dos templates de artefato de um schema resolvido.

Um template é procurado diretamente no diretório do schema e depois em
`templates/`, nessa ordem.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..resolver import ResolvedSchema
from ..schema import Artifact
from .errors import TemplateLoadError


def template_candidates(schema_dir: Path, template: str) -> List[Path]:
    return [schema_dir / template, schema_dir / "templates" / template]


def find_template(resolved: ResolvedSchema, artifact: Artifact) -> Path:
    candidates = template_candidates(resolved.directory, artifact.template)
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    raise TemplateLoadError(
        f"Template '{artifact.template}' not found for artifact '{artifact.id}' "
        f"in schema '{resolved.name}'",
        path=candidates[-1],
        details={"searched": [str(c) for c in candidates]},
    )


def load_template(resolved: ResolvedSchema, artifact: Artifact) -> str:
    """Conteúdo verbatim do template do artefato."""
    path = find_template(resolved, artifact)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateLoadError(f"Failed to read template: {e}", path=path, cause=e) from e
