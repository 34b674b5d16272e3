"""Instruções enriquecidas de um artefato dentro de um change.

Compõe o fluxo completo: precedência do schema → resolução do schema →
leitura da config de projeto → validação de regras → montagem do texto.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..change import change_dir_for, resolve_schema_for_change
from ..config import ConfigReadError, ProjectConfig, read_project_config
from ..diagnostics import WarningCollector, ensure_collector
from ..resolver import ResolvedSchema, resolve_schema
from ..schema import Artifact, dependents_of
from .assembler import build_instructions


logger = logging.getLogger(__name__)

_GLOB_CHARS = ("*", "?", "[")


@dataclass(frozen=True)
class DependencyInfo:
    id: str
    done: bool
    path: str
    description: str


@dataclass(frozen=True)
class ArtifactInstructions:
    change_name: str
    artifact_id: str
    schema_name: str
    change_dir: Path
    output_path: str
    description: str
    instruction: Optional[str]
    context: Optional[str]
    rules: Optional[Tuple[str, ...]]
    template: str
    text: str
    dependencies: Tuple[DependencyInfo, ...] = field(default_factory=tuple)
    unlocks: Tuple[str, ...] = field(default_factory=tuple)


def artifact_output_exists(change_dir: Path, generates: str) -> bool:
    """True se o(s) arquivo(s) que o artefato gera já existem no change."""
    if any(ch in generates for ch in _GLOB_CHARS):
        return any(p.is_file() for p in change_dir.glob(generates))
    return (change_dir / generates).is_file()


def _dependencies(resolved: ResolvedSchema, artifact: Artifact, change_dir: Path) -> List[DependencyInfo]:
    infos = []
    for dep_id in artifact.requires:
        dep = resolved.schema.get_artifact(dep_id)
        if dep is None:
            continue
        infos.append(
            DependencyInfo(
                id=dep_id,
                done=artifact_output_exists(change_dir, dep.generates),
                path=dep.generates,
                description=dep.description,
            )
        )
    return infos


def _read_config(project_root: Path, collector: WarningCollector) -> Optional[ProjectConfig]:
    try:
        return read_project_config(project_root, warnings=collector)
    except ConfigReadError as e:
        collector.warn(str(e), source="instructions", log=logger, path=e.path)
        return None


def generate_instructions(
    project_root: Union[str, Path],
    change_name: str,
    artifact_id: str,
    *,
    schema_name: Optional[str] = None,
    warnings: Optional[WarningCollector] = None,
) -> ArtifactInstructions:
    """
    Gera as instruções enriquecidas de `artifact_id` para o change.

    Raises:
        SchemaNotFoundError / SchemaLoadError: schema efetivo inutilizável.
        ArtifactNotFoundError: artefato inexistente no schema.
        TemplateLoadError: template ausente ou ilegível.
    """
    root = Path(project_root)
    collector = ensure_collector(warnings)
    change_dir = change_dir_for(root, change_name)

    effective = resolve_schema_for_change(
        change_dir, schema_name, project_root=root, warnings=collector
    )
    resolved = resolve_schema(effective, root)

    config = _read_config(root, collector)
    assembled = build_instructions(artifact_id, resolved, config, warnings=collector)
    artifact = assembled.artifact

    return ArtifactInstructions(
        change_name=change_name,
        artifact_id=artifact.id,
        schema_name=resolved.name,
        change_dir=change_dir,
        output_path=artifact.generates,
        description=artifact.description,
        instruction=artifact.instruction,
        context=assembled.context,
        rules=assembled.rules or None,
        template=assembled.template,
        text=assembled.text,
        dependencies=tuple(_dependencies(resolved, artifact, change_dir)),
        unlocks=tuple(dependents_of(resolved.schema, artifact.id)),
    )
