"""
Modelo canônico - Workflow Schema v1.

Um schema descreve os documentos (artefatos) que um workflow produz e as
dependências entre eles. A validação segue ordem fixa:

1. forma estrutural (campos obrigatórios e tipos)
2. unicidade dos ids de artefato
3. integridade referencial de cada `requires`
4. detecção de ciclos no grafo de `requires`

Esta implementação evita dependências externas (ex.: Pydantic), no mesmo
estilo do restante do core.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .errors import SchemaValidationError
from .graph import find_cycle


def _is_non_empty_str(x: Any) -> bool:
    return isinstance(x, str) and bool(x.strip())


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise SchemaValidationError(msg)


@dataclass(frozen=True)
class Artifact:
    """Um nó do DAG: um tipo de documento gerado pelo workflow."""

    id: str
    generates: str
    template: str
    description: str
    requires: Tuple[str, ...] = ()
    instruction: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "generates": self.generates,
            "description": self.description,
            "template": self.template,
            "requires": list(self.requires),
        }
        if self.instruction is not None:
            data["instruction"] = self.instruction
        return data


@dataclass(frozen=True)
class Schema:
    """Representação interna explícita de um schema de workflow."""

    name: str
    version: int
    description: str
    artifacts: Tuple[Artifact, ...]

    def artifact_ids(self) -> List[str]:
        return [a.id for a in self.artifacts]

    def get_artifact(self, artifact_id: str) -> Optional[Artifact]:
        for artifact in self.artifacts:
            if artifact.id == artifact_id:
                return artifact
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "artifacts": [a.to_dict() for a in self.artifacts],
        }


def _validate_artifact(i: int, a: Any) -> Artifact:
    _expect(isinstance(a, dict), f"artifacts[{i}] must be a mapping")

    for key in ("id", "generates", "template"):
        _expect(_is_non_empty_str(a.get(key)), f"artifacts[{i}].{key} is required")

    description = a.get("description")
    _expect(isinstance(description, str), f"artifacts[{i}].description must be a string")

    requires = a.get("requires")
    if requires is None:
        requires = []
    _expect(isinstance(requires, list), f"artifacts[{i}].requires must be a list")
    for j, dep in enumerate(requires):
        _expect(_is_non_empty_str(dep), f"artifacts[{i}].requires[{j}] must be a non-empty string")

    instruction = a.get("instruction")
    _expect(
        instruction is None or isinstance(instruction, str),
        f"artifacts[{i}].instruction must be a string",
    )

    return Artifact(
        id=a["id"],
        generates=a["generates"],
        template=a["template"],
        description=description,
        requires=tuple(requires),
        instruction=instruction,
    )


def validate_schema(data: Any) -> Schema:
    """Valida e materializa um Schema a partir do YAML já parseado.

    Raises:
        SchemaValidationError: forma inválida, id duplicado ou referência
            desconhecida em `requires`.
        SchemaCycleError: se o grafo de `requires` tiver ciclo.
    """
    _expect(isinstance(data, dict), "schema must be a mapping")

    name = data.get("name")
    _expect(_is_non_empty_str(name), "name is required")

    version = data.get("version")
    _expect(
        isinstance(version, int) and not isinstance(version, bool),
        "version must be an integer",
    )

    description = data.get("description", "")
    if description is None:
        description = ""
    _expect(isinstance(description, str), "description must be a string")

    raw_artifacts = data.get("artifacts")
    _expect(isinstance(raw_artifacts, list) and raw_artifacts, "artifacts must be a non-empty list")

    artifacts = [_validate_artifact(i, a) for i, a in enumerate(raw_artifacts)]

    seen_ids: set[str] = set()
    for artifact in artifacts:
        _expect(artifact.id not in seen_ids, f"Duplicate artifact ID: {artifact.id}")
        seen_ids.add(artifact.id)

    for artifact in artifacts:
        for dep in artifact.requires:
            _expect(
                dep in seen_ids,
                f"Invalid dependency reference in artifact '{artifact.id}': '{dep}' does not exist",
            )

    find_cycle({a.id: list(a.requires) for a in artifacts}, raise_on_cycle=True)

    return Schema(
        name=name,
        version=version,
        description=description,
        artifacts=tuple(artifacts),
    )
