# tests/core/schema/test_schema_validation.py
"""
Testes de parsing e validação de schemas de workflow.

Os testes asseguram que:
- schemas válidos são materializados com todos os campos
- a validação segue a ordem: forma → unicidade → referências → ciclos
- ciclos de dois e três nós são detectados com o caminho do ciclo
- falhas de leitura/parse viram `SchemaLoadError` com o caminho

Limites explícitos:
    - Não testa resolução entre tiers
"""

import re
from pathlib import Path

import pytest

from openspec_resolver.core.schema import (
    SchemaCycleError,
    SchemaLoadError,
    SchemaParseError,
    SchemaValidationError,
    load_schema_file,
    parse_schema,
    validate_schema,
)


_VALID = """
name: my-flow
version: 2
description: Custom flow
artifacts:
  - id: proposal
    generates: proposal.md
    description: Initial proposal
    template: proposal.md
    requires: []
  - id: tasks
    generates: tasks.md
    description: Tasks
    template: tasks.md
    requires: [proposal]
    instruction: Break the work down.
"""


def _schema(artifacts):
    return {"name": "flow", "version": 1, "description": "", "artifacts": artifacts}


def _artifact(aid, requires=None):
    return {
        "id": aid,
        "generates": f"{aid}.md",
        "description": aid,
        "template": f"{aid}.md",
        "requires": requires or [],
    }


def test_parse_valid_schema() -> None:
    schema = parse_schema(_VALID)

    assert schema.name == "my-flow"
    assert schema.version == 2
    assert schema.artifact_ids() == ["proposal", "tasks"]
    tasks = schema.get_artifact("tasks")
    assert tasks.requires == ("proposal",)
    assert tasks.instruction == "Break the work down."
    assert schema.get_artifact("missing") is None


def test_requires_defaults_to_empty() -> None:
    data = _schema([{"id": "a", "generates": "a.md", "description": "", "template": "a.md"}])

    schema = validate_schema(data)

    assert schema.artifacts[0].requires == ()


@pytest.mark.parametrize(
    "mutate, message",
    [
        (lambda d: d.pop("name"), "name is required"),
        (lambda d: d.update(version="1"), "version must be an integer"),
        (lambda d: d.update(version=True), "version must be an integer"),
        (lambda d: d.update(artifacts=[]), "artifacts must be a non-empty list"),
        (lambda d: d["artifacts"][0].pop("template"), "artifacts[0].template is required"),
        (lambda d: d["artifacts"][0].update(requires="a"), "artifacts[0].requires must be a list"),
    ],
)
def test_structural_errors(mutate, message) -> None:
    data = _schema([_artifact("a")])
    mutate(data)

    with pytest.raises(SchemaValidationError, match=re.escape(message)):
        validate_schema(data)


def test_duplicate_artifact_ids_rejected() -> None:
    with pytest.raises(SchemaValidationError, match="Duplicate artifact ID: a"):
        validate_schema(_schema([_artifact("a"), _artifact("a")]))


def test_unknown_requires_rejected() -> None:
    with pytest.raises(SchemaValidationError, match="'ghost' does not exist"):
        validate_schema(_schema([_artifact("a", ["ghost"])]))


def test_two_node_cycle_names_both_ids() -> None:
    data = _schema([_artifact("A", ["B"]), _artifact("B", ["A"])])

    with pytest.raises(SchemaCycleError) as exc:
        validate_schema(data)

    assert exc.value.cycle == ["A", "B", "A"]
    assert "A -> B -> A" in str(exc.value)


def test_three_node_cycle_detected() -> None:
    data = _schema([_artifact("A", ["B"]), _artifact("B", ["C"]), _artifact("C", ["A"])])

    with pytest.raises(SchemaCycleError) as exc:
        validate_schema(data)

    assert set(exc.value.cycle) == {"A", "B", "C"}
    assert exc.value.cycle[0] == exc.value.cycle[-1]


def test_cycle_error_is_validation_error() -> None:
    data = _schema([_artifact("A", ["A"])])

    with pytest.raises(SchemaValidationError):
        validate_schema(data)


def test_unknown_reference_checked_before_cycles() -> None:
    data = _schema([_artifact("A", ["B"]), _artifact("B", ["A", "ghost"])])

    with pytest.raises(SchemaValidationError) as exc:
        validate_schema(data)

    assert not isinstance(exc.value, SchemaCycleError)


def test_invalid_yaml_is_parse_error() -> None:
    with pytest.raises(SchemaParseError):
        parse_schema("name: [unclosed\n")


def test_empty_yaml_is_parse_error() -> None:
    with pytest.raises(SchemaParseError):
        parse_schema("")


def test_load_schema_file_wraps_errors_with_path(tmp_path: Path) -> None:
    path = tmp_path / "schema.yaml"
    path.write_text("name: x\nversion: 1\nartifacts: []\n", encoding="utf-8")

    with pytest.raises(SchemaLoadError) as exc:
        load_schema_file(path)

    assert exc.value.path == str(path)
    assert isinstance(exc.value.cause, SchemaValidationError)


def test_load_schema_file_missing(tmp_path: Path) -> None:
    with pytest.raises(SchemaLoadError, match="Failed to read schema"):
        load_schema_file(tmp_path / "nope" / "schema.yaml")


def test_impossible_unquoted_date_is_parse_error() -> None:
    with pytest.raises(SchemaParseError):
        parse_schema("name: x\nversion: 1\ndescription: 2025-13-01\nartifacts: []\n")
