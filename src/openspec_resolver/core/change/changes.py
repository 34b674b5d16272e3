"""Criação de changes e validação de nomes (kebab-case)."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..config.loader import CONFIG_DIR, read_project_config
from ..diagnostics import WarningCollector
from ..exceptions import OpenSpecError
from .errors import ChangeExistsError, InvalidChangeNameError
from .metadata import bind_change_schema, validate_schema_name
from .precedence import DEFAULT_SCHEMA


logger = logging.getLogger(__name__)

_KEBAB_CASE = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$")

PathLike = Union[str, Path]


@dataclass(frozen=True)
class CreateChangeResult:
    schema: str
    change_dir: Path


def change_dir_for(project_root: PathLike, name: str) -> Path:
    return Path(project_root) / CONFIG_DIR / "changes" / name


def change_name_error(name: str) -> Optional[str]:
    """Mensagem específica para um nome inválido, ou None se o nome é válido."""
    if not name:
        return "Change name cannot be empty"
    if _KEBAB_CASE.match(name):
        return None
    if re.search(r"[A-Z]", name):
        return "Change name must be lowercase (use kebab-case)"
    if re.search(r"\s", name):
        return "Change name cannot contain spaces (use hyphens instead)"
    if "_" in name:
        return "Change name cannot contain underscores (use hyphens instead)"
    if name.startswith("-"):
        return "Change name cannot start with a hyphen"
    if name.endswith("-"):
        return "Change name cannot end with a hyphen"
    if "--" in name:
        return "Change name cannot contain consecutive hyphens"
    if re.search(r"[^a-z0-9-]", name):
        return "Change name can only contain lowercase letters, numbers, and hyphens"
    if re.match(r"^[0-9]", name):
        return "Change name must start with a letter"
    return "Change name must follow kebab-case convention (e.g., add-auth, refactor-db)"


def validate_change_name(name: str) -> str:
    error = change_name_error(name)
    if error:
        raise InvalidChangeNameError(error, details={"name": name})
    return name


def create_change(
    project_root: PathLike,
    name: str,
    *,
    schema: Optional[str] = None,
    warnings: Optional[WarningCollector] = None,
) -> CreateChangeResult:
    """
    Cria `openspec/changes/<name>/` e grava o binding do schema.

    Schema: explícito → `schema` da config de projeto → DEFAULT_SCHEMA.
    O schema escolhido é validado antes de qualquer escrita.

    Raises:
        InvalidChangeNameError: nome fora de kebab-case.
        UnknownSchemaError: schema escolhido não existe.
        ChangeExistsError: o diretório do change já existe.
    """
    validate_change_name(name)

    schema_name = schema
    if not schema_name:
        try:
            config = read_project_config(project_root, warnings=warnings)
        except OpenSpecError as e:
            logger.debug("Ignoring project config while creating '%s': %s", name, e)
            config = None
        schema_name = config.schema if config is not None and config.schema else DEFAULT_SCHEMA

    validate_schema_name(schema_name, project_root)

    change_dir = change_dir_for(project_root, name)
    if change_dir.exists():
        raise ChangeExistsError(f"Change '{name}' already exists at {change_dir}", path=change_dir)

    change_dir.mkdir(parents=True)
    bind_change_schema(change_dir, schema_name, project_root)

    return CreateChangeResult(schema=schema_name, change_dir=change_dir)
