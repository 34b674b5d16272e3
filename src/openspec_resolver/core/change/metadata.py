# src/openspec_resolver/core/change/metadata.py
"""
Binding persistido entre um change e o seu schema de workflow.

Este módulo grava e lê o sidecar `<change_dir>/.openspec.yaml`, que associa
um change a exatamente um nome de schema, fixado no momento da criação.

Formato do sidecar:
    schema: <nome>           (obrigatório, string não vazia)
    created: YYYY-MM-DD      (opcional, data ISO sem hora e sem timezone)

Decisões arquiteturais:
    - O nome do schema é validado contra os schemas visíveis antes de
      qualquer escrita; nome desconhecido falha sem tocar o disco
    - Na leitura, o schema é revalidado: bindings obsoletos são erro
    - Falhas de I/O e conteúdo inválido são categorias distintas

Invariantes:
    - Sidecar ausente significa "sem binding" (retorno None)
    - O que é escrito e relido é igual campo a campo (round-trip)

Limites explícitos:
    - Não reescreve o sidecar depois da criação
    - Não decide precedência entre fontes (ver `precedence.py`)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..resolver import list_schema_names
from .errors import (
    ChangeMetadataIOError,
    ChangeMetadataValidationError,
    UnknownSchemaError,
)


METADATA_FILENAME = ".openspec.yaml"

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ChangeMetadata:
    schema: str
    created: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"schema": self.schema}
        if self.created is not None:
            data["created"] = self.created
        return data


def metadata_path(change_dir: PathLike) -> Path:
    return Path(change_dir) / METADATA_FILENAME


def validate_schema_name(name: str, project_root: Optional[PathLike] = None) -> str:
    """Garante que `name` está entre os schemas visíveis; retorna o nome."""
    available = list_schema_names(project_root)
    if name not in available:
        raise UnknownSchemaError(name, available)
    return name


def _structural_errors(data: Any) -> Optional[str]:
    if not isinstance(data, dict):
        return "metadata must be a mapping"
    schema = data.get("schema")
    if not isinstance(schema, str) or not schema:
        return "schema is required and must be a non-empty string"
    created = data.get("created")
    if created is not None and not (isinstance(created, str) and _ISO_DATE.fullmatch(created)):
        return "created must be a date in YYYY-MM-DD format"
    return None


def _normalize_created(data: Dict[str, Any]) -> Dict[str, Any]:
    # YAML resolves unquoted 2025-01-05 to datetime.date
    created = data.get("created")
    if isinstance(created, date) and not isinstance(created, datetime):
        data = dict(data)
        data["created"] = created.isoformat()
    return data


def write_change_metadata(
    change_dir: PathLike,
    metadata: ChangeMetadata,
    project_root: Optional[PathLike] = None,
) -> Path:
    """
    Grava o sidecar do change.

    Raises:
        UnknownSchemaError: se o schema não existir (nada é escrito).
        ChangeMetadataValidationError: se `created` estiver fora do formato.
        ChangeMetadataIOError: se a escrita falhar.
    """
    path = metadata_path(change_dir)

    validate_schema_name(metadata.schema, project_root)

    error = _structural_errors(metadata.to_dict())
    if error:
        raise ChangeMetadataValidationError(f"Invalid metadata: {error}", path=path)

    content = yaml.safe_dump(
        metadata.to_dict(),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ChangeMetadataIOError(f"Failed to write metadata: {e}", path=path, cause=e) from e
    return path


def bind_change_schema(
    change_dir: PathLike,
    schema: str,
    project_root: Optional[PathLike] = None,
    *,
    created: Optional[str] = None,
) -> ChangeMetadata:
    """Grava o binding com `created` igual à data de hoje quando omitido."""
    metadata = ChangeMetadata(schema=schema, created=created or date.today().isoformat())
    write_change_metadata(change_dir, metadata, project_root)
    return metadata


def read_change_metadata(
    change_dir: PathLike,
    project_root: Optional[PathLike] = None,
) -> Optional[ChangeMetadata]:
    """
    Lê e revalida o sidecar do change.

    Returns:
        ChangeMetadata, ou None se o sidecar não existir.

    Raises:
        ChangeMetadataIOError: se o sidecar existir mas não puder ser lido.
        ChangeMetadataValidationError: YAML inválido, forma inválida ou
            schema que não resolve mais.
    """
    path = metadata_path(change_dir)
    if not path.exists():
        return None

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ChangeMetadataIOError(f"Failed to read metadata: {e}", path=path, cause=e) from e
    except UnicodeDecodeError as e:
        raise ChangeMetadataValidationError(
            f"Invalid encoding in metadata file: {e}", path=path, cause=e
        ) from e

    try:
        parsed = yaml.safe_load(content)
    except (yaml.YAMLError, ValueError) as e:
        raise ChangeMetadataValidationError(
            f"Invalid YAML in metadata file: {e}", path=path, cause=e
        ) from e

    if isinstance(parsed, dict):
        parsed = _normalize_created(parsed)

    error = _structural_errors(parsed)
    if error:
        raise ChangeMetadataValidationError(f"Invalid metadata: {error}", path=path)

    metadata = ChangeMetadata(schema=parsed["schema"], created=parsed.get("created"))

    try:
        validate_schema_name(metadata.schema, project_root)
    except UnknownSchemaError as e:
        raise ChangeMetadataValidationError(str(e), path=path, cause=e, details=e.details) from e

    return metadata
