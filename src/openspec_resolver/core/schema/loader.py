"""Loader canônico de schemas de workflow (YAML).

Notas:
- `parse_schema` é uma função pura sobre o texto YAML.
- `load_schema_file` envolve leitura de disco e converte qualquer falha em
  `SchemaLoadError` carregando o caminho do arquivo.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import yaml

from .errors import SchemaLoadError, SchemaParseError, SchemaValidationError
from .model import Schema, validate_schema


SCHEMA_FILENAME = "schema.yaml"


def parse_schema(raw_yaml: str) -> Schema:
    """Parseia e valida um schema a partir de texto YAML.

    Raises:
        SchemaParseError: se o YAML for sintaticamente inválido ou vazio.
        SchemaValidationError: se o conteúdo não for um schema válido.
    """
    try:
        # impossible unquoted dates (2025-13-45) raise ValueError
        data = yaml.safe_load(raw_yaml)
    except (yaml.YAMLError, ValueError) as e:
        raise SchemaParseError(f"Invalid YAML: {e}", cause=e) from e

    if data is None:
        raise SchemaParseError("schema file is empty")

    return validate_schema(data)


def load_schema_file(path: Union[str, Path]) -> Schema:
    """Lê e valida um `schema.yaml` do disco."""
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaLoadError(
            f"Failed to read schema at '{p}': {e}", path=p, cause=e
        ) from e

    try:
        return parse_schema(raw)
    except SchemaValidationError as e:
        raise SchemaLoadError(
            f"Invalid schema at '{p}': {e}", path=p, cause=e
        ) from e
    except SchemaParseError as e:
        raise SchemaLoadError(
            f"Failed to parse schema at '{p}': {e}", path=p, cause=e
        ) from e
