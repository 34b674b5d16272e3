# src/openspec_resolver/core/config/loader.py
"""
Loader resiliente da configuração de projeto do OpenSpec.

Este módulo é responsável por localizar, ler e validar campo a campo o
arquivo opcional `openspec/config.yaml` (ou `openspec/config.yml`).

Política de leitura:
    - `config.yaml` tem prioridade sobre `config.yml`
    - Arquivo ausente significa "nada configurado" e retorna None
    - YAML inválido ou raiz que não é mapeamento gera warning e retorna None
    - Cada campo (`schema`, `context`, `rules`) é validado de forma
      independente; um campo inválido é descartado sozinho, com warning
    - Chaves desconhecidas no topo são ignoradas

Decisões arquiteturais:
    - O arquivo é relido e reparseado a cada chamada (sem cache), para que
      uma edição valha já no próximo comando
    - A validação é um pipeline parse → validadores por campo → composição
      dos resultados `Ok`
    - Warnings vão para o `WarningCollector` do chamador

Invariantes:
    - O objeto retornado contém apenas campos que passaram na validação
    - Se nenhum campo sobreviver, o retorno é None (nunca um objeto vazio)
    - `context` é preservado verbatim (sem trim, sem escape)

Limites explícitos:
    - Não valida `schema` contra os schemas existentes
    - Não valida ids de `rules` contra artefatos (ver `rules.py`)
    - Falhas de I/O sobre um arquivo existente não são silenciadas
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml  # PyYAML

from ..diagnostics import WarningCollector, ensure_collector
from .errors import ConfigReadError
from .fields import FIELD_VALIDATORS
from .model import ProjectConfig
from .result import MISSING, Ok


logger = logging.getLogger(__name__)

CONFIG_DIR = "openspec"
CONFIG_FILENAMES = ("config.yaml", "config.yml")


def config_path(project_root: Union[str, Path]) -> Optional[Path]:
    """Caminho do arquivo de config existente (`.yaml` antes de `.yml`), ou None."""
    base = Path(project_root) / CONFIG_DIR
    for filename in CONFIG_FILENAMES:
        candidate = base / filename
        if candidate.is_file():
            return candidate
    return None


def _display_name(path: Path) -> str:
    return f"{CONFIG_DIR}/{path.name}"


def read_project_config(
    project_root: Union[str, Path],
    *,
    warnings: Optional[WarningCollector] = None,
) -> Optional[ProjectConfig]:
    """
    Lê e valida a configuração de projeto.

    Args:
        project_root: diretório onde vive `openspec/`.
        warnings: coletor do chamador; quando omitido, um coletor novo é
            usado apenas nesta chamada.

    Returns:
        ProjectConfig parcial com os campos válidos, ou None quando o
        arquivo não existe, é inválido ou nenhum campo sobreviveu.

    Raises:
        ConfigReadError: se o arquivo existir mas não puder ser lido.
    """
    path = config_path(project_root)
    if path is None:
        return None

    collector = ensure_collector(warnings)
    shown = _display_name(path)

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigReadError(f"Failed to read {shown}: {e}", path=path, cause=e) from e
    except UnicodeDecodeError as e:
        collector.warn(f"Failed to parse {shown}: {e}", source="config", log=logger, path=str(path))
        return None

    try:
        raw = yaml.safe_load(content)
    except (yaml.YAMLError, ValueError) as e:
        collector.warn(f"Failed to parse {shown}: {e}", source="config", log=logger, path=str(path))
        return None

    if not isinstance(raw, dict):
        collector.warn(f"{shown} is not a valid YAML object", source="config", log=logger, path=str(path))
        return None

    fields: Dict[str, Any] = {}
    for key, validator in FIELD_VALIDATORS:
        result = validator(raw.get(key, MISSING))
        for message in result.warnings:
            collector.warn(message, source="config", log=logger, path=str(path), field=key)
        if isinstance(result, Ok):
            fields[key] = result.value

    if not fields:
        return None
    return ProjectConfig(**fields)
