# src/openspec_resolver/core/change/precedence.py
"""
Cadeia de precedência do schema efetivo de uma operação.

Ordem (cada estágio só é consultado se o anterior não produziu nada):
    1. schema explícito (não vazio) - vence sempre, mesmo se inválido
    2. binding do change (`.openspec.yaml`)
    3. campo `schema` da configuração de projeto
    4. DEFAULT_SCHEMA

Decisões arquiteturais:
    - Fontes de prioridade menor engolem os próprios erros: uma fonte
      quebrada e não usada nunca derruba a resolução
    - `project_root` é sempre explícito; nunca é derivado da profundidade
      de `change_dir`
    - O resultado é efêmero: calculado sob demanda, nunca persistido

Invariantes:
    - `resolve_schema_for_change` nunca levanta exceção
    - Um schema explícito inválido só falha quando for de fato usado
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from ..config.loader import read_project_config
from ..diagnostics import WarningCollector
from .metadata import read_change_metadata


logger = logging.getLogger(__name__)

DEFAULT_SCHEMA = "spec-driven"


def resolve_schema_for_change(
    change_dir: Union[str, Path],
    explicit_schema: Optional[str] = None,
    *,
    project_root: Optional[Union[str, Path]] = None,
    warnings: Optional[WarningCollector] = None,
) -> str:
    """
    Calcula o nome do schema efetivo para um change.

    Sem `project_root`, o estágio de config é pulado e o binding é
    validado contra o resolver de dois tiers (user, package).
    """
    if explicit_schema:
        return explicit_schema

    try:
        metadata = read_change_metadata(change_dir, project_root)
    except Exception as e:
        logger.debug("Ignoring change binding in %s: %s", change_dir, e)
    else:
        if metadata is not None and metadata.schema:
            return metadata.schema

    if project_root is not None:
        try:
            config = read_project_config(project_root, warnings=warnings)
        except Exception as e:
            logger.debug("Ignoring project config in %s: %s", project_root, e)
        else:
            if config is not None and config.schema:
                return config.schema

    return DEFAULT_SCHEMA
