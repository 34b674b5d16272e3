# src/openspec_resolver/__init__.py
"""
OpenSpec Resolver - motor de configuração e resolução de schemas de workflow.

Este pacote raiz define o namespace público do motor que permite a um
projeto customizar o comportamento do workflow OpenSpec sem fazer fork
dos templates embutidos.

Princípios centrais:
    - Um schema de workflow é um DAG explícito de artefatos
    - A resolução de schemas segue precedência fixa entre três tiers
      (projeto, usuário, pacote)
    - Configuração de projeto malformada nunca quebra a ferramenta
    - A montagem de instruções é determinística, byte a byte

Arquitetura em alto nível:
    - core.schema       → modelo, parsing e validação de schemas (DAG)
    - core.resolver     → localização de schemas entre tiers e shadowing
    - core.config       → leitura resiliente de openspec/config.yaml
    - core.change       → binding change → schema e cadeia de precedência
    - core.instructions → montagem final das instruções por artefato

Limites explícitos:
    - Não contém CLI, prompts ou adapters de ferramentas de IA
    - Não realiza I/O de rede
    - Não implementa herança de schemas (`extends`)
"""

from .core.change import (
    ChangeMetadata,
    create_change,
    read_change_metadata,
    resolve_schema_for_change,
    write_change_metadata,
)
from .core.config import ProjectConfig, read_project_config
from .core.diagnostics import WarningCollector
from .core.instructions import assemble_instructions, generate_instructions
from .core.resolver import list_schemas, locate_schema, resolve_schema
from .core.schema import Artifact, Schema, parse_schema

__version__ = "0.1.0"

__all__ = [
    "Artifact",
    "ChangeMetadata",
    "ProjectConfig",
    "Schema",
    "WarningCollector",
    "assemble_instructions",
    "create_change",
    "generate_instructions",
    "list_schemas",
    "locate_schema",
    "parse_schema",
    "read_change_metadata",
    "read_project_config",
    "resolve_schema",
    "resolve_schema_for_change",
    "write_change_metadata",
]
