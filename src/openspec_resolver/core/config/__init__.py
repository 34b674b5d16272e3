# src/openspec_resolver/core/config/__init__.py

"""
Camada de configuração de projeto do OpenSpec Resolver.

Este pacote contém as estruturas e utilitários responsáveis por localizar,
ler e validar o arquivo opcional `openspec/config.yaml`.

A configuração de projeto é:
    - opcional (ausência não é erro)
    - validada campo a campo (falhas são locais ao campo)
    - relida a cada acesso (sem cache)

Responsabilidades do pacote:
    - Localizar `config.yaml` / `config.yml`
    - Validar `schema`, `context` e `rules` de forma independente
    - Validar ids de `rules` contra o schema resolvido

Limites explícitos:
    - Não resolve schemas
    - Não monta instruções
    - Não implementa config global de usuário
"""

from .errors import ConfigError, ConfigReadError  # noqa: F401
from .fields import MAX_CONTEXT_SIZE  # noqa: F401
from .loader import config_path, read_project_config  # noqa: F401
from .model import ProjectConfig  # noqa: F401
from .rules import validate_config_rules  # noqa: F401
