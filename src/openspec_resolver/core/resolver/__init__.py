# src/openspec_resolver/core/resolver/__init__.py
"""
Camada de localização e resolução de schemas do OpenSpec Resolver.

Responsabilidades do pacote:
    - Definir os três tiers de armazenamento (project, user, package)
    - Localizar o schema vencedor para um nome
    - Listar schemas visíveis com procedência e shadowing
    - Produzir mensagens acionáveis para nomes desconhecidos

Limites explícitos:
    - Não valida semântica de artefatos além do que `core.schema` valida
    - Não lê configuração de projeto
"""

from .errors import SchemaNotFoundError  # noqa: F401
from .locations import (  # noqa: F401
    SOURCE_PACKAGE,
    SOURCE_PROJECT,
    SOURCE_USER,
    SchemaLocation,
    candidate_locations,
    is_valid_schema_name,
    package_schemas_dir,
    project_schemas_dir,
    user_schemas_dir,
)
from .resolver import (  # noqa: F401
    ResolvedSchema,
    SchemaDescription,
    SchemaInfo,
    describe_schemas,
    get_schema_dir,
    list_schema_names,
    list_schemas,
    locate_schema,
    resolve_schema,
    schema_catalog,
)
from .suggest import levenshtein, suggest_schemas  # noqa: F401
