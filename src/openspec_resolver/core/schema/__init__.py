"""OpenSpec Resolver - Schema (core).

Componentes canônicos para o **Workflow Schema v1**:
 - parsing (YAML)
 - validação estrutural e referencial
 - análise do DAG de `requires` (ciclos, ordem de construção)
"""

from .errors import (  # noqa: F401
    SchemaError,
    SchemaParseError,
    SchemaValidationError,
    SchemaCycleError,
    SchemaLoadError,
)

from .graph import build_order, dependents_of, find_cycle  # noqa: F401
from .loader import SCHEMA_FILENAME, load_schema_file, parse_schema  # noqa: F401
from .model import Artifact, Schema, validate_schema  # noqa: F401
