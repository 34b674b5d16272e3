"""OpenSpec Resolver - Change (core).

Componentes canônicos do binding change → schema:
 - leitura/escrita do sidecar `.openspec.yaml`
 - cadeia de precedência do schema efetivo
 - criação de changes
"""

from .errors import (  # noqa: F401
    ChangeError,
    ChangeMetadataError,
    ChangeMetadataIOError,
    ChangeMetadataValidationError,
    UnknownSchemaError,
    InvalidChangeNameError,
    ChangeExistsError,
)

from .metadata import (  # noqa: F401
    METADATA_FILENAME,
    ChangeMetadata,
    bind_change_schema,
    read_change_metadata,
    validate_schema_name,
    write_change_metadata,
)
from .precedence import DEFAULT_SCHEMA, resolve_schema_for_change  # noqa: F401
from .changes import (  # noqa: F401
    CreateChangeResult,
    change_dir_for,
    create_change,
    validate_change_name,
)
