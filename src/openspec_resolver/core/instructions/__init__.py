"""OpenSpec Resolver - Instructions (core).

Montagem das instruções de geração por artefato:
 - leitura de templates do schema resolvido
 - validação dos ids de `rules`
 - composição context → rules → template
"""

from .errors import (  # noqa: F401
    InstructionError,
    TemplateLoadError,
    ArtifactNotFoundError,
)

from .assembler import (  # noqa: F401
    AssembledInstructions,
    assemble_instructions,
    build_instructions,
    check_rules,
    render_instructions,
)
from .generate import (  # noqa: F401
    ArtifactInstructions,
    DependencyInfo,
    artifact_output_exists,
    generate_instructions,
)
from .templates import find_template, load_template  # noqa: F401
