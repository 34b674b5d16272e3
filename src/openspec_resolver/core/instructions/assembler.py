# src/openspec_resolver/core/instructions/assembler.py
"""
Montagem final das instruções de geração de um artefato.

Este módulo compõe, em ordem fixa, o contexto do projeto, as regras do
artefato e o template base do schema resolvido.

Formato de saída (cada bloco delimitado por tags em linhas próprias):

    <project_context>
    {context}
    </project_context>

    <rules>
    - {regra}
    </rules>

    <template>
    {template}
    </template>

Decisões arquiteturais:
    - A ordem context → rules → template é fixa e nunca é reordenada
    - Blocos são separados por uma linha em branco
    - Strings do usuário e o template são inseridos verbatim, sem escape
    - A validação dos ids de `rules` acontece antes da montagem e emite
      warnings deduplicados no coletor do chamador

Invariantes:
    - Contexto vazio (ou só espaços) não gera bloco
    - Sem regras para o artefato, não existe bloco <rules> (nem vazio)
    - O bloco <template> está sempre presente

Limites explícitos:
    - Não lê a configuração do projeto (recebe `ProjectConfig` pronto)
    - Não resolve o schema (recebe `ResolvedSchema` pronto)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config import ProjectConfig, validate_config_rules
from ..diagnostics import WarningCollector, ensure_collector
from ..resolver import ResolvedSchema
from ..schema import Artifact
from .errors import ArtifactNotFoundError
from .templates import load_template


logger = logging.getLogger(__name__)

CONTEXT_TAG = "project_context"
RULES_TAG = "rules"
TEMPLATE_TAG = "template"
RULE_MARKER = "- "


def check_rules(
    project_config: Optional[ProjectConfig],
    resolved: ResolvedSchema,
    warnings: WarningCollector,
) -> List[str]:
    """Emite um warning por chave de `rules` desconhecida; retorna as novas."""
    if project_config is None or not project_config.rules:
        return []
    emitted = []
    for message in validate_config_rules(
        project_config.rules, resolved.schema.artifact_ids(), resolved.name
    ):
        if warnings.warn(message, source="instructions", log=logger, schema=resolved.name):
            emitted.append(message)
    return emitted


def _block(tag: str, body: str) -> str:
    return f"<{tag}>\n{body}\n</{tag}>\n"


def render_instructions(
    template: str,
    *,
    context: Optional[str] = None,
    rules: Optional[List[str]] = None,
) -> str:
    sections = []
    if context and context.strip():
        sections.append(_block(CONTEXT_TAG, context))
    if rules:
        sections.append(_block(RULES_TAG, "\n".join(f"{RULE_MARKER}{rule}" for rule in rules)))
    sections.append(_block(TEMPLATE_TAG, template))
    return "\n".join(sections)


@dataclass(frozen=True)
class AssembledInstructions:
    """Partes usadas na montagem e o texto final."""

    artifact: Artifact
    template: str
    context: Optional[str]
    rules: Tuple[str, ...]
    text: str


def build_instructions(
    artifact_id: str,
    resolved: ResolvedSchema,
    project_config: Optional[ProjectConfig] = None,
    *,
    warnings: Optional[WarningCollector] = None,
) -> AssembledInstructions:
    """
    Monta as instruções de `artifact_id` e devolve as partes usadas.

    Raises:
        ArtifactNotFoundError: se o artefato não existir no schema.
        TemplateLoadError: se o template não puder ser lido.
    """
    collector = ensure_collector(warnings)
    check_rules(project_config, resolved, collector)

    artifact = resolved.schema.get_artifact(artifact_id)
    if artifact is None:
        raise ArtifactNotFoundError(
            f"Artifact '{artifact_id}' not found in schema '{resolved.name}'",
            details={
                "artifact_id": artifact_id,
                "schema": resolved.name,
                "available": sorted(resolved.schema.artifact_ids()),
            },
        )

    template = load_template(resolved, artifact)
    context = None
    rules: Tuple[str, ...] = ()
    if project_config is not None:
        if project_config.context and project_config.context.strip():
            context = project_config.context
        rules = tuple(project_config.rules_for(artifact_id))

    return AssembledInstructions(
        artifact=artifact,
        template=template,
        context=context,
        rules=rules,
        text=render_instructions(template, context=context, rules=list(rules)),
    )


def assemble_instructions(
    artifact_id: str,
    resolved: ResolvedSchema,
    project_config: Optional[ProjectConfig] = None,
    *,
    warnings: Optional[WarningCollector] = None,
) -> str:
    """Texto final das instruções para `artifact_id` (ver `build_instructions`)."""
    return build_instructions(artifact_id, resolved, project_config, warnings=warnings).text
