# src/openspec_resolver/core/resolver/resolver.py
"""
Resolução de schemas por nome entre os três tiers.

Este módulo localiza schemas de workflow por nome, lista todos os schemas
visíveis com sua procedência e carrega o schema vencedor.

Política de resolução:
    - Os candidatos são avaliados em ordem fixa: project > user > package
    - O primeiro candidato existente vence
    - Vários candidatos existentes para o mesmo nome é shadowing, não erro

Decisões arquiteturais:
    - A lista de candidatos é iterada uma única vez por consulta
    - Omitir `project_root` reproduz exatamente um resolver de dois tiers
      (user, package); isso é compatibilidade, não conveniência
    - Nomes desconhecidos produzem mensagem com sugestões e catálogo

Invariantes:
    - `locate_schema` e `list_schemas` concordam sobre o tier vencedor
    - Cada nome aparece uma única vez em `list_schemas`

Limites explícitos:
    - Não faz cache
    - Não implementa herança ou overrides estruturais entre tiers
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..diagnostics import WarningCollector, ensure_collector
from ..schema.errors import SchemaLoadError
from ..schema.loader import SCHEMA_FILENAME, load_schema_file
from ..schema.model import Schema
from .errors import SchemaNotFoundError
from .locations import PathLike, SchemaLocation, candidate_locations, tier_dirs
from .suggest import suggest_schemas


_YAML_SUFFIX = re.compile(r"\.ya?ml$")


@dataclass(frozen=True)
class SchemaInfo:
    """Procedência de um nome de schema visível."""

    name: str
    source: str
    path: Path
    shadows: Tuple[SchemaLocation, ...] = ()

    @property
    def shadowed_sources(self) -> List[str]:
        return [loc.source for loc in self.shadows]


@dataclass(frozen=True)
class ResolvedSchema:
    """Schema carregado junto com o nome e o diretório de onde veio."""

    name: str
    source: str
    directory: Path
    schema: Schema


@dataclass(frozen=True)
class SchemaDescription:
    name: str
    description: str
    artifacts: Tuple[str, ...]
    source: str


def _winning_location(locations: List[SchemaLocation]) -> Optional[SchemaLocation]:
    for loc in locations:
        if loc.exists:
            return loc
    return None


def get_schema_dir(
    name: str,
    project_root: Optional[PathLike] = None,
    *,
    home_dir: Optional[PathLike] = None,
    package_root: Optional[PathLike] = None,
) -> Optional[Path]:
    """Diretório do schema vencedor para `name`, ou None."""
    winner = _winning_location(
        candidate_locations(name, project_root, home_dir=home_dir, package_root=package_root)
    )
    return winner.path if winner else None


def locate_schema(
    name: str,
    project_root: Optional[PathLike] = None,
    *,
    home_dir: Optional[PathLike] = None,
    package_root: Optional[PathLike] = None,
) -> Optional[Path]:
    """Caminho do `schema.yaml` vencedor para `name`, ou None."""
    schema_dir = get_schema_dir(name, project_root, home_dir=home_dir, package_root=package_root)
    return schema_dir / SCHEMA_FILENAME if schema_dir else None


def list_schema_names(
    project_root: Optional[PathLike] = None,
    *,
    home_dir: Optional[PathLike] = None,
    package_root: Optional[PathLike] = None,
) -> List[str]:
    """União ordenada dos nomes de schema visíveis em todos os tiers ativos."""
    names = set()
    for _source, root in tier_dirs(project_root, home_dir=home_dir, package_root=package_root):
        if not root.is_dir():
            continue
        for entry in root.iterdir():
            if entry.is_dir() and (entry / SCHEMA_FILENAME).is_file():
                names.add(entry.name)
    return sorted(names)


def list_schemas(
    project_root: Optional[PathLike] = None,
    *,
    home_dir: Optional[PathLike] = None,
    package_root: Optional[PathLike] = None,
) -> List[SchemaInfo]:
    """
    Lista cada schema visível uma única vez, com tier vencedor e shadows.

    Returns:
        List[SchemaInfo]: ordenada por nome; `shadows` segue a ordem de
        prioridade dos tiers sombreados.
    """
    infos: List[SchemaInfo] = []
    for name in list_schema_names(project_root, home_dir=home_dir, package_root=package_root):
        existing = [
            loc
            for loc in candidate_locations(name, project_root, home_dir=home_dir, package_root=package_root)
            if loc.exists
        ]
        if not existing:
            continue
        winner, shadows = existing[0], tuple(existing[1:])
        infos.append(SchemaInfo(name=name, source=winner.source, path=winner.path, shadows=shadows))
    return infos


def resolve_schema(
    name: str,
    project_root: Optional[PathLike] = None,
    *,
    home_dir: Optional[PathLike] = None,
    package_root: Optional[PathLike] = None,
) -> ResolvedSchema:
    """
    Resolve `name` para o schema vencedor e o carrega.

    Aceita o nome com sufixo `.yaml`/`.yml` por compatibilidade.

    Raises:
        SchemaNotFoundError: se nenhum tier contiver o schema.
        SchemaLoadError: se o `schema.yaml` vencedor for ilegível ou inválido.
    """
    normalized = _YAML_SUFFIX.sub("", name)
    locations = candidate_locations(normalized, project_root, home_dir=home_dir, package_root=package_root)
    winner = _winning_location(locations)
    if winner is None:
        infos = list_schemas(project_root, home_dir=home_dir, package_root=package_root)
        raise SchemaNotFoundError(
            suggest_schemas(normalized, infos),
            name=normalized,
            available=[info.name for info in infos],
            hint="Use one of the available schema names or add the schema under openspec/schemas/",
        )

    return ResolvedSchema(
        name=normalized,
        source=winner.source,
        directory=winner.path,
        schema=load_schema_file(winner.schema_file),
    )


def describe_schemas(
    project_root: Optional[PathLike] = None,
    *,
    warnings: Optional[WarningCollector] = None,
    home_dir: Optional[PathLike] = None,
    package_root: Optional[PathLike] = None,
) -> List[SchemaDescription]:
    """Nome, descrição, artefatos e tier de cada schema visível e válido.

    Schemas que falham ao carregar são omitidos com um warning.
    """
    collector = ensure_collector(warnings)
    described: List[SchemaDescription] = []
    for info in list_schemas(project_root, home_dir=home_dir, package_root=package_root):
        try:
            schema = load_schema_file(info.path / SCHEMA_FILENAME)
        except SchemaLoadError as e:
            collector.warn(f"Skipping schema '{info.name}': {e}", source="resolver", path=e.path)
            continue
        described.append(
            SchemaDescription(
                name=info.name,
                description=schema.description,
                artifacts=tuple(schema.artifact_ids()),
                source=info.source,
            )
        )
    return described


def schema_catalog(
    project_root: Optional[PathLike] = None,
    *,
    home_dir: Optional[PathLike] = None,
    package_root: Optional[PathLike] = None,
) -> Dict[str, List[str]]:
    """Nomes visíveis agrupados pelo tier vencedor."""
    catalog: Dict[str, List[str]] = {}
    for info in list_schemas(project_root, home_dir=home_dir, package_root=package_root):
        catalog.setdefault(info.source, []).append(info.name)
    return catalog
