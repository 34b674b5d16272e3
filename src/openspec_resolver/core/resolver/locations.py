# src/openspec_resolver/core/resolver/locations.py
"""
Tiers de armazenamento de schemas.

Este módulo define os três locais fixos onde schemas podem existir e a
lista ordenada de candidatos para um nome de schema.

Ordem de prioridade (fixa):
    1. project → <project_root>/openspec/schemas/<name>/schema.yaml
    2. user    → <home>/.local/share/openspec/schemas/<name>/schema.yaml
    3. package → <package_root>/schemas/<name>/schema.yaml

Decisões arquiteturais:
    - Cada caminho é função pura de (name, project_root | home_dir | package_root)
    - Nenhuma variável de ambiente participa da construção dos caminhos
    - O tier project só existe quando `project_root` é informado

Invariantes:
    - Sem `project_root`, a lista de candidatos é exatamente (user, package)
    - A ordem dos candidatos é sempre a ordem de prioridade

Limites explícitos:
    - Não lê nem valida o conteúdo dos schemas
    - Nomes com separador de caminho nunca saem do diretório do tier
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..schema.loader import SCHEMA_FILENAME


TOOL_NAME = "openspec"
CONFIG_DIR = "openspec"

SOURCE_PROJECT = "project"
SOURCE_USER = "user"
SOURCE_PACKAGE = "package"
SOURCES: Tuple[str, ...] = (SOURCE_PROJECT, SOURCE_USER, SOURCE_PACKAGE)

PathLike = Union[str, Path]

_PACKAGE_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class SchemaLocation:
    """Um diretório candidato para um schema em um tier."""

    source: str
    path: Path
    exists: bool

    @property
    def schema_file(self) -> Path:
        return self.path / SCHEMA_FILENAME


def is_valid_schema_name(name: str) -> bool:
    """Nome de schema é um único segmento de diretório (sem separadores nem `.`/`..`)."""
    return bool(name) and name not in (".", "..") and "/" not in name and "\\" not in name


def project_schemas_dir(project_root: PathLike) -> Path:
    return Path(project_root) / CONFIG_DIR / "schemas"


def user_schemas_dir(home_dir: Optional[PathLike] = None) -> Path:
    home = Path(home_dir) if home_dir is not None else Path.home()
    return home / ".local" / "share" / TOOL_NAME / "schemas"


def package_schemas_dir(package_root: Optional[PathLike] = None) -> Path:
    root = Path(package_root) if package_root is not None else _PACKAGE_ROOT
    return root / "schemas"


def tier_dirs(
    project_root: Optional[PathLike] = None,
    *,
    home_dir: Optional[PathLike] = None,
    package_root: Optional[PathLike] = None,
) -> List[Tuple[str, Path]]:
    """Diretórios raiz de cada tier ativo, em ordem de prioridade."""
    tiers: List[Tuple[str, Path]] = []
    if project_root is not None:
        tiers.append((SOURCE_PROJECT, project_schemas_dir(project_root)))
    tiers.append((SOURCE_USER, user_schemas_dir(home_dir)))
    tiers.append((SOURCE_PACKAGE, package_schemas_dir(package_root)))
    return tiers


def candidate_locations(
    name: str,
    project_root: Optional[PathLike] = None,
    *,
    home_dir: Optional[PathLike] = None,
    package_root: Optional[PathLike] = None,
) -> List[SchemaLocation]:
    """Lista ordenada de locais candidatos para `name`, com flag de existência.

    Nomes que não são um único segmento de diretório não têm candidatos.
    """
    if not is_valid_schema_name(name):
        return []
    locations: List[SchemaLocation] = []
    for source, root in tier_dirs(project_root, home_dir=home_dir, package_root=package_root):
        schema_dir = root / name
        locations.append(
            SchemaLocation(
                source=source,
                path=schema_dir,
                exists=(schema_dir / SCHEMA_FILENAME).is_file(),
            )
        )
    return locations
