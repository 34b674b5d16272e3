"""Sugestões para nomes de schema desconhecidos (fuzzy matching)."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence

from .locations import SOURCES

if TYPE_CHECKING:  # pragma: no cover
    from .resolver import SchemaInfo


MAX_SUGGESTION_DISTANCE = 3
MAX_SUGGESTIONS = 3

_TIER_LABELS = {
    "project": "Project-local",
    "user": "User",
    "package": "Built-in",
}


def levenshtein(a: str, b: str) -> int:
    """Distância de edição clássica (inserção, remoção, substituição)."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def closest_names(name: str, infos: Sequence["SchemaInfo"]) -> List["SchemaInfo"]:
    scored = [(levenshtein(name, info.name), info.name, info) for info in infos]
    scored = [s for s in scored if s[0] <= MAX_SUGGESTION_DISTANCE]
    scored.sort(key=lambda s: (s[0], s[1]))
    return [s[2] for s in scored[:MAX_SUGGESTIONS]]


def suggest_schemas(invalid_name: str, infos: Sequence["SchemaInfo"]) -> str:
    """
    Monta a mensagem acionável para um nome de schema desconhecido.

    A mensagem contém até três sugestões com distância de edição <= 3 e o
    catálogo completo de schemas visíveis agrupado por tier vencedor.
    """
    lines = [f"Schema '{invalid_name}' not found", ""]

    suggestions = closest_names(invalid_name, infos)
    if suggestions:
        lines.append("Did you mean one of these?")
        for info in suggestions:
            lines.append(f"  - {info.name} ({info.source})")
        lines.append("")

    lines.append("Available schemas:")
    for source in SOURCES:
        names = sorted(info.name for info in infos if info.source == source)
        lines.append(f"  {_TIER_LABELS[source]}: {', '.join(names) if names else '(none found)'}")

    return "\n".join(lines)
