# src/openspec_resolver/core/schema/graph.py
"""
Análise do grafo de dependências (`requires`) de um schema.

Este módulo opera exclusivamente em nível estrutural sobre o grafo
artefato → dependências, oferecendo:
    - detecção de ciclos com o caminho do ciclo encontrado
    - ordem de construção topológica determinística
    - consulta de artefatos desbloqueados por um artefato

Decisões arquiteturais:
    - Ciclos são detectados por DFS com rastreamento da pilha de recursão;
      qualquer back-edge é um ciclo
    - A ordem de construção usa o algoritmo de Kahn com empates resolvidos
      por ordem lexicográfica do id
    - Ciclos são tratados como erro estrutural fatal

Invariantes:
    - Nenhum artefato aparece antes de suas dependências na ordem de construção
    - A mesma definição produz sempre a mesma ordem e o mesmo ciclo reportado

Limites explícitos:
    - Não valida referências desconhecidas (feito em `model.validate_schema`)
    - Não lê arquivos nem templates
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Mapping, Optional, Sequence, Set

from .errors import SchemaCycleError

if TYPE_CHECKING:  # pragma: no cover
    from .model import Schema


def find_cycle(
    deps: Mapping[str, Sequence[str]],
    *,
    raise_on_cycle: bool = False,
) -> Optional[List[str]]:
    """
    Procura um ciclo no grafo `id -> requires`.

    Os nós são visitados na ordem de declaração e as arestas na ordem em
    que aparecem em `requires`, o que torna o ciclo reportado determinístico.

    Args:
        deps: mapa de id para a lista de ids requeridos.
        raise_on_cycle: levanta `SchemaCycleError` em vez de retornar o ciclo.

    Returns:
        O caminho do ciclo (primeiro e último id iguais) ou None.
    """
    visited: Set[str] = set()
    on_stack: List[str] = []
    on_stack_set: Set[str] = set()

    def visit(node: str) -> Optional[List[str]]:
        visited.add(node)
        on_stack.append(node)
        on_stack_set.add(node)
        for dep in deps.get(node, ()):
            if dep in on_stack_set:
                start = on_stack.index(dep)
                return on_stack[start:] + [dep]
            if dep not in visited and dep in deps:
                found = visit(dep)
                if found:
                    return found
        on_stack.pop()
        on_stack_set.discard(node)
        return None

    for node in deps:
        if node in visited:
            continue
        cycle = visit(node)
        if cycle:
            if raise_on_cycle:
                raise SchemaCycleError(cycle)
            return cycle
    return None


def build_order(schema: "Schema") -> List[str]:
    """Ordem topológica determinística dos artefatos (Kahn, empates por id)."""
    incoming_count: Dict[str, int] = {}
    outgoing: Dict[str, Set[str]] = {}
    for artifact in schema.artifacts:
        incoming_count[artifact.id] = len(set(artifact.requires))
        outgoing.setdefault(artifact.id, set())
        for dep in artifact.requires:
            outgoing.setdefault(dep, set()).add(artifact.id)

    ready: List[str] = sorted(aid for aid, c in incoming_count.items() if c == 0)
    order: List[str] = []

    while ready:
        aid = ready.pop(0)
        order.append(aid)
        for child in sorted(outgoing[aid]):
            incoming_count[child] -= 1
            if incoming_count[child] == 0:
                ready.append(child)
                ready.sort()

    if len(order) != len(incoming_count):
        cycle = find_cycle({a.id: list(a.requires) for a in schema.artifacts})
        raise SchemaCycleError(cycle or sorted(set(incoming_count) - set(order)))

    return order


def dependents_of(schema: "Schema", artifact_id: str) -> List[str]:
    """Ids dos artefatos que requerem `artifact_id` (ordenados)."""
    return sorted(a.id for a in schema.artifacts if artifact_id in a.requires)
