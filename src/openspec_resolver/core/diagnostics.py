# src/openspec_resolver/core/diagnostics.py
"""
Coletor explícito de warnings não fatais.

Este módulo define o `WarningCollector`, a estrutura que recebe todos os
warnings emitidos pelo resolver (config malformada, regras para artefatos
desconhecidos, schemas ilegíveis durante listagem).

O coletor substitui qualquer estado global de deduplicação: ele pertence
ao escopo da requisição do chamador e é passado explicitamente para as
funções que podem emitir warnings.

Responsabilidades do módulo:
    - Deduplicar warnings idênticos dentro do mesmo coletor
    - Registrar eventos estruturados (source, level, message, timestamp)
    - Encaminhar cada warning aceito ao logger do módulo emissor

Decisões arquiteturais:
    - Dedup é por mensagem exata, por instância de coletor
    - Eventos usam timestamps UTC em ISO-8601
    - O coletor nunca levanta exceção

Invariantes:
    - `messages` nunca contém duplicatas
    - `events` tem exatamente um evento por mensagem aceita, na ordem de emissão

Limites explícitos:
    - Não imprime nada no terminal por conta própria
    - Não persiste warnings
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Set


logger = logging.getLogger(__name__)


@dataclass
class WarningCollector:
    """
    Coletor de warnings com deduplicação por mensagem.

    Campos:
    - messages: warnings aceitos, na ordem de emissão
    - events: log estruturado equivalente (um evento por warning aceito)
    """

    messages: List[str] = field(default_factory=list)
    events: List[Dict[str, Any]] = field(default_factory=list)

    _seen: Set[str] = field(default_factory=set, init=False, repr=False)

    def warn(
        self,
        message: str,
        *,
        source: str = "openspec",
        log: Optional[logging.Logger] = None,
        **extra: Any,
    ) -> bool:
        """Registra `message` se ainda não foi visto; retorna True se aceito."""
        if message in self._seen:
            return False
        self._seen.add(message)
        self.messages.append(message)

        event = {
            "source": source,
            "level": "WARNING",
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

        (log or logger).warning(message)
        return True

    def has_warned(self, message: str) -> bool:
        return message in self._seen


def ensure_collector(warnings: Optional[WarningCollector]) -> WarningCollector:
    return warnings if warnings is not None else WarningCollector()
