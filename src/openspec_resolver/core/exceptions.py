"""
OpenSpec Resolver - Exceções canônicas (v1)

Este módulo define a raiz da hierarquia de exceções tipadas do resolver.

Objetivo:
- Permitir que cada domínio (schema, resolver, config, change, instructions)
  levante exceções semânticas tipadas
- Carregar o caminho do arquivo envolvido sempre que houver um
- Oferecer uma representação serializável estável para quem renderiza erros

Regras:
- Mensagem curta, humana e acionável
- Dados estruturados ficam em `details`, nunca embutidos só no texto
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union


PathLike = Union[str, Path]


class OpenSpecError(Exception):
    """Base class para exceções internas do resolver.

    Importante:
    - `path` identifica o arquivo ou diretório envolvido (quando existe)
    - `cause` preserva a exceção original de I/O ou parsing
    - `hint` sugere ao operador onde corrigir
    """

    def __init__(
        self,
        message: str,
        *,
        path: Optional[PathLike] = None,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = str(path) if path is not None else None
        self.cause = cause
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return {
            "type": type(self).__name__,
            "message": self.message,
            "path": self.path,
            "details": dict(self.details),
            "hint": self.hint,
        }
