"""Resultados tagueados da validação campo a campo.

Cada validador de campo recebe o valor bruto (ou `MISSING`) e devolve:

- `Ok(value, warnings)`: o campo sobrevive (possivelmente filtrado)
- `Err(reasons)`: o campo é descartado; cada razão vira um warning
- `Absent(warnings)`: o campo não existe ou nada sobrou dele
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Tuple, TypeVar, Union


T = TypeVar("T")


class _Missing:
    _instance = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    warnings: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Err:
    reasons: Tuple[str, ...]

    @property
    def warnings(self) -> Tuple[str, ...]:
        return self.reasons


@dataclass(frozen=True)
class Absent:
    warnings: Tuple[str, ...] = ()


FieldResult = Union[Ok[Any], Err, Absent]
