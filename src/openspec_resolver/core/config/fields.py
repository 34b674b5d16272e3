"""
Validadores independentes dos campos de `openspec/config.yaml`.

Cada validador trata exatamente um campo e nunca olha para os vizinhos:
um campo malformado não descarta campos válidos. O loader compõe os
validadores e aplica apenas os resultados `Ok`.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .result import MISSING, Absent, Err, FieldResult, Ok


MAX_CONTEXT_SIZE = 50 * 1024


def validate_schema_field(raw: Any) -> FieldResult:
    if raw is MISSING:
        return Absent()
    if isinstance(raw, str) and len(raw) > 0:
        return Ok(raw)
    return Err(("Invalid 'schema' field in config (must be non-empty string)",))


def validate_context_field(raw: Any) -> FieldResult:
    if raw is MISSING:
        return Absent()
    if not isinstance(raw, str):
        return Err(("Invalid 'context' field in config (must be string)",))

    size = len(raw.encode("utf-8"))
    if size > MAX_CONTEXT_SIZE:
        return Err((
            f"Context too large ({size / 1024:.1f}KB, limit: {MAX_CONTEXT_SIZE // 1024}KB), "
            "ignoring context field",
        ))
    return Ok(raw)


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def validate_rules_field(raw: Any) -> FieldResult:
    """
    Valida `rules` chave a chave.

    - chaves cujo valor não é lista de strings são ignoradas com warning
    - strings vazias são filtradas com warning
    - chaves que ficam sem regras são omitidas
    """
    if raw is MISSING:
        return Absent()
    if not isinstance(raw, dict):
        return Err(("Invalid 'rules' field in config (must be object)",))

    warnings: List[str] = []
    parsed: Dict[str, List[str]] = {}
    for key, rules in raw.items():
        artifact_id = str(key)
        if not _is_string_list(rules):
            warnings.append(
                f"Rules for '{artifact_id}' must be an array of strings, ignoring this artifact's rules"
            )
            continue

        kept = [rule for rule in rules if len(rule) > 0]
        if len(kept) < len(rules):
            warnings.append(f"Some rules for '{artifact_id}' are empty strings, ignoring them")
        if kept:
            parsed[artifact_id] = kept

    if not parsed:
        return Absent(tuple(warnings))
    return Ok(parsed, tuple(warnings))


FIELD_VALIDATORS = (
    ("schema", validate_schema_field),
    ("context", validate_context_field),
    ("rules", validate_rules_field),
)
