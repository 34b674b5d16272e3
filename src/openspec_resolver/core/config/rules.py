"""Validação dos ids de `rules` contra os artefatos do schema resolvido."""

from __future__ import annotations

from typing import Iterable, List, Mapping


def validate_config_rules(
    rules: Mapping[str, object],
    valid_artifact_ids: Iterable[str],
    schema_name: str,
) -> List[str]:
    """Um warning por chave de `rules` que não é artefato de `schema_name`."""
    valid = set(valid_artifact_ids)
    valid_list = ", ".join(sorted(valid))
    warnings: List[str] = []
    for artifact_id in rules:
        if artifact_id not in valid:
            warnings.append(
                f'Unknown artifact ID in rules: "{artifact_id}". '
                f'Valid IDs for schema "{schema_name}": {valid_list}'
            )
    return warnings
