# tests/core/instructions/test_assembler.py
"""
Testes da montagem de instruções (context → rules → template).

Os testes asseguram que:
- a saída tem exatamente o formato esperado, byte a byte
- blocos ausentes não aparecem (nem vazios)
- strings do usuário são inseridas sem escape
- ids de `rules` desconhecidos geram warning uma única vez por coletor
- o template é procurado no diretório do schema antes de `templates/`
"""

import pytest

from openspec_resolver.core.config import ProjectConfig
from openspec_resolver.core.diagnostics import WarningCollector
from openspec_resolver.core.instructions import (
    ArtifactNotFoundError,
    TemplateLoadError,
    assemble_instructions,
    build_instructions,
    render_instructions,
)
from openspec_resolver.core.resolver import resolve_schema


ARTIFACTS = [{"id": "proposal"}, {"id": "design", "requires": ["proposal"]}]


@pytest.fixture
def resolved(project_root, project_schemas_root, write_schema):
    write_schema(project_schemas_root, "my-flow", ARTIFACTS)
    return resolve_schema("my-flow", project_root)


def test_full_output_is_exact(resolved) -> None:
    config = ProjectConfig(context="A\nB", rules={"proposal": ["R1"]})

    text = assemble_instructions("proposal", resolved, config)

    assert text == (
        "<project_context>\nA\nB\n</project_context>\n"
        "\n"
        "<rules>\n- R1\n</rules>\n"
        "\n"
        "<template>\n# proposal template\n\n</template>\n"
    )


def test_no_rules_block_for_artifact_without_rules(resolved) -> None:
    config = ProjectConfig(context="A\nB", rules={"proposal": ["R1"]})

    text = assemble_instructions("design", resolved, config)

    assert "<rules>" not in text
    assert text.index("<project_context>") < text.index("<template>")


def test_template_only_without_config(resolved) -> None:
    assert assemble_instructions("proposal", resolved) == "<template>\n# proposal template\n\n</template>\n"


def test_whitespace_context_is_skipped() -> None:
    assert render_instructions("T", context="  \n ") == "<template>\nT\n</template>\n"


def test_user_strings_are_not_escaped(resolved) -> None:
    config = ProjectConfig(
        context='<b>bold</b> & "quoted"',
        rules={"proposal": ["Use </rules> literally", "a & b"]},
    )

    text = assemble_instructions("proposal", resolved, config)

    assert '<b>bold</b> & "quoted"' in text
    assert "- Use </rules> literally\n- a & b\n" in text


def test_unknown_rule_ids_warn_once_per_collector(resolved) -> None:
    config = ProjectConfig(rules={"testplan": ["x"], "proposal": ["y"]})
    warnings = WarningCollector()

    assemble_instructions("proposal", resolved, config, warnings=warnings)
    assemble_instructions("design", resolved, config, warnings=warnings)

    assert warnings.messages == [
        'Unknown artifact ID in rules: "testplan". Valid IDs for schema "my-flow": design, proposal'
    ]


def test_unknown_artifact_raises(resolved) -> None:
    with pytest.raises(ArtifactNotFoundError) as exc:
        assemble_instructions("tasks", resolved)

    assert exc.value.details["available"] == ["design", "proposal"]


def test_template_in_schema_dir_takes_priority(project_root, project_schemas_root, write_schema) -> None:
    schema_dir = write_schema(project_schemas_root, "my-flow", ARTIFACTS)
    (schema_dir / "proposal.md").write_text("direct\n", encoding="utf-8")

    text = assemble_instructions("proposal", resolve_schema("my-flow", project_root))

    assert text == "<template>\ndirect\n\n</template>\n"


def test_missing_template_raises(project_root, project_schemas_root, write_schema) -> None:
    write_schema(project_schemas_root, "my-flow", ARTIFACTS, templates={"proposal.md": "p\n"})
    resolved = resolve_schema("my-flow", project_root)

    with pytest.raises(TemplateLoadError) as exc:
        assemble_instructions("design", resolved)

    assert len(exc.value.details["searched"]) == 2


def test_build_instructions_exposes_parts(resolved) -> None:
    config = ProjectConfig(context=" \n", rules={"proposal": ["R1"]})

    assembled = build_instructions("proposal", resolved, config)

    assert assembled.artifact.id == "proposal"
    assert assembled.context is None
    assert assembled.rules == ("R1",)
    assert assembled.template == "# proposal template\n"
    assert assembled.text == assemble_instructions("proposal", resolved, config)
