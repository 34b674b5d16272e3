# tests/conftest.py
"""
Fixtures compartilhados para testes do OpenSpec Resolver.

Este módulo define fixtures reutilizáveis que fornecem:
- um HOME isolado por teste (tier `user` sempre vazio por padrão)
- uma raiz de projeto temporária com `openspec/`
- fábricas para gravar schemas em qualquer tier
- fábricas para gravar `openspec/config.yaml`

Decisões arquiteturais:
    - Todo teste roda com HOME apontando para um diretório temporário,
      para que schemas reais do usuário nunca vazem para os testes
    - O tier `package` usa os schemas embutidos reais (`spec-driven`)
    - YAML é escrito como texto explícito, sem gerar via dump

Invariantes:
    - Nenhuma fixture escreve fora de `tmp_path`
    - Nenhuma fixture depende de rede ou de variáveis de ambiente reais

Limites explícitos:
    - Não substituir testes de integração do CLI (fora de escopo)
"""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Dict, Iterable, Optional

import pytest


def schema_yaml(name: str, artifacts: Iterable[Dict], version: int = 1, description: str = "") -> str:
    """Texto YAML de um schema a partir de uma lista de dicts de artefato."""
    lines = [f"name: {name}", f"version: {version}", f"description: '{description}'", "artifacts:"]
    for a in artifacts:
        lines.append(f"  - id: {a['id']}")
        lines.append(f"    generates: {a.get('generates', a['id'] + '.md')}")
        lines.append(f"    description: {a.get('description', a['id'] + ' doc')}")
        lines.append(f"    template: {a.get('template', a['id'] + '.md')}")
        requires = a.get("requires", [])
        lines.append(f"    requires: [{', '.join(requires)}]")
    return "\n".join(lines) + "\n"


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> Path:
    """
    HOME temporário e vazio para cada teste.

    `Path.home()` resolve HOME (POSIX) ou USERPROFILE (Windows); ambos são
    redirecionados, isolando o tier `user`.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home


@pytest.fixture
def user_schemas_root(isolated_home: Path) -> Path:
    return isolated_home / ".local" / "share" / "openspec" / "schemas"


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    (root / "openspec").mkdir(parents=True)
    return root


@pytest.fixture
def project_schemas_root(project_root: Path) -> Path:
    return project_root / "openspec" / "schemas"


@pytest.fixture
def write_schema():
    """
    Fábrica que grava um schema completo (schema.yaml + templates).

    Uso:
        write_schema(root, "my-flow", [{"id": "proposal"}], templates={"proposal.md": "..."})

    Por padrão cada artefato recebe um template `templates/<id>.md` com o
    conteúdo `# <id> template`.
    """

    def _write(
        tier_root: Path,
        name: str,
        artifacts: Optional[Iterable[Dict]] = None,
        *,
        templates: Optional[Dict[str, str]] = None,
        raw: Optional[str] = None,
        description: str = "",
    ) -> Path:
        arts = list(artifacts or [{"id": "proposal"}])
        schema_dir = tier_root / name
        (schema_dir / "templates").mkdir(parents=True, exist_ok=True)
        text = raw if raw is not None else schema_yaml(name, arts, description=description)
        (schema_dir / "schema.yaml").write_text(text, encoding="utf-8")

        if templates is None:
            templates = {a.get("template", a["id"] + ".md"): f"# {a['id']} template\n" for a in arts}
        for rel, content in templates.items():
            target = schema_dir / "templates" / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return schema_dir

    return _write


@pytest.fixture
def write_config(project_root: Path):
    """Fábrica que grava `openspec/config.yaml` (ou `.yml`) com texto YAML."""

    def _write(content: str, filename: str = "config.yaml") -> Path:
        path = project_root / "openspec" / filename
        path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
        return path

    return _write
