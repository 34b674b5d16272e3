import pytest

from openspec_resolver.core.change import (
    DEFAULT_SCHEMA,
    ChangeExistsError,
    InvalidChangeNameError,
    UnknownSchemaError,
    create_change,
    read_change_metadata,
    validate_change_name,
)
from openspec_resolver.core.change.changes import change_name_error


@pytest.mark.parametrize("name", ["add-auth", "refactor-db2", "x"])
def test_valid_change_names(name) -> None:
    assert validate_change_name(name) == name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("", "Change name cannot be empty"),
        ("Add-Auth", "Change name must be lowercase (use kebab-case)"),
        ("add auth", "Change name cannot contain spaces (use hyphens instead)"),
        ("add_auth", "Change name cannot contain underscores (use hyphens instead)"),
        ("-add", "Change name cannot start with a hyphen"),
        ("add-", "Change name cannot end with a hyphen"),
        ("add--auth", "Change name cannot contain consecutive hyphens"),
        ("add.auth", "Change name can only contain lowercase letters, numbers, and hyphens"),
        ("1-add", "Change name must start with a letter"),
    ],
)
def test_invalid_change_names(name, expected) -> None:
    assert change_name_error(name) == expected
    with pytest.raises(InvalidChangeNameError):
        validate_change_name(name)


def test_create_change_defaults_to_builtin_schema(project_root) -> None:
    result = create_change(project_root, "add-auth")

    assert result.schema == DEFAULT_SCHEMA
    assert result.change_dir == project_root / "openspec" / "changes" / "add-auth"
    assert read_change_metadata(result.change_dir, project_root).schema == DEFAULT_SCHEMA


def test_create_change_uses_config_schema(project_root, project_schemas_root, write_schema, write_config) -> None:
    write_schema(project_schemas_root, "team-flow")
    write_config("schema: team-flow\n")

    result = create_change(project_root, "add-auth")

    assert result.schema == "team-flow"
    assert read_change_metadata(result.change_dir, project_root).schema == "team-flow"


def test_explicit_schema_wins_over_config(project_root, project_schemas_root, write_schema, write_config) -> None:
    write_schema(project_schemas_root, "team-flow")
    write_config("schema: team-flow\n")

    assert create_change(project_root, "add-auth", schema=DEFAULT_SCHEMA).schema == DEFAULT_SCHEMA


def test_unknown_schema_creates_nothing(project_root) -> None:
    with pytest.raises(UnknownSchemaError):
        create_change(project_root, "add-auth", schema="ghost")

    assert not (project_root / "openspec" / "changes" / "add-auth").exists()


def test_existing_change_is_rejected(project_root) -> None:
    create_change(project_root, "add-auth")

    with pytest.raises(ChangeExistsError):
        create_change(project_root, "add-auth")
