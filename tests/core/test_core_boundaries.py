"""Core stays pure: no web framework, database or shell imports."""

import ast
from pathlib import Path

import pytest

import code_annotation.core as core
from code_annotation.infrastructure.identity import HeaderIdentity

CORE_DIR = Path(core.__file__).parent
FORBIDDEN = (
    "fastapi", "starlette", "sqlalchemy", "pydantic",
    "code_annotation.api", "code_annotation.services",
    "code_annotation.infrastructure", "code_annotation.models",
)


def _imported_modules(path: Path) -> list[str]:
    tree = ast.parse(path.read_text())
    names = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            names.extend(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module:
            names.append(node.module)
    return names


@pytest.mark.parametrize("path", sorted(CORE_DIR.glob("*.py")), ids=lambda p: p.name)
def test_core_module_imports_nothing_from_shell(path):
    for module in _imported_modules(path):
        assert not module.startswith(FORBIDDEN), f"{path.name} imports {module}"


def test_identity_resolves_from_any_object_with_headers():
    class _Request:
        headers = {"X-User-Id": "5"}

    assert HeaderIdentity("X-User-Id").get_user_id(_Request()) == 5
