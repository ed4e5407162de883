"""
Architecture rules.

The domain layer stays free of frameworks, and the workflow engine only
talks to storage and remote services through the application interfaces.
"""
import ast
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]


def _imports(package: str) -> list[tuple[str, str]]:
    found = []
    for path in (REPO_ROOT / package).rglob("*.py"):
        tree = ast.parse(path.read_text(encoding="utf-8"))
        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                found.extend((str(path.relative_to(REPO_ROOT)), alias.name) for alias in node.names)
            elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
                found.append((str(path.relative_to(REPO_ROOT)), node.module))
    return found


@pytest.mark.parametrize(
    "package, forbidden",
    [
        ("core/domain", ("sqlalchemy", "pydantic", "fastapi", "aiohttp", "core.infrastructure", "core.application")),
        ("orchestration", ("sqlalchemy", "fastapi", "aiohttp", "api", "core.infrastructure.database", "core.infrastructure.adapters")),
        ("core/application", ("sqlalchemy", "fastapi", "aiohttp", "api", "orchestration")),
    ],
)
def test_layer_imports(package, forbidden):
    violations = [
        (path, module)
        for path, module in _imports(package)
        if any(module == name or module.startswith(name + ".") for name in forbidden)
    ]

    assert not violations, f"{package} has forbidden imports: {violations}"
