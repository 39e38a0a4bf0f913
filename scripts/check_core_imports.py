#!/usr/bin/env python3
"""
Fail if core imports the client or resource layers.
Checks all Python files under src/monday_client/core/.
Imports guarded by ``if TYPE_CHECKING:`` are allowed.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = REPO_ROOT / "src"
CORE_DIR = SRC_DIR / "monday_client" / "core"

FORBIDDEN_PREFIXES = (
    "monday_client.client",
    "monday_client.resources",
)


def is_forbidden(module: str) -> bool:
    return any(
        module == prefix or module.startswith(prefix + ".")
        for prefix in FORBIDDEN_PREFIXES
    )


def _package_of(path: Path) -> list[str]:
    return list(path.relative_to(SRC_DIR).with_suffix("").parts[:-1])


def _resolve(node: ast.ImportFrom, package: list[str]) -> str:
    if not node.level:
        return node.module or ""
    base = package[: len(package) - (node.level - 1)]
    return ".".join(base + ([node.module] if node.module else []))


def _is_type_checking_block(node: ast.AST) -> bool:
    if not isinstance(node, ast.If):
        return False
    test = node.test
    return (isinstance(test, ast.Name) and test.id == "TYPE_CHECKING") or (
        isinstance(test, ast.Attribute) and test.attr == "TYPE_CHECKING"
    )


def _runtime_imports(tree: ast.AST):
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in ast.iter_child_nodes(node):
            if _is_type_checking_block(child):
                continue
            if isinstance(child, (ast.Import, ast.ImportFrom)):
                yield child
            stack.append(child)


def scan_file(path: Path) -> list[str]:
    errors: list[str] = []
    package = _package_of(path)
    tree = ast.parse(path.read_text())
    for node in _runtime_imports(tree):
        if isinstance(node, ast.Import):
            modules = [alias.name for alias in node.names]
        else:
            mod = _resolve(node, package)
            modules = [mod] + [f"{mod}.{alias.name}" for alias in node.names]
        for mod in modules:
            if mod and is_forbidden(mod):
                errors.append(f"{path}: forbidden import '{mod}'")
                break
    return errors


def main() -> int:
    violations: list[str] = []
    for py_file in CORE_DIR.rglob("*.py"):
        violations.extend(scan_file(py_file))

    if violations:
        for v in violations:
            print(v, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
