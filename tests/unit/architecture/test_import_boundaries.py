"""Tests for architecture import boundaries.

These tests ensure that the layering of the package is maintained:
- The binding engine knows nothing about concrete vocabularies
- Vocabularies depend on the engine only, never on the codec facade
- Nothing outside the CLI imports from the CLI
"""

from __future__ import annotations

import ast
import re
from pathlib import Path

import pytest

# Root of the heritage_xml package
PACKAGE_ROOT = Path(__file__).parent.parent.parent.parent / "heritage_xml"

CLI_PATTERN = r"(^|\.)cli(\.|$)"


def get_python_files(directory: Path) -> list[Path]:
    """Get all Python files in a directory recursively."""
    return list(directory.rglob("*.py"))


def extract_imports_from_file(file_path: Path) -> list[str]:
    """Extract all imported module names from a Python file.

    Args:
        file_path: Path to Python file

    Returns:
        List of import strings (module names, relative ones without dots)
    """
    imports = []
    tree = ast.parse(file_path.read_text(encoding="utf-8"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.append(alias.name)
        elif isinstance(node, ast.ImportFrom):
            if node.module:
                imports.append(node.module)
            elif node.level:
                imports.extend(alias.name for alias in node.names)
    return imports


def has_forbidden_import(imports: list[str], forbidden_pattern: str) -> list[str]:
    """Return the imports that match a forbidden pattern."""
    pattern = re.compile(forbidden_pattern)
    return [imp for imp in imports if pattern.search(imp)]


def find_violations(directory: Path, forbidden_pattern: str) -> list[str]:
    violations = []
    for py_file in get_python_files(directory):
        forbidden = has_forbidden_import(extract_imports_from_file(py_file), forbidden_pattern)
        if forbidden:
            rel_path = py_file.relative_to(PACKAGE_ROOT.parent)
            violations.append(f"{rel_path}: {forbidden}")
    return violations


class TestCLIImportBoundary:
    """The CLI is the outermost layer; nothing else may import it."""

    @pytest.mark.parametrize(
        "layer", ["binding", "vocab", "application", "infrastructure"]
    )
    def test_layer_does_not_import_cli(self, layer: str):
        layer_dir = PACKAGE_ROOT / layer
        if not layer_dir.exists():
            pytest.skip(f"{layer} directory not found")

        violations = find_violations(layer_dir, CLI_PATTERN)

        assert not violations, f"{layer} imports CLI modules:\n" + "\n".join(violations)

    def test_codec_does_not_import_cli(self):
        imports = extract_imports_from_file(PACKAGE_ROOT / "codec.py")

        assert not has_forbidden_import(imports, CLI_PATTERN)


class TestEngineIsVocabularyAgnostic:
    def test_binding_does_not_import_vocabularies(self):
        violations = find_violations(PACKAGE_ROOT / "binding", r"(^|\.)vocab(\.|$)")

        assert not violations, "Binding engine imports vocabularies:\n" + "\n".join(
            violations
        )

    def test_vocabularies_do_not_import_codec(self):
        violations = find_violations(PACKAGE_ROOT / "vocab", r"(^|\.)codec(\.|$)")

        assert not violations, "Vocabularies import the codec facade:\n" + "\n".join(
            violations
        )
