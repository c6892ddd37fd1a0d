"""
Test suite for infra_config package structure.

Validates:
1. All Python modules parse and carry a module docstring
2. Every constructor defined in the package is documented
"""

import ast
from pathlib import Path

PACKAGE_DIR = Path(__file__).parent.parent / "infra_config"


def _modules():
    return sorted(path for path in PACKAGE_DIR.rglob("*.py") if "__pycache__" not in str(path))


class TestPackageStructure:
    """Validate module layout and documentation."""

    def test_all_modules_have_docstrings(self):
        """Every module starts with a docstring."""
        missing = []
        for py_file in _modules():
            with open(py_file, "r") as f:
                tree = ast.parse(f.read())
            if not ast.get_docstring(tree):
                missing.append(str(py_file.relative_to(PACKAGE_DIR)))

        assert not missing, "Modules without docstring:\n" + "\n".join(missing)

    def test_all_constructors_have_docstrings(self):
        """Every __init__ method documents its arguments."""
        missing = []
        for py_file in _modules():
            with open(py_file, "r") as f:
                tree = ast.parse(f.read())
            for class_node in (node for node in ast.walk(tree) if isinstance(node, ast.ClassDef)):
                for node in class_node.body:
                    if isinstance(node, ast.FunctionDef) and node.name == "__init__":
                        docstring = ast.get_docstring(node)
                        if not docstring or "Args:" not in docstring:
                            missing.append(f"{py_file.relative_to(PACKAGE_DIR)}::{class_node.name}")

        assert not missing, "Undocumented constructors:\n" + "\n".join(missing)
