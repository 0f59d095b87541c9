import ast
import unittest
from pathlib import Path


def _iter_py_files(root: Path) -> list[Path]:
    return sorted(
        p
        for p in root.rglob("*.py")
        if "__pycache__" not in p.parts
    )


def _find_forbidden_imports(py_file: Path, forbidden_roots: tuple[str, ...]) -> list[str]:
    """
    Static guardrail: enforce layer boundaries regardless of installed optional deps.

    AST parsing (not regex) so that comments and strings never count.
    """
    try:
        tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    except SyntaxError as exc:
        return [f"SyntaxError while parsing {py_file}: {exc}"]

    offenders: list[str] = []

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                if alias.name.startswith(forbidden_roots):
                    offenders.append(f"import {alias.name}")
        elif isinstance(node, ast.ImportFrom):
            # Relative import (module=None) is always within the package boundary.
            if node.module is None:
                continue
            if node.module.startswith(forbidden_roots):
                offenders.append(f"from {node.module} import ...")

    return offenders


class TestLayerBoundaryImports(unittest.TestCase):
    def _assert_layer_clean(self, layer: str, forbidden: tuple[str, ...]) -> None:
        repo_root = Path(__file__).resolve().parents[1]
        layer_root = repo_root / "backend" / layer
        self.assertTrue(layer_root.exists(), msg=f"Expected layer dir: {layer_root}")

        violations: list[str] = []
        for py_file in _iter_py_files(layer_root):
            offenders = _find_forbidden_imports(py_file, forbidden)
            if offenders:
                violations.append(f"{py_file.relative_to(repo_root)}: {offenders}")

        self.assertFalse(
            violations,
            msg=f"`backend/{layer}` must not import {'/'.join(forbidden)}.\n" + "\n".join(violations),
        )

    def test_domain_is_pure(self) -> None:
        # Domain also stays free of third-party serialization/config libraries.
        self._assert_layer_clean("domain", ("application", "infrastructure", "pydantic", "yaml", "dotenv", "redis"))

    def test_application_does_not_import_infrastructure(self) -> None:
        self._assert_layer_clean("application", ("infrastructure", "pydantic", "yaml", "dotenv", "redis"))


if __name__ == "__main__":
    unittest.main()
