import ast
import unittest
from pathlib import Path


def _called_name(node: ast.Call) -> str | None:
    if isinstance(node.func, ast.Name):
        return node.func.id
    if isinstance(node.func, ast.Attribute):
        return node.func.attr
    return None


class TestDotenvPolicy(unittest.TestCase):
    def test_load_dotenv_only_in_settings_with_override_true(self) -> None:
        """
        `.env` loading is centralized in the infrastructure settings module and
        always uses `override=True` (the project .env wins over the shell).
        """
        repo_root = Path(__file__).resolve().parents[1]
        backend_root = repo_root / "backend"
        allowed = {backend_root / "infrastructure" / "config" / "settings.py"}

        offenders: list[str] = []
        calls_in_allowed = 0

        for py_file in sorted(backend_root.rglob("*.py")):
            if "__pycache__" in py_file.parts:
                continue

            tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
            for node in ast.walk(tree):
                if not isinstance(node, ast.Call) or _called_name(node) != "load_dotenv":
                    continue

                rel = py_file.relative_to(repo_root)
                if py_file not in allowed:
                    offenders.append(f"{rel}: load_dotenv() must only appear in config/settings.py")
                    continue

                calls_in_allowed += 1
                has_override_true = any(
                    kw.arg == "override" and isinstance(kw.value, ast.Constant) and kw.value.value is True
                    for kw in node.keywords
                )
                if not has_override_true:
                    offenders.append(f"{rel}: load_dotenv() must use override=True")

        self.assertFalse(offenders, msg="Dotenv policy violations:\n" + "\n".join(offenders))
        self.assertEqual(calls_in_allowed, 1)


if __name__ == "__main__":
    unittest.main()
