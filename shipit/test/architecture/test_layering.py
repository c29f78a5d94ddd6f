from __future__ import annotations

import ast
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ImportRef:
    module: str
    line: int


def shipit_root() -> Path:
    return Path(__file__).resolve().parents[2]


def iter_source_files() -> list[Path]:
    root = shipit_root()
    files: list[Path] = []
    for path in sorted(root.rglob("*.py")):
        rel = path.relative_to(root)
        if rel.parts[0] == "test" or "__pycache__" in rel.parts:
            continue
        files.append(path)
    return files


def read_tree(path: Path) -> ast.AST:
    return ast.parse(path.read_text(encoding="utf-8"), filename=str(path))


def parse_imports(path: Path) -> list[ImportRef]:
    imports: list[ImportRef] = []
    for node in ast.walk(read_tree(path)):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.append(ImportRef(module=alias.name, line=node.lineno))
        elif isinstance(node, ast.ImportFrom) and not node.level and node.module:
            imports.append(ImportRef(module=node.module, line=node.lineno))
    return imports


def matches_prefix(module: str, prefix: str) -> bool:
    return module == prefix or module.startswith(prefix + ".")


def _offenders(prefix: str, allowlist: set[str]) -> list[str]:
    root = shipit_root()
    out: list[str] = []
    for path in iter_source_files():
        rel = path.relative_to(root).as_posix()
        if rel in allowlist:
            continue
        for item in parse_imports(path):
            if matches_prefix(item.module, prefix):
                out.append(f"{rel}:{item.line}: imports '{item.module}'")
    return out


def test_subprocess_only_in_process_module() -> None:
    offenders = _offenders("subprocess", {"platform/process.py"})
    assert not offenders, "Subprocess policy violations:\n" + "\n".join(offenders)


def test_rich_only_in_console_module() -> None:
    offenders = _offenders("rich", {"output/console.py"})
    assert not offenders, "Direct rich usage policy violations:\n" + "\n".join(offenders)


def test_release_domain_runs_nothing() -> None:
    root = shipit_root()
    offenders: list[str] = []
    for path in iter_source_files():
        rel = path.relative_to(root).as_posix()
        if not rel.startswith("release/"):
            continue
        for item in parse_imports(path):
            if any(
                matches_prefix(item.module, p)
                for p in ("shipit.platform", "shipit.services", "shipit.cli", "typer")
            ):
                offenders.append(f"{rel}:{item.line}: imports '{item.module}'")
    assert not offenders, "Layering violations:\n" + "\n".join(offenders)
