"""Source scanning and command metadata collection."""

from __future__ import annotations

import ast
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from .errors import DuplicateCommandError, ScanError, TagSyntaxError
from .extract import extract_command, extract_param
from .logging import get_logger, source_location
from .models import CommandMetadata, ParamMetadata
from .tags import TagKeys, parse_tags

_QUOTES = ("'", '"')
_TRIPLE_QUOTES = ("'''", '"""')


def _iter_source_files(root: Path) -> Iterator[Path]:
    for path in sorted(root.iterdir()):
        if path.is_file() and path.suffix == ".py":
            yield path


def _parse_module(path: Path) -> Tuple[ast.Module, str]:
    try:
        source = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ScanError(f"{path.name}: not valid UTF-8 source: {exc}") from exc
    try:
        tree = ast.parse(source, filename=str(path))
    except SyntaxError as exc:
        raise ScanError(f"{path.name}:{exc.lineno}: {exc.msg}") from exc
    return tree, source


def _is_annotated(node: ast.expr) -> bool:
    if isinstance(node, ast.Name):
        return node.id == "Annotated"
    if isinstance(node, ast.Attribute):
        return node.attr == "Annotated"
    return False


def _field_tag(field: ast.AnnAssign, source: str) -> Optional[str]:
    """Return the source text of the first string literal in ``Annotated`` metadata."""
    annotation = field.annotation
    if not isinstance(annotation, ast.Subscript) or not _is_annotated(annotation.value):
        return None
    if not isinstance(annotation.slice, ast.Tuple):
        return None
    for element in annotation.slice.elts[1:]:
        if isinstance(element, ast.Constant) and isinstance(element.value, str):
            return ast.get_source_segment(source, element)
    return None


def _parse_field_tags(raw: str, path: Path, lineno: int) -> Dict[str, str]:
    if raw[:3] in _TRIPLE_QUOTES or raw[0] not in _QUOTES or "\n" in raw:
        raise TagSyntaxError(
            f"{path.name}:{lineno}: tags must be plain one-line string literals"
        )
    try:
        return parse_tags(raw)
    except TagSyntaxError as exc:
        raise TagSyntaxError(f"{path.name}:{lineno}: {exc}") from exc


class SpecScanner:
    """Collects command metadata from the annotated classes of a directory."""

    def __init__(
        self,
        keys: TagKeys | None = None,
        *,
        allow_duplicate_identifiers: bool = False,
    ) -> None:
        self.keys = keys or TagKeys()
        self.allow_duplicate_identifiers = allow_duplicate_identifiers
        self.logger = get_logger("scanner")

    def scan(self, root: str | Path) -> Dict[str, CommandMetadata]:
        """Return command metadata keyed by class name, ordered by name."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Spec directory not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Spec path is not a directory: {root}")

        commands: Dict[str, CommandMetadata] = {}
        for path in _iter_source_files(root_path):
            tree, source = _parse_module(path)
            for node in tree.body:
                if not isinstance(node, ast.ClassDef):
                    continue
                command = self._scan_class(node, source, path)
                if command is None:
                    continue
                previous = commands.get(node.name)
                if previous is not None:
                    raise DuplicateCommandError(
                        f"command type {node.name} declared in both "
                        f"{previous.module}.py and {path.name}"
                    )
                commands[node.name] = command

        self._check_identifiers(commands)
        self.logger.debug("Scanner found %d commands in %s", len(commands), root_path)
        return dict(sorted(commands.items()))

    def _scan_class(
        self, node: ast.ClassDef, source: str, path: Path
    ) -> Optional[CommandMetadata]:
        command: Optional[CommandMetadata] = None
        params: List[ParamMetadata] = []
        for statement in node.body:
            if not isinstance(statement, ast.AnnAssign):
                continue
            raw = _field_tag(statement, source)
            if raw is None:
                continue
            if self.keys.command in raw:
                tags = _parse_field_tags(raw, path, statement.lineno)
                if command is not None:
                    self.logger.warning(
                        "%s declares several command markers, overriding the one on line %d",
                        node.name,
                        command.lineno,
                        extra=source_location(path, statement.lineno),
                    )
                command = extract_command(tags, self.keys)
                command.module = path.stem
                command.lineno = statement.lineno
                continue
            if self.keys.param in raw:
                tags = _parse_field_tags(raw, path, statement.lineno)
                params.append(extract_param(tags, self.keys))

        if command is None:
            if params:
                self.logger.debug(
                    "%s has parameter fields but no command marker; skipped",
                    node.name,
                    extra=source_location(path, node.lineno),
                )
            return None
        command.params = sorted(params, key=lambda param: param.name)
        return command

    def _check_identifiers(self, commands: Dict[str, CommandMetadata]) -> None:
        owners: Dict[str, str] = {}
        for name, command in sorted(commands.items()):
            owner = owners.setdefault(command.identifier, name)
            if owner == name:
                continue
            message = f"{owner} and {name} both declare command '{command.identifier}'"
            if not self.allow_duplicate_identifiers:
                raise DuplicateCommandError(message)
            self.logger.warning(message, extra=source_location(f"{command.module}.py", command.lineno))


__all__ = ["SpecScanner"]
