"""Pipeline orchestration: scan a spec directory and write the generated modules."""

from __future__ import annotations

import difflib
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from .config import CONFIG_FILENAME, CmdGenConfig, load_config
from .errors import OutputError
from .logging import get_logger
from .models import CommandMetadata
from .rendering import OUTPUTS, CommandRenderer
from .scanner import SpecScanner


@dataclass
class GeneratedFile:
    """One rendered output and how it compares with the file on disk."""

    path: Path
    content: str
    changed: bool
    diff: str
    previous: Optional[str] = None


@dataclass
class GenerationResult:
    """Outcome of a generation run."""

    root: Path
    commands: Dict[str, CommandMetadata]
    files: List[GeneratedFile]
    dry_run: bool

    @property
    def changed(self) -> List[GeneratedFile]:
        return [generated for generated in self.files if generated.changed]


class Generator:
    """Coordinates scanning, rendering and writing for one spec directory."""

    def __init__(
        self,
        scanner: SpecScanner | None = None,
        renderer: CommandRenderer | None = None,
    ) -> None:
        self._scanner_override = scanner
        self._renderer_override = renderer
        self.logger = get_logger("generator")

    def generate(self, path: str | Path = ".", *, dry_run: bool = False) -> GenerationResult:
        """Regenerate the three command modules of ``path``.

        Every output is rendered in memory before anything is written, so a
        failure leaves the previous files untouched.
        """
        root = Path(path).expanduser().resolve()
        self.logger.info("Generating commands for %s", root)
        config = load_config(root / CONFIG_FILENAME)

        commands = self._scanner(config).scan(root)
        self.logger.info("Found %d commands", len(commands))

        rendered = self._renderer(config).render_all(commands)
        files = [
            self._compare(root / getattr(config.outputs, output), rendered[output])
            for output in OUTPUTS
        ]

        if dry_run:
            self.logger.info("Dry run: %d of %d outputs would change", sum(f.changed for f in files), len(files))
        else:
            _write_all(files)
            self.logger.debug("Wrote %s", ", ".join(generated.path.name for generated in files))

        return GenerationResult(root=root, commands=commands, files=files, dry_run=dry_run)

    def _scanner(self, config: CmdGenConfig) -> SpecScanner:
        if self._scanner_override is not None:
            return self._scanner_override
        return SpecScanner(
            config.tags,
            allow_duplicate_identifiers=config.allow_duplicate_identifiers,
        )

    def _renderer(self, config: CmdGenConfig) -> CommandRenderer:
        if self._renderer_override is not None:
            return self._renderer_override
        return CommandRenderer(
            config.templates_dir,
            runtime_module=config.runtime_module,
            runs_module=Path(config.outputs.runs).stem,
            license_header=config.license_header,
            client_names=config.clients,
        )

    @staticmethod
    def _compare(path: Path, content: str) -> GeneratedFile:
        previous: Optional[str] = None
        if path.exists():
            try:
                previous = path.read_text(encoding="utf-8")
            except UnicodeDecodeError as exc:
                raise OutputError(
                    f"{path.name} exists but is not UTF-8 text; move it aside to regenerate it"
                ) from exc
        diff = difflib.unified_diff(
            (previous or "").splitlines(keepends=True),
            content.splitlines(keepends=True),
            fromfile=f"{path.name} (current)",
            tofile=f"{path.name} (generated)",
        )
        return GeneratedFile(
            path=path,
            content=content,
            changed=previous != content,
            diff="".join(diff),
            previous=previous,
        )


def _write_all(files: List[GeneratedFile]) -> None:
    """Replace every output, or leave all of them as they were.

    All temp files are written before the first ``os.replace``. If a replace
    fails, outputs already replaced get their previous contents back.
    """
    staged: List[Tuple[GeneratedFile, Path]] = []
    try:
        for generated in files:
            tmp_path = generated.path.with_name(f".{generated.path.name}.tmp")
            staged.append((generated, tmp_path))
            tmp_path.write_text(generated.content, encoding="utf-8")
    except OSError:
        _discard(tmp_path for _, tmp_path in staged)
        raise

    replaced: List[GeneratedFile] = []
    try:
        for generated, tmp_path in staged:
            os.replace(tmp_path, generated.path)
            replaced.append(generated)
    except OSError:
        _discard(tmp_path for _, tmp_path in staged)
        for generated in replaced:
            _restore(generated)
        raise


def _restore(generated: GeneratedFile) -> None:
    if generated.previous is None:
        generated.path.unlink(missing_ok=True)
    else:
        generated.path.write_text(generated.previous, encoding="utf-8")


def _discard(paths: Iterable[Path]) -> None:
    for path in paths:
        path.unlink(missing_ok=True)


__all__ = ["GeneratedFile", "GenerationResult", "Generator"]
