"""Renders command metadata through the Jinja templates."""

from __future__ import annotations

import json
import keyword
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Mapping

from botocore import xform_name
from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from ..actions import build_supported_actions
from ..errors import RenderError
from ..logging import get_logger
from ..models import CommandMetadata, DryRunMode, RunMode
from .constants import DEFAULT_CLIENT_NAMES, OUTPUTS, OUTPUT_TEMPLATES


def _pystr(value: object) -> str:
    return json.dumps(str(value))


def _label(command: CommandMetadata) -> str:
    return f"{command.action} {command.entity}"


def _is_python_name(value: str) -> bool:
    return value.isidentifier() and not keyword.iskeyword(value)


class CommandRenderer:
    """Turns the command collection into the source of the generated modules."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        runtime_module: str = "runtime",
        runs_module: str = "gen_runs",
        license_header: str | None = None,
        client_names: Mapping[str, str] | None = None,
    ) -> None:
        self.templates_dir = templates_dir
        self.runtime_module = runtime_module
        self.runs_module = runs_module
        self.license_header = license_header
        self.client_names = {**DEFAULT_CLIENT_NAMES, **(client_names or {})}
        self.logger = get_logger("rendering")
        self._env = self._create_env(templates_dir)

    def render(self, output: str, commands: Mapping[str, CommandMetadata]) -> str:
        """Render one output (``runs``, ``inits`` or ``definitions``)."""
        if output not in OUTPUT_TEMPLATES:
            raise RenderError(f"Unknown output '{output}'")
        self._check_renderable(commands)
        template_name = OUTPUT_TEMPLATES[output]
        try:
            template = self._env.get_template(template_name)
            return template.render(**self._context(commands))
        except TemplateError as exc:
            raise RenderError(f"{template_name}: {exc}") from exc

    def render_all(self, commands: Mapping[str, CommandMetadata]) -> Dict[str, str]:
        """Render every output; nothing is returned unless all of them succeed."""
        rendered = {output: self.render(output, commands) for output in OUTPUTS}
        self.logger.debug("Rendered %d outputs for %d commands", len(rendered), len(commands))
        return rendered

    def client_name(self, api: str) -> str:
        """Return the boto3 service name for an API identifier."""
        return self.client_names.get(api, api)

    def _check_renderable(self, commands: Mapping[str, CommandMetadata]) -> None:
        """Reject commands whose names would not survive as Python code.

        Tag values only ever reach the outputs as escaped string literals, but
        class names, module names and client methods are emitted verbatim.
        """
        for role, module in (("runtime module", self.runtime_module), ("runs module", self.runs_module)):
            if not _is_python_name(module):
                raise RenderError(f"{role} '{module}' is not a valid Python module name")
        for name, command in commands.items():
            if not _is_python_name(name):
                raise RenderError(f"{name}: not a valid Python class name")
            if not _is_python_name(command.module):
                raise RenderError(
                    f"{name}: module '{command.module}' is not importable; rename its file"
                )
            if command.run_mode is RunMode.DIRECT:
                method = xform_name(command.call)
                if not _is_python_name(method):
                    raise RenderError(
                        f"{name}: call '{command.call}' does not map to a client method ({method!r})"
                    )
            if command.dry_run_mode is DryRunMode.GENERATED and command.run_mode is RunMode.MANUAL:
                raise RenderError(
                    f"{name}: a generated dry run needs a call; mark the dry run manual"
                )

    def _context(self, commands: Mapping[str, CommandMetadata]) -> Dict[str, object]:
        imports: Dict[str, List[str]] = defaultdict(list)
        for name, command in sorted(commands.items()):
            imports[command.module].append(name)
        header_lines = self.license_header.splitlines() if self.license_header else []
        return {
            "commands": dict(sorted(commands.items())),
            "imports": dict(sorted(imports.items())),
            "runtime_module": self.runtime_module,
            "runs_module": self.runs_module,
            "header_lines": header_lines,
        }

    def _create_env(self, templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        loader = FileSystemLoader(directories)
        env = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        env.filters["snake_case"] = xform_name
        env.filters["client_name"] = self.client_name
        env.filters["pystr"] = _pystr
        env.filters["label"] = _label
        env.globals["build_supported_actions"] = build_supported_actions
        return env


__all__ = ["CommandRenderer"]
