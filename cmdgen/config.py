"""Configuration loading for cmdgen (.cmdgen.yml)."""

from __future__ import annotations

import keyword
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError
from .tags import TagKeys

CONFIG_FILENAME = ".cmdgen.yml"


@dataclass
class OutputConfig:
    """File names of the three generated modules."""

    runs: str = "gen_runs.py"
    inits: str = "gen_inits.py"
    definitions: str = "gen_cmds_defs.py"


@dataclass
class CmdGenConfig:
    """Represents the settings defined in .cmdgen.yml."""

    root: Path
    outputs: OutputConfig = field(default_factory=OutputConfig)
    runtime_module: str = "runtime"
    templates_dir: Optional[Path] = None
    license_header: Optional[str] = None
    allow_duplicate_identifiers: bool = False
    tags: TagKeys = field(default_factory=TagKeys)
    clients: Dict[str, str] = field(default_factory=dict)


def load_config(config_path: Path) -> CmdGenConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return CmdGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    outputs = OutputConfig()
    outputs_data = _as_dict(data.get("outputs"))
    for role in ("runs", "inits", "definitions"):
        name = _as_str(outputs_data.get(role))
        if name is None:
            continue
        if "/" in name or "\\" in name or not name.endswith(".py") or not _is_module_name(name[:-3]):
            raise ConfigError(f"outputs.{role} must be a .py file name, got '{name}'")
        setattr(outputs, role, name)

    runtime_module = _as_str(data.get("runtime_module")) or "runtime"
    if not _is_module_name(runtime_module):
        raise ConfigError(f"runtime_module must be a module name, got '{runtime_module}'")

    templates_dir_str = _as_str(data.get("templates_dir"))
    templates_dir = root / templates_dir_str if templates_dir_str else None

    try:
        tags = TagKeys.from_mapping(_as_str_map(data.get("tags")))
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc

    return CmdGenConfig(
        root=root,
        outputs=outputs,
        runtime_module=runtime_module,
        templates_dir=templates_dir,
        license_header=_as_str(data.get("license_header")),
        allow_duplicate_identifiers=_as_bool(data.get("allow_duplicate_identifiers")) or False,
        tags=tags,
        clients=_as_str_map(data.get("clients")),
    )


def _is_module_name(value: str) -> bool:
    return value.isidentifier() and not keyword.iskeyword(value)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{path.name} is not UTF-8 text: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_map(value: Any) -> Dict[str, str]:
    result: Dict[str, str] = {}
    for key, item in _as_dict(value).items():
        text = _as_str(item)
        if text is not None:
            result[str(key)] = text
    return result


__all__ = ["CONFIG_FILENAME", "CmdGenConfig", "ConfigError", "OutputConfig", "load_config"]
