"""Workspace configuration support for the lollint CLI."""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from lollint.linter.core import SCOPING_MODES
from lollint.linter.rules import BUILTIN_RULES, warning_rule_ids

CONFIG_FILE_NAMES = ("lollint.toml", ".lollintrc")
DEFAULT_EXTENSIONS = (".lol", ".lols")


class ConfigError(ValueError):
    """Raised when a configuration file is unreadable or invalid."""


@dataclass
class OutputDefaults:
    """Output flags applied when not given on the command line."""

    json: bool = False
    stats: bool = False
    color: bool = True


@dataclass
class LintConfig:
    """Resolved workspace configuration."""

    root: Path
    scoping: str = "lexical"
    disable: List[str] = field(default_factory=list)
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    output: OutputDefaults = field(default_factory=OutputDefaults)
    source: Optional[Path] = None
    raw: Dict[str, Any] = field(default_factory=dict)


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        try:
            return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def _string_list(value: Any, key: str) -> List[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    raise ConfigError(f"'{key}' must be a string or a list of strings")


def _parse_disable(data: Dict[str, Any]) -> List[str]:
    disabled = _string_list(data.get("disable") or [], "disable")
    allowed = set(warning_rule_ids())
    for rule_id in disabled:
        if rule_id not in BUILTIN_RULES:
            raise ConfigError(f"Unknown rule '{rule_id}' in 'disable'")
        if rule_id not in allowed:
            raise ConfigError(f"Rule '{rule_id}' reports errors and cannot be disabled")
    return disabled


def _parse_extensions(data: Dict[str, Any]) -> List[str]:
    raw = data.get("extensions")
    if raw is None:
        return list(DEFAULT_EXTENSIONS)
    extensions = []
    for entry in _string_list(raw, "extensions"):
        extensions.append(entry if entry.startswith(".") else f".{entry}")
    return extensions


def _parse_output(data: Dict[str, Any]) -> OutputDefaults:
    section = data.get("output") or {}
    if not isinstance(section, dict):
        raise ConfigError("'output' must be a table")
    flags = {}
    for key in ("json", "stats", "color"):
        value = section.get(key, getattr(OutputDefaults, key))
        if not isinstance(value, bool):
            raise ConfigError(f"'output.{key}' must be true or false, got {value!r}")
        flags[key] = value
    return OutputDefaults(**flags)


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        if not explicit.exists():
            raise ConfigError(f"Configuration file not found: {explicit}")
        return explicit
    for candidate in CONFIG_FILE_NAMES:
        path = root / candidate
        if path.exists():
            return path
    return None


def load_config(root: Path, explicit: Optional[Path] = None) -> LintConfig:
    root = root.resolve()
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        return LintConfig(root=root)

    if config_path.suffix == ".toml":
        data = _read_toml_config(config_path)
    else:
        data = _read_json_config(config_path)
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {config_path} must be a table/object")

    scoping = str(data.get("scoping") or "lexical")
    if scoping not in SCOPING_MODES:
        raise ConfigError(f"'scoping' must be one of {', '.join(SCOPING_MODES)}, got '{scoping}'")

    return LintConfig(
        root=root,
        scoping=scoping,
        disable=_parse_disable(data),
        extensions=_parse_extensions(data),
        output=_parse_output(data),
        source=config_path,
        raw=data,
    )


def discover_sources(paths: Iterable[Path], extensions: Iterable[str]) -> List[Path]:
    """Expand directories recursively to files with a matching suffix."""
    suffixes = tuple(extensions)
    collected: List[Path] = []
    for path in paths:
        if path.is_dir():
            collected.extend(
                sorted(p for p in path.rglob("*") if p.is_file() and p.suffix in suffixes)
            )
        else:
            collected.append(path)
    return collected


__all__ = [
    "CONFIG_FILE_NAMES",
    "DEFAULT_EXTENSIONS",
    "ConfigError",
    "OutputDefaults",
    "LintConfig",
    "locate_config_file",
    "load_config",
    "discover_sources",
]
