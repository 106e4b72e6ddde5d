"""Load and merge configuration from .treemark.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from treemark.config.defaults import CONFIG_FILENAME
from treemark.config.schema import (
    OUTPUT_FORMATS,
    OutputConfig,
    StatusConfig,
    SymbolsConfig,
    TreemarkConfig,
    is_valid_base_branch,
)

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    try:
        return cls(**filtered)
    except TypeError as exc:
        raise ConfigError(f"Invalid [{section}] section: {exc}") from exc


def _symbol_table(data: Dict[str, Any], column: str) -> Dict[str, str]:
    symbols = data.get("symbols", {})
    if not isinstance(symbols, dict):
        raise ConfigError("[symbols] must be a table")
    raw = symbols.get(column, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[symbols.{column}] must be a table")
    return {code: text for code, text in raw.items() if isinstance(text, str)}


def _validate(cfg: TreemarkConfig) -> None:
    if not is_valid_base_branch(cfg.status.base_branch):
        raise ConfigError(
            "status.base_branch must be a non-empty ref name not starting with '-': "
            f"{cfg.status.base_branch!r}"
        )
    for name in ("include_committed", "show_ignored"):
        if not isinstance(getattr(cfg.status, name), bool):
            raise ConfigError(f"status.{name} must be true or false")
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output.format must be one of {', '.join(OUTPUT_FORMATS)}: "
            f"{cfg.output.format!r}"
        )


def _env_flag(name: str) -> Optional[bool]:
    val = os.environ.get(name, "").strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    return None


def _merge_env_overrides(cfg: TreemarkConfig) -> None:
    """Apply TREEMARK_* environment variable overrides."""
    overrides: Dict[str, Any] = {}
    if val := os.environ.get("TREEMARK_BASE_BRANCH", "").strip():
        if not is_valid_base_branch(val):
            raise ConfigError(f"TREEMARK_BASE_BRANCH is not a usable ref name: {val!r}")
        overrides["base_branch"] = val
    if (flag := _env_flag("TREEMARK_INCLUDE_COMMITTED")) is not None:
        overrides["include_committed"] = flag
    if (flag := _env_flag("TREEMARK_SHOW_IGNORED")) is not None:
        overrides["show_ignored"] = flag
    if overrides:
        cfg.status = dataclasses.replace(cfg.status, **overrides)
    if val := os.environ.get("TREEMARK_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> TreemarkConfig:
    """Load, validate, and return a TreemarkConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = TreemarkConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = TreemarkConfig(
            version=str(raw.get("version", "1.0")),
            status=_build_section(raw, StatusConfig, "status"),
            output=_build_section(raw, OutputConfig, "output"),
            symbols=SymbolsConfig(
                index=_symbol_table(raw, "index"),
                working_tree=_symbol_table(raw, "working_tree"),
            ),
        )
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
