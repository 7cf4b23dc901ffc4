"""Settings for the liby engine and CLI.

Defaults live on :class:`LibySettings`. A ``liby.toml`` file in the working
directory overrides them, and ``LIBY_*`` environment variables override the
file.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

CONFIG_FILENAMES = ("liby.toml", ".libyrc.toml")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class LibySettings:
    """Resolved settings."""

    encoding: str = "utf-8"
    color: bool = True
    gutter_width: int = 4
    marker: str = "^"
    log_level: str = "warning"


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _parse_bool(raw: Any, default: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    return default


def _parse_settings(data: Mapping[str, Any], base: LibySettings) -> LibySettings:
    section = data.get("liby") or data
    marker = str(section.get("marker") or base.marker)
    return LibySettings(
        encoding=str(section.get("encoding") or base.encoding),
        color=_parse_bool(section.get("color", base.color), base.color),
        gutter_width=int(section.get("gutter_width", base.gutter_width)),
        marker=marker[:1],
        log_level=str(section.get("log_level") or base.log_level).lower(),
    )


def apply_env_overrides(settings: LibySettings, environ: Optional[Mapping[str, str]] = None) -> LibySettings:
    env = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}
    if env.get("LIBY_ENCODING"):
        overrides["encoding"] = env["LIBY_ENCODING"]
    if env.get("LIBY_COLOR"):
        overrides["color"] = _parse_bool(env["LIBY_COLOR"], settings.color)
    if env.get("NO_COLOR"):
        overrides["color"] = False
    if env.get("LIBY_LOG_LEVEL"):
        overrides["log_level"] = env["LIBY_LOG_LEVEL"].lower()
    return replace(settings, **overrides) if overrides else settings


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_FILENAMES:
        path = root / candidate
        if path.exists():
            return path
    return None


def load_settings(
    root: Optional[Path] = None,
    explicit: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> LibySettings:
    root = (root or Path.cwd()).resolve()
    settings = LibySettings()
    config_path = locate_config_file(root, explicit)
    if config_path is not None:
        settings = _parse_settings(_read_toml_config(config_path), settings)
    return apply_env_overrides(settings, environ)


__all__ = ["LibySettings", "load_settings", "locate_config_file", "apply_env_overrides"]
