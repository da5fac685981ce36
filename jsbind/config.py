"""Configuration loading for jsbind (.jsbind.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import yaml

from .binding import DEFAULT_RUNTIME_IMPORT
from .extract import EXTRACTOR_NAMES

CONFIG_FILENAME = ".jsbind.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration is unreadable or incomplete."""


@dataclass
class JsbindConfig:
    """Effective settings for one generation run."""

    root: Path
    input: Optional[Path] = None
    object: Optional[str] = None
    package: Optional[str] = None
    output_dir: Optional[Path] = None
    prelude: List[Path] = field(default_factory=list)
    extractor: str = "auto"
    guard_cycles: bool = True
    runtime_import: str = DEFAULT_RUNTIME_IMPORT
    templates_dir: Optional[Path] = None

    def merged(self, **overrides: Any) -> "JsbindConfig":
        """Return a copy where every non-None override replaces the file value."""
        values = {key: value for key, value in overrides.items() if value is not None}
        prelude = values.pop("prelude", None)
        merged = replace(self, **values)
        if prelude:
            merged.prelude = [*self.prelude, *(Path(p) for p in prelude)]
        return merged

    def validate(self) -> Tuple[Path, str, str]:
        """Return ``(input, object, package)`` or raise ConfigError."""
        if self.input is None:
            raise ConfigError("Must provide an input file")
        if not self.object:
            raise ConfigError("Must provide library object name")
        if not self.package:
            raise ConfigError("Must provide binding's package name")
        if self.extractor not in EXTRACTOR_NAMES:
            choices = ", ".join(EXTRACTOR_NAMES)
            raise ConfigError(f"extractor must be one of {choices}, got {self.extractor!r}")
        return self.input, self.object, self.package

    @property
    def output_path(self) -> Path:
        directory = self.output_dir or Path.cwd()
        return directory / f"{self.package}.go"


def load_config(config_path: Path | None = None) -> JsbindConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path or Path.cwd())
    root = config_file.parent.resolve()

    if not config_file.exists():
        return JsbindConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    guard_cycles = _as_bool(data.get("guard_cycles"))
    return JsbindConfig(
        root=root,
        input=_as_path(data.get("input"), root),
        object=_as_str(data.get("object")),
        package=_as_str(data.get("package")),
        output_dir=_as_path(data.get("output_dir"), root),
        prelude=[root / item for item in _as_str_list(data.get("prelude"))],
        extractor=(_as_str(data.get("extractor")) or "auto").lower(),
        guard_cycles=True if guard_cycles is None else guard_cycles,
        runtime_import=_as_str(data.get("runtime_import")) or DEFAULT_RUNTIME_IMPORT,
        templates_dir=_as_path(data.get("templates_dir"), root),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_path(value: Any, root: Path) -> Optional[Path]:
    text = _as_str(value)
    if not text:
        return None
    return root / Path(text).expanduser()


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


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["CONFIG_FILENAME", "ConfigError", "JsbindConfig", "load_config"]
