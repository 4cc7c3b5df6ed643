"""Typed, layered application configuration with precedence handling.

Layers (later wins):
    0. embedded defaults (``_DEFAULTS``)
    1. ``core/config/defaults.ini``
    2. environment variables ``LINGUAOPS_<SECTION>__<KEY>``
    3. user overrides ``~/.linguaops/app.ini``

This is the *application* configuration (paths, logging, UI timings).
User preferences such as language and theme live in the JSON settings
document, see :mod:`core.settings.logic.settings_store`.
"""
from __future__ import annotations

import configparser
import os
from dataclasses import dataclass, fields
from pathlib import Path
from threading import RLock
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

# --------------------------------------------------------------------------- #
#  Paths & default definitions
# --------------------------------------------------------------------------- #
CONFIG_DIR = Path(__file__).resolve().parent
DEFAULTS_INI = CONFIG_DIR / "defaults.ini"
ENV_PREFIX = "LINGUAOPS_"


def _default_settings_dir() -> Path:
    return Path.home() / ".linguaops"


_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "Paths": {
        "settings_dir": _default_settings_dir().as_posix(),
        "settings_file": "config.json",
        "history_db": "history.db",
        "log_dir": "logs",
        "documents_dir": "documents",
    },
    "Logging": {
        "level": "INFO",
        "max_bytes": str(10 * 1024 * 1024),
        "backup_count": "3",
    },
    "Ui": {
        "min_width": "1000",
        "min_height": "700",
        "fade_out_ms": "150",
        "fade_in_ms": "300",
        "dispatcher_poll_ms": "50",
        "search_delay_ms": "2000",
    },
    "History": {
        "max_events": "500",
    },
}


# --------------------------------------------------------------------------- #
#  Datamodels
# --------------------------------------------------------------------------- #
@dataclass
class PathsConfig:
    settings_dir: Path
    settings_file: str = "config.json"
    history_db: str = "history.db"
    log_dir: str = "logs"
    documents_dir: str = "documents"

    # relative entries are resolved below settings_dir
    def _resolve(self, value: str) -> Path:
        p = Path(value).expanduser()
        return p if p.is_absolute() else self.settings_dir / p

    @property
    def settings_path(self) -> Path:
        return self._resolve(self.settings_file)

    @property
    def history_db_path(self) -> Path:
        return self._resolve(self.history_db)

    @property
    def log_dir_path(self) -> Path:
        return self._resolve(self.log_dir)

    @property
    def documents_dir_path(self) -> Path:
        return self._resolve(self.documents_dir)


@dataclass
class LoggingConfig:
    level: str = "INFO"
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 3


@dataclass
class UiConfig:
    min_width: int = 1000
    min_height: int = 700
    fade_out_ms: int = 150
    fade_in_ms: int = 300
    dispatcher_poll_ms: int = 50
    search_delay_ms: int = 2000


@dataclass
class HistoryConfig:
    max_events: int = 500


# --------------------------------------------------------------------------- #
#  Helpers
# --------------------------------------------------------------------------- #
def _cp_to_dict(cp: configparser.ConfigParser) -> Dict[str, Dict[str, Any]]:
    data: Dict[str, Dict[str, Any]] = {}
    for section in cp.sections():
        data[section] = {k: v for k, v in cp.items(section)}
    return data


def _read_ini(path: Path) -> Dict[str, Dict[str, Any]]:
    cp = configparser.ConfigParser()
    cp.read(path, encoding="utf-8")
    return _cp_to_dict(cp)


def _apply(target: Dict[str, Dict[str, Any]], source: Mapping[str, Mapping[str, Any]],
           layer: str, origin: str,
           sources: Dict[Tuple[str, str], Dict[str, str]]) -> None:
    for section, items in source.items():
        sec = target.setdefault(section, {})
        for key, value in items.items():
            sec[key] = value
            sources[(section, key)] = {"layer": layer, "source": origin}


def _cast(value: Any, typ: Any) -> Any:
    if typ in (Path, "Path"):
        return Path(str(value)).expanduser()
    if typ in (bool, "bool"):
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in {"1", "true", "yes", "on"}
    if typ in (int, "int"):
        return int(value)
    if typ in (float, "float"):
        return float(value)
    return str(value)


def _build_dataclass(cls: type, data: Dict[str, Any]) -> Any:
    kwargs = {}
    for field in fields(cls):
        if field.name not in data:
            continue
        kwargs[field.name] = _cast(data[field.name], field.type)
    return cls(**kwargs)


def _env_overlays(environ: Mapping[str, str]) -> Dict[str, Dict[str, Any]]:
    result: Dict[str, Dict[str, Any]] = {}
    for env_key, value in environ.items():
        if not env_key.startswith(ENV_PREFIX):
            continue
        parts = env_key[len(ENV_PREFIX):].split("__", 1)
        if len(parts) != 2:
            continue
        section, key = parts
        result.setdefault(section.title(), {})[key.lower()] = value
    return result


def user_config_path() -> Path:
    return _default_settings_dir() / "app.ini"


# --------------------------------------------------------------------------- #
#  ConfigService
# --------------------------------------------------------------------------- #
class ConfigService:
    """Facade merging layered configuration with type safety."""

    def __init__(
        self,
        *,
        defaults_ini: Optional[Path] = DEFAULTS_INI,
        user_ini: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._lock = RLock()
        self._defaults_ini = defaults_ini
        self._user_ini = user_ini if user_ini is not None else user_config_path()
        self._environ = environ if environ is not None else os.environ
        self.reload()

    # ------------------------------------------------------------------ #
    def reload(self) -> None:
        with self._lock:
            merged: Dict[str, Dict[str, Any]] = {}
            sources: Dict[Tuple[str, str], Dict[str, str]] = {}

            # Layer 0: embedded defaults
            _apply(merged, _DEFAULTS, "code", "embedded", sources)

            # Layer 1: defaults.ini
            if self._defaults_ini is not None and self._defaults_ini.exists():
                _apply(merged, _read_ini(self._defaults_ini), "defaults.ini",
                       str(self._defaults_ini), sources)

            # Layer 2: environment variables
            _apply(merged, _env_overlays(self._environ), "env", "os.environ", sources)

            # Layer 3: user overrides
            if self._user_ini.exists():
                _apply(merged, _read_ini(self._user_ini), "user", str(self._user_ini), sources)

            self._merged = merged
            self._sources = sources

            self.paths = _build_dataclass(PathsConfig, merged.get("Paths", {}))
            self.logging = _build_dataclass(LoggingConfig, merged.get("Logging", {}))
            self.ui = _build_dataclass(UiConfig, merged.get("Ui", {}))
            self.history = _build_dataclass(HistoryConfig, merged.get("History", {}))

    # ------------------------------------------------------------------ #
    def get(self, section: str, key: str, *, cast: Callable[[Any], Any] | type = str) -> Any:
        val = self._merged.get(section, {}).get(key)
        if val is None:
            return None
        if isinstance(cast, type):
            return _cast(val, cast)
        return cast(val)

    def meta_source(self, section: str, key: str) -> Dict[str, str] | None:
        return self._sources.get((section, key))
