"""
core/settings/logic/settings_store.py
=====================================

Per-user settings document (flat JSON key → value mapping).

Lifecycle
---------
• ``initialize()`` loads the document once at startup (or writes defaults).
• Setters only mutate memory; ``save()`` flushes the whole document.
  A crash between a setter and ``save()`` loses the change.
• Reads never fail: missing or wrong-typed entries yield the caller's
  default.
• Filesystem problems degrade to in-memory operation, they are logged and
  never raised.
"""
from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import Any, Dict, Final

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------ #
#  Recognized keys                                                   #
# ------------------------------------------------------------------ #
KEY_LANGUAGE: Final = "language"
KEY_THEME: Final = "theme"
KEY_WINDOW_WIDTH: Final = "windowWidth"
KEY_WINDOW_HEIGHT: Final = "windowHeight"
KEY_API_BASE_URL: Final = "apiBaseUrl"
KEY_ORDERS_WEBSITE_URL: Final = "ordersWebsiteUrl"
KEY_CURRENT_USER_NAME: Final = "currentUserName"
KEY_TELC_SHEET_URL: Final = "telcSheetUrl"
KEY_TELC_SA_EMAIL: Final = "telcSaEmail"

DEFAULT_LANGUAGE: Final = "de"
DEFAULT_THEME: Final = "dark"
DEFAULT_API_BASE_URL: Final = "http://localhost:8080/api"
DEFAULT_USER_NAME: Final = "User"

DEFAULTS: Final[Dict[str, Any]] = {
    KEY_LANGUAGE: DEFAULT_LANGUAGE,
    KEY_THEME: DEFAULT_THEME,
    KEY_WINDOW_WIDTH: 1200,
    KEY_WINDOW_HEIGHT: 800,
    KEY_API_BASE_URL: DEFAULT_API_BASE_URL,
    KEY_ORDERS_WEBSITE_URL: "",
    KEY_CURRENT_USER_NAME: DEFAULT_USER_NAME,
}

_SCALARS = (str, int, bool)


class SettingsStore:
    """Typed accessors over the JSON settings document."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._data: Dict[str, Any] = {}
        self._persistent = True

    # ------------------------------------------------------------------ #
    #  Lifecycle                                                         #
    # ------------------------------------------------------------------ #
    def initialize(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Settings directory %s unavailable, running in memory: %s",
                         self.path.parent, exc)
            self._persistent = False
            self._reset_to_defaults()
            return

        if self.path.exists():
            try:
                self._data = self._read_document()
                for key, value in DEFAULTS.items():
                    self._data.setdefault(key, value)
                logger.debug("Settings loaded from %s", self.path)
                return
            except (OSError, ValueError) as exc:
                logger.warning("Settings document %s unreadable, resetting to defaults: %s",
                               self.path, exc)
                self._backup_corrupt_document()

        self._reset_to_defaults()
        self.save()
        logger.info("Settings initialized with defaults at %s", self.path)

    def save(self) -> bool:
        """Write the full document; False if it could not be written."""
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8") as fh:
                json.dump(self._data, fh, indent=2, ensure_ascii=False)
            tmp.replace(self.path)
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Failed to save settings to %s: %s", self.path, exc)
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                logger.debug("Could not remove %s", tmp)
            self._persistent = False
            return False
        self._persistent = True
        logger.debug("Settings saved to %s", self.path)
        return True

    @property
    def is_persistent(self) -> bool:
        """False once the document could not be read/written from disk."""
        return self._persistent

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._data)

    # ------------------------------------------------------------------ #
    #  Generic accessors                                                 #
    # ------------------------------------------------------------------ #
    def get(self, key: str, default: Any = None) -> Any:
        """
        Return the stored value if it has the same scalar type as *default*,
        else *default*. With ``default=None`` any stored value is returned.
        """
        if default is None:
            return self._data.get(key)
        if isinstance(default, bool):
            return self.get_bool(key, default)
        if isinstance(default, int):
            return self.get_int(key, default)
        if isinstance(default, str):
            return self.get_str(key, default)
        value = self._data.get(key, default)
        return value if isinstance(value, type(default)) else default

    def set(self, key: str, value: Any) -> None:
        if not isinstance(value, _SCALARS):
            raise TypeError(f"Unsupported settings value for '{key}': {type(value).__name__}")
        self._data[key] = value

    def get_str(self, key: str, default: str) -> str:
        value = self._data.get(key)
        return value if isinstance(value, str) else default

    def get_int(self, key: str, default: int) -> int:
        value = self._data.get(key)
        # bool is an int subclass, but never a valid int setting
        if isinstance(value, bool) or not isinstance(value, int):
            return default
        return value

    def get_bool(self, key: str, default: bool) -> bool:
        value = self._data.get(key)
        return value if isinstance(value, bool) else default

    def set_str(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def set_int(self, key: str, value: int) -> None:
        self._data[key] = int(value)

    def set_bool(self, key: str, value: bool) -> None:
        self._data[key] = bool(value)

    # free-form properties (feature specific, may be lists/dicts)
    def get_property(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set_property(self, key: str, value: Any) -> None:
        try:
            json.dumps(value)
        except (TypeError, ValueError) as exc:
            raise TypeError(f"Settings value for '{key}' is not JSON serializable: {exc}") from None
        self._data[key] = value

    # ------------------------------------------------------------------ #
    #  Convenience accessors                                             #
    # ------------------------------------------------------------------ #
    def get_language(self) -> str:
        return self.get_str(KEY_LANGUAGE, DEFAULT_LANGUAGE)

    def set_language(self, language: str) -> None:
        self.set_str(KEY_LANGUAGE, language)

    def get_theme(self) -> str:
        return self.get_str(KEY_THEME, DEFAULT_THEME)

    def set_theme(self, theme: str) -> None:
        self.set_str(KEY_THEME, theme)

    def get_window_size(self) -> tuple[int, int]:
        return (
            self.get_int(KEY_WINDOW_WIDTH, DEFAULTS[KEY_WINDOW_WIDTH]),
            self.get_int(KEY_WINDOW_HEIGHT, DEFAULTS[KEY_WINDOW_HEIGHT]),
        )

    def set_window_size(self, width: int, height: int) -> None:
        self.set_int(KEY_WINDOW_WIDTH, width)
        self.set_int(KEY_WINDOW_HEIGHT, height)

    def get_api_base_url(self) -> str:
        return self.get_str(KEY_API_BASE_URL, DEFAULT_API_BASE_URL)

    def set_api_base_url(self, url: str) -> None:
        self.set_str(KEY_API_BASE_URL, url)

    def get_orders_website_url(self) -> str:
        return self.get_str(KEY_ORDERS_WEBSITE_URL, "")

    def set_orders_website_url(self, url: str) -> None:
        self.set_str(KEY_ORDERS_WEBSITE_URL, url)

    def get_current_user_name(self) -> str:
        return self.get_str(KEY_CURRENT_USER_NAME, DEFAULT_USER_NAME)

    def set_current_user_name(self, name: str) -> None:
        self.set_str(KEY_CURRENT_USER_NAME, name)

    # ------------------------------------------------------------------ #
    #  Internal helpers                                                  #
    # ------------------------------------------------------------------ #
    def _read_document(self) -> Dict[str, Any]:
        with self.path.open(encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        return data

    def _reset_to_defaults(self) -> None:
        self._data = dict(DEFAULTS)

    def _backup_corrupt_document(self) -> None:
        backup = self.path.with_suffix(self.path.suffix + ".bak")
        try:
            shutil.copyfile(self.path, backup)
            logger.info("Corrupt settings document kept as %s", backup)
        except OSError as exc:
            logger.warning("Could not back up corrupt settings document: %s", exc)
