from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QSettings

APP_NAME = "notegraph"
LOG_DIR = Path.home() / f".{APP_NAME}" / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"

DEFAULT_VAULT_DIR = Path.home() / "Documents" / "NoteGraph"
DEFAULT_GRAPH_DEBOUNCE_MS = 1200


@dataclass(frozen=True)
class SettingsKeys:
    VAULT_DIR: str = "vault/dir"
    LAST_NOTE: str = "nav/last_note"
    HISTORY_LIMIT: str = "nav/history_limit"
    GRAPH_DEBOUNCE_MS: str = "graph/debounce_ms"


KEYS = SettingsKeys()


@dataclass(frozen=True)
class EngineSettings:
    vault_dir: Path = DEFAULT_VAULT_DIR
    last_note: str = ""
    # 0 = unbounded
    history_limit: int = 0
    graph_debounce_ms: int = DEFAULT_GRAPH_DEBOUNCE_MS


def get_str(settings: QSettings, key: str, default: str) -> str:
    try:
        val = settings.value(key, default)
        return str(val) if val is not None else default
    except Exception:
        return default


def get_int(settings: QSettings, key: str, default: int) -> int:
    try:
        return int(settings.value(key, default))
    except Exception:
        return default


def load_settings(settings: QSettings) -> EngineSettings:
    vault = get_str(settings, KEYS.VAULT_DIR, "").strip()
    return EngineSettings(
        vault_dir=Path(vault).expanduser() if vault else DEFAULT_VAULT_DIR,
        last_note=get_str(settings, KEYS.LAST_NOTE, ""),
        history_limit=max(0, get_int(settings, KEYS.HISTORY_LIMIT, 0)),
        graph_debounce_ms=max(0, get_int(settings, KEYS.GRAPH_DEBOUNCE_MS, DEFAULT_GRAPH_DEBOUNCE_MS)),
    )


def save_settings(settings: QSettings, engine_settings: EngineSettings) -> None:
    settings.setValue(KEYS.VAULT_DIR, str(engine_settings.vault_dir))
    settings.setValue(KEYS.LAST_NOTE, engine_settings.last_note)
    settings.setValue(KEYS.HISTORY_LIMIT, engine_settings.history_limit)
    settings.setValue(KEYS.GRAPH_DEBOUNCE_MS, engine_settings.graph_debounce_ms)
    settings.sync()
