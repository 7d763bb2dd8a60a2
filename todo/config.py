"""Runtime configuration read from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path

STORE_PATH_ENV = "JSON_STORE_PATH"
DEFAULT_STORE_PATH = "tasks.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of the environment."""

    store_path: Path


def get_settings() -> Settings:
    """Read the current environment and build a Settings instance.

    Not cached: the store resolves its file on every operation, so a changed
    JSON_STORE_PATH takes effect on the next call.
    """
    raw = os.getenv(STORE_PATH_ENV) or DEFAULT_STORE_PATH
    return Settings(store_path=Path(raw).expanduser())
