"""ConfigManager — runtime settings for an estimator session."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Settings read by the facade, with defaults
DEFAULTS: dict[str, str] = {
    "MORTARCALC_LOG_LEVEL": "INFO",
    "MORTARCALC_MAX_WORKERS": "1",
}


class ConfigManager:
    """Resolve settings from project files and the environment.

    Later sources win: defaults, ``.mortarcalc/config.json``, ``.env``,
    then environment variables.  Only the keys in :data:`DEFAULTS` are read.
    """

    def load_config(self, project_path: str | Path | None = None) -> dict[str, str]:
        config = dict(DEFAULTS)
        if project_path is not None:
            root = Path(project_path)
            config.update(self._read_json(root / ".mortarcalc" / "config.json"))
            config.update(self._read_env_file(root / ".env"))
        for key in DEFAULTS:
            value = os.environ.get(key)
            if value is not None:
                config[key] = value
        return config

    @staticmethod
    def _read_json(path: Path) -> dict[str, str]:
        if not path.is_file():
            return {}
        try:
            data: Any = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            logger.debug("Could not read %s", path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.debug("Ignoring %s: expected a JSON object", path)
            return {}
        return {k: str(v) for k, v in data.items() if k in DEFAULTS}

    @staticmethod
    def _read_env_file(path: Path) -> dict[str, str]:
        if not path.is_file():
            return {}
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except OSError:
            logger.debug("Could not read %s", path, exc_info=True)
            return {}
        values: dict[str, str] = {}
        for line in lines:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = (part.strip() for part in line.split("=", 1))
            if key in DEFAULTS:
                values[key] = value
        return values

    @staticmethod
    def log_level(config: dict[str, str]) -> int:
        """Resolve MORTARCALC_LOG_LEVEL to a logging level, INFO if unknown."""
        name = config.get("MORTARCALC_LOG_LEVEL", "INFO").strip().upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    @staticmethod
    def max_workers(config: dict[str, str]) -> int:
        """Resolve MORTARCALC_MAX_WORKERS to a positive int, 1 if invalid."""
        try:
            return max(1, int(config.get("MORTARCALC_MAX_WORKERS", "1")))
        except ValueError:
            return 1
