"""Environment-driven settings for the web app and CLI."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .dashboard import DEFAULT_WORKERS

PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_FLEET_FILE = PROJECT_ROOT / "fleets" / "fleet.yaml"


@dataclass(frozen=True)
class Settings:
    fleet_file: Path = DEFAULT_FLEET_FILE
    dashboard_workers: int = DEFAULT_WORKERS
    log_level: str = "INFO"
    secret_key: str = "dev-secret-key-change-in-prod"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Read settings from FLEET_FILE, FLEET_DASHBOARD_WORKERS,
        FLEET_LOG_LEVEL and SECRET_KEY.

        Raises:
            ValueError: A variable is set to an unusable value
        """
        env = os.environ if environ is None else environ

        workers_raw = env.get("FLEET_DASHBOARD_WORKERS", str(DEFAULT_WORKERS))
        try:
            workers = int(workers_raw)
        except ValueError:
            raise ValueError(
                f"FLEET_DASHBOARD_WORKERS must be an integer, got {workers_raw!r}"
            ) from None
        if workers < 1:
            raise ValueError("FLEET_DASHBOARD_WORKERS must be at least 1")

        log_level = env.get("FLEET_LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"FLEET_LOG_LEVEL: unknown level {log_level!r}")

        return cls(
            fleet_file=Path(env.get("FLEET_FILE") or DEFAULT_FLEET_FILE),
            dashboard_workers=workers,
            log_level=log_level,
            secret_key=env.get("SECRET_KEY", cls.secret_key),
        )
