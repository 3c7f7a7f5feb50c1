# infrastructure/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

from application.version import __version__

DEFAULT_TIMEOUT_SEC = 20.0


@dataclass(frozen=True)
class WalkSettings:
    timeout_sec: Optional[float] = DEFAULT_TIMEOUT_SEC
    log_level: str = "INFO"
    user_agent: str = f"webwalk/{__version__}"

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "WalkSettings":
        """
        Read WEBWALK_* variables. Process environment wins over the .env file.
        """
        values: dict = {}
        path = env_path if env_path is not None else Path.cwd() / ".env"
        if path.exists():
            values.update({k: v for k, v in dotenv_values(path).items() if v is not None})
        values.update(os.environ)
        return cls.from_mapping(values)

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "WalkSettings":
        raw_timeout = values.get("WEBWALK_TIMEOUT_SEC")
        timeout: Optional[float] = DEFAULT_TIMEOUT_SEC
        if raw_timeout is not None and raw_timeout.strip():
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ValueError(f"WEBWALK_TIMEOUT_SEC must be a number, got: {raw_timeout!r}") from e
            # 0 or below disables the client timeout
            if timeout <= 0:
                timeout = None

        return cls(
            timeout_sec=timeout,
            log_level=values.get("WEBWALK_LOG_LEVEL") or "INFO",
            user_agent=values.get("WEBWALK_USER_AGENT") or f"webwalk/{__version__}",
        )
