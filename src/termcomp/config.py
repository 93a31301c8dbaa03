"""Runtime configuration read from TERMCOMP_* environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

ENV_PREFIX = "TERMCOMP_"


@dataclass(frozen=True)
class CompositorConfig:
    """
    Settings for the compositor and its background producers.

    Attributes:
        producer_interval: Seconds between lines from the log producer
        event_buffer: Capacity of the compositor's event queue
        log_level: Name of the root logging level
        log_file: Where log records go while the screen is active
    """
    producer_interval: float = 1.5
    event_buffer: int = 1024
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> CompositorConfig:
        """Build a config, overriding defaults from the environment."""
        env = os.environ if environ is None else environ
        defaults = cls()

        interval = _parse(env, "PRODUCER_INTERVAL", float, defaults.producer_interval)
        if interval <= 0:
            raise ValueError(f"{ENV_PREFIX}PRODUCER_INTERVAL must be positive, got {interval}")
        buffer = _parse(env, "EVENT_BUFFER", int, defaults.event_buffer)
        if buffer < 1:
            raise ValueError(f"{ENV_PREFIX}EVENT_BUFFER must be at least 1, got {buffer}")

        log_level = (env.get(ENV_PREFIX + "LOG_LEVEL") or defaults.log_level).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Invalid {ENV_PREFIX}LOG_LEVEL: {log_level!r}")

        log_file = env.get(ENV_PREFIX + "LOG_FILE")
        return cls(
            producer_interval=interval,
            event_buffer=buffer,
            log_level=log_level,
            log_file=Path(log_file).expanduser() if log_file else None,
        )


def _parse(env: Mapping[str, str], name: str, convert, default):
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw == "":
        return default
    try:
        return convert(raw)
    except ValueError:
        raise ValueError(f"Invalid {ENV_PREFIX}{name}: {raw!r}") from None
