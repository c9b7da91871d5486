"""Configuration for the selection engine."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from gearsetup.logger import gs_logger

ENV_PREFIX = "GEARSETUP_"


@dataclass(frozen=True)
class SolverConfig:
    """Configuration for the independent set solvers."""

    max_component_size: int = 24
    """Components above this size still get solved, but a warning is logged first."""

    log_level: str = "WARNING"
    """Level name applied to the solver logger."""

    debug_logging: bool = False
    """Enable the solver trace (sections, tables, adjacency matrices)."""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SolverConfig":
        """Build a config from ``GEARSETUP_*`` environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls()
        max_size = env.get(f"{ENV_PREFIX}MAX_COMPONENT_SIZE")
        return cls(
            max_component_size=(
                int(max_size) if max_size else defaults.max_component_size
            ),
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
            debug_logging=env.get(f"{ENV_PREFIX}DEBUG", "0").lower()
            in ("1", "true", "yes", "on"),
        )


DEFAULT_CONFIG = SolverConfig()


def configure_logging(config: SolverConfig = DEFAULT_CONFIG) -> None:
    """Apply ``config`` to the shared solver logger."""
    level = logging.getLevelName(config.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    if config.debug_logging:
        gs_logger.setup_console_logging(min(level, logging.INFO))
    else:
        gs_logger.disabled = True
        gs_logger.logger.setLevel(level)
