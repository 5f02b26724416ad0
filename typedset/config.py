from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from typedset.core.exceptions import CollectionConfigurationError
from typedset.core.hashing import HASH_STRATEGIES

log = logging.getLogger("typedset")

DEFAULT_HASH_STRATEGY = "identity"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class CollectionConfig:
    """Defaults applied to collections that are not configured explicitly.

    - hash_strategy names an entry of HASH_STRATEGIES.
    - log_level is a standard logging level name.
    """

    hash_strategy: str = DEFAULT_HASH_STRATEGY
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        strategy = str(self.hash_strategy).strip().lower()
        if strategy not in HASH_STRATEGIES:
            raise CollectionConfigurationError(f"Unknown hash strategy: {self.hash_strategy!r}")

        level = str(self.log_level).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise CollectionConfigurationError(f"Unknown log level: {self.log_level!r}")

        object.__setattr__(self, "hash_strategy", strategy)
        object.__setattr__(self, "log_level", level)


def _env_str(env: Mapping[str, str], name: str, default: str) -> str:
    raw = env.get(name, "").strip()
    return raw or default


def load_config(env: Optional[Mapping[str, str]] = None) -> CollectionConfig:
    """Build a CollectionConfig from environment variables.

    TYPEDSET_HASH_STRATEGY and TYPEDSET_LOG_LEVEL; blank values use defaults.
    """

    env = os.environ if env is None else env
    return CollectionConfig(
        hash_strategy=_env_str(env, "TYPEDSET_HASH_STRATEGY", DEFAULT_HASH_STRATEGY),
        log_level=_env_str(env, "TYPEDSET_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )


def configure_logging(cfg: Optional[CollectionConfig] = None) -> None:
    """Apply the configured level to the package logger.

    Handlers are left to the host application.
    """

    cfg = cfg or load_config()
    log.setLevel(cfg.log_level)
