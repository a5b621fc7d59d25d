"""Runtime configuration: env-driven.

Centralized config using pydantic-settings. Reads from a .env file and
FREIGHTLINE_* environment variables.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class FreightlineConfig(BaseSettings):
    """Configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export FREIGHTLINE_LOG_LEVEL=DEBUG
        export FREIGHTLINE_WAREHOUSE_STORE_PATH=/data/warehouses

    Or via .env file::

        FREIGHTLINE_DEFAULT_NAMESPACE=kargo-demo
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FREIGHTLINE_",
        env_file_encoding="utf-8",
    )

    # Logging
    log_level: str = "INFO"
    debug: bool = False

    # Warehouse reads for origin inference
    warehouse_store_path: Path = Path(".freightline/warehouses")
    default_namespace: str = "default"


def configure_logging(cfg: FreightlineConfig) -> None:
    """Apply ``cfg.log_level`` to the ``freightline`` logger hierarchy.

    DEBUG is forced when ``cfg.debug`` is set.
    """
    level = logging.DEBUG if cfg.debug else logging.getLevelName(cfg.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {cfg.log_level!r}")
    logging.getLogger("freightline").setLevel(level)


# Module-level singleton: import as `from freightline.config import config`
config = FreightlineConfig()
