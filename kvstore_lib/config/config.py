"""Server configuration.

Settings live in a YAML mapping (default `config/kvstore.yml`, override
with the `KVSTORE_CONFIG` environment variable). Every field has a default
so a missing file simply yields `Config()`.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from kvstore_lib.store.namespace_store import DEFAULT_NAMESPACE

logger = logging.getLogger(__name__)

CONFIG_ENV = 'KVSTORE_CONFIG'
DEFAULT_CONFIG_PATH = Path('config/kvstore.yml')


@dataclass
class Config:
    storage_backend: str = "sqlite"
    database: str = ":memory:"
    value_serializer: str = "raw"
    default_namespace: str = DEFAULT_NAMESPACE
    enable_brotli: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "WARNING"


def config_path() -> Path:
    return Path(os.environ.get(CONFIG_ENV) or DEFAULT_CONFIG_PATH)


def load_config(path: Optional[Path] = None) -> Config:
    """Read a `Config` from YAML.

    Raises ValueError when the file exists but does not hold a mapping.
    """
    cfg_path = Path(path) if path is not None else config_path()
    if not cfg_path.exists():
        logger.debug("No config at %s; using defaults", cfg_path)
        return Config()

    with cfg_path.open('r', encoding='utf-8') as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {cfg_path} must contain a mapping")

    known = {f.name for f in fields(Config)}
    for name in raw:
        if name not in known:
            logger.warning("Ignoring unknown config key '%s' in %s", name, cfg_path)
    return Config(**{k: v for k, v in raw.items() if k in known})
