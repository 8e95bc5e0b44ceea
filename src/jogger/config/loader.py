from __future__ import annotations

import logging
import pathlib
from typing import Optional

import yaml

from ..traversals.loader import load_traversal_modules
from ..traversals.registry import TraversalRegistry
from .models import RegistryConfig

logger = logging.getLogger(__name__)


def load_config(path: str | pathlib.Path) -> RegistryConfig:
    cfg_path = pathlib.Path(path).expanduser()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config {path} not found")

    with cfg_path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError("Registry config must be a YAML mapping")

    return RegistryConfig.model_validate(data)


def build_registry(config: Optional[RegistryConfig] = None) -> TraversalRegistry:
    """Create a fresh registry populated from the configured traversal modules."""

    cfg = config or RegistryConfig()
    registry = TraversalRegistry(allow_overwrite=cfg.allow_overwrite)
    load_traversal_modules(cfg.traversal_modules, registry, prefix=cfg.prefix)
    logger.info("Built traversal registry with %d traversals", len(registry))
    return registry
