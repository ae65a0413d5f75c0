"""History defaults configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from airs.core.types import UNBOUNDED, HistoryLimit, coerce_limit

logger = logging.getLogger(__name__)


@dataclass
class HistoryConfig:
    """Defaults used when creating history handles from configuration."""

    limit: HistoryLimit = field(default=UNBOUNDED)
    seed: Any = ""

    @classmethod
    def from_omegaconf(cls, cfg: Any) -> HistoryConfig:
        """Build from OmegaConf dict or plain dict."""
        if cfg is None:
            return cls()

        # Handle OmegaConf containers
        from omegaconf import OmegaConf

        if OmegaConf.is_config(cfg):
            cfg = OmegaConf.to_container(cfg, resolve=True)

        if not isinstance(cfg, dict):
            cfg = dict(cfg)

        return cls(
            limit=coerce_limit(cfg.get("limit")),
            seed=cfg.get("seed", ""),
        )
