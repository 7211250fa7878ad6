"""YAML configuration for games against the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ataxx.search import SearchConfig

PLAYER_KINDS = ("ai", "manual")


@dataclass
class AtaxxConfig:
    search: SearchConfig = field(default_factory=SearchConfig)
    red: str = "manual"
    blue: str = "ai"
    seed: Optional[int] = None
    blocks: List[str] = field(default_factory=list)
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        for side in (self.red, self.blue):
            if side not in PLAYER_KINDS:
                raise ValueError(f"Player kind must be one of {PLAYER_KINDS}, got {side!r}")


def load_yaml_config(path: Union[str, Path]) -> Dict[str, Any]:
    cfg_path = Path(path)
    if not cfg_path.exists():
        return {}
    return yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}


def config_from_dict(cfg: Dict[str, Any]) -> AtaxxConfig:
    search = SearchConfig(**(cfg.get("search") or {}))
    return AtaxxConfig(
        search=search,
        red=cfg.get("red", "manual"),
        blue=cfg.get("blue", "ai"),
        seed=cfg.get("seed"),
        blocks=list(cfg.get("blocks") or []),
        log_level=str(cfg.get("log_level", "INFO")).upper(),
    )


def load_config(path: Optional[Union[str, Path]] = None) -> AtaxxConfig:
    if path is None:
        return AtaxxConfig()
    return config_from_dict(load_yaml_config(path))
