# jump61/config.py
from dataclasses import dataclass, field
from typing import Optional
import logging
import os
import tomllib  # python >=3.11

# Score reported for a position one side owns outright.
WINNING_VALUE = 1000000

@dataclass
class SearchConfig:
    depth: int = 4
    alpha_beta: bool = True  # False runs plain minimax (same move, more nodes)

@dataclass
class EvalConfig:
    winning_value: int = WINNING_VALUE

@dataclass
class BoardConfig:
    size: int = 6
    min_size: int = 2  # board sizes the command loop and API accept
    max_size: int = 20

@dataclass
class UIConfig:
    engine_name: str = "Jump61"
    auto_red: bool = False
    auto_blue: bool = True

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    board: BoardConfig = field(default_factory=BoardConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "board", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg


def configure_logging(level: Optional[str] = None) -> None:
    """Install a basic stderr handler at the configured level."""
    logging.basicConfig(
        level=(level or CONFIG.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("JUMP61_CONFIG_TOML", "config.toml"))
# allow env override of depth for quick debugging
override_depth = os.environ.get("JUMP61_SEARCH_DEPTH")
if override_depth:
    try:
        CONFIG.search.depth = int(override_depth)
    except ValueError:
        pass
