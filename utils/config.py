# utils/config.py
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import structlog
import yaml

from dungeon.world.procgen import MIN_LAYOUT_SIZE
from utils.logging_utils import LOG_LEVELS

log = structlog.get_logger(__name__)

DEFAULT_WIDTH = 41
DEFAULT_HEIGHT = 21
DEFAULT_LOG_LEVEL = "INFO"


def load_yaml_config(config_path: Path, config_name: str) -> Dict[str, Any]:
    """Loads a generic YAML configuration file."""
    if not config_path.is_file():
        log.error(f"{config_name} config file not found", path=str(config_path))
        raise FileNotFoundError(
            f"{config_name} configuration file not found: {config_path}"
        )
    try:
        with config_path.open("r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        log.error(
            f"Error parsing YAML for {config_name}",
            path=str(config_path),
            error=str(e),
        )
        raise
    if config_data is None:
        log.warning(f"{config_name} config file is empty.", path=str(config_path))
        return {}
    if not isinstance(config_data, dict):
        log.error(f"{config_name} config is not a mapping", path=str(config_path))
        raise ValueError(f"{config_name} configuration must be a mapping: {config_path}")
    log.info(f"{config_name} config loaded", path=str(config_path))
    return config_data


@dataclass(frozen=True)
class LayoutConfig:
    """Defaults for the command-line generator."""
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"layout.{name} must be an integer, got {value!r}")
            if value < MIN_LAYOUT_SIZE:
                raise ValueError(
                    f"layout.{name} must be at least {MIN_LAYOUT_SIZE}, got {value}"
                )
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {LOG_LEVELS}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutConfig":
        layout = data.get("layout") or {}
        logging_cfg = data.get("logging") or {}
        return cls(
            width=layout.get("width", DEFAULT_WIDTH),
            height=layout.get("height", DEFAULT_HEIGHT),
            log_level=str(logging_cfg.get("level", DEFAULT_LOG_LEVEL)).upper(),
        )


def load_layout_config(config_path: Path) -> LayoutConfig:
    return LayoutConfig.from_dict(load_yaml_config(config_path, "Layout"))
