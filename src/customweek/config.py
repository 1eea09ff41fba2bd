"""Configuration loading utilities"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .paths import config_dir
from .specification import Weekday, WeekSpecification

logger = logging.getLogger(__name__)


class WeekSettings(BaseModel):
    """The week rule used when a caller does not provide one."""

    preset: Optional[str] = None
    first_day: Weekday = Weekday.MONDAY
    min_days_in_first_week: int = 4

    @field_validator("first_day", mode="before")
    @classmethod
    def _parse_weekday(cls, value: Any) -> Weekday:
        return Weekday.parse(value)

    def specification(self) -> WeekSpecification:
        """Build the specification; a preset wins over the explicit fields."""
        if self.preset:
            return WeekSpecification.from_preset(self.preset)
        return WeekSpecification(self.first_day, self.min_days_in_first_week)


class OutputSettings(BaseModel):
    format: str = "%Y-W%W"
    date_col: str = "date"


class Config(BaseModel):
    """Pydantic model for the project configuration."""

    project: Dict[str, Any] = Field(default_factory=dict)
    week: WeekSettings = Field(default_factory=WeekSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)
    model_config = ConfigDict(extra="allow")


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh) or {}


def merge_dicts(base: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = merge_dicts(dict(base[key]), value)
        else:
            base[key] = value
    return base


def load_config(cfg_dir: Optional[Path] = None) -> Config:
    """Load and merge the default and local configuration files."""
    cfg_dir = cfg_dir or config_dir()
    default_path = cfg_dir / "config.default.yaml"
    local_path = cfg_dir / "config.local.yaml"

    if not default_path.exists():
        raise FileNotFoundError(f"Missing default config: {default_path}")

    default_cfg = _load_yaml(default_path)
    local_cfg: Dict[str, Any] = {}
    if local_path.exists():
        logger.debug("Applying local overrides from %s", local_path)
        local_cfg = _load_yaml(local_path)

    merged = merge_dicts(default_cfg.copy(), local_cfg)
    return Config.model_validate(merged)
