from __future__ import annotations

from pathlib import Path
from typing import Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .core.analysis.blocks import block_id
from .core.analysis.matcher import DEFAULT_CAPACITY

CONFIG_NAMES = ("scriptspan.yaml", "scriptspan.yml")


class AnalyzerSettings(BaseModel):
    cache_capacity: int = Field(default=DEFAULT_CAPACITY, ge=1)
    tie_break: Literal["first_seen", "prefer_latin"] = "first_seen"
    block_aliases: Dict[str, str] = Field(default_factory=dict)

    @field_validator("block_aliases", mode="before")
    @classmethod
    def _normalize_aliases(cls, value: Optional[Dict[str, str]]) -> Dict[str, str]:
        if not value:
            return {}
        if not isinstance(value, dict):
            return value
        return {block_id(str(src)): block_id(str(dst)) for src, dst in value.items()}


class DisplaySettings(BaseModel):
    highlight: str = "\033[31m"
    reset: str = "\033[0m"


class Settings(BaseModel):
    analyzer: AnalyzerSettings = AnalyzerSettings()
    display: DisplaySettings = DisplaySettings()

    @classmethod
    def load(cls, path: Path) -> "Settings":
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
        return cls.model_validate(raw or {})


def find_config(explicit_path: Optional[Path]) -> Optional[Path]:
    if explicit_path:
        if not explicit_path.exists():
            raise FileNotFoundError(f"Config file not found: {explicit_path}")
        return explicit_path
    cwd = Path.cwd()
    for name in CONFIG_NAMES:
        candidate = cwd / name
        if candidate.exists():
            return candidate
    return None


def load_settings(explicit_path: Optional[Path] = None) -> Settings:
    path = find_config(explicit_path)
    if path is None:
        return Settings()
    return Settings.load(path)
