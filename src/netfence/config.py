from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict

CONFIG_ENV = "NETFENCE_CONFIG"


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    log_level: str = "INFO"
    log_file: Optional[str] = None


def load_config(path: Optional[str] = None) -> Settings:
    if not path:
        return Settings()
    cfg_path = Path(path)
    if not cfg_path.exists():
        return Settings()
    data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    return Settings(**data)
