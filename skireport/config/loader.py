"""YAML config loader with dotted-key lookup."""

from pathlib import Path
from typing import Any

import yaml

from skireport.config.defaults import DEFAULT_RESORTS
from skireport.config.schema import SkillConfig


def load_config(path: str | Path | None = None) -> SkillConfig:
    """Load and validate config from a YAML file.

    A missing path means all defaults. If no resorts are specified in the
    YAML, injects DEFAULT_RESORTS.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    if "resorts" not in raw or not raw["resorts"]:
        raw["resorts"] = [r.model_dump() for r in DEFAULT_RESORTS]

    return SkillConfig(**raw)


def get_config_value(config: SkillConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'weather_api.timeout'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
