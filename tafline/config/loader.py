"""YAML config loader with dotted-key lookup."""

from pathlib import Path
from typing import Any

import yaml

from tafline.config.defaults import DEFAULT_ROW_TITLES
from tafline.config.schema import EngineConfig


def load_config(path: str | Path) -> EngineConfig:
    """Load and validate config from a YAML file.

    Row titles missing from the YAML fall back to DEFAULT_ROW_TITLES.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    timeline = raw.get("timeline") or {}
    titles = dict(DEFAULT_ROW_TITLES)
    titles.update(timeline.get("row_titles") or {})
    raw["timeline"] = {**timeline, "row_titles": titles}

    return EngineConfig(**raw)


def get_config_value(config: EngineConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'timeline.min_segment_width_pct'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, dict):
            if part not in obj:
                raise KeyError(f"Config key not found: {dotted_key}")
            obj = obj[part]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
