"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from tafline.config.defaults import DEFAULT_ROW_TITLES


class TimelineConfig(BaseModel):
    model_config = {"extra": "forbid"}

    min_segment_width_pct: float = Field(default=0.75, ge=0.0, le=100.0)
    row_titles: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_ROW_TITLES)
    )


class LiveConfig(BaseModel):
    model_config = {"extra": "forbid"}

    clamp_to_window: bool = True


class IngestConfig(BaseModel):
    model_config = {"extra": "forbid"}

    drop_unknown_indicators: bool = False


class EngineConfig(BaseModel):
    model_config = {"extra": "forbid"}

    timeline: TimelineConfig = TimelineConfig()
    live: LiveConfig = LiveConfig()
    ingest: IngestConfig = IngestConfig()
