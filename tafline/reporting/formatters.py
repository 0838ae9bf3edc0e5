"""Plain-text and JSON summaries of timeline rows and effective conditions.

Values are printed in the units the feed reports; no conversion happens here.
"""

import json
from dataclasses import asdict

from tafline.models.conditions import EffectiveConditions, NoData
from tafline.models.timeline import TimelineRow
from tafline.timeline.labels import active_labels, describe_amendment


def _fmt_time(dt) -> str:
    return dt.strftime("%d %H:%MZ")


def format_rows_text(rows: list[TimelineRow]) -> str:
    """One line per row, listing its segments."""
    if not rows:
        return "(no timeline rows)"
    lines = []
    for row in rows:
        spans = ", ".join(
            f"{_fmt_time(s.start)}-{_fmt_time(s.end)}" for s in row.segments
        )
        lines.append(f"{row.type:<6} {spans}")
    return "\n".join(lines)


def _fmt_wind(effective: EffectiveConditions) -> str | None:
    wind = effective.fields.wind
    if wind is None:
        return None
    direction = "VRB" if wind.variable or wind.direction is None else f"{wind.direction:03d}"
    speed = "//" if wind.speed is None else f"{wind.speed:02d}"
    gust = f"G{wind.gust:02d}" if wind.gust is not None else ""
    return f"{direction}{speed}{gust}KT"


def format_effective_text(result: EffectiveConditions | NoData) -> str:
    """Multi-line summary for logging, with the source of each group."""
    if isinstance(result, NoData):
        return f"=== {result.instant.isoformat()} | no forecast data ==="

    f = result.fields
    lines = [
        f"=== {result.instant.isoformat()} | "
        f"{' + '.join(active_labels(result))} ===",
    ]

    def source(group: str) -> str:
        amendment = result.sources.get(group)
        return f" [{describe_amendment(amendment)}]" if amendment else ""

    wind = _fmt_wind(result)
    if wind is not None:
        lines.append(f"Wind: {wind}{source('wind')}")
    if f.wind_shear is not None:
        lines.append(
            f"Wind shear: {f.wind_shear.height}ft "
            f"{f.wind_shear.direction}/{f.wind_shear.speed}KT{source('wind')}"
        )
    if f.visibility is not None:
        parts = []
        if f.visibility.horizontal is not None:
            more = "P" if f.visibility.horizontal_is_more_than else ""
            parts.append(f"{more}{f.visibility.horizontal:g}SM")
        if f.visibility.vertical is not None:
            parts.append(f"VV {f.visibility.vertical}ft")
        lines.append(f"Visibility: {' '.join(parts)}{source('visibility')}")
    if f.sky_layers:
        layers = " ".join(
            f"{layer.cover}{'' if layer.base is None else layer.base}"
            f"{layer.cloud_type or ''}"
            for layer in f.sky_layers
        )
        lines.append(f"Clouds: {layers}{source('clouds')}")
    if f.weather:
        lines.append(f"Weather: {f.weather}{source('weather')}")
    if f.altimeter is not None:
        lines.append(f"Altimeter: {f.altimeter:.2f}{source('altimeter')}")
    return "\n".join(lines)


def format_effective_json(result: EffectiveConditions | NoData) -> str:
    """JSON summary for programmatic consumption."""
    if isinstance(result, NoData):
        data = {"instant": result.instant.isoformat(), "no_data": True}
        return json.dumps(data, indent=2)

    data = {
        "instant": result.instant.isoformat(),
        "no_data": False,
        "fields": asdict(result.fields),
        "sources": {
            str(group): describe_amendment(amendment)
            for group, amendment in result.sources.items()
        },
        "contributors": active_labels(result),
    }
    return json.dumps(data, indent=2, default=str)
