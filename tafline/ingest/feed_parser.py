"""Map structured forecast feed records onto ForecastAmendment values.

Records arrive already decoded from the raw TAF text (camelCase keys, as
served by the upstream forecast API). Nothing here looks at encoded TAF
strings.
"""

import logging
from typing import Any

from tafline.config.schema import IngestConfig
from tafline.ingest.timestamps import parse_timestamp
from tafline.models.amendment import (
    AmendmentType,
    ForecastAmendment,
    SkyLayer,
    Visibility,
    Wind,
    WindShear,
)
from tafline.models.timeline import TimelineWindow

logger = logging.getLogger(__name__)

INDICATOR_MAP: dict[str, AmendmentType] = {
    "": AmendmentType.BASE,
    "BASE": AmendmentType.BASE,
    "FM": AmendmentType.FROM,
    "BECMG": AmendmentType.BECOMING,
    "TEMPO": AmendmentType.TEMPORARY,
    "PROB": AmendmentType.PROBABLE,
}


def parse_indicator(value: str | None) -> AmendmentType:
    if value is None:
        return AmendmentType.BASE
    return INDICATOR_MAP.get(value.strip().upper(), AmendmentType.UNKNOWN)


def _int_or_none(value: Any) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


def _float_or_none(value: Any) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (ValueError, TypeError):
        return None


def _parse_wind(record: dict) -> Wind | None:
    direction = _int_or_none(record.get("windDirection"))
    speed = _int_or_none(record.get("windSpeed"))
    gust = _int_or_none(record.get("windGust"))
    variable = bool(record.get("windDirectionVariable"))
    if direction is None and speed is None and gust is None and not variable:
        return None
    return Wind(direction=direction, speed=speed, gust=gust, variable=variable)


def _parse_wind_shear(record: dict) -> WindShear | None:
    shear = WindShear(
        direction=_int_or_none(record.get("windShearDirection")),
        speed=_int_or_none(record.get("windShearSpeed")),
        height=_int_or_none(record.get("windShearHeight")),
    )
    if shear == WindShear():
        return None
    return shear


def _parse_visibility(record: dict) -> Visibility | None:
    horizontal = _float_or_none(record.get("visibilityHorizontal"))
    vertical = _int_or_none(record.get("visibilityVertical"))
    if horizontal is None and vertical is None:
        return None
    return Visibility(
        horizontal=horizontal,
        horizontal_is_more_than=bool(record.get("visibilityHorizontalIsMoreThan")),
        vertical=vertical,
    )


def _parse_sky_layers(record: dict) -> tuple[SkyLayer, ...]:
    layers: list[SkyLayer] = []
    for item in record.get("skyConditions") or []:
        cover = item.get("skyCover")
        if not cover:
            logger.warning("Skipping sky condition without cover: %s", item)
            continue
        layers.append(
            SkyLayer(
                cover=str(cover),
                base=_int_or_none(item.get("cloudBase")),
                cloud_type=item.get("cloudType") or None,
            )
        )
    return tuple(layers)


def parse_amendment(
    record: dict, config: IngestConfig | None = None
) -> ForecastAmendment | None:
    """Build a ForecastAmendment from one feed record.

    Returns None for records without usable validity times, or with an
    unrecognized change indicator when the config asks to drop those.
    """
    config = config or IngestConfig()

    valid_from = parse_timestamp(record.get("fromTime"))
    valid_to = parse_timestamp(record.get("toTime"))
    if valid_from is None or valid_to is None:
        logger.warning(
            "Skipping forecast record with bad times: from=%r to=%r",
            record.get("fromTime"), record.get("toTime"),
        )
        return None

    amendment_type = parse_indicator(record.get("changeIndicator"))
    if amendment_type == AmendmentType.UNKNOWN and config.drop_unknown_indicators:
        logger.warning(
            "Dropping forecast record with unknown indicator %r",
            record.get("changeIndicator"),
        )
        return None

    weather = record.get("weather")
    return ForecastAmendment(
        valid_from=valid_from,
        valid_to=valid_to,
        type=amendment_type,
        probability=_int_or_none(record.get("changeProbability")),
        wind=_parse_wind(record),
        wind_shear=_parse_wind_shear(record),
        visibility=_parse_visibility(record),
        sky_layers=_parse_sky_layers(record),
        weather=weather if weather else None,
        altimeter=_float_or_none(record.get("altimeter")),
        raw=record.get("rawText") or "",
    )


def parse_forecast(
    taf: dict, config: IngestConfig | None = None
) -> tuple[list[ForecastAmendment], TimelineWindow | None]:
    """Parse a full TAF record: its validity window and all its amendments.

    The window is None when either bound is missing or unparseable.
    """
    valid_from = parse_timestamp(taf.get("validFromTime"))
    valid_to = parse_timestamp(taf.get("validToTime"))
    window = None
    if valid_from is not None and valid_to is not None:
        window = TimelineWindow(valid_from=valid_from, valid_to=valid_to)
    else:
        logger.warning(
            "TAF record has no usable validity window: from=%r to=%r",
            taf.get("validFromTime"), taf.get("validToTime"),
        )

    amendments: list[ForecastAmendment] = []
    for record in taf.get("forecast") or []:
        amendment = parse_amendment(record, config)
        if amendment is not None:
            amendments.append(amendment)
    return amendments, window
