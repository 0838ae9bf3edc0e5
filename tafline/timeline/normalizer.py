"""Amendment normalizer: drops malformed amendments and orders the rest."""

import logging
from collections.abc import Iterable

from tafline.models.amendment import (
    PRECEDENCE_WEIGHTS,
    UNKNOWN_WEIGHT,
    AmendmentType,
    ForecastAmendment,
)

logger = logging.getLogger(__name__)


def precedence_weight(amendment_type: AmendmentType) -> int:
    return PRECEDENCE_WEIGHTS.get(amendment_type, UNKNOWN_WEIGHT)


def normalize_amendments(
    amendments: Iterable[ForecastAmendment],
) -> list[ForecastAmendment]:
    """Return a new list sorted by (valid_from, precedence weight).

    Zero- and negative-length amendments are dropped rather than raised:
    they come from an external feed, not from the caller. The sort is
    stable, so amendments with equal keys keep their input order.
    """
    kept: list[ForecastAmendment] = []
    for amendment in amendments:
        if not amendment.is_valid:
            logger.debug(
                "Dropping malformed %s amendment %s -> %s",
                amendment.type, amendment.valid_from, amendment.valid_to,
            )
            continue
        kept.append(amendment)

    kept.sort(key=lambda a: (a.valid_from, precedence_weight(a.type)))
    return kept
