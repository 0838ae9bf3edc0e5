"""Effective conditions resolver: merges active amendments at an instant.

Groups are replaced atomically. A TEMPO group that states a wind direction
but no speed still replaces the anchor's entire wind group; splicing single
sub-fields would produce a reading no amendment ever stated.
"""

import logging
from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime

from tafline.models.amendment import UNKNOWN_WEIGHT, ForecastAmendment
from tafline.models.conditions import (
    ConditionsSnapshot,
    EffectiveConditions,
    FieldGroup,
    NoData,
    group_present,
)
from tafline.timeline.normalizer import normalize_amendments, precedence_weight

logger = logging.getLogger(__name__)

# Snapshot slots owned by each field group.
GROUP_SLOTS: dict[FieldGroup, tuple[str, ...]] = {
    FieldGroup.WIND: ("wind", "wind_shear"),
    FieldGroup.VISIBILITY: ("visibility",),
    FieldGroup.CLOUDS: ("sky_layers",),
    FieldGroup.ALTIMETER: ("altimeter",),
    FieldGroup.WEATHER: ("weather",),
}


def is_active(amendment: ForecastAmendment, instant: datetime) -> bool:
    return amendment.valid_from <= instant <= amendment.valid_to


def active_amendments(
    amendments: Iterable[ForecastAmendment], instant: datetime
) -> list[ForecastAmendment]:
    """Active amendments at ``instant`` in fold order (ascending weight)."""
    active = [a for a in normalize_amendments(amendments) if is_active(a, instant)]
    active.sort(key=lambda a: precedence_weight(a.type))
    return active


def resolve_effective(
    amendments: Iterable[ForecastAmendment], instant: datetime
) -> EffectiveConditions | NoData:
    """Resolve the conditions reported at ``instant``.

    Returns NoData when no amendment covers the instant.
    """
    active = active_amendments(amendments, instant)
    if not active:
        return NoData(instant=instant)

    anchor_index = next(
        (
            i
            for i, a in enumerate(active)
            if precedence_weight(a.type) < UNKNOWN_WEIGHT
        ),
        None,
    )

    snapshot = ConditionsSnapshot()
    sources: dict[FieldGroup, ForecastAmendment] = {}
    contributors: list[ForecastAmendment] = []

    if anchor_index is not None:
        anchor = active.pop(anchor_index)
        snapshot = _overlay(snapshot, anchor, sources)
        contributors.append(anchor)
    else:
        logger.debug("No anchor amendment active at %s", instant)

    for amendment in active:
        snapshot = _overlay(snapshot, amendment, sources)
        contributors.append(amendment)

    return EffectiveConditions(
        instant=instant,
        fields=snapshot,
        sources=sources,
        contributors=tuple(contributors),
    )


def _overlay(
    snapshot: ConditionsSnapshot,
    amendment: ForecastAmendment,
    sources: dict[FieldGroup, ForecastAmendment],
) -> ConditionsSnapshot:
    changes: dict[str, object] = {}
    for group, slots in GROUP_SLOTS.items():
        if not group_present(amendment, group):
            continue
        for slot in slots:
            changes[slot] = getattr(amendment, slot)
        sources[group] = amendment
    if not changes:
        return snapshot
    return replace(snapshot, **changes)
