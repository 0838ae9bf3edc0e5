"""Short human labels for amendments and rows."""

from collections.abc import Mapping

from tafline.models.amendment import AmendmentType, ForecastAmendment
from tafline.models.conditions import EffectiveConditions


def describe_amendment(amendment: ForecastAmendment) -> str:
    """Label as printed in a TAF: BASE, FM, BECMG, TEMPO (40%), PROB 30%."""
    if amendment.is_base:
        return "FM" if amendment.type == AmendmentType.FROM else "BASE"

    probability = (
        f"{amendment.probability}%" if amendment.probability is not None else None
    )
    if amendment.type == AmendmentType.PROBABLE:
        return f"PROB {probability}" if probability else "PROB"
    if probability:
        return f"{amendment.type} ({probability})"
    return str(amendment.type)


def row_title(row_type: AmendmentType, titles: Mapping[str, str]) -> str:
    return titles.get(str(row_type), str(row_type))


def active_labels(effective: EffectiveConditions) -> list[str]:
    """Distinct labels of the contributing amendments, anchor first."""
    seen: set[str] = set()
    labels: list[str] = []
    for contributor in effective.contributors:
        label = describe_amendment(contributor)
        if label in seen:
            continue
        seen.add(label)
        labels.append(label)
    return labels
