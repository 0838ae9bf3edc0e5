"""Default display titles for timeline rows, keyed by row type."""

DEFAULT_ROW_TITLES: dict[str, str] = {
    "BASE": "Base TAF",
    "BECMG": "Becoming",
    "TEMPO": "Temporary",
    "PROB": "Probability",
}
