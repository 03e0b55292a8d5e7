"""Maps raw analysis scores onto discrete quality indicators."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from seo_sync.types import IndicatorLevel, ScoreIndicator

# Lower-inclusive edges on the 0-100 score scale.
BAD_FROM = 1.0
OK_FROM = 41.0
GOOD_FROM = 71.0

DISPLAY_CLASSES: dict[IndicatorLevel, str] = {
    IndicatorLevel.NO_DATA: "na",
    IndicatorLevel.BAD: "bad",
    IndicatorLevel.OK: "ok",
    IndicatorLevel.GOOD: "good",
}

DEFAULT_SCREEN_READER_TEXT: dict[IndicatorLevel, str] = {
    IndicatorLevel.NO_DATA: "Not available",
    IndicatorLevel.BAD: "Needs improvement",
    IndicatorLevel.OK: "OK",
    IndicatorLevel.GOOD: "Good",
}


def level_for_score(raw: Any) -> IndicatorLevel:
    score = _as_number(raw)
    if score is None or score < BAD_FROM:
        return IndicatorLevel.NO_DATA
    if score < OK_FROM:
        return IndicatorLevel.BAD
    if score < GOOD_FROM:
        return IndicatorLevel.OK
    return IndicatorLevel.GOOD


def indicator_for_score(
    raw: Any,
    strings: Mapping[str, str] | None = None,
) -> ScoreIndicator:
    """Return the indicator for `raw`; any input yields a valid indicator.

    `raw` may be a number or the string read back from a hidden score field.
    `strings` overrides the screen-reader text per level value
    (``"no_data"``, ``"bad"``, ``"ok"``, ``"good"``).
    """

    level = level_for_score(raw)
    text = DEFAULT_SCREEN_READER_TEXT[level]
    if strings:
        text = str(strings.get(level.value, text))
    return ScoreIndicator(
        level=level,
        display_class=DISPLAY_CLASSES[level],
        screen_reader_text=text,
    )


def _as_number(raw: Any) -> float | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(value):
        return None
    return value
