"""Fuzzy timestamp formatting.

For example::

    one minute ago
    3 years ago
    in 2 minutes
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta

from .config import LocaleConfig
from .plural import PLURALS, PluralRegistry


def _round(d: timedelta, step: timedelta) -> int:
    """Round ``d`` to a count of ``step``, halves going up."""
    return math.floor(d / step + 0.5)


def format(t: datetime, config: LocaleConfig, plurals: PluralRegistry = PLURALS) -> str:
    """
    Format a time as a fuzzy timestamp relative to now ("4 days ago").

    ``t`` is compared to ``datetime.now`` in the same timezone as ``t``, so
    naive and aware datetimes both work.
    """
    return format_reference(t, datetime.now(tz=t.tzinfo), config, plurals)


def format_reference(
        t: datetime,
        reference: datetime,
        config: LocaleConfig,
        plurals: PluralRegistry = PLURALS,
) -> str:
    """
    Format a time as a fuzzy timestamp relative to a reference time.

    Args:
        t: The time to describe
        reference: The time ``t`` is compared to
        config: Locale configuration
        plurals: Plural rules used to pick the template

    Returns:
        The fuzzy phrase, or ``t`` formatted with ``config.fallback_layout``
        when the distance reaches ``config.max_duration``
    """
    d = reference - t

    if abs(d) >= config.max_duration:
        return t.strftime(config.fallback_layout)

    return _wrap(format_relative_duration(d, config, plurals), d >= timedelta(0), config)


def format_duration(d: timedelta, config: LocaleConfig, plurals: PluralRegistry = PLURALS) -> str:
    """
    Format a signed duration with the past or future affixes.

    A non-negative duration reads as past. ``config.max_duration`` is not
    used here, there is no time to fall back to.
    """
    return _wrap(format_relative_duration(d, config, plurals), d >= timedelta(0), config)


def format_relative_duration(d: timedelta, config: LocaleConfig, plurals: PluralRegistry = PLURALS) -> str:
    """
    Convert the magnitude of a duration to a phrase without affixes.

    The period whose range contains ``d`` is selected, the count is rounded
    half up, and when rounding reaches the next period's unit ("60 minutes")
    the next period is used instead ("about an hour").

    Args:
        d: Duration; only its magnitude is used
        config: Locale configuration
        plurals: Plural rules used to pick the template

    Returns:
        The phrase, e.g. ``"3 days"``
    """
    d = abs(d)
    periods = config.periods

    if not periods or d < periods[0].unit:
        return config.zero

    for i, period in enumerate(periods):
        last = i + 1 == len(periods)
        next_unit = period.unit if last else periods[i + 1].unit

        if not last and d >= next_unit:
            continue

        r = _round(d, period.unit)

        if next_unit != period.unit and r == _round(next_unit, period.unit):
            continue

        if r == 0:
            return ""

        category = plurals.category(config.locale_id, r)
        return period.template(category).render(r)

    return str(d)


def _wrap(phrase: str, is_past: bool, config: LocaleConfig) -> str:
    if is_past:
        return "".join((config.past_prefix, phrase, config.past_suffix))
    return "".join((config.future_prefix, phrase, config.future_suffix))
