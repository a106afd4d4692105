"""Fuzzy, locale-aware timestamps: "about a minute ago", "in 2 days"."""

from timeago_modern.config import (
    DAY,
    HOUR,
    MINUTE,
    MONTH,
    RFC3339,
    SECOND,
    YEAR,
    ConfigError,
    LocaleConfig,
    Period,
    Template,
    with_max,
    without_max,
)
from timeago_modern.formatter import format, format_duration, format_reference, format_relative_duration
from timeago_modern.locales import (
    CHINESE,
    ENGLISH,
    ENGLISH_UK,
    ENGLISH_US,
    FRENCH,
    GERMAN,
    LOCALES,
    PORTUGUESE,
    RUSSIAN,
    TURKISH,
)
from timeago_modern.plural import PLURALS, PluralRegistry, PluralRule, default_registry
from timeago_modern.timeago import TimeAgo

__all__ = [
    "CHINESE",
    "DAY",
    "ENGLISH",
    "ENGLISH_UK",
    "ENGLISH_US",
    "FRENCH",
    "GERMAN",
    "HOUR",
    "LOCALES",
    "MINUTE",
    "MONTH",
    "PLURALS",
    "PORTUGUESE",
    "RFC3339",
    "RUSSIAN",
    "SECOND",
    "TURKISH",
    "YEAR",
    "ConfigError",
    "LocaleConfig",
    "Period",
    "PluralRegistry",
    "PluralRule",
    "Template",
    "TimeAgo",
    "default_registry",
    "format",
    "format_duration",
    "format_reference",
    "format_relative_duration",
    "with_max",
    "without_max",
]
