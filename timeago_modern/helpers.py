"""Conversion helpers between locale data dictionaries and configurations."""

from __future__ import annotations

import copy
import re
from collections.abc import Mapping
from datetime import timedelta
from typing import Any

from .config import ConfigError, LocaleConfig, Period
from .types import CATEGORIES, DurationValue, LocaleDict

_UNITS: dict[str, timedelta] = {
    "ms": timedelta(milliseconds=1),
    "s": timedelta(seconds=1),
    "m": timedelta(minutes=1),
    "h": timedelta(hours=1),
    "d": timedelta(days=1),
    "mo": timedelta(days=30),
    "y": timedelta(days=365),
}

_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)\s*(mo|ms|s|m|h|d|y)")
_DURATION = re.compile(r"(?:\s*\d+(?:\.\d+)?\s*(?:mo|ms|s|m|h|d|y))+\s*")

_AFFIXES = ("past_prefix", "past_suffix", "future_prefix", "future_suffix")


def parse_duration(value: DurationValue) -> timedelta:
    """
    Parse a duration from locale data.

    Args:
        value: A timedelta, a number of seconds, ``"max"``, or a string such
            as ``"73h"``, ``"1mo"`` or ``"1h30m"``

    Returns:
        The duration

    Raises:
        ConfigError: If the value cannot be read as a duration
    """
    if isinstance(value, timedelta):
        return value

    if isinstance(value, bool):
        raise ConfigError(f"Invalid duration: {value!r}")

    if isinstance(value, (int, float)):
        return timedelta(seconds=value)

    if isinstance(value, str):
        text = value.strip().lower()
        if text == "max":
            return timedelta.max
        if _DURATION.fullmatch(text):
            total = timedelta(0)
            for amount, unit in _DURATION_PART.findall(text):
                total += _UNITS[unit] * float(amount)
            return total

    raise ConfigError(f"Invalid duration: {value!r}")


def dump_duration(value: timedelta) -> str | int | float:
    """Inverse of :func:`parse_duration`: ``"max"`` or a number of seconds."""
    if value == timedelta.max:
        return "max"
    seconds = value.total_seconds()
    return int(seconds) if seconds.is_integer() else seconds


def merge_deep(target: Mapping[str, Any] | None, source: Mapping[str, Any]) -> LocaleDict:
    """
    Merge ``source`` over ``target`` into a new dictionary.

    Nested dictionaries are merged key by key; any other value, lists
    included, replaces the target's value. Neither argument is modified.
    """
    result: LocaleDict = copy.deepcopy(dict(target)) if target else {}

    for key, value in source.items():
        current = result.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            result[key] = merge_deep(current, value)
        else:
            result[key] = copy.deepcopy(value)

    return result


def config_to_dict(config: LocaleConfig) -> LocaleDict:
    """Describe a configuration as plain locale data."""
    data: LocaleDict = {"locale_id": config.locale_id}
    for name in _AFFIXES:
        data[name] = getattr(config, name)

    data["zero"] = config.zero
    data["max_duration"] = dump_duration(config.max_duration)
    data["fallback_layout"] = config.fallback_layout
    data["periods"] = [
        {"unit": dump_duration(period.unit), **{category: template.text for category, template in period.forms.items()}}
        for period in config.periods
    ]
    return data


def config_from_dict(data: Mapping[str, Any], locale_id: str | None = None) -> LocaleConfig:
    """
    Build a configuration from locale data.

    Args:
        data: Locale data, as read from a JSON, YAML or TOML file
        locale_id: Identifier used when ``data`` carries none

    Returns:
        The configuration

    Raises:
        ConfigError: If required keys are missing or values are invalid
    """
    locale = data.get("locale_id") or locale_id
    if not locale:
        raise ConfigError("Locale data has no locale_id")

    raw_periods = data.get("periods")
    if not isinstance(raw_periods, list):
        raise ConfigError(f"Locale '{locale}' must define a list of periods")

    if "zero" not in data:
        raise ConfigError(f"Locale '{locale}' has no zero phrase")

    periods = []
    for raw in raw_periods:
        if not isinstance(raw, Mapping) or "unit" not in raw:
            raise ConfigError(f"Locale '{locale}' has a period without unit: {raw!r}")
        unknown = set(raw) - {"unit", *CATEGORIES}
        if unknown:
            raise ConfigError(f"Locale '{locale}' period has unknown keys: {sorted(unknown)}")
        forms = {category: str(raw[category]) for category in CATEGORIES if raw.get(category)}
        periods.append(Period(parse_duration(raw["unit"]), forms))  # type: ignore[arg-type]

    options: dict[str, Any] = {name: str(data.get(name, "")) for name in _AFFIXES}
    if "max_duration" in data:
        options["max_duration"] = parse_duration(data["max_duration"])
    if "fallback_layout" in data:
        options["fallback_layout"] = str(data["fallback_layout"])

    return LocaleConfig(locale_id=locale, periods=periods, zero=str(data["zero"]), **options)
