"""Locale configuration model.

A :class:`LocaleConfig` describes how one language renders fuzzy durations:
the affixes wrapped around a phrase, the ordered :class:`Period` buckets with
their plural templates, and the cutoff beyond which an absolute date is
printed instead.

All values here are immutable. :func:`with_max` and :func:`without_max`
derive new configurations and never touch their argument.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from datetime import timedelta
from types import MappingProxyType

from .types import CATEGORIES, OTHER, PluralCategory


SECOND = timedelta(seconds=1)
MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = timedelta(days=1)
MONTH = DAY * 30
YEAR = DAY * 365

RFC3339 = "%Y-%m-%dT%H:%M:%S.%f%z"


class ConfigError(ValueError):
    """Raised when a locale configuration is malformed."""


class Template:
    """A phrase with either no placeholder or a single ``%d`` count slot.

    The slot count is decided once, here, so formatting never re-parses the
    text.
    """

    __slots__ = ("_text", "_has_count")

    def __init__(self, text: str):
        slots = text.count("%") - 2 * text.count("%%")
        if slots > 1:
            raise ConfigError(f"Template {text!r} has {slots} placeholders, at most one is allowed")

        if slots == 1:
            try:
                text % 0
            except (TypeError, ValueError) as error:
                raise ConfigError(f"Template {text!r} has an invalid placeholder: {error}") from error

        self._text: str = text
        self._has_count: bool = slots == 1

    @property
    def text(self) -> str:
        return self._text

    @property
    def has_count(self) -> bool:
        """Whether the template interpolates the rounded count."""
        return self._has_count

    def render(self, count: int) -> str:
        if not self._has_count:
            return self._text
        return self._text % count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Template):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return f"Template({self._text!r})"


@dataclasses.dataclass(frozen=True)
class Period:
    """One bucket of the duration scale.

    Args:
        unit: Duration at which the bucket starts; also the rounding step
        forms: Plural category to template; ``other`` is mandatory
    """

    unit: timedelta
    forms: Mapping[PluralCategory, Template]

    def __post_init__(self):
        if self.unit <= timedelta(0):
            raise ConfigError(f"Period unit must be positive, got {self.unit}")

        forms: dict[PluralCategory, Template] = {}
        for category, template in self.forms.items():
            if category not in CATEGORIES:
                raise ConfigError(f"Unknown plural category: {category!r}")
            forms[category] = template if isinstance(template, Template) else Template(template)

        if OTHER not in forms:
            raise ConfigError(f"Period {self.unit} has no '{OTHER}' form")

        object.__setattr__(self, "forms", MappingProxyType(forms))

    @classmethod
    def of(
            cls,
            unit: timedelta,
            *,
            other: str,
            one: str | None = None,
            few: str | None = None,
            many: str | None = None,
    ) -> Period:
        """Build a period from keyword templates, skipping unset categories."""
        given = {"one": one, "few": few, "many": many, "other": other}
        return cls(unit, {category: text for category, text in given.items() if text is not None})  # type: ignore[misc]

    def template(self, category: str) -> Template:
        """Template for ``category``, falling back to the ``other`` form."""
        return self.forms.get(category) or self.forms[OTHER]  # type: ignore[call-overload]

    def __hash__(self) -> int:
        return hash((self.unit, frozenset(self.forms.items())))

    @property
    def categories(self) -> frozenset[str]:
        return frozenset(self.forms)


@dataclasses.dataclass(frozen=True)
class LocaleConfig:
    """Rendering rules for one language."""

    locale_id: str
    periods: Sequence[Period]
    zero: str
    past_prefix: str = ""
    past_suffix: str = ""
    future_prefix: str = ""
    future_suffix: str = ""
    max_duration: timedelta = timedelta.max
    fallback_layout: str = RFC3339

    def __post_init__(self):
        periods = tuple(self.periods)
        if not periods:
            raise ConfigError(f"Locale '{self.locale_id}' defines no periods")

        for previous, current in zip(periods, periods[1:]):
            if current.unit <= previous.unit:
                raise ConfigError(
                    f"Locale '{self.locale_id}' periods are not strictly increasing: "
                    f"{current.unit} follows {previous.unit}"
                )

        if self.max_duration < timedelta(0):
            raise ConfigError(f"Locale '{self.locale_id}' has a negative max_duration")

        object.__setattr__(self, "periods", periods)


def with_max(config: LocaleConfig, max_duration: timedelta, layout: str) -> LocaleConfig:
    """
    Create a copy of a configuration with another fuzzy-formatting limit.

    Durations greater than or equal to ``max_duration`` are printed with
    ``datetime.strftime(layout)`` instead of as a fuzzy phrase.

    Args:
        config: Base configuration, left untouched
        max_duration: New cutoff
        layout: ``strftime`` pattern used beyond the cutoff

    Returns:
        A new LocaleConfig
    """
    return dataclasses.replace(config, max_duration=max_duration, fallback_layout=layout)


def without_max(config: LocaleConfig) -> LocaleConfig:
    """Create a copy of a configuration that never falls back to a date."""
    return with_max(config, timedelta.max, RFC3339)
