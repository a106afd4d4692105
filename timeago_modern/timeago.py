"""
Locale catalogue for fuzzy timestamps.

Author: Uriel Curiel <urielcurrel@outlook.com>
"""
import json
import logging
from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime, timedelta
from pathlib import Path
from typing import cast

from timeago_modern import formatter
from timeago_modern.config import ConfigError, LocaleConfig
from timeago_modern.helpers import config_from_dict, config_to_dict, merge_deep
from timeago_modern.locales import LOCALES
from timeago_modern.plural import PLURALS, PluralRegistry, PluralRule
from timeago_modern.types import LocaleDict

try:
    import yaml
except ImportError:
    yaml = None

try:
    import tomli
except ImportError:
    tomli = None


class TimeAgo:
    """
    Formats fuzzy timestamps for a set of locales.

    The catalogue starts with the predefined locales; more can be loaded from
    dictionaries or JSON, YAML and TOML files. Loaded data is merged over the
    existing definition of the locale, or over the default locale's, so a file
    only needs the keys it changes. Data that lists its own periods is a complete
    definition and inherits nothing.

    Args:
        default_locale: The default locale
        locales: Locale data (dict) or path to a locale file for ``default_locale``
        plurals: Plural rules; copied, so registrations stay local to this catalogue
    """

    __slots__ = (
        "_locales",
        "_default_locale",
        "_plurals",
    )

    def __init__(
            self,
            default_locale: str,
            locales: LocaleDict | str | Path | None = None,
            *,
            plurals: PluralRegistry | None = None,
    ):
        self._locales: dict[str, LocaleConfig] = dict(LOCALES)
        self._default_locale: str = default_locale
        self._plurals: PluralRegistry = (plurals or PLURALS).copy()

        if isinstance(locales, str | Path):
            self.load_from_file(Path(locales), default_locale)
        elif isinstance(locales, dict):
            self.load_from_value(locales, default_locale)

        if default_locale not in self._locales:
            raise KeyError(f"Locale '{default_locale}' not found in locales")

    @property
    def default_locale(self) -> str:
        """Get the default locale."""
        return self._default_locale

    @default_locale.setter
    def default_locale(self, value: str):
        """Set the default locale."""
        if value not in self._locales:
            raise KeyError(f"Locale '{value}' not found in locales")
        self._default_locale = value

    @property
    def plurals(self) -> PluralRegistry:
        return self._plurals

    @property
    def locales(self) -> list[str]:
        return sorted(self._locales)

    def load_from_file(self, file_path: str | Path, locale_identify: str):
        """
        Load a locale from a file (JSON, YAML, or TOML).

        Args:
            file_path: Path to the locale file
            locale_identify: Locale identifier
        """
        path: Path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"Locale file not found: {file_path}")

        self._update_locales(locale_identify, self._load_path(path))

    def _load_path(self, path: Path) -> LocaleDict:
        """Load a single locale file from a path."""
        suffix = path.suffix.lower()
        if suffix == ".json":
            with open(path, "r", encoding="utf-8") as f:
                return cast(LocaleDict, json.load(f))
        if suffix in [".yaml", ".yml"]:
            if yaml is None:
                raise ImportError("PyYAML is required for YAML support. Install with: pip install pyyaml")
            with open(path, "r", encoding="utf-8") as f:
                return cast(LocaleDict, yaml.safe_load(f))  # type: ignore
        if suffix == ".toml":
            if tomli is None:
                raise ImportError("tomli is required for TOML support. Install with: pip install tomli")
            with open(path, "rb") as f:
                return cast(LocaleDict, tomli.load(f))  # type: ignore
        raise ValueError(f"Unsupported file format: {suffix}. Supported formats: .json, .yaml, .yml, .toml")

    def _task_load_locale(self, file_path: str | Path, locale: str) -> tuple[str, LocaleDict]:
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Locale file not found: {file_path}")
        return locale, self._load_path(path)

    def load_many(self, files: Iterable[tuple[str | Path, str]], max_workers: int | None = None) -> None:
        """Load multiple locale files concurrently.

        Args:
            files: Iterable of tuples (file_path, locale_identify)
            max_workers: Optional maximum number of worker threads
        """

        # Read in parallel, merge once complete
        results: list[tuple[str, LocaleDict]] = []
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(self._task_load_locale, fp, loc) for fp, loc in files]
            for fut in as_completed(futures):
                results.append(fut.result())

        for locale, data in results:
            self._update_locales(locale, data)

    def load_from_value(self, locales: LocaleDict, locale_identify: str):
        """
        Load a locale from a dictionary value.

        Args:
            locales: The locale data
            locale_identify: Locale identifier
        """
        self._update_locales(locale_identify, locales)

    def add(self, config: LocaleConfig, locale_identify: str | None = None) -> None:
        """Register a ready-made configuration, checked against the plural rules."""
        self._plurals.check(config)
        self._locales[locale_identify or config.locale_id] = config

    def _update_locales(self, locale_identify: str, data: LocaleDict):
        if not isinstance(data, Mapping):
            raise ConfigError(f"Locale data for '{locale_identify}' must be a mapping")

        data = dict(data)
        conditions = data.pop("plural_rules", None)

        # Data with its own periods is a full definition and inherits nothing
        base = None
        if "periods" not in data:
            base = self._locales.get(locale_identify, self._locales.get(self._default_locale))
        merged = merge_deep(config_to_dict(base) if base else None, data)
        if "locale_id" not in data:
            merged["locale_id"] = locale_identify

        config = config_from_dict(merged, locale_identify)

        plurals = self._plurals
        if conditions is not None:
            if not isinstance(conditions, Mapping):
                raise ConfigError(f"plural_rules for '{locale_identify}' must be a mapping")
            plurals = self._plurals.copy()
            plurals.register(PluralRule.from_conditions(config.locale_id, conditions))

        # Nothing is kept unless the configuration matches its plural rule
        plurals.check(config)
        self._plurals = plurals
        self._locales[locale_identify] = config

    def get_config(self, locale: str | None = None) -> LocaleConfig:
        """
        Get the configuration of a locale.

        An unknown locale logs a warning and gives the default locale.
        """
        locale = locale or self._default_locale
        config = self._locales.get(locale)
        if config is None:
            logging.warning("Error: the locale '%s' is not defined, using '%s'", locale, self._default_locale)
            config = self._locales[self._default_locale]
        return config

    def format(self, t: datetime, locale: str | None = None, reference: datetime | None = None) -> str:
        """
        Format a time as a fuzzy timestamp.

        Args:
            t: The time to describe
            locale: Optional locale override
            reference: Time to compare with, now when omitted

        Returns:
            Formatted string
        """
        config = self.get_config(locale)
        if reference is None:
            return formatter.format(t, config, self._plurals)
        return formatter.format_reference(t, reference, config, self._plurals)

    def format_duration(self, d: timedelta, locale: str | None = None) -> str:
        """Format a signed duration, positive durations reading as past."""
        return formatter.format_duration(d, self.get_config(locale), self._plurals)
