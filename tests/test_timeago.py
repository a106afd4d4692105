"""Tests for the TimeAgo locale catalogue."""

import json
import logging
from datetime import datetime, timedelta, timezone

import pytest

from timeago_modern import DAY, ENGLISH, HOUR, MINUTE, PLURALS, ConfigError, TimeAgo, with_max
from timeago_modern.plural import RUSSIAN_RULE

BASE = datetime(2013, 8, 30, 12, 0, 0, tzinfo=timezone.utc)

SERBIAN = {
    "locale_id": "sr",
    "past_prefix": "pre ",
    "future_prefix": "za ",
    "zero": "sekund",
    "max_duration": "73h",
    "fallback_layout": "%d.%m.%Y.",
    "plural_rules": {
        "one": "n % 10 == 1 and n % 100 != 11",
        "few": "2 <= n % 10 <= 4 and not 12 <= n % 100 <= 14",
    },
    "periods": [
        {"unit": "1s", "one": "%d sekund", "few": "%d sekunde", "other": "%d sekundi"},
        {"unit": "1m", "one": "%d minut", "few": "%d minuta", "other": "%d minuta"},
        {"unit": "1h", "one": "%d sat", "few": "%d sata", "other": "%d sati"},
        {"unit": "1d", "one": "%d dan", "few": "%d dana", "other": "%d dana"},
    ],
}


@pytest.fixture
def timeago():
    return TimeAgo("en")


class TestDefaults:
    """Predefined locales are available out of the box."""

    def test_default_locale(self, timeago):
        assert timeago.default_locale == "en"
        assert timeago.format(BASE, reference=BASE + MINUTE * 5) == "5 minutes ago"

    def test_locale_override(self, timeago):
        assert timeago.format(BASE, "de", BASE + MINUTE * 5) == "vor 5 Minuten"

    def test_unknown_locale_falls_back(self, timeago, caplog):
        with caplog.at_level(logging.WARNING):
            assert timeago.format(BASE, "xx", BASE + HOUR * 2) == "2 hours ago"
        assert "xx" in caplog.text

    def test_unknown_default_locale(self):
        with pytest.raises(KeyError):
            TimeAgo("xx")

    def test_default_locale_setter(self, timeago):
        timeago.default_locale = "fr"
        assert timeago.format(BASE, reference=BASE + HOUR * 2) == "il y a 2 heures"
        with pytest.raises(KeyError):
            timeago.default_locale = "xx"

    def test_format_against_now(self, timeago):
        assert timeago.format(datetime.now(timezone.utc) - DAY * 2) == "2 days ago"

    def test_format_duration(self, timeago):
        assert timeago.format_duration(-DAY * 3, "ru") == "через 3 дня"

    def test_locales_listed(self, timeago):
        assert {"en", "en-US", "en-GB", "de", "fr", "pt", "ru", "tr", "zh"} <= set(timeago.locales)


class TestLoadFromValue:
    """Locale data given as dictionaries."""

    def test_partial_override(self, timeago):
        timeago.load_from_value({"past_suffix": " back"}, "en")
        assert timeago.format(BASE, reference=BASE + HOUR * 2) == "2 hours back"
        assert ENGLISH.past_suffix == " ago"

    def test_new_locale_inherits_default(self, timeago):
        timeago.load_from_value({"past_suffix": " earlier", "max_duration": "max"}, "en-AU")
        assert timeago.format(BASE, "en-AU", BASE + DAY * 10) == "10 days earlier"
        assert timeago.get_config("en-AU").locale_id == "en-AU"

    def test_plural_rules_registered_locally(self, timeago):
        timeago.load_from_value(SERBIAN, "sr")
        assert timeago.format(BASE, "sr", BASE + MINUTE * 21) == "pre 21 minut"
        assert timeago.format(BASE, "sr", BASE + MINUTE * 23) == "pre 23 minuta"
        assert timeago.format(BASE + HOUR * 11, "sr", BASE) == "za 11 sati"
        assert "sr" in timeago.plurals
        assert "sr" not in PLURALS

    def test_undeclared_categories_rejected(self, timeago):
        data = {"zero": "now", "periods": [{"unit": 1, "one": "%d s", "many": "%d s", "other": "%d s"}]}
        with pytest.raises(ConfigError):
            timeago.load_from_value(data, "en-XX")
        assert "en-XX" not in timeago.locales

    def test_rejected_plural_rules_are_not_kept(self, timeago):
        with pytest.raises(ConfigError):
            timeago.load_from_value({"plural_rules": {"one": "n == 1"}}, "ru")
        assert timeago.plurals.lookup("ru") is RUSSIAN_RULE
        assert timeago.format(BASE, "ru", BASE + MINUTE * 5) == "5 минут назад"

    def test_full_definition_inherits_nothing(self, timeago):
        timeago.load_from_value(SERBIAN, "sr")
        config = timeago.get_config("sr")
        assert config.past_suffix == ""
        assert config.future_suffix == ""

    def test_same_output_from_constructor_and_load(self, timeago):
        timeago.load_from_value(SERBIAN, "sr")
        direct = TimeAgo("sr", SERBIAN)
        for delta in (MINUTE * 21, HOUR * 5, DAY * 2, -HOUR * 11):
            assert timeago.format(BASE, "sr", BASE + delta) == direct.format(BASE, reference=BASE + delta)

    def test_data_must_be_mapping(self, timeago):
        with pytest.raises(ConfigError):
            timeago.load_from_value(["not", "a", "mapping"], "xx")  # type: ignore[arg-type]

    def test_constructor_value(self):
        timeago = TimeAgo("sr", SERBIAN)
        assert timeago.format(BASE, reference=BASE + DAY * 2) == "pre 2 dana"


class TestLoadFromFile:
    """Locale data read from disk."""

    def test_json(self, timeago, tmp_path):
        path = tmp_path / "sr.json"
        path.write_text(json.dumps(SERBIAN), encoding="utf-8")
        timeago.load_from_file(path, "sr")
        assert timeago.format(BASE, "sr", BASE + HOUR * 5) == "pre 5 sati"

    def test_yaml(self, timeago, tmp_path):
        pytest.importorskip("yaml")
        path = tmp_path / "en.yaml"
        path.write_text('past_suffix: " back then"\nfallback_layout: "%Y/%m/%d"\n', encoding="utf-8")
        timeago.load_from_file(path, "en")
        assert timeago.format(BASE, reference=BASE + MINUTE * 3) == "3 minutes back then"
        assert timeago.format(BASE, reference=BASE + DAY * 4) == "2013/08/30"

    def test_toml(self, timeago, tmp_path):
        pytest.importorskip("tomli")
        path = tmp_path / "de.toml"
        path.write_text('past_prefix = "seit "\nmax_duration = "1h"\n', encoding="utf-8")
        timeago.load_from_file(path, "de")
        assert timeago.format(BASE, "de", BASE + MINUTE * 10) == "seit 10 Minuten"
        assert timeago.format(BASE, "de", BASE + HOUR) == "30.08.2013"

    def test_missing_file(self, timeago, tmp_path):
        with pytest.raises(FileNotFoundError):
            timeago.load_from_file(tmp_path / "missing.json", "en")

    def test_unsupported_suffix(self, timeago, tmp_path):
        path = tmp_path / "en.ini"
        path.write_text("x", encoding="utf-8")
        with pytest.raises(ValueError):
            timeago.load_from_file(path, "en")

    def test_constructor_path(self, tmp_path):
        path = tmp_path / "sr.json"
        path.write_text(json.dumps(SERBIAN), encoding="utf-8")
        timeago = TimeAgo("sr", str(path))
        assert timeago.format(BASE, reference=BASE + MINUTE * 2) == "pre 2 minuta"

    def test_load_many(self, timeago, tmp_path):
        files = []
        for locale, suffix in [("en", " back"), ("en-GB", " before now")]:
            path = tmp_path / f"{locale}.json"
            path.write_text(json.dumps({"past_suffix": suffix}), encoding="utf-8")
            files.append((path, locale))

        timeago.load_many(files, max_workers=2)
        assert timeago.format(BASE, "en", BASE + HOUR * 2) == "2 hours back"
        assert timeago.format(BASE, "en-GB", BASE + HOUR * 2) == "2 hours before now"


class TestAdd:
    """Ready-made configurations."""

    def test_add_config(self, timeago):
        timeago.add(with_max(ENGLISH, timedelta(minutes=1), "%H:%M"), "en-short")
        assert timeago.format(BASE, "en-short", BASE + HOUR) == "12:00"
