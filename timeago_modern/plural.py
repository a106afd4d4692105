"""
Plural category selection.

A :class:`PluralRule` maps an integer count to one of the CLDR categories
``one``, ``few``, ``many`` or ``other``. Rules are kept in an explicit
:class:`PluralRegistry` that the formatter receives as an argument; locales
without a registered rule use the ``one``/``other`` rule.

Reference: https://www.unicode.org/cldr/charts/latest/supplemental/language_plural_rules.html
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from .ast_evaluator import ASTExpressionEvaluator
from .config import ConfigError, LocaleConfig
from .types import CATEGORIES, FEW, MANY, ONE, OTHER, PluralFunc


def _one_other(n: int) -> str:
    return ONE if n == 1 else OTHER


def _east_slavic(n: int) -> str:
    """Russian, Ukrainian and Belarusian integer rule.

    Examples: 1, 21, 101 -> one; 2-4, 22-24 -> few; 0, 5-20, 25-30 -> many
    """
    mod10 = n % 10
    mod100 = n % 100
    if mod10 == 1 and mod100 != 11:
        return ONE
    if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
        return FEW
    if mod10 == 0 or 5 <= mod10 <= 9 or 11 <= mod100 <= 14:
        return MANY
    return OTHER


class PluralRule:
    """
    Plural rule of one locale.

    Args:
        locale_id: Locale identifier the rule applies to
        func: Function from an integer count to a category
        categories: Categories ``func`` may return
    """

    __slots__ = ("_locale_id", "_func", "_categories")

    def __init__(self, locale_id: str, func: PluralFunc, categories: Iterable[str] = (ONE, OTHER)):
        self._locale_id: str = locale_id
        self._func: PluralFunc = func
        self._categories: frozenset[str] = frozenset(categories) | {OTHER}

        unknown = self._categories.difference(CATEGORIES)
        if unknown:
            raise ConfigError(f"Unknown plural categories for '{locale_id}': {sorted(unknown)}")

    @property
    def locale_id(self) -> str:
        return self._locale_id

    @property
    def categories(self) -> frozenset[str]:
        return self._categories

    def __call__(self, count: int) -> str:
        return self._func(count)

    def __repr__(self) -> str:
        return f"PluralRule({self._locale_id!r}, categories={sorted(self._categories)})"

    @classmethod
    def from_conditions(cls, locale_id: str, conditions: Mapping[str, str]) -> PluralRule:
        """
        Build a rule from boolean expressions over the count ``n``.

        Conditions are tried in mapping order; the first one that holds
        gives the category, otherwise ``other``.

        Args:
            locale_id: Locale identifier
            conditions: Category to expression, e.g. ``{"one": "n == 1"}``

        Returns:
            The new rule
        """
        for category, expression in conditions.items():
            if not isinstance(expression, str) or not ASTExpressionEvaluator.is_valid(expression):
                raise ConfigError(f"Invalid plural condition for '{locale_id}' {category}: {expression!r}")

        ordered = [(category, expression) for category, expression in conditions.items() if category != OTHER]

        def rule(n: int) -> str:
            for category, expression in ordered:
                if ASTExpressionEvaluator.evaluate(expression, {"n": n}):
                    return category
            return OTHER

        return cls(locale_id, rule, conditions.keys())


DEFAULT_RULE = PluralRule("root", _one_other)
RUSSIAN_RULE = PluralRule("ru", _east_slavic, CATEGORIES)
UKRAINIAN_RULE = PluralRule("uk", _east_slavic, CATEGORIES)
BELARUSIAN_RULE = PluralRule("be", _east_slavic, CATEGORIES)


class PluralRegistry:
    """
    Locale identifier to plural rule table.

    Args:
        rules: Rules to register
        default: Rule used for locales without a registered rule
    """

    __slots__ = ("_rules", "_default")

    def __init__(self, rules: Iterable[PluralRule] = (), default: PluralRule = DEFAULT_RULE):
        self._rules: dict[str, PluralRule] = {}
        self._default: PluralRule = default
        for rule in rules:
            self.register(rule)

    def register(self, rule: PluralRule) -> None:
        """Add a rule, replacing any rule with the same locale identifier."""
        self._rules[rule.locale_id] = rule

    def lookup(self, locale_id: str) -> PluralRule:
        """
        Get the rule for a locale.

        ``pt-BR`` and ``pt_BR`` fall back to ``pt`` before the default rule.
        """
        rule = self._rules.get(locale_id)
        if rule is not None:
            return rule

        language = locale_id.replace("_", "-").split("-", 1)[0]
        return self._rules.get(language, self._default)

    def __contains__(self, locale_id: object) -> bool:
        return locale_id in self._rules

    def copy(self) -> PluralRegistry:
        return PluralRegistry(self._rules.values(), self._default)

    def category(self, locale_id: str, count: int) -> str:
        """
        Get the plural category of a count.

        A rule that fails or answers a category it does not declare
        degrades to ``other``.

        Args:
            locale_id: Locale identifier
            count: The count being rendered

        Returns:
            One of ``one``, ``few``, ``many``, ``other``
        """
        rule = self.lookup(locale_id)
        try:
            category = rule(int(count))
        except (ValueError, TypeError, ArithmeticError) as error:
            logging.warning("Plural rule for '%s' failed on %r - %s", locale_id, count, error)
            return OTHER

        if category not in rule.categories:
            logging.warning("Plural rule for '%s' returned undeclared category %r", locale_id, category)
            return OTHER
        return category

    def check(self, config: LocaleConfig) -> None:
        """
        Verify that a configuration only uses categories its rule declares.

        Raises:
            ConfigError: If a period populates an undeclared category
        """
        declared = self.lookup(config.locale_id).categories
        for period in config.periods:
            extra = period.categories - declared
            if extra:
                raise ConfigError(
                    f"Locale '{config.locale_id}' period {period.unit} uses categories "
                    f"{sorted(extra)} not declared by its plural rule"
                )


def default_registry() -> PluralRegistry:
    """Create a registry holding the built-in rules."""
    return PluralRegistry([RUSSIAN_RULE, UKRAINIAN_RULE, BELARUSIAN_RULE])


PLURALS = default_registry()
