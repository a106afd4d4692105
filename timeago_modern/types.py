"""Type definitions for :mod:`timeago_modern`."""

from datetime import timedelta
from typing import Callable, Literal, TypeAlias

PluralCategory: TypeAlias = Literal["one", "few", "many", "other"]

ONE: PluralCategory = "one"
FEW: PluralCategory = "few"
MANY: PluralCategory = "many"
OTHER: PluralCategory = "other"

CATEGORIES: tuple[PluralCategory, ...] = (ONE, FEW, MANY, OTHER)

PluralFunc: TypeAlias = Callable[[int], str]

DurationValue: TypeAlias = timedelta | int | float | str

LocaleValue: TypeAlias = "str | int | float | list[LocaleDict] | LocaleDict"
LocaleDict: TypeAlias = dict[str, LocaleValue]

OperandValue: TypeAlias = bool | float | int
OperandParam: TypeAlias = dict[str, OperandValue]

__all__ = [
    "PluralCategory",
    "ONE",
    "FEW",
    "MANY",
    "OTHER",
    "CATEGORIES",
    "PluralFunc",
    "DurationValue",
    "LocaleDict",
    "LocaleValue",
    "OperandParam",
    "OperandValue",
]
