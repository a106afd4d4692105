"""Predefined locale configurations."""

from datetime import timedelta

from .config import DAY, HOUR, MINUTE, MONTH, SECOND, YEAR, LocaleConfig, Period

MAX_DURATION = timedelta(hours=73)

ENGLISH_US = LocaleConfig(
    locale_id="en-US",
    past_suffix=" ago",
    future_prefix="in ",
    periods=(
        Period.of(SECOND, one="about a second", other="%d seconds"),
        Period.of(MINUTE, one="about a minute", other="%d minutes"),
        Period.of(HOUR, one="about an hour", other="%d hours"),
        Period.of(DAY, one="one day", other="%d days"),
        Period.of(MONTH, one="one month", other="%d months"),
        Period.of(YEAR, one="one year", other="%d years"),
    ),
    zero="about a second",
    max_duration=MAX_DURATION,
    fallback_layout="%Y-%m-%d",
)

ENGLISH_UK = LocaleConfig(
    locale_id="en-GB",
    past_suffix=" ago",
    future_prefix="in ",
    periods=ENGLISH_US.periods,
    zero="about a second",
    max_duration=MAX_DURATION,
    fallback_layout="%d/%m/%Y",
)

ENGLISH = ENGLISH_US

CHINESE = LocaleConfig(
    locale_id="zh",
    past_suffix="前",
    future_prefix="于 ",
    periods=(
        Period.of(SECOND, one="1 秒", other="%d 秒"),
        Period.of(MINUTE, one="1 分钟", other="%d 分钟"),
        Period.of(HOUR, one="1 小时", other="%d 小时"),
        Period.of(DAY, one="1 天", other="%d 天"),
        Period.of(MONTH, one="1 月", other="%d 月"),
        Period.of(YEAR, one="1 年", other="%d 年"),
    ),
    zero="1 秒",
    max_duration=MAX_DURATION,
    fallback_layout="%Y-%m-%d",
)

FRENCH = LocaleConfig(
    locale_id="fr",
    past_prefix="il y a ",
    future_prefix="dans ",
    periods=(
        Period.of(SECOND, one="environ une seconde", other="moins d'une minute"),
        Period.of(MINUTE, one="environ une minute", other="%d minutes"),
        Period.of(HOUR, one="environ une heure", other="%d heures"),
        Period.of(DAY, one="un jour", other="%d jours"),
        Period.of(MONTH, one="un mois", other="%d mois"),
        Period.of(YEAR, one="un an", other="%d ans"),
    ),
    zero="environ une seconde",
    max_duration=MAX_DURATION,
    fallback_layout="%d/%m/%Y",
)

RUSSIAN = LocaleConfig(
    locale_id="ru",
    past_suffix=" назад",
    future_prefix="через ",
    periods=(
        Period.of(SECOND, one="%d секунду", few="%d секунды", many="%d секунд", other="%d секунды"),
        Period.of(MINUTE, one="%d минуту", few="%d минуты", many="%d минут", other="%d минуты"),
        Period.of(HOUR, one="%d час", few="%d часа", many="%d часов", other="%d часа"),
        Period.of(DAY, one="%d день", few="%d дня", many="%d дней", other="%d дня"),
        Period.of(MONTH, one="%d месяц", few="%d месяца", many="%d месяцев", other="%d месяца"),
        Period.of(YEAR, one="%d год", few="%d года", many="%d лет", other="%d года"),
    ),
    zero="около секунды",
    max_duration=MAX_DURATION,
    fallback_layout="%Y-%m-%d",
)

PORTUGUESE = LocaleConfig(
    locale_id="pt",
    past_prefix="há ",
    future_prefix="daqui a ",
    periods=(
        Period.of(SECOND, one="um segundo", other="%d segundos"),
        Period.of(MINUTE, one="um minuto", other="%d minutos"),
        Period.of(HOUR, one="uma hora", other="%d horas"),
        Period.of(DAY, one="um dia", other="%d dias"),
        Period.of(MONTH, one="um mês", other="%d meses"),
        Period.of(YEAR, one="um ano", other="%d anos"),
    ),
    zero="menos de um segundo",
    max_duration=MAX_DURATION,
    fallback_layout="%d/%m/%Y",
)

GERMAN = LocaleConfig(
    locale_id="de",
    past_prefix="vor ",
    future_prefix="in ",
    periods=(
        Period.of(SECOND, one="einer Sekunde", other="%d Sekunden"),
        Period.of(MINUTE, one="einer Minute", other="%d Minuten"),
        Period.of(HOUR, one="einer Stunde", other="%d Stunden"),
        Period.of(DAY, one="einem Tag", other="%d Tagen"),
        Period.of(MONTH, one="einem Monat", other="%d Monaten"),
        Period.of(YEAR, one="einem Jahr", other="%d Jahren"),
    ),
    zero="einer Sekunde",
    max_duration=MAX_DURATION,
    fallback_layout="%d.%m.%Y",
)

TURKISH = LocaleConfig(
    locale_id="tr",
    past_suffix=" önce",
    future_suffix=" içinde",
    periods=(
        Period.of(SECOND, one="yaklaşık bir saniye", other="%d saniye"),
        Period.of(MINUTE, one="yaklaşık bir dakika", other="%d dakika"),
        Period.of(HOUR, one="yaklaşık bir saat", other="%d saat"),
        Period.of(DAY, one="bir gün", other="%d gün"),
        Period.of(MONTH, one="bir ay", other="%d ay"),
        Period.of(YEAR, one="bir yıl", other="%d yıl"),
    ),
    zero="yaklaşık bir saniye",
    max_duration=MAX_DURATION,
    fallback_layout="%d/%m/%Y",
)

LOCALES: dict[str, LocaleConfig] = {
    config.locale_id: config
    for config in (ENGLISH_US, ENGLISH_UK, CHINESE, FRENCH, RUSSIAN, PORTUGUESE, GERMAN, TURKISH)
}
LOCALES["en"] = ENGLISH
