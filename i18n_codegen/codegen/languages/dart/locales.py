"""
Locale helpers for the Dart generator.

Renders Locale values as Flutter ``Locale`` constructor expressions and
orders locale tables for documentation.
"""

from typing import List

from ...core.resources import Locale, LocaleTable, ResourceCollection
from .naming import quote_string_literal


def format_locale_literal(locale: Locale) -> str:
    """
    Render the shortest Flutter constructor expression for a locale.

    Fields that are unset are omitted; scripts need ``Locale.fromSubtags``.

    Args:
        locale: Locale to render

    Returns:
        Dart expression such as ``Locale("de", "AT")``
    """
    language = quote_string_literal(locale.language_code)

    if not locale.country_code and not locale.script_code:
        return f"Locale({language})"

    if not locale.script_code:
        return f"Locale({language}, {quote_string_literal(locale.country_code)})"

    subtags = [
        f"languageCode: {language}",
        f"scriptCode: {quote_string_literal(locale.script_code)}",
    ]
    if locale.country_code:
        subtags.append(f"countryCode: {quote_string_literal(locale.country_code)}")
    return f"Locale.fromSubtags({', '.join(subtags)})"


def supported_locales(resources: ResourceCollection) -> List[Locale]:
    """Default locale first, then the other locales in collection order."""
    return [resources.default_locale] + resources.non_default_locales()


def documentation_order(resources: ResourceCollection) -> List[LocaleTable]:
    """Locale tables sorted by their string form, default table first."""
    default_table = resources.default_values
    others = sorted(
        (table for table in resources.locales if table is not default_table),
        key=lambda table: str(table.locale),
    )
    return [default_table] + others
