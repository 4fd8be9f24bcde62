"""
Dart code generator module.

Generates the Flutter localization accessor class from translated string
resources.
"""

from .generator import DartI18nGenerator, create_dart_generator
from .config import DartConfig, DEFAULT_MISSING_MARKER
from .locales import documentation_order, format_locale_literal, supported_locales
from .naming import create_dart_sanitizer, escape_string_literal, quote_string_literal

__all__ = [
    "DartI18nGenerator",
    "create_dart_generator",
    "create_plain_generator",
    "DartConfig",
    "DEFAULT_MISSING_MARKER",
    "format_locale_literal",
    "supported_locales",
    "documentation_order",
    "create_dart_sanitizer",
    "escape_string_literal",
    "quote_string_literal",
]


def create_plain_generator(class_name: str = "I18n") -> DartI18nGenerator:
    """
    Create a generator for builds without Flutter widgets or doc tables.

    Features:
    - No documentation tables above the accessors
    - No ``of(BuildContext)`` helper
    """
    return create_dart_generator(
        {
            "class_name": class_name,
            "add_comments": False,
            "custom": {"context_accessor": False},
        }
    )
