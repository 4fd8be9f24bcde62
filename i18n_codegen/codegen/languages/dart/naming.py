"""
Dart-specific naming utilities and string escaping.

Handles Dart reserved words, the members of the generated class that
accessors must not shadow, and double-quoted string literal escaping.
"""

from typing import Optional

from ...core.naming import NameSanitizer


# Dart reserved words and built-in identifiers
DART_RESERVED_WORDS = {
    "abstract",
    "as",
    "assert",
    "async",
    "await",
    "base",
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "covariant",
    "default",
    "deferred",
    "do",
    "dynamic",
    "else",
    "enum",
    "export",
    "extends",
    "extension",
    "external",
    "factory",
    "false",
    "final",
    "finally",
    "for",
    "Function",
    "get",
    "hide",
    "if",
    "implements",
    "import",
    "in",
    "interface",
    "is",
    "late",
    "library",
    "mixin",
    "new",
    "null",
    "on",
    "operator",
    "part",
    "required",
    "rethrow",
    "return",
    "sealed",
    "set",
    "show",
    "static",
    "super",
    "switch",
    "sync",
    "this",
    "throw",
    "true",
    "try",
    "typedef",
    "var",
    "void",
    "when",
    "while",
    "with",
    "yield",
}

# Members every generated class declares besides the accessors
GENERATED_CLASS_MEMBERS = {
    "_lookup",
    "locale",
    "currentLocale",
    "customLookup",
    "delegate",
    "of",
    "supportedLocales",
    "getString",
    # Inherited from Object
    "hashCode",
    "runtimeType",
    "toString",
    "noSuchMethod",
}

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "$": "\\$",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def escape_string_literal(value: str) -> str:
    """
    Escape a value for use inside a double-quoted Dart string literal.

    Args:
        value: Raw text

    Returns:
        Text with backslashes, quotes, interpolation markers and control
        whitespace escaped
    """
    return "".join(_ESCAPES.get(char, char) for char in value)


def quote_string_literal(value: str) -> str:
    """Wrap an escaped value in double quotes."""
    return f'"{escape_string_literal(value)}"'


def create_dart_sanitizer(class_name: Optional[str] = None) -> NameSanitizer:
    """
    Create a name sanitizer configured for Dart accessor names.

    Args:
        class_name: Name of the generated class; members may not reuse it
    """
    builtin_names = set(GENERATED_CLASS_MEMBERS)
    if class_name:
        builtin_names.add(class_name)
    return NameSanitizer(DART_RESERVED_WORDS, builtin_names)
