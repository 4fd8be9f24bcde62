"""
Core resource model for code generation.

Represents already-loaded translation resources (locales, per-locale string
tables, placeholders) in a normalized form the generators consume as
immutable input.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from babel.core import parse_locale

from .naming import NameSanitizer, NamingCase
from ...logging_config import get_logger

logger = get_logger(__name__)


class ResourceError(Exception):
    """Exception raised for malformed resource documents."""

    pass


@dataclass(frozen=True)
class Locale:
    """A language code optionally refined by region and/or script subtags."""

    language_code: str
    country_code: Optional[str] = None
    script_code: Optional[str] = None

    def __str__(self) -> str:
        # Same layout as Flutter's Locale.toString(): language, script, country
        parts = [self.language_code]
        if self.script_code:
            parts.append(self.script_code)
        if self.country_code:
            parts.append(self.country_code)
        return "_".join(parts)

    @classmethod
    def parse(cls, tag: str) -> "Locale":
        """
        Parse a locale tag such as ``en``, ``de_AT`` or ``zh-Hans-CN``.

        BCP-47 hyphens are normalized to the POSIX underscores Babel expects.
        Variants (``en_US_POSIX``) have no Flutter counterpart and are dropped.

        Args:
            tag: Locale tag with ``_`` or ``-`` separated subtags

        Returns:
            Parsed Locale

        Raises:
            ResourceError: If Babel does not accept the tag
        """
        normalized = tag.strip().replace("-", "_")
        try:
            language, territory, script, variant = parse_locale(normalized)
        except ValueError as e:
            raise ResourceError(f"Invalid locale tag {tag!r}: {e}") from e

        if variant:
            logger.warning("Dropping variant %s of locale tag %r", variant, tag)

        return cls(language, country_code=territory, script_code=script)


class AccessorKind(Enum):
    """Code shapes an accessor can take."""

    PLAIN = "plain"  # String get hello
    PARAMETERIZED = "parameterized"  # String hello(String name)


@dataclass(frozen=True)
class AccessorShape:
    """
    Tagged variant describing how a key is accessed.

    Shared by the accessor and dispatch emitters so both render the same
    argument list for a key.
    """

    kind: AccessorKind
    parameters: Tuple[str, ...] = ()

    @classmethod
    def for_placeholders(cls, placeholders: Tuple[str, ...]) -> "AccessorShape":
        if not placeholders:
            return cls(AccessorKind.PLAIN)
        return cls(AccessorKind.PARAMETERIZED, tuple(placeholders))

    @property
    def is_parameterized(self) -> bool:
        return self.kind == AccessorKind.PARAMETERIZED

    def parameter_list(self, parameter_type: str = "String") -> str:
        """Declaration list, e.g. ``String name, String count``."""
        return ", ".join(f"{parameter_type} {name}" for name in self.parameters)

    def call(self, name: str, arguments: Optional[List[str]] = None) -> str:
        """
        Render a call of the accessor ``name``.

        Args:
            name: Accessor name
            arguments: Argument expressions; defaults to the parameter names

        Returns:
            ``name`` for plain accessors, ``name(a, b)`` otherwise
        """
        if not self.is_parameterized:
            return name
        if arguments is None:
            arguments = list(self.parameters)
        return f"{name}({', '.join(arguments)})"


@dataclass(frozen=True)
class StringResource:
    """A single translated string within a locale table."""

    key: str
    escaped_key: str
    value: str
    placeholders: Tuple[str, ...] = ()

    @property
    def shape(self) -> AccessorShape:
        return AccessorShape.for_placeholders(self.placeholders)


@dataclass(frozen=True)
class LocaleTable:
    """All string resources of one locale, unique by key."""

    locale: Locale
    strings: Tuple[StringResource, ...] = ()

    def __post_init__(self):
        keys = [string.key for string in self.strings]
        if len(keys) != len(set(keys)):
            raise ResourceError(f"Duplicate keys in locale table {self.locale}")

    def get(self, key: str) -> Optional[StringResource]:
        """Get the string resource for a key, or None if untranslated."""
        for string in self.strings:
            if string.key == key:
                return string
        return None

    def keys(self) -> List[str]:
        return [string.key for string in self.strings]

    def __iter__(self) -> Iterator[StringResource]:
        return iter(self.strings)

    def __len__(self) -> int:
        return len(self.strings)


@dataclass(frozen=True)
class ResourceCollection:
    """The default locale plus every locale table, default included."""

    default_locale: Locale
    locales: Tuple[LocaleTable, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not any(table.locale == self.default_locale for table in self.locales):
            raise ResourceError(
                f"Default locale {self.default_locale} has no locale table"
            )

    @property
    def default_values(self) -> LocaleTable:
        """The default locale's table: authoritative keys and placeholders."""
        for table in self.locales:
            if table.locale == self.default_locale:
                return table
        # Unreachable while __post_init__ holds
        raise ResourceError(f"Default locale {self.default_locale} has no table")

    def non_default_locales(self) -> List[Locale]:
        """Distinct non-default locales in collection order."""
        seen = []
        for table in self.locales:
            if table.locale != self.default_locale and table.locale not in seen:
                seen.append(table.locale)
        return seen

    def get_table(self, locale: Locale) -> Optional[LocaleTable]:
        for table in self.locales:
            if table.locale == locale:
                return table
        return None


def convert_resource_document(
    document: Mapping[str, Any],
    sanitizer: Optional[NameSanitizer] = None,
    key_case: NamingCase = NamingCase.CAMEL_CASE,
) -> ResourceCollection:
    """
    Convert a serialized resource model into a ResourceCollection.

    Args:
        document: Mapping with ``default_locale`` and ``locales`` entries
        sanitizer: Name sanitizer used for keys without an ``escaped_key``
        key_case: Case style of derived accessor names

    Returns:
        ResourceCollection built from the document

    Raises:
        ResourceError: If the document does not describe a valid collection
    """
    if not isinstance(document, Mapping):
        raise ResourceError("Resource document must be a JSON object")

    default_tag = document.get("default_locale")
    if not isinstance(default_tag, str) or not default_tag:
        raise ResourceError("Resource document needs a 'default_locale' string")

    raw_locales = document.get("locales")
    if not isinstance(raw_locales, Mapping) or not raw_locales:
        raise ResourceError("Resource document needs a non-empty 'locales' object")

    default_locale = Locale.parse(default_tag)
    parsed = {}
    for tag, entries in raw_locales.items():
        locale = Locale.parse(tag)
        if locale in parsed:
            raise ResourceError(f"Locale {locale} is defined more than once")
        parsed[locale] = (tag, entries)

    if default_locale not in parsed:
        raise ResourceError(f"No strings for default locale '{default_tag}'")

    if sanitizer is None:
        # Imported lazily, the Dart package depends on core
        from ..languages.dart.naming import create_dart_sanitizer

        sanitizer = create_dart_sanitizer()

    default_tag_raw, default_entries = parsed[default_locale]
    if not isinstance(default_entries, Mapping):
        raise ResourceError(f"Strings for locale '{default_tag_raw}' must be a JSON object")

    # Explicit accessor names are claimed before any name is derived
    for key, entry in default_entries.items():
        escaped_key = _read_entry(default_tag_raw, key, entry)[2]
        if escaped_key is not None:
            sanitizer.add_used_name(escaped_key)

    default_strings = _convert_entries(
        default_tag_raw, default_entries, sanitizer, key_case
    )
    definitions: Dict[str, StringResource] = {s.key: s for s in default_strings}

    tables = []
    for locale, (tag, entries) in parsed.items():
        if locale == default_locale:
            tables.append(LocaleTable(locale, tuple(default_strings)))
            continue

        strings = _convert_entries(tag, entries, sanitizer, key_case, definitions)
        tables.append(LocaleTable(locale, tuple(strings)))

    logger.debug(
        "Converted resource document: %d locale(s), %d key(s)",
        len(tables),
        len(default_strings),
    )
    return ResourceCollection(default_locale, tuple(tables))


def _read_entry(
    tag: str, key: str, entry: Any
) -> Tuple[str, Tuple[str, ...], Optional[str]]:
    """Split one entry into its value, placeholders and explicit accessor name."""
    if isinstance(entry, str):
        return entry, (), None
    if not isinstance(entry, Mapping):
        raise ResourceError(f"Unsupported entry type for {tag}.{key}")

    value = entry.get("value")
    if not isinstance(value, str):
        raise ResourceError(f"Missing string 'value' for {tag}.{key}")

    placeholders = entry.get("placeholders") or []
    if not isinstance(placeholders, list) or not all(
        isinstance(name, str) for name in placeholders
    ):
        raise ResourceError(
            f"'placeholders' of {tag}.{key} must be a list of strings"
        )

    escaped_key = entry.get("escaped_key")
    if escaped_key is not None and not isinstance(escaped_key, str):
        raise ResourceError(f"'escaped_key' of {tag}.{key} must be a string")

    return value, tuple(placeholders), escaped_key


def _convert_entries(
    tag: str,
    entries: Any,
    sanitizer: NameSanitizer,
    key_case: NamingCase,
    definitions: Optional[Dict[str, StringResource]] = None,
) -> List[StringResource]:
    """Convert one locale's entries; non-default locales reuse definitions."""
    if not isinstance(entries, Mapping):
        raise ResourceError(f"Strings for locale '{tag}' must be a JSON object")

    strings = []
    for key, entry in entries.items():
        value, placeholders, escaped_key = _read_entry(tag, key, entry)

        definition = definitions.get(key) if definitions is not None else None
        if definition is not None:
            # Accessor name comes from the default locale. Differing
            # placeholders are kept so validation can report them.
            escaped_key = definition.escaped_key
            if placeholders and placeholders != definition.placeholders:
                logger.debug("Placeholder mismatch for %s.%s", tag, key)
            else:
                placeholders = definition.placeholders
        elif escaped_key is None:
            escaped_key = sanitizer.sanitize_name(key, key_case)

        strings.append(StringResource(key, escaped_key, value, placeholders))

    return strings
