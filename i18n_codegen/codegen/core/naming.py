"""
Naming utilities for safe code generation.

Derives host-language identifiers from raw translation keys: invalid
character cleanup, case conversion, keyword conflicts and de-duplication.
"""

import re
from enum import Enum
from typing import Dict, Optional, Set


class NamingCase(Enum):
    """Different naming case styles."""

    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName
    SCREAMING_SNAKE = "screaming_snake"  # USER_NAME


class NameSanitizer:
    """Handles name sanitization and case conversion."""

    def __init__(
        self,
        reserved_words: Optional[Set[str]] = None,
        builtin_names: Optional[Set[str]] = None,
        digit_prefix: str = "n",
    ):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            builtin_names: Names that would shadow something in the generated code
            digit_prefix: Prefix for names that would start with a digit
        """
        self.reserved_words = reserved_words or set()
        self.builtin_names = builtin_names or set()
        self.digit_prefix = digit_prefix
        self._name_cache: Dict[str, str] = {}
        self._used_names: Set[str] = set()

    def sanitize_name(
        self,
        name: str,
        target_case: NamingCase = NamingCase.CAMEL_CASE,
        suffix_on_conflict: str = "_",
    ) -> str:
        """
        Sanitize a name for safe use in target language.

        The same input always maps to the same output for the lifetime of the
        sanitizer; distinct inputs never share an output.

        Args:
            name: Original name to sanitize
            target_case: Desired case style
            suffix_on_conflict: Suffix to add for conflicts

        Returns:
            Sanitized name safe for use
        """
        cache_key = f"{name}\x00{target_case.value}\x00{suffix_on_conflict}"
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        cleaned = self._clean_basic(name)
        converted = self._convert_case(cleaned, target_case)
        if not converted:
            converted = "key"
        if converted[0].isdigit():
            converted = f"{self.digit_prefix}{converted}"

        final_name = self._resolve_conflicts(converted, suffix_on_conflict)

        self._name_cache[cache_key] = final_name
        self._used_names.add(final_name)

        return final_name

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - replace invalid characters."""
        cleaned = re.sub(r"[^a-zA-Z0-9_]", "_", name)
        return cleaned.strip("_")

    def _convert_case(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.SNAKE_CASE:
            return self._to_snake_case(name)
        elif target_case == NamingCase.CAMEL_CASE:
            return self._to_camel_case(name)
        elif target_case == NamingCase.PASCAL_CASE:
            return self._to_pascal_case(name)
        elif target_case == NamingCase.SCREAMING_SNAKE:
            return self._to_snake_case(name).upper()
        return name

    def _to_snake_case(self, name: str) -> str:
        """Convert to snake_case."""
        name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
        name = re.sub(r"_+", "_", name.lower())
        return name.strip("_")

    def _to_camel_case(self, name: str) -> str:
        """Convert to camelCase."""
        parts = [part for part in self._to_snake_case(name).split("_") if part]
        if not parts:
            return ""
        return parts[0] + "".join(part.capitalize() for part in parts[1:])

    def _to_pascal_case(self, name: str) -> str:
        """Convert to PascalCase."""
        parts = self._to_snake_case(name).split("_")
        return "".join(part.capitalize() for part in parts if part)

    def _resolve_conflicts(self, name: str, suffix: str) -> str:
        """Resolve conflicts with reserved words, builtins and earlier names."""
        if name in self.reserved_words or name in self.builtin_names:
            name = f"{name}{suffix}"

        base_name = name
        counter = 1
        while name in self._used_names:
            name = f"{base_name}{counter}"
            counter += 1

        return name

    def reset_used_names(self):
        """Forget every name handed out so far."""
        self._used_names.clear()
        self._name_cache.clear()

    def add_used_name(self, name: str):
        """Manually add a name to the used names set."""
        self._used_names.add(name)
