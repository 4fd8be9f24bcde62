"""
Dart-specific configuration and validation.

Reads the Dart settings out of the generic configuration's custom section.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, List

from ...core.config import ConfigError

_DART_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

DEFAULT_MISSING_MARKER = '<font color="yellow">⚠</font>'


@dataclass(frozen=True)
class DartConfig:
    """Dart-specific configuration."""

    # Type of the mandatory lookup passed to the constructor
    lookup_type: str = "I18nLookup"
    # Type of the optional, caller-installed override lookup
    custom_lookup_type: str = "I18nLookup"
    delegate_type: str = "I18nDelegate"
    missing_marker: str = DEFAULT_MISSING_MARKER
    # Emit `static I18n of(BuildContext context)`
    context_accessor: bool = True

    @classmethod
    def from_custom(cls, custom: Dict[str, Any]) -> "DartConfig":
        """
        Build a DartConfig from a GeneratorConfig's custom section.

        Unknown keys are ignored.

        Raises:
            ConfigError: If a type name is not a Dart identifier
        """
        known = {
            key: custom[key]
            for key in (
                "lookup_type",
                "custom_lookup_type",
                "delegate_type",
                "missing_marker",
                "context_accessor",
            )
            if key in custom
        }
        config = cls(**known)

        problems = config.validate()
        if problems:
            raise ConfigError("; ".join(problems))
        return config

    def validate(self) -> List[str]:
        """Return a list of problems with this configuration."""
        problems = []
        for name in ("lookup_type", "custom_lookup_type", "delegate_type"):
            value = getattr(self, name)
            if not isinstance(value, str) or not _DART_IDENTIFIER.match(value):
                problems.append(f"Invalid Dart type name for {name}: {value!r}")
        if not isinstance(self.context_accessor, bool):
            problems.append("context_accessor must be true or false")
        return problems


def is_dart_identifier(name: str) -> bool:
    """Check whether a name is a syntactically valid Dart identifier."""
    return bool(_DART_IDENTIFIER.match(name))
