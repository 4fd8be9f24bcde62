"""
Dart code generator implementation.

Generates the Flutter ``I18n`` class: supported locales, one accessor per
translation key documented with a per-locale translation table, and a
``getString`` dispatch function.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ...core.config import GeneratorConfig
from ...core.generator import AccessorCollisionError, CodeGenerator, GeneratorError
from ...core.naming import NameSanitizer
from ...core.resources import ResourceCollection, StringResource
from ....logging_config import get_logger
from .config import DartConfig, is_dart_identifier
from .locales import documentation_order, format_locale_literal, supported_locales
from .naming import (
    DART_RESERVED_WORDS,
    GENERATED_CLASS_MEMBERS,
    create_dart_sanitizer,
    quote_string_literal,
)

logger = get_logger(__name__)


class DartI18nGenerator(CodeGenerator):
    """Code generator for the Flutter localization accessor class."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Dart generator with configuration."""
        super().__init__(config)

        self.dart_config = DartConfig.from_custom(self.config.custom)

        self.template_engine.add_filter("dart_locale", format_locale_literal)
        self.template_engine.add_filter("dart_string", quote_string_literal)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "dart"

    @property
    def file_extension(self) -> str:
        """Return Dart file extension."""
        return ".dart"

    def get_template_directory(self) -> Optional[Path]:
        """Return the Dart templates directory."""
        return Path(__file__).parent / "templates"

    def create_name_sanitizer(self) -> NameSanitizer:
        """Derive accessor names that avoid keywords, members and the class name."""
        return create_dart_sanitizer(self.config.class_name)

    def generate(self, resources: ResourceCollection) -> str:
        """Generate the complete class for the resource collection."""
        self.check_accessor_names(resources)

        context = {
            "class_name": self.config.class_name,
            "lookup_type": self.dart_config.lookup_type,
            "custom_lookup_type": self.dart_config.custom_lookup_type,
            "delegate_type": self.dart_config.delegate_type,
            "context_accessor": self.dart_config.context_accessor,
            "supported_locales": self.emit_supported_locales(resources),
            "accessors": self.emit_accessors(resources),
            "get_string": self.emit_get_string(resources),
        }

        logger.debug(
            "Rendering class %s for %d locale(s)",
            self.config.class_name,
            len(resources.locales),
        )
        return self.render_template("class.dart.j2", context) + "\n"

    def emit_supported_locales(self, resources: ResourceCollection) -> str:
        """Render the ``supportedLocales`` getter, default locale first."""
        return self.render_template(
            "supported_locales.dart.j2", {"locales": supported_locales(resources)}
        )

    def emit_accessors(self, resources: ResourceCollection) -> List[str]:
        """Render one documented accessor per key of the default locale."""
        accessors = []
        for resource in resources.default_values:
            shape = resource.shape
            if shape.is_parameterized:
                signature = f"{resource.escaped_key}({shape.parameter_list()})"
            else:
                signature = f"get {resource.escaped_key}"

            documentation = None
            if self.config.add_comments:
                documentation = self.emit_documentation(resources, resource)

            accessors.append(
                self.render_template(
                    "accessor.dart.j2",
                    {
                        "documentation": documentation,
                        "signature": signature,
                        "call": shape.call(resource.escaped_key),
                    },
                )
            )

        logger.debug("Rendered %d accessor(s)", len(accessors))
        return accessors

    def emit_documentation(
        self, resources: ResourceCollection, resource: StringResource
    ) -> str:
        """Render the per-locale translation table for one key."""
        rows = [
            {"locale": str(table.locale), "translation": table.get(resource.key)}
            for table in documentation_order(resources)
        ]
        return self.render_template(
            "doc_table.dart.j2",
            {"rows": rows, "missing_marker": self.dart_config.missing_marker},
        )

    def emit_get_string(self, resources: ResourceCollection) -> str:
        """Render ``getString``, mapping raw keys to accessor calls."""
        branches = []
        for resource in resources.default_values:
            arguments = [
                f"placeholders[{quote_string_literal(name)}]!"
                for name in resource.shape.parameters
            ]
            branches.append(
                {
                    "key": resource.key,
                    "call": resource.shape.call(resource.escaped_key, arguments),
                }
            )

        return self.render_template(
            "get_string.dart.j2",
            {"branches": branches, "documented": self.config.add_comments},
        )

    def check_accessor_names(self, resources: ResourceCollection):
        """
        Ensure every key maps to its own, valid member name.

        Raises:
            AccessorCollisionError: If two keys share an accessor name or an
                accessor would shadow a member of the generated class
            GeneratorError: If an accessor or placeholder name is not a Dart
                identifier
        """
        seen: Dict[str, str] = {}
        for resource in resources.default_values:
            name = resource.escaped_key
            if not is_dart_identifier(name) or name in DART_RESERVED_WORDS:
                raise GeneratorError(
                    f"Key '{resource.key}' has an invalid accessor name '{name}'"
                )
            if name in GENERATED_CLASS_MEMBERS or name == self.config.class_name:
                raise AccessorCollisionError(
                    f"Accessor '{name}' for key '{resource.key}' shadows "
                    f"{self.config.class_name} or one of its members"
                )
            if name in seen:
                raise AccessorCollisionError(
                    f"Keys '{seen[name]}' and '{resource.key}' both map to "
                    f"accessor '{name}'"
                )
            seen[name] = resource.key

            if len(set(resource.placeholders)) != len(resource.placeholders):
                raise GeneratorError(f"Key '{resource.key}' repeats a placeholder")
            for placeholder in resource.placeholders:
                # Parameters must not hide the lookups the accessor body reads
                if (
                    not is_dart_identifier(placeholder)
                    or placeholder in DART_RESERVED_WORDS
                    or placeholder in GENERATED_CLASS_MEMBERS
                ):
                    raise GeneratorError(
                        f"Placeholder '{placeholder}' of key '{resource.key}' "
                        f"is not a valid parameter name"
                    )

    def validate_resources(self, resources: ResourceCollection) -> List[str]:
        """Validate resources for Dart generation."""
        warnings = super().validate_resources(resources)

        if not is_dart_identifier(self.config.class_name):
            warnings.append(f"Invalid Dart class name: {self.config.class_name}")

        return warnings

    def get_info(self) -> Dict[str, Any]:
        """Describe the effective Dart settings."""
        return {
            "class_name": self.config.class_name,
            "lookup_type": self.dart_config.lookup_type,
            "custom_lookup_type": self.dart_config.custom_lookup_type,
            "delegate_type": self.dart_config.delegate_type,
            "context_accessor": self.dart_config.context_accessor,
            "documentation_tables": self.config.add_comments,
        }


def create_dart_generator(config: Optional[Dict[str, Any]] = None) -> DartI18nGenerator:
    """Create a Dart generator from default settings plus overrides."""
    from ...core.config import load_config

    return DartI18nGenerator(load_config("dart", custom_config=config))
