"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import GeneratorConfig
from .naming import NameSanitizer
from .resources import ResourceCollection
from .templates import TemplateEngine, create_template_engine
from ...logging_config import get_logger

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class AccessorCollisionError(GeneratorError):
    """Two keys would produce the same member in the generated class."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'dart')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.dart')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.

        Returns:
            Path to template directory or None
        """
        return None

    def create_name_sanitizer(self) -> Optional[NameSanitizer]:
        """
        Return the sanitizer that derives accessor names for this target.

        None lets the resource converter use its default.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, resources: ResourceCollection) -> str:
        """
        Generate the class source for a resource collection.

        Args:
            resources: Locales and string tables to generate accessors for

        Returns:
            Generated code as a string
        """
        pass

    def validate_resources(self, resources: ResourceCollection) -> List[str]:
        """
        Report non-fatal inconsistencies in the resources.

        Language generators may override this to add language-specific checks.

        Args:
            resources: Resources to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        default_table = resources.default_values

        if not len(default_table):
            warnings.append(
                f"Default locale {resources.default_locale} has no strings"
            )

        default_keys = set(default_table.keys())
        for table in resources.locales:
            if table.locale == resources.default_locale:
                continue

            missing = [key for key in default_table.keys() if table.get(key) is None]
            if missing:
                warnings.append(
                    f"Locale {table.locale} is missing {len(missing)} "
                    f"translation(s): {', '.join(missing)}"
                )

            extra = [key for key in table.keys() if key not in default_keys]
            if extra:
                warnings.append(
                    f"Locale {table.locale} defines keys absent from the default "
                    f"locale (ignored): {', '.join(extra)}"
                )

            for string in table:
                definition = default_table.get(string.key)
                if definition and string.placeholders != definition.placeholders:
                    warnings.append(
                        f"Placeholders of {table.locale}.{string.key} "
                        f"{list(string.placeholders)} differ from the default "
                        f"{list(definition.placeholders)}"
                    )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:  # Allow max 1 consecutive blank line
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return self.config.line_ending.join(formatted_lines).rstrip() + self.config.line_ending

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(
        cls, message: str, exception: Optional[Exception] = None
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, resources: ResourceCollection
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        resources: Resources to generate the class for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_resources(resources)

        code = generator.generate(resources)
        formatted_code = generator.format_code(code)

        default_table = resources.default_values
        missing_count = sum(
            1
            for table in resources.locales
            for key in default_table.keys()
            if table.get(key) is None
        )
        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "class_name": generator.config.class_name,
            "default_locale": str(resources.default_locale),
            "locale_count": 1 + len(resources.non_default_locales()),
            "key_count": len(default_table),
            "missing_translations": missing_count,
        }

        logger.info(
            "Generated %s class %s with %d accessor(s)",
            generator.language_name,
            generator.config.class_name,
            len(default_table),
        )
        return GenerationResult(formatted_code, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
