"""
Core code generation components.

Provides the resource model and base classes used by all language generators.
"""

from .generator import (
    AccessorCollisionError,
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    generate_code,
)
from .resources import (
    AccessorKind,
    AccessorShape,
    Locale,
    LocaleTable,
    ResourceCollection,
    ResourceError,
    StringResource,
    convert_resource_document,
)
from .naming import NameSanitizer, NamingCase
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "AccessorCollisionError",
    "GenerationResult",
    "generate_code",
    # Resource model
    "Locale",
    "AccessorKind",
    "AccessorShape",
    "StringResource",
    "LocaleTable",
    "ResourceCollection",
    "ResourceError",
    "convert_resource_document",
    # Naming utilities - language-agnostic
    "NameSanitizer",
    "NamingCase",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
