"""
i18n code generation module.

Generates localization accessor classes from translated string resources.
"""

from typing import Any, Dict, Mapping, Optional, Union

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
    register_generator,
)
from .core.generator import (
    AccessorCollisionError,
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    generate_code,
)
from .core.resources import (
    Locale,
    LocaleTable,
    ResourceCollection,
    ResourceError,
    StringResource,
    convert_resource_document,
)
from .core.naming import NamingCase
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config


def generate_i18n_class(
    resources: ResourceCollection,
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
    language: str = "dart",
) -> GenerationResult:
    """
    Generate the accessor class for a resource collection.

    Args:
        resources: Locales and string tables, default locale included
        config: Generator configuration dict or GeneratorConfig
        language: Target language name

    Returns:
        GenerationResult with generated code
    """
    generator = get_generator(language, config)
    return generate_code(generator, resources)


def generate_from_document(
    document: Mapping[str, Any],
    language: str = "dart",
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
) -> GenerationResult:
    """
    Generate code from a serialized resource model.

    Args:
        document: Mapping with ``default_locale`` and ``locales``
        language: Target language name
        config: Generator configuration dict or GeneratorConfig

    Returns:
        GenerationResult with generated code, or a failed result for an
        invalid document
    """
    generator = get_generator(language, config)

    try:
        key_case = NamingCase(generator.config.key_case)
        resources = convert_resource_document(
            document, generator.create_name_sanitizer(), key_case=key_case
        )
    except (ResourceError, ValueError) as e:
        return GenerationResult.error(f"Invalid resource document: {e}", exception=e)

    return generate_code(generator, resources)


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "AccessorCollisionError",
    "Locale",
    "LocaleTable",
    "StringResource",
    "ResourceCollection",
    "ResourceError",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "convert_resource_document",
    "generate_code",
    "generate_i18n_class",
    "generate_from_document",
    "get_generator",
    "get_language_info",
    "list_all_language_info",
    "list_supported_languages",
    "load_config",
    "register_generator",
]
