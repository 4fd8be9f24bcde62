"""
Generator registry.

Maps target language names and their aliases to generator classes and builds
configured generator instances.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from .core.config import GeneratorConfig, load_config
from .core.generator import CodeGenerator
from ..logging_config import get_logger

logger = get_logger(__name__)

ConfigSource = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


class RegistryError(Exception):
    """Exception raised for unknown languages or unusable generators."""

    pass


@dataclass(frozen=True)
class GeneratorEntry:
    """A registered generator and the names it answers to."""

    language: str
    generator_class: Type[CodeGenerator]
    aliases: Tuple[str, ...] = ()

    def names(self) -> Tuple[str, ...]:
        return (self.language,) + self.aliases


class GeneratorRegistry:
    """Lookup table from language names and aliases to generators."""

    def __init__(self):
        self._entries: Dict[str, GeneratorEntry] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
    ):
        """
        Register a generator under a language name and optional aliases.

        Raises:
            RegistryError: If the class is not a CodeGenerator or a name is taken
        """
        if not isinstance(generator_class, type) or not issubclass(
            generator_class, CodeGenerator
        ):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        entry = GeneratorEntry(
            language.lower(),
            generator_class,
            tuple(alias.lower() for alias in aliases or [] if alias.lower() != language.lower()),
        )
        for name in entry.names():
            if name in self._entries:
                raise RegistryError(
                    f"'{name}' is already registered for {self._entries[name].language}"
                )

        for name in entry.names():
            self._entries[name] = entry
        logger.debug("Registered %s generator %s", entry.language, generator_class.__name__)

    def entry(self, language: str) -> GeneratorEntry:
        """
        Find the entry for a language name or alias.

        Raises:
            RegistryError: If nothing is registered under that name
        """
        try:
            return self._entries[language.lower()]
        except KeyError:
            raise RegistryError(
                f"No generator registered for language: {language}. "
                f"Available: {', '.join(self.list_languages())}"
            ) from None

    def resolve(self, language: str) -> str:
        """Primary language name for a name or alias."""
        return self.entry(language).language

    def create_generator(self, language: str, config: ConfigSource = None) -> CodeGenerator:
        """
        Build a generator with merged configuration.

        Args:
            language: Language name or alias
            config: GeneratorConfig, override dict, config file path, or None

        Raises:
            RegistryError: If the language is unknown or the generator rejects
                its configuration
        """
        entry = self.entry(language)

        if isinstance(config, GeneratorConfig):
            final_config = config
        elif isinstance(config, (str, Path)):
            final_config = load_config(entry.language, config_file=config)
        elif isinstance(config, dict) or config is None:
            final_config = load_config(entry.language, custom_config=config)
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        try:
            return entry.generator_class(final_config)
        except Exception as e:
            raise RegistryError(f"Failed to create {entry.language} generator: {e}") from e

    def list_languages(self) -> List[str]:
        """Sorted primary language names."""
        return sorted({entry.language for entry in self._entries.values()})

    def is_supported(self, language: str) -> bool:
        return language.lower() in self._entries

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """Describe the generator registered for a language."""
        entry = self.entry(language)
        generator = entry.generator_class(load_config(entry.language))

        return {
            "name": generator.language_name,
            "class": entry.generator_class.__name__,
            "file_extension": generator.file_extension,
            "aliases": sorted(entry.aliases),
            "module": entry.generator_class.__module__,
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Return the shared registry with the built-in generators."""
    global _global_registry
    if _global_registry is None:
        from .languages.dart import DartI18nGenerator

        _global_registry = GeneratorRegistry()
        _global_registry.register("dart", DartI18nGenerator, aliases=["flutter"])
    return _global_registry


def register_generator(
    language: str,
    generator_class: Type[CodeGenerator],
    aliases: Optional[List[str]] = None,
):
    """Register a generator in the shared registry."""
    get_registry().register(language, generator_class, aliases)


def get_generator(language: str = "dart", config: ConfigSource = None) -> CodeGenerator:
    """Build a generator from the shared registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Language info for every primary language."""
    return {language: get_language_info(language) for language in list_supported_languages()}
