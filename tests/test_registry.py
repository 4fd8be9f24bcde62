"""Tests for the generator registry."""

import pytest

from i18n_codegen.codegen.core.config import GeneratorConfig
from i18n_codegen.codegen.core.generator import CodeGenerator
from i18n_codegen.codegen.languages.dart import DartI18nGenerator
from i18n_codegen.codegen.registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    is_language_supported,
    list_supported_languages,
)


class EchoGenerator(CodeGenerator):
    """Minimal generator used to exercise registration."""

    @property
    def language_name(self) -> str:
        return "echo"

    @property
    def file_extension(self) -> str:
        return ".txt"

    def generate(self, resources) -> str:
        return "\n".join(resources.default_values.keys())


class TestGeneratorRegistry:
    """Registration and lookup."""

    def test_register_and_resolve_alias(self) -> None:
        registry = GeneratorRegistry()
        registry.register("echo", EchoGenerator, aliases=["ECHO2", "echo"])

        assert registry.resolve("echo2") == "echo"
        assert registry.entry("Echo").generator_class is EchoGenerator
        assert registry.entry("echo").aliases == ("echo2",)
        assert registry.list_languages() == ["echo"]

    def test_rejects_non_generators(self) -> None:
        with pytest.raises(RegistryError, match="must inherit"):
            GeneratorRegistry().register("bad", dict)

    def test_names_cannot_be_registered_twice(self) -> None:
        registry = GeneratorRegistry()
        registry.register("echo", EchoGenerator, aliases=["e"])

        with pytest.raises(RegistryError, match="already registered for echo"):
            registry.register("other", EchoGenerator, aliases=["e"])
        with pytest.raises(RegistryError, match="already registered"):
            registry.register("echo", DartI18nGenerator)
        assert not registry.is_supported("other")

    def test_unknown_language(self) -> None:
        with pytest.raises(RegistryError, match="No generator registered"):
            GeneratorRegistry().resolve("cobol")

    def test_create_generator_config_types(self) -> None:
        registry = GeneratorRegistry()
        registry.register("dart", DartI18nGenerator)

        from_dict = registry.create_generator("dart", {"class_name": "A"})
        from_config = registry.create_generator("dart", GeneratorConfig(class_name="B"))

        assert from_dict.config.class_name == "A"
        assert from_config.config.class_name == "B"
        with pytest.raises(RegistryError, match="Invalid config type"):
            registry.create_generator("dart", 42)

    def test_invalid_dart_settings_wrapped(self) -> None:
        registry = GeneratorRegistry()
        registry.register("dart", DartI18nGenerator)

        with pytest.raises(RegistryError, match="Failed to create"):
            registry.create_generator("dart", {"custom": {"lookup_type": "1x"}})


class TestGlobalRegistry:
    """Built-in registrations."""

    def test_dart_and_flutter_alias(self) -> None:
        assert list_supported_languages() == ["dart"]
        assert is_language_supported("flutter")
        assert isinstance(get_generator("flutter"), DartI18nGenerator)

    def test_language_info(self) -> None:
        info = get_language_info("dart")

        assert info["name"] == "dart"
        assert info["file_extension"] == ".dart"
        assert info["class"] == "DartI18nGenerator"
        assert info["aliases"] == ["flutter"]
