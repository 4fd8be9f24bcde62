"""Tests for configuration loading, merging and validation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from i18n_codegen.codegen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)
from i18n_codegen.codegen.languages.dart.config import DEFAULT_MISSING_MARKER, DartConfig


@pytest.fixture
def manager() -> ConfigManager:
    return ConfigManager()


class TestConfigManager:
    """Defaults, overrides and config files."""

    def test_dart_defaults(self, manager: ConfigManager) -> None:
        config = manager.get_config("dart")

        assert config.class_name == "I18n"
        assert config.key_case == "camel"
        assert config.add_comments is True
        assert config.custom["lookup_type"] == "I18nLookup"
        assert config.custom["delegate_type"] == "I18nDelegate"
        assert config.custom["missing_marker"] == DEFAULT_MISSING_MARKER

    def test_custom_section_merges_key_by_key(self, manager: ConfigManager) -> None:
        config = manager.get_config("dart", {"custom": {"lookup_type": "AppLookup"}})

        assert config.custom["lookup_type"] == "AppLookup"
        assert config.custom["delegate_type"] == "I18nDelegate"

    def test_overrides_do_not_leak_into_defaults(self, manager: ConfigManager) -> None:
        manager.get_config("dart", {"custom": {"lookup_type": "AppLookup"}})

        assert manager.get_config("dart").custom["lookup_type"] == "I18nLookup"

    def test_unknown_top_level_keys_go_to_custom(self, manager: ConfigManager) -> None:
        config = manager.get_config("dart", {"delegate_type": "AppDelegate"})

        assert config.custom["delegate_type"] == "AppDelegate"

    def test_config_file_then_overrides(self, manager: ConfigManager, tmp_path: Path) -> None:
        path = tmp_path / "codegen.json"
        path.write_text(
            json.dumps({"class_name": "FromFile", "add_comments": False}), encoding="utf-8"
        )

        config = manager.get_config("dart", {"class_name": "FromArgs"}, path)

        assert config.class_name == "FromArgs"
        assert config.add_comments is False

    def test_missing_file(self, manager: ConfigManager, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            manager.get_config("dart", config_file=tmp_path / "absent.json")

    def test_non_json_extension(self, manager: ConfigManager, tmp_path: Path) -> None:
        path = tmp_path / "codegen.yaml"
        path.write_text("class_name: X", encoding="utf-8")

        with pytest.raises(ConfigError, match="must be JSON"):
            manager.get_config("dart", config_file=path)

    def test_invalid_json(self, manager: ConfigManager, tmp_path: Path) -> None:
        path = tmp_path / "codegen.json"
        path.write_text("{nope", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            manager.get_config("dart", config_file=path)

    def test_non_object_json(self, manager: ConfigManager, tmp_path: Path) -> None:
        path = tmp_path / "codegen.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ConfigError, match="JSON object"):
            manager.get_config("dart", config_file=path)

    def test_save_and_reload(self, manager: ConfigManager, tmp_path: Path) -> None:
        path = tmp_path / "saved.json"
        original = manager.get_config("dart", {"class_name": "Saved"})

        manager.save_config(original, path)
        reloaded = manager.get_config("dart", config_file=path)

        assert reloaded.class_name == "Saved"
        assert reloaded.custom == original.custom

    def test_validate_config(self, manager: ConfigManager) -> None:
        problems = manager.validate_config(
            GeneratorConfig(class_name="not valid", key_case="kebab", line_ending="\r")
        )

        assert len(problems) == 3
        assert manager.validate_config(GeneratorConfig()) == []

    def test_list_languages(self, manager: ConfigManager) -> None:
        assert manager.list_languages() == ["dart"]

    def test_load_config_shortcut(self) -> None:
        assert load_config("dart", {"class_name": "X"}).class_name == "X"


class TestDartConfig:
    """Dart settings read from the custom section."""

    def test_defaults(self) -> None:
        config = DartConfig.from_custom({})

        assert config.lookup_type == "I18nLookup"
        assert config.custom_lookup_type == "I18nLookup"
        assert config.context_accessor is True

    def test_unknown_keys_ignored(self) -> None:
        assert DartConfig.from_custom({"something": 1}) == DartConfig()

    @pytest.mark.parametrize(
        "custom",
        [
            {"lookup_type": "Not Valid"},
            {"delegate_type": ""},
            {"custom_lookup_type": 3},
            {"context_accessor": "yes"},
        ],
    )
    def test_invalid_settings(self, custom: dict) -> None:
        with pytest.raises(ConfigError):
            DartConfig.from_custom(custom)
