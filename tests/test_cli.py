"""Tests for the i18n-codegen command line."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from i18n_codegen.cli import build_parser, main


@pytest.fixture
def document_file(tmp_path: Path, sample_document: dict) -> Path:
    path = tmp_path / "strings.json"
    path.write_text(json.dumps(sample_document, ensure_ascii=False), encoding="utf-8")
    return path


class TestGenerateCommand:
    """i18n-codegen generate."""

    def test_writes_output_file(self, document_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "i18n.dart"

        exit_code = main(["generate", str(document_file), "-o", str(output)])

        assert exit_code == 0
        code = output.read_text(encoding="utf-8")
        assert code.startswith("class I18n {")
        assert code.endswith("}\n")

    def test_options_reach_the_generator(self, document_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "strings.dart"

        exit_code = main(
            [
                "generate",
                str(document_file),
                "--output",
                str(output),
                "--class-name",
                "Strings",
                "--no-docs",
                "--no-context-accessor",
                "--lookup-type",
                "AppLookup",
            ]
        )

        assert exit_code == 0
        code = output.read_text(encoding="utf-8")
        assert code.startswith("class Strings {")
        assert "  final AppLookup _lookup;" in code
        assert "<table" not in code
        assert "BuildContext" not in code

    def test_stdout_output_is_exact(
        self, document_file: Path, sample_document: dict, capsys: pytest.CaptureFixture
    ) -> None:
        from i18n_codegen.codegen import generate_from_document

        exit_code = main(["generate", str(document_file)])

        assert exit_code == 0
        expected = generate_from_document(sample_document).code
        assert capsys.readouterr().out.startswith(expected)

    def test_stdin_input(
        self,
        sample_document: dict,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        output = tmp_path / "i18n.dart"
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(sample_document)))

        assert main(["generate", "--stdin", "-o", str(output)]) == 0
        assert output.exists()

    def test_config_file(self, document_file: Path, tmp_path: Path) -> None:
        config = tmp_path / "codegen.json"
        config.write_text(json.dumps({"class_name": "Configured"}), encoding="utf-8")
        output = tmp_path / "i18n.dart"

        exit_code = main(
            ["generate", str(document_file), "--config", str(config), "-o", str(output)]
        )

        assert exit_code == 0
        assert output.read_text(encoding="utf-8").startswith("class Configured {")

    def test_missing_input(self) -> None:
        assert main(["generate"]) == 1

    def test_missing_file(self, tmp_path: Path) -> None:
        assert main(["generate", str(tmp_path / "absent.json")]) == 1

    def test_invalid_document(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"locales": {}}), encoding="utf-8")

        assert main(["generate", str(path)]) == 1

    def test_invalid_class_name(self, document_file: Path) -> None:
        assert main(["generate", str(document_file), "--class-name", "not valid"]) == 1

    def test_invalid_lookup_type(self, document_file: Path) -> None:
        assert main(["generate", str(document_file), "--lookup-type", "1Bad"]) == 1

    def test_unsupported_language(self, document_file: Path) -> None:
        assert main(["generate", str(document_file), "--language", "cobol"]) == 1

    def test_list_languages(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["generate", "--list-languages"]) == 0
        assert "dart" in capsys.readouterr().out

    def test_language_info(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["generate", "--language-info", "flutter"]) == 0
        assert "DartI18nGenerator" in capsys.readouterr().out

    def test_language_info_unknown(self) -> None:
        assert main(["generate", "--language-info", "cobol"]) == 1


class TestConfigCommand:
    """i18n-codegen config."""

    def test_writes_defaults(self, tmp_path: Path) -> None:
        output = tmp_path / "codegen.json"

        assert main(["config", "-o", str(output)]) == 0

        saved = json.loads(output.read_text(encoding="utf-8"))
        assert saved["class_name"] == "I18n"
        assert saved["lookup_type"] == "I18nLookup"


class TestParser:
    """Top-level parser."""

    def test_no_command_prints_help(self) -> None:
        assert main([]) == 1

    def test_log_level_choices(self) -> None:
        args = build_parser().parse_args(["--log-level", "DEBUG", "generate", "x.json"])

        assert args.log_level == "DEBUG"
        assert args.command == "generate"
