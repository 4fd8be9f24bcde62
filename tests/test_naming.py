"""Tests for accessor name derivation and Dart string escaping."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from i18n_codegen.codegen.core.naming import NameSanitizer, NamingCase
from i18n_codegen.codegen.languages.dart.config import is_dart_identifier
from i18n_codegen.codegen.languages.dart.naming import (
    DART_RESERVED_WORDS,
    GENERATED_CLASS_MEMBERS,
    create_dart_sanitizer,
    escape_string_literal,
    quote_string_literal,
)


class TestNameSanitizer:
    """Case conversion and conflict handling."""

    @pytest.mark.parametrize(
        ("name", "case", "expected"),
        [
            ("user name", NamingCase.CAMEL_CASE, "userName"),
            ("userName", NamingCase.SNAKE_CASE, "user_name"),
            ("user-name", NamingCase.PASCAL_CASE, "UserName"),
            ("userName", NamingCase.SCREAMING_SNAKE, "USER_NAME"),
            ("__weird..key__", NamingCase.CAMEL_CASE, "weirdKey"),
        ],
    )
    def test_case_conversion(self, name: str, case: NamingCase, expected: str) -> None:
        assert NameSanitizer().sanitize_name(name, case) == expected

    def test_empty_result_falls_back(self) -> None:
        assert NameSanitizer().sanitize_name("...") == "key"

    def test_same_input_same_output(self) -> None:
        sanitizer = NameSanitizer()

        assert sanitizer.sanitize_name("a b") == sanitizer.sanitize_name("a b")

    def test_reset_used_names(self) -> None:
        sanitizer = NameSanitizer()
        sanitizer.sanitize_name("a b")
        sanitizer.reset_used_names()

        assert sanitizer.sanitize_name("a_b") == "aB"

    def test_add_used_name(self) -> None:
        sanitizer = NameSanitizer()
        sanitizer.add_used_name("title")

        assert sanitizer.sanitize_name("title") == "title1"

    def test_dart_sanitizer_reserves_class_name(self) -> None:
        sanitizer = create_dart_sanitizer("Strings")

        assert sanitizer.sanitize_name("strings", NamingCase.PASCAL_CASE) == "Strings_"
        assert create_dart_sanitizer().sanitize_name("strings", NamingCase.PASCAL_CASE) == "Strings"

    @given(st.lists(st.text(max_size=12), unique=True, max_size=20))
    def test_dart_names_are_unique_valid_identifiers(self, keys: list) -> None:
        sanitizer = create_dart_sanitizer()

        names = [sanitizer.sanitize_name(key) for key in keys]

        assert len(set(names)) == len(names)
        for name in names:
            assert is_dart_identifier(name)
            assert name not in DART_RESERVED_WORDS
            assert name not in GENERATED_CLASS_MEMBERS


class TestStringEscaping:
    """Double-quoted Dart string literals."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("plain", "plain"),
            ('say "hi"', 'say \\"hi\\"'),
            ("cost $5", "cost \\$5"),
            ("back\\slash", "back\\\\slash"),
            ("a\nb\r\tc", "a\\nb\\r\\tc"),
            ("{name}", "{name}"),
        ],
    )
    def test_escape(self, value: str, expected: str) -> None:
        assert escape_string_literal(value) == expected

    def test_quote(self) -> None:
        assert quote_string_literal('"') == '"\\""'

    @given(st.text())
    def test_escaped_text_has_no_raw_delimiters(self, value: str) -> None:
        escaped = escape_string_literal(value)

        assert "\n" not in escaped
        # Every quote and dollar is preceded by an escaping backslash
        unescaped = escaped.replace("\\\\", "")
        for char in '"$':
            assert unescaped.count(char) == unescaped.count("\\" + char)
