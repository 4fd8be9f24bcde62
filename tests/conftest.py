"""Pytest configuration for the i18n-codegen test suite.

Hypothesis profiles:
- dev: local development with 200 examples
- ci: CI runs with 50 derandomized examples

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile
"""

import os

import pytest
from hypothesis import HealthCheck, Phase, settings

from i18n_codegen.codegen.core.resources import (
    Locale,
    LocaleTable,
    ResourceCollection,
    StringResource,
)

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    suppress_health_check=[HealthCheck.too_slow],
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
    suppress_health_check=[HealthCheck.too_slow],
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile for this run."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


@pytest.fixture
def sample_resources() -> ResourceCollection:
    """English default plus a partial Austrian German table.

    ``hello`` is plain, ``greet`` takes a ``name`` placeholder and has no
    German translation.
    """
    en = Locale("en")
    de_at = Locale("de", "AT")
    return ResourceCollection(
        default_locale=en,
        locales=(
            LocaleTable(
                en,
                (
                    StringResource("hello", "hello", "Hello"),
                    StringResource("greet", "greet", "Hi {name}", ("name",)),
                ),
            ),
            LocaleTable(de_at, (StringResource("hello", "hello", "Servus"),)),
        ),
    )


@pytest.fixture
def sample_document() -> dict:
    """Serialized form of a small three-locale collection."""
    return {
        "default_locale": "en",
        "locales": {
            "en": {
                "hello": "Hello",
                "greet": {"value": "Hi {name}", "placeholders": ["name"]},
                "items count": {
                    "value": "{count} items in {place}",
                    "placeholders": ["count", "place"],
                },
            },
            "de_AT": {"hello": "Servus", "greet": "Griaß di {name}"},
            "zh-Hans-CN": {"hello": "你好"},
        },
    }
