"""
Language-specific code generators.

This module contains generators for the supported host languages.
"""

from .dart import DartI18nGenerator, create_dart_generator, create_plain_generator

__all__ = [
    "DartI18nGenerator",
    "create_dart_generator",
    "create_plain_generator",
]
