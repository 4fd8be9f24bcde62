"""Generate Flutter localization accessor classes from translated strings."""

from __future__ import annotations

import json
from typing import Any

from .codegen import (
    GenerationResult,
    ResourceCollection,
    generate_from_document,
    generate_i18n_class,
)

__version__ = "0.1.0"


def quick_generate(document: dict[str, Any] | str, **options: Any) -> str:
    """Generate the Dart accessor class for a resource document.

    Args:
        document: Resource document as a mapping or a JSON string.
        **options: Generator configuration overrides (``class_name``, ``custom``...).

    Returns:
        The generated source code.

    Raises:
        RuntimeError: If generation fails.
    """
    if isinstance(document, str):
        document = json.loads(document)

    result = generate_from_document(document, "dart", options or None)
    if not result.success:
        raise RuntimeError(result.error_message)
    return result.code


__all__ = [
    "GenerationResult",
    "ResourceCollection",
    "generate_from_document",
    "generate_i18n_class",
    "quick_generate",
    "__version__",
]
