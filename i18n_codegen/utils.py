"""Reading resource documents from files, URLs and streams.

A resource document is the serialized resource model: a JSON object with a
``default_locale`` tag and a ``locales`` object mapping locale tags to their
strings. Only the top-level shape is checked here; the converter validates
the entries.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, TextIO, Tuple, Union
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class DocumentLoadError(Exception):
    """The resource document could not be read or has the wrong shape."""

    pass


def check_document_shape(data: Any, source: str) -> Dict[str, Any]:
    """Ensure ``data`` looks like a resource document.

    Args:
        data: Decoded JSON.
        source: Where the data came from, for error messages.

    Returns:
        The same data.

    Raises:
        DocumentLoadError: If the top-level object, ``default_locale`` or
            ``locales`` is missing or has the wrong type.
    """
    if not isinstance(data, dict):
        raise DocumentLoadError(
            f"{source}: expected a JSON object, got {type(data).__name__}"
        )
    if not isinstance(data.get("default_locale"), str):
        raise DocumentLoadError(f"{source}: 'default_locale' must be a locale tag string")
    if not isinstance(data.get("locales"), dict):
        raise DocumentLoadError(f"{source}: 'locales' must map locale tags to strings")

    unknown = sorted(set(data) - {"default_locale", "locales"})
    if unknown:
        logger.warning("%s: ignoring top-level keys %s", source, ", ".join(unknown))

    logger.debug("%s: %d locale(s)", source, len(data["locales"]))
    return data


def _decode(text: str, source: str) -> Dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(f"{source}: invalid JSON ({e})") from e
    return check_document_shape(data, source)


def read_document_file(file_path: Union[str, Path]) -> Dict[str, Any]:
    """Read a resource document from disk.

    Raises:
        DocumentLoadError: If the file is missing, unreadable or malformed.
    """
    path = Path(file_path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise DocumentLoadError(f"File not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Cannot read {path}: {e}") from e

    logger.info("Read resource document %s", path)
    return _decode(text, str(path))


def fetch_document(url: str, timeout: int = 30) -> Dict[str, Any]:
    """Download a resource document.

    Raises:
        DocumentLoadError: If the URL is malformed, the request fails or the
            body is not a resource document.
    """
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise DocumentLoadError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise DocumentLoadError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        raise DocumentLoadError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        raise DocumentLoadError(f"Request to {url} failed: {e}") from e

    logger.info("Fetched resource document %s", url)
    return _decode(response.text, url)


def read_document_stream(stream: TextIO, source: str = "<stdin>") -> Dict[str, Any]:
    """Read a resource document from an open text stream."""
    return _decode(stream.read(), source)


def load_resource_document(
    file_path: Optional[Union[str, Path]] = None,
    url: Optional[str] = None,
    stream: Optional[TextIO] = None,
    timeout: int = 30,
) -> Tuple[str, Dict[str, Any]]:
    """Load a resource document from exactly one source.

    Returns:
        Tuple of (source description, document).

    Raises:
        DocumentLoadError: If no source or more than one is given, or loading
            fails.
    """
    sources = [s for s in (file_path, url, stream) if s is not None]
    if len(sources) != 1:
        raise DocumentLoadError(
            "Exactly one of file_path, url or stream must be provided"
        )

    if file_path is not None:
        return str(file_path), read_document_file(file_path)
    if url is not None:
        return url, fetch_document(url, timeout)
    return "<stdin>", read_document_stream(stream)
