"""
Configuration loading.

Settings and documents are stored as JSON records. The settings file can
be given explicitly or through ``$QUOTEPRESS_SETTINGS``; without either the
built-in defaults apply.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

from .exceptions import ConfigurationError, DocumentError
from .models import Document, Settings

logger = logging.getLogger(__name__)

SETTINGS_ENV = "QUOTEPRESS_SETTINGS"


def _read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings from a JSON file.

    Args:
        path: Settings file (falls back to ``$QUOTEPRESS_SETTINGS``)

    Returns:
        Settings with defaults for missing keys

    Raises:
        ConfigurationError: If the file is missing or not valid JSON
    """
    if path is None:
        path = os.environ.get(SETTINGS_ENV) or None
    if path is None:
        logger.debug("No settings file configured, using defaults")
        return Settings()

    path = Path(path)
    if not path.exists():
        raise ConfigurationError("Settings file not found", str(path))
    try:
        data = _read_json(path)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError("Failed to read settings file", f"{path}: {e}") from e

    logger.info(f"Settings loaded from {path}")
    return Settings.from_dict(data)


def load_document(path: Union[str, Path]) -> Document:
    """
    Load a document record from a JSON file.

    Raises:
        DocumentError: If the file is missing, malformed or holds an invalid record
    """
    path = Path(path)
    if not path.exists():
        raise DocumentError("Document file not found", str(path))
    try:
        data = _read_json(path)
    except (OSError, json.JSONDecodeError) as e:
        raise DocumentError("Failed to read document file", f"{path}: {e}") from e

    return Document.from_dict(data)
