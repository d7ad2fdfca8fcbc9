"""Utility functions for loading prop schemas from JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .core.errors import GeneratorError
from .logging_config import get_logger

logger = get_logger(__name__)


class JSONLoaderError(GeneratorError):
    """Custom exception for JSON loading errors."""

    pass


def load_json_from_file(file_path: str | Path) -> Any:
    """Load JSON data from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Parsed JSON data.

    Raises:
        JSONLoaderError: If the file is missing, unreadable or not valid JSON.
    """
    file_path = Path(file_path)
    logger.debug("Attempting to load JSON from file: %s", file_path)

    if not file_path.exists():
        raise JSONLoaderError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning("File does not have .json extension: %s", file_path)

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise JSONLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        raise JSONLoaderError(f"Error reading file {file_path}: {e}") from e

    logger.info("Loaded JSON from %s", file_path)
    return data


def extract_props(data: Any) -> list[Any]:
    """Return the property list from a bare list or an object with a ``props`` key."""
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("props"), list):
        return data["props"]
    raise JSONLoaderError("Expected a list of props or an object with a 'props' list")
