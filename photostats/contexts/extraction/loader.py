"""
Dataset loading from JSON files.

Reads a photo feed document wholesale. No schema validation is applied
beyond requiring a top-level JSON object; missing fields surface later as
MissingFieldError from the extractors.
"""

import json
from pathlib import Path
from typing import Any, Dict

from photostats.contexts.extraction.exceptions import DatasetLoadError
from photostats.contexts.extraction.logger import _log_debug, _log_error


def load_dataset(path: Path) -> Dict[str, Any]:
    """
    Load a photo feed dataset from a JSON file.

    Args:
        path: Path to a UTF-8 JSON document

    Returns:
        Decoded JSON object

    Raises:
        FileNotFoundError: If path does not exist
        DatasetLoadError: If the file is not valid JSON or not a JSON object
    """
    path = Path(path)
    _log_debug(f"Loading dataset: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            _log_error(f"Invalid JSON in {path.name}: {e}")
            raise DatasetLoadError("Dataset is not valid JSON", path=path, original_error=e) from e

    if not isinstance(data, dict):
        raise DatasetLoadError(
            f"Dataset must be a JSON object, got {type(data).__name__}", path=path
        )

    _log_debug(f"Loaded {path.name} ({len(data.get('items', []))} items)")
    return data
