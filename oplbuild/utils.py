"""Utility functions for file I/O and common operations."""

import json
import logging
import math
import os
import tempfile
from datetime import date
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .exceptions import WriteError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('oplbuild.utils')


def title_case(text: str) -> str:
    """
    Lowercase a name, then capitalize the first letter of each space-separated token.

    Example:
        title_case('JOÃO DA SILVA')  # 'João Da Silva'
    """
    return ' '.join(word[:1].upper() + word[1:] for word in text.lower().split(' '))


def parse_positive_float(value: str | None) -> float | None:
    """
    Parse a numeric field, treating anything unusable as absent.

    Empty, non-numeric, non-finite, zero and negative values all return None,
    so a bombed-out lift is never confused with a real value of 0. Decimal
    commas ('142,5'), unit suffixes and underscore separators are not numbers.
    """
    if value is None:
        return None
    value = value.strip()
    if not value or '_' in value:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def load_json(
    path: Path | str,
    schema: type[T] | None = None,
) -> Any | T:
    """
    Load JSON file with optional schema validation.

    Args:
        path: Path to JSON file (str or Path object)
        schema: Optional Pydantic model to validate against

    Returns:
        Parsed JSON (validated if schema provided)

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        ValueError: If schema validation fails

    Example:
        from oplbuild.schemas import BuildConfig
        config = load_json('build_config.json', schema=BuildConfig)
    """
    path = Path(path)

    logger.debug(f'Loading JSON from: {path}')

    if not path.exists():
        logger.error(f'File not found: {path}')
        raise FileNotFoundError(f'File not found: {path}')

    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        logger.debug(f'Successfully loaded JSON from: {path}')
    except json.JSONDecodeError as e:
        logger.error(f'Invalid JSON in {path}: {e.msg} at position {e.pos}')
        raise json.JSONDecodeError(f'Invalid JSON in {path}: {e.msg}', e.doc, e.pos) from e

    if schema:
        try:
            validated = schema(**data) if isinstance(data, dict) else schema(data)  # type: ignore[call-arg]
            logger.debug(f'Schema validation passed for: {path}')
            return validated
        except ValidationError as e:
            logger.error(f'Schema validation failed for {path}: {e}')
            raise ValueError(f'Schema validation failed for {path}:\n{e}') from e

    return data


def to_json_data(data: Any) -> Any:
    """Convert Pydantic models (or lists of them) into plain JSON data."""
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True)
    if isinstance(data, list):
        return [to_json_data(item) for item in data]
    return data


def save_json(
    path: Path | str,
    data: Any,
    indent: int = 2,
    create_dirs: bool = True,
) -> None:
    """
    Save data as a JSON file, replacing any previous file atomically.

    The document is written to a temporary file next to the destination and
    renamed over it, so readers see either the old file or the new one.

    Args:
        path: Path to write to (str or Path object)
        data: Data to serialize (JSON-serializable, Pydantic model, or list of models)
        indent: Indentation level (default: 2 spaces)
        create_dirs: Create parent directories if they don't exist (default: True)

    Raises:
        WriteError: If the directory, the temporary file or the rename fails,
            or the data is not JSON-serializable
    """
    path = Path(path)

    logger.debug(f'Saving JSON to: {path}')

    if create_dirs:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f'Failed to create directory {path.parent}: {e}')
            raise WriteError(f'Cannot create output directory {path.parent}: {e}') from e

    json_data = to_json_data(data)

    try:
        text = json.dumps(json_data, indent=indent or None, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.error(f'Data is not JSON-serializable: {e}')
        raise WriteError(f'Data is not JSON-serializable: {e}') from e

    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f'.{path.name}.', suffix='.tmp', dir=path.parent)
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(text)
        os.replace(tmp_name, path)
        logger.debug(f'Successfully saved JSON to: {path}')
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        logger.error(f'Failed to write file {path}: {e}')
        raise WriteError(f'Cannot write output file {path}: {e}') from e


def parse_meet_date(value: str) -> date | None:
    """Parse the ISO date at the start of a meet date string, or None."""
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None
