"""Loads the static JSON fixtures each store is seeded from."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from hr_console.services.store import RecordT

logger = logging.getLogger(__name__)


class SeedDataError(Exception):
    pass


def load_seed(directory: str | Path, filename: str, record_type: type[RecordT]) -> list[RecordT]:
    path = Path(directory) / filename
    if not path.is_file():
        logger.warning("Seed file %s missing — starting with an empty store", path)
        return []

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SeedDataError(f"Failed to read seed file {path}: {e}") from e

    if not isinstance(raw, list):
        raise SeedDataError(f"Seed file {path} must contain a JSON array")

    try:
        return [record_type.model_validate(item) for item in raw]
    except ValidationError as e:
        raise SeedDataError(f"Invalid record in seed file {path}: {e}") from e
