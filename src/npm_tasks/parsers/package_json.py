"""Parse package.json into the scripts and workspaces used for task discovery."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from ..logging import get_logger
from ..models import ManifestDescriptor

logger = get_logger(__name__)

# Only the keys task discovery reads are constrained; everything else passes.
MANIFEST_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "scripts": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
        "workspaces": {
            "oneOf": [
                {"type": "array", "items": {"type": "string"}},
                {
                    "type": "object",
                    "properties": {
                        "packages": {"type": "array", "items": {"type": "string"}},
                    },
                },
            ]
        },
    },
}

_validator = Draft202012Validator(MANIFEST_SCHEMA)


class ManifestError(ValueError):
    """Raised when a manifest is not valid JSON or has malformed scripts/workspaces."""


def _format_errors(errors: list) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"{pointer or '<root>'}: {error.message}")
    return "; ".join(messages)


def parse(path: Path) -> ManifestDescriptor:
    """Return the manifest descriptor for ``path``.

    Raises:
        OSError: If the file cannot be read.
        ManifestError: If the content is not JSON or fails the manifest schema.
    """
    import json

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ManifestError(f"{path}: not UTF-8 ({exc.reason})") from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(f"{path}: invalid JSON ({exc.msg})") from exc

    errors = sorted(_validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise ManifestError(f"{path}: {_format_errors(errors)}")

    return ManifestDescriptor.from_mapping(path, data)


def load(path: Path) -> ManifestDescriptor | None:
    """Like :func:`parse` but returns None for a missing or unusable manifest."""
    if not path.is_file():
        return None
    try:
        return parse(path)
    except (OSError, ManifestError) as exc:
        logger.debug("Skipping manifest %s: %s", path, exc)
        return None
