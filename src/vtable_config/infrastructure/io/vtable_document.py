#!/usr/bin/env python3

"""Reading and writing vtable JSON documents.

A document is either a bare array of vtable objects or a configuration
object holding that array under the ``vtables`` key (configurable through
``VTABLE_VTABLES_KEY``). Output is always the bare, normalized array.
"""

import json
from pathlib import Path
from typing import Any

from ...domain.exceptions import MalformedInputError
from ...domain.models.keyed_container import DuplicatePolicy
from ...domain.repositories import VtableContainer
from ..config.document_config import get_config, get_duplicate_policy
from ..logging import ProgressTracker, get_logger, log_timing

logger = get_logger(__name__)


def loads_vtables(text: str, policy: DuplicatePolicy | None = None) -> VtableContainer:
    """
    Decode vtables from JSON text.

    Args:
        text: JSON document
        policy: Duplicate policy; defaults to the configured one

    Returns:
        Decoded container

    Raises:
        MalformedInputError: If the text is not valid JSON or does not hold
            a vtable array
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedInputError("VtableDocument", f"invalid JSON: {e}") from e

    return _decode_document(document, policy)


@log_timing
def load_vtables(path: str | Path, policy: DuplicatePolicy | None = None) -> VtableContainer:
    """
    Load vtables from a JSON file.

    Args:
        path: Path to the document
        policy: Duplicate policy; defaults to the configured one

    Returns:
        Decoded container

    Raises:
        MalformedInputError: If the file is not UTF-8 JSON holding a vtable document
        OSError: If the file cannot be read
    """
    path = Path(path)
    tracker = ProgressTracker(logger)

    with tracker.track_operation(f"load {path.name}"):
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise MalformedInputError("VtableDocument", f"not valid UTF-8: {e}") from e
        container = loads_vtables(text, policy)
        for vtable in container:
            tracker.count_vtable(len(vtable.items))

    tracker.report_summary()
    if get_config()["LOG_MEMORY_USAGE"]:
        tracker.log_memory_usage()
    return container


def dumps_vtables(container: VtableContainer, indent: int | None = None) -> str:
    """
    Encode vtables as JSON text.

    Args:
        container: Vtables to encode
        indent: Indentation; defaults to the configured ``JSON_INDENT``

    Returns:
        JSON array text ending with a newline
    """
    if indent is None:
        indent = get_config()["JSON_INDENT"]
    return json.dumps(container.to_json_value(), indent=indent) + "\n"


@log_timing
def dump_vtables(container: VtableContainer, path: str | Path, indent: int | None = None) -> Path:
    """
    Write vtables to a JSON file, creating parent directories.

    Returns:
        Path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_vtables(container, indent), encoding="utf-8")
    logger.info(f"Wrote {len(container)} vtables to {path}")
    return path


def _decode_document(document: Any, policy: DuplicatePolicy | None) -> VtableContainer:
    if policy is None:
        policy = get_duplicate_policy()

    if isinstance(document, dict):
        key = get_config()["VTABLES_KEY"]
        if key not in document:
            logger.debug(f"Document has no '{key}' section; no vtables")
        document = document.get(key)
    elif not isinstance(document, list):
        raise MalformedInputError(
            "VtableDocument", "expected a vtable array or an object holding one"
        )

    return VtableContainer.from_json_value(document, policy=policy)
