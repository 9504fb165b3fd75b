#!/usr/bin/env python3

"""Tolerant accessors for JSON values decoded by the ``json`` module.

Missing keys and values of an unexpected type resolve to a default rather
than failing, so older documents lacking newer fields still decode. Only
a structurally wrong root is reported, through ``check_is_object`` and
``check_is_array``.
"""

from typing import Any, TypeVar

from ...infrastructure.logging import get_logger
from ..exceptions import MalformedInputError

logger = get_logger(__name__)

T = TypeVar("T")

# Wire field names
JSON_NAME = "name"
JSON_ADDRESS = "address"
JSON_TARGET_ADDRESS = "targetAddress"
JSON_TARGET_NAME = "targetName"
JSON_ITEMS = "items"


def check_is_object(value: Any, context: str) -> dict[str, Any]:
    """Ensure a JSON value is an object.

    Args:
        value: Decoded JSON value
        context: Name of the entity being decoded, used in the error message

    Returns:
        The value, typed as a dictionary

    Raises:
        MalformedInputError: If the value is not a JSON object
    """
    if not isinstance(value, dict):
        raise MalformedInputError(
            context, f"expected a JSON object, got {_json_type_name(value)}"
        )
    return value


def check_is_array(value: Any, context: str) -> list[Any]:
    """Ensure a JSON value is an array.

    Raises:
        MalformedInputError: If the value is not a JSON array
    """
    if not isinstance(value, list):
        raise MalformedInputError(
            context, f"expected a JSON array, got {_json_type_name(value)}"
        )
    return value


def get_optional(obj: dict[str, Any], key: str, expected_type: type[T], default: T) -> T:
    """Get a field of a given JSON type, falling back to a default.

    Args:
        obj: JSON object
        key: Field name
        expected_type: Python type the field must have (``str``, ``list``, ...)
        default: Value returned when the field is missing or mistyped

    Returns:
        Field value or default
    """
    if key not in obj:
        return default

    value = obj[key]
    # bool is an int subclass but never a valid JSON number here
    if isinstance(value, expected_type) and not (
        isinstance(value, bool) and expected_type is not bool
    ):
        return value

    logger.debug(
        f"Field '{key}' has type {_json_type_name(value)}, "
        f"expected {expected_type.__name__}; using default"
    )
    return default


def safe_get_string(obj: dict[str, Any], key: str, default: str = "") -> str:
    """Get a string field, returning ``default`` when missing or not a string."""
    return get_optional(obj, key, str, default)


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
