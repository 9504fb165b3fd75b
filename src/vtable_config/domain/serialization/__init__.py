#!/usr/bin/env python3

"""JSON serialization helpers shared by the vtable models."""

from .address_serdes import deserialize_address, serialize_address
from .json_helpers import (
    JSON_ADDRESS,
    JSON_ITEMS,
    JSON_NAME,
    JSON_TARGET_ADDRESS,
    JSON_TARGET_NAME,
    check_is_array,
    check_is_object,
    get_optional,
    safe_get_string,
)

__all__ = [
    "JSON_ADDRESS",
    "JSON_ITEMS",
    "JSON_NAME",
    "JSON_TARGET_ADDRESS",
    "JSON_TARGET_NAME",
    "check_is_array",
    "check_is_object",
    "deserialize_address",
    "get_optional",
    "safe_get_string",
    "serialize_address",
]
