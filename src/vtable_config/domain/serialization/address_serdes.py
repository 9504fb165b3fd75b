#!/usr/bin/env python3

"""Conversion between ``Address`` values and their JSON representation."""

from typing import Any

from ...infrastructure.logging import get_logger
from ..models.address import Address

logger = get_logger(__name__)

HEX_PREFIXES = ("0x", "0X")


def serialize_address(address: Address) -> str | None:
    """Serialize an address as a ``0x``-prefixed hex string.

    Returns:
        Hex string, or None for an undefined address
    """
    if not address.is_defined():
        return None
    return address.to_hex_string()


def deserialize_address(value: Any) -> Address:
    """Deserialize an address from a JSON value.

    Accepts ``0x``-prefixed hex strings, decimal strings and non-negative
    integers. Anything else yields an undefined address.

    Args:
        value: JSON value (None when the field is absent)

    Returns:
        Parsed address, possibly undefined
    """
    if value is None:
        return Address.undefined()

    if isinstance(value, int) and not isinstance(value, bool):
        if value >= 0:
            return Address(value)
    elif isinstance(value, str):
        parsed = _parse_address_string(value)
        if parsed is not None:
            return Address(parsed)

    logger.debug(f"Cannot interpret {value!r} as an address; leaving it undefined")
    return Address.undefined()


def _parse_address_string(text: str) -> int | None:
    text = text.strip()
    if text.startswith(HEX_PREFIXES):
        digits, base = text[2:], 16
    else:
        digits, base = text, 10

    if not digits or not (digits.isascii() and digits.isalnum()):
        return None

    try:
        return int(digits, base)
    except ValueError:
        return None
