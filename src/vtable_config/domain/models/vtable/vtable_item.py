#!/usr/bin/env python3

"""Virtual function table item model."""

from __future__ import annotations

from functools import total_ordering
from typing import Any

from ...serialization.address_serdes import deserialize_address, serialize_address
from ...serialization.json_helpers import (
    JSON_ADDRESS,
    JSON_TARGET_ADDRESS,
    JSON_TARGET_NAME,
    check_is_object,
    safe_get_string,
)
from ..address import Address
from ..keyed_container import AddressKeyedContainer


@total_ordering
class VtableItem:
    """A single vtable slot pointing to one virtual function.

    Items are identified, compared and ordered by their slot address alone;
    two items at the same address are equal even if their targets differ.
    """

    def __init__(self, address: Address):
        """
        Initialize a vtable item.

        Args:
            address: Address of the slot in the binary
        """
        self._address = address
        self.target_address = Address.undefined()
        self.target_function_name = ""

    @classmethod
    def from_json_value(cls, value: Any) -> VtableItem:
        """
        Read a vtable item from a JSON object.

        Args:
            value: JSON object

        Returns:
            Decoded item

        Raises:
            MalformedInputError: If ``value`` is not a JSON object
        """
        obj = check_is_object(value, "VtableItem")

        item = cls(deserialize_address(obj.get(JSON_ADDRESS)))
        item.set_target_function_address(deserialize_address(obj.get(JSON_TARGET_ADDRESS)))
        item.set_target_function_name(safe_get_string(obj, JSON_TARGET_NAME))
        return item

    def to_json_value(self) -> dict[str, Any]:
        """Encode the item, omitting undefined addresses and an empty name."""
        value: dict[str, Any] = {}

        if self.address.is_defined():
            value[JSON_ADDRESS] = serialize_address(self.address)
        if self.target_address.is_defined():
            value[JSON_TARGET_ADDRESS] = serialize_address(self.target_address)
        if self.target_function_name:
            value[JSON_TARGET_NAME] = self.target_function_name

        return value

    @property
    def address(self) -> Address:
        """Address of the slot in the binary."""
        return self._address

    def set_target_function_address(self, address: Address) -> None:
        self.target_address = address

    def set_target_function_name(self, name: str) -> None:
        self.target_function_name = name

    def get_id(self) -> Address:
        return self._address

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VtableItem):
            return NotImplemented
        return self.address == other.address

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VtableItem):
            return NotImplemented
        return self.address < other.address

    def __hash__(self) -> int:
        return hash(self.address)

    def __repr__(self) -> str:
        return (
            f"VtableItem(address={self.address}, target_address={self.target_address}, "
            f"target_function_name={self.target_function_name!r})"
        )


class VtableItemContainer(AddressKeyedContainer[VtableItem]):
    """Items of one vtable, unique by slot address."""

    element_type = VtableItem
    context = "VtableItemContainer"
