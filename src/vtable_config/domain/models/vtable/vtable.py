#!/usr/bin/env python3

"""Virtual function table model."""

from __future__ import annotations

from functools import total_ordering
from typing import Any

from ...serialization.address_serdes import deserialize_address, serialize_address
from ...serialization.json_helpers import (
    JSON_ADDRESS,
    JSON_ITEMS,
    JSON_NAME,
    check_is_object,
    get_optional,
    safe_get_string,
)
from ..address import Address
from .vtable_item import VtableItemContainer


@total_ordering
class Vtable:
    """A virtual function table as laid out in the binary.

    Example JSON:
        {"name": "A::vtable", "address": "0x1000",
         "items": [{"address": "0x1000", "targetAddress": "0x2000"}]}
    """

    def __init__(self, address: Address):
        self._address = address
        self.name = ""
        self.items = VtableItemContainer()

    @classmethod
    def from_json_value(cls, value: Any) -> Vtable:
        """
        Read a vtable from a JSON object.

        Missing fields resolve to their defaults. A present ``items`` array
        is decoded strictly: any malformed item fails the whole vtable.

        Args:
            value: JSON object

        Returns:
            Decoded vtable

        Raises:
            MalformedInputError: If ``value`` or one of its items is not a
                JSON object
        """
        obj = check_is_object(value, "Vtable")

        vtable = cls(deserialize_address(obj.get(JSON_ADDRESS)))
        vtable.set_name(safe_get_string(obj, JSON_NAME))
        vtable.items = VtableItemContainer.from_json_value(
            get_optional(obj, JSON_ITEMS, list, [])
        )
        return vtable

    def to_json_value(self) -> dict[str, Any]:
        """Encode the vtable, omitting an empty name, undefined address and no items."""
        value: dict[str, Any] = {}

        if self.name:
            value[JSON_NAME] = self.name
        if self.address.is_defined():
            value[JSON_ADDRESS] = serialize_address(self.address)
        if not self.items.empty():
            value[JSON_ITEMS] = self.items.to_json_value()

        return value

    @property
    def address(self) -> Address:
        """Address of the vtable in the binary."""
        return self._address

    def set_name(self, name: str) -> None:
        self.name = name

    def get_id(self) -> Address:
        return self._address

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vtable):
            return NotImplemented
        return self.address == other.address

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Vtable):
            return NotImplemented
        return self.address < other.address

    def __hash__(self) -> int:
        return hash(self.address)

    def __repr__(self) -> str:
        return f"Vtable(address={self.address}, name={self.name!r}, items={len(self.items)})"
