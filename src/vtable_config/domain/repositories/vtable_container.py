#!/usr/bin/env python3

"""Container of all vtables found in a binary."""

from ..models.address import Address
from ..models.keyed_container import AddressKeyedContainer
from ..models.vtable import Vtable


class VtableContainer(AddressKeyedContainer[Vtable]):
    """Vtables keyed by their start address.

    At most one vtable is kept per address; by default a second vtable at
    an already known address is ignored.
    """

    element_type = Vtable
    context = "VtableContainer"

    def get_by_name(self, name: str) -> Vtable | None:
        """Get the first vtable, in address order, with the given name."""
        for vtable in self:
            if vtable.name == name:
                return vtable
        return None

    def find_containing_item(self, slot_address: Address) -> Vtable | None:
        """Get the vtable owning the slot at ``slot_address``, if any."""
        for vtable in self:
            if slot_address in vtable.items:
                return vtable
        return None

    def item_count(self) -> int:
        """Total number of items across all vtables."""
        return sum(len(vtable.items) for vtable in self)
