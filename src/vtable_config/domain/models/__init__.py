#!/usr/bin/env python3

"""Domain models for vtable configuration."""

from .address import Address
from .keyed_container import AddressIdentified, AddressKeyedContainer, DuplicatePolicy
from .vtable import Vtable, VtableItem, VtableItemContainer

__all__ = [
    "Address",
    "AddressIdentified",
    "AddressKeyedContainer",
    "DuplicatePolicy",
    "Vtable",
    "VtableItem",
    "VtableItemContainer",
]
