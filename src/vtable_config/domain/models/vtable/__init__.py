#!/usr/bin/env python3

"""Virtual function table models."""

from .vtable import Vtable
from .vtable_item import VtableItem, VtableItemContainer

__all__ = [
    "Vtable",
    "VtableItem",
    "VtableItemContainer",
]
