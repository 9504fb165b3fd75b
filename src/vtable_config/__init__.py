"""vtable-config - address-keyed C++ vtable layouts with JSON round-tripping."""

from .domain.exceptions import MalformedInputError, VtableConfigError
from .domain.models import (
    Address,
    AddressKeyedContainer,
    DuplicatePolicy,
    Vtable,
    VtableItem,
    VtableItemContainer,
)
from .domain.repositories import VtableContainer
from .main import main

__all__ = [
    "Address",
    "AddressKeyedContainer",
    "DuplicatePolicy",
    "MalformedInputError",
    "Vtable",
    "VtableConfigError",
    "VtableContainer",
    "VtableItem",
    "VtableItemContainer",
    "main",
]
