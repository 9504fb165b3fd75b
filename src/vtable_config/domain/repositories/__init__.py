#!/usr/bin/env python3

"""Top-level collections of domain models."""

from .vtable_container import VtableContainer

__all__ = [
    "VtableContainer",
]
