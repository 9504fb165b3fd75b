#!/usr/bin/env python3

"""Vtable document file I/O."""

from .vtable_document import dump_vtables, dumps_vtables, load_vtables, loads_vtables

__all__ = [
    "dump_vtables",
    "dumps_vtables",
    "load_vtables",
    "loads_vtables",
]
