#!/usr/bin/env python3

"""Domain layer containing the vtable models and their containers."""

from . import exceptions, models, repositories, serialization

__all__ = [
    "exceptions",
    "models",
    "repositories",
    "serialization",
]
