#!/usr/bin/env python3

"""Infrastructure layer for technical concerns.

``config`` and ``io`` depend on the domain layer and are imported
explicitly; only ``logging`` is loaded eagerly.
"""

from . import logging

__all__ = [
    "logging",
]
