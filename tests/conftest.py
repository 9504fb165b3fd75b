"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from vtable_config.infrastructure.logging import LoggerSetup


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Let every test initialize logging from scratch."""
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()


@pytest.fixture
def end_to_end_vtable() -> dict[str, Any]:
    """Dense vtable object whose items are already in address order."""
    return {
        "name": "A::vtable",
        "address": "0x1000",
        "items": [
            {"address": "0x1000", "targetAddress": "0x2000", "targetName": "A::f"},
            {"address": "0x1008", "targetAddress": "0x2010"},
        ],
    }


@pytest.fixture
def vtable_array(end_to_end_vtable: dict[str, Any]) -> list[dict[str, Any]]:
    """Two vtables given out of address order."""
    return [
        {
            "name": "B::vtable",
            "address": "0x3000",
            "items": [
                {"address": "0x3008", "targetAddress": "0x4010", "targetName": "B::g"},
                {"address": "0x3000", "targetAddress": "0x4000", "targetName": "B::f"},
            ],
        },
        end_to_end_vtable,
    ]
