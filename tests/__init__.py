"""Test suite for vtable-config.

Test Structure:
- domain/: Address, vtable models, keyed containers and JSON helpers
- infrastructure/: configuration, logging and document I/O
- test_main.py: command line behaviour

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
"""
