#!/usr/bin/env python3

"""Binary address value type."""

from __future__ import annotations

from functools import total_ordering


@total_ordering
class Address:
    """A location in the binary's address space, possibly undefined.

    Addresses are immutable values. Two addresses are equal iff their
    underlying values are equal, so all undefined addresses compare equal.
    Undefined addresses sort after every defined one.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int | None = None):
        if value is not None:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Address value must be an int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"Address value must be non-negative, got {value}")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Address is immutable")

    def __reduce__(self) -> tuple[type[Address], tuple[int | None]]:
        return (Address, (self._value,))

    @classmethod
    def undefined(cls) -> Address:
        """Return an undefined address."""
        return cls()

    @property
    def value(self) -> int | None:
        """Underlying integer value, or None when undefined."""
        return self._value

    def is_defined(self) -> bool:
        return self._value is not None

    def to_hex_string(self) -> str:
        """Format as a ``0x``-prefixed lowercase hex string.

        Raises:
            ValueError: If the address is undefined
        """
        if self._value is None:
            raise ValueError("Cannot format an undefined address")
        return f"0x{self._value:x}"

    def _sort_key(self) -> tuple[int, int]:
        if self._value is None:
            return (1, 0)
        return (0, self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        if self._value is None:
            raise ValueError("Undefined address has no integer value")
        return self._value

    def __add__(self, offset: int) -> Address:
        if not isinstance(offset, int):
            return NotImplemented
        if self._value is None:
            return self
        return Address(self._value + offset)

    def __sub__(self, offset: int) -> Address:
        if not isinstance(offset, int):
            return NotImplemented
        if self._value is None:
            return self
        return Address(self._value - offset)

    def __str__(self) -> str:
        return self.to_hex_string() if self.is_defined() else "undefined"

    def __repr__(self) -> str:
        return f"Address({self})"
