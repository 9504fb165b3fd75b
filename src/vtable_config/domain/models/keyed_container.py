#!/usr/bin/env python3

"""Generic collection of address-identified models.

Elements expose ``get_id()`` returning an :class:`Address`. The container
keys every element by that id, never holds two elements with the same id
and always iterates in ascending id order, so serialization is stable no
matter in which order elements were inserted.
"""

from __future__ import annotations

from bisect import insort
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any, ClassVar, Generic, Protocol, TypeVar

from ...infrastructure.logging import get_logger
from ..serialization.json_helpers import check_is_array
from .address import Address

logger = get_logger(__name__)


class AddressIdentified(Protocol):
    """Anything that can be stored in an address-keyed container."""

    def get_id(self) -> Address: ...

    def to_json_value(self) -> dict[str, Any]: ...


T = TypeVar("T", bound=AddressIdentified)
C = TypeVar("C", bound="AddressKeyedContainer[Any]")


class DuplicatePolicy(Enum):
    """What ``insert`` does when an element with the same id already exists."""

    REJECT = "reject"  # keep the existing element
    REPLACE = "replace"  # overwrite it with the new one


class AddressKeyedContainer(Generic[T]):
    """Ordered, unique-by-id collection of address-identified elements.

    Subclasses set ``element_type`` to a class providing a
    ``from_json_value`` classmethod so the container can decode itself.
    """

    element_type: ClassVar[Any] = None
    context: ClassVar[str] = "AddressKeyedContainer"

    def __init__(
        self,
        elements: Iterable[T] = (),
        policy: DuplicatePolicy = DuplicatePolicy.REJECT,
    ):
        """Initialize the container.

        Args:
            elements: Initial elements, inserted under ``policy``
            policy: Collision policy used by ``insert``
        """
        self.policy = policy
        self._data: dict[Address, T] = {}
        self._ids: list[Address] = []  # kept sorted

        for element in elements:
            self.insert(element)

    @classmethod
    def from_json_value(
        cls: type[C], value: Any, policy: DuplicatePolicy = DuplicatePolicy.REJECT
    ) -> C:
        """Decode a container from a JSON array.

        Args:
            value: JSON array of element objects, or None for an empty container
            policy: Collision policy applied while inserting decoded elements

        Returns:
            Decoded container

        Raises:
            MalformedInputError: If ``value`` is not an array, or any of its
                elements fails to decode
        """
        container = cls(policy=policy)
        if value is None:
            return container

        entries = check_is_array(value, cls.context)
        collisions = 0
        for entry in entries:
            element = cls.element_type.from_json_value(entry)
            if element.get_id() in container._data:
                collisions += 1
            container.insert(element)

        if collisions:
            action = "replaced" if policy is DuplicatePolicy.REPLACE else "ignored"
            logger.warning(f"{cls.context}: {collisions} duplicate entries {action}")

        logger.debug(f"Decoded {cls.context} with {len(container)} of {len(entries)} entries")
        return container

    def to_json_value(self) -> list[dict[str, Any]]:
        """Encode all elements, in ascending id order, as a JSON array."""
        return [element.to_json_value() for element in self]

    def insert(self, element: T) -> bool:
        """Insert an element, applying the container's collision policy.

        Returns:
            True if the container changed
        """
        element_id = element.get_id()
        if element_id in self._data:
            if self.policy is DuplicatePolicy.REPLACE:
                self._data[element_id] = element
                logger.debug(f"{self.context}: replaced element at {element_id}")
                return True
            logger.debug(f"{self.context}: element at {element_id} already present")
            return False

        insort(self._ids, element_id)
        self._data[element_id] = element
        return True

    def replace(self, element: T) -> bool:
        """Store an element, overwriting any element with the same id.

        Returns:
            True if an existing element was overwritten
        """
        element_id = element.get_id()
        existed = element_id in self._data
        if not existed:
            insort(self._ids, element_id)
        self._data[element_id] = element
        return existed

    def find(self, element_id: Address) -> T | None:
        """Get the element with the given id, or None."""
        return self._data.get(element_id)

    def erase(self, element_id: Address) -> bool:
        """Remove the element with the given id.

        Returns:
            True if an element was removed
        """
        if element_id not in self._data:
            return False
        del self._data[element_id]
        self._ids.remove(element_id)
        return True

    def clear(self) -> None:
        self._data.clear()
        self._ids.clear()

    def empty(self) -> bool:
        return not self._data

    def size(self) -> int:
        return len(self._data)

    def ids(self) -> list[Address]:
        """All element ids in ascending order."""
        return list(self._ids)

    def front(self) -> T | None:
        """Element with the lowest id, or None if empty."""
        return self._data[self._ids[0]] if self._ids else None

    def back(self) -> T | None:
        """Element with the highest id, or None if empty."""
        return self._data[self._ids[-1]] if self._ids else None

    def __iter__(self) -> Iterator[T]:
        return (self._data[element_id] for element_id in list(self._ids))

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressKeyedContainer):
            return NotImplemented
        return type(self) is type(other) and self._ids == other._ids

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} elements, policy={self.policy.value})"
