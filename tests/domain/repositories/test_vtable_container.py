"""Tests for the top-level vtable container."""

import copy

import pytest

from vtable_config.domain.exceptions import MalformedInputError
from vtable_config.domain.models import Address, DuplicatePolicy, Vtable, VtableItem
from vtable_config.domain.repositories import VtableContainer


def make_vtable(address: int, name: str = "") -> Vtable:
    vtable = Vtable(Address(address))
    vtable.set_name(name)
    return vtable


@pytest.mark.unit
class TestVtableContainer:
    """Keyed lookup and insertion policy."""

    def test_keyed_by_vtable_address(self):
        container = VtableContainer([make_vtable(0x3000, "B"), make_vtable(0x1000, "A")])
        assert container.ids() == [Address(0x1000), Address(0x3000)]
        assert container.find(Address(0x3000)).name == "B"
        assert Address(0x1000) in container

    def test_insert_if_absent(self):
        container = VtableContainer([make_vtable(0x1000, "A")])
        assert container.insert(make_vtable(0x1000, "Other")) is False
        assert len(container) == 1
        assert container.find(Address(0x1000)).name == "A"

    def test_replace(self):
        container = VtableContainer([make_vtable(0x1000, "A")])
        assert container.replace(make_vtable(0x1000, "Other")) is True
        assert len(container) == 1
        assert container.find(Address(0x1000)).name == "Other"

    def test_get_by_name(self):
        container = VtableContainer([make_vtable(0x1000, "A"), make_vtable(0x2000, "B")])
        assert container.get_by_name("B").address == Address(0x2000)
        assert container.get_by_name("C") is None

    def test_find_containing_item(self):
        vtable = make_vtable(0x1000, "A")
        vtable.items.insert(VtableItem(Address(0x1008)))
        container = VtableContainer([vtable, make_vtable(0x2000, "B")])

        assert container.find_containing_item(Address(0x1008)) is vtable
        assert container.find_containing_item(Address(0x2008)) is None

    def test_item_count(self):
        vtable = make_vtable(0x1000)
        vtable.items.insert(VtableItem(Address(0x1000)))
        vtable.items.insert(VtableItem(Address(0x1008)))
        container = VtableContainer([vtable, make_vtable(0x2000)])
        assert container.item_count() == 2


@pytest.mark.unit
class TestVtableContainerJson:
    """Bulk round-trip of vtable arrays."""

    def test_decode_sorts_vtables_and_items(self, vtable_array):
        container = VtableContainer.from_json_value(vtable_array)
        encoded = container.to_json_value()

        assert [vtable["address"] for vtable in encoded] == ["0x1000", "0x3000"]
        assert [item["address"] for item in encoded[1]["items"]] == ["0x3000", "0x3008"]

    def test_dense_round_trip(self, end_to_end_vtable):
        document = [copy.deepcopy(end_to_end_vtable)]
        assert VtableContainer.from_json_value(document).to_json_value() == [end_to_end_vtable]

    def test_round_trip_is_stable(self, vtable_array):
        once = VtableContainer.from_json_value(vtable_array).to_json_value()
        twice = VtableContainer.from_json_value(once).to_json_value()
        assert once == twice

    def test_duplicate_vtables_rejected_by_default(self):
        container = VtableContainer.from_json_value(
            [{"address": "0x1000", "name": "A"}, {"address": "0x1000", "name": "B"}]
        )
        assert len(container) == 1
        assert container.front().name == "A"

    def test_duplicate_vtables_replaced_on_request(self):
        container = VtableContainer.from_json_value(
            [{"address": "0x1000", "name": "A"}, {"address": "0x1000", "name": "B"}],
            policy=DuplicatePolicy.REPLACE,
        )
        assert len(container) == 1
        assert container.front().name == "B"

    def test_non_object_vtable_fails(self):
        with pytest.raises(MalformedInputError):
            VtableContainer.from_json_value(["not an object"])

    def test_non_array_fails(self):
        with pytest.raises(MalformedInputError):
            VtableContainer.from_json_value({"address": "0x1000"})
