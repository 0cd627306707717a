"""Tests for lookup entry entities."""

import pytest

from lookup_factory.domain.lookup.entities import Category, EntryId, LookupEntry, Role, Tag
from lookup_factory.exceptions import EmptyValueError


class TestEntryId:
    """Test suite for EntryId."""

    def test_generate_is_placeholder(self) -> None:
        entry_id = EntryId.generate()
        assert entry_id.value == 0
        assert not entry_id.is_assigned

    def test_assigned(self) -> None:
        assert EntryId(7).is_assigned
        assert int(EntryId(7)) == 7

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            EntryId(-1)

    def test_is_frozen(self) -> None:
        entry_id = EntryId(1)
        with pytest.raises(AttributeError):
            entry_id.value = 2  # type: ignore[misc]


class TestLookupEntry:
    """Test suite for LookupEntry and its kinds."""

    def test_create_trims_value(self) -> None:
        category = Category.create("  Books  ")
        assert category.value == "Books"
        assert not category.id.is_assigned

    def test_create_returns_concrete_kind(self) -> None:
        assert isinstance(Category.create("Books"), Category)
        assert isinstance(Role.create("Admin"), Role)
        assert isinstance(Tag.create("urgent"), Tag)

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_empty_value_rejected(self, value: str) -> None:
        with pytest.raises(EmptyValueError):
            Category.create(value)

    def test_create_with_id(self) -> None:
        role = Role.create_with_id(id=EntryId(3), value="Editor")
        assert role.id == EntryId(3)
        assert role.value == "Editor"

    def test_kind_name(self) -> None:
        assert Category.kind_name() == "Category"
        assert Tag.kind_name() == "Tag"

    def test_to_dict(self) -> None:
        tag = Tag.create_with_id(id=EntryId(5), value="urgent")
        assert tag.to_dict() == {"id": 5, "value": "urgent"}

    def test_equality_by_identity(self) -> None:
        first = Category.create_with_id(id=EntryId(1), value="Books")
        second = Category.create_with_id(id=EntryId(1), value="Books")
        other = Category.create_with_id(id=EntryId(2), value="Books")
        assert first == second
        assert first != other
        assert hash(first) == hash(second)

    def test_kinds_with_same_id_are_not_equal(self) -> None:
        assert Category.create_with_id(id=EntryId(1), value="x") != Role.create_with_id(
            id=EntryId(1), value="x"
        )

    def test_unsaved_entries_compare_by_object(self) -> None:
        first = Category.create("Books")
        second = Category.create("Books")
        assert first == first
        assert first != second

    def test_subclass_shares_shape(self) -> None:
        assert issubclass(Category, LookupEntry)
        assert Category.__dataclass_fields__.keys() == LookupEntry.__dataclass_fields__.keys()
