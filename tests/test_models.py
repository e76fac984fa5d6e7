import pytest

from brickset.models.catalog import Theme
from brickset.models.fields import UNKNOWN, is_known, known_or
from brickset.models.set import AgeRange, Set, SetsPage, WantedList, WantedListEntry


class TestUnknown:
    def test_is_falsy(self) -> None:
        assert not UNKNOWN

    def test_repr(self) -> None:
        assert repr(UNKNOWN) == "UNKNOWN"

    def test_is_known(self) -> None:
        assert not is_known(UNKNOWN)
        assert is_known(None)
        assert is_known(0)

    def test_known_or(self) -> None:
        assert known_or(UNKNOWN, 0) == 0
        assert known_or(None, 0) == 0
        assert known_or(263, 0) == 263


class TestSet:
    def test_defaults_are_unknown(self) -> None:
        item = Set(number="7140-1")

        assert item.name is UNKNOWN
        assert item.lego_com is UNKNOWN
        assert item.last_updated is UNKNOWN

    def test_immutable(self) -> None:
        item = Set(number="7140-1")

        with pytest.raises(ValueError):
            item.number = "7141-1"  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({Set(number="7140-1"), Set(number="7140-1")}) == 1

    def test_joins_variant_from_field_names(self) -> None:
        assert Set(number="7140", number_variant=1).number == "7140-1"

    def test_explicit_unknown_kept(self) -> None:
        assert Set(number="1", pieces=UNKNOWN).pieces is UNKNOWN

    def test_wrong_type_rejected(self) -> None:
        with pytest.raises(ValueError):
            Set(number="1", pieces="263")

    def test_to_wire_drops_nested_unknowns(self) -> None:
        item = Set(number="1", age_range=AgeRange(min=8.0), image=None)

        assert item.to_wire() == {"number": "1", "image": None, "ageRange": {"min": 8.0}}


class TestPages:
    def test_sets_page_length(self) -> None:
        page = SetsPage(matches=10, sets=(Set(number="1"), Set(number="2")))

        assert len(page) == 2

    def test_wanted_list_length(self) -> None:
        wanted = WantedList(matches=1, entries=(WantedListEntry(set=Set(number="1")),))

        assert len(wanted) == 1


class TestCatalogRows:
    def test_populate_by_field_name(self) -> None:
        theme = Theme(name="Technic", set_count=1, subtheme_count=0, year_from=1977, year_to=2024)

        assert theme.model_dump(by_alias=True)["theme"] == "Technic"

    def test_frozen(self) -> None:
        theme = Theme(name="Technic", set_count=1, subtheme_count=0, year_from=1977, year_to=2024)

        with pytest.raises(ValueError):
            theme.name = "Duplo"  # type: ignore[misc]
