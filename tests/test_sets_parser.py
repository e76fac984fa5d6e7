from datetime import datetime, timezone
from typing import Any

import pytest

from brickset.errors import UnexpectedPayloadShape
from brickset.models.fields import UNKNOWN
from brickset.models.set import (
    AgeRange,
    Barcode,
    CommunityCollections,
    Dimensions,
    LegoCom,
    RetailDetails,
    Set,
    UserCollection,
)
from brickset.parsers.sets import (
    decode_set,
    decode_sets,
    encode_set,
    full_set_number,
    wanted_entry,
)


class TestFullSetNumber:
    def test_joins_variant(self) -> None:
        assert full_set_number("7140", 1) == "7140-1"

    def test_keeps_existing_suffix(self) -> None:
        assert full_set_number("7140-1", 1) == "7140-1"

    def test_unknown_variant(self) -> None:
        assert full_set_number("7140", UNKNOWN) == "7140"

    def test_null_variant(self) -> None:
        assert full_set_number("7140", None) == "7140"


class TestDecodeSet:
    def test_full_record(self, full_set_record: dict[str, Any]) -> None:
        item = decode_set(full_set_record)

        assert item.number == "7140-1"
        assert item.set_id == 8213
        assert item.number_variant == 1
        assert item.name == "X-wing Fighter"
        assert item.theme == "Star Wars"
        assert item.released is True
        assert item.pieces == 263
        assert item.rating == 4.1
        assert item.collections == CommunityCollections(owned_by=9544, wanted_by=1401)
        assert item.collection == UserCollection(
            owned=False, wanted=True, qty_owned=0, rating=4.0, notes="Original release"
        )
        assert item.last_updated == datetime(2021, 8, 1, 12, 30, tzinfo=timezone.utc)

    def test_not_specified_is_unknown(self, full_set_record: dict[str, Any]) -> None:
        assert decode_set(full_set_record).availability is UNKNOWN

    def test_absent_field_is_unknown(self, full_set_record: dict[str, Any]) -> None:
        item = decode_set(full_set_record)

        assert item.age_range == AgeRange(min=8.0, max=UNKNOWN)
        assert item.barcode == Barcode(upc=UNKNOWN, ean="5702014127423")

    def test_null_is_none(self, full_set_record: dict[str, Any]) -> None:
        item = decode_set(full_set_record)

        assert isinstance(item.dimensions, Dimensions)
        assert item.dimensions.weight is None
        assert item.dimensions.height == 37.6

    def test_lego_com_regions(self, full_set_record: dict[str, Any]) -> None:
        lego_com = decode_set(full_set_record).lego_com

        assert isinstance(lego_com, LegoCom)
        assert lego_com.united_states == RetailDetails(
            retail_price=49.99,
            date_first_available=datetime(1999, 1, 1, tzinfo=timezone.utc),
            date_last_available=datetime(2001, 12, 31, tzinfo=timezone.utc),
        )
        assert lego_com.united_kingdom == RetailDetails()
        assert lego_com.germany == RetailDetails(retail_price=None)

    def test_tags_list(self, full_set_record: dict[str, Any]) -> None:
        extended = decode_set(full_set_record).extended_data

        assert extended.tags == ("X-wing", "Starfighter")  # type: ignore[union-attr]
        assert extended.notes is UNKNOWN  # type: ignore[union-attr]

    def test_tags_comma_delimited(self) -> None:
        item = decode_set({"number": "1", "extendedData": {"tags": "Castle, Knights,, Horse"}})

        assert item.extended_data.tags == ("Castle", "Knights", "Horse")  # type: ignore[union-attr]

    def test_minimal_record(self) -> None:
        assert decode_set({"number": "10179-1"}) == Set(number="10179-1")

    def test_unknown_keys_ignored(self) -> None:
        assert decode_set({"number": "1", "newField": [1, 2]}) == Set(number="1")

    def test_explicit_null_differs_from_absent(self) -> None:
        absent = decode_set({"number": "1"})
        null = decode_set({"number": "1", "pieces": None})

        assert absent.pieces is UNKNOWN
        assert null.pieces is None
        assert absent != null

    def test_large_integers(self) -> None:
        item = decode_set({"number": "1", "pieces": 2**70})

        assert item.pieces == 2**70

    def test_number_too_large_for_float(self) -> None:
        with pytest.raises(UnexpectedPayloadShape) as excinfo:
            decode_set({"number": "1", "dimensions": {"weight": 10**400}}, "sets[2]")

        assert excinfo.value.path == "sets[2].dimensions.weight"

    def test_not_specified_anywhere_is_unknown(self) -> None:
        item = decode_set(
            {
                "number": "1",
                "year": "{Not specified}",
                "rating": "{Not specified}",
                "barcode": "{Not specified}",
                "collection": {"rating": "{Not specified}", "owned": True},
            }
        )

        assert item.year is UNKNOWN
        assert item.rating is UNKNOWN
        assert item.barcode is UNKNOWN
        assert item.collection == UserCollection(owned=True)

    def test_integer_rating_widened(self) -> None:
        assert decode_set({"number": "1", "rating": 4}).rating == 4.0

    @pytest.mark.parametrize(
        ("record", "path"),
        [
            ({"number": "1", "pieces": True}, "pieces"),
            ({"number": "1", "pieces": 1.5}, "pieces"),
            ({"number": "1", "rating": False}, "rating"),
            ({"number": "1", "released": 1}, "released"),
            ({"number": "1", "name": 7140}, "name"),
            ({"number": "1", "image": "x.jpg"}, "image"),
            ({"number": "1", "LEGOCom": {"US": {"retailPrice": "49.99"}}}, "LEGOCom.US.retailPrice"),
            ({"number": "1", "lastUpdated": "yesterday"}, "lastUpdated"),
            ({"number": "1", "lastUpdated": 1627821000}, "lastUpdated"),
            ({"number": "1", "collection": {"qtyOwned": "2"}}, "collection.qtyOwned"),
            ({"number": "1", "extendedData": {"tags": ["a", 2]}}, "extendedData.tags[1]"),
        ],
    )
    def test_wrong_type_reports_path(self, record: dict[str, Any], path: str) -> None:
        with pytest.raises(UnexpectedPayloadShape) as excinfo:
            decode_set(record)

        assert excinfo.value.path == path

    @pytest.mark.parametrize(
        "record",
        [{}, {"number": ""}, {"number": 7140}, {"number": None}, {"number": "{Not specified}"}],
    )
    def test_number_required(self, record: dict[str, Any]) -> None:
        with pytest.raises(UnexpectedPayloadShape, match="number"):
            decode_set(record)

    def test_record_must_be_object(self) -> None:
        with pytest.raises(UnexpectedPayloadShape, match=r"sets\[0\]"):
            decode_set(["7140-1"], "sets[0]")


class TestEncodeSet:
    def test_unknown_fields_left_out(self) -> None:
        assert encode_set(Set(number="1", pieces=None, name="Brick")) == {
            "number": "1",
            "name": "Brick",
            "pieces": None,
        }

    def test_nested_records(self, full_set_record: dict[str, Any]) -> None:
        encoded = encode_set(decode_set(full_set_record))

        assert encoded["LEGOCom"]["UK"] == {}
        assert encoded["LEGOCom"]["DE"] == {"retailPrice": None}
        assert encoded["extendedData"]["tags"] == ["X-wing", "Starfighter"]
        assert "availability" not in encoded


class TestDecodeSets:
    def test_matches_absent(self) -> None:
        page = decode_sets({"sets": []})

        assert page.matches is UNKNOWN
        assert len(page) == 0

    def test_matches_wrong_type(self) -> None:
        with pytest.raises(UnexpectedPayloadShape, match="matches"):
            decode_sets({"matches": "2", "sets": []})


class TestWantedEntry:
    def test_without_collection(self) -> None:
        entry = wanted_entry(Set(number="1"))

        assert entry.qty_owned is UNKNOWN
        assert entry.owned is UNKNOWN
        assert entry.user_rating is UNKNOWN

    def test_with_collection(self) -> None:
        item = Set(number="1", collection=UserCollection(qty_owned=2, owned=True, notes=None))

        entry = wanted_entry(item)

        assert entry.set is item
        assert entry.qty_owned == 2
        assert entry.owned is True
        assert entry.notes is None
