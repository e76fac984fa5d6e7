from typing import Any

import pytest

API_KEY = "3-abcd-1234-efgh"
USER_HASH = "user-hash-5678"


@pytest.fixture
def api_key() -> str:
    return API_KEY


@pytest.fixture
def user_hash() -> str:
    return USER_HASH


@pytest.fixture
def full_set_record() -> dict[str, Any]:
    """A getSets record with every field the live service returns."""
    return {
        "setID": 8213,
        "number": "7140",
        "numberVariant": 1,
        "name": "X-wing Fighter",
        "year": 1999,
        "theme": "Star Wars",
        "themeGroup": "Licensed",
        "subtheme": "Episode IV",
        "category": "Normal",
        "released": True,
        "pieces": 263,
        "minifigs": 4,
        "image": {
            "thumbnailURL": "https://images.brickset.com/sets/small/7140-1.jpg",
            "imageURL": "https://images.brickset.com/sets/images/7140-1.jpg",
        },
        "bricksetURL": "https://brickset.com/sets/7140-1",
        "collection": {
            "owned": False,
            "wanted": True,
            "qtyOwned": 0,
            "rating": 4,
            "notes": "Original release",
        },
        "collections": {"ownedBy": 9544, "wantedBy": 1401},
        "LEGOCom": {
            "US": {
                "retailPrice": 49.99,
                "dateFirstAvailable": "1999-01-01T00:00:00Z",
                "dateLastAvailable": "2001-12-31T00:00:00Z",
            },
            "UK": {},
            "CA": {},
            "DE": {"retailPrice": None},
        },
        "rating": 4.1,
        "reviewCount": 12,
        "packagingType": "Box",
        "availability": "{Not specified}",
        "instructionsCount": 2,
        "additionalImageCount": 6,
        "ageRange": {"min": 8},
        "dimensions": {"height": 37.6, "width": 47.8, "depth": 6.8, "weight": None},
        "barcode": {"EAN": "5702014127423"},
        "extendedData": {"description": "A classic.", "tags": ["X-wing", "Starfighter"]},
        "lastUpdated": "2021-08-01T12:30:00Z",
    }


@pytest.fixture
def sets_body(full_set_record: dict[str, Any]) -> dict[str, Any]:
    return {
        "status": "success",
        "matches": 2,
        "sets": [
            full_set_record,
            {"number": "75301", "numberVariant": 1, "name": "Luke Skywalker's X-Wing Fighter"},
        ],
    }


@pytest.fixture
def themes_body() -> dict[str, Any]:
    return {
        "status": "success",
        "matches": 2,
        "themes": [
            {
                "theme": "Star Wars",
                "setCount": 1234,
                "subthemeCount": 80,
                "yearFrom": 1999,
                "yearTo": 2024,
            },
            {
                "theme": "Technic",
                "setCount": 900,
                "subthemeCount": 40,
                "yearFrom": 1977,
                "yearTo": 2024,
            },
        ],
    }


@pytest.fixture
def minifigs_body() -> dict[str, Any]:
    return {
        "status": "success",
        "matches": 2,
        "minifigs": [
            {
                "minifigNumber": "sw0001a",
                "name": "Battle Droid",
                "category": "Star Wars / Star Wars Episode 1",
                "ownedInSets": 2,
                "ownedLoose": 0,
                "ownedTotal": 2,
                "wanted": False,
            },
            {
                "minifigNumber": "cas002",
                "name": "Black Falcon",
                "category": "Castle / Black Falcons",
                "ownedInSets": 0,
                "ownedLoose": 0,
                "ownedTotal": 0,
                "wanted": True,
            },
        ],
    }
