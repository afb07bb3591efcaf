"""
Tests for the place matcher.
"""
import pytest
from dataclasses import dataclass, field
from typing import List, Optional

from phonetic_matching import (
    InvalidArgumentError,
    PlaceFields,
    PlaceMatcher,
    PlaceMatcherConfig,
    SearchStrategy,
)

PLACES = [
    {
        "name": "Marbles Restaurant",
        "address": "8 William Street E",
        "types": ["Canadian (New)"],
        "id": "1234567",
    },
    {
        "name": "Beertown",
        "address": "75 King Street S",
        "types": ["Canadian (New)", "Beer, Wine & Spirits", "Bars"],
        "id": "7654321",
    },
    {
        "name": "Nick and Nat's Uptown 21",
        "address": "21 King St N",
        "types": ["Canadian (New)"],
    },
    {
        "name": "The Shops",
        "address": "7 Fake Cres. Toronto",
    },
]


@dataclass
class Venue:
    name: Optional[str]
    address: Optional[str] = None
    types: List[str] = field(default_factory=list)


class TestPlaceMatcher:
    """Tests for place searches."""

    @pytest.fixture(params=[SearchStrategy.BRUTE_FORCE, SearchStrategy.ACCELERATED])
    def matcher(self, request):
        return PlaceMatcher(PLACES, strategy=request.param)

    def test_address_matches_two_places(self, matcher):
        """Test that a street shared by two places returns both."""
        result = matcher.find("king street")

        assert len(result) == 2
        assert PLACES[1] in result
        assert PLACES[2] in result

    def test_address_abbreviation_is_expanded(self, matcher):
        """Test that 'Cres.' in the address is searchable as 'crescent'."""
        assert matcher.find("fake crescent") == [PLACES[3]]

    def test_type(self, matcher):
        """Test that a place type finds the place."""
        assert matcher.find("Bars") == [PLACES[1]]

    def test_exact_name(self, matcher):
        """Test that an exact name finds the place."""
        assert matcher.find("The Shops") == [PLACES[3]]

    def test_name_followed_by_address(self, matcher):
        """Test that the name combined with the address start is indexed."""
        assert matcher.find("beertown 75 king") == [PLACES[1]]

    def test_empty_query(self, matcher):
        """Test that an empty query matches nothing."""
        assert matcher.find("") == []

    def test_unrelated_query(self, matcher):
        """Test that an unrelated query matches nothing."""
        assert matcher.find("Unrelated") == []

    def test_none_query_raises(self, matcher):
        """Test that a None query is rejected."""
        with pytest.raises(InvalidArgumentError, match="query"):
            matcher.find(None)


class TestPlaceMatcherConfiguration:
    """Tests for configuration and field extraction."""

    def test_default_config(self):
        """Test that the place defaults are used when no config is given."""
        matcher = PlaceMatcher(PLACES)

        assert matcher.config == PlaceMatcherConfig()
        assert matcher.config.max_returns == 8

    def test_lexical_only(self):
        """Test the address scenario without phonetic weight."""
        matcher = PlaceMatcher(PLACES, config=PlaceMatcherConfig(phonetic_weight_percentage=0.0))

        result = matcher.find("king street")

        assert len(result) == 2
        assert PLACES[1] in result
        assert PLACES[2] in result

    def test_max_returns_caps_results(self):
        """Test that at most max_returns places are returned."""
        matcher = PlaceMatcher(PLACES, config=PlaceMatcherConfig(max_returns=1))

        assert len(matcher.find("king street")) == 1

    def test_extractor(self):
        """Test that places are read through the extractor."""

        class Place:
            def __init__(self, title, street):
                self.title = title
                self.street = street

        places = [Place("Marbles", "8 William St"), Place("Beertown", "75 King St")]
        matcher = PlaceMatcher(places, lambda p: PlaceFields(name=p.title, address=p.street))

        assert matcher.find("william street") == [places[0]]

    def test_objects_with_field_attributes(self):
        """Test that entities exposing place attributes need no extractor."""
        venues = [Venue("Beertown", "75 King Street S", ["Bars"]), Venue("The Shops")]
        matcher = PlaceMatcher(venues)

        assert matcher.find("bars") == [venues[0]]
        assert matcher.find("shops") == [venues[1]]

    def test_invalid_fields_raise(self):
        """Test that fields of the wrong type are reported as invalid arguments."""
        with pytest.raises(InvalidArgumentError, match="Invalid place fields"):
            PlaceMatcher([{"address": 75}])

    def test_place_without_fields(self):
        """Test that a place with no field is never returned."""
        places = [PlaceFields(), PlaceFields(name="Beertown", types=None)]
        matcher = PlaceMatcher(places)

        assert matcher.find("beertown") == [places[1]]
