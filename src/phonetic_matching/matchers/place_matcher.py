"""
Place matcher: finds points of interest from a name, an address or a type.
"""
import logging
from typing import Any, Callable, List, Mapping, Optional, Sequence, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..config import MatcherConfig, PlaceMatcherConfig
from ..exceptions import InvalidArgumentError
from ..models import Target
from ..nlp.preprocessor import EnPlacesPreProcessor, PreProcessor
from ..nlp.tokenizer import Tokenizer
from ..pronunciation import Pronouncer
from .base_matcher import BaseMatcher
from .fuzzy_matcher import SearchStrategy
from .normalized import HybridFuzzyMatcher
from .windows import WindowGenerator

logger = logging.getLogger(__name__)

Place = TypeVar("Place")


class PlaceFields(BaseModel):
    """Searchable fields of a place."""
    model_config = ConfigDict(from_attributes=True)

    name: Optional[str] = Field(default=None, description="Name of the place")
    address: Optional[str] = Field(default=None, description="Street address")
    types: List[str] = Field(default_factory=list, description="Categories, e.g. 'Bars'")

    @field_validator("types", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return [] if value is None else value


PlaceFieldsLike = Union[PlaceFields, Mapping[str, Any]]


class PlaceMatcher(BaseMatcher[Place]):
    """
    Fuzzy matcher over a list of places.

    Names, addresses and types share a single index.
    """

    def __init__(
        self,
        places: Sequence[Place],
        extract_fields: Optional[Callable[[Place], PlaceFieldsLike]] = None,
        config: Optional[MatcherConfig] = None,
        *,
        preprocessor: Optional[PreProcessor] = None,
        tokenizer: Optional[Tokenizer] = None,
        pronouncer: Optional[Pronouncer] = None,
        strategy: SearchStrategy = SearchStrategy.ACCELERATED,
    ):
        """
        Index the places.

        :param places: Places to match against
        :param extract_fields: Maps a place to its PlaceFields (or a mapping of them).
            Places are used as their own fields if None
        :param config: Matcher configuration, PlaceMatcherConfig() if None
        :param preprocessor: Text normalization of fields and queries, EnPlacesPreProcessor if None
        :param tokenizer: Word tokenizer of the windows, WhitespaceTokenizer if None
        :param pronouncer: Pronunciation provider, SpellingPronouncer if None
        :param strategy: Search strategy of the underlying index
        """
        super().__init__(config if config is not None else PlaceMatcherConfig())
        self.preprocessor = preprocessor if preprocessor is not None else EnPlacesPreProcessor()
        self._windows = WindowGenerator(tokenizer)
        extract = extract_fields if extract_fields is not None else (lambda place: place)

        targets: List[Target] = []
        self._max_window_size = 1

        for idx, place in enumerate(places):
            fields = _as_place_fields(extract(place))

            name = self.preprocessor.preprocess(fields.name) if fields.name is not None else ""
            address = self.preprocessor.preprocess(fields.address) if fields.address is not None else ""

            variations = self._windows.name_and_address(place, idx, name, address)
            self._max_window_size = max(self._max_window_size, len(variations))
            targets.extend(variations)

            for place_type in fields.types:
                variations = self._windows.single_field(place, idx, self.preprocessor.preprocess(place_type))
                self._max_window_size = max(self._max_window_size, len(variations))
                targets.extend(variations)

        self._matcher = HybridFuzzyMatcher(
            self._unique_targets(targets),
            self.config.phonetic_weight_percentage,
            target_to_phrase=lambda target: target.phrase,
            pronouncer=pronouncer,
            strategy=strategy,
        )

        logger.debug(f"PlaceMatcher indexed {len(places)} places as {self._matcher.size} targets")

    def find(self, query: str) -> List[Place]:
        """
        Find places by name, address or type.

        :param query: Search query
        :return: Matched places, best first
        :raises InvalidArgumentError: If query is None
        """
        if query is None:
            raise InvalidArgumentError("query can't be None")

        query = self.preprocessor.preprocess(query)
        k = self._max_window_size * self.config.max_returns
        candidates = self._matcher.k_nearest_within(query, k, self.config.find_threshold)

        logger.debug(f"Place query '{query}': {len(candidates)} candidates")
        return self._select_matches(candidates)


def _as_place_fields(fields: PlaceFieldsLike) -> PlaceFields:
    if isinstance(fields, PlaceFields):
        return fields
    try:
        return PlaceFields.model_validate(fields)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid place fields: {e}") from e
