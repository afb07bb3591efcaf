"""
Contact matcher: finds people from a spoken or typed name.

Names and aliases are indexed separately so that they can be searched on
their own (find_by_name, find_by_alias) or together (find).
"""
import logging
from typing import Any, Callable, List, Mapping, Optional, Sequence, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..config import ContactMatcherConfig, MatcherConfig
from ..exceptions import InvalidArgumentError
from ..models import Match, Target
from ..nlp.preprocessor import EnPreProcessor, PreProcessor
from ..nlp.tokenizer import Tokenizer
from ..pronunciation import Pronouncer
from .base_matcher import BaseMatcher
from .fuzzy_matcher import SearchStrategy
from .normalized import HybridFuzzyMatcher
from .selection import merge_matches
from .windows import WindowGenerator

logger = logging.getLogger(__name__)

Contact = TypeVar("Contact")


class ContactFields(BaseModel):
    """Searchable fields of a contact."""
    model_config = ConfigDict(from_attributes=True)

    name: Optional[str] = Field(default=None, description="Full name of the contact")
    aliases: List[str] = Field(default_factory=list, description="Nicknames or other names")

    @field_validator("aliases", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return [] if value is None else value


ContactFieldsLike = Union[ContactFields, Mapping[str, Any]]


class ContactMatcher(BaseMatcher[Contact]):
    """
    Fuzzy matcher over a list of contacts.

    Usage:
        matcher = ContactMatcher(contacts, lambda c: ContactFields(name=c.display_name))
        matcher.find("jon")  # [<John B>, <John C>]
    """

    def __init__(
        self,
        contacts: Sequence[Contact],
        extract_fields: Optional[Callable[[Contact], ContactFieldsLike]] = None,
        config: Optional[MatcherConfig] = None,
        *,
        preprocessor: Optional[PreProcessor] = None,
        tokenizer: Optional[Tokenizer] = None,
        pronouncer: Optional[Pronouncer] = None,
        strategy: SearchStrategy = SearchStrategy.ACCELERATED,
    ):
        """
        Index the contacts.

        :param contacts: Contacts to match against
        :param extract_fields: Maps a contact to its ContactFields (or a mapping of them).
            Contacts are used as their own fields if None
        :param config: Matcher configuration, ContactMatcherConfig() if None
        :param preprocessor: Text normalization of names and queries, EnPreProcessor if None
        :param tokenizer: Word tokenizer of the windows, WhitespaceTokenizer if None
        :param pronouncer: Pronunciation provider, SpellingPronouncer if None
        :param strategy: Search strategy of the underlying indices
        """
        super().__init__(config if config is not None else ContactMatcherConfig())
        self.preprocessor = preprocessor if preprocessor is not None else EnPreProcessor()
        self._windows = WindowGenerator(tokenizer)
        extract = extract_fields if extract_fields is not None else (lambda contact: contact)

        name_targets: List[Target] = []
        alias_targets: List[Target] = []
        self._name_max_window_size = 1
        self._alias_max_window_size = 1

        for idx, contact in enumerate(contacts):
            fields = _as_contact_fields(extract(contact))

            if fields.name is not None:
                variations = self._windows.single_field(contact, idx, self.preprocessor.preprocess(fields.name))
                self._name_max_window_size = max(self._name_max_window_size, len(variations))
                name_targets.extend(variations)

            for alias in fields.aliases:
                variations = self._windows.single_field(contact, idx, self.preprocessor.preprocess(alias))
                self._alias_max_window_size = max(self._alias_max_window_size, len(variations))
                alias_targets.extend(variations)

        self._name_matcher = HybridFuzzyMatcher(
            self._unique_targets(name_targets),
            self.config.phonetic_weight_percentage,
            target_to_phrase=lambda target: target.phrase,
            pronouncer=pronouncer,
            strategy=strategy,
        )
        self._alias_matcher = HybridFuzzyMatcher(
            self._unique_targets(alias_targets),
            self.config.phonetic_weight_percentage,
            target_to_phrase=lambda target: target.phrase,
            pronouncer=pronouncer,
            strategy=strategy,
        )

        logger.debug(
            f"ContactMatcher indexed {len(contacts)} contacts: "
            f"{self._name_matcher.size} name targets, {self._alias_matcher.size} alias targets"
        )

    def find(self, query: str) -> List[Contact]:
        """
        Find contacts by name or alias.

        :param query: Search query
        :return: Matched contacts, best first
        :raises InvalidArgumentError: If query is None
        """
        if query is None:
            raise InvalidArgumentError("query can't be None")

        query = self.preprocessor.preprocess(query)
        names = self._search_names(query)
        aliases = self._search_aliases(query)
        candidates = merge_matches(names, aliases)

        logger.debug(f"Contact query '{query}': {len(names)} name and {len(aliases)} alias candidates")
        return self._select_matches(candidates)

    def find_by_name(self, name: str) -> List[Contact]:
        """
        Find contacts searching their names only.

        :raises InvalidArgumentError: If name is None
        """
        if name is None:
            raise InvalidArgumentError("name can't be None")

        return self._select_matches(self._search_names(self.preprocessor.preprocess(name)))

    def find_by_alias(self, alias: str) -> List[Contact]:
        """
        Find contacts searching their aliases only.

        :raises InvalidArgumentError: If alias is None
        """
        if alias is None:
            raise InvalidArgumentError("alias can't be None")

        return self._select_matches(self._search_aliases(self.preprocessor.preprocess(alias)))

    def _search_names(self, query: str) -> List[Match[Target]]:
        k = self._name_max_window_size * self.config.max_returns
        return self._name_matcher.k_nearest_within(query, k, self.config.find_threshold)

    def _search_aliases(self, query: str) -> List[Match[Target]]:
        k = self._alias_max_window_size * self.config.max_returns
        return self._alias_matcher.k_nearest_within(query, k, self.config.find_threshold)


def _as_contact_fields(fields: ContactFieldsLike) -> ContactFields:
    if isinstance(fields, ContactFields):
        return fields
    try:
        return ContactFields.model_validate(fields)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid contact fields: {e}") from e
