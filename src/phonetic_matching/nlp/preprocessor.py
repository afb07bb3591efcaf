"""
Text normalization applied to entity fields and queries before matching.

EnPreProcessor folds case, normalizes unicode, removes English stop words and
punctuation and collapses whitespace. EnPlacesPreProcessor additionally
expands cardinal directions and common address abbreviations
("cres." -> "crescent", "st" -> "street").
"""
import re
import unicodedata
from abc import ABC, abstractmethod
from typing import List, Pattern, Tuple, Union

from ..exceptions import InvalidArgumentError


class PreProcessor(ABC):
    """Protocol for text normalization."""

    @abstractmethod
    def preprocess(self, query: str) -> str:
        """
        Normalize text.

        :param query: Raw text
        :return: Normalized text
        """
        pass


class UnicodePreProcessor(PreProcessor):
    """NFKC unicode normalization."""

    def preprocess(self, query: str) -> str:
        if query is None:
            raise InvalidArgumentError("query can't be None")
        return unicodedata.normalize("NFKC", query)


class CaseFoldingPreProcessor(PreProcessor):
    def preprocess(self, query: str) -> str:
        if query is None:
            raise InvalidArgumentError("query can't be None")
        return query.lower()


class WhiteSpacePreProcessor(PreProcessor):
    """Trims and collapses whitespace runs to a single space."""

    _pattern = re.compile(r"\s{2,}")

    def preprocess(self, query: str) -> str:
        if query is None:
            raise InvalidArgumentError("query can't be None")
        return self._pattern.sub(" ", query.strip())


class ChainedRuleBasedPreProcessor(PreProcessor):
    """Applies regex substitution rules in insertion order."""

    def __init__(self):
        self._rules: List[Tuple[Pattern, str]] = []

    def add_rule(self, pattern: Union[str, Pattern], replacement: str) -> None:
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        self._rules.append((compiled, replacement))

    def preprocess(self, query: str) -> str:
        result = query
        for pattern, replacement in self._rules:
            result = pattern.sub(replacement, result)
        return result


class EnPreProcessor(PreProcessor):
    """
    English normalization.
    
    Pipeline: unicode (NFKC) -> lower case -> rules -> whitespace. Subclasses
    append their own rules to ``self.rules``; they run after stop word and
    punctuation removal.
    """

    STOP_WORDS = "a|an|at|by|el|i|in|la|las|los|my|of|on|san|santa|some|the|with|you"

    def __init__(self):
        self.rules = ChainedRuleBasedPreProcessor()
        self._unicode = UnicodePreProcessor()
        self._case_fold = CaseFoldingPreProcessor()
        self._whitespace = WhiteSpacePreProcessor()

        # Remove stop words
        self.rules.add_rule(rf"\b({self.STOP_WORDS})\b ?", "")
        self.rules.add_rule(rf" ?\b({self.STOP_WORDS})\b", "")

        # Clear punctuation and symbols (underscore counts as a word character for \w)
        self.rules.add_rule(r"(?:[^\w\s]|_)+", " ")

    def preprocess(self, query: str) -> str:
        result = self._unicode.preprocess(query)
        result = self._case_fold.preprocess(result)
        result = self.rules.preprocess(result)
        result = self._whitespace.preprocess(result)
        return result


# A dotted abbreviation ends before any non-word character or the end of text.
_END = r"\.?(?=\W|$)"


class EnPlacesPreProcessor(EnPreProcessor):
    """English normalization plus address abbreviation expansion."""

    def __init__(self):
        super().__init__()

        # Cardinal directions
        self.rules.add_rule(r"\be\b", "east")
        self.rules.add_rule(r"\bn\b", "north")
        self.rules.add_rule(r"\bs\b", "south")
        self.rules.add_rule(r"\bw\b", "west")

        self.rules.add_rule(r"\bne\b", "north east")
        self.rules.add_rule(r"\bnw\b", "north west")
        self.rules.add_rule(r"\bse\b", "south east")
        self.rules.add_rule(r"\bsw\b", "south west")

        # Address abbreviations
        self.rules.add_rule(rf"\baly{_END}", "alley")
        self.rules.add_rule(rf"\bave?{_END}", "avenue")
        self.rules.add_rule(rf"\bblvd{_END}", "boulevard")
        self.rules.add_rule(rf"\bbnd{_END}", "bend")
        self.rules.add_rule(rf"\bcres{_END}", "crescent")
        self.rules.add_rule(rf"\bcir{_END}", "circle")
        self.rules.add_rule(rf"\bct{_END}", "court")
        self.rules.add_rule(rf"\bdr{_END}", "drive")
        self.rules.add_rule(rf"\best{_END}", "estate")
        self.rules.add_rule(rf"\bln{_END}", "lane")
        self.rules.add_rule(rf"\bpkwy{_END}", "parkway")
        self.rules.add_rule(rf"\bpl{_END}", "place")
        self.rules.add_rule(rf"\brd{_END}", "road")

        # "st" at the start is read as "saint", anywhere else as "street"
        self.rules.add_rule(rf"^st{_END}", "saint")
        self.rules.add_rule(rf"\bst{_END}", "street")
        self.rules.add_rule(rf"\bxing{_END}", "crossing")
