"""
Tokenizers splitting a phrase into tokens with their character intervals.
"""
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Pattern, Union


@dataclass(frozen=True)
class Interval:
    """Half-open character interval ``[first, last)``."""
    first: int
    last: int

    @property
    def length(self) -> int:
        return self.last - self.first


@dataclass(frozen=True)
class Token:
    """A substring of the tokenized phrase and where it sits."""
    value: str
    interval: Interval


class Tokenizer(ABC):
    """Protocol for tokenization strategies."""

    @abstractmethod
    def tokenize(self, query: str) -> List[Token]:
        """
        Split a query into ordered tokens.

        :param query: Text to tokenize
        :return: Tokens in order of appearance
        """
        pass


class SplittingTokenizer(Tokenizer):
    """Splits on every match of a separator pattern."""

    def __init__(self, pattern: Union[str, Pattern]):
        self._pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def tokenize(self, query: str) -> List[Token]:
        tokens = []
        index = 0

        for match in self._pattern.finditer(query):
            if index < match.start():
                interval = Interval(index, match.start())
                tokens.append(Token(query[interval.first:interval.last], interval))
            index = match.end()

        # Add the rest.
        if index < len(query):
            interval = Interval(index, len(query))
            tokens.append(Token(query[interval.first:interval.last], interval))

        return tokens


class WhitespaceTokenizer(SplittingTokenizer):
    """Splits on runs of whitespace."""

    def __init__(self):
        super().__init__(r"\s+")
