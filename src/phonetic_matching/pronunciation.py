"""
Pronunciation types and the pronouncer capability.

Real text-to-pronunciation conversion is supplied by the caller through the
Pronouncer protocol. SpellingPronouncer is the fallback used when none is
injected: it treats every letter or digit as one phone.
"""
from dataclasses import dataclass
from typing import Protocol, Tuple

from .exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Pronunciation:
    """Ordered phones of a spoken phrase."""
    phones: Tuple[str, ...]

    @property
    def ipa(self) -> str:
        return "".join(self.phones)

    def __len__(self) -> int:
        return len(self.phones)


class Pronouncer(Protocol):
    """Converts text to a Pronunciation."""

    def pronounce(self, text: str) -> Pronunciation:
        ...


class SpellingPronouncer:
    """
    Pronounces a phrase as the sequence of its letters and digits.

    Whitespace and punctuation carry no sound and are dropped.
    """

    def pronounce(self, text: str) -> Pronunciation:
        if text is None:
            raise InvalidArgumentError("text to pronounce can't be None")
        return Pronunciation(tuple(ch for ch in text.lower() if ch.isalnum()))
