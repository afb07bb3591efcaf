"""
Core value types shared by the matchers.
"""
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Target:
    """
    One indexed phrase variant of an entity.

    Equality and hashing only consider ``phrase`` and ``id`` so that the same
    variant of one entity is indexed once, while the same phrase belonging to
    two different entities is kept twice.

    Attributes:
        value: The original entity
        phrase: One textual variant of the entity
        id: Index of the entity in the caller's list (shared by all its variants)
    """
    value: Any = field(compare=False)
    phrase: str
    id: int


@dataclass(frozen=True)
class Match(Generic[T]):
    """A matched element with its distance to the query (0 means identical)."""
    element: T
    distance: float
