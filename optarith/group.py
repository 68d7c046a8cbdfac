"""Abstract description of a group and the relative costs of its operations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GroupCost:
    """Relative costs of compose, square and cube in a group."""

    compose: float
    square: float
    cube: float


UNIT_COSTS = GroupCost(compose=1, square=1, cube=1)
COMPOSE_ONLY_COSTS = GroupCost(compose=1, square=0, cube=0)


class Group(ABC):
    """A group whose elements are immutable values.

    Subclasses provide the identity, inversion and composition; squaring,
    cubing, equality and hashing default to generic forms and may be
    overridden with faster ones.
    """

    @abstractmethod
    def identity(self) -> Any:
        """Return the identity element."""

    def is_id(self, a: Any) -> bool:
        """True if ``a`` is the identity element."""
        return self.equal(a, self.identity())

    def equal(self, a: Any, b: Any) -> bool:
        """True if ``a`` and ``b`` are the same element."""
        return a == b

    @abstractmethod
    def inverse(self, a: Any) -> Any:
        """Return the inverse of ``a``."""

    @abstractmethod
    def compose(self, a: Any, b: Any) -> Any:
        """Return ``a * b``."""

    def square(self, a: Any) -> Any:
        """Return ``a ** 2``."""
        return self.compose(a, a)

    def cube(self, a: Any) -> Any:
        """Return ``a ** 3``."""
        return self.compose(self.square(a), a)

    def hash32(self, a: Any) -> int:
        """Return an unsigned 32-bit hash of ``a``."""
        return hash(a) & 0xFFFFFFFF