"""
Rules for determining triangle balance.
"""

from abc import ABC, abstractmethod
from typing import Sequence


class BalanceRule(ABC):
    """Abstract base class for triangle balance rules."""

    @abstractmethod
    def is_balanced(self, signs: Sequence[bool]) -> bool:
        """
        Check if a triangle is balanced.

        Args:
            signs: The 3 edge signs of the triangle (True = friendly, False = hostile)

        Returns:
            True if balanced, False if unbalanced
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Return the name of this balance rule."""
        pass


class ClassicBalanceRule(BalanceRule):
    """
    Classic structural balance theory on complete signed triangles:
    - Balanced: 3 friendly OR 1 friendly + 2 hostile
    - Unbalanced: 2 friendly + 1 hostile OR 3 hostile

    Equivalently the product of the signs (+1 / -1) is positive.
    """

    def is_balanced(self, signs: Sequence[bool]) -> bool:
        if len(signs) != 3:
            raise ValueError(f"A triangle has 3 edges, got {len(signs)}")

        hostile_count = sum(1 for s in signs if not s)
        return hostile_count % 2 == 0

    def get_name(self) -> str:
        return "Classic Heider Triangle Balance (+++, +--)"
