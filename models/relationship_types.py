"""
Relationship encodings: how a signed edge is written in an edge list.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from .errors import ParseError


class RelationshipType(ABC):
    """Abstract base class for edge-list relationship encodings."""

    @abstractmethod
    def parse_header(self, line: str) -> Tuple[int, int]:
        """
        Parse the header line of an edge list.

        Args:
            line: First line of the input

        Returns:
            (declared node count, declared edge count)
        """
        pass

    @abstractmethod
    def parse_edge_line(self, line: str, line_number: Optional[int] = None) -> Tuple[str, str, bool]:
        """
        Parse one data line into an edge.

        Args:
            line: Data line text
            line_number: 1-based position of the line, used in error messages

        Returns:
            (node_a, node_b, sign)
        """
        pass

    @abstractmethod
    def encode_sign(self, sign: bool) -> str:
        """Return the separator token for a sign."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Return the name of this relationship type."""
        pass

    def format_edge(self, node_a: str, node_b: str, sign: bool) -> str:
        return f"{node_a} {self.encode_sign(sign)} {node_b}"


class DiscreteSignRelationship(RelationshipType):
    """
    Binary friendly/hostile relationships.

    Encoded as: "A ++ B" (friendly, True) and "A -- B" (hostile, False).
    The separator must be surrounded by single spaces.
    """

    FRIENDLY = "++"
    HOSTILE = "--"

    def parse_header(self, line: str) -> Tuple[int, int]:
        parts = line.split()
        if len(parts) != 2:
            raise ParseError("header must hold a node count and an edge count", 1, line)
        try:
            num_nodes, num_edges = int(parts[0]), int(parts[1])
        except ValueError:
            raise ParseError("header counts must be integers", 1, line) from None
        if num_nodes < 0 or num_edges < 0:
            raise ParseError("header counts must be non-negative", 1, line)
        return num_nodes, num_edges

    def _split(self, line: str, token: str) -> Optional[Tuple[str, str]]:
        parts = line.split(f" {token} ")
        if len(parts) == 2 and parts[0] and parts[1]:
            return parts[0], parts[1]
        return None

    def parse_edge_line(self, line: str, line_number: Optional[int] = None) -> Tuple[str, str, bool]:
        line = line.rstrip("\r\n")

        if f" {self.FRIENDLY} " in line and f" {self.HOSTILE} " in line:
            raise ParseError("line holds both a friendly and a hostile separator", line_number, line)

        friendly = self._split(line, self.FRIENDLY)
        if friendly is not None:
            node_a, node_b = friendly
            sign = True
        else:
            hostile = self._split(line, self.HOSTILE)
            if hostile is None:
                raise ParseError(
                    f"expected 'A {self.FRIENDLY} B' or 'A {self.HOSTILE} B'", line_number, line
                )
            node_a, node_b = hostile
            sign = False

        if node_a == node_b:
            raise ParseError("edge joins a node to itself", line_number, line)

        return node_a, node_b, sign

    def encode_sign(self, sign: bool) -> str:
        return self.FRIENDLY if sign else self.HOSTILE

    def get_name(self) -> str:
        return "Discrete (Friendly ++ / Hostile --)"
