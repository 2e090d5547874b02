"""
Algorithms that decide whether a whole signed graph is structurally balanced.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from .signed_graph import SignedGraph
from .balance_rules import BalanceRule, ClassicBalanceRule


class BalanceChecker(ABC):
    """Abstract base class for whole-graph balance checks."""

    def __init__(self, balance_rule: Optional[BalanceRule] = None):
        self.balance_rule = balance_rule or ClassicBalanceRule()

    @abstractmethod
    def is_balanced(self, graph: SignedGraph) -> bool:
        """
        Decide structural balance of a complete signed graph.

        Raises:
            MissingEdgeError: if some node pair has no recorded sign
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Return the name of this checker."""
        pass


class BruteForceChecker(BalanceChecker):
    """
    Inspect every triangle and fail on the first unbalanced one.

    O(n^3) edge lookups. Graphs with fewer than 3 nodes are vacuously balanced.
    """

    def is_balanced(self, graph: SignedGraph) -> bool:
        graph.require_complete()

        nodes = graph.nodes
        n = len(nodes)
        for i in range(n - 2):
            for j in range(i + 1, n - 1):
                for k in range(j + 1, n):
                    signs = [
                        graph.edge_value(nodes[i], nodes[j]),
                        graph.edge_value(nodes[i], nodes[k]),
                        graph.edge_value(nodes[j], nodes[k]),
                    ]
                    if not self.balance_rule.is_balanced(signs):
                        return False
        return True

    def get_name(self) -> str:
        return "Brute Force Triangle Scan (O(n^3))"


class PartitionChecker(BalanceChecker):
    """
    Split the graph into two factions around a pivot and verify the split.

    Friends of the pivot (and the pivot itself) form faction A, its enemies
    faction B. The graph is balanced iff every pair inside a faction is
    friendly and every pair across factions is hostile. O(n^2) edge lookups.

    The triangle rule is not consulted; the partition test is equivalent to
    the classic rule on complete graphs.
    """

    def partition(self, graph: SignedGraph) -> Tuple[List[str], List[str]]:
        """Return (faction_a, faction_b) as seen from the first node."""
        nodes = graph.nodes
        if not nodes:
            return [], []

        pivot = nodes[0]
        faction_a = [pivot]
        faction_b = []
        for node in nodes[1:]:
            if graph.edge_value(pivot, node):
                faction_a.append(node)
            else:
                faction_b.append(node)
        return faction_a, faction_b

    def is_balanced(self, graph: SignedGraph) -> bool:
        graph.require_complete()

        if graph.num_nodes < 2:
            return True

        faction_a, faction_b = self.partition(graph)

        for faction in (faction_a, faction_b):
            for i in range(len(faction) - 1):
                for j in range(i + 1, len(faction)):
                    if not graph.edge_value(faction[i], faction[j]):
                        return False

        for a in faction_a:
            for b in faction_b:
                if graph.edge_value(a, b):
                    return False

        return True

    def get_name(self) -> str:
        return "Two-Faction Partition Scan (O(n^2))"


def is_balanced_brute_force(graph: SignedGraph) -> bool:
    return BruteForceChecker().is_balanced(graph)


def is_balanced_by_partition(graph: SignedGraph) -> bool:
    return PartitionChecker().is_balanced(graph)
