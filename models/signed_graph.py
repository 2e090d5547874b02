from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple

from .errors import MissingEdgeError


class SignedGraph:
    """
    Undirected graph whose edges carry a boolean sign.

    True marks a friendly relationship, False a hostile one. Nodes keep their
    insertion order, which is the enumeration order the balance checkers use.
    """

    def __init__(self):
        self._nodes: Dict[str, None] = {}
        self._edges: Dict[FrozenSet[str], bool] = {}

    @staticmethod
    def _key(node_a: str, node_b: str) -> FrozenSet[str]:
        return frozenset((node_a, node_b))

    def add_node(self, node: str):
        """Register a node; adding one that is already present is a no-op."""
        self._nodes.setdefault(node, None)

    def put_edge_value(self, node_a: str, node_b: str, sign: bool):
        """
        Set the sign between two nodes, registering both endpoints.

        A later call for the same pair (in either order) overwrites the sign.
        """
        if node_a == node_b:
            raise ValueError(f"Self-loop on {node_a!r} is not allowed")
        self.add_node(node_a)
        self.add_node(node_b)
        self._edges[self._key(node_a, node_b)] = bool(sign)

    def has_edge(self, node_a: str, node_b: str) -> bool:
        return self._key(node_a, node_b) in self._edges

    def edge_value(self, node_a: str, node_b: str) -> bool:
        """Return the sign between two nodes, raising MissingEdgeError if unset."""
        try:
            return self._edges[self._key(node_a, node_b)]
        except KeyError:
            raise MissingEdgeError(node_a, node_b) from None

    @property
    def nodes(self) -> List[str]:
        return list(self._nodes)

    @property
    def num_nodes(self) -> int:
        return len(self._nodes)

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    def edges(self) -> Iterator[Tuple[str, str, bool]]:
        """Yield (node_a, node_b, sign) once per pair, in node order."""
        nodes = self.nodes
        for i in range(len(nodes)):
            for j in range(i + 1, len(nodes)):
                key = self._key(nodes[i], nodes[j])
                if key in self._edges:
                    yield nodes[i], nodes[j], self._edges[key]

    def missing_pairs(self) -> Iterator[Tuple[str, str]]:
        """Yield every node pair without a recorded sign, in node order."""
        nodes = self.nodes
        for i in range(len(nodes)):
            for j in range(i + 1, len(nodes)):
                if self._key(nodes[i], nodes[j]) not in self._edges:
                    yield nodes[i], nodes[j]

    def first_missing_pair(self) -> Optional[Tuple[str, str]]:
        return next(self.missing_pairs(), None)

    def is_complete(self) -> bool:
        return self.first_missing_pair() is None

    def require_complete(self):
        """Raise MissingEdgeError for the first pair without a sign."""
        missing = self.first_missing_pair()
        if missing is not None:
            raise MissingEdgeError(*missing)

    def __len__(self) -> int:
        return len(self._nodes)

    def __str__(self) -> str:
        edges = ", ".join(
            f"[{a}, {b}]={sign}" for a, b, sign in self.edges()
        )
        return f"nodes: [{', '.join(self.nodes)}], edges: {{{edges}}}"
