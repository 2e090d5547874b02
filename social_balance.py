import os
import re
from itertools import combinations
from typing import Iterable, List, Optional

from models.signed_graph import SignedGraph
from models.balance_checkers import BalanceChecker, PartitionChecker
from models.errors import MissingEdgeError, ParseError, ResourceNotFoundError
from models.relationship_types import DiscreteSignRelationship, RelationshipType

LINE_LIMIT_POLICIES = ("advisory", "declared")

# Only \n, \r and \r\n end a line; other Unicode breaks stay inside node tokens
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    """Split edge-list text into lines, dropping one trailing empty line."""
    lines = LINE_BREAK.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def load_lines(path: str) -> List[str]:
    """
    Read an edge-list file into a list of lines.

    Raises:
        ResourceNotFoundError: if the file is missing or unreadable
        ParseError: if the file is not valid UTF-8
    """
    if not os.path.exists(path):
        raise ResourceNotFoundError(path)
    if os.path.isdir(path):
        raise ResourceNotFoundError(path, "is a directory")
    try:
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise ParseError(f"input is not valid UTF-8 (byte {e.start})") from e
    except OSError as e:
        raise ResourceNotFoundError(path, e.strerror or "cannot be read") from e
    return split_lines(text)


def build_graph(
    lines: Iterable[str],
    line_limit: str = "advisory",
    validate_counts: bool = False,
    relationship_type: Optional[RelationshipType] = None,
) -> SignedGraph:
    """
    Build a signed graph from an edge list.

    The first line holds the declared node and edge counts. Every other line is
    one edge, "A ++ B" (friendly) or "A -- B" (hostile). A repeated pair keeps
    the sign of its last occurrence.

    Args:
        lines: The input lines, header first
        line_limit: "advisory" consumes every data line; "declared" stops after
            the declared edge count
        validate_counts: Fail when the parsed counts differ from the header
        relationship_type: Edge encoding (defaults to ++ / --)

    Returns:
        The fully populated graph

    Raises:
        ParseError: if the header or any consumed data line is malformed
    """
    if line_limit not in LINE_LIMIT_POLICIES:
        raise ValueError(f"Unknown line limit policy: {line_limit}. Available: {list(LINE_LIMIT_POLICIES)}")
    relationship_type = relationship_type or DiscreteSignRelationship()

    input_list = list(lines)
    if not input_list:
        raise ParseError("input is empty, expected a header line")

    num_nodes, num_edges = relationship_type.parse_header(input_list[0])
    data_lines = input_list[1:]
    if line_limit == "declared":
        data_lines = data_lines[:num_edges]

    graph = SignedGraph()
    for offset, line in enumerate(data_lines):
        node_a, node_b, sign = relationship_type.parse_edge_line(line, offset + 2)
        graph.put_edge_value(node_a, node_b, sign)

    if validate_counts:
        if graph.num_nodes != num_nodes:
            raise ParseError(f"header declares {num_nodes} nodes, found {graph.num_nodes}", 1, input_list[0])
        if graph.num_edges != num_edges:
            raise ParseError(f"header declares {num_edges} edges, found {graph.num_edges}", 1, input_list[0])

    print(f"[BUILD] Built graph with {graph.num_nodes} nodes and {graph.num_edges} edges")
    return graph


def render_result(balanced: bool) -> str:
    return "Balanced" if balanced else "Not Balanced"


class SocialBalanceModel:
    """
    Decides structural balance of signed social graphs read from edge lists.

    Supports a pluggable balance checker and relationship encoding.
    """

    def __init__(
        self,
        checker: Optional[BalanceChecker] = None,
        relationship_type: Optional[RelationshipType] = None,
        line_limit: str = "advisory",
        validate_counts: bool = False
    ):
        self.checker = checker or PartitionChecker()
        self.relationship_type = relationship_type or DiscreteSignRelationship()
        self.line_limit = line_limit
        self.validate_counts = validate_counts

    def build(self, lines: Iterable[str]) -> SignedGraph:
        return build_graph(
            lines,
            line_limit=self.line_limit,
            validate_counts=self.validate_counts,
            relationship_type=self.relationship_type,
        )

    def build_from_file(self, path: str) -> SignedGraph:
        return self.build(load_lines(path))

    def check_graph(self, graph: SignedGraph) -> bool:
        balanced = self.checker.is_balanced(graph)
        print(f"[CHECK] {self.checker.get_name()}: {render_result(balanced)}")
        return balanced

    def check(self, lines: Iterable[str]) -> bool:
        """Build a graph from the lines and decide whether it is balanced."""
        return self.check_graph(self.build(lines))

    def check_file(self, path: str) -> bool:
        return self.check_graph(self.build_from_file(path))

    def get_factions(self, graph: SignedGraph):
        """
        Return the two factions of a balanced graph.

        Returns:
            {"faction_a": [...], "faction_b": [...]} or None if the graph is not balanced
        """
        partitioner = PartitionChecker()
        if not partitioner.is_balanced(graph):
            return None
        faction_a, faction_b = partitioner.partition(graph)
        return {"faction_a": faction_a, "faction_b": faction_b}

    def get_statistics(self, graph: SignedGraph):
        """Get graph statistics, skipping triangles with a missing edge"""
        friendly = sum(1 for _, _, sign in graph.edges() if sign)
        hostile = graph.num_edges - friendly

        total_triangles = 0
        balanced_count = 0
        rule = self.checker.balance_rule

        for a, b, c in combinations(graph.nodes, 3):
            try:
                signs = [graph.edge_value(a, b), graph.edge_value(a, c), graph.edge_value(b, c)]
            except MissingEdgeError:
                continue
            total_triangles += 1
            if rule.is_balanced(signs):
                balanced_count += 1

        return {
            "num_nodes": graph.num_nodes,
            "num_edges": graph.num_edges,
            "relationships": {"FRIENDLY": friendly, "HOSTILE": hostile},
            "total_triangles": total_triangles,
            "balanced_triangles": balanced_count,
            "unbalanced_triangles": total_triangles - balanced_count,
            "balance_ratio": balanced_count / total_triangles if total_triangles > 0 else 0,
            "complete": graph.is_complete()
        }

    def get_graph_data(self, graph: SignedGraph):
        """Get graph data formatted for D3.js visualization"""
        nodes = [{"id": node, "name": node} for node in graph.nodes]
        links = [
            {
                "source": a,
                "target": b,
                "type": "FRIENDLY" if sign else "HOSTILE",
                "label": self.relationship_type.format_edge(a, b, sign)
            }
            for a, b, sign in graph.edges()
        ]
        return {"nodes": nodes, "links": links}
