"""
Tests that the model components and configurations work correctly.
"""

from itertools import product

import pytest

from models import config as model_config
from models.factory import ModelFactory
from models.config import PRESET_CONFIGS, use_preset
from models.balance_rules import ClassicBalanceRule
from models.balance_checkers import BruteForceChecker, PartitionChecker
from models.relationship_types import DiscreteSignRelationship
from models.errors import ParseError, MissingEdgeError
from models.signed_graph import SignedGraph
from social_balance import SocialBalanceModel


def test_model_configs():
    """Test that the default and all preset configurations can be created."""
    for config in [None] + list(PRESET_CONFIGS.values()):
        components = ModelFactory.create_from_config(config)
        assert components["checker"].get_name()
        assert components["checker"].balance_rule.get_name()
        assert components["relationship_type"].get_name()
        assert isinstance(SocialBalanceModel(**components), SocialBalanceModel)


def test_presets_pick_expected_checker():
    assert isinstance(ModelFactory.create_from_config(PRESET_CONFIGS["fast"])["checker"], PartitionChecker)
    assert isinstance(ModelFactory.create_from_config(PRESET_CONFIGS["exhaustive"])["checker"], BruteForceChecker)

    strict = ModelFactory.create_from_config(PRESET_CONFIGS["strict"])
    assert strict["line_limit"] == "declared"
    assert strict["validate_counts"] is True


def test_registries_hold_only_concrete_classes():
    assert set(ModelFactory.BALANCE_CHECKERS) == {"BruteForceChecker", "PartitionChecker"}
    assert set(ModelFactory.BALANCE_RULES) == {"ClassicBalanceRule"}
    assert set(ModelFactory.RELATIONSHIP_TYPES) == {"DiscreteSignRelationship"}


def test_unknown_component_names_rejected():
    with pytest.raises(ValueError):
        ModelFactory.create_balance_checker({"balance_checker": "MagicChecker"})
    with pytest.raises(ValueError):
        ModelFactory.create_balance_rule({"balance_rule": "NoSuchRule"})
    with pytest.raises(ValueError):
        ModelFactory.create_relationship_type({"relationship_type": "Weighted"})


def test_model_description():
    description = ModelFactory.get_model_description(PRESET_CONFIGS["exhaustive"])
    assert "Brute Force" in description
    assert "Classic Heider" in description


def test_use_preset(monkeypatch):
    monkeypatch.setattr(model_config, "CURRENT_MODEL_CONFIG", dict(model_config.CURRENT_MODEL_CONFIG))

    assert use_preset("exhaustive") is True
    assert model_config.CURRENT_MODEL_CONFIG["balance_checker"] == "BruteForceChecker"
    assert isinstance(ModelFactory.create_from_config()["checker"], BruteForceChecker)

    assert use_preset("does_not_exist") is False
    assert model_config.CURRENT_MODEL_CONFIG["balance_checker"] == "BruteForceChecker"


def test_balance_rules():
    """Test the classic rule against the full triangle table."""
    classic = ClassicBalanceRule()
    table = {
        (True, True, True): True,
        (True, True, False): False,
        (True, False, True): False,
        (False, True, True): False,
        (True, False, False): True,
        (False, True, False): True,
        (False, False, True): True,
        (False, False, False): False,
    }
    for signs in product([True, False], repeat=3):
        assert classic.is_balanced(list(signs)) is table[signs]


def test_balance_rule_requires_three_edges():
    with pytest.raises(ValueError):
        ClassicBalanceRule().is_balanced([True, True])


def test_relationship_types():
    """Test relationship type encoding/decoding."""
    discrete = DiscreteSignRelationship()
    assert discrete.encode_sign(True) == "++"
    assert discrete.encode_sign(False) == "--"
    assert discrete.parse_edge_line("Cersei ++ Jaime") == ("Cersei", "Jaime", True)
    assert discrete.parse_edge_line("Ned -- Cersei") == ("Ned", "Cersei", False)
    assert discrete.format_edge("Ned", "Cersei", False) == "Ned -- Cersei"
    assert discrete.parse_header("10 45") == (10, 45)


def test_parse_error_reports_position():
    with pytest.raises(ParseError) as exc_info:
        DiscreteSignRelationship().parse_edge_line("Arya Sansa", 7)
    assert exc_info.value.line_number == 7
    assert exc_info.value.line == "Arya Sansa"
    assert "line 7" in str(exc_info.value)


def test_signed_graph():
    graph = SignedGraph()
    graph.put_edge_value("A", "B", True)
    graph.add_node("A")
    graph.add_node("C")

    assert graph.nodes == ["A", "B", "C"]
    assert len(graph) == 3
    assert graph.has_edge("B", "A")
    assert list(graph.edges()) == [("A", "B", True)]
    assert list(graph.missing_pairs()) == [("A", "C"), ("B", "C")]
    assert not graph.is_complete()
    assert str(graph) == "nodes: [A, B, C], edges: {[A, B]=True}"

    with pytest.raises(MissingEdgeError):
        graph.edge_value("A", "C")
    with pytest.raises(MissingEdgeError):
        graph.require_complete()
    with pytest.raises(ValueError):
        graph.put_edge_value("C", "C", False)
