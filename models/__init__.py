"""
Signed graph model and structural balance checkers with pluggable strategies.
"""

from .errors import BalanceError, ResourceNotFoundError, ParseError, MissingEdgeError
from .signed_graph import SignedGraph
from .balance_rules import BalanceRule, ClassicBalanceRule
from .balance_checkers import BalanceChecker, BruteForceChecker, PartitionChecker, is_balanced_brute_force, is_balanced_by_partition
from .relationship_types import RelationshipType, DiscreteSignRelationship
from .factory import ModelFactory
from .config import CURRENT_MODEL_CONFIG, PRESET_CONFIGS, use_preset

__all__ = [
    'BalanceError',
    'ResourceNotFoundError',
    'ParseError',
    'MissingEdgeError',
    'SignedGraph',
    'BalanceRule',
    'ClassicBalanceRule',
    'BalanceChecker',
    'BruteForceChecker',
    'PartitionChecker',
    'is_balanced_brute_force',
    'is_balanced_by_partition',
    'RelationshipType',
    'DiscreteSignRelationship',
    'ModelFactory',
    'CURRENT_MODEL_CONFIG',
    'PRESET_CONFIGS',
    'use_preset'
]
