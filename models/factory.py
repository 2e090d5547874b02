"""
Factory for creating model instances from configuration.
Auto-generates class registry from imported modules.
"""

from typing import Dict, Any
import inspect
from . import balance_rules
from . import balance_checkers
from . import relationship_types
from . import config as model_config


class ModelFactory:
    """Factory for creating model components from configuration using class names."""

    # Auto-generate registries from module contents
    @staticmethod
    def _build_registry(module, base_class):
        """Build a registry of classes from a module that inherit from base_class."""
        registry = {}
        for name, obj in inspect.getmembers(module, inspect.isclass):
            # Only include concrete classes defined in this module that inherit from base_class
            if obj.__module__ == module.__name__ and issubclass(obj, base_class) and not inspect.isabstract(obj):
                registry[name] = obj
        return registry

    # Registries are auto-generated - add new classes to the modules and they appear here automatically
    BALANCE_RULES = _build_registry.__func__(balance_rules, balance_rules.BalanceRule)
    BALANCE_CHECKERS = _build_registry.__func__(balance_checkers, balance_checkers.BalanceChecker)
    RELATIONSHIP_TYPES = _build_registry.__func__(relationship_types, relationship_types.RelationshipType)

    @staticmethod
    def create_balance_rule(config: Dict[str, Any]) -> balance_rules.BalanceRule:
        """Create a balance rule from configuration using class name."""
        class_name = config.get("balance_rule", "ClassicBalanceRule")
        params = config.get("balance_params", {})

        if class_name not in ModelFactory.BALANCE_RULES:
            raise ValueError(f"Unknown balance rule: {class_name}. Available: {list(ModelFactory.BALANCE_RULES.keys())}")

        return ModelFactory.BALANCE_RULES[class_name](**params)

    @staticmethod
    def create_balance_checker(config: Dict[str, Any]) -> balance_checkers.BalanceChecker:
        """Create a balance checker (wired to its balance rule) from configuration using class name."""
        class_name = config.get("balance_checker", "PartitionChecker")
        params = config.get("checker_params", {})

        if class_name not in ModelFactory.BALANCE_CHECKERS:
            raise ValueError(f"Unknown balance checker: {class_name}. Available: {list(ModelFactory.BALANCE_CHECKERS.keys())}")

        rule = ModelFactory.create_balance_rule(config)
        return ModelFactory.BALANCE_CHECKERS[class_name](balance_rule=rule, **params)

    @staticmethod
    def create_relationship_type(config: Dict[str, Any]) -> relationship_types.RelationshipType:
        """Create a relationship type from configuration using class name."""
        class_name = config.get("relationship_type", "DiscreteSignRelationship")

        if class_name not in ModelFactory.RELATIONSHIP_TYPES:
            raise ValueError(f"Unknown relationship type: {class_name}. Available: {list(ModelFactory.RELATIONSHIP_TYPES.keys())}")

        return ModelFactory.RELATIONSHIP_TYPES[class_name]()

    @staticmethod
    def create_from_config(config: Dict[str, Any] = None) -> Dict[str, Any]:
        """
        Create all model components from a configuration dict.

        Args:
            config: Configuration dictionary (uses CURRENT_MODEL_CONFIG if None)

        Returns:
            Dictionary with all model components, ready to pass to SocialBalanceModel(**components)
        """
        if config is None:
            config = model_config.CURRENT_MODEL_CONFIG

        return {
            "checker": ModelFactory.create_balance_checker(config),
            "relationship_type": ModelFactory.create_relationship_type(config),
            "line_limit": config.get("line_limit", "advisory"),
            "validate_counts": config.get("validate_counts", False),
        }

    @staticmethod
    def get_model_description(config: Dict[str, Any] = None) -> str:
        """
        Get a human-readable description of the model configuration.

        Args:
            config: Configuration dictionary (uses CURRENT_MODEL_CONFIG if None)

        Returns:
            Description string
        """
        if config is None:
            config = model_config.CURRENT_MODEL_CONFIG

        components = ModelFactory.create_from_config(config)

        description = "Model Configuration:\n"
        description += f"  Balance Checker: {components['checker'].get_name()}\n"
        description += f"  Balance Rule: {components['checker'].balance_rule.get_name()}\n"
        description += f"  Relationship Type: {components['relationship_type'].get_name()}\n"
        description += f"  Line Limit: {components['line_limit']}\n"
        description += f"  Validate Counts: {components['validate_counts']}\n"

        return description
