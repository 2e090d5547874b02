"""
Model configuration - THE SINGLE PLACE to set which balance checker to use.

To change the model, simply update CURRENT_MODEL_CONFIG below.
"""

# ============================================================================
# CURRENT MODEL CONFIGURATION - EDIT THIS TO SWITCH MODELS
# ============================================================================

CURRENT_MODEL_CONFIG = {
    # Balance checker: How the whole graph is judged
    # Options: PartitionChecker (O(n^2)), BruteForceChecker (O(n^3))
    "balance_checker": "PartitionChecker",

    # Checker parameters (optional, none of the built-in checkers take any)
    "checker_params": {},

    # Balance rule: How a single triangle is judged (used by BruteForceChecker
    # and by the triangle statistics)
    # Options: ClassicBalanceRule
    "balance_rule": "ClassicBalanceRule",

    # Balance rule parameters (optional, depends on rule)
    "balance_params": {},

    # Relationship type: How edges are written in the edge list
    # Options: DiscreteSignRelationship
    "relationship_type": "DiscreteSignRelationship",

    # How many data lines to read
    # "advisory": header counts are hints, every data line is consumed
    # "declared": stop after the declared edge count
    "line_limit": "advisory",

    # Fail when the parsed node/edge counts differ from the header
    "validate_counts": False,
}


# ============================================================================
# PRESET CONFIGURATIONS - Quick model presets you can copy to CURRENT_MODEL_CONFIG
# ============================================================================

PRESET_CONFIGS = {
    "fast": {
        "balance_checker": "PartitionChecker",
        "checker_params": {},
        "balance_rule": "ClassicBalanceRule",
        "balance_params": {},
        "relationship_type": "DiscreteSignRelationship",
        "line_limit": "advisory",
        "validate_counts": False,
    },

    "exhaustive": {
        "balance_checker": "BruteForceChecker",
        "checker_params": {},
        "balance_rule": "ClassicBalanceRule",
        "balance_params": {},
        "relationship_type": "DiscreteSignRelationship",
        "line_limit": "advisory",
        "validate_counts": False,
    },

    "strict": {
        "balance_checker": "PartitionChecker",
        "checker_params": {},
        "balance_rule": "ClassicBalanceRule",
        "balance_params": {},
        "relationship_type": "DiscreteSignRelationship",
        "line_limit": "declared",
        "validate_counts": True,
    },
}


# Helper function to switch to a preset
def use_preset(preset_name: str) -> bool:
    """
    Switch to a preset configuration.

    Usage:
        from models.config import use_preset
        use_preset("exhaustive")

    Args:
        preset_name: Name of preset from PRESET_CONFIGS

    Returns:
        True if the preset was applied
    """
    global CURRENT_MODEL_CONFIG
    if preset_name in PRESET_CONFIGS:
        CURRENT_MODEL_CONFIG = PRESET_CONFIGS[preset_name].copy()
        print(f"Switched to preset: {preset_name}")
        return True
    print(f"Unknown preset: {preset_name}")
    print(f"Available presets: {list(PRESET_CONFIGS.keys())}")
    return False
