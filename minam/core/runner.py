"""
Check execution API - runs connection checks by name via the registry
"""

from typing import Any, Dict, List

from .registry import CHECK_REGISTRY, get_check
from .models import ParsedDataset, RelationshipEvidence


def run_check(
    check_name: str,
    dataset_a: ParsedDataset,
    dataset_b: ParsedDataset,
    **params
) -> List[RelationshipEvidence]:
    """Run a connection check by name

    Looks up the check in the registry, instantiates it with the provided
    parameters and executes it against one dataset pair.

    Args:
        check_name: Name of the check to run (e.g., "common_columns")
        dataset_a: Earlier dataset of the pair
        dataset_b: Later dataset of the pair
        **params: Check-specific parameters (e.g., tolerance=0.1 for similar_shape)

    Returns:
        List of RelationshipEvidence (zero or one record)

    Raises:
        ValueError: If check_name is not registered
        ValidationError: If parameters are invalid for the check

    Example:
        evidence = run_check("similar_shape", sales, orders, tolerance=0.1)
    """
    check_class = get_check(check_name)

    if check_class is None:
        available = ", ".join(sorted(CHECK_REGISTRY.keys()))
        raise ValueError(
            f"Unknown check: '{check_name}'. "
            f"Available checks: {available}"
        )

    check_instance = check_class(dataset_a, dataset_b, **params)
    return check_instance.run()


def validate_check_config(check_name: str, **params) -> bool:
    """Validate check parameters without running the check

    Useful for config file validation.

    Args:
        check_name: Name of the check
        **params: Parameters to validate

    Returns:
        True if valid

    Raises:
        ValueError: If check doesn't exist
        ValidationError: If parameters are invalid
    """
    check_class = get_check(check_name)

    if check_class is None:
        raise ValueError(f"Unknown check: '{check_name}'")

    placeholder = ParsedDataset(identifier='validation', display_name='validation')
    check_class(placeholder, placeholder, **params)
    return True


def validate_checks_config(check_params: Dict[str, Dict[str, Any]]) -> bool:
    """Validate a mapping of check name to parameters

    Args:
        check_params: e.g. {"similar_shape": {"tolerance": 0.1}}

    Returns:
        True if every entry is valid

    Raises:
        ValueError: If a check doesn't exist
        ValidationError: If parameters are invalid
    """
    for check_name, params in check_params.items():
        validate_check_config(check_name, **(params or {}))
    return True
