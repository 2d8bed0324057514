"""Dataset connection checks - class-based architecture with dynamic registry"""

# Import all check classes to trigger registration
from . import (
    common_columns_check,
    common_values_check,
    similar_shape_check
)

from ..core.registry import (
    CHECK_REGISTRY,
    register_check,
    get_check,
    list_checks,
    get_check_info,
    check_exists
)

from ..core.runner import (
    run_check,
    validate_check_config,
    validate_checks_config
)

__all__ = [
    # Registry functions
    "CHECK_REGISTRY",
    "register_check",
    "get_check",
    "list_checks",
    "get_check_info",
    "check_exists",
    # Runner functions
    "run_check",
    "validate_check_config",
    "validate_checks_config"
]
