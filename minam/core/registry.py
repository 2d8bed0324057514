"""
Check registry system for dynamic check discovery and instantiation
"""

from typing import Dict, Type, List, Optional
from .base_check import BaseConnectionCheck


# Global registry mapping check names to check classes
CHECK_REGISTRY: Dict[str, Type[BaseConnectionCheck]] = {}


def register_check(name: str):
    """Decorator to register a check class in the global registry

    Usage:
        @register_check("common_columns")
        class CommonColumnsCheck(BaseConnectionCheck):
            ...

    Args:
        name: Unique identifier for the check (used in configs)

    Returns:
        Decorator function that registers the class

    Raises:
        TypeError: If decorated class doesn't inherit from BaseConnectionCheck
        ValueError: If check name is already registered
    """
    def decorator(cls: Type[BaseConnectionCheck]):
        if not issubclass(cls, BaseConnectionCheck):
            raise TypeError(
                f"{cls.__name__} must inherit from BaseConnectionCheck to be registered"
            )

        if name in CHECK_REGISTRY:
            raise ValueError(
                f"Check '{name}' is already registered by {CHECK_REGISTRY[name].__name__}"
            )

        cls.name = name
        CHECK_REGISTRY[name] = cls

        return cls

    return decorator


def get_check(name: str) -> Optional[Type[BaseConnectionCheck]]:
    """Retrieve a check class by name from the registry

    Args:
        name: Check identifier (e.g., "similar_shape")

    Returns:
        Check class if found, None otherwise
    """
    return CHECK_REGISTRY.get(name)


def list_checks() -> List[str]:
    """List all registered check names

    Returns:
        Sorted list of check identifiers

    Example:
        available_checks = list_checks()
        # ['common_columns', 'common_values', 'similar_shape']
    """
    return sorted(CHECK_REGISTRY.keys())


def get_check_info() -> Dict[str, Dict[str, str]]:
    """Get detailed information about all registered checks

    Returns:
        Dictionary mapping check names to name, display_name, kind, class_name and module
    """
    info = {}
    for name, check_class in CHECK_REGISTRY.items():
        info[name] = {
            'name': name,
            'display_name': check_class.display_name or name,
            'kind': check_class.kind.value if check_class.kind else '',
            'class_name': check_class.__name__,
            'module': check_class.__module__
        }
    return info


def check_exists(name: str) -> bool:
    """Check if a check with given name is registered"""
    return name in CHECK_REGISTRY
