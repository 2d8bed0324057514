"""
Discover relationships between uploaded datasets based on shared header
names, shared early values and similar row/column counts
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..checks import get_check, validate_checks_config
from ..core.models import ParsedDataset, RelationshipEvidence

logger = logging.getLogger(__name__)

# Checks run in this order for every pair
DEFAULT_CHECK_ORDER = ('common_columns', 'common_values', 'similar_shape')


class DatasetConnectionFinder:
    """
    Detect relationships between parsed datasets that were collected during
    an upload session

    Every unordered pair is compared exactly once, in input order, and each
    check contributes at most one evidence record per pair.
    """

    def __init__(
        self,
        check_params: Optional[Dict[str, Dict[str, Any]]] = None,
        checks: Sequence[str] = DEFAULT_CHECK_ORDER
    ):
        """
        Args:
            check_params: Optional per-check parameters,
                e.g. {"similar_shape": {"tolerance": 0.1}}
            checks: Names of the checks to run, in order

        Raises:
            ValueError: If a check name is unknown
            ValidationError: If check parameters are invalid
        """
        self.check_params = {name: dict(params or {}) for name, params in (check_params or {}).items()}
        self.checks = list(checks)

        unknown = [name for name in self.checks + list(self.check_params) if get_check(name) is None]
        if unknown:
            raise ValueError(f"Unknown connection check(s): {', '.join(sorted(set(unknown)))}")
        validate_checks_config(self.check_params)

        self.datasets: List[ParsedDataset] = []
        self.connections: List[RelationshipEvidence] = []

    def add_dataset(self, dataset: ParsedDataset):
        """
        Add a dataset to the analysis

        Args:
            dataset: Parsed dataset; its position in insertion order decides
                whether it is side A or side B of each pair
        """
        self.datasets.append(dataset)

    def remove_dataset(self, identifier: str) -> bool:
        """
        Drop a dataset from the session

        Args:
            identifier: Identifier of the dataset to remove

        Returns:
            True if a dataset was removed
        """
        before = len(self.datasets)
        self.datasets = [d for d in self.datasets if d.identifier != identifier]
        return len(self.datasets) != before

    def find_connections(self) -> List[RelationshipEvidence]:
        """
        Compare every pair of datasets added so far

        Results are recomputed from scratch on every call.

        Returns:
            List of RelationshipEvidence ordered by pair, then by check order
        """
        self.connections = self._compare_all(self.datasets)
        return self.connections

    def _compare_all(self, datasets: Sequence[ParsedDataset]) -> List[RelationshipEvidence]:
        connections = []
        pair_count = 0

        for i, dataset_a in enumerate(datasets):
            for dataset_b in datasets[i + 1:]:
                pair_count += 1
                connections.extend(self._compare_pair(dataset_a, dataset_b))

        logger.debug(
            f"Compared {pair_count} dataset pair(s), found {len(connections)} connection(s)"
        )
        return connections

    def _compare_pair(self, dataset_a: ParsedDataset,
                      dataset_b: ParsedDataset) -> List[RelationshipEvidence]:
        """
        Run every configured check on one pair

        Args:
            dataset_a: Earlier dataset
            dataset_b: Later dataset

        Returns:
            Evidence records in check order
        """
        evidence = []
        for check_name in self.checks:
            check_class = get_check(check_name)
            check = check_class(dataset_a, dataset_b, **self.check_params.get(check_name, {}))
            evidence.extend(check.run())
        return evidence


def find_connections(
    datasets: Iterable[ParsedDataset],
    check_params: Optional[Dict[str, Dict[str, Any]]] = None
) -> List[RelationshipEvidence]:
    """
    Compute all relationship evidence across the given datasets

    Pure function of its input: nothing is cached between calls.

    Args:
        datasets: Parsed datasets in upload order
        check_params: Optional per-check parameter overrides

    Returns:
        Evidence for every pair (i, j) with i < j; empty for fewer than two datasets

    Example:
        >>> find_connections([])
        []
    """
    finder = DatasetConnectionFinder(check_params=check_params)
    for dataset in datasets:
        finder.add_dataset(dataset)
    return finder.find_connections()
