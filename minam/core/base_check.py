"""
Base class for dataset connection checks
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from .models import ConnectionKind, ParsedDataset, RelationshipEvidence


def _same_value(a: Any, b: Any) -> bool:
    """Cell equality where booleans never equal numbers and NaN equals NaN"""
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, float) and isinstance(b, float) and a != a and b != b:
        return True
    return a is b or a == b


class BaseConnectionCheck(ABC):
    """Abstract base class for all pairwise connection checks

    All check implementations must inherit from this class and implement:
    - _validate_params(): Validate check-specific parameters using Pydantic
    - run(): Compare the two datasets and return evidence records

    Checks never raise on dataset content. Missing sheets, rows or counts
    simply produce no evidence.

    Attributes:
        name: Registry key for the check (set by @register_check decorator)
        display_name: Human-readable name for the check
        kind: ConnectionKind emitted by the check
        dataset_a: Earlier dataset in the input sequence
        dataset_b: Later dataset in the input sequence
        params: Additional check-specific parameters
    """

    name: str = None  # Set by @register_check decorator
    display_name: str = None  # Override in subclasses
    kind: ConnectionKind = None  # Override in subclasses

    def __init__(self, dataset_a: ParsedDataset, dataset_b: ParsedDataset, **params):
        """Initialize a check instance

        Args:
            dataset_a: Earlier dataset of the pair
            dataset_b: Later dataset of the pair
            **params: Check-specific parameters
        """
        self.dataset_a = dataset_a
        self.dataset_b = dataset_b
        self.params = params
        self._validate_params()

    @abstractmethod
    def _validate_params(self) -> None:
        """Validate check-specific parameters and store them as self.config

        Raises:
            ValidationError: If parameters are invalid
        """
        pass

    @abstractmethod
    def run(self) -> List[RelationshipEvidence]:
        """Execute the check

        Returns:
            List with at most one RelationshipEvidence; empty when nothing matched
        """
        pass

    # Shared helper methods

    def _evidence(self, detail: Optional[List[Any]] = None) -> RelationshipEvidence:
        """Build an evidence record for this pair

        Args:
            detail: Kind-specific payload (None for a bare signal)

        Returns:
            RelationshipEvidence tagged with this check's kind
        """
        return RelationshipEvidence(
            dataset_a=self.dataset_a.display_name,
            dataset_b=self.dataset_b.display_name,
            dataset_a_id=self.dataset_a.identifier,
            dataset_b_id=self.dataset_b.identifier,
            kind=self.kind,
            detail=list(detail) if detail else []
        )

    @staticmethod
    def _shared_in_order(values_a: List[Any], values_b: List[Any]) -> List[Any]:
        """Keep values of A that occur anywhere in B

        A's order and multiplicity are preserved. Values are compared by
        equality, so unhashable cells work and 1 matches 1.0, but booleans
        only match booleans (True does not match 1).

        Args:
            values_a: Sequence filtered
            values_b: Sequence used for membership

        Returns:
            Filtered copy of values_a
        """
        return [value for value in values_a
                if any(_same_value(value, other) for other in values_b)]
