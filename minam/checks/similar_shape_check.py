"""
Row/column count similarity between two datasets
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.base_check import BaseConnectionCheck
from ..core.models import ConnectionKind, RelationshipEvidence
from ..core.registry import register_check


class SimilarShapeParams(BaseModel):
    """Parameters for similar shape check

    Attributes:
        tolerance: Exclusive upper bound on the relative row and column difference
    """
    model_config = ConfigDict(extra='forbid')

    tolerance: float = Field(0.2, gt=0.0, le=1.0)


def relative_difference(count_a: int, count_b: int) -> Optional[float]:
    """Relative difference |a - b| / max(a, b)

    Args:
        count_a: First count
        count_b: Second count

    Returns:
        Ratio in [0, 1], or None when both counts are zero
    """
    largest = max(count_a, count_b)
    if largest <= 0:
        return None
    return abs(count_a - count_b) / largest


@register_check("similar_shape")
class SimilarShapeCheck(BaseConnectionCheck):
    """Flag dataset pairs whose total row and column counts are close

    Emits when both relative differences are strictly below the tolerance.
    A pair where both row counts (or both column counts) are zero is never
    similar.

    Configuration example:
        {"similar_shape": {"tolerance": 0.2}}
    """

    display_name = "Similar Shape"
    kind = ConnectionKind.SIMILAR_SHAPE

    def _validate_params(self) -> None:
        """Validate similar shape parameters"""
        self.config = SimilarShapeParams(**self.params)

    def run(self) -> List[RelationshipEvidence]:
        """Execute similar shape check

        Returns:
            List with single evidence record (no detail) if shapes are similar
        """
        row_diff = relative_difference(
            self.dataset_a.total_row_count, self.dataset_b.total_row_count
        )
        col_diff = relative_difference(
            self.dataset_a.total_column_count, self.dataset_b.total_column_count
        )

        if row_diff is None or col_diff is None:
            return []

        if row_diff < self.config.tolerance and col_diff < self.config.tolerance:
            return [self._evidence()]
        return []
