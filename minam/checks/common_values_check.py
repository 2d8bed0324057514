"""
Shared cell values in the first data rows of two datasets
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field

from ..core.base_check import BaseConnectionCheck
from ..core.models import ConnectionKind, ParsedDataset, RelationshipEvidence
from ..core.registry import register_check


class CommonValuesParams(BaseModel):
    """Parameters for common values check

    Attributes:
        max_rows: Number of data rows (after the header) sampled from each dataset
        max_values: Maximum number of shared values reported
    """
    model_config = ConfigDict(extra='forbid')

    max_rows: int = Field(4, ge=0)
    max_values: int = Field(5, ge=1)


@register_check("common_values")
class CommonValuesCheck(BaseConnectionCheck):
    """Find cell values of dataset A's early rows that also occur in dataset B's

    Rows 1..max_rows of each primary sheet are flattened row-major. Values of
    A present anywhere in B's flattened rows are kept in A's order with A's
    duplicates, then truncated to max_values.

    Configuration example:
        {"common_values": {"max_rows": 4, "max_values": 5}}
    """

    display_name = "Common Values"
    kind = ConnectionKind.COMMON_VALUES

    def _validate_params(self) -> None:
        """Validate common values parameters"""
        self.config = CommonValuesParams(**self.params)

    def _flatten_sample(self, dataset: ParsedDataset) -> List[Any]:
        """Flatten the sampled data rows of a dataset into one sequence"""
        return [cell for row in dataset.data_rows(self.config.max_rows) for cell in row]

    def run(self) -> List[RelationshipEvidence]:
        """Execute common values check

        Returns:
            List with single evidence record if any sampled value is shared
        """
        values_a = self._flatten_sample(self.dataset_a)
        values_b = self._flatten_sample(self.dataset_b)

        shared = self._shared_in_order(values_a, values_b)[:self.config.max_values]

        if not shared:
            return []
        return [self._evidence(shared)]
