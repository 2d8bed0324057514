"""
Shared header names between two datasets
"""

from typing import List

from pydantic import BaseModel, ConfigDict

from ..core.base_check import BaseConnectionCheck
from ..core.models import ConnectionKind, RelationshipEvidence
from ..core.registry import register_check


class CommonColumnsParams(BaseModel):
    """Parameters for common columns check

    No parameters needed for this check.
    """
    model_config = ConfigDict(extra='forbid')


@register_check("common_columns")
class CommonColumnsCheck(BaseConnectionCheck):
    """Find header names of dataset A that also appear in dataset B's header

    Headers come from row 0 of each primary sheet. The result follows A's
    header order and keeps A's duplicates: A=[Date, Date, Price] against
    B=[Date] yields [Date, Date].

    Configuration example:
        {"common_columns": {}}
    """

    display_name = "Common Columns"
    kind = ConnectionKind.COMMON_COLUMNS

    def _validate_params(self) -> None:
        """Validate common columns parameters"""
        self.config = CommonColumnsParams(**self.params)

    def run(self) -> List[RelationshipEvidence]:
        """Execute common columns check

        Returns:
            List with single evidence record if any header name is shared
        """
        shared = self._shared_in_order(self.dataset_a.header, self.dataset_b.header)

        if not shared:
            return []
        return [self._evidence(shared)]
