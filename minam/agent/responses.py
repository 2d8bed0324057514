"""
Structured responses returned by the completion agent
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.models import RelationshipEvidence


class ConversationMessage(BaseModel):
    """One earlier turn of the conversation"""
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    role: str
    content: str
    timestamp: Optional[datetime] = None
    file_references: List[str] = Field(default_factory=list)


class AgentResponse(BaseModel):
    """Answer to a query together with the context it was built from

    Attributes:
        success: Always True for a returned response
        response: Completion text
        query: The user's query
        file_references: Identifiers of datasets named in the response
        connections: Relationship evidence included in the prompt
        file_name: Display name for single-file analysis (optional)
        model: Model that produced the response
        timestamp: When the response was produced (UTC)
    """
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel,
                              protected_namespaces=())

    success: bool = True
    response: str
    query: str
    file_references: List[str] = Field(default_factory=list)
    connections: List[RelationshipEvidence] = Field(default_factory=list)
    file_name: Optional[str] = None
    model: Optional[str] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class DataValidationReport(BaseModel):
    """Model-assessed quality summary of one dataset

    Attributes:
        file_type: File extension in uppercase
        data_rows: Total number of data rows
        quality_score: 0-100 data quality assessment
        missing_values: 0-100 percentage of missing values
        schema_generated: Whether schema generation succeeded
    """
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    file_type: str
    data_rows: int = Field(..., ge=0)
    quality_score: float = Field(..., ge=0, le=100)
    missing_values: float = Field(..., ge=0, le=100)
    schema_generated: bool
