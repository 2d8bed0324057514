"""
OpenAI-compatible client construction from explicit credentials
"""

import logging
from typing import Optional

from openai import OpenAI

from ..core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def create_client(api_key: Optional[str], base_url: Optional[str] = None) -> OpenAI:
    """
    Build a chat-completion client

    Credentials are always passed in by the caller; nothing is read from the
    process environment here.

    Args:
        api_key: API key for the completion service
        base_url: Optional OpenAI-compatible endpoint

    Returns:
        Configured OpenAI client

    Raises:
        ConfigurationError: If api_key is missing or blank
    """
    if not api_key or not api_key.strip():
        raise ConfigurationError(
            "No API key configured. Set llm.api_key in the config file "
            "(e.g. api_key: ${OPENAI_API_KEY})"
        )

    if base_url:
        logger.debug(f"Using completion endpoint: {base_url}")
        return OpenAI(api_key=api_key, base_url=base_url)
    return OpenAI(api_key=api_key)
