"""
Completion-service agent that answers questions over uploaded datasets
"""

from .client import create_client
from .multi_file_agent import MultiFileAgent, extract_file_references, fallback_validation_report
from .prompts import build_file_context, build_system_prompt, build_user_prompt
from .responses import AgentResponse, ConversationMessage, DataValidationReport

__all__ = [
    'create_client',
    'MultiFileAgent',
    'extract_file_references',
    'fallback_validation_report',
    'build_file_context',
    'build_system_prompt',
    'build_user_prompt',
    'AgentResponse',
    'ConversationMessage',
    'DataValidationReport'
]
