"""
CLI utilities for minam
"""

from .argument_parser import setup_argument_parser
from .output import print_connections, print_datasets, print_agent_response, format_bytes
from .init_command import run_init_command
from .config_discovery import discover_config

__all__ = [
    'setup_argument_parser',
    'print_connections',
    'print_datasets',
    'print_agent_response',
    'format_bytes',
    'run_init_command',
    'discover_config'
]
