"""
Output formatting and printing utilities for CLI
"""

from typing import Sequence

from ..agent.responses import AgentResponse
from ..analysis.summary import format_connection
from ..core.models import ParsedDataset, RelationshipEvidence


def print_separator(width: int = 70, char: str = '=') -> None:
    """
    Print a separator line

    Args:
        width: Width of the separator
        char: Character to use for separator
    """
    print(char * width)


def format_bytes(bytes_val: int) -> str:
    """
    Format byte count into human-readable string

    Args:
        bytes_val: Number of bytes

    Returns:
        Formatted string (e.g., "1.23 MB")
    """
    if bytes_val >= 1_000_000_000:  # GB
        return f"{bytes_val / 1_000_000_000:.2f} GB"
    elif bytes_val >= 1_000_000:  # MB
        return f"{bytes_val / 1_000_000:.2f} MB"
    elif bytes_val >= 1_000:  # KB
        return f"{bytes_val / 1_000:.2f} KB"
    else:
        return f"{bytes_val} bytes"


def print_datasets(datasets: Sequence[ParsedDataset]) -> None:
    """Print one line per parsed dataset"""
    print(f"\n📁 Datasets ({len(datasets)}):")
    for dataset in datasets:
        print(
            f"  - {dataset.display_name:<30} {dataset.total_row_count:>8,} rows × "
            f"{dataset.total_column_count:<4} cols  {len(dataset.sheets)} sheet(s)  "
            f"{format_bytes(dataset.file_size)}"
        )


def print_connections(connections: Sequence[RelationshipEvidence]) -> None:
    """Print relationship evidence, one line per record"""
    print(f"\n🔗 File connections ({len(connections)}):")
    print_separator()
    if not connections:
        print("No connections found")
    for evidence in connections:
        print(format_connection(evidence))
    print_separator()


def print_agent_response(result: AgentResponse) -> None:
    """Print an agent answer followed by the files it referenced"""
    print(result.response)
    if result.file_references:
        print()
        print_separator(char='-')
        print(f"Referenced files: {', '.join(result.file_references)}")
