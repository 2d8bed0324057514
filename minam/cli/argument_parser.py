"""
Command-line argument parser configuration with subcommands
"""

import argparse


def _add_common_run_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--config',
        type=str,
        help='Path to YAML configuration file (optional, will auto-discover)'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='WARNING',
        help='Set logging level (default: WARNING). Use DEBUG to see pair comparisons.'
    )


def setup_argument_parser() -> argparse.ArgumentParser:
    """
    Configure and return the argument parser with subcommands (init, connections, ask)

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='minam',
        description='Relate uploaded datasets and ask questions about them',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Initialize configuration
  minam init                                   # Create ./minam_config.yaml
  minam init --force                           # Overwrite existing config

  # Find connections between files
  minam connections prices.csv trades.xlsx     # Print connections
  minam connections *.csv --format json        # JSON to stdout
  minam connections *.csv --format csv --output connections.csv   # -> minam_results/connections.csv
  minam connections *.csv --format json --save  # -> minam_results/connections.json

  # Ask the completion service about the files
  minam ask "Which file has the latest BTC price?" prices.csv trades.xlsx
        """
    )

    subparsers = parser.add_subparsers(
        dest='command',
        required=True,
        help='Command to execute'
    )

    # ========================================================================
    # INIT SUBCOMMAND
    # ========================================================================
    init_parser = subparsers.add_parser(
        'init',
        help='Create a new configuration file',
        description='Initialize minam by creating a configuration file'
    )
    init_parser.add_argument(
        '--force', '-f',
        action='store_true',
        help='Overwrite existing configuration file'
    )
    init_parser.add_argument(
        '--path', '-p',
        type=str,
        help='Custom path for config file (default: ./minam_config.yaml)'
    )

    # ========================================================================
    # CONNECTIONS SUBCOMMAND
    # ========================================================================
    connections_parser = subparsers.add_parser(
        'connections',
        help='Find relationships between datasets',
        description='Parse the files and report shared columns, shared values and similar shapes'
    )
    connections_parser.add_argument(
        'files',
        nargs='+',
        help='CSV or Excel files, in upload order'
    )
    connections_parser.add_argument(
        '--format',
        choices=['text', 'json', 'csv'],
        help='Output format (default: from config, else text)'
    )
    connections_parser.add_argument(
        '--output', '-o',
        type=str,
        help='Write json/csv output to this file instead of stdout '
             '(relative paths are placed under output.directory from the config)'
    )
    connections_parser.add_argument(
        '--save',
        action='store_true',
        help='Write json/csv output to output.directory as connections.json/connections.csv'
    )
    _add_common_run_arguments(connections_parser)

    # ========================================================================
    # ASK SUBCOMMAND
    # ========================================================================
    ask_parser = subparsers.add_parser(
        'ask',
        help='Ask a question about the datasets',
        description='Send the query with file previews and connections to the completion service'
    )
    ask_parser.add_argument('query', help='Question to ask')
    ask_parser.add_argument(
        'files',
        nargs='*',
        help='CSV or Excel files to include as context'
    )
    ask_parser.add_argument(
        '--history-file',
        type=str,
        help='JSON file with earlier turns: [{"role": "user", "content": "..."}]'
    )
    ask_parser.add_argument(
        '--selected-file',
        type=str,
        help='File name or identifier to list first in the prompt'
    )
    _add_common_run_arguments(ask_parser)

    return parser
