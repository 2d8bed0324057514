"""
Command line entry point
Usage: minam {init,connections,ask} ...
"""

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from ..agent import MultiFileAgent
from ..analysis import find_connections
from ..core.config import MinamConfig
from ..core.exceptions import MinamError
from ..core.models import ParsedDataset
from ..core.parser import parse_file
from ..exporters import export_connections_to_csv, export_connections_to_json
from ..exporters.utils import DEFAULT_CSV_FILENAME, DEFAULT_JSON_FILENAME
from .argument_parser import setup_argument_parser
from .config_discovery import discover_config
from .init_command import run_init_command
from .output import print_agent_response, print_connections, print_datasets

logger = logging.getLogger(__name__)

CONSOLE_HANDLER_NAME = 'minam-console'


def setup_logging(log_level: str = 'WARNING') -> None:
    """
    Configure logging to output to the console

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    # Replace the handler from an earlier main() call in the same process
    for handler in list(root_logger.handlers):
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            root_logger.removeHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper()))
    root_logger.addHandler(console_handler)


def load_config(explicit_path: Optional[str] = None) -> MinamConfig:
    """
    Load the discovered configuration, or defaults when none exists

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValueError: If the configuration is invalid
    """
    config_path = discover_config(explicit_path)
    if config_path is None:
        logger.debug("No config file found, using defaults")
        return MinamConfig()

    logger.info(f"Using config: {config_path}")
    return MinamConfig.from_yaml(config_path)


def parse_files(files: Sequence[str]) -> List[ParsedDataset]:
    """Parse files in the given order, using each path as the dataset identifier"""
    return [parse_file(path, identifier=str(Path(path))) for path in files]


def resolve_output_path(args, config: MinamConfig, output_format: str) -> Optional[Path]:
    """
    File the json/csv output goes to, or None for stdout

    A relative --output is placed under output.directory from the config;
    --save uses the default file name for the format in that directory.
    """
    if args.output:
        path = Path(args.output)
        return path if path.is_absolute() else config.output_dir / path

    if args.save:
        filename = DEFAULT_JSON_FILENAME if output_format == 'json' else DEFAULT_CSV_FILENAME
        return config.output_dir / filename

    return None


def run_connections_command(args, config: MinamConfig) -> int:
    """
    Parse files, find connections and print or export them

    Returns:
        Exit code (0 = success)
    """
    datasets = parse_files(args.files)
    connections = find_connections(datasets, check_params=config.check_params)
    output_format = args.format or config.output_format

    if output_format == 'text':
        if args.output or args.save:
            logger.warning("--output and --save only apply to json and csv formats")
        print_datasets(datasets)
        print_connections(connections)
        return 0

    output_path = resolve_output_path(args, config, output_format)
    file_path = str(output_path) if output_path else None

    if output_format == 'json':
        content = export_connections_to_json(connections, file_path=file_path)
    else:
        content = export_connections_to_csv(connections, file_path=file_path)

    if output_path:
        print(f"📄 Connections saved to: {output_path.resolve()}")
    else:
        print(content, end='' if content.endswith('\n') else '\n')
    return 0


def run_ask_command(args, config: MinamConfig) -> int:
    """
    Ask the completion service about the given files

    Returns:
        Exit code (0 = success)
    """
    datasets = parse_files(args.files)

    history = []
    if args.history_file:
        history = json.loads(Path(args.history_file).read_text(encoding='utf-8'))
        if not isinstance(history, list):
            raise ValueError("History file must contain a JSON list of messages")

    selected_id = None
    if args.selected_file:
        matches = [d.identifier for d in datasets
                   if args.selected_file in (d.identifier, d.display_name)]
        selected_id = matches[0] if matches else None

    agent = MultiFileAgent.from_config(config)
    result = agent.ask(args.query, datasets, conversation_history=history,
                       selected_file_id=selected_id)
    print_agent_response(result)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI"""
    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    if args.command == 'init':
        return run_init_command(force=args.force, path=args.path)

    setup_logging(args.log_level)

    try:
        config = load_config(args.config)
        if args.command == 'connections':
            return run_connections_command(args, config)
        return run_ask_command(args, config)
    except (MinamError, OSError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"❌ {e}", file=sys.stderr)
        return 1
