"""
CLI command to initialize minam configuration
"""

from pathlib import Path
from typing import Optional

from .config_discovery import LOCAL_CONFIG_NAME
from .config_template import MINIMAL_CONFIG_TEMPLATE


def run_init_command(force: bool = False, path: Optional[str] = None) -> int:
    """
    Generate a configuration file in current directory or custom path

    Args:
        force: If True, overwrite existing config file
        path: Custom path for config file. If None, creates ./minam_config.yaml

    Returns:
        Exit code (0 = success, 1 = error)
    """
    config_path = Path(path or LOCAL_CONFIG_NAME).resolve()

    if config_path.exists() and not force:
        print(f"❌ Config already exists: {config_path}")
        print("   Use --force to overwrite")
        return 1

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(MINIMAL_CONFIG_TEMPLATE, encoding='utf-8')
    except OSError as e:
        print(f"❌ Failed to write config file: {config_path}")
        print(f"   Error: {e}")
        return 1

    print(f"✅ Config created: {config_path}")
    print("\nNext steps:")
    print("  1. Export OPENAI_API_KEY (only needed for `minam ask`)")
    print("  2. Find connections between your files:")
    print("     minam connections first.csv second.xlsx")

    return 0
