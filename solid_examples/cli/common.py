"""
Setup shared by every CLI command.

Commands call ``prepare_command`` first: it configures logging from the
``-d`` count and loads the configuration file named by ``--config``.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import click

from ..utils import setup_logging
from ..utils.config_manager import ConfigManager
from ..utils.error_handling import handle_generic_error, log_and_exit


def config_wrap_width(config_manager: ConfigManager) -> Optional[int]:
    """
    Read ``logging.wrap_width``.

    Exits with status 1 unless the value is a positive integer.
    """
    wrap_width = config_manager.get("logging.wrap_width")
    if wrap_width is None:
        return None
    # bool is an int subclass; TOML true/false is not a width
    if isinstance(wrap_width, bool) or not isinstance(wrap_width, int) or wrap_width <= 0:
        log_and_exit(f"Invalid logging.wrap_width in {config_manager.config_path}: expected a positive integer")
    return wrap_width


def config_storage_path(config_manager: ConfigManager) -> Optional[str]:
    """
    Read ``storage.base_path``.

    Exits with status 1 unless the value is a path to an existing directory.
    """
    base_path = config_manager.get("storage.base_path")
    if base_path is None:
        return None
    if not isinstance(base_path, str):
        log_and_exit(f"Invalid storage.base_path in {config_manager.config_path}: expected a string")
    if not Path(base_path).expanduser().is_dir():
        log_and_exit(f"Invalid storage.base_path in {config_manager.config_path}: {base_path} is not a directory")
    return str(Path(base_path).expanduser())


def config_default_examples(config_manager: ConfigManager) -> List[str]:
    """
    Read ``run.default_examples``.

    Exits with status 1 unless the value is a list of strings.
    """
    names = config_manager.get("run.default_examples", [])
    if not isinstance(names, list) or not all(isinstance(name, str) for name in names):
        log_and_exit(f"Invalid run.default_examples in {config_manager.config_path}: expected a list of names")
    return names


def prepare_command(ctx: click.Context) -> ConfigManager:
    """
    Configure logging and load configuration for a subcommand.

    Args:
        ctx: Click context carrying the group options

    Returns:
        Loaded configuration manager

    Exits with status 1 when an explicitly given config file is missing
    or invalid.
    """
    ctx.ensure_object(dict)
    debug = ctx.obj.get("debug", 0)
    setup_logging(debug)

    config_manager = ConfigManager(ctx.obj.get("config"))
    try:
        config_manager.load()
    except (FileNotFoundError, ValueError) as e:
        handle_generic_error(e, "configuration loading", log_traceback=False)
        sys.exit(1)

    wrap_width = config_wrap_width(config_manager)
    if wrap_width:
        setup_logging(debug, use_wrapping=True, width=wrap_width)
        logging.debug("Wrapping log lines at %s characters", wrap_width)

    return config_manager


__all__ = ["prepare_command", "config_wrap_width", "config_storage_path", "config_default_examples"]
