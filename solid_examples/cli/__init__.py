"""
Unified CLI entry point for the SOLID examples using Click.

This module provides the main CLI group and shared options.
"""

import sys
from typing import Any, Callable, Optional, TypeVar

import click

from . import list_examples, run
from .._version import __version__

F = TypeVar("F", bound=Callable[..., Any])


# ============================================================================
# Common Click Options - Reusable decorators for shared options
# ============================================================================


def debug_option() -> Callable[[F], F]:
    """Shared --debug option for verbosity control."""
    return click.option(
        "-d",
        "--debug",
        count=True,
        help="Increase verbosity (use -d for INFO, -dd for DEBUG)",
    )


# ============================================================================
# CLI Group
# ============================================================================


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="solid-examples")
@click.option(
    "--config",
    type=click.Path(dir_okay=False),
    help="Path to config file (default: ~/.config/solid-examples/config.toml)",
)
@debug_option()
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], debug: int) -> None:
    """SOLID Examples - Runnable demonstrations of the five SOLID principles."""
    # Store shared options in context for subcommands to access
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["debug"] = debug


# Register subcommands
cli.add_command(list_examples.list_examples)
cli.add_command(run.run)


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()  # pylint: disable=no-value-for-parameter  # Click handles parameters
    except KeyboardInterrupt:
        click.echo("\n\nOperation cancelled by user", err=True)
        sys.exit(130)


__all__ = ["cli", "main", "debug_option"]
