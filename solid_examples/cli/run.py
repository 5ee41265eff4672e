"""
Run command for the SOLID examples CLI.

This module provides the run command that executes one or more examples
and prints their output.
"""

import logging
from typing import List, Optional, Tuple

import click

from ..examples import REGISTRY, RegisteredExample
from ..models.context import RunContext
from ..utils.constants import DEFAULT_STORAGE_PATH, PRINCIPLES
from ..utils.error_handling import with_error_handling
from ..utils.logging_utils import (
    format_count_with_unit,
    log_list_items,
    log_operation_complete,
    log_operation_start,
    log_summary_separator,
)
from .common import config_default_examples, config_storage_path, prepare_command


def check_names(names: Tuple[str, ...], param_hint: str) -> None:
    """
    Reject names that are not registered.

    Raises:
        click.BadParameter: For the first unknown name
    """
    for name in names:
        if name not in REGISTRY:
            raise click.BadParameter(
                f"Unknown example '{name}'. Available: {', '.join(REGISTRY.names())}",
                param_hint=param_hint,
            )


def select_examples(names: Tuple[str, ...], run_all: bool, principle: Optional[str]) -> List[RegisteredExample]:
    """
    Resolve the command line selection to registered examples.

    Raises:
        UnknownExampleError: If a name is not registered
    """
    if run_all:
        return list(REGISTRY)
    if principle:
        return REGISTRY.by_principle(principle)
    return [REGISTRY.get(name) for name in names]


@click.command()
@click.argument("names", nargs=-1)
@click.option("--all", "run_all", is_flag=True, help="Run every example")
@click.option(
    "--principle",
    type=click.Choice(PRINCIPLES, case_sensitive=False),
    help="Run every example of one principle",
)
@click.option(
    "--storage-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Base directory for the file storage examples (default: current directory)",
)
@click.pass_context
def run(
    ctx: click.Context,
    names: Tuple[str, ...],
    run_all: bool,
    principle: Optional[str],
    storage_dir: Optional[str],
) -> None:
    """Run examples by name.

    Each example is preceded by a header line. Without names, --all or
    --principle, the examples listed under run.default_examples in the
    config file are run.
    """
    if sum(bool(selection) for selection in (names, run_all, principle)) > 1:
        raise click.UsageError("Give example names, --all or --principle, not several of them")
    check_names(names, "NAMES")

    config_manager = prepare_command(ctx)

    if not (names or run_all or principle):
        names = tuple(config_default_examples(config_manager))
        if not names:
            raise click.UsageError("No examples given and no run.default_examples configured")
        check_names(names, "run.default_examples")
        logging.info("Using default examples from configuration: %s", ", ".join(names))

    context = RunContext(
        storage_path=storage_dir or config_storage_path(config_manager) or DEFAULT_STORAGE_PATH,
        debug=ctx.obj.get("debug", 0),
    )

    examples = select_examples(names, run_all, principle)

    log_operation_start("run", examples=format_count_with_unit(len(examples), "example"))
    log_list_items([example.info.name for example in examples], level=logging.DEBUG)
    for index, example in enumerate(examples):
        if index:
            click.echo("")
        click.echo(f"=== {example.info.label} ===")
        run_example = with_error_handling(f"example {example.info.name}", exit_on_error=True)(example.run)
        run_example(click.echo, context)
        logging.debug("Finished %s", example.info.name)

    log_summary_separator()
    log_operation_complete("run", examples=len(examples))


__all__ = ["run", "select_examples", "check_names"]
