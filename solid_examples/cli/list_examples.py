"""
List command for the SOLID examples CLI.

This module provides the list command that prints the bundled examples.
"""

import logging
from collections import Counter
from typing import Optional

import click

from ..examples import REGISTRY
from ..utils.constants import PRINCIPLES
from ..utils.logging_utils import format_principle_counts
from .common import prepare_command


@click.command(name="list")
@click.option(
    "--principle",
    type=click.Choice(PRINCIPLES, case_sensitive=False),
    help="Only list examples of one principle",
)
@click.pass_context
def list_examples(ctx: click.Context, principle: Optional[str]) -> None:
    """List the available examples.

    Prints one line per example: name, principle and title.
    """
    prepare_command(ctx)

    examples = REGISTRY.by_principle(principle) if principle else list(REGISTRY)
    for example in examples:
        info = example.info
        click.echo(f"{info.name}  {info.principle}  {info.title}")

    counts = Counter(example.info.principle for example in examples)
    logging.info("Listed %s", format_principle_counts(dict(counts)))


__all__ = ["list_examples"]
