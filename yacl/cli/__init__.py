"""CLI entry point for yacl."""

import logging

import click

from yacl.cli.relation_cmds import (
    closure_cmd,
    compose_cmd,
    difference_cmd,
    domain_cmd,
    get_cmd,
    image_cmd,
    intersection_cmd,
    inverse_cmd,
    override_cmd,
    range_cmd,
    restrict_cmd,
    show_cmd,
    union_cmd,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def main(verbose: bool) -> None:
    """Set, relation and function algebra over two-column CSV files.

    Every FILE is a CSV whose header names the x and y columns; use - to
    read it from stdin.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


for _command in (
    show_cmd,
    domain_cmd,
    range_cmd,
    inverse_cmd,
    closure_cmd,
    compose_cmd,
    override_cmd,
    union_cmd,
    difference_cmd,
    intersection_cmd,
    restrict_cmd,
    image_cmd,
    get_cmd,
):
    main.add_command(_command)
