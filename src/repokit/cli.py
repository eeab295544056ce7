"""Top-level Click group for the repokit CLI."""

import click

from repokit.make_repository.cli import register_commands


@click.group()
def main():
    """repokit - repository scaffolding for ORM models."""


register_commands(main)
