"""CLI command: rum init -- choose a Firefox profile and create the catalogue."""

from __future__ import annotations

import sys

import click

from rum.errors import RumError
from rum.profiles import bootstrap


@click.command()
@click.option("--force", is_flag=True, help="Replace an existing catalogue")
@click.pass_obj
def init(state, force: bool) -> None:
    """Create a new, empty catalogue for a Firefox profile."""
    store = state.store()
    if store.exists() and not force:
        click.echo(f"Catalogue {store.path} already exists (use --force to replace it)", err=True)
        sys.exit(1)

    try:
        catalogue = bootstrap(store, state.get_interviewer(), state.config.profiles_file)
    except RumError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(f"Successfully created new catalogue for {catalogue.chrome_path}")
