"""CLI commands that change installed styles: add, remove, update, toggle."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable

import click

from rum.errors import RumError
from rum.lifecycle import LifecycleEngine
from rum.model.style import StyleRecord


def _run(
    engine: LifecycleEngine,
    operation: Callable[[str], StyleRecord],
    tokens: Iterable[str],
    verb: str,
    past: str,
) -> None:
    """Run *operation* per style, report each outcome, exit 1 on any failure."""

    def announced(token: str) -> StyleRecord:
        click.echo(f"{verb} '{token}':")
        return operation(token)

    failed = 0
    for result in engine.iter_batch(announced, tokens):
        if result.ok:
            click.echo(f"{past} style '{result.token}'\n")
        else:
            failed += 1
            click.echo(f"Error: {result.error}\n", err=True)

    if failed:
        click.echo(f"{failed} style(s) failed", err=True)
        sys.exit(1)
    click.echo(f"{past} all styles!")


def _engine(state) -> LifecycleEngine:
    try:
        return state.engine()
    except RumError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@click.command()
@click.argument("styles", nargs=-1, required=True)
@click.option("--chrome", is_flag=True, help="Install into userChrome.css instead of userContent.css")
@click.pass_obj
def add(state, styles: tuple[str, ...], chrome: bool) -> None:
    """Add styles from local paths, URLs or userstyles.org ids."""
    engine = _engine(state)
    _run(engine, lambda uri: engine.add(uri, chrome=chrome), styles, "Adding", "Added")


@click.command()
@click.argument("styles", nargs=-1, required=True)
@click.pass_obj
def remove(state, styles: tuple[str, ...]) -> None:
    """Remove styles by id or name."""
    engine = _engine(state)
    _run(engine, engine.remove, styles, "Removing", "Removed")


@click.command()
@click.argument("styles", nargs=-1)
@click.option("--edit", is_flag=True, help="Ask for every setting again")
@click.pass_obj
def update(state, styles: tuple[str, ...], edit: bool) -> None:
    """Re-fetch styles by id or name (all styles if none are given)."""
    engine = _engine(state)
    tokens: Iterable[str] = styles
    if not styles:
        try:
            tokens = [str(style.id) for style in state.store().load().styles]
        except RumError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)
    _run(engine, lambda token: engine.update(token, edit=edit), tokens, "Updating", "Updated")


@click.command()
@click.argument("styles", nargs=-1, required=True)
@click.pass_obj
def toggle(state, styles: tuple[str, ...]) -> None:
    """Enable disabled styles and disable enabled ones."""
    engine = _engine(state)
    _run(engine, engine.toggle, styles, "Toggling", "Toggled")
