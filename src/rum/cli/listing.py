"""CLI command: rum list -- show installed styles."""

from __future__ import annotations

import sys

import click

from rum import regions
from rum.errors import FileAccessError, RumError
from rum.model.style import StyleRecord


@click.command("list")
@click.pass_obj
def list_styles(state) -> None:
    """List installed styles as "(id) name".

    Disabled styles are marked, as are styles whose region is missing from
    (or unexpectedly present in) their target file.
    """
    try:
        catalogue = state.store().load()
    except RumError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    contents: dict[str, str | None] = {}
    for style in catalogue.styles:
        if style.target_path not in contents:
            try:
                contents[style.target_path] = regions.read_target(style.target_path)
            except FileAccessError:
                contents[style.target_path] = None
        click.echo(f"({style.id}) {style.name}{_flags(style, contents[style.target_path])}")


def _flags(style: StyleRecord, content: str | None) -> str:
    flags = []
    if style.is_chrome:
        flags.append("chrome")
    if not style.enabled:
        flags.append("disabled")
    present = content is not None and regions.contains_region(content, style.id)
    if style.enabled and not present:
        flags.append("region missing")
    elif not style.enabled and present:
        flags.append("region present")
    return f" [{', '.join(flags)}]" if flags else ""
