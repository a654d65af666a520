"""rum CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import click

from rum import __version__
from rum.catalogue import CatalogueStore
from rum.config import RumConfig
from rum.interviewer.base import Interviewer
from rum.lifecycle import LifecycleEngine
from rum.sources import StyleFetcher, StyleSources


@dataclass
class CliState:
    """Collaborators shared by every subcommand; tests inject their own."""

    config: RumConfig = field(default_factory=RumConfig)
    interviewer: Interviewer | None = None
    sources: StyleFetcher | None = None
    _owned_sources: StyleSources | None = field(default=None, init=False, repr=False)

    def get_interviewer(self) -> Interviewer:
        if self.interviewer is None:
            from rum.interviewer.console import ConsoleInterviewer

            self.interviewer = ConsoleInterviewer()
        return self.interviewer

    def get_sources(self) -> StyleFetcher:
        if self.sources is None:
            self._owned_sources = StyleSources(
                service_url=self.config.service_url,
                timeout=self.config.http_timeout,
            )
            self.sources = self._owned_sources
        return self.sources

    def close(self) -> None:
        """Close HTTP clients this state created; injected sources are left alone."""
        if self._owned_sources is not None:
            self._owned_sources.close()
            self._owned_sources = None
            self.sources = None

    def store(self) -> CatalogueStore:
        return CatalogueStore(self.config.catalogue_file)

    def engine(self) -> LifecycleEngine:
        """Build the lifecycle engine, creating a catalogue on first use."""
        from rum.profiles import bootstrap

        store = self.store()
        if not store.exists():
            click.echo(f"No catalogue found at {store.path}", err=True)
            bootstrap(store, self.get_interviewer(), self.config.profiles_file)
            click.echo("Successfully created new catalogue.\n")
        return LifecycleEngine(
            store,
            self.get_sources(),
            self.get_interviewer(),
            image_dir=self.config.image_dir,
        )


@click.group()
@click.version_option(version=__version__, prog_name="rum")
@click.option(
    "--catalogue",
    envvar="RUM_CATALOGUE",
    default=RumConfig.catalogue_path,
    show_default=True,
    help="Catalogue file listing installed styles",
)
@click.option(
    "--service-url",
    envvar="RUM_SERVICE_URL",
    default=RumConfig.service_url,
    help="Base URL of the userstyles API",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output")
@click.pass_context
def cli(ctx: click.Context, catalogue: str, service_url: str, verbose: bool) -> None:
    """rum - manage user styles in userContent.css and userChrome.css."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    state = ctx.ensure_object(CliState)
    ctx.call_on_close(state.close)
    state.config = RumConfig(
        catalogue_path=catalogue,
        profiles_ini=state.config.profiles_ini,
        image_dir=state.config.image_dir,
        service_url=service_url,
        http_timeout=state.config.http_timeout,
    )


# Import and register subcommands
from rum.cli.init import init  # noqa: E402
from rum.cli.listing import list_styles  # noqa: E402
from rum.cli.styles import add, remove, toggle, update  # noqa: E402

cli.add_command(init)
cli.add_command(add)
cli.add_command(remove)
cli.add_command(update)
cli.add_command(toggle)
cli.add_command(list_styles)
