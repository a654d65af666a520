"""Lifecycle engine: add, remove, update and toggle styles.

Every operation touches two stores that are written separately: the
catalogue file and one target CSS file. Each operation takes in-memory
backups first and runs its writes as a :class:`~rum.saga.Saga`, so a
failure part way through puts both stores back where they were (or reports
every restoration that failed).
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, replace
from pathlib import Path

from rum import regions
from rum._base64 import is_file_path
from rum.catalogue import CatalogueStore
from rum.errors import ParseError, RumError
from rum.interviewer.base import Interviewer
from rum.model.style import OriginKind, StyleRecord
from rum.prompts import read_domain, read_name
from rum.saga import Saga
from rum.settings import DEFAULT_IMAGE_DIR, resolve_settings
from rum.sources import StyleFetcher

logger = logging.getLogger(__name__)


def detect_origin(uri: str) -> OriginKind:
    """Classify a style URI given on the command line.

    Paths are local files, anything else with a dot is a URL, and the rest
    is a userstyles catalogue id.
    """
    if is_file_path(uri):
        return OriginKind.LOCAL
    if "." in uri:
        return OriginKind.REMOTE
    return OriginKind.CATALOGUE


def parse_style_id(uri: str) -> int:
    if not (uri.isascii() and uri.isdigit()):
        raise ParseError(f"Invalid userstyle id: {uri!r}")
    try:
        return int(uri)
    except ValueError as exc:
        raise ParseError(f"Invalid userstyle id: {uri!r}", cause=exc) from exc


@dataclass(frozen=True)
class StyleResult:
    """Outcome of one style in a batch."""

    token: str
    record: StyleRecord | None = None
    error: RumError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class LifecycleEngine:
    """Orchestrates style operations over the catalogue and target files."""

    def __init__(
        self,
        store: CatalogueStore,
        sources: StyleFetcher,
        interviewer: Interviewer,
        image_dir: str | Path = DEFAULT_IMAGE_DIR,
    ) -> None:
        self._store = store
        self._sources = sources
        self._interviewer = interviewer
        self._image_dir = image_dir

    # --- operations -----------------------------------------------------------

    def add(self, uri: str, chrome: bool = False) -> StyleRecord:
        """Install a new style from a path, URL or userstyles id."""
        catalogue = self._store.load()
        backup = copy.deepcopy(catalogue)

        style_id = catalogue.next_id()
        record = self._resolve_new(uri, style_id, catalogue.target_path(chrome))
        catalogue.styles.append(record)

        saga = Saga(f"add {uri!r}")
        saga.step(
            "write catalogue",
            lambda: self._store.write(catalogue),
            lambda: self._store.write(backup),
            compensate_on_failure=True,
        )
        saga.step(
            "install region",
            lambda: regions.append_region(record.target_path, style_id, _payload(record)),
        )
        logger.info("Added style %d (%s) to %s", style_id, record.name, record.target_path)
        return record

    def remove(self, token: str) -> StyleRecord:
        """Delete a style from the catalogue and excise its region."""
        catalogue = self._store.load()
        style_id = catalogue.find_id(token)
        backup = copy.deepcopy(catalogue)
        record = catalogue.remove(style_id)

        saga = Saga(f"remove {token!r}")
        saga.step(
            "write catalogue",
            lambda: self._store.write(catalogue),
            lambda: self._store.write(backup),
            compensate_on_failure=True,
        )
        saga.step("excise region", lambda: self._excise(record.target_path, style_id))
        logger.info("Removed style %d (%s)", style_id, record.name)
        return record

    def update(self, token: str, edit: bool = False) -> StyleRecord:
        """Re-fetch a style and rewrite its region.

        With ``edit=False`` previously chosen settings are reused; with
        ``edit=True`` every setting is asked again. Id, name, domain and
        target file never change. A disabled style only has its region
        removed; its source is not fetched.
        """
        catalogue = self._store.load()
        style_id = catalogue.find_id(token)
        backup = copy.deepcopy(catalogue)
        current = catalogue.get(style_id)
        position = catalogue.styles.index(current)
        catalogue.remove(style_id)

        target = current.target_path
        file_backup = regions.read_target(target)
        if file_backup is None:
            logger.warning("%s does not exist, nothing to excise", target)
        content = regions.excise(file_backup or "", style_id)

        saga = Saga(f"update {token!r}")
        saga.step(
            "write catalogue",
            lambda: self._store.write(catalogue),
            lambda: self._store.write(backup),
            compensate_on_failure=True,
        )
        saga.step(
            "excise region",
            lambda: self._write_excised(target, file_backup, content),
            lambda: regions.restore_target(target, file_backup),
            compensate_on_failure=True,
        )
        if current.enabled:
            record = saga.step("resolve style", lambda: self._resolve_existing(current, edit))
        else:
            record = replace(current, css="")
        if record.enabled:
            saga.step(
                "install region",
                lambda: regions.write_target(
                    target, regions.install(content, style_id, _payload(record))
                ),
            )
        catalogue.styles.insert(position, record)
        saga.step("write catalogue", lambda: self._store.write(catalogue))
        logger.info("Updated style %d (%s)", style_id, record.name)
        return record

    def toggle(self, token: str) -> StyleRecord:
        """Enable a disabled style or disable an enabled one."""
        catalogue = self._store.load()
        style_id = catalogue.find_id(token)
        backup = copy.deepcopy(catalogue)
        enabled = catalogue.toggle(style_id)

        saga = Saga(f"toggle {token!r}")
        saga.step(
            "write catalogue",
            lambda: self._store.write(catalogue),
            lambda: self._store.write(backup),
            compensate_on_failure=True,
        )
        # update owns the target file backup and its restoration
        record = saga.step("rewrite region", lambda: self.update(str(style_id)))
        logger.info("%s style %d", "Enabled" if enabled else "Disabled", style_id)
        return record

    # --- batches --------------------------------------------------------------

    def iter_batch(
        self,
        operation: Callable[[str], StyleRecord],
        tokens: Iterable[str],
    ) -> Iterator[StyleResult]:
        """Run *operation* once per token, yielding each outcome.

        Every token is its own transaction; a failure never rolls back or
        skips the others.
        """
        for token in tokens:
            try:
                record = operation(token)
            except RumError as exc:
                logger.error("Failed on %r: %s", token, exc)
                yield StyleResult(token=token, error=exc)
            else:
                yield StyleResult(token=token, record=record)

    def run_batch(
        self,
        operation: Callable[[str], StyleRecord],
        tokens: Iterable[str],
    ) -> list[StyleResult]:
        return list(self.iter_batch(operation, tokens))

    # --- resolution -----------------------------------------------------------

    def _resolve_new(self, uri: str, style_id: int, target_path: str) -> StyleRecord:
        kind = detect_origin(uri)
        if kind is OriginKind.CATALOGUE:
            definition = self._sources.fetch_definition(parse_style_id(uri))
            settings = resolve_settings(
                definition.settings, None, self._interviewer, self._image_dir
            )
            return StyleRecord(
                id=style_id,
                name=definition.name,
                uri=uri,
                origin_kind=kind,
                target_path=target_path,
                settings=settings,
                css=definition.render_css(settings),
            )

        css = self._fetch_css(kind, uri)
        return StyleRecord(
            id=style_id,
            name=read_name(self._interviewer),
            uri=uri,
            origin_kind=kind,
            target_path=target_path,
            domain=read_domain(self._interviewer),
            css=css,
        )

    def _resolve_existing(self, current: StyleRecord, edit: bool) -> StyleRecord:
        if current.origin_kind is not OriginKind.CATALOGUE:
            return replace(current, css=self._fetch_css(current.origin_kind, current.uri))

        definition = self._sources.fetch_definition(parse_style_id(current.uri))
        previous = None if edit else current.settings
        settings = resolve_settings(
            definition.settings, previous, self._interviewer, self._image_dir
        )
        return replace(current, settings=settings, css=definition.render_css(settings))

    def _fetch_css(self, kind: OriginKind, uri: str) -> str:
        if kind is OriginKind.LOCAL:
            return self._sources.read_local(uri)
        return self._sources.fetch_remote(uri)

    # --- target files ---------------------------------------------------------

    @staticmethod
    def _excise(target: str, style_id: int) -> None:
        content = regions.read_target(target)
        if content is None:
            # Nothing on disk means nothing left to remove
            logger.warning("%s does not exist, treating style %d as removed", target, style_id)
            return
        excised = regions.excise(content, style_id)
        if excised != content:
            regions.write_target(target, excised)

    @staticmethod
    def _write_excised(target: str, original: str | None, excised: str) -> None:
        if original is not None and excised != original:
            regions.write_target(target, excised)


def _payload(record: StyleRecord) -> str:
    return regions.wrap_domain(record.css, record.domain)
