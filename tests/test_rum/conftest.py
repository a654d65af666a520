from __future__ import annotations

import pytest

from rum.catalogue import CatalogueStore
from rum.errors import FileAccessError, NotFoundError, RumError
from rum.interviewer import QueueInterviewer, RecordingInterviewer
from rum.lifecycle import LifecycleEngine
from rum.model.schema import SettingOption, StyleDefinition, StyleSetting
from rum.model.style import Catalogue


class FakeSources:
    """In-memory StyleFetcher: local files, URLs and catalogue definitions."""

    def __init__(self) -> None:
        self.local: dict[str, str] = {}
        self.remote: dict[str, str] = {}
        self.definitions: dict[int, StyleDefinition] = {}
        self.fail_with: RumError | None = None
        self.calls: list[tuple[str, object]] = []

    def read_local(self, path: str) -> str:
        self.calls.append(("local", path))
        self._maybe_fail()
        try:
            return self.local[path]
        except KeyError:
            raise FileAccessError(f"Unable to read {path}", path=path) from None

    def fetch_remote(self, url: str) -> str:
        self.calls.append(("remote", url))
        self._maybe_fail()
        try:
            return self.remote[url]
        except KeyError:
            raise NotFoundError(f"{url} not found") from None

    def fetch_definition(self, style_id: int) -> StyleDefinition:
        self.calls.append(("definition", style_id))
        self._maybe_fail()
        try:
            return self.definitions[style_id]
        except KeyError:
            raise NotFoundError(f"styles/{style_id} not found") from None

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with


@pytest.fixture
def chrome_dir(tmp_path):
    path = tmp_path / "profile" / "chrome"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def store(tmp_path, chrome_dir) -> CatalogueStore:
    """A catalogue store with an empty catalogue already on disk."""
    catalogue_store = CatalogueStore(tmp_path / "rum.json")
    catalogue_store.write(Catalogue(chrome_path=str(chrome_dir)))
    return catalogue_store


@pytest.fixture
def sources() -> FakeSources:
    return FakeSources()


@pytest.fixture
def accent_style() -> StyleDefinition:
    """A catalogue style with one color and one dropdown setting."""
    return StyleDefinition(
        id=146771,
        name="Allo Dark",
        css="a { color: /*[[ACCENTCOLOR]]*/; }\n.convo { /*[[CONVOBG]]*/ }",
        settings=(
            StyleSetting(
                install_key="ACCENTCOLOR",
                label="Accent color",
                setting_type="color",
                options=(
                    SettingOption(label="Green", value="#0F9D58", default=True),
                    SettingOption(label="Red", value="#ff0000"),
                ),
            ),
            StyleSetting(
                install_key="CONVOBG",
                label="Conversation background",
                setting_type="dropdown",
                options=(
                    SettingOption(label="None", value="background-image: none;", default=True),
                    SettingOption(label="Dots", value="background-image: url(dots.png);"),
                ),
            ),
        ),
    )


@pytest.fixture
def make_engine(store, sources, tmp_path):
    """Return a factory building an engine that answers prompts from *lines*."""

    def factory(*lines: str) -> tuple[LifecycleEngine, RecordingInterviewer]:
        interviewer = RecordingInterviewer(QueueInterviewer(lines))
        engine = LifecycleEngine(store, sources, interviewer, image_dir=tmp_path / "images")
        return engine, interviewer

    return factory
