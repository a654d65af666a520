"""Catalogue persistence: the JSON document listing every installed style."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from rum.errors import ConfigError
from rum.model.style import Catalogue, OriginKind, StyleRecord

logger = logging.getLogger(__name__)


class CatalogueStore:
    """Loads and overwrites the catalogue file.

    ``write`` is a plain overwrite, not an atomic rename: a failure can leave
    the file truncated, so callers keep an in-memory copy to restore from.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> Catalogue:
        """Read and parse the catalogue file."""
        try:
            content = self._path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ConfigError(f"No catalogue found at {self._path}", cause=exc) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Unable to read catalogue {self._path}: {exc}", cause=exc) from exc

        try:
            data = json.loads(content)
            catalogue = _dict_to_catalogue(data)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid catalogue {self._path}: {exc}", cause=exc) from exc

        logger.debug("Loaded %d style(s) from %s", len(catalogue.styles), self._path)
        return catalogue

    def write(self, catalogue: Catalogue) -> None:
        """Serialise *catalogue* and overwrite the catalogue file."""
        output = json.dumps(_catalogue_to_dict(catalogue), indent=2)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(output + "\n", encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Unable to write catalogue {self._path}: {exc}", cause=exc) from exc
        logger.debug("Wrote %d style(s) to %s", len(catalogue.styles), self._path)


# ---------------------------------------------------------------------------
# Serialisation helpers
# ---------------------------------------------------------------------------


def _catalogue_to_dict(catalogue: Catalogue) -> dict[str, Any]:
    return {
        "chrome_path": catalogue.chrome_path,
        "styles": [_record_to_dict(style) for style in catalogue.styles],
    }


def _record_to_dict(style: StyleRecord) -> dict[str, Any]:
    # css is recomputed on every write and never stored
    return {
        "id": style.id,
        "uri": style.uri,
        "name": style.name,
        "path": style.target_path,
        "enabled": style.enabled,
        "style_type": style.origin_kind.value,
        "domain": style.domain,
        "settings": dict(style.settings),
    }


def _dict_to_catalogue(data: dict[str, Any]) -> Catalogue:
    if not isinstance(data, dict):
        raise TypeError("catalogue root must be an object")
    chrome_path = data["chrome_path"]
    if not isinstance(chrome_path, str):
        raise TypeError("chrome_path must be a string")
    styles = data.get("styles", [])
    if not isinstance(styles, list):
        raise TypeError("styles must be a list")

    records = [_dict_to_record(item) for item in styles]
    ids = [record.id for record in records]
    if len(ids) != len(set(ids)):
        raise ValueError("duplicate style ids")
    return Catalogue(chrome_path=chrome_path, styles=records)


def _dict_to_record(data: dict[str, Any]) -> StyleRecord:
    style_id = data["id"]
    if not isinstance(style_id, int) or isinstance(style_id, bool) or style_id < 0:
        raise ValueError(f"invalid style id {style_id!r}")
    settings = data.get("settings") or {}
    if not isinstance(settings, dict):
        raise TypeError("settings must be an object")
    return StyleRecord(
        id=style_id,
        name=str(data["name"]),
        uri=str(data["uri"]),
        origin_kind=OriginKind(data["style_type"]),
        target_path=str(data["path"]),
        domain=data.get("domain"),
        # Catalogues written before styles could be disabled have no flag
        enabled=bool(data.get("enabled", True)),
        settings={str(k): str(v) for k, v in settings.items()},
    )
