"""Client for the userstyles catalogue service (API v1)."""

from __future__ import annotations

import logging
from typing import Any

from rum.errors import ParseError
from rum.model.schema import SettingOption, StyleDefinition, StyleSetting
from rum.sources.http import HttpClient

logger = logging.getLogger(__name__)


class UserstylesClient:
    """Fetches style definitions (schema + CSS template) by numeric id."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def get_style(self, style_id: int) -> StyleDefinition:
        resp = self._http.get(f"styles/{style_id}")
        payload = resp.json()
        try:
            definition = parse_definition(style_id, payload)
        except (KeyError, TypeError, ValueError) as exc:
            raise ParseError(f"Malformed style {style_id}: {exc}", cause=exc) from exc
        logger.info(
            "Fetched style %d (%s) with %d setting(s)",
            style_id,
            definition.name,
            len(definition.settings),
        )
        return definition


def parse_definition(style_id: int, payload: dict[str, Any]) -> StyleDefinition:
    """Build a :class:`StyleDefinition` from a ``styles/<id>`` response body."""
    if not isinstance(payload, dict):
        raise TypeError("style payload must be an object")
    settings = tuple(
        _parse_setting(item) for item in payload.get("style_settings") or []
    )
    return StyleDefinition(
        id=style_id,
        name=str(payload["name"]),
        css=str(payload["css"]),
        settings=settings,
    )


def _parse_setting(item: dict[str, Any]) -> StyleSetting:
    if not isinstance(item, dict):
        raise TypeError(f"style setting must be an object, got {item!r}")
    options = tuple(
        _parse_option(opt) for opt in item.get("style_setting_options") or []
    )
    return StyleSetting(
        install_key=str(item["install_key"]),
        label=str(item.get("label", "")),
        setting_type=str(item.get("setting_type", "")),
        options=options,
    )


def _parse_option(opt: dict[str, Any]) -> SettingOption:
    if not isinstance(opt, dict):
        raise TypeError(f"setting option must be an object, got {opt!r}")
    return SettingOption(
        label=str(opt.get("label", "")),
        value=str(opt.get("value", "")),
        default=bool(opt.get("default", False)),
    )
