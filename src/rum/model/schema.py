"""Schema model: configurable parameters of a catalogue-service style."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum


class SettingType(StrEnum):
    """Known setting types. The service may send others; those display labels."""

    DROPDOWN = "dropdown"
    TEXT = "text"
    COLOR = "color"
    IMAGE = "image"


@dataclass(frozen=True)
class SettingOption:
    """One selectable value of a setting."""

    label: str
    value: str
    default: bool = False


@dataclass(frozen=True)
class StyleSetting:
    """A user-configurable parameter substituted into the style's CSS."""

    install_key: str
    label: str
    setting_type: str
    options: tuple[SettingOption, ...] = ()

    @property
    def placeholder(self) -> str:
        return f"/*[[{self.install_key}]]*/"

    @property
    def allows_custom(self) -> bool:
        """Every type except dropdown accepts a free-form value."""
        return self.setting_type != SettingType.DROPDOWN

    def default_index(self) -> int:
        for index, option in enumerate(self.options):
            if option.default:
                return index
        return 0

    def default_value(self) -> str:
        if not self.options:
            return ""
        return self.options[self.default_index()].value


@dataclass(frozen=True)
class StyleDefinition:
    """A style fetched from the catalogue service: its schema plus CSS template."""

    id: int
    name: str
    css: str
    settings: tuple[StyleSetting, ...] = field(default_factory=tuple)

    def render_css(self, values: Mapping[str, str] | None = None) -> str:
        """Substitute every setting placeholder with its resolved value.

        Settings missing from *values* fall back to their default option.
        """
        values = values or {}
        css = self.css
        for setting in self.settings:
            value = values.get(setting.install_key, setting.default_value())
            css = css.replace(setting.placeholder, value)
        return css
