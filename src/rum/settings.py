"""Settings resolution: turn a style's parameter schema into concrete values."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from rum._base64 import decode_png_data_uri, is_png_data_uri
from rum.interviewer.base import Interviewer
from rum.model.schema import SettingType, StyleSetting
from rum.prompts import read_choice, read_custom

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_DIR = "/tmp/rum/"


def display_options(setting: StyleSetting, image_dir: str | Path = DEFAULT_IMAGE_DIR) -> list[str]:
    """Return the human-readable entry shown for each option of *setting*.

    Text and color options show their value. Inline PNG images are written
    to *image_dir* so the user can look at them; the entry then names the
    file. Every other type shows the option label.
    """
    labels = []
    for option in setting.options:
        if setting.setting_type in (SettingType.TEXT, SettingType.COLOR):
            labels.append(option.value)
        elif setting.setting_type == SettingType.IMAGE:
            labels.append(_image_label(option.label, option.value, Path(image_dir)))
        else:
            labels.append(option.label)
    return labels


def _image_label(label: str, value: str, image_dir: Path) -> str:
    if not is_png_data_uri(value):
        return value
    try:
        data = decode_png_data_uri(value)
    except ValueError:
        logger.debug("Option %r has an undecodable image payload", label)
        return value

    path = image_dir / label.replace("/", "_")
    try:
        image_dir.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as exc:
        logger.debug("Unable to write preview %s: %s", path, exc)
        return value
    return f"{label} ({path})"


def resolve_setting(
    setting: StyleSetting,
    interviewer: Interviewer,
    image_dir: str | Path = DEFAULT_IMAGE_DIR,
) -> str:
    """Prompt for one setting and return the chosen value."""
    if not setting.options and not setting.allows_custom:
        return ""

    labels = display_options(setting, image_dir)
    choice = read_choice(
        interviewer,
        f"[{setting.setting_type}] {setting.label}:",
        labels,
        setting.default_index(),
        setting.allows_custom,
    )
    if choice == len(setting.options):
        return read_custom(interviewer)
    return setting.options[choice].value


def resolve_settings(
    settings: Sequence[StyleSetting],
    previous: Mapping[str, str] | None,
    interviewer: Interviewer,
    image_dir: str | Path = DEFAULT_IMAGE_DIR,
) -> dict[str, str]:
    """Resolve every setting in schema order.

    Values already present in *previous* are reused without prompting, which
    is how an update keeps earlier choices. Keys in *previous* that the
    schema no longer has are dropped.
    """
    previous = previous or {}
    resolved: dict[str, str] = {}
    for setting in settings:
        if setting.install_key in previous:
            resolved[setting.install_key] = previous[setting.install_key]
            continue
        resolved[setting.install_key] = resolve_setting(setting, interviewer, image_dir)
        logger.debug("Resolved %s = %r", setting.install_key, resolved[setting.install_key])
    return resolved
