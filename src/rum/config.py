from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RumConfig:
    catalogue_path: str = "~/.config/rum.json"
    profiles_ini: str = "~/.mozilla/firefox/profiles.ini"
    image_dir: str = "/tmp/rum/"  # decoded image previews for settings prompts
    service_url: str = "https://userstyles.org/api/v1"
    http_timeout: float = 30.0

    @property
    def catalogue_file(self) -> Path:
        return Path(self.catalogue_path).expanduser()

    @property
    def profiles_file(self) -> Path:
        return Path(self.profiles_ini).expanduser()
