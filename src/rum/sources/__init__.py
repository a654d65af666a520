"""Where style CSS comes from: local files, plain URLs and the userstyles service."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

from rum.errors import FileAccessError
from rum.model.schema import StyleDefinition
from rum.sources.http import HttpClient, HttpResponse
from rum.sources.userstyles import UserstylesClient, parse_definition


class StyleFetcher(Protocol):
    """Everything the lifecycle engine needs to obtain a style's CSS."""

    def read_local(self, path: str) -> str: ...

    def fetch_remote(self, url: str) -> str: ...

    def fetch_definition(self, style_id: int) -> StyleDefinition: ...


class StyleSources:
    """Default :class:`StyleFetcher` backed by the filesystem and httpx."""

    def __init__(
        self,
        service_url: str = "https://userstyles.org/api/v1",
        timeout: float = 30.0,
        http: HttpClient | None = None,
        service_http: HttpClient | None = None,
    ) -> None:
        self._http = http or HttpClient(timeout=timeout)
        self._service_http = service_http or HttpClient(
            base_url=service_url.rstrip("/") + "/", timeout=timeout
        )
        self._userstyles = UserstylesClient(self._service_http)

    def read_local(self, path: str) -> str:
        file_path = Path(path).expanduser()
        try:
            return file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FileAccessError(
                f"Unable to read {file_path}: {exc}", path=str(file_path), cause=exc
            ) from exc

    def fetch_remote(self, url: str) -> str:
        return self._http.get(url).text

    def fetch_definition(self, style_id: int) -> StyleDefinition:
        return self._userstyles.get_style(style_id)

    def close(self) -> None:
        """Close both HTTP clients."""
        self._http.close()
        self._service_http.close()

    def __enter__(self) -> StyleSources:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


__all__ = [
    "HttpClient",
    "HttpResponse",
    "StyleFetcher",
    "StyleSources",
    "UserstylesClient",
    "parse_definition",
]
