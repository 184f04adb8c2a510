"""Asset source served by a remote HTTP blob store."""

from __future__ import annotations

import logging
import urllib.parse
from collections.abc import Iterable
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from typing import Any

import requests

from ..errors import AssetNotFoundError
from ..utils.names import list_children
from .base import AssetInfo, must_get_from

__all__ = ["DEFAULT_MANIFEST", "DEFAULT_TIMEOUT", "HttpSource"]

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST = "manifest.json"
"""Manifest document fetched when no explicit name list is supplied."""

DEFAULT_TIMEOUT = 10.0

_DEFAULT_MODE = 0o444


class HttpSource:
    """Serve assets located below *base_url*.

    Asset names are resolved relative to *base_url*, so with a base of
    ``https://cdn.example.com/assets/`` the name ``ui/logo.png`` is fetched
    from ``https://cdn.example.com/assets/ui/logo.png``.

    The set of names is fixed at construction. It is either passed in via
    *names* or read from a JSON manifest stored next to the assets. The
    manifest may be a plain list of names or an object with a ``"names"``
    list.
    """

    def __init__(
        self,
        base_url: str,
        *,
        names: Iterable[str] | None = None,
        manifest: str = DEFAULT_MANIFEST,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            session.headers.update({"User-Agent": "assetrepo HTTP source"})
        self.session = session
        if names is None:
            names = self._load_manifest(manifest)
        names = set(names)
        for name in names:
            if not self._url_for(name).startswith(self.base_url):
                raise ValueError(
                    f"Asset name {name!r} resolves outside {self.base_url}"
                )
        self._names = tuple(sorted(names))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.base_url!r})"

    def get(self, name: str) -> bytes:
        response = self._request("GET", name)
        return response.content

    def must_get(self, name: str) -> bytes:
        return must_get_from(self, name)

    def names(self) -> list[str]:
        return list(self._names)

    def info(self, name: str) -> AssetInfo:
        response = self._request(
            "HEAD",
            name,
            not_found=f"Asset info for {name} not found",
        )
        headers = response.headers
        return AssetInfo(
            name=name,
            size=int(headers.get("Content-Length") or 0),
            mode=_DEFAULT_MODE,
            modified_at=_parse_last_modified(headers.get("Last-Modified")),
        )

    def dir(self, prefix: str) -> list[str]:
        return list_children(self._names, prefix)

    def _url_for(self, name: str) -> str:
        return urllib.parse.urljoin(self.base_url, urllib.parse.quote(name))

    def _request(
        self,
        method: str,
        name: str,
        *,
        not_found: str | None = None,
    ) -> requests.Response:
        if name not in self._names:
            raise AssetNotFoundError(name, not_found)
        url = self._url_for(name)
        response = self.session.request(method, url, timeout=self.timeout)
        if response.status_code == 404:
            raise AssetNotFoundError(name, not_found)
        response.raise_for_status()
        return response

    def _load_manifest(self, manifest: str) -> list[str]:
        url = urllib.parse.urljoin(self.base_url, manifest)
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        payload: Any = response.json()
        if isinstance(payload, dict):
            payload = payload.get("names", [])
        if not isinstance(payload, list):
            raise ValueError(f"Manifest at {url} must contain a list of asset names")
        logger.debug("Loaded %d asset names from %s", len(payload), url)
        return [str(entry) for entry in payload]


def _parse_last_modified(value: str | None) -> datetime:
    if not value:
        return datetime.fromtimestamp(0, UTC)
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        logger.debug("Ignoring malformed Last-Modified header %r", value)
        return datetime.fromtimestamp(0, UTC)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
