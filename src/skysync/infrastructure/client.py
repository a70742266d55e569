"""OneSky Platform API client (v1).

Only the three calls the sync needs are implemented.  Transport policy
(timeouts, redirects) is centralised in :func:`build_http_client`; there
is no retry.  Non-2xx responses are returned, not raised, so callers
decide what a failed export means; transport failures raise
:class:`RemoteUnavailableError`.
"""

from __future__ import annotations

import hashlib
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

import httpx

from skysync.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://platform.api.onesky.io/1"


class RemoteUnavailableError(RuntimeError):
    """The OneSky API could not be reached (connection, timeout, protocol)."""


@dataclass(frozen=True)
class ClientResponse:
    """Status code and decoded body of a OneSky response."""

    code: int
    body: str = ""

    @property
    def ok(self) -> bool:
        """Only a 200 carries a usable export body."""
        return self.code == 200


class ProjectClient(Protocol):
    """The remote operations the sync orchestrator relies on."""

    def upload_file(
        self, path: Path, *, file_format: str, is_keeping_all_strings: bool
    ) -> ClientResponse: ...

    def export_translation(self, *, source_file_name: str, locale: str) -> ClientResponse: ...

    def list_languages(self) -> ClientResponse: ...


def build_http_client(*, base_url: str, timeout: float) -> httpx.Client:
    """Create an ``httpx.Client`` with the project's transport defaults."""
    return httpx.Client(
        base_url=base_url,
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        headers={"User-Agent": "skysync"},
    )


class OneSkyClient:
    """Project-scoped OneSky client.

    Every request is signed with ``api_key``, a ``timestamp`` and
    ``dev_hash = md5(timestamp + api_secret)``.

    Args:
        api_key: Public API key.
        api_secret: Secret used only to compute ``dev_hash``.
        project_id: OneSky project the string files belong to.
        http: Optional pre-built ``httpx.Client`` (tests inject a
            ``MockTransport`` here).
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        project_id: str | int,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        http: httpx.Client | None = None,
    ) -> None:
        missing = [
            name
            for name, value in (
                ("api_key", api_key),
                ("api_secret", api_secret),
                ("project_id", project_id),
            )
            if not value
        ]
        if missing:
            msg = f"Missing OneSky credentials: {', '.join(missing)}"
            raise ConfigurationError(msg)

        self._api_key = api_key
        self._api_secret = api_secret
        self._project_id = str(project_id)
        self._http = http or build_http_client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> OneSkyClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _auth_params(self) -> dict[str, str]:
        timestamp = str(int(time.time()))
        dev_hash = hashlib.md5((timestamp + self._api_secret).encode("utf-8")).hexdigest()
        return {"api_key": self._api_key, "timestamp": timestamp, "dev_hash": dev_hash}

    def _project_url(self, resource: str) -> str:
        return f"/projects/{self._project_id}/{resource}"

    def _send(self, method: str, resource: str, **kwargs: Any) -> ClientResponse:
        try:
            response = self._http.request(method, self._project_url(resource), **kwargs)
        except httpx.HTTPError as exc:
            msg = f"OneSky request failed: {method} {resource}: {exc}"
            raise RemoteUnavailableError(msg) from exc
        logger.debug("%s %s -> %s", method, resource, response.status_code)
        return ClientResponse(code=response.status_code, body=response.text)

    # --- Operations ---

    def upload_file(
        self, path: Path, *, file_format: str, is_keeping_all_strings: bool
    ) -> ClientResponse:
        """``POST /projects/{id}/files`` — upload one base-language file."""
        data: dict[str, Any] = {
            **self._auth_params(),
            "file_format": file_format,
            "is_keeping_all_strings": str(is_keeping_all_strings).lower(),
        }
        with path.open("rb") as fh:
            files = {"file": (path.name, fh, "application/x-yaml")}
            return self._send("POST", "files", data=data, files=files)

    def export_translation(self, *, source_file_name: str, locale: str) -> ClientResponse:
        """``GET /projects/{id}/translations`` — one file in one locale.

        OneSky answers 202 while the export is still being generated and
        204 when the file has no translations yet.
        """
        params = {**self._auth_params(), "source_file_name": source_file_name, "locale": locale}
        return self._send("GET", "translations", params=params)

    def list_languages(self) -> ClientResponse:
        """``GET /projects/{id}/languages`` — languages enabled on the project."""
        return self._send("GET", "languages", params=self._auth_params())
