"""BaseService — shared foundation for services that talk to OneSky.

Every such service receives a :class:`ProjectClient` at construction time.
Tests pass an in-memory fake; the CLI passes :class:`OneSkyClient`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from skysync.infrastructure.client import ProjectClient


class BaseService:
    """Base for service-layer classes backed by a remote project.

    Usage::

        class SyncService(BaseService):
            def upload(self, string_root: Path) -> ServiceResult:
                response = self._client.upload_file(...)
    """

    def __init__(self, client: ProjectClient) -> None:
        self._client = client
