from __future__ import annotations

import logging
from typing import Any, Sequence

import httpx
from pydantic import ValidationError

from commons_projects.core.errors import NetworkOrServerError
from commons_projects.core.schemas.projects import Project, ProjectDraft
from commons_projects.settings.config import get_settings

logger = logging.getLogger(__name__)

PROJECTS_PATH = "/api/project"


class ProjectRepo:
    """Client for the REST backend that stores projects."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        s = get_settings()
        self._base_url = (base_url or s.BACKEND_BASE_URL).rstrip("/")
        self._timeout = timeout if timeout is not None else s.HTTP_TIMEOUT
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    def _url(self) -> str:
        return f"{self._base_url}{PROJECTS_PATH}"

    async def list_projects(self) -> Sequence[Project]:
        try:
            async with self._client() as client:
                resp = await client.get(self._url())
        except httpx.HTTPError as exc:
            raise NetworkOrServerError(f"Project list request failed: {exc}") from exc

        if not resp.is_success:
            raise NetworkOrServerError(
                f"Project list failed: {resp.status_code} {resp.text}",
                status_code=resp.status_code,
            )

        try:
            rows: Any = resp.json()
        except ValueError as exc:
            raise NetworkOrServerError(f"Project list response is invalid: {exc}") from exc
        if not isinstance(rows, list):
            raise NetworkOrServerError(
                f"Project list response is invalid: expected a JSON array, got {type(rows).__name__}"
            )

        projects = []
        for index, row in enumerate(rows):
            try:
                projects.append(Project.model_validate(row))
            except ValidationError as exc:
                # one bad record must not hide the rest of the list
                logger.warning("Skipping project row %s: %s", index, exc)
        return projects

    async def create_project(self, draft: ProjectDraft) -> None:
        """Send the draft verbatim; only the status of the response matters."""
        try:
            async with self._client() as client:
                resp = await client.post(self._url(), json=draft.model_dump())
        except httpx.HTTPError as exc:
            raise NetworkOrServerError(f"Project create request failed: {exc}") from exc

        if not resp.is_success:
            raise NetworkOrServerError(
                f"Project create failed: {resp.status_code} {resp.text}",
                status_code=resp.status_code,
            )
