from __future__ import annotations

import logging

import httpx

from commons_projects.core.repositories.commons_repo import CommonsRepo
from commons_projects.core.repositories.project_repo import ProjectRepo
from commons_projects.core.schemas.view import ListViewState
from commons_projects.core.services.list_service import ProjectListService
from commons_projects.core.services.project_service import ProjectCreationService
from commons_projects.core.services.validation_service import CommonsPageService, DraftValidator
from commons_projects.settings.config import Settings

logger = logging.getLogger(__name__)


class ProjectsConsole:
    """The projects view: list loader plus creation dialog, wired together.

    The two halves hold independent state. The only coupling is that a
    successful creation triggers one list reload.
    """

    def __init__(self, project_repo: ProjectRepo, commons_repo: CommonsRepo) -> None:
        self.projects = ProjectListService(project_repo)
        self.creation = ProjectCreationService(
            project_repo,
            DraftValidator(CommonsPageService(commons_repo)),
            on_created=self.projects.load,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        backend_transport: httpx.AsyncBaseTransport | None = None,
        commons_transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ProjectsConsole":
        return cls(
            ProjectRepo(
                settings.BACKEND_BASE_URL,
                timeout=settings.HTTP_TIMEOUT,
                transport=backend_transport,
            ),
            CommonsRepo(
                settings.COMMONS_API_URL,
                timeout=settings.HTTP_TIMEOUT,
                transport=commons_transport,
            ),
        )

    async def activate(self) -> ListViewState:
        return await self.projects.load()

    def teardown(self) -> None:
        logger.info("Projects console torn down; pending responses will be discarded")
        self.projects.teardown()
        self.creation.teardown()
