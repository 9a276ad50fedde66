from __future__ import annotations

import logging

from commons_projects.core.errors import NetworkOrServerError
from commons_projects.core.languages import NameLookup, display_name, get_native_name
from commons_projects.core.repositories.project_repo import ProjectRepo
from commons_projects.core.schemas.projects import ProjectCard
from commons_projects.core.schemas.view import ListViewState, ProjectListResponse
from commons_projects.core.services.state import ViewStateStore

logger = logging.getLogger(__name__)


class ProjectListService(ViewStateStore[ListViewState]):
    def __init__(self, repo: ProjectRepo, name_lookup: NameLookup = get_native_name) -> None:
        super().__init__(ListViewState())
        self._repo = repo
        self._name_lookup = name_lookup

    async def load(self) -> ListViewState:
        """Full re-fetch of the collection. Failures are logged, never raised."""
        self._set(loading=True)
        changes = {}
        try:
            projects = await self._repo.list_projects()
            changes["projects"] = tuple(projects)
            logger.debug("Projects loaded: %s", len(projects))
        except NetworkOrServerError:
            logger.exception("Error fetching projects")
        finally:
            self._set(loading=False, **changes)
        return self.snapshot()

    def cards(self) -> ProjectListResponse:
        state = self.snapshot()
        items = [
            ProjectCard.model_validate(
                {
                    **project.model_dump(),
                    "language_name": display_name(project.language, self._name_lookup),
                }
            )
            for project in state.projects
        ]
        return ProjectListResponse(items=items, loading=state.loading)
