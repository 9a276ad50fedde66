from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

from commons_projects.core.schemas.projects import Project, ProjectCard, ProjectDraft


class SubmitPhase(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    FAILED = "failed"
    SUCCEEDED = "succeeded"


class ViewModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class ListViewState(ViewModel):
    projects: tuple[Project, ...] = ()
    loading: bool = False


class CreationViewState(ViewModel):
    dialog_open: bool = False
    draft: ProjectDraft = Field(default_factory=ProjectDraft)
    errors: dict[str, str] = Field(default_factory=dict)
    phase: SubmitPhase = SubmitPhase.IDLE

    @computed_field
    @property
    def submitting(self) -> bool:
        return self.phase is SubmitPhase.SUBMITTING

    @computed_field
    @property
    def busy(self) -> bool:
        return self.phase in (SubmitPhase.VALIDATING, SubmitPhase.SUBMITTING)

    @computed_field
    @property
    def can_submit(self) -> bool:
        return self.dialog_open and self.phase in (SubmitPhase.IDLE, SubmitPhase.FAILED)


class ProjectListResponse(BaseModel):
    items: list[ProjectCard]
    loading: bool
