from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from commons_projects.core.languages import DEFAULT_LANGUAGE, LanguageCode


class Project(BaseModel):
    """A project record as returned by ``GET /api/project``; extra keys are kept."""

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str | int | None = None
    title: str | None = None
    language: str | None = None
    commons_url: str | None = None


class ProjectDraft(BaseModel):
    """Unsaved creation form buffer; doubles as the ``POST /api/project`` body."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    commons_url: str = ""
    language: LanguageCode = DEFAULT_LANGUAGE


DRAFT_FIELDS: tuple[str, ...] = tuple(ProjectDraft.model_fields)


class ProjectCard(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | int | None = None
    title: str | None = None
    language: str | None = None
    language_name: str
    commons_url: str | None = None


class LanguageOption(BaseModel):
    code: str
    name: str
    default: bool = False


class DraftFieldUpdate(BaseModel):
    field: str = Field(min_length=1)
    value: str
