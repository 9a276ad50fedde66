from .projects import (
    DRAFT_FIELDS,
    DraftFieldUpdate,
    LanguageOption,
    Project,
    ProjectCard,
    ProjectDraft,
)
from .view import CreationViewState, ListViewState, ProjectListResponse, SubmitPhase

__all__ = [
    "DRAFT_FIELDS",
    "CreationViewState",
    "DraftFieldUpdate",
    "LanguageOption",
    "ListViewState",
    "Project",
    "ProjectCard",
    "ProjectDraft",
    "ProjectListResponse",
    "SubmitPhase",
]
