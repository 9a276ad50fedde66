from .console import ProjectsConsole
from .list_service import ProjectListService
from .project_service import ProjectCreationService
from .validation_service import CommonsPageService, CommonsPageStatus, DraftValidator

__all__ = [
    "CommonsPageService",
    "CommonsPageStatus",
    "DraftValidator",
    "ProjectCreationService",
    "ProjectListService",
    "ProjectsConsole",
]
