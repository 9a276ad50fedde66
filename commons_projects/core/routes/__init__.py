from .languages import router as languages_router
from .projects import router as projects_router

__all__ = ["languages_router", "projects_router"]
