from .commons_repo import CommonsRepo
from .project_repo import ProjectRepo

__all__ = ["CommonsRepo", "ProjectRepo"]
