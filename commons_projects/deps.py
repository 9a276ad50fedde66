from fastapi import Request

from commons_projects.core.services.console import ProjectsConsole


async def get_console(request: Request) -> ProjectsConsole:
    return request.app.state.console
