from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from commons_projects import __version__
from commons_projects.settings.config import Settings, get_settings
from commons_projects.settings.logging import setup_logging
from commons_projects.core.routes.languages import router as languages_router
from commons_projects.core.routes.projects import router as projects_router
from commons_projects.core.services.console import ProjectsConsole


def create_app(settings: Settings | None = None, console: ProjectsConsole | None = None) -> FastAPI:
    settings = settings or get_settings()

    setup_logging(log_level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.console = console or ProjectsConsole.from_settings(settings)
        yield
        app.state.console.teardown()

    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        debug=settings.DEBUG,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.DEBUG else ["localhost"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(projects_router)
    app.include_router(languages_router)

    # Health
    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "ok", "env": settings.APP_ENV}

    return app


app = create_app()
