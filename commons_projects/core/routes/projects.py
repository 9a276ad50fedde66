from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from commons_projects.core.errors import UnknownFieldError, UnsupportedLanguageError
from commons_projects.core.schemas.projects import DraftFieldUpdate
from commons_projects.core.schemas.view import CreationViewState, ProjectListResponse
from commons_projects.core.services.console import ProjectsConsole
from commons_projects.deps import get_console

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post("/activate", response_model=ProjectListResponse)
async def activate_projects_view(console: ProjectsConsole = Depends(get_console)):
    await console.activate()
    return console.projects.cards()


@router.get("", response_model=ProjectListResponse)
async def list_projects(console: ProjectsConsole = Depends(get_console)):
    return console.projects.cards()


@router.get("/dialog", response_model=CreationViewState)
async def get_dialog(console: ProjectsConsole = Depends(get_console)):
    return console.creation.snapshot()


@router.post("/dialog", response_model=CreationViewState)
async def open_dialog(console: ProjectsConsole = Depends(get_console)):
    return console.creation.open_dialog()


@router.delete("/dialog", response_model=CreationViewState)
async def close_dialog(console: ProjectsConsole = Depends(get_console)):
    return console.creation.close_dialog()


@router.patch("/dialog/draft", response_model=CreationViewState)
async def edit_draft(
    payload: DraftFieldUpdate,
    console: ProjectsConsole = Depends(get_console),
):
    try:
        return console.creation.edit_field(payload.field, payload.value)
    except (UnknownFieldError, UnsupportedLanguageError) as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.post("/dialog/submit", response_model=CreationViewState)
async def submit_dialog(console: ProjectsConsole = Depends(get_console)):
    return await console.creation.submit()
