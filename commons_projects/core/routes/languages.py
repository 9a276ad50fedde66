from __future__ import annotations

from fastapi import APIRouter

from commons_projects.core.languages import language_options
from commons_projects.core.schemas.projects import LanguageOption

router = APIRouter(prefix="/languages", tags=["languages"])


@router.get("", response_model=list[LanguageOption])
async def list_languages():
    return language_options()
