from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Any, Dict, Optional
from urllib.parse import unquote

from commons_projects.core.errors import (
    FieldValidationError,
    MalformedUrlError,
    NetworkOrServerError,
    RemoteNotFoundError,
    RequiredFieldError,
)
from commons_projects.core.repositories.commons_repo import CommonsRepo
from commons_projects.core.schemas.projects import ProjectDraft

logger = logging.getLogger(__name__)

COMMONS_PAGE_PREFIX = "https://commons.wikimedia.org/wiki/"
COMMONS_PAGE_RE = re.compile(re.escape(COMMONS_PAGE_PREFIX) + r"(.+)")

TITLE_REQUIRED = "Title is required."
COMMONS_URL_REQUIRED = "Commons File Page URL is required."


class CommonsPageStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"


def commons_page_title(url: str) -> Optional[str]:
    """Page title from a Commons page URL, or None if the URL does not match.

    The suffix is percent-decoded so that ``File:A%20b.jpg`` and
    ``File:A b.jpg`` name the same page.
    """
    match = COMMONS_PAGE_RE.fullmatch(url)
    if not match:
        return None
    return unquote(match.group(1))


def page_status(data: Dict[str, Any]) -> CommonsPageStatus:
    query = data.get("query")
    pages = query.get("pages") if isinstance(query, dict) else None
    if not isinstance(pages, dict) or not pages:
        return CommonsPageStatus.NOT_FOUND

    # a single title was queried, so only the first entry matters
    page = next(iter(pages.values()))
    if not isinstance(page, dict) or "missing" in page:
        return CommonsPageStatus.NOT_FOUND
    return CommonsPageStatus.FOUND


class CommonsPageService:
    def __init__(self, repo: CommonsRepo) -> None:
        self._repo = repo

    async def lookup(self, url: str) -> CommonsPageStatus:
        """Existence check that fails closed: any error reads as NOT_FOUND."""
        title = commons_page_title(url)
        if title is None:
            return CommonsPageStatus.NOT_FOUND

        try:
            data = await self._repo.query_page_info(title)
        except NetworkOrServerError as exc:
            logger.warning("Commons page check failed for %r: %s", title, exc)
            return CommonsPageStatus.NOT_FOUND

        status = page_status(data)
        logger.debug("Commons page %r: %s", title, status.value)
        return status


def validate_title(title: str) -> None:
    if not title.strip():
        raise RequiredFieldError("title", TITLE_REQUIRED)


def validate_commons_url(url: str) -> None:
    if not url.strip():
        raise RequiredFieldError("commons_url", COMMONS_URL_REQUIRED)
    if commons_page_title(url) is None:
        raise MalformedUrlError("commons_url")


class DraftValidator:
    """Two-stage Draft validation.

    Stage 1 checks every field synchronously. Stage 2 asks Commons whether the
    ``commons_url`` page exists, and is skipped when stage 1 reported any error.
    """

    def __init__(self, pages: CommonsPageService) -> None:
        self._pages = pages

    def validate_structure(self, draft: ProjectDraft) -> Dict[str, str]:
        errors: Dict[str, str] = {}
        for check, value in (
            (validate_title, draft.title),
            (validate_commons_url, draft.commons_url),
        ):
            try:
                check(value)
            except FieldValidationError as exc:
                errors[exc.field] = exc.message
        return errors

    async def validate(self, draft: ProjectDraft) -> Dict[str, str]:
        errors = self.validate_structure(draft)
        if errors:
            return errors

        status = await self._pages.lookup(draft.commons_url)
        if status is CommonsPageStatus.NOT_FOUND:
            exc = RemoteNotFoundError("commons_url")
            errors[exc.field] = exc.message
        return errors
