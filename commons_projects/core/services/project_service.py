from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Optional

from commons_projects.core.errors import (
    NetworkOrServerError,
    UnknownFieldError,
    UnsupportedLanguageError,
)
from commons_projects.core.languages import is_supported_language
from commons_projects.core.repositories.project_repo import ProjectRepo
from commons_projects.core.schemas.projects import DRAFT_FIELDS, ProjectDraft
from commons_projects.core.schemas.view import CreationViewState, SubmitPhase
from commons_projects.core.services.state import ViewStateStore
from commons_projects.core.services.validation_service import DraftValidator

logger = logging.getLogger(__name__)

OnCreated = Callable[[], Awaitable[Any]]


class ProjectCreationService(ViewStateStore[CreationViewState]):
    """Creation dialog: draft editing, validation and the create request.

    Transitions::

        IDLE -> VALIDATING -> IDLE                  (validation errors)
        IDLE -> VALIDATING -> SUBMITTING -> SUCCEEDED  (dialog closes, list refreshes)
        IDLE -> VALIDATING -> SUBMITTING -> FAILED -> IDLE
        VALIDATING | SUBMITTING -> IDLE             (unexpected exception, re-raised)

    A create failure is logged only. No field error is attributed and the dialog
    stays open without an explanation.
    """

    def __init__(
        self,
        repo: ProjectRepo,
        validator: DraftValidator,
        on_created: Optional[OnCreated] = None,
    ) -> None:
        super().__init__(CreationViewState())
        self._repo = repo
        self._validator = validator
        self._on_created = on_created

    def open_dialog(self) -> CreationViewState:
        # a pending attempt keeps its phase so the submit control stays disabled
        phase = self._state.phase if self._state.busy else SubmitPhase.IDLE
        self._set(dialog_open=True, draft=ProjectDraft(), errors={}, phase=phase)
        return self.snapshot()

    def close_dialog(self) -> CreationViewState:
        self._set(dialog_open=False)
        return self.snapshot()

    def edit_field(self, field: str, value: str) -> CreationViewState:
        """Set one draft field and drop that field's error, valid value or not."""
        if field not in DRAFT_FIELDS:
            raise UnknownFieldError(field)
        if field == "language" and not is_supported_language(value):
            raise UnsupportedLanguageError(value)

        draft = self._state.draft.model_copy(update={field: value})
        errors = {name: msg for name, msg in self._state.errors.items() if name != field}
        self._set(draft=draft, errors=errors)
        return self.snapshot()

    async def submit(self) -> CreationViewState:
        if not self._state.can_submit:
            logger.debug(
                "Submit ignored (dialog_open=%s, phase=%s)",
                self._state.dialog_open,
                self._state.phase.value,
            )
            return self.snapshot()

        draft = self._state.draft
        self._set(phase=SubmitPhase.VALIDATING)
        try:
            return await self._attempt(draft)
        finally:
            # an attempt that raised must not leave the submit control disabled
            if self._state.busy:
                self._set(phase=SubmitPhase.IDLE)

    async def _attempt(self, draft: ProjectDraft) -> CreationViewState:
        errors = await self._validator.validate(draft)
        if self.torn_down:
            return self.snapshot()
        if errors:
            self._set(errors=errors, phase=SubmitPhase.IDLE)
            logger.info("Project draft rejected: %s", sorted(errors))
            return self.snapshot()

        self._set(errors={}, phase=SubmitPhase.SUBMITTING)
        try:
            await self._repo.create_project(draft)
        except NetworkOrServerError:
            logger.exception("Error creating project")
            self._set(phase=SubmitPhase.FAILED)
            self._set(phase=SubmitPhase.IDLE)
            return self.snapshot()

        if not self._set(phase=SubmitPhase.SUCCEEDED, dialog_open=False):
            return self.snapshot()
        logger.info("Project created: %r (%s)", draft.title, draft.language)
        if self._on_created is not None:
            await self._on_created()
        return self.snapshot()
