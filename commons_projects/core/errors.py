from __future__ import annotations


class ProjectsError(Exception):
    """Base class for errors raised by the projects console."""


class FieldValidationError(ProjectsError):
    """A single Draft field failed validation; shown inline next to the field."""

    code = "invalid"
    default_message = "Invalid value."

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        self.message = message or self.default_message
        super().__init__(f"{field}: {self.message}")


class RequiredFieldError(FieldValidationError):
    code = "required"
    default_message = "This field is required."


class MalformedUrlError(FieldValidationError):
    code = "malformed"
    default_message = "Must be a valid Wikimedia Commons page URL."


class RemoteNotFoundError(FieldValidationError):
    code = "not_found"
    default_message = "The Wikimedia Commons page does not exist."


class NetworkOrServerError(ProjectsError, RuntimeError):
    """Transport failure, non-success status or unreadable body from a remote API.

    Never rendered to the user. Callers log it and fall back to an empty list or
    leave the dialog open.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class UnknownFieldError(ProjectsError, KeyError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(field)

    def __str__(self) -> str:
        return f"Unknown draft field: {self.field!r}"


class UnsupportedLanguageError(ProjectsError, ValueError):
    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"Unsupported language code: {language!r}")
