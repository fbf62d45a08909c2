"""Domain errors. Messages are user-safe and in Italian, as shown on the site."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    IMPORT_INVALID = "IMPORT_INVALID"
    IMPORT_EMPTY = "IMPORT_EMPTY"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    DUPLICATE_EVENT_ID = "DUPLICATE_EVENT_ID"
    EVENT_INVALID = "EVENT_INVALID"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return self.message


class BulkImportError(DomainError):
    """Raised when a block of the bulk-import text misses required fields."""

    def __init__(self, block_index: int, missing_fields: list[str]) -> None:
        super().__init__(
            code=ErrorCode.IMPORT_INVALID,
            message=(
                f"Errore nell'evento {block_index}: "
                f"Evento {block_index}: Campi mancanti: {', '.join(missing_fields)}"
            ),
        )
        self.block_index = block_index
        self.missing_fields = list(missing_fields)


class NothingToImportError(DomainError):
    """Raised when the import text holds no event blocks at all."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.IMPORT_EMPTY,
            message="Nessun evento trovato nel testo inserito",
        )


class InvalidCredentialsError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CREDENTIALS,
            message="Credenziali non valide",
        )


class NotAuthenticatedError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_AUTHENTICATED,
            message="Accesso richiesto per modificare gli eventi",
        )


class EventNotFoundError(DomainError):
    """Raised when an edit or delete names an id not in the collection."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message=f"Evento non trovato: {event_id}",
        )
        self.event_id = event_id


class DuplicateEventIdError(DomainError):
    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_EVENT_ID,
            message=f"Esiste già un evento con id {event_id}",
        )
        self.event_id = event_id


class InvalidEventError(DomainError):
    """Raised when an added or edited event leaves required fields blank."""

    def __init__(self, missing_fields: list[str]) -> None:
        super().__init__(
            code=ErrorCode.EVENT_INVALID,
            message=f"Campi obbligatori mancanti: {', '.join(missing_fields)}",
        )
        self.missing_fields = list(missing_fields)
