"""
Conversion failure classification.

Every failure that can stop a conversion run is one of a small set of
known kinds. None of them is retried and none is downgraded to partial
output: a collection is either converted completely or not at all.

Library code raises these; only the CLI entry point catches them,
logs the diagnostic and exits non-zero.
"""

from enum import Enum


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input failures
    INPUT_UNREADABLE = "input_unreadable"
    MALFORMED_ROW = "malformed_row"

    # Lookup failures
    EXTERNAL_API_ERROR = "external_api_error"
    UNRESOLVED_IDENTIFIER = "unresolved_identifier"

    # Output failures
    OUTPUT_UNWRITABLE = "output_unwritable"


class ConversionError(Exception):
    """
    Base class for known, explainable conversion failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    kind: FailureKind

    def __init__(self, message: str, detail: str | None = None):
        self.message = message
        self.detail = detail
        super().__init__(message)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message


class InputUnreadableError(ConversionError):
    """Raised when the collection export cannot be read."""

    kind = FailureKind.INPUT_UNREADABLE


class MalformedRowError(ConversionError):
    """Raised when a collection row does not match the fixed column schema."""

    kind = FailureKind.MALFORMED_ROW

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        detail: str | None = None,
    ):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message, detail)


class ScryfallError(ConversionError):
    """Raised when the Scryfall lookup request fails."""

    kind = FailureKind.EXTERNAL_API_ERROR


class UnresolvedCardError(ConversionError):
    """
    Raised when a multiverse id expected to resolve has no Scryfall card.

    The id passed the placeholder check, so Scryfall should know it.
    Dropping the row would silently shrink the user's collection.
    """

    kind = FailureKind.UNRESOLVED_IDENTIFIER

    def __init__(self, mvid: int):
        self.mvid = mvid
        super().__init__(f"Scryfall returned no card for multiverse id {mvid}")


class OutputUnwritableError(ConversionError):
    """Raised when an output CSV cannot be written."""

    kind = FailureKind.OUTPUT_UNWRITABLE
