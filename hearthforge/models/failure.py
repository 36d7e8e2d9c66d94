"""
Failure classification and response envelope.

Every error a caller can see is classified by a FailureKind and carried
either as a KnownError (raised inside the library) or as an ApiResponse
(returned by the HTTP layer).

Deck code failures:
- MalformedBase64Error: input is not valid base64
- TruncatedInputError: a varint or fixed-offset read ran past the buffer end
- VarintOverflowError: a varint does not fit its field width
- UnsupportedFormatError: the decoded format code is not in the known table

None of these are retried. Decoding is a pure function of its input.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Deck code failures
    MALFORMED_BASE64 = "malformed_base64"
    TRUNCATED_INPUT = "truncated_input"
    VARINT_OVERFLOW = "varint_overflow"
    UNSUPPORTED_FORMAT = "unsupported_format"

    # Unknown
    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


T = TypeVar("T")


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class ApiResponse(BaseModel, Generic[T]):
    """
    Response envelope for the HTTP endpoints.

    Every response is either a success carrying data, or a failure
    carrying a classified explanation.
    """

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    data: T | None = Field(
        default=None,
        description="Response data (present on success)",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on non-success)",
    )

    @classmethod
    def success(cls, data: T) -> "ApiResponse[T]":
        """Create a success response."""
        return cls(outcome=OutcomeType.SUCCESS, data=data)

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse[Any]":
        """
        Create a known failure response.

        Use when the system knows exactly why the operation failed.
        Example: a deck code that ends in the middle of a varint.
        """
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
        )

    @classmethod
    def unknown_failure(cls, detail: str | None = None) -> "ApiResponse[Any]":
        """Create an unknown failure response. The message is fixed."""
        return cls(
            outcome=OutcomeType.UNKNOWN_FAILURE,
            failure=FailureDetail(
                kind=FailureKind.UNKNOWN,
                message="I failed and I don't know why. Try again with a fresh deck code.",
                detail=detail,
                suggestion="If this persists, please report the issue.",
            ),
        )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to an ApiResponse."""
        return ApiResponse.known_failure(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


# =============================================================================
# DECK CODE ERRORS
# =============================================================================

_CHECK_CODE = "Copy the deck code again from the game client and paste it whole."


class DeckCodeError(KnownError):
    """Base class for every failure raised while decoding a deck code."""


class MalformedBase64Error(DeckCodeError):
    """The deck code is not valid standard-alphabet base64."""

    def __init__(self, code: str, reason: str) -> None:
        self.code = code
        super().__init__(
            kind=FailureKind.MALFORMED_BASE64,
            message="The deck code is not valid base64.",
            detail=reason,
            suggestion=_CHECK_CODE,
        )


class TruncatedInputError(DeckCodeError):
    """A read ran past the end of the decoded buffer."""

    def __init__(self, offset: int, length: int) -> None:
        self.offset = offset
        self.length = length
        super().__init__(
            kind=FailureKind.TRUNCATED_INPUT,
            message="The deck code ends too early. It may be incomplete or corrupt.",
            detail=f"Read at offset {offset} past end of {length}-byte buffer",
            suggestion=_CHECK_CODE,
        )


class VarintOverflowError(DeckCodeError):
    """A varint value does not fit the width of the field it encodes."""

    def __init__(self, offset: int, bits: int) -> None:
        self.offset = offset
        self.bits = bits
        super().__init__(
            kind=FailureKind.VARINT_OVERFLOW,
            message="The deck code contains a value that is too large.",
            detail=f"Varint at offset {offset} exceeds {bits} bits",
            suggestion=_CHECK_CODE,
        )


class UnsupportedFormatError(DeckCodeError):
    """The decoded format code is not one of the known game formats."""

    def __init__(self, format_code: int) -> None:
        self.format_code = format_code
        super().__init__(
            kind=FailureKind.UNSUPPORTED_FORMAT,
            message=f"Deck format code {format_code} is not supported.",
            detail=f"Unknown format code: {format_code}",
            suggestion="Use a format override if this is a special game mode.",
        )
