"""Exception types raised by the docreview client."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docreview.models.envelope import ApiError


class ValidationError(ValueError):
    """Raised synchronously for malformed construction inputs.

    Covers empty comment text, negative or non-integer file versions,
    invalid markers, unknown permission tokens and wire payloads that
    do not match their model.
    """


class DocumentStoreError(Exception):
    """Raised by the document store client when a request did not succeed.

    Attributes:
        http_status (int | None): HTTP status code of the response, if any.
        envelope_status (str | None): The envelope ``status`` sentinel, if the body was an envelope.
        api_error (ApiError | None): The parsed ``error`` block of the envelope, if present.
    """

    def __init__(
        self,
        message: str,
        http_status: int | None = None,
        envelope_status: str | None = None,
        api_error: "ApiError | None" = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.envelope_status = envelope_status
        self.api_error = api_error
