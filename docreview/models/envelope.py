"""Response envelope returned by the document store around every payload."""

from typing import Any, Generic, TypeVar

from docreview.models.base import WireModel

T = TypeVar("T")


class ApiError(WireModel):
    """
    Error block of a failed envelope.
    """
    code: str
    message: str
    details: Any | None = None


class ApiResponse(WireModel, Generic[T]):
    """
    Represents the envelope ``{status, data, error?}``.

    ``data`` may be missing on error envelopes. Nothing in this model
    interprets ``status``; that is left to the transport layer.
    """
    status: str
    data: T | None = None
    error: ApiError | None = None
