"""Comment and marker models.

Hierarchy:
  MarkerPosition : (x, y) coordinate on a rendered page.
  Marker         : page number plus position; optional anchor of a comment.
  CommentRequest : client-built request to create a comment.
  Comment        : immutable comment record as stored by the document store.
"""

from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from docreview.models.base import WireModel
from docreview.models.document import DocumentReference


class MarkerPosition(WireModel):
    """Normalized coordinate within a page's render surface.

    The valid range belongs to the renderer and is not checked here.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    x: float = Field(strict=True)
    y: float = Field(strict=True)


class Marker(WireModel):
    """Anchors a comment to a location on a specific page."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    page_number: int = Field(alias="pageNumber", gt=0, strict=True)
    position: MarkerPosition


class CommentRequest(WireModel):
    """
    Request payload for creating a comment.

    Built through CommentMapper.build_comment_request(); the server assigns id and timestamp.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    file_id: str = Field(alias="fileId", min_length=1, strict=True)
    file_version: int = Field(alias="fileVersion", ge=0, strict=True)
    comment: str = Field(strict=True)
    marker: Marker | None = None

    @field_validator("file_id", "comment")
    @classmethod
    def _not_blank(cls, value: str, info) -> str:
        # checked on the trimmed value, stored as given
        if not value.strip():
            raise ValueError(f"{info.field_name} must not be blank")
        return value

    def to_payload(self) -> dict:
        """
        Returns the JSON body for the transport.

        The ``marker`` key is only present when a marker was supplied.

        Returns:
            dict: ``{fileId, fileVersion, comment, marker?}``
        """
        payload = {
            "fileId": self.file_id,
            "fileVersion": self.file_version,
            "comment": self.comment,
        }
        if self.marker is not None:
            payload["marker"] = self.marker.to_payload()
        return payload

    @property
    def reference(self) -> DocumentReference:
        """The (file id, file version) pair this request is bound to."""
        return DocumentReference(document_id=self.file_id, file_version=self.file_version)


class Comment(WireModel):
    """
    Represents a single comment record as returned by the document store.

    Comments are never edited in place; a correction is a new comment and a
    resolve returns a fresh record from the server.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    document_id: str | None = Field(default=None, alias="documentId")
    file_id: str = Field(alias="fileId")
    file_version: int = Field(alias="fileVersion", ge=0, strict=True)
    comment: str
    marker: Marker | None = None
    author_id: str | None = Field(default=None, alias="authorId")
    author_name: str | None = Field(default=None, alias="authorName")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    is_resolved: bool = Field(default=False, alias="isResolved")

    @property
    def reference(self) -> DocumentReference:
        return DocumentReference(document_id=self.file_id, file_version=self.file_version)
