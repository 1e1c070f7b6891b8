"""Document models.

Hierarchy:
  DocumentReference : the (document id, file version) pair a comment is bound to.
  Document          : document record as returned by the document store.
"""

from datetime import datetime
from enum import Enum

from pydantic import ConfigDict, Field

from docreview.models.base import WireModel


class DocumentStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    DECLINED = "Declined"


class DocumentReference(WireModel):
    """Identifies one version of a document.

    Every annotation is bound to this pair, never to the document alone.
    Frozen, so a reference can not be re-anchored to a newer version once observed.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    document_id: str = Field(alias="documentId", min_length=1)
    file_version: int = Field(alias="fileVersion", ge=0, strict=True)


class Document(WireModel):
    """
    Represents a single document with its metadata, as returned by the document store.
    """
    id: str
    title: str
    content: str | None = None
    status: DocumentStatus
    filename: str | None = None
    updated_date: datetime | None = Field(default=None, alias="updatedDate")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
