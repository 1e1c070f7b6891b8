"""Permission overlay models.

PermissionLevel is an ordered scale: every level implies all capabilities
of the levels below it. Comparisons go through PERMISSION_RANKS.
"""

from enum import Enum

from pydantic import Field, field_validator

from docreview.errors import ValidationError
from docreview.models.base import WireModel


class PermissionLevel(str, Enum):
    NONE = "NONE"
    VIEW = "VIEW"
    COMMENT = "COMMENT"
    DECIDE = "DECIDE"

    @property
    def rank(self) -> int:
        return PERMISSION_RANKS[self]

    @classmethod
    def parse(cls, value: "PermissionLevel | str") -> "PermissionLevel":
        """Resolve an exact wire token such as "COMMENT"; anything else raises ValidationError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Unknown permission level: {value!r}. Expected one of {[level.value for level in cls]}.")


PERMISSION_RANKS: dict[PermissionLevel, int] = {
    PermissionLevel.NONE: 0,
    PermissionLevel.VIEW: 1,
    PermissionLevel.COMMENT: 2,
    PermissionLevel.DECIDE: 3,
}

# a new level must be given an explicit rank
_unranked = [level.value for level in PermissionLevel if level not in PERMISSION_RANKS]
if _unranked:
    raise RuntimeError(f"Permission levels without rank: {_unranked}")


class UserPermissionOverride(WireModel):
    """
    Per-user, per-document permission record.

    Only user_id, document_id and permission take part in authorization.
    user_email, document_title and project_name are denormalized display fields.
    """
    user_id: str = Field(alias="userId")
    document_id: str = Field(alias="documentId")
    permission: PermissionLevel

    # display only
    user_email: str | None = Field(default=None, alias="userEmail")
    document_title: str | None = Field(default=None, alias="documentTitle")
    project_name: str | None = Field(default=None, alias="projectName")

    @field_validator("permission", mode="before")
    @classmethod
    def _known_level(cls, value):
        return PermissionLevel.parse(value)
