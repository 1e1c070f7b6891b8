from typing import Mapping

from docreview.errors import ValidationError
from docreview.models.comment import Comment, CommentRequest, Marker
from docreview.models.envelope import ApiResponse


class CommentMapper:
    """
    Translates between loose caller input, transport requests and comment records.
    """

    @staticmethod
    def build_comment_request(
        file_id: str,
        file_version: int,
        comment_text: str,
        marker: Marker | Mapping | None = None,
    ) -> CommentRequest:
        """
        Builds a transport-ready request for a new comment.

        The request keeps the exact file_version it was given. Without a marker
        the resulting payload has no ``marker`` key at all.

        Args:
            file_id (str): Identifier of the document file. Must not be empty.
            file_version (int): Version the comment was written against. Must be >= 0.
            comment_text (str): The comment. Must not be empty after trimming; sent as given.
            marker (Marker | Mapping | None): Optional page anchor, as model or wire dict.

        Returns:
            CommentRequest: The frozen request.

        Raises:
            ValidationError: If any input is malformed.
        """
        if not isinstance(file_id, str) or not file_id.strip():
            raise ValidationError("fileId must be a non-empty string.")
        # bool is an int subclass
        if not isinstance(file_version, int) or isinstance(file_version, bool):
            raise ValidationError(f"fileVersion must be an integer, got {type(file_version).__name__}.")
        if file_version < 0:
            raise ValidationError(f"fileVersion must not be negative, got {file_version}.")
        if not isinstance(comment_text, str) or not comment_text.strip():
            raise ValidationError("Comment text must not be empty.")

        fields = {
            "file_id": file_id,
            "file_version": file_version,
            "comment": comment_text,
        }
        if marker is not None:
            fields["marker"] = marker if isinstance(marker, Marker) else Marker.from_wire(marker)

        return CommentRequest(**fields)

    @staticmethod
    def extract_comment(envelope: ApiResponse[Comment]) -> Comment | None:
        """
        Returns the ``data`` payload of a comment envelope unchanged.

        ``status`` and ``error`` are not looked at. Callers check the envelope
        status before extracting; for an error envelope this returns whatever
        ``data`` holds, usually None.

        Args:
            envelope (ApiResponse[Comment]): The response envelope.

        Returns:
            Comment | None: The envelope's data.
        """
        return envelope.data


build_comment_request = CommentMapper.build_comment_request
extract_comment = CommentMapper.extract_comment
