"""
Unit tests for CommentMapper: request construction and envelope unwrapping.
"""

import pydantic
import pytest

from docreview.errors import ValidationError
from docreview.mappers.CommentMapper import CommentMapper, build_comment_request, extract_comment
from docreview.models.comment import Comment, Marker, MarkerPosition
from docreview.models.document import DocumentReference
from docreview.models.envelope import ApiError, ApiResponse

MARKER = {"pageNumber": 2, "position": {"x": 0.5, "y": 0.8}}


# ============================================================================
# build_comment_request
# ============================================================================


class TestBuildCommentRequest:
    def test_with_marker(self):
        request = build_comment_request("doc-42", 3, "Looks good", MARKER)

        assert request.to_payload() == {
            "fileId": "doc-42",
            "fileVersion": 3,
            "comment": "Looks good",
            "marker": {"pageNumber": 2, "position": {"x": 0.5, "y": 0.8}},
        }

    def test_without_marker_omits_key(self):
        payload = build_comment_request("doc-42", 3, "Looks good").to_payload()

        assert payload == {"fileId": "doc-42", "fileVersion": 3, "comment": "Looks good"}
        assert "marker" not in payload

    def test_explicit_none_marker_omits_key(self):
        payload = build_comment_request("doc-42", 3, "Looks good", None).to_payload()

        assert "marker" not in payload

    def test_accepts_marker_model(self):
        marker = Marker(page_number=1, position=MarkerPosition(x=0.1, y=0.2))

        request = build_comment_request("doc-1", 0, "Check this", marker)

        assert request.marker == marker
        assert request.to_payload()["marker"] == {"pageNumber": 1, "position": {"x": 0.1, "y": 0.2}}

    def test_comment_text_is_sent_as_given(self):
        request = build_comment_request("doc-1", 0, "  padded  ")

        assert request.comment == "  padded  "

    def test_keeps_given_file_version(self):
        request = build_comment_request("doc-1", 7, "v7 note")

        assert request.file_version == 7
        assert request.reference == DocumentReference(document_id="doc-1", file_version=7)

    def test_version_zero_is_valid(self):
        assert build_comment_request("doc-1", 0, "first").file_version == 0

    def test_request_is_frozen(self):
        request = build_comment_request("doc-1", 1, "text")

        with pytest.raises(pydantic.ValidationError):
            request.file_version = 2

    def test_classmethod_and_alias_are_the_same(self):
        assert CommentMapper.build_comment_request("a", 1, "b") == build_comment_request("a", 1, "b")

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_empty_text_raises(self, text):
        with pytest.raises(ValidationError):
            build_comment_request("doc-1", 0, text)

    @pytest.mark.parametrize("file_id", ["", "  ", None])
    def test_empty_file_id_raises(self, file_id):
        with pytest.raises(ValidationError):
            build_comment_request(file_id, 0, "text")

    @pytest.mark.parametrize("version", [-1, 1.5, "3", True, None])
    def test_bad_version_raises(self, version):
        with pytest.raises(ValidationError):
            build_comment_request("doc-1", version, "text")

    @pytest.mark.parametrize(
        "marker",
        [
            {"pageNumber": 0, "position": {"x": 0.5, "y": 0.5}},
            {"pageNumber": -3, "position": {"x": 0.5, "y": 0.5}},
            {"pageNumber": 1},
            {"position": {"x": 0.5, "y": 0.5}},
            "page 2",
        ],
    )
    def test_bad_marker_raises(self, marker):
        with pytest.raises(ValidationError):
            build_comment_request("doc-1", 0, "text", marker)


# ============================================================================
# extract_comment
# ============================================================================


class TestExtractComment:
    def test_returns_data_unchanged(self, comment_payload):
        comment = Comment.from_wire(comment_payload)
        envelope = ApiResponse[Comment](status="ok", data=comment)

        assert extract_comment(envelope) is envelope.data
        assert extract_comment(envelope) == comment

    def test_does_not_look_at_status(self, comment_payload):
        comment = Comment.from_wire(comment_payload)
        envelope = ApiResponse[Comment](status="ERROR", data=comment, error=ApiError(code="X", message="boom"))

        assert extract_comment(envelope) is envelope.data
        assert extract_comment(envelope) == comment

    def test_error_envelope_without_data_returns_none(self):
        envelope = ApiResponse[Comment](status="ERROR", error=ApiError(code="FORBIDDEN", message="no access"))

        assert extract_comment(envelope) is None

    def test_parsed_wire_envelope(self, comment_payload):
        envelope = ApiResponse[Comment].model_validate({"status": "SUCCESS", "data": comment_payload})

        comment = extract_comment(envelope)

        assert comment.id == "c-1"
        assert comment.file_version == 3
        assert comment.marker.page_number == 2
        assert comment.reference == DocumentReference(document_id="doc-42", file_version=3)
