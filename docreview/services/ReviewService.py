"""Review service: comments, permission overrides and search for one signed-in user.

Keeps a per-document comment list in server (chronological) order and the
user's permission overrides as last fetched. Authorization outcomes are
returned as booleans; reacting to them is up to the caller.
"""

from typing import Mapping

from docreview.clients.DocumentStoreClient import DocumentStoreClient
from docreview.helper.HelperConfig import HelperConfig
from docreview.mappers.CommentMapper import CommentMapper
from docreview.models.comment import Comment, Marker
from docreview.models.permission import PermissionLevel, UserPermissionOverride
from docreview.models.search import SearchResults
from docreview.policy.permission_policy import effective_level, filter_viewable, has_at_least, parse_permission_level


class ReviewService:
    """Orchestrates comment submission, permission lookup and search against the document store."""

    def __init__(self, helper_config: HelperConfig, store_client: DocumentStoreClient) -> None:
        self.logging = helper_config.get_logger()
        self._store = store_client
        self._default_level = parse_permission_level(
            helper_config.get_string_val("REVIEW_DEFAULT_PERMISSION", default=PermissionLevel.NONE.value)
        )
        self._min_query_length = int(helper_config.get_number_val("REVIEW_MIN_QUERY_LENGTH", default=2))

        self._comments: dict[str, list[Comment]] = {}
        self._overrides: list[UserPermissionOverride] = []

    ##########################################
    ############### COMMENTS #################
    ##########################################

    async def fetch_comments(self, document_id: str) -> list[Comment]:
        """Load the comments of a document and replace the cached list.

        Args:
            document_id (str): The document to load.

        Returns:
            list[Comment]: The comments in chronological order.
        """
        comments = await self._store.do_fetch_comments(document_id)
        self._comments[document_id] = list(comments)
        self.logging.debug("Loaded %d comments for document %s.", len(comments), document_id)
        return list(comments)

    async def add_comment(
        self,
        document_id: str,
        file_id: str,
        file_version: int,
        comment: str,
        marker: Marker | Mapping | None = None,
    ) -> Comment:
        """Create a comment on a specific file version and append it to the cache.

        Args:
            document_id (str): The document the comment belongs to.
            file_id (str): The file the comment refers to.
            file_version (int): The version the user was looking at.
            comment (str): The comment text.
            marker (Marker | Mapping | None): Optional page anchor.

        Returns:
            Comment: The stored comment.

        Raises:
            ValidationError: If the input is malformed. Nothing is sent in that case.
            DocumentStoreError: If the store rejects the request.
        """
        request = CommentMapper.build_comment_request(file_id, file_version, comment, marker)
        created = await self._store.do_create_comment(document_id, request)
        self._comments.setdefault(document_id, []).append(created)
        return created

    async def resolve_comment(self, document_id: str, comment_id: str) -> Comment:
        """Resolve a comment and swap the cached record for the server's new one."""
        resolved = await self._store.do_resolve_comment(document_id, comment_id)
        cached = self._comments.get(document_id, [])
        self._comments[document_id] = [resolved if c.id == comment_id else c for c in cached]
        return resolved

    def get_comments_by_document(self, document_id: str) -> list[Comment]:
        return list(self._comments.get(document_id, []))

    def get_markers_by_page(self, document_id: str, page_number: int) -> list[Comment]:
        return [
            c for c in self._comments.get(document_id, [])
            if c.marker is not None and c.marker.page_number == page_number
        ]

    def get_unresolved_comments(self, document_id: str) -> list[Comment]:
        return [c for c in self._comments.get(document_id, []) if not c.is_resolved]

    ##########################################
    ############## PERMISSIONS ###############
    ##########################################

    async def fetch_overrides(self) -> list[UserPermissionOverride]:
        """Load the current user's permission overrides."""
        self._overrides = await self._store.do_fetch_my_overrides()
        self.logging.debug("Loaded %d permission overrides.", len(self._overrides))
        return list(self._overrides)

    def get_overrides(self) -> list[UserPermissionOverride]:
        return list(self._overrides)

    def get_effective_level(self, user_id: str, document_id: str) -> PermissionLevel:
        return effective_level(user_id, document_id, self._overrides, self._default_level)

    def can_view(self, user_id: str, document_id: str) -> bool:
        return has_at_least(self.get_effective_level(user_id, document_id), PermissionLevel.VIEW)

    def can_comment(self, user_id: str, document_id: str) -> bool:
        return has_at_least(self.get_effective_level(user_id, document_id), PermissionLevel.COMMENT)

    def can_decide(self, user_id: str, document_id: str) -> bool:
        return has_at_least(self.get_effective_level(user_id, document_id), PermissionLevel.DECIDE)

    ##########################################
    ################ SEARCH ##################
    ##########################################

    async def search(self, query: str, project_id: str | None = None, user_id: str | None = None) -> SearchResults:
        """Search documents.

        Queries shorter than the configured minimum return no results and no
        request is made. With user_id set, results the user can not VIEW are
        dropped in a separate pass after retrieval.

        Args:
            query (str): The search text, trimmed before use.
            project_id (str | None): Optional project restriction.
            user_id (str | None): Apply the permission filter for this user.

        Returns:
            SearchResults: The results in the order delivered by the store.
        """
        trimmed = query.strip()
        if len(trimmed) < self._min_query_length:
            return SearchResults(query=trimmed)

        results = await self._store.do_search(trimmed, project_id)
        self.logging.info("Search %r returned %d results.", trimmed[:80], len(results))
        if user_id is None:
            return results
        return filter_viewable(results, user_id, self._overrides, self._default_level)
