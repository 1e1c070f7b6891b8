from typing import Any

import httpx

from docreview.clients.ClientInterface import ClientInterface
from docreview.errors import DocumentStoreError, ValidationError
from docreview.helper.HelperConfig import HelperConfig
from docreview.mappers.CommentMapper import CommentMapper
from docreview.models.comment import Comment, CommentRequest
from docreview.models.config import EnvConfig
from docreview.models.document import Document
from docreview.models.envelope import ApiResponse
from docreview.models.permission import UserPermissionOverride
from docreview.models.registration import RegisterCompanyRequest, RegistrationResponse
from docreview.models.search import SearchResult, SearchResults


class DocumentStoreClient(ClientInterface):
    """
    HTTP client for the document store backend.

    Every endpoint answers with an envelope ``{status, data, error?}``. The client
    checks HTTP and envelope status first and only then unwraps ``data``.
    """

    def __init__(self, helper_config: HelperConfig):
        super().__init__(helper_config=helper_config)
        self._base_url = self.get_config_val("BASE_URL", default=None, val_type="string")
        self._api_token = self.get_config_val("API_TOKEN", default="", val_type="string")
        self._success_statuses = [
            status.upper() for status in self.get_config_val("SUCCESS_STATUSES", default=["SUCCESS", "OK"], val_type="list")
        ]

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_client_type(self) -> str:
        return "store"

    ################ CONFIG ##################
    def _get_required_config(self) -> list[EnvConfig]:
        return [
            EnvConfig(env_key="BASE_URL", val_type="string", default=None),
            EnvConfig(env_key="API_TOKEN", val_type="string", default=""),
            EnvConfig(env_key="SUCCESS_STATUSES", val_type="list", default=["SUCCESS", "OK"]),
        ]

    ################ AUTH ##################
    def _get_auth_header(self) -> dict:
        if self._api_token:
            return {"Authorization": f"Bearer {self._api_token}"}
        return {}

    ################ ENDPOINTS ##################
    def _get_base_url(self) -> str:
        return self._base_url

    def _get_endpoint_healthcheck(self) -> str:
        return "/api/health"

    def _get_endpoint_comments(self, document_id: str) -> str:
        return f"/api/documents/{document_id}/comments"

    def _get_endpoint_resolve_comment(self, document_id: str, comment_id: str) -> str:
        return f"/api/documents/{document_id}/comments/{comment_id}/resolve"

    def _get_endpoint_my_overrides(self) -> str:
        return "/api/me/permission-overrides"

    def _get_endpoint_search(self) -> str:
        return "/api/search"

    def _get_endpoint_document(self, project_id: str, document_id: str) -> str:
        return f"/api/projects/{project_id}/documents/{document_id}"

    def _get_endpoint_register(self) -> str:
        return "/api/users/register"

    ##########################################
    ############### CHECKER ##################
    ##########################################

    def is_success_status(self, status: str | None) -> bool:
        """
        Returns whether an envelope status is one of the configured success sentinels.
        """
        return status is not None and status.upper() in self._success_statuses

    ##########################################
    ############### REQUESTS #################
    ##########################################

    ############# COMMENTS ##############
    async def do_fetch_comments(self, document_id: str) -> list[Comment]:
        """
        Fetches all comments of a document in the order the server returns them.

        Args:
            document_id (str): The document to fetch comments for.

        Returns:
            list[Comment]: The comments, oldest first.

        Raises:
            DocumentStoreError: If the request fails.
        """
        resp = await self.do_request(method="GET", endpoint=self._get_endpoint_comments(document_id))
        envelope = self._parse_envelope(resp, list[Comment])
        return envelope.data or []

    async def do_create_comment(self, document_id: str, request: CommentRequest) -> Comment:
        """
        Submits a new comment.

        Args:
            document_id (str): The document the comment belongs to.
            request (CommentRequest): The request built by CommentMapper.build_comment_request().

        Returns:
            Comment: The stored comment with server-assigned id and timestamp.

        Raises:
            DocumentStoreError: If the request fails or the server returns no comment.
        """
        resp = await self.do_request(method="POST", endpoint=self._get_endpoint_comments(document_id), json=request.to_payload())
        envelope = self._parse_envelope(resp, Comment)
        comment = CommentMapper.extract_comment(envelope)
        if comment is None:
            raise DocumentStoreError("Comment creation returned no data.", http_status=resp.status_code, envelope_status=envelope.status)
        self.logging.info("Created comment %s on document %s (version %d).", comment.id, document_id, comment.file_version)
        return comment

    async def do_resolve_comment(self, document_id: str, comment_id: str) -> Comment:
        """
        Marks a comment as resolved.

        Returns:
            Comment: The server's updated record.

        Raises:
            DocumentStoreError: If the request fails or the server returns no comment.
        """
        resp = await self.do_request(method="PATCH", endpoint=self._get_endpoint_resolve_comment(document_id, comment_id), json={})
        envelope = self._parse_envelope(resp, Comment)
        comment = CommentMapper.extract_comment(envelope)
        if comment is None:
            raise DocumentStoreError("Resolving comment returned no data.", http_status=resp.status_code, envelope_status=envelope.status)
        return comment

    ############# PERMISSIONS ##############
    async def do_fetch_my_overrides(self) -> list[UserPermissionOverride]:
        """
        Fetches the permission overrides of the authenticated user.

        Raises:
            DocumentStoreError: If the request fails.
            ValidationError: If an override carries an unknown permission level.
        """
        resp = await self.do_request(method="GET", endpoint=self._get_endpoint_my_overrides())
        envelope = self._parse_envelope(resp, list[UserPermissionOverride])
        return envelope.data or []

    ############# SEARCH ##############
    async def do_search(self, query: str, project_id: str | None = None) -> SearchResults:
        """
        Runs a search and returns the results in the order the server ranked them.

        Args:
            query (str): The search text.
            project_id (str | None): Restricts the search to one project if given.

        Returns:
            SearchResults: The ordered results.

        Raises:
            DocumentStoreError: If the request fails.
        """
        params = {"q": query}
        if project_id:
            params["projectId"] = project_id
        resp = await self.do_request(method="GET", endpoint=self._get_endpoint_search(), params=params)
        envelope = self._parse_envelope(resp, list[SearchResult])
        return SearchResults(query=query, results=envelope.data or [])

    ############# DOCUMENTS ##############
    async def do_fetch_document(self, project_id: str, document_id: str) -> Document:
        """
        Fetches a single document.

        Raises:
            DocumentStoreError: If the request fails or the document is missing.
        """
        resp = await self.do_request(method="GET", endpoint=self._get_endpoint_document(project_id, document_id))
        envelope = self._parse_envelope(resp, Document)
        if envelope.data is None:
            raise DocumentStoreError(f"Document {document_id} returned no data.", http_status=resp.status_code, envelope_status=envelope.status)
        return envelope.data

    ############# REGISTRATION ##############
    async def do_register_company(self, request: RegisterCompanyRequest) -> RegistrationResponse:
        """
        Registers a new tenant. Sent without auth header.

        Raises:
            DocumentStoreError: If the registration is rejected; api_error carries the server's code (e.g. USER_ALREADY_EXISTS).
        """
        resp = await self.do_request(method="POST", endpoint=self._get_endpoint_register(), json=request.to_payload(), authenticated=False)
        envelope = self._parse_envelope(resp, RegistrationResponse)
        if envelope.data is None:
            raise DocumentStoreError("Registration returned no data.", http_status=resp.status_code, envelope_status=envelope.status)
        return envelope.data

    ##########################################
    ########### RESPONSE PARSER ##############
    ##########################################

    def _parse_envelope(self, response: httpx.Response, data_type: Any) -> ApiResponse:
        """
        Checks a response for success and parses it into an envelope.

        Args:
            response (httpx.Response): The raw response.
            data_type (Any): Type of the envelope's data, e.g. Comment or list[Comment].

        Returns:
            ApiResponse: The parsed envelope with typed data.

        Raises:
            DocumentStoreError: On a non-2xx status, a non-JSON body or a non-success envelope status.
            ValidationError: If the body does not match the expected shape.
        """
        url = str(response.request.url)
        try:
            body = response.json()
        except ValueError:
            self.logging.error("Response from %s is not valid JSON (status %d).", url, response.status_code)
            raise DocumentStoreError(f"Response from {url} is not valid JSON.", http_status=response.status_code)

        # status and error first, data only once the envelope reports success
        try:
            raw = ApiResponse[Any].model_validate(body)
        except ValueError:
            raw = None

        if raw is None or response.status_code >= 300 or not self.is_success_status(raw.status):
            status = raw.status if raw else None
            message = raw.error.message if raw and raw.error else f"status {status or response.status_code}"
            self.logging.error("Request to %s failed (%d): %s", url, response.status_code, message)
            raise DocumentStoreError(
                f"Request to {url} failed: {message}",
                http_status=response.status_code,
                envelope_status=status,
                api_error=raw.error if raw else None,
            )

        try:
            return ApiResponse[data_type].model_validate(body)
        except ValueError as e:
            raise ValidationError(f"Unexpected response shape from {url}: {e}") from e
