"""Pydantic models for search results."""

from typing import Iterator

from pydantic import Field

from docreview.models.base import WireModel


class SearchResult(WireModel):
    """A single ranked search hit.

    rank is an opaque ordering key from the search engine; no scale or
    direction is assumed. Results are not access-controlled.
    """

    document_id: str = Field(alias="documentId")
    project_id: str = Field(alias="projectId")
    project_name: str = Field(alias="projectName")
    title: str
    document_type_id: str = Field(alias="documentTypeId")
    snippet: str | None = None
    rank: float


class SearchResults:
    """Ordered, read-only view over the results of one query.

    Keeps the order delivered by the search engine. Permission filtering is
    a separate pass, see permission_policy.filter_viewable().
    """

    def __init__(self, query: str, results: list[SearchResult] | None = None) -> None:
        self.query = query
        self._results: tuple[SearchResult, ...] = tuple(results or ())

    def __iter__(self) -> Iterator[SearchResult]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __getitem__(self, index: int) -> SearchResult:
        return self._results[index]

    def __repr__(self) -> str:
        return f"SearchResults(query={self.query!r}, total={len(self._results)})"

    @property
    def results(self) -> list[SearchResult]:
        return list(self._results)

    @property
    def total(self) -> int:
        return len(self._results)

    def document_ids(self) -> list[str]:
        return [result.document_id for result in self._results]
