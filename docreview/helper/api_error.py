"""Helpers for reading the error block out of failed document store responses."""

from typing import Any

import httpx

from docreview.errors import DocumentStoreError
from docreview.models.envelope import ApiError


def get_api_error(source: Any) -> ApiError | None:
    """Extract the ``error`` block from a failed response.

    Args:
        source (Any): A DocumentStoreError, an httpx.Response or an already decoded JSON body.

    Returns:
        ApiError | None: The parsed error, or None if the source carries none.
    """
    if isinstance(source, DocumentStoreError):
        return source.api_error
    if isinstance(source, httpx.Response):
        try:
            source = source.json()
        except ValueError:
            return None
    if not isinstance(source, dict):
        return None
    error = source.get("error")
    if not isinstance(error, dict):
        return None
    try:
        return ApiError.model_validate(error)
    except ValueError:
        return None


def get_api_error_message(source: Any, fallback: str) -> str:
    """Return the server's error message, or fallback if there is none."""
    error = get_api_error(source)
    return error.message if error is not None else fallback
