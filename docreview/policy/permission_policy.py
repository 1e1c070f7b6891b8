"""Permission comparison over the ordered PermissionLevel scale.

All checks are "at least X". Unknown tokens fail closed with a ValidationError
instead of being coerced to any level. Nothing here fetches or caches overrides;
callers hand in the set they got from the authorization service.
"""

import logging
from typing import Iterable

from docreview.models.permission import PERMISSION_RANKS, PermissionLevel, UserPermissionOverride
from docreview.models.search import SearchResults

logger = logging.getLogger(__name__)


def parse_permission_level(value: PermissionLevel | str) -> PermissionLevel:
    """Resolve a wire token such as "COMMENT" into a PermissionLevel.

    Args:
        value (PermissionLevel | str): A level or its exact wire token.

    Returns:
        PermissionLevel: The matching level.

    Raises:
        ValidationError: If the token is not a known level.
    """
    return PermissionLevel.parse(value)


def has_at_least(effective_level: PermissionLevel | str, required_level: PermissionLevel | str) -> bool:
    """Check whether effective_level grants everything required_level grants.

    Args:
        effective_level (PermissionLevel | str): The level the user holds.
        required_level (PermissionLevel | str): The minimum level needed.

    Returns:
        bool: True iff rank(effective_level) >= rank(required_level).

    Raises:
        ValidationError: If either level is unknown.
    """
    effective = parse_permission_level(effective_level)
    required = parse_permission_level(required_level)
    return PERMISSION_RANKS[effective] >= PERMISSION_RANKS[required]


def effective_level(
    user_id: str,
    document_id: str,
    overrides: Iterable[UserPermissionOverride],
    default_level: PermissionLevel | str,
) -> PermissionLevel:
    """Resolve the level that governs a user's access to a document.

    Looks up the override for (user_id, document_id) and falls back to
    default_level when there is none. The default is deployment policy and
    always comes from the caller.

    Duplicate overrides for one key should not exist; if they do, the last one
    in the given order wins and a warning is logged.

    Args:
        user_id (str): The user to resolve for.
        document_id (str): The document to resolve for.
        overrides (Iterable[UserPermissionOverride]): The override set. Not modified.
        default_level (PermissionLevel | str): Level used when no override matches.

    Returns:
        PermissionLevel: The effective level.

    Raises:
        ValidationError: If default_level is unknown.
    """
    default = parse_permission_level(default_level)

    matches = [o for o in overrides if o.user_id == user_id and o.document_id == document_id]
    if not matches:
        return default
    if len(matches) > 1:
        logger.warning(
            "Found %d permission overrides for user %s on document %s, using the last one.",
            len(matches),
            user_id,
            document_id,
        )
    return parse_permission_level(matches[-1].permission)


def filter_viewable(
    results: SearchResults,
    user_id: str,
    overrides: Iterable[UserPermissionOverride],
    default_level: PermissionLevel | str,
) -> SearchResults:
    """Drop search results the user may not open.

    Explicit pass over a result set, keeping only documents where the user's
    effective level is at least VIEW. Order is preserved.

    Args:
        results (SearchResults): Results as delivered by the search service.
        user_id (str): The user navigating the results.
        overrides (Iterable[UserPermissionOverride]): The user's override set.
        default_level (PermissionLevel | str): Level used for documents without override.

    Returns:
        SearchResults: A new result set with the same query.
    """
    overrides = list(overrides)
    visible = [
        result
        for result in results
        if has_at_least(effective_level(user_id, result.document_id, overrides, default_level), PermissionLevel.VIEW)
    ]
    if len(visible) < len(results):
        logger.debug("Filtered %d of %d search results for user %s.", len(results) - len(visible), len(results), user_id)
    return SearchResults(query=results.query, results=visible)
