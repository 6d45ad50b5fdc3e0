"""
Use case: Fetch one shortcut by name.

Input: GetShortcutQuery (caller_id, name)
Output: ShortcutResult
Side effects: None (read-only query).
Failure cases:
    - ShortcutNotFoundError if no shortcut has the name.
    - PermissionDeniedError if it is private and owned by someone else.
    - InternalError on store failure.
"""

import logging

from slash.application.shortcuts.dtos import GetShortcutQuery, ShortcutResult
from slash.application.shortcuts.mapper import to_shortcut_result
from slash.domain.shortcuts.access import can_view
from slash.domain.shortcuts.entities import ShortcutFilter
from slash.domain.shortcuts.errors import (
    InternalError,
    PermissionDeniedError,
    ShortcutNotFoundError,
    StoreError,
)
from slash.domain.shortcuts.ports import ShortcutStore

logger = logging.getLogger(__name__)


class GetShortcutUseCase:
    """Orchestrates reading a single shortcut."""

    def __init__(self, store: ShortcutStore) -> None:
        self._store = store

    def execute(self, query: GetShortcutQuery) -> ShortcutResult:
        """Run the get shortcut use case.

        Existence is checked before visibility, so an unknown name is
        always reported as not found.
        """
        try:
            shortcut = self._store.get_shortcut(ShortcutFilter(name=query.name))
        except StoreError as exc:
            raise InternalError("get shortcut by name", str(exc)) from exc

        if shortcut is None:
            raise ShortcutNotFoundError(query.name)

        if not can_view(shortcut, query.caller_id):
            logger.warning(
                "User %d denied read access to private shortcut id=%d",
                query.caller_id,
                shortcut.id,
            )
            raise PermissionDeniedError(query.caller_id, query.name)

        return to_shortcut_result(shortcut)
