"""
Use case: List the shortcuts visible to the caller.

Input: ListShortcutsQuery (caller_id)
Output: list[ShortcutResult], caller's private shortcuts first,
        then workspace and public ones.
Side effects: None (read-only query).
Failure cases: InternalError on any store failure.
"""

import logging

from slash.application.shortcuts.dtos import ListShortcutsQuery, ShortcutResult
from slash.application.shortcuts.mapper import to_shortcut_result
from slash.domain.shortcuts.entities import (
    SHARED_VISIBILITIES,
    ShortcutFilter,
    Visibility,
)
from slash.domain.shortcuts.errors import InternalError, StoreError
from slash.domain.shortcuts.ports import ShortcutStore

logger = logging.getLogger(__name__)


class ListShortcutsUseCase:
    """Orchestrates listing shortcuts for a caller."""

    def __init__(self, store: ShortcutStore) -> None:
        """Initialize the use case.

        Args:
            store: Port for shortcut persistence.
        """
        self._store = store

    def execute(self, query: ListShortcutsQuery) -> list[ShortcutResult]:
        """Run the list shortcuts use case.

        Args:
            query: Query carrying the caller identity.

        Returns:
            Every shortcut the caller may see.

        Raises:
            InternalError: If either store query fails.
        """
        logger.info("Listing shortcuts for user_id=%d", query.caller_id)

        try:
            shared = self._store.list_shortcuts(
                ShortcutFilter(visibilities=SHARED_VISIBILITIES)
            )
        except StoreError as exc:
            raise InternalError("fetch visible shortcut list", str(exc)) from exc

        try:
            private = self._store.list_shortcuts(
                ShortcutFilter(
                    visibilities=(Visibility.PRIVATE,),
                    creator_id=query.caller_id,
                )
            )
        except StoreError as exc:
            raise InternalError("fetch private shortcut list", str(exc)) from exc

        return [to_shortcut_result(shortcut) for shortcut in private + shared]
