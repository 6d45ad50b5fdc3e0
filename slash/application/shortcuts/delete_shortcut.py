"""
Use case: Delete a shortcut.

Input: DeleteShortcutCommand (caller_id, name)
Output: None
Side effects: Removes the shortcut from the store.
Failure cases:
    - ShortcutNotFoundError if no shortcut has the name.
    - PermissionDeniedError unless the caller owns it or is an admin.
    - InternalError on store failure.
"""

import logging

from slash.application.shortcuts.dtos import DeleteShortcutCommand
from slash.domain.shortcuts.access import can_mutate
from slash.domain.shortcuts.entities import ShortcutFilter
from slash.domain.shortcuts.errors import (
    InternalError,
    PermissionDeniedError,
    ShortcutNotFoundError,
    StoreError,
    StoreNotFoundError,
)
from slash.domain.shortcuts.ports import ShortcutStore

logger = logging.getLogger(__name__)


class DeleteShortcutUseCase:
    """Orchestrates authorized deletion of a shortcut."""

    def __init__(self, store: ShortcutStore) -> None:
        self._store = store

    def execute(self, command: DeleteShortcutCommand) -> None:
        """Run the delete shortcut use case."""
        try:
            caller = self._store.get_user(command.caller_id)
        except StoreError as exc:
            raise InternalError("get current user", str(exc)) from exc

        try:
            shortcut = self._store.get_shortcut(ShortcutFilter(name=command.name))
        except StoreError as exc:
            raise InternalError("get shortcut by name", str(exc)) from exc
        if shortcut is None:
            raise ShortcutNotFoundError(command.name)

        if not can_mutate(shortcut, command.caller_id, caller):
            logger.warning(
                "User %d denied delete of shortcut id=%d",
                command.caller_id,
                shortcut.id,
            )
            raise PermissionDeniedError(command.caller_id, command.name)

        try:
            self._store.delete_shortcut(shortcut.id)
        except StoreNotFoundError as exc:
            raise ShortcutNotFoundError(command.name) from exc
        except StoreError as exc:
            raise InternalError("delete shortcut", str(exc)) from exc

        logger.info(
            "Deleted shortcut id=%d by user_id=%d", shortcut.id, command.caller_id
        )
