"""
Use case: Partially update a shortcut.

Input: UpdateShortcutCommand (caller_id, shortcut fields, update_mask)
Output: ShortcutResult after the update.
Side effects: Writes the masked fields to the store.
Failure cases:
    - InvalidArgumentError if the update mask is empty.
    - ShortcutNotFoundError if no shortcut has the name.
    - PermissionDeniedError unless the caller owns it or is an admin.
    - InternalError on store failure.
"""

import logging

from slash.application.shortcuts.dtos import (
    ShortcutFields,
    ShortcutResult,
    UpdateShortcutCommand,
)
from slash.application.shortcuts.mapper import (
    parse_visibility,
    to_og_metadata,
    to_shortcut_result,
)
from slash.domain.shortcuts.access import can_mutate
from slash.domain.shortcuts.entities import ShortcutFilter, ShortcutPatch
from slash.domain.shortcuts.errors import (
    InternalError,
    InvalidArgumentError,
    PermissionDeniedError,
    ShortcutNotFoundError,
    StoreError,
    StoreNotFoundError,
)
from slash.domain.shortcuts.ports import ShortcutStore
from slash.domain.shortcuts.tags import join_tags

logger = logging.getLogger(__name__)

UPDATABLE_PATHS = frozenset(
    {"link", "title", "tags", "description", "visibility", "og_metadata"}
)


def build_patch(shortcut_id: int, fields: ShortcutFields, paths: list[str]) -> ShortcutPatch:
    """Translate an update mask into a sparse patch.

    Only paths in ``UPDATABLE_PATHS`` are applied; anything else is
    ignored. ``visibility`` and ``og_metadata`` are applied only when the
    request carries a value for them.
    """
    changes: dict = {}
    for path in paths:
        if path == "link":
            changes["link"] = fields.link
        elif path == "title":
            changes["title"] = fields.title
        elif path == "tags":
            changes["tag"] = join_tags(fields.tags)
        elif path == "description":
            changes["description"] = fields.description
        elif path == "visibility":
            if fields.visibility is not None:
                changes["visibility"] = parse_visibility(fields.visibility)
        elif path == "og_metadata":
            if fields.og_metadata is not None:
                changes["og_metadata"] = to_og_metadata(fields.og_metadata)
        else:
            logger.debug("Ignoring unknown update path %r", path)
    return ShortcutPatch(id=shortcut_id, **changes)


class UpdateShortcutUseCase:
    """Orchestrates authorized partial updates of a shortcut."""

    def __init__(self, store: ShortcutStore) -> None:
        self._store = store

    def execute(self, command: UpdateShortcutCommand) -> ShortcutResult:
        """Run the update shortcut use case.

        Args:
            command: Caller identity, new field values and update mask.

        Returns:
            The shortcut as stored after the update. When the mask
            resolves to no change the current record is returned as is.
        """
        if not command.update_mask:
            raise InvalidArgumentError("update_mask is required")

        name = command.shortcut.name
        try:
            caller = self._store.get_user(command.caller_id)
        except StoreError as exc:
            raise InternalError("get current user", str(exc)) from exc

        try:
            shortcut = self._store.get_shortcut(ShortcutFilter(name=name))
        except StoreError as exc:
            raise InternalError("get shortcut by name", str(exc)) from exc
        if shortcut is None:
            raise ShortcutNotFoundError(name)

        if not can_mutate(shortcut, command.caller_id, caller):
            logger.warning(
                "User %d denied update of shortcut id=%d",
                command.caller_id,
                shortcut.id,
            )
            raise PermissionDeniedError(command.caller_id, name)

        patch = build_patch(shortcut.id, command.shortcut, command.update_mask)
        if patch.is_empty:
            return to_shortcut_result(shortcut)

        logger.info(
            "Updating shortcut id=%d paths=%s by user_id=%d",
            shortcut.id,
            ",".join(command.update_mask),
            command.caller_id,
        )
        try:
            updated = self._store.update_shortcut(patch)
        except StoreNotFoundError as exc:
            raise ShortcutNotFoundError(name) from exc
        except StoreError as exc:
            raise InternalError("update shortcut", str(exc)) from exc

        return to_shortcut_result(updated)
