"""
Audit activity recording for shortcut lifecycle events.
"""

import json
import logging

from slash.domain.shortcuts.entities import (
    Activity,
    ActivityLevel,
    ActivityType,
    Shortcut,
)
from slash.domain.shortcuts.errors import ActivityRecordingError, StoreError
from slash.domain.shortcuts.ports import ShortcutStore

logger = logging.getLogger(__name__)


class ActivityRecorder:
    """Builds and persists audit activities."""

    def __init__(self, store: ShortcutStore) -> None:
        self._store = store

    def record_shortcut_create(self, shortcut: Shortcut) -> Activity:
        """Persist a ``shortcut.create`` activity for a new shortcut.

        Args:
            shortcut: The persisted shortcut (with its store-assigned id).

        Returns:
            The persisted activity.

        Raises:
            ActivityRecordingError: If the payload cannot be encoded or
                the store rejects the activity.
        """
        try:
            payload = json.dumps({"shortcutId": shortcut.id})
        except (TypeError, ValueError) as exc:
            raise ActivityRecordingError("marshal activity payload", str(exc)) from exc

        activity = Activity(
            creator_id=shortcut.creator_id,
            type=ActivityType.SHORTCUT_CREATE,
            level=ActivityLevel.INFO,
            payload=payload,
        )
        try:
            created = self._store.create_activity(activity)
        except StoreError as exc:
            raise ActivityRecordingError("create activity", str(exc)) from exc

        logger.debug(
            "Recorded %s activity id=%d for shortcut id=%d.",
            created.type.value,
            created.id,
            shortcut.id,
        )
        return created
