"""
Port interfaces (ABCs) for the shortcuts bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.

Adapters report failures with the ``StoreError`` family from
``slash.domain.shortcuts.errors``.
"""

from abc import ABC, abstractmethod
from typing import Optional

from slash.domain.shortcuts.entities import (
    Activity,
    Shortcut,
    ShortcutFilter,
    ShortcutPatch,
    User,
)


class ShortcutStore(ABC):
    """Port for persisting shortcuts, users and audit activities.

    Implementations provide filtering, name uniqueness and atomic
    single-record writes.
    """

    @abstractmethod
    def list_shortcuts(self, find: ShortcutFilter) -> list[Shortcut]:
        """Return shortcuts matching every set field of the filter."""
        raise NotImplementedError

    @abstractmethod
    def get_shortcut(self, find: ShortcutFilter) -> Optional[Shortcut]:
        """Return the first shortcut matching the filter, or None."""
        raise NotImplementedError

    @abstractmethod
    def create_shortcut(self, shortcut: Shortcut) -> Shortcut:
        """Persist a new shortcut and return it with store-assigned fields.

        Raises:
            StoreConflictError: If the name is already taken.
        """
        raise NotImplementedError

    @abstractmethod
    def update_shortcut(self, patch: ShortcutPatch) -> Shortcut:
        """Apply a sparse update and return the updated shortcut.

        Raises:
            StoreNotFoundError: If no shortcut has ``patch.id``.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_shortcut(self, shortcut_id: int) -> None:
        """Delete a shortcut by id."""
        raise NotImplementedError

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]:
        """Return a user by id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def create_user(self, user: User) -> User:
        """Persist a user and return it with its store-assigned id."""
        raise NotImplementedError

    @abstractmethod
    def create_activity(self, activity: Activity) -> Activity:
        """Persist an audit activity and return it with its id."""
        raise NotImplementedError

    @abstractmethod
    def list_activities(self, creator_id: Optional[int] = None) -> list[Activity]:
        """Return activities, optionally filtered by creator, oldest first."""
        raise NotImplementedError
