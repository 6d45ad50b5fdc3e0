"""
Shared fixtures for the shortcut tests.

``InMemoryShortcutStore`` is a dict-backed implementation of the store
port with failure injection, so use cases can be tested without a
database.
"""

import os
from dataclasses import replace
from typing import Optional

import pytest

os.environ.setdefault("SLASH_AUTH_SECRET", "test-signing-secret")

from slash.domain.shortcuts.entities import (
    Activity,
    Role,
    Shortcut,
    ShortcutFilter,
    ShortcutPatch,
    User,
)
from slash.domain.shortcuts.errors import (
    StoreConflictError,
    StoreNotFoundError,
    StoreUnavailableError,
)
from slash.domain.shortcuts.ports import ShortcutStore
from slash.domain.shortcuts.tags import split_tags

OWNER_ID = 7
OTHER_ID = 9
ADMIN_ID = 1


class InMemoryShortcutStore(ShortcutStore):
    """Dict-backed store.

    Methods named in ``failing`` raise StoreUnavailableError. Methods named
    in ``vanishing`` drop their target row just before writing, as if a
    concurrent delete won the race.
    """

    def __init__(self) -> None:
        self.shortcuts: dict[int, Shortcut] = {}
        self.users: dict[int, User] = {}
        self.activities: list[Activity] = []
        self.failing: set[str] = set()
        self.vanishing: set[str] = set()
        self.calls: list[str] = []
        self._next_id = 1
        self._clock = 1_700_000_000

    def _enter(self, method: str) -> None:
        self.calls.append(method)
        if method in self.failing:
            raise StoreUnavailableError(f"{method} unavailable")

    def _vanish(self, method: str, shortcut_id: int) -> None:
        if method in self.vanishing:
            self.shortcuts.pop(shortcut_id, None)

    def _tick(self) -> int:
        self._clock += 1
        return self._clock

    def _matches(self, shortcut: Shortcut, find: ShortcutFilter) -> bool:
        if find.name is not None and shortcut.name != find.name:
            return False
        if find.creator_id is not None and shortcut.creator_id != find.creator_id:
            return False
        if find.visibilities is not None and shortcut.visibility not in find.visibilities:
            return False
        return True

    def list_shortcuts(self, find: ShortcutFilter) -> list[Shortcut]:
        self._enter("list_shortcuts")
        return [s for s in self.shortcuts.values() if self._matches(s, find)]

    def get_shortcut(self, find: ShortcutFilter) -> Optional[Shortcut]:
        self._enter("get_shortcut")
        for shortcut in self.shortcuts.values():
            if self._matches(shortcut, find):
                return shortcut
        return None

    def create_shortcut(self, shortcut: Shortcut) -> Shortcut:
        self._enter("create_shortcut")
        if any(s.name == shortcut.name for s in self.shortcuts.values()):
            raise StoreConflictError(f"name {shortcut.name} taken")
        now = self._tick()
        stored = replace(shortcut, id=self._next_id, created_ts=now, updated_ts=now)
        self._next_id += 1
        self.shortcuts[stored.id] = stored
        return stored

    def update_shortcut(self, patch: ShortcutPatch) -> Shortcut:
        self._enter("update_shortcut")
        self._vanish("update_shortcut", patch.id)
        current = self.shortcuts.get(patch.id)
        if current is None:
            raise StoreNotFoundError(f"shortcut id={patch.id} does not exist")
        changes: dict = {"updated_ts": self._tick()}
        for field_name in ("link", "title", "description", "visibility", "og_metadata"):
            value = getattr(patch, field_name)
            if value is not None:
                changes[field_name] = value
        if patch.tag is not None:
            changes["tags"] = tuple(split_tags(patch.tag))
        updated = replace(current, **changes)
        self.shortcuts[patch.id] = updated
        return updated

    def delete_shortcut(self, shortcut_id: int) -> None:
        self._enter("delete_shortcut")
        self._vanish("delete_shortcut", shortcut_id)
        if self.shortcuts.pop(shortcut_id, None) is None:
            raise StoreNotFoundError(f"shortcut id={shortcut_id} does not exist")

    def get_user(self, user_id: int) -> Optional[User]:
        self._enter("get_user")
        return self.users.get(user_id)

    def create_user(self, user: User) -> User:
        self._enter("create_user")
        self.users[user.id] = user
        return user

    def create_activity(self, activity: Activity) -> Activity:
        self._enter("create_activity")
        stored = replace(activity, id=len(self.activities) + 1, created_ts=self._tick())
        self.activities.append(stored)
        return stored

    def list_activities(self, creator_id: Optional[int] = None) -> list[Activity]:
        self._enter("list_activities")
        return [
            a for a in self.activities if creator_id is None or a.creator_id == creator_id
        ]


@pytest.fixture
def store() -> InMemoryShortcutStore:
    """A store seeded with two regular users and one admin."""
    fake = InMemoryShortcutStore()
    fake.create_user(User(id=OWNER_ID, role=Role.USER, nickname="owner"))
    fake.create_user(User(id=OTHER_ID, role=Role.USER, nickname="other"))
    fake.create_user(User(id=ADMIN_ID, role=Role.ADMIN, nickname="admin"))
    fake.calls.clear()
    return fake
