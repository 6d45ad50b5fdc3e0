"""
Dependency injection for the shortcuts bounded context.

Provides FastAPI dependency functions that wire the SQL store into
use cases via constructor injection. The engine lives on ``app.state``
and is created by the application factory.
"""

from fastapi import Depends, Request
from sqlalchemy.engine import Engine

from slash.application.shortcuts.activity_recorder import ActivityRecorder
from slash.application.shortcuts.create_shortcut import CreateShortcutUseCase
from slash.application.shortcuts.delete_shortcut import DeleteShortcutUseCase
from slash.application.shortcuts.get_shortcut import GetShortcutUseCase
from slash.application.shortcuts.list_shortcuts import ListShortcutsUseCase
from slash.application.shortcuts.update_shortcut import UpdateShortcutUseCase
from slash.domain.shortcuts.ports import ShortcutStore
from slash.infrastructure.shortcuts.sql_store import SqlShortcutStore


def get_engine(request: Request) -> Engine:
    """Return the engine built by the application factory."""
    return request.app.state.engine


def get_store(engine: Engine = Depends(get_engine)) -> ShortcutStore:
    """Build the shortcut store adapter."""
    return SqlShortcutStore(engine=engine)


def get_list_shortcuts_use_case(
    store: ShortcutStore = Depends(get_store),
) -> ListShortcutsUseCase:
    """Build ListShortcutsUseCase with its store."""
    return ListShortcutsUseCase(store=store)


def get_get_shortcut_use_case(
    store: ShortcutStore = Depends(get_store),
) -> GetShortcutUseCase:
    """Build GetShortcutUseCase with its store."""
    return GetShortcutUseCase(store=store)


def get_create_shortcut_use_case(
    store: ShortcutStore = Depends(get_store),
) -> CreateShortcutUseCase:
    """Build CreateShortcutUseCase with its store and activity recorder."""
    return CreateShortcutUseCase(store=store, recorder=ActivityRecorder(store))


def get_update_shortcut_use_case(
    store: ShortcutStore = Depends(get_store),
) -> UpdateShortcutUseCase:
    """Build UpdateShortcutUseCase with its store."""
    return UpdateShortcutUseCase(store=store)


def get_delete_shortcut_use_case(
    store: ShortcutStore = Depends(get_store),
) -> DeleteShortcutUseCase:
    """Build DeleteShortcutUseCase with its store."""
    return DeleteShortcutUseCase(store=store)
