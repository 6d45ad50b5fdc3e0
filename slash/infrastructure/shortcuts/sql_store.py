"""
Adapter: SQL shortcut store.

Implements the ShortcutStore port with SQLAlchemy Core.
Works against SQLite (default, and in tests) and PostgreSQL.
Every call runs in its own transaction.
"""

import json
import logging
import time
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, delete, insert, select, update
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.pool import StaticPool

from slash.domain.shortcuts.entities import (
    Activity,
    ActivityLevel,
    ActivityType,
    OpenGraphMetadata,
    Role,
    RowStatus,
    Shortcut,
    ShortcutFilter,
    ShortcutPatch,
    User,
    Visibility,
)
from slash.domain.shortcuts.errors import (
    StoreConflictError,
    StoreError,
    StoreNotFoundError,
    StoreUnavailableError,
)
from slash.domain.shortcuts.ports import ShortcutStore
from slash.domain.shortcuts.tags import join_tags, split_tags
from slash.infrastructure.shortcuts.tables import activities, metadata, shortcuts, users

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> Engine:
    """Build a SQLAlchemy engine for the given URL.

    In-memory SQLite databases share one connection so every session
    sees the same data.
    """
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if database_url.startswith("sqlite"):
        return create_engine(database_url, connect_args={"check_same_thread": False})
    return create_engine(database_url, pool_pre_ping=True)


def create_schema(engine: Engine) -> None:
    """Create the store tables if they do not exist."""
    metadata.create_all(engine)
    logger.info("Shortcut store schema ready on %s", engine.url.render_as_string())


@contextmanager
def _translate_errors(action: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures and undecodable rows as store errors."""
    try:
        yield
    except IntegrityError as exc:
        raise StoreConflictError(f"{action}: {exc.orig}") from exc
    except OperationalError as exc:
        raise StoreUnavailableError(f"{action}: {exc.orig}") from exc
    except SQLAlchemyError as exc:
        raise StoreError(f"{action}: {exc}") from exc
    except ValueError as exc:
        raise StoreError(f"{action}: undecodable row: {exc}") from exc


def _encode_og_metadata(og: OpenGraphMetadata) -> str:
    return json.dumps(
        {"title": og.title, "description": og.description, "image": og.image}
    )


def _decode_og_metadata(raw: Optional[str]) -> OpenGraphMetadata:
    if not raw:
        return OpenGraphMetadata()
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"og_metadata is not an object: {raw!r}")
    return OpenGraphMetadata(
        title=data.get("title", ""),
        description=data.get("description", ""),
        image=data.get("image", ""),
    )


def _row_to_shortcut(row: RowMapping) -> Shortcut:
    return Shortcut(
        id=row["id"],
        creator_id=row["creator_id"],
        created_ts=row["created_ts"],
        updated_ts=row["updated_ts"],
        row_status=RowStatus(row["row_status"]),
        name=row["name"],
        link=row["link"],
        title=row["title"],
        description=row["description"],
        tags=tuple(split_tags(row["tag"])),
        visibility=Visibility(row["visibility"]),
        og_metadata=_decode_og_metadata(row["og_metadata"]),
    )


def _row_to_user(row: RowMapping) -> User:
    return User(
        id=row["id"],
        role=Role(row["role"]),
        nickname=row["nickname"],
        email=row["email"],
    )


def _row_to_activity(row: RowMapping) -> Activity:
    return Activity(
        id=row["id"],
        creator_id=row["creator_id"],
        created_ts=row["created_ts"],
        type=ActivityType(row["type"]),
        level=ActivityLevel(row["level"]),
        payload=row["payload"],
    )


class SqlShortcutStore(ShortcutStore):
    """Relational implementation of the shortcut store.

    Tags are kept in a single space-joined ``tag`` column and preview
    metadata as a JSON text column.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def _select_shortcuts(self, find: ShortcutFilter):
        query = select(shortcuts)
        if find.name is not None:
            query = query.where(shortcuts.c.name == find.name)
        if find.creator_id is not None:
            query = query.where(shortcuts.c.creator_id == find.creator_id)
        if find.visibilities is not None:
            query = query.where(
                shortcuts.c.visibility.in_([v.value for v in find.visibilities])
            )
        return query.order_by(shortcuts.c.created_ts.desc(), shortcuts.c.id.desc())

    def list_shortcuts(self, find: ShortcutFilter) -> list[Shortcut]:
        """Return shortcuts matching the filter, newest first."""
        with _translate_errors("list shortcuts"):
            with self._engine.connect() as conn:
                rows = conn.execute(self._select_shortcuts(find)).mappings().all()
            return [_row_to_shortcut(row) for row in rows]

    def get_shortcut(self, find: ShortcutFilter) -> Optional[Shortcut]:
        """Return the first shortcut matching the filter, or None."""
        with _translate_errors("get shortcut"):
            with self._engine.connect() as conn:
                row = conn.execute(self._select_shortcuts(find).limit(1)).mappings().first()
            return _row_to_shortcut(row) if row is not None else None

    def create_shortcut(self, shortcut: Shortcut) -> Shortcut:
        """Insert a shortcut and return the stored row."""
        now = int(time.time())
        with _translate_errors("create shortcut"):
            with self._engine.begin() as conn:
                result = conn.execute(
                    insert(shortcuts).values(
                        creator_id=shortcut.creator_id,
                        created_ts=now,
                        updated_ts=now,
                        row_status=RowStatus.NORMAL.value,
                        name=shortcut.name,
                        link=shortcut.link,
                        title=shortcut.title,
                        description=shortcut.description,
                        tag=join_tags(shortcut.tags),
                        visibility=shortcut.visibility.value,
                        og_metadata=_encode_og_metadata(shortcut.og_metadata),
                    )
                )
                shortcut_id = result.inserted_primary_key[0]
                row = conn.execute(
                    select(shortcuts).where(shortcuts.c.id == shortcut_id)
                ).mappings().one()
            created = _row_to_shortcut(row)
        logger.debug("Inserted shortcut id=%d.", shortcut_id)
        return created

    def update_shortcut(self, patch: ShortcutPatch) -> Shortcut:
        """Apply the set fields of the patch and return the stored row."""
        values: dict = {"updated_ts": int(time.time())}
        if patch.link is not None:
            values["link"] = patch.link
        if patch.title is not None:
            values["title"] = patch.title
        if patch.description is not None:
            values["description"] = patch.description
        if patch.tag is not None:
            values["tag"] = patch.tag
        if patch.visibility is not None:
            values["visibility"] = patch.visibility.value
        if patch.og_metadata is not None:
            values["og_metadata"] = _encode_og_metadata(patch.og_metadata)

        with _translate_errors("update shortcut"):
            with self._engine.begin() as conn:
                result = conn.execute(
                    update(shortcuts).where(shortcuts.c.id == patch.id).values(**values)
                )
                if result.rowcount == 0:
                    raise StoreNotFoundError(f"shortcut id={patch.id} does not exist")
                row = conn.execute(
                    select(shortcuts).where(shortcuts.c.id == patch.id)
                ).mappings().one()
            return _row_to_shortcut(row)

    def delete_shortcut(self, shortcut_id: int) -> None:
        """Delete a shortcut by id."""
        with _translate_errors("delete shortcut"):
            with self._engine.begin() as conn:
                result = conn.execute(delete(shortcuts).where(shortcuts.c.id == shortcut_id))
                if result.rowcount == 0:
                    raise StoreNotFoundError(f"shortcut id={shortcut_id} does not exist")

    def get_user(self, user_id: int) -> Optional[User]:
        """Return a user by id, or None."""
        with _translate_errors("get user"):
            with self._engine.connect() as conn:
                row = conn.execute(
                    select(users).where(users.c.id == user_id)
                ).mappings().first()
            return _row_to_user(row) if row is not None else None

    def create_user(self, user: User) -> User:
        """Insert a user. A non-zero ``user.id`` is kept as the primary key."""
        now = int(time.time())
        values = {
            "created_ts": now,
            "updated_ts": now,
            "role": user.role.value,
            "nickname": user.nickname,
            "email": user.email,
        }
        if user.id:
            values["id"] = user.id
        with _translate_errors("create user"):
            with self._engine.begin() as conn:
                result = conn.execute(insert(users).values(**values))
                user_id = result.inserted_primary_key[0]
                row = conn.execute(select(users).where(users.c.id == user_id)).mappings().one()
            return _row_to_user(row)

    def create_activity(self, activity: Activity) -> Activity:
        """Insert an audit activity."""
        with _translate_errors("create activity"):
            with self._engine.begin() as conn:
                result = conn.execute(
                    insert(activities).values(
                        creator_id=activity.creator_id,
                        created_ts=int(time.time()),
                        type=activity.type.value,
                        level=activity.level.value,
                        payload=activity.payload,
                    )
                )
                activity_id = result.inserted_primary_key[0]
                row = conn.execute(
                    select(activities).where(activities.c.id == activity_id)
                ).mappings().one()
            return _row_to_activity(row)

    def list_activities(self, creator_id: Optional[int] = None) -> list[Activity]:
        """Return activities, oldest first."""
        query = select(activities).order_by(activities.c.id)
        if creator_id is not None:
            query = query.where(activities.c.creator_id == creator_id)
        with _translate_errors("list activities"):
            with self._engine.connect() as conn:
                rows = conn.execute(query).mappings().all()
            return [_row_to_activity(row) for row in rows]
