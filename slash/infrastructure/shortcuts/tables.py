"""
SQLAlchemy table definitions for the shortcuts store.
"""

from sqlalchemy import Column, Integer, MetaData, String, Table, Text, UniqueConstraint

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("created_ts", Integer, nullable=False),
    Column("updated_ts", Integer, nullable=False),
    Column("role", String(16), nullable=False, default="USER"),
    Column("nickname", String(256), nullable=False, default=""),
    Column("email", String(256), nullable=False, default=""),
)

shortcuts = Table(
    "shortcuts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("creator_id", Integer, nullable=False, index=True),
    Column("created_ts", Integer, nullable=False),
    Column("updated_ts", Integer, nullable=False),
    Column("row_status", String(16), nullable=False, default="NORMAL"),
    Column("name", String(256), nullable=False),
    Column("link", Text, nullable=False, default=""),
    Column("title", String(256), nullable=False, default=""),
    Column("description", Text, nullable=False, default=""),
    # space-joined tag list
    Column("tag", Text, nullable=False, default=""),
    Column("visibility", String(16), nullable=False, default="PRIVATE"),
    # JSON object {title, description, image}
    Column("og_metadata", Text, nullable=False, default="{}"),
    UniqueConstraint("name", name="uix_shortcut_name"),
)

activities = Table(
    "activities",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("creator_id", Integer, nullable=False, index=True),
    Column("created_ts", Integer, nullable=False),
    Column("type", String(64), nullable=False),
    Column("level", String(16), nullable=False),
    Column("payload", Text, nullable=False, default="{}"),
)
