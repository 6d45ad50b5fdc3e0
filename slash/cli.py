"""
Administration CLI.

Usage:
    # Create the store tables
    python -m slash.cli init-db

    # Add a workspace member (optionally an admin)
    python -m slash.cli create-user --nickname alice --email alice@example.com --admin

    # Print an access token for a user
    python -m slash.cli issue-token --user-id 1

    # Serve the API
    python -m slash.cli serve --port 8000
"""

import argparse
import logging

from slash.core.config import settings
from slash.domain.shortcuts.entities import Role, User
from slash.infrastructure.shortcuts.sql_store import (
    SqlShortcutStore,
    build_engine,
    create_schema,
)
from slash.shared.logging import configure_logging
from slash.shared.security.auth import issue_access_token

logger = logging.getLogger(__name__)


def cmd_init_db(args: argparse.Namespace) -> None:
    """Create the store schema."""
    create_schema(build_engine(args.database_url))


def cmd_create_user(args: argparse.Namespace) -> None:
    """Insert a user and print its id."""
    engine = build_engine(args.database_url)
    create_schema(engine)
    store = SqlShortcutStore(engine)
    user = store.create_user(
        User(
            id=0,
            role=Role.ADMIN if args.admin else Role.USER,
            nickname=args.nickname,
            email=args.email,
        )
    )
    logger.info("Created user id=%d role=%s", user.id, user.role.value)
    print(user.id)


def cmd_issue_token(args: argparse.Namespace) -> None:
    """Print a signed access token."""
    print(issue_access_token(args.user_id, expires_in=args.expires_in))


def cmd_serve(args: argparse.Namespace) -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    from slash.main import create_app

    uvicorn.run(create_app(args.database_url), host=args.host, port=args.port)


def main() -> None:
    configure_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="Slash administration CLI")
    parser.add_argument(
        "--database-url", default=settings.database_url, dest="database_url",
        help="SQLAlchemy URL of the store (default from SLASH_DATABASE_URL)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init-db", help="Create store tables")
    init_parser.set_defaults(func=cmd_init_db)

    user_parser = subparsers.add_parser("create-user", help="Add a workspace member")
    user_parser.add_argument("--nickname", required=True)
    user_parser.add_argument("--email", default="")
    user_parser.add_argument("--admin", action="store_true", help="Grant the ADMIN role")
    user_parser.set_defaults(func=cmd_create_user)

    token_parser = subparsers.add_parser("issue-token", help="Print an access token")
    token_parser.add_argument("--user-id", type=int, required=True, dest="user_id")
    token_parser.add_argument(
        "--expires-in", type=int, default=None, dest="expires_in",
        help="Lifetime in seconds (default from settings)",
    )
    token_parser.set_defaults(func=cmd_issue_token)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
