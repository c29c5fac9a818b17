"""CLI for Complaint Desk: create tables, manage admins, run the server."""

from __future__ import annotations

import argparse
import asyncio
import getpass
import sys

MIN_PASSWORD_LENGTH = 6


async def cmd_init_db(args):
    """Create all tables in the configured database."""
    from app.config import get_settings
    from app.context import build_context
    from app.db.engine import create_tables

    ctx = build_context(get_settings())
    try:
        await create_tables(ctx.engine)
    finally:
        await ctx.dispose()
    print(f"Tables created in {ctx.settings.database_url}")


async def cmd_create_admin(args):
    """Create an admin account for the listing endpoint."""
    from app.config import get_settings
    from app.context import build_context
    from app.db import crud
    from app.db.engine import create_tables
    from app.services.auth import hash_password

    username = args.username.strip()
    if not username:
        print("Username cannot be empty")
        sys.exit(1)

    password = args.password
    if not password:
        password = getpass.getpass("Admin password: ")
        confirm = getpass.getpass("Confirm password: ")
        if password != confirm:
            print("Passwords do not match")
            sys.exit(1)

    if len(password) < MIN_PASSWORD_LENGTH:
        print(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        sys.exit(1)

    ctx = build_context(get_settings())
    try:
        await create_tables(ctx.engine)
        async with ctx.session_factory() as db:
            if await crud.get_admin_by_username(db, username):
                print(f"Admin '{username}' already exists")
                sys.exit(1)
            admin = await crud.create_admin(db, username, hash_password(password))
    finally:
        await ctx.dispose()

    print(f"Admin created: {admin.username} (id={admin.id})")


def cmd_serve(args):
    import uvicorn

    from app.config import get_settings

    port = args.port or get_settings().port
    uvicorn.run("app.main:create_app", factory=True, host=args.host, port=port)


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(prog="complaint-desk", description="Complaint Desk management")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create database tables")

    p_admin = sub.add_parser("create-admin", help="Create an admin account")
    p_admin.add_argument("--username", required=True)
    p_admin.add_argument("--password", default="", help="Prompted for when omitted")

    p_serve = sub.add_parser("serve", help="Run the HTTP server")
    p_serve.add_argument("--host", default="0.0.0.0")
    p_serve.add_argument("--port", type=int, default=0)

    args = parser.parse_args(argv)

    if args.command == "init-db":
        asyncio.run(cmd_init_db(args))
    elif args.command == "create-admin":
        asyncio.run(cmd_create_admin(args))
    elif args.command == "serve":
        cmd_serve(args)


if __name__ == "__main__":
    main()
