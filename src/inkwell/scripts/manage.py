"""Administrative commands for the configured database.

Usage:
    python -m inkwell.scripts.manage init-db
    python -m inkwell.scripts.manage promote USERNAME
    python -m inkwell.scripts.manage demote USERNAME
"""
from __future__ import annotations

import argparse
import sys

from inkwell.core.errors import NotFoundError
from inkwell.db.session import SessionLocal, create_tables
from inkwell.services.user_service import set_admin


def _set_admin(username: str, is_admin: bool) -> int:
    db = SessionLocal()
    try:
        user = set_admin(db, username, is_admin)
    except NotFoundError:
        print(f"[manage] no user named {username!r}", file=sys.stderr)
        return 1
    finally:
        db.close()
    state = "granted" if user.is_admin else "revoked"
    print(f"[manage] admin rights {state} for {user.username} ({user.id})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage the Inkwell database")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init-db", help="Create all tables")

    promote = commands.add_parser("promote", help="Grant administrator rights")
    promote.add_argument("username")

    demote = commands.add_parser("demote", help="Revoke administrator rights")
    demote.add_argument("username")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "init-db":
        create_tables()
        print("[manage] tables created")
        return 0
    if args.command == "promote":
        return _set_admin(args.username, True)
    return _set_admin(args.username, False)


if __name__ == "__main__":
    sys.exit(main())
