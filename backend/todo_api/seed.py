"""
Seed the database with users and sample todos.

    python -m todo_api.seed user alice@example.com s3cret
    python -m todo_api.seed todos --count 20
"""
import argparse
import logging
import sys
from datetime import date, timedelta

from .database import SessionLocal, init_db
from .logging_config import configure_logging
from . import crud, schemas

logger = logging.getLogger(__name__)


def sample_todos(count: int):
    today = date.today()
    for i in range(1, count + 1):
        yield schemas.TodoCreate(
            title=f"Sample todo {i}",
            description=f"Generated sample #{i}",
            due_date=today + timedelta(days=i),
        )


def seed_user(db, email: str, password: str) -> int:
    try:
        email = crud.normalize_email(email)
    except ValueError as e:
        logger.error(f"Invalid email {email!r}: {e}")
        return 1
    if crud.get_user_by_email(db, email):
        logger.error(f"User {email} already exists")
        return 1
    user = crud.create_user(db, email, password)
    logger.info(f"Created user {user.id} ({email})")
    return 0


def seed_todos(db, count: int) -> int:
    for data in sample_todos(count):
        crud.create_todo(db, data)
    logger.info(f"Inserted {count} todos")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todo_api.seed", description=__doc__.splitlines()[1])
    sub = parser.add_subparsers(dest="command", required=True)

    user = sub.add_parser("user", help="create a user")
    user.add_argument("email")
    user.add_argument("password")

    todos = sub.add_parser("todos", help="insert sample todos")
    todos.add_argument("--count", type=int, default=10)
    return parser


def main(argv=None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)

    init_db()
    db = SessionLocal()
    try:
        if args.command == "user":
            return seed_user(db, args.email, args.password)
        return seed_todos(db, args.count)
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
