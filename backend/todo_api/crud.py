import logging
import math
from dataclasses import dataclass
from typing import List, Optional

from pydantic import validate_email
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from .errors import NotFound
from .models import Todo, User
from .schemas import TodoCreate, TodoUpdate
from .security import hash_password

logger = logging.getLogger(__name__)

# largest value a BIGINT primary key or OFFSET can hold
MAX_ID = 2**63 - 1


@dataclass
class Page:
    items: List[Todo]
    current_page: int
    per_page: int
    total: int

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()

def normalize_email(email: str) -> str:
    """
    Validate an address and lowercase its domain, the same way LoginRequest does.
    Raises ValueError for anything that is not an email address
    """
    return validate_email(email)[1]

def create_user(db: Session, email: str, password: str) -> User:
    obj = User(email=normalize_email(email), password_hash=hash_password(password))
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj

def create_todo(db: Session, data: TodoCreate) -> Todo:
    obj = Todo(
        title=data.title,
        description=data.description,
        due_date=data.due_date,
    )
    db.add(obj)
    db.commit()
    db.refresh(obj)
    logger.info(f"Created todo {obj.id}")
    return obj

def list_todos(db: Session, page: int = 1, per_page: int = 5) -> Page:
    total = db.scalar(select(func.count()).select_from(Todo))
    offset = (page - 1) * per_page
    if offset > MAX_ID:
        return Page(items=[], current_page=page, per_page=per_page, total=total)
    items = (
        db.query(Todo)
        .order_by(Todo.id.asc())
        .offset(offset)
        .limit(per_page)
        .all()
    )
    return Page(items=items, current_page=page, per_page=per_page, total=total)

def get_todo(db: Session, todo_id: int) -> Todo:
    obj = db.get(Todo, todo_id) if 1 <= todo_id <= MAX_ID else None
    if not obj:
        logger.info(f"Todo {todo_id} not found")
        raise NotFound("Todo not found.")
    return obj

def update_todo(db: Session, todo_id: int, data: TodoUpdate) -> Todo:
    obj = get_todo(db, todo_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(obj, field, value)
    db.commit()
    db.refresh(obj)
    logger.info(f"Updated todo {obj.id}")
    return obj

def delete_todo(db: Session, todo_id: int) -> None:
    obj = get_todo(db, todo_id)
    db.delete(obj)
    db.commit()
    logger.info(f"Deleted todo {todo_id}")
