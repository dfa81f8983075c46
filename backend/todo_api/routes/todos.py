from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..auth import get_current_user
from ..config import get_settings
from ..database import get_db
from .. import crud, schemas

router = APIRouter(prefix="/api/todos", tags=["todos"], dependencies=[Depends(get_current_user)])

@router.get("", response_model=schemas.TodoPage)
def list_all(page: int = Query(1, ge=1), db: Session = Depends(get_db)):
    result = crud.list_todos(db, page=page, per_page=get_settings().page_size)
    return {
        "data": result.items,
        "meta": {
            "current_page": result.current_page,
            "per_page": result.per_page,
            "total": result.total,
            "last_page": result.last_page,
        },
    }

@router.post("", response_model=schemas.TodoEnvelope, status_code=201)
def create(data: schemas.TodoCreate, db: Session = Depends(get_db)):
    return {"data": crud.create_todo(db, data)}

@router.get("/{todo_id}", response_model=schemas.TodoEnvelope)
def get_one(todo_id: int, db: Session = Depends(get_db)):
    return {"data": crud.get_todo(db, todo_id)}

@router.put("/{todo_id}", response_model=schemas.TodoEnvelope)
def update(todo_id: int, data: schemas.TodoUpdate, db: Session = Depends(get_db)):
    return {"data": crud.update_todo(db, todo_id, data)}

@router.delete("/{todo_id}", response_model=schemas.MessageOut)
def delete(todo_id: int, db: Session = Depends(get_db)):
    crud.delete_todo(db, todo_id)
    return {"message": "Todo deleted successfully."}
