from datetime import date, datetime
from pydantic import BaseModel, EmailStr
from typing import List, Optional

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class TokenOut(BaseModel):
    token: str

class LogoutOut(BaseModel):
    success: str = "logout"

class UserOut(BaseModel):
    id: int
    email: str
    created_at: Optional[datetime]

    class Config:
        from_attributes = True

class TodoCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = None

class TodoUpdate(TodoCreate):
    pass

class TodoOut(BaseModel):
    id: int
    title: Optional[str]
    description: Optional[str]
    due_date: Optional[date]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True

class TodoEnvelope(BaseModel):
    data: TodoOut

class PageMeta(BaseModel):
    current_page: int
    per_page: int
    total: int
    last_page: int

class TodoPage(BaseModel):
    data: List[TodoOut]
    meta: PageMeta

class MessageOut(BaseModel):
    message: str
