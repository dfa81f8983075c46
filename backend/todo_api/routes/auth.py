import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth import AuthContext, get_current_user
from ..database import get_db
from .. import schemas, tokens

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])

@router.post("/login", response_model=schemas.TokenOut, summary="Login")
def login(data: schemas.LoginRequest, db: Session = Depends(get_db)):
    issued = tokens.issue_token(db, data.email, data.password)
    logger.info(f"User {issued.user_id} logged in")
    return {"token": issued.plain_text}

@router.post("/logout", response_model=schemas.LogoutOut, summary="Logout")
def logout(db: Session = Depends(get_db), auth: AuthContext = Depends(get_current_user)):
    tokens.revoke_token(db, auth.token)
    logger.info(f"User {auth.user.id} logged out")
    return {"success": "logout"}

@router.get("/user", response_model=schemas.UserOut, summary="Current user")
def current_user(auth: AuthContext = Depends(get_current_user)):
    return auth.user
