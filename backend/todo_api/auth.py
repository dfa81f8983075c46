from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from . import tokens
from .database import get_db
from .errors import Unauthenticated
from .models import User

security = HTTPBearer(auto_error=False)


@dataclass
class AuthContext:
    user: User
    token: str


def get_current_user(
        credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
        db: Session = Depends(get_db),
) -> AuthContext:
    """
    FastAPI dependency resolving the bearer token to its user.
    Usage: auth: AuthContext = Depends(get_current_user)
    """
    if credentials is None:
        raise Unauthenticated()

    token = credentials.credentials
    return AuthContext(user=tokens.resolve(db, token), token=token)
