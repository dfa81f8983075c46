"""
Bearer token lifecycle: issue on login, resolve per request, revoke on logout.

Tokens are handed to the client as "<id>|<secret>". Only a sha256 digest of
the secret is stored.
"""
import hmac
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from . import crud
from .errors import InvalidCredentials, Unauthenticated
from .models import AccessToken, User
from .security import hash_token, verify_password

logger = logging.getLogger(__name__)

TOKEN_BYTES = 40


@dataclass
class IssuedToken:
    id: int
    user_id: int
    plain_text: str


def _split(token: Optional[str]) -> Tuple[int, str]:
    if not token or "|" not in token:
        raise Unauthenticated()
    token_id, secret = token.split("|", 1)
    if not (token_id.isascii() and token_id.isdigit()) or len(token_id) > 18 or not secret:
        raise Unauthenticated()
    return int(token_id), secret


def _find(db: Session, token: Optional[str]) -> AccessToken:
    token_id, secret = _split(token)
    record = db.get(AccessToken, token_id)
    if record is None or not hmac.compare_digest(record.token_hash, hash_token(secret)):
        raise Unauthenticated()
    return record


def issue_token(db: Session, email: str, password: str, name: str = "token") -> IssuedToken:
    user = crud.get_user_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        logger.warning(f"Failed login for {email}")
        raise InvalidCredentials()

    secret = secrets.token_urlsafe(TOKEN_BYTES)
    record = AccessToken(user_id=user.id, name=name, token_hash=hash_token(secret))
    db.add(record)
    db.commit()
    db.refresh(record)

    logger.info(f"Issued token {record.id} for user {user.id}")
    return IssuedToken(id=record.id, user_id=user.id, plain_text=f"{record.id}|{secret}")


def resolve(db: Session, token: Optional[str]) -> User:
    """
    Map a bearer token to its user.
    Raises Unauthenticated if the token is missing, malformed or revoked
    """
    record = _find(db, token)
    record.last_used_at = datetime.now(timezone.utc)
    db.commit()
    return record.user


def revoke_token(db: Session, token: Optional[str]) -> None:
    record = _find(db, token)
    token_id, user_id = record.id, record.user_id
    db.delete(record)
    db.commit()
    logger.info(f"Revoked token {token_id} for user {user_id}")
