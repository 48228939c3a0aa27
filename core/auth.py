import hmac
import logging
from typing import Optional

from fastapi import Cookie, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from core.config import settings
from core.database import get_db
from core.errors import ConflictError, DeserializationError, NotFoundError, StorageError
from core.security import (
    hash_password,
    load_session_cookie,
    new_session_token,
    request_fingerprint,
    verify_password,
)
from crud.account_crud import find_account_by_id, find_account_by_username, insert_account
from crud.session_crud import find_session_by_id, insert_session
from models.account import Account
from models.session import SessionRecord
from schemas.account_schema import AccountInternal

logger = logging.getLogger(__name__)


def register(db: Session, username: str, password: str) -> int:
    """Create an account unless the username is taken.

    Returns the number of account rows written. Raises ConflictError when an
    account with the same username exists, either before the insert or when
    the unique constraint rejects a concurrent registration.
    """
    if find_account_by_username(db, username):
        logger.info("[auth] register rejected, username exists")
        raise ConflictError("User already exists")
    try:
        password_hash = hash_password(password)
    except (ValueError, TypeError) as exc:
        raise StorageError("Password hashing failed") from exc
    acc = insert_account(db, username, password_hash)
    logger.info("[auth] registered account id=%s", acc.id)
    return 1


def login(db: Session, username: str, password: str) -> AccountInternal:
    """Return the first account with ``username`` whose hash verifies ``password``."""
    for acc in find_account_by_username(db, username):
        if verify_password(password, acc.password_hash):
            logger.info("[auth] login ok for account id=%s", acc.id)
            return AccountInternal.model_validate(acc)
    logger.info("[auth] login failed")
    raise NotFoundError("Profile not found")


def establish_session(db: Session, account: Account | AccountInternal, fingerprint: str) -> SessionRecord:
    s = insert_session(db, new_session_token(), fingerprint, account.id)
    logger.info("[auth] issued session for account id=%s", account.id)
    return s


def validate_session(db: Session, cookie_value: str, fingerprint: str) -> SessionRecord:
    """Resolve a session cookie to its record.

    Raises DeserializationError for a malformed or tampered cookie and
    NotFoundError when the token is unknown, was issued to a different
    fingerprint, or belongs to another account.
    """
    payload = load_session_cookie(cookie_value)
    s = find_session_by_id(db, payload.session_id)
    if not hmac.compare_digest(s.client_signature or "", fingerprint):
        logger.warning("[auth] session fingerprint mismatch for account id=%s", s.account_id)
        raise NotFoundError("Session not found")
    if s.account_id != payload.account_id:
        logger.warning("[auth] session account mismatch")
        raise NotFoundError("Session not found")
    return s


def get_current_account(
    request: Request,
    session_cookie: Optional[str] = Cookie(None, alias=settings.SESSION_COOKIE_NAME),
    db: Session = Depends(get_db),
) -> Account:
    if not session_cookie:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing session cookie")
    try:
        s = validate_session(db, session_cookie, request_fingerprint(request.headers))
        return find_account_by_id(db, s.account_id)
    except DeserializationError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Malformed session cookie")
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Account not found")
    except StorageError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Storage failure")
