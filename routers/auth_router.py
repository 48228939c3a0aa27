from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from core import auth
from core.config import settings
from core.database import get_db
from core.errors import ConflictError, NotFoundError, StorageError
from core.security import dump_session_cookie, request_fingerprint
from schemas.account_schema import AccountPublic
from schemas.auth_schema import CredentialsRequest, RegisterResponse

router = APIRouter(prefix="/api", tags=["Authentication"])


@router.post("/register", response_model=RegisterResponse, status_code=201)
def register(body: CredentialsRequest, db: Session = Depends(get_db)):
    """
    Create an account. 302 Found when the username is already taken.
    """
    try:
        rows = auth.register(db, body.username, body.password)
    except ConflictError:
        return JSONResponse(status_code=status.HTTP_302_FOUND, content={"detail": "User already exists"})
    except StorageError:
        raise HTTPException(status_code=500, detail="Storage failure")
    return RegisterResponse(rows=rows)


@router.post("/login", response_model=AccountPublic)
def login(body: CredentialsRequest, request: Request, response: Response, db: Session = Depends(get_db)):
    """
    Verify credentials, open a session bound to the caller's headers and set
    the session cookie.
    """
    try:
        account = auth.login(db, body.username, body.password)
        session = auth.establish_session(db, account, request_fingerprint(request.headers))
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Profile not found")
    except (ConflictError, StorageError):
        raise HTTPException(status_code=500, detail="Storage failure")

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=dump_session_cookie(session.session_id, session.account_id),
        max_age=settings.SESSION_COOKIE_MAX_AGE,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return account
