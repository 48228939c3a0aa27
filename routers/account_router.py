from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session
from core.auth import get_current_account
from core.database import get_db
from core.errors import NotFoundError, StorageError
from crud.account_crud import find_account_by_id
from schemas.account_schema import AccountPublic


router = APIRouter(prefix="/api", tags=["Accounts"])


@router.post("/id_lookup", response_model=AccountPublic)
def id_lookup(account_id: int = Body(...), db: Session = Depends(get_db)):
    try:
        return find_account_by_id(db, account_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Account not found")
    except StorageError:
        raise HTTPException(status_code=500, detail="Storage failure")


@router.post("/account", response_model=AccountPublic)
def read_me(current_account = Depends(get_current_account)):
    return current_account
