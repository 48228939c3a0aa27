from sqlalchemy.orm import Session
from models.session import SessionRecord
from core.database import transaction
from core.errors import NotFoundError


def insert_session(db: Session, session_id: str, client_signature: str, account_id: int) -> SessionRecord:
    s = SessionRecord(
        session_id=session_id,
        client_signature=client_signature,
        account_id=account_id,
    )
    with transaction(db):
        db.add(s)
        db.flush()
        db.refresh(s)
    return s


def find_session_by_id(db: Session, session_id: str) -> SessionRecord:
    with transaction(db):
        s = db.query(SessionRecord).filter(SessionRecord.session_id == session_id).first()
    if not s:
        raise NotFoundError("Session not found")
    return s
