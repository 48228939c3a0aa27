from sqlalchemy.orm import Session
from models.account import Account
from core.database import transaction
from core.errors import NotFoundError

# accounts.id is a signed 64-bit column on every supported backend
MAX_ACCOUNT_ID = 2**63 - 1


def find_account_by_username(db: Session, username: str) -> list[Account]:
    with transaction(db):
        return db.query(Account).filter(Account.username == username).order_by(Account.id).all()


def find_account_by_id(db: Session, account_id: int) -> Account:
    if not 1 <= account_id <= MAX_ACCOUNT_ID:
        raise NotFoundError("Account not found")
    with transaction(db):
        acc = db.query(Account).filter(Account.id == account_id).first()
    if not acc:
        raise NotFoundError("Account not found")
    return acc


def insert_account(db: Session, username: str, password_hash: str) -> Account:
    acc = Account(username=username, password_hash=password_hash)
    with transaction(db):
        db.add(acc)
        db.flush()
        db.refresh(acc)
    return acc
