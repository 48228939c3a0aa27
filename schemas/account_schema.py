from datetime import date
from pydantic import BaseModel


class AccountPublic(BaseModel):
    id: int
    username: str
    created_at: date

    model_config = {"from_attributes": True}


class AccountInternal(AccountPublic):
    """Never leaves the server: carries the stored argon2 hash."""
    password_hash: str
